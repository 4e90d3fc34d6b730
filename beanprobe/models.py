from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from . import constants as cs
from . import naming


@dataclass(frozen=True)
class MemberInfo:
    name: str
    annotation: Any
    owner: type
    ignore: bool = False
    transient: bool = False
    alias: str | None = None

    @property
    def prop_name(self) -> str:
        return self.alias or self.name.lstrip(cs.UNDERSCORE) or self.name

    @property
    def is_public(self) -> bool:
        return naming.is_public(self.name)


@dataclass(frozen=True)
class MethodInfo:
    name: str
    func: Callable[..., Any] = field(compare=False)
    param_count: int
    return_type: Any = None
    first_param_type: Any = None
    ignore: bool = False
    transient: bool = False

    def __call__(self, *args: Any) -> Any:
        return self.func(*args)


@dataclass(frozen=True)
class PropertyInfo:
    name: str
    getter: MethodInfo | None
    setter: MethodInfo | None
