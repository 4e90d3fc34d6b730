from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from . import constants as cs


class _Marker:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


PropIgnore = _Marker("PropIgnore")
Transient = _Marker("Transient")


@dataclass(frozen=True)
class PropAlias:
    name: str


def prop_ignore[F: Callable[..., object]](func: F) -> F:
    """Mark an accessor so the bean machinery neither reads nor writes through it.

    Put it below ``@property`` when marking a property getter.
    """
    setattr(func, cs.PROP_IGNORE_ATTR, True)
    return func


def transient[F: Callable[..., object]](func: F) -> F:
    setattr(func, cs.TRANSIENT_ATTR, True)
    return func


def has_marker(func: object, attr: str) -> bool:
    return bool(getattr(func, attr, False))
