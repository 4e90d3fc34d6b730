from __future__ import annotations

import inspect
from collections.abc import Mapping
from enum import Enum
from typing import Any

from loguru import logger

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from . import naming
from .cache import describe
from .config import settings
from .copier import BeanCopier, CopyOptions
from .dynamic_bean import DynamicBean
from .introspection import function_hints
from .utils.type_utils import as_class

__all__ = [
    "bean_to_map",
    "copy_properties",
    "describe",
    "fill_bean_with_map",
    "get_property",
    "is_bean",
    "is_interface",
    "new_instance_if_possible",
    "set_property",
    "to_bean",
]


def is_interface(cls: Any) -> bool:
    if not isinstance(cls, type):
        return False
    return inspect.isabstract(cls) or bool(getattr(cls, "_is_protocol", False))


def is_bean(cls: Any) -> bool:
    """True for classes with a setter method or a public annotated member."""
    if not isinstance(cls, type) or issubclass(cls, cs.NON_BEAN_TYPES):
        return False
    if issubclass(cls, (Enum, Mapping)):
        return False
    for prop in describe(cls).props():
        if prop.setter is not None:
            return True
        if prop.has_public_member and prop.member.annotation is not None:
            return True
    return False


def get_property(bean: object, name: str) -> Any:
    return DynamicBean(bean).get(name)


def set_property(bean: object, name: str, value: Any) -> None:
    DynamicBean(bean).set(name, value)


def _placeholder(annotation: Any) -> Any:
    cls = as_class(annotation)
    return cs.PRIMITIVE_DEFAULTS.get(cls) if cls is not None else None


def new_instance_if_possible[T](cls: type[T]) -> T:
    """Create ``cls`` with the fewest assumptions possible.

    Tries the no-argument constructor, then the constructor with placeholder
    values for every required parameter, and finally an instance that skips
    ``__init__`` altogether.
    """
    try:
        return cls()
    except Exception as e:
        logger.debug(ls.INSTANCE_FALLBACK.format(type=cls.__qualname__, error=e))

    try:
        signature = inspect.signature(cls)
        hints = function_hints(cls.__init__)
        kwargs = {
            name: _placeholder(hints.get(name, param.annotation))
            for name, param in signature.parameters.items()
            if param.default is inspect.Parameter.empty
            and param.kind
            in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
        }
        return cls(**kwargs)
    except Exception as e:
        logger.debug(ls.INSTANCE_BARE.format(type=cls.__qualname__, error=e))

    try:
        return cls.__new__(cls)
    except Exception as e:
        raise ex.BeanAccessError(
            ex.INSTANTIATE_FAILED.format(type=cls.__qualname__, error=e)
        ) from e


def bean_to_map(
    bean: object,
    underline_case: bool = False,
    ignore_null: bool = False,
) -> dict[str, Any]:
    result: dict[str, Any] = BeanCopier(
        bean, {}, CopyOptions(ignore_null=ignore_null)
    ).copy()
    if underline_case:
        return {naming.to_underline_case(key): value for key, value in result.items()}
    return result


def to_bean[T](source: Any, cls: type[T], options: CopyOptions | None = None) -> T:
    options = options or CopyOptions(ignore_case=settings.DEFAULT_IGNORE_CASE)
    return BeanCopier(source, new_instance_if_possible(cls), options).copy()


def fill_bean_with_map[T](
    source: Mapping[str, Any],
    bean: T,
    ignore_case: bool | None = None,
    ignore_error: bool = False,
) -> T:
    options = CopyOptions(
        ignore_case=settings.resolve_ignore_case(ignore_case),
        ignore_error=ignore_error,
    )
    return BeanCopier(source, bean, options).copy()


def copy_properties[T](source: Any, target: T, options: CopyOptions | None = None) -> T:
    return BeanCopier(source, target, options).copy()
