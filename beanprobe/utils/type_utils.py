from __future__ import annotations

import types
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

_UNION_ORIGINS = (Union, types.UnionType)


def unwrap_annotated(tp: Any) -> tuple[Any, tuple[Any, ...]]:
    if get_origin(tp) is Annotated:
        return tp.__origin__, tuple(tp.__metadata__)
    return tp, ()


def is_classvar(tp: Any) -> bool:
    if tp is ClassVar or get_origin(tp) is ClassVar:
        return True
    return isinstance(tp, str) and tp.startswith(ClassVar.__name__)


def is_init_var(tp: Any) -> bool:
    return type(tp).__name__ == "InitVar"


def strip_optional(tp: Any) -> Any:
    if get_origin(tp) in _UNION_ORIGINS:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def is_boolean_type(tp: Any) -> bool:
    return strip_optional(tp) is bool


def is_void(tp: Any) -> bool:
    return tp is None or tp is type(None)


def is_any(tp: Any) -> bool:
    return tp is None or tp is Any or isinstance(tp, str)


def as_class(tp: Any) -> type | None:
    tp = strip_optional(tp)
    if isinstance(tp, type):
        return tp
    origin = get_origin(tp)
    if isinstance(origin, type):
        return origin
    return None


def is_instance_of(value: Any, tp: Any) -> bool:
    if is_any(tp):
        return True
    if get_origin(tp) in _UNION_ORIGINS:
        return any(is_instance_of(value, arg) for arg in get_args(tp))
    if (cls := as_class(tp)) is None:
        return False
    try:
        return isinstance(value, cls)
    except TypeError:
        return False


def type_name(tp: Any) -> str:
    if tp is None:
        return "Any"
    if isinstance(tp, type):
        return tp.__qualname__
    return str(tp).replace("typing.", "")
