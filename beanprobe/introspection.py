from __future__ import annotations

import inspect
from dataclasses import Field
from typing import Any, get_type_hints

from loguru import logger

from . import constants as cs
from . import logs as ls
from . import naming
from .markers import PropAlias, PropIgnore, Transient, has_marker
from .models import MemberInfo, MethodInfo, PropertyInfo
from .utils.type_utils import is_classvar, is_init_var, unwrap_annotated

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_SLOT_INTERNALS = frozenset({"__dict__", "__weakref__"})


def _class_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except Exception as e:
        logger.debug(ls.TYPE_HINTS_FALLBACK.format(type=cls.__qualname__, error=e))
    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        try:
            hints.update(inspect.get_annotations(klass, eval_str=True))
        except Exception:
            hints.update(inspect.get_annotations(klass))
    return hints


def function_hints(func: Any) -> dict[str, Any]:
    try:
        return get_type_hints(func)
    except Exception:
        return {}


def _own_slots(klass: type) -> list[str]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [name for name in slots if name not in _SLOT_INTERNALS]


def _member_info(name: str, annotation: Any, owner: type, cls: type) -> MemberInfo:
    base, metadata = unwrap_annotated(annotation)
    ignore = PropIgnore in metadata
    transient = Transient in metadata
    alias = next((m.name for m in metadata if isinstance(m, PropAlias)), None)

    dc_field = getattr(cls, "__dataclass_fields__", {}).get(name)
    if isinstance(dc_field, Field):
        meta = dc_field.metadata
        ignore = ignore or bool(meta.get(cs.META_PROP_IGNORE, False))
        transient = transient or bool(meta.get(cs.META_TRANSIENT, False))
        alias = alias or meta.get(cs.META_ALIAS)

    return MemberInfo(
        name=name,
        annotation=base,
        owner=owner,
        ignore=ignore,
        transient=transient,
        alias=alias,
    )


def members(cls: type) -> list[MemberInfo]:
    """Declared non-static members of ``cls``, base classes first.

    A redeclaration in a subclass replaces the inherited entry but keeps its
    position, mirroring how dataclasses order inherited fields.
    """
    hints = _class_hints(cls)
    found: dict[str, MemberInfo] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        own = inspect.get_annotations(klass)
        for name in list(own) + _own_slots(klass):
            if name in own:
                annotation = hints.get(name, own[name])
            else:
                annotation = hints.get(name)
            if is_classvar(annotation) or is_init_var(annotation):
                found.pop(name, None)
                continue
            found[name] = _member_info(name, annotation, klass, cls)
    return list(found.values())


def _method_info(name: str, func: Any, owner: type) -> MethodInfo | None:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        logger.debug(
            ls.SIGNATURE_UNAVAILABLE.format(name=name, type=owner.__qualname__, error=e)
        )
        return None

    params = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    if not params:
        return None
    params = params[1:]
    if len(params) > 1:
        return None

    hints = function_hints(func)
    return_type = hints.get("return", Any)
    first_param_type = hints.get(params[0].name) if params else None

    return MethodInfo(
        name=name,
        func=func,
        param_count=len(params),
        return_type=return_type,
        first_param_type=first_param_type,
        ignore=has_marker(func, cs.PROP_IGNORE_ATTR),
        transient=has_marker(func, cs.TRANSIENT_ATTR),
    )


def methods(cls: type) -> list[MethodInfo]:
    """Accessor-shaped instance methods: zero or one parameter besides ``self``.

    Classes are visited in MRO order and, within a class, in declaration order.
    Only the most derived attribute of a given name is considered.
    """
    seen: set[str] = set()
    result: list[MethodInfo] = []
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if naming.is_dunder(name) or not inspect.isfunction(attr):
                continue
            if (info := _method_info(name, attr, cls)) is not None:
                result.append(info)
    return result


def properties(cls: type) -> list[PropertyInfo]:
    seen: set[str] = set()
    found: list[tuple[int, PropertyInfo]] = []
    for depth, klass in enumerate(cls.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if not isinstance(attr, property) or naming.is_dunder(name):
                continue
            getter = _method_info(name, attr.fget, cls) if attr.fget else None
            setter = _method_info(name, attr.fset, cls) if attr.fset else None
            found.append((depth, PropertyInfo(name=name, getter=getter, setter=setter)))
    found.sort(key=lambda item: -item[0])
    return [info for _, info in found]
