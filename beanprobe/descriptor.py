from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from loguru import logger

from . import constants as cs
from . import convert as cv
from . import exceptions as ex
from . import introspection
from . import logs as ls
from . import naming
from .case_insensitive import CaseInsensitiveDict
from .models import MemberInfo, MethodInfo, PropertyInfo
from .utils.type_utils import as_class, is_any, is_boolean_type, is_instance_of, is_void

_GET = cs.AccessorPrefix.GET.value
_IS = cs.AccessorPrefix.IS.value
_SET = cs.AccessorPrefix.SET.value


@dataclass(frozen=True)
class PropertyDescriptor:
    name: str
    member: MemberInfo | None = None
    getter: MethodInfo | None = None
    setter: MethodInfo | None = None

    @property
    def raw_name(self) -> str | None:
        return None if self.member is None else self.member.name

    @property
    def value_type(self) -> Any:
        if self.member is not None and not is_any(self.member.annotation):
            return self.member.annotation
        if self.getter is not None and not is_any(self.getter.return_type):
            return self.getter.return_type
        if self.setter is not None and not is_any(self.setter.first_param_type):
            return self.setter.first_param_type
        return Any

    @property
    def value_class(self) -> type | None:
        return as_class(self.value_type)

    @property
    def ignore_get(self) -> bool:
        return bool(
            (self.member is not None and self.member.ignore)
            or (self.getter is not None and self.getter.ignore)
        )

    @property
    def ignore_set(self) -> bool:
        return bool(
            (self.member is not None and self.member.ignore)
            or (self.setter is not None and self.setter.ignore)
        )

    @property
    def is_transient(self) -> bool:
        return bool(
            (self.member is not None and self.member.transient)
            or (self.getter is not None and self.getter.transient)
        )

    @property
    def has_public_member(self) -> bool:
        return self.member is not None and self.member.is_public

    def is_readable(self, check_ignore: bool = True) -> bool:
        if check_ignore and self.ignore_get:
            return False
        return self.getter is not None or self.has_public_member

    def is_writable(self, check_ignore: bool = True) -> bool:
        if check_ignore and self.ignore_set:
            return False
        return self.setter is not None or self.has_public_member

    def get_value(self, bean: object) -> Any:
        try:
            if self.getter is not None:
                return self.getter(bean)
            if self.has_public_member:
                return getattr(bean, self.member.name)
        except Exception as e:
            raise ex.BeanAccessError(ex.GET_VALUE_FAILED.format(name=self.name)) from e
        return None

    def get_value_with_convert(
        self, bean: object, value_type: Any = None, ignore_error: bool = False
    ) -> Any:
        try:
            result = self.get_value(bean)
        except ex.BeanAccessError as e:
            if not ignore_error:
                raise
            logger.debug(
                ls.READ_IGNORED.format(
                    name=self.name, type=type(bean).__qualname__, error=e.__cause__
                )
            )
            return None

        if result is not None and value_type is not None:
            converted = cv.convert(value_type, result, None, True)
            if converted is not None:
                return converted
            logger.debug(ls.CONVERT_FALLBACK_RAW.format(name=self.name, target=value_type))
        return result

    def set_value(self, bean: object, value: Any) -> PropertyDescriptor:
        try:
            if self.setter is not None:
                self.setter(bean, value)
            elif self.has_public_member:
                setattr(bean, self.member.name, value)
        except Exception as e:
            raise ex.BeanAccessError(ex.SET_VALUE_FAILED.format(name=self.name)) from e
        return self

    def set_value_with_convert(
        self,
        bean: object,
        value: Any,
        ignore_null: bool = False,
        ignore_error: bool = False,
    ) -> PropertyDescriptor:
        if ignore_null and value is None:
            return self

        if value is not None and not is_instance_of(value, self.value_type):
            converted = cv.convert(self.value_type, value, None, ignore_error)
            if converted is None:
                logger.debug(
                    ls.WRITE_SKIPPED.format(name=self.name, target=self.value_type)
                )
                return self
            value = converted

        if value is None and ignore_null:
            return self

        try:
            self.set_value(bean, value)
        except ex.BeanAccessError as e:
            if not ignore_error:
                raise
            logger.debug(
                ls.WRITE_IGNORED.format(
                    name=self.name, type=type(bean).__qualname__, error=e.__cause__
                )
            )
        return self


class TypeDescriptor:
    """Discovered properties of one class, in discovery order.

    Instances are immutable once built and are shared through the descriptor
    cache, so callers must not expect a private copy.
    """

    def __init__(self, bean_class: type, props: Mapping[str, PropertyDescriptor]) -> None:
        if bean_class is None:
            raise ValueError(ex.NONE_TYPE)
        self._bean_class = bean_class
        self._props: Mapping[str, PropertyDescriptor] = MappingProxyType(dict(props))

    @property
    def bean_class(self) -> type:
        return self._bean_class

    @property
    def name(self) -> str:
        return f"{self._bean_class.__module__}{cs.SEPARATOR_DOT}{self._bean_class.__qualname__}"

    @property
    def simple_name(self) -> str:
        return self._bean_class.__name__

    def props(self) -> list[PropertyDescriptor]:
        return list(self._props.values())

    def prop(self, name: str) -> PropertyDescriptor | None:
        return self._props.get(name)

    def prop_map(self, ignore_case: bool = False) -> Mapping[str, PropertyDescriptor]:
        return CaseInsensitiveDict(self._props) if ignore_case else self._props

    def member(self, name: str) -> MemberInfo | None:
        desc = self._props.get(name)
        return None if desc is None else desc.member

    def getter(self, name: str) -> MethodInfo | None:
        desc = self._props.get(name)
        return None if desc is None else desc.getter

    def setter(self, name: str) -> MethodInfo | None:
        desc = self._props.get(name)
        return None if desc is None else desc.setter

    def __len__(self) -> int:
        return len(self._props)

    def __contains__(self, name: object) -> bool:
        return name in self._props

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self._bean_class is other._bean_class and dict(self._props) == dict(
            other._props
        )

    def __hash__(self) -> int:
        return hash(self._bean_class)

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.name}, props={list(self._props)})"


def is_match_getter(method_name: str, field_name: str, is_boolean: bool) -> bool:
    method_key = naming.canonical(method_name)
    field_key = naming.canonical(field_name)

    if not method_key.startswith((_GET, _IS)):
        return False
    if method_key == cs.GET_CLASS_CANONICAL:
        return False

    if is_boolean:
        if field_key.startswith(_IS):
            if method_key in (field_key, _GET + field_key, _IS + field_key):
                return True
        elif method_key == _IS + field_key:
            return True

    return method_key == _GET + field_key


def is_match_setter(method_name: str, field_name: str, is_boolean: bool) -> bool:
    method_key = naming.canonical(method_name)
    field_key = naming.canonical(field_name)

    if not method_key.startswith(_SET):
        return False

    if is_boolean and field_key.startswith(_IS):
        if method_key in (_SET + field_key[len(_IS) :], _SET + field_key):
            return True

    return method_key == _SET + field_key


def _create_prop(member: MemberInfo, accessors: list[MethodInfo]) -> PropertyDescriptor:
    is_boolean = is_boolean_type(member.annotation)
    getter: MethodInfo | None = None
    setter: MethodInfo | None = None

    for method in accessors:
        if method.param_count == 0:
            if (
                getter is None
                and not is_void(method.return_type)
                and is_match_getter(method.name, member.name, is_boolean)
            ):
                getter = method
        elif setter is None and is_match_setter(method.name, member.name, is_boolean):
            setter = method
        if getter is not None and setter is not None:
            break

    return PropertyDescriptor(
        name=member.prop_name, member=member, getter=getter, setter=setter
    )


def _from_property(
    name: str, prop: PropertyInfo, member: MemberInfo | None = None
) -> PropertyDescriptor:
    return PropertyDescriptor(
        name=name, member=member, getter=prop.getter, setter=prop.setter
    )


def _accessor_key(method: MethodInfo) -> str | None:
    if not naming.is_public(method.name):
        return None
    if naming.canonical(method.name) == cs.GET_CLASS_CANONICAL:
        return None
    if method.param_count == 1:
        key = naming.strip_accessor_prefix(method.name, _SET)
    elif is_void(method.return_type):
        return None
    else:
        key = naming.strip_accessor_prefix(method.name, _GET)
        if key is None and is_boolean_type(method.return_type):
            key = naming.strip_accessor_prefix(method.name, _IS)
    return None if key is None else naming.to_underline_case(key)


def _accessor_only_props(
    accessors: list[MethodInfo], props: dict[str, PropertyDescriptor]
) -> dict[str, PropertyDescriptor]:
    """Pair getters and setters that no declared member claimed.

    Covers classes that only assign attributes in ``__init__``. A pair needs a
    getter; a lone setter is not a property.
    """
    claimed = {
        method.name
        for prop in props.values()
        for method in (prop.getter, prop.setter)
        if method is not None
    }
    getters: dict[str, MethodInfo] = {}
    setters: dict[str, MethodInfo] = {}
    for method in accessors:
        if method.name in claimed:
            continue
        if (key := _accessor_key(method)) is None or key in props:
            continue
        (setters if method.param_count == 1 else getters).setdefault(key, method)
    return {
        key: PropertyDescriptor(name=key, getter=getter, setter=setters.get(key))
        for key, getter in getters.items()
    }


def discover(cls: type) -> TypeDescriptor:
    if cls is None:
        raise ValueError(ex.NONE_TYPE)
    logger.debug(ls.DISCOVERING_TYPE.format(type=cls.__qualname__))

    accessors = introspection.methods(cls)
    python_props = {p.name: p for p in introspection.properties(cls)}
    consumed: set[str] = set()
    props: dict[str, PropertyDescriptor] = {}

    for member in introspection.members(cls):
        prop = python_props.get(member.name) or python_props.get(member.prop_name)
        if prop is not None:
            consumed.add(prop.name)
            props[member.prop_name] = _from_property(member.prop_name, prop, member)
        else:
            props[member.prop_name] = _create_prop(member, accessors)

    for name, prop in python_props.items():
        if name not in consumed and name not in props:
            props[name] = _from_property(name, prop)

    props.update(_accessor_only_props(accessors, props))

    logger.debug(ls.DISCOVERED_TYPE.format(count=len(props), type=cls.__qualname__))
    return TypeDescriptor(cls, props)
