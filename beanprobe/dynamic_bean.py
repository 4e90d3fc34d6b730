from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any

from . import exceptions as ex
from .cache import describe
from .descriptor import TypeDescriptor


class DynamicBean:
    """Uniform get/set/invoke access to either a mapping or a plain object.

    Mappings are read and written by literal key. Objects go through the
    cached descriptor of their class, so only discovered properties are
    reachable by name.
    """

    __slots__ = ("_bean", "_bean_class")

    def __init__(self, bean: object) -> None:
        if bean is None:
            raise ValueError(ex.NONE_BEAN)
        if isinstance(bean, DynamicBean):
            bean = bean.bean
        self._bean = bean
        self._bean_class = type(bean)

    @classmethod
    def create(cls, bean: object | type, *args: Any, **kwargs: Any) -> DynamicBean:
        if isinstance(bean, type):
            try:
                bean = bean(*args, **kwargs)
            except Exception as e:
                raise ex.BeanAccessError(
                    ex.INSTANTIATE_FAILED.format(type=bean.__qualname__, error=e)
                ) from e
        return cls(bean)

    @property
    def bean(self) -> Any:
        return self._bean

    @property
    def bean_class(self) -> type:
        return self._bean_class

    @property
    def is_mapping(self) -> bool:
        return isinstance(self._bean, Mapping)

    def _descriptor(self) -> TypeDescriptor:
        return describe(self._bean_class)

    def get(self, name: str) -> Any:
        if self.is_mapping:
            return self._bean.get(name)
        if (prop := self._descriptor().prop(name)) is None:
            raise ex.PropertyNotFoundError(
                ex.NO_GETTER.format(name=name, type=self._bean_class.__qualname__)
            )
        return prop.get_value(self._bean)

    def safe_get(self, name: str) -> Any:
        try:
            return self.get(name)
        except Exception:
            return None

    def set(self, name: str, value: Any) -> None:
        if isinstance(self._bean, MutableMapping):
            self._bean[name] = value
            return
        if (prop := self._descriptor().prop(name)) is None:
            raise ex.PropertyNotFoundError(
                ex.NO_SETTER.format(name=name, type=self._bean_class.__qualname__)
            )
        prop.set_value(self._bean, value)

    def contains_prop(self, name: str) -> bool:
        if self.is_mapping:
            return name in self._bean
        return self._descriptor().prop(name) is not None

    def invoke(self, method_name: str, *args: Any, **kwargs: Any) -> Any:
        type_name = self._bean_class.__qualname__
        try:
            method = getattr(self._bean, method_name)
        except AttributeError as e:
            raise ex.BeanAccessError(
                ex.INVOKE_NOT_FOUND.format(type=type_name, name=method_name)
            ) from e
        if not callable(method):
            raise ex.BeanAccessError(
                ex.INVOKE_NOT_CALLABLE.format(type=type_name, name=method_name)
            )
        try:
            return method(*args, **kwargs)
        except Exception as e:
            raise ex.BeanAccessError(
                ex.INVOKE_FAILED.format(type=type_name, name=method_name, error=e)
            ) from e

    def clone(self) -> DynamicBean:
        return DynamicBean(copy.copy(self._bean))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DynamicBean):
            return NotImplemented
        return self._bean == other._bean

    def __hash__(self) -> int:
        try:
            return hash(self._bean)
        except TypeError:
            return hash(self._bean_class)

    def __str__(self) -> str:
        return str(self._bean)

    def __repr__(self) -> str:
        return f"DynamicBean({self._bean!r})"
