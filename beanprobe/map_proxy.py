from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator, MutableMapping, Sequence
from functools import lru_cache
from typing import Any, Generic, Protocol, get_type_hints

from loguru import logger

from . import constants as cs
from . import convert as cv
from . import exceptions as ex
from . import logs as ls
from . import naming
from .utils.type_utils import is_boolean_type, is_void, type_name

_SKIPPED_BASES = (object, Protocol, Generic)


class MapProxy(MutableMapping[Any, Any]):
    """Live mapping view that can also impersonate an interface.

    The wrapped mapping is shared, not copied: writes through the proxy or
    through a proxy bean are visible to every other holder of the mapping.
    """

    def __init__(self, source: MutableMapping[Any, Any]) -> None:
        self._map = source

    @classmethod
    def create(cls, source: MutableMapping[Any, Any]) -> MapProxy:
        return source if isinstance(source, MapProxy) else cls(source)

    @property
    def source(self) -> MutableMapping[Any, Any]:
        return self._map

    def __getitem__(self, key: Any) -> Any:
        return self._map[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._map[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._map[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def clear(self) -> None:
        self._map.clear()

    def get_object(self, key: Any, default: Any = None) -> Any:
        value = self._map.get(key)
        return default if value is None else value

    def identity_hash(self) -> int:
        return object.__hash__(self)

    def is_same(self, other: object) -> bool:
        return other is self or getattr(other, cs.PROXY_HANDLER_ATTR, None) is self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map!r})"

    def invoke(
        self, method_name: str, args: Sequence[Any] = (), return_type: Any = Any
    ) -> Any:
        if not args:
            if not is_void(return_type):
                key = naming.remove_prefix_and_lower_first(
                    method_name, cs.AccessorPrefix.GET
                )
                if key is None and is_boolean_type(return_type):
                    key = naming.remove_prefix_and_lower_first(
                        method_name, cs.AccessorPrefix.IS
                    )
                if key is None and method_name in cs.HASH_METHOD_NAMES:
                    return self.identity_hash()
                if key is None and method_name in cs.STR_METHOD_NAMES:
                    return repr(self)
                if key is not None:
                    return self.read(key, return_type)
        elif len(args) == 1:
            key = naming.remove_prefix_and_lower_first(method_name, cs.AccessorPrefix.SET)
            if key is not None:
                self._map[key] = args[0]
                return None
            if method_name in cs.EQUALS_METHOD_NAMES:
                return self.is_same(args[0])

        raise ex.UnsupportedProxyMethodError(
            ex.UNSUPPORTED_PROXY_METHOD.format(
                name=method_name,
                params=", ".join(type(arg).__qualname__ for arg in args),
                returns=type_name(return_type),
            )
        )

    def read(self, key: str, return_type: Any = Any) -> Any:
        if key not in self._map:
            fallback = naming.to_underline_case(key)
            logger.debug(ls.PROXY_UNDERLINE_FALLBACK.format(key=key, fallback=fallback))
            key = fallback
        return cv.convert(return_type, self._map.get(key))

    def to_proxy_bean[T](self, interface: type[T]) -> T:
        if not isinstance(interface, type):
            raise TypeError(ex.NOT_AN_INTERFACE.format(type=interface))
        proxy_class = _proxy_class(interface)
        bean = proxy_class.__new__(proxy_class)
        object.__setattr__(bean, cs.PROXY_HANDLER_ATTR, self)
        return bean


def _handler(bean: object) -> MapProxy:
    return object.__getattribute__(bean, cs.PROXY_HANDLER_ATTR)


def _return_type(func: Callable[..., Any] | None) -> Any:
    if func is None:
        return Any
    try:
        return get_type_hints(func).get("return", Any)
    except Exception:
        return Any


def _dispatching_method(name: str, return_type: Any) -> Callable[..., Any]:
    def method(self: object, *args: Any) -> Any:
        return _handler(self).invoke(name, args, return_type)

    method.__name__ = name
    return method


def _dispatching_property(name: str, prop: property) -> property:
    return_type = _return_type(prop.fget)

    def fget(self: object) -> Any:
        return _handler(self).read(name, return_type)

    def fset(self: object, value: Any) -> None:
        _handler(self)[name] = value

    return property(fget, fset if prop.fset is not None else None, doc=prop.__doc__)


def _interface_members(
    interface: type,
) -> tuple[dict[str, Callable[..., Any]], dict[str, property]]:
    methods: dict[str, Callable[..., Any]] = {}
    props: dict[str, property] = {}
    for klass in reversed(interface.__mro__):
        if klass in _SKIPPED_BASES or klass.__module__ in ("abc", "typing"):
            continue
        for name, attr in vars(klass).items():
            if not naming.is_public(name):
                continue
            if isinstance(attr, property):
                props[name] = attr
                methods.pop(name, None)
            elif inspect.isfunction(attr):
                methods[name] = attr
                props.pop(name, None)
    return methods, props


@lru_cache(maxsize=128)
def _proxy_class(interface: type) -> type:
    methods, props = _interface_members(interface)
    namespace: dict[str, Any] = {"__slots__": (cs.PROXY_HANDLER_ATTR,)}

    for name, func in methods.items():
        namespace[name] = _dispatching_method(name, _return_type(func))
    for name, prop in props.items():
        namespace[name] = _dispatching_property(name, prop)

    namespace["__eq__"] = _dispatching_method("__eq__", bool)
    namespace["__hash__"] = _dispatching_method("__hash__", int)
    namespace["__str__"] = _dispatching_method("__str__", str)
    namespace["__repr__"] = _dispatching_method("__repr__", str)

    name = f"{interface.__name__}{cs.PROXY_CLASS_SUFFIX}"
    proxy_class = type(interface)(name, (interface,), namespace)
    proxy_class.__abstractmethods__ = frozenset()
    logger.debug(
        ls.PROXY_CLASS_CREATED.format(name=name, interface=interface.__qualname__)
    )
    return proxy_class
