from __future__ import annotations

import threading
from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.errors import PydanticUserError

from . import exceptions as ex
from . import logs as ls
from .types_defs import ConverterFunc
from .utils.type_utils import as_class, is_any, is_instance_of, type_name

_LAX_CONFIG = ConfigDict(coerce_numbers_to_str=True, arbitrary_types_allowed=True)


def _build_adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(target, config=_LAX_CONFIG)
    except PydanticUserError:
        return TypeAdapter(target)


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return _build_adapter(target)


def _adapter(target: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(target)
    except TypeError:
        return _build_adapter(target)


def _is_bean_target(cls: type) -> bool:
    from .bean_utils import is_bean, is_interface

    if issubclass(cls, BaseModel):
        return False
    return is_interface(cls) or is_bean(cls)


class ConverterRegistry:
    """Converts raw values to target types.

    Custom converters registered for an exact target type win. Bean-shaped
    targets go through ``BeanConverter``; everything else is validated by a
    pydantic ``TypeAdapter`` in lax mode, so ``"30"`` becomes ``30`` for an
    ``int`` target.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._custom: dict[Any, ConverterFunc] = {}

    def register(self, target_type: Any, converter: ConverterFunc) -> ConverterRegistry:
        if not callable(converter):
            raise TypeError(ex.CONVERTER_NOT_CALLABLE.format(target=target_type))
        with self._lock:
            self._custom[target_type] = converter
        logger.debug(ls.CONVERTER_REGISTERED.format(target=type_name(target_type)))
        return self

    def unregister(self, target_type: Any) -> None:
        with self._lock:
            self._custom.pop(target_type, None)

    def get_custom(self, target_type: Any) -> ConverterFunc | None:
        try:
            return self._custom.get(target_type)
        except TypeError:
            return None

    def convert(
        self,
        target_type: Any,
        value: Any,
        default: Any = None,
        ignore_error: bool = False,
    ) -> Any:
        if value is None:
            return default
        if is_any(target_type):
            return value

        try:
            result = self._convert(target_type, value)
        except Exception as e:
            if ignore_error:
                logger.debug(
                    ls.CONVERT_IGNORED.format(
                        value=value, target=type_name(target_type), error=e
                    )
                )
                return default
            if isinstance(e, ex.ConversionError):
                raise
            raise ex.ConversionError(
                ex.CONVERT_FAILED.format(
                    value=value,
                    source=type(value).__qualname__,
                    target=type_name(target_type),
                    error=e,
                )
            ) from e
        return default if result is None else result

    def _convert(self, target_type: Any, value: Any) -> Any:
        if (custom := self.get_custom(target_type)) is not None:
            return custom(value)

        cls = as_class(target_type)
        if cls is not None and cls is target_type and is_instance_of(value, cls):
            return value
        if cls is not None and _is_bean_target(cls):
            from .bean_converter import BeanConverter

            return BeanConverter(target_type).convert(value)
        return _adapter(target_type).validate_python(value)


registry = ConverterRegistry()


def convert(
    target_type: Any, value: Any, default: Any = None, ignore_error: bool = False
) -> Any:
    return registry.convert(target_type, value, default, ignore_error)


def register_converter(target_type: Any, converter: ConverterFunc) -> ConverterRegistry:
    return registry.register(target_type, converter)
