from __future__ import annotations

import pickle
from collections.abc import Mapping
from typing import Any

from loguru import logger

from . import exceptions as ex
from . import logs as ls
from .bean_utils import is_bean, is_interface, new_instance_if_possible
from .config import settings
from .copier import BeanCopier, CopyOptions
from .dynamic_bean import DynamicBean
from .map_proxy import MapProxy
from .types_defs import ValueProvider
from .utils.type_utils import as_class, type_name


class BeanConverter[T]:
    """Turns mappings, value providers, beans and pickled bytes into ``bean_type``.

    A mutable mapping converted to an interface (an abstract class or a
    ``Protocol``) becomes a live ``MapProxy`` bean instead of a copy.
    """

    def __init__(self, bean_type: Any, copy_options: CopyOptions | None = None) -> None:
        bean_class = as_class(bean_type)
        if bean_class is None:
            raise TypeError(ex.NOT_AN_INTERFACE.format(type=bean_type))
        self.bean_type = bean_type
        self.bean_class: type[T] = bean_class
        self.copy_options = copy_options or CopyOptions(
            ignore_error=settings.CONVERTER_IGNORE_ERROR
        )

    @property
    def target_type(self) -> type[T]:
        return self.bean_class

    def convert(self, value: Any, default: T | None = None) -> T | None:
        if value is None:
            return default
        result = self._convert_internal(value)
        return default if result is None else result

    def _convert_internal(self, value: Any) -> T | None:
        if isinstance(value, DynamicBean):
            value = value.bean

        if isinstance(value, (Mapping, ValueProvider)) or is_bean(type(value)):
            if isinstance(value, Mapping) and is_interface(self.bean_class):
                return MapProxy.create(value).to_proxy_bean(self.bean_class)
            target = new_instance_if_possible(self.bean_class)
            return BeanCopier(value, target, self.copy_options).copy()

        if isinstance(value, (bytes, bytearray)):
            return self._deserialize(bytes(value))
        return None

    def _deserialize(self, payload: bytes) -> T | None:
        if not settings.ALLOW_PICKLE:
            logger.debug(ls.PICKLE_DISABLED.format(target=type_name(self.bean_type)))
            return None
        try:
            return pickle.loads(payload)
        except Exception as e:
            raise ex.BeanAccessError(
                ex.DESERIALIZE_FAILED.format(size=len(payload), error=e)
            ) from e
