from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from loguru import logger

from . import exceptions as ex
from . import logs as ls
from .cache import describe
from .providers import BeanValueProvider, MapValueProvider
from .types_defs import ValueProvider


@dataclass
class CopyOptions:
    ignore_null: bool = False
    ignore_error: bool = False
    ignore_case: bool = False
    ignore_missing: bool = True
    editable: type | None = None

    @classmethod
    def create(cls, **kwargs: Any) -> CopyOptions:
        return cls(**kwargs)


class BeanCopier[T]:
    """Copies properties from a bean, mapping or value provider into a target.

    The target is either a bean, filled property by property through its
    descriptor, or a mutable mapping, filled with the source's readable
    properties.
    """

    def __init__(
        self, source: Any, target: T, options: CopyOptions | None = None
    ) -> None:
        if source is None:
            raise ValueError(ex.NONE_BEAN)
        self.source = source
        self.target = target
        self.options = options or CopyOptions()

    @classmethod
    def create(
        cls, source: Any, target: T, options: CopyOptions | None = None
    ) -> BeanCopier[T]:
        return cls(source, target, options)

    def copy(self) -> T:
        if isinstance(self.target, MutableMapping):
            if isinstance(self.source, Mapping):
                self._map_to_map(self.source, self.target)
            elif not isinstance(self.source, ValueProvider):
                self._bean_to_map(self.source, self.target)
            return self.target

        self._provider_to_bean(self._provider(), self.target)
        return self.target

    def _provider(self) -> ValueProvider:
        if isinstance(self.source, ValueProvider):
            return self.source
        if isinstance(self.source, Mapping):
            return MapValueProvider(
                self.source, self.options.ignore_case, self.options.ignore_error
            )
        return BeanValueProvider(
            self.source, self.options.ignore_case, self.options.ignore_error
        )

    def _map_to_map(self, source: Mapping[Any, Any], target: MutableMapping[Any, Any]) -> None:
        for key, value in source.items():
            if value is None and self.options.ignore_null:
                continue
            target[key] = value

    def _bean_to_map(self, source: object, target: MutableMapping[Any, Any]) -> None:
        bean_class = self.options.editable or type(source)
        for prop in describe(bean_class).props():
            if not prop.is_readable():
                continue
            value = prop.get_value_with_convert(source, None, self.options.ignore_error)
            if value is None and self.options.ignore_null:
                continue
            target[prop.name] = value

    def _provider_to_bean(self, provider: ValueProvider, target: object) -> None:
        bean_class = self.options.editable or type(target)
        for prop in describe(bean_class).props():
            if not prop.is_writable():
                continue
            if not provider.contains_key(prop.name):
                self._on_missing(prop.name)
                continue
            value = provider.value(prop.name, prop.value_type)
            if value is None:
                if self.options.ignore_null:
                    continue
                if provider.value(prop.name) is not None:
                    logger.debug(
                        ls.WRITE_SKIPPED.format(name=prop.name, target=prop.value_type)
                    )
                    continue
            prop.set_value_with_convert(
                target, value, self.options.ignore_null, self.options.ignore_error
            )

    def _on_missing(self, name: str) -> None:
        if self.options.ignore_missing:
            logger.debug(ls.COPY_MISSING.format(name=name))
            return
        error = ex.PropertyNotFoundError(ex.MISSING_SOURCE_PROP.format(name=name))
        if not self.options.ignore_error:
            raise error
        logger.debug(ls.COPY_MISSING_IGNORED.format(name=name, error=error))
