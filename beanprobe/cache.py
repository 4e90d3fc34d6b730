from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from loguru import logger

from . import exceptions as ex
from . import logs as ls
from .config import settings
from .descriptor import TypeDescriptor, discover

if TYPE_CHECKING:
    from .types_defs import DescriptorFactory


class DescriptorCache:
    """Process-wide store of discovered type descriptors.

    Entries are created on first lookup and are never evicted: the key space is
    the set of classes a process actually introspects. A descriptor is only
    published once its factory has returned, and concurrent first lookups of
    the same class share a single computation.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._descriptors: dict[type, TypeDescriptor] = {}

    def get(self, bean_class: type) -> TypeDescriptor | None:
        return self._descriptors.get(bean_class)

    def get_or_create(
        self, bean_class: type, factory: DescriptorFactory
    ) -> TypeDescriptor:
        if not settings.DESCRIPTOR_CACHE_ENABLED:
            logger.debug(ls.CACHE_DISABLED.format(type=bean_class.__qualname__))
            return factory()

        if (cached := self._descriptors.get(bean_class)) is not None:
            return cached

        with self._lock:
            if (cached := self._descriptors.get(bean_class)) is not None:
                return cached
            logger.debug(ls.CACHE_MISS.format(type=bean_class.__qualname__))
            descriptor = factory()
            self._descriptors[bean_class] = descriptor
            return descriptor

    def contains(self, bean_class: type) -> bool:
        return bean_class in self._descriptors

    def size(self) -> int:
        return len(self._descriptors)

    def clear(self) -> None:
        with self._lock:
            count = len(self._descriptors)
            self._descriptors.clear()
        logger.debug(ls.CACHE_CLEARED.format(count=count))


descriptor_cache = DescriptorCache()


def describe(bean_class: type) -> TypeDescriptor:
    if bean_class is None:
        raise ValueError(ex.NONE_TYPE)
    return descriptor_cache.get_or_create(bean_class, lambda: discover(bean_class))
