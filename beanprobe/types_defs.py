from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .descriptor import TypeDescriptor

type DescriptorFactory = Callable[[], "TypeDescriptor"]
type ConverterFunc = Callable[[Any], Any]


@runtime_checkable
class ValueProvider(Protocol):
    def value(self, key: str, value_type: Any = None) -> Any: ...

    def contains_key(self, key: str) -> bool: ...
