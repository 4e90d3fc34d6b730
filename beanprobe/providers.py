from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from . import constants as cs
from . import convert as cv
from . import exceptions as ex
from . import naming
from .cache import describe
from .case_insensitive import CaseInsensitiveDict
from .utils.type_utils import is_boolean_type

if TYPE_CHECKING:
    from .descriptor import PropertyDescriptor


class BeanValueProvider:
    def __init__(
        self, bean: object, ignore_case: bool = False, ignore_error: bool = False
    ) -> None:
        if bean is None:
            raise ValueError(ex.NONE_BEAN)
        self._source = bean
        self._ignore_error = ignore_error
        self._prop_map = describe(type(bean)).prop_map(ignore_case)

    @property
    def source(self) -> object:
        return self._source

    def value(self, key: str, value_type: Any = None) -> Any:
        if (prop := self._find_prop(key, value_type)) is None:
            return None
        return prop.get_value_with_convert(self._source, value_type, self._ignore_error)

    def contains_key(self, key: str) -> bool:
        prop = self._find_prop(key, None)
        return prop is not None and not prop.ignore_get

    def _find_prop(self, key: str, value_type: Any) -> PropertyDescriptor | None:
        if (prop := self._prop_map.get(key)) is not None:
            return prop
        if value_type is None or is_boolean_type(value_type):
            for variant in naming.prefixed_variants(key, cs.AccessorPrefix.IS):
                if (prop := self._prop_map.get(variant)) is not None:
                    return prop
        return None


class MapValueProvider:
    def __init__(
        self,
        source: Mapping[Any, Any],
        ignore_case: bool = False,
        ignore_error: bool = False,
    ) -> None:
        if ignore_case and not isinstance(source, CaseInsensitiveDict):
            source = CaseInsensitiveDict(source)
        self._map: Mapping[Any, Any] = source
        self._ignore_error = ignore_error

    @property
    def source(self) -> Mapping[Any, Any]:
        return self._map

    def value(self, key: str, value_type: Any = None) -> Any:
        raw = self._map.get(key)
        if raw is None:
            raw = self._map.get(naming.to_underline_case(key))
        return cv.convert(value_type, raw, None, self._ignore_error)

    def contains_key(self, key: str) -> bool:
        if key in self._map:
            return True
        return naming.to_underline_case(key) in self._map
