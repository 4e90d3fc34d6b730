from .bean_converter import BeanConverter
from .bean_utils import (
    bean_to_map,
    copy_properties,
    fill_bean_with_map,
    get_property,
    is_bean,
    is_interface,
    new_instance_if_possible,
    set_property,
    to_bean,
)
from .cache import DescriptorCache, describe, descriptor_cache
from .case_insensitive import CaseInsensitiveDict
from .config import settings
from .convert import ConverterRegistry, convert, register_converter
from .copier import BeanCopier, CopyOptions
from .descriptor import PropertyDescriptor, TypeDescriptor, discover
from .dynamic_bean import DynamicBean
from .exceptions import (
    BeanAccessError,
    BeanError,
    ConversionError,
    PropertyNotFoundError,
    UnsupportedProxyMethodError,
)
from .map_proxy import MapProxy
from .markers import PropAlias, PropIgnore, Transient, prop_ignore, transient
from .providers import BeanValueProvider, MapValueProvider
from .types_defs import ValueProvider

__all__ = [
    "BeanAccessError",
    "BeanConverter",
    "BeanCopier",
    "BeanError",
    "BeanValueProvider",
    "CaseInsensitiveDict",
    "ConversionError",
    "ConverterRegistry",
    "CopyOptions",
    "DescriptorCache",
    "DynamicBean",
    "MapProxy",
    "MapValueProvider",
    "PropAlias",
    "PropIgnore",
    "PropertyDescriptor",
    "PropertyNotFoundError",
    "Transient",
    "TypeDescriptor",
    "UnsupportedProxyMethodError",
    "ValueProvider",
    "bean_to_map",
    "convert",
    "copy_properties",
    "describe",
    "descriptor_cache",
    "discover",
    "fill_bean_with_map",
    "get_property",
    "is_bean",
    "is_interface",
    "new_instance_if_possible",
    "prop_ignore",
    "register_converter",
    "set_property",
    "settings",
    "to_bean",
    "transient",
]
