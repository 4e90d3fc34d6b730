from __future__ import annotations

# (H) Property lookup errors
NO_GETTER = "No public field or get method for '{name}' on {type}"
NO_SETTER = "No public field or set method for '{name}' on {type}"
MISSING_SOURCE_PROP = "Source has no value for required property '{name}'"

# (H) Access errors
GET_VALUE_FAILED = "Get value of [{name}] error!"
SET_VALUE_FAILED = "Set value of [{name}] error!"
INVOKE_NOT_FOUND = "{type} has no method '{name}'"
INVOKE_NOT_CALLABLE = "Attribute '{name}' of {type} is not callable"
INVOKE_FAILED = "Invoking '{name}' on {type} failed: {error}"
INSTANTIATE_FAILED = "Could not instantiate {type}: {error}"
DESERIALIZE_FAILED = "Could not deserialize {size} bytes: {error}"

# (H) Conversion errors
CONVERT_FAILED = "Cannot convert {value!r} ({source}) to {target}: {error}"
CONVERTER_NOT_CALLABLE = "Converter for {target} must be callable"

# (H) Proxy errors
UNSUPPORTED_PROXY_METHOD = "Unsupported proxy method {name}({params}) -> {returns}"
NOT_AN_INTERFACE = "{type} is not a class and cannot back a proxy bean"

# (H) Argument errors
NONE_BEAN = "Bean must not be None"
NONE_TYPE = "Bean class must not be None"

# (H) CLI errors
BAD_TARGET = "Target must look like 'package.module:ClassName', got '{target}'"
TARGET_NOT_CLASS = "'{target}' does not name a class"


# (H) Exception classes
class BeanError(Exception):
    pass


class PropertyNotFoundError(BeanError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class BeanAccessError(BeanError):
    pass


class ConversionError(BeanError, ValueError):
    pass


class UnsupportedProxyMethodError(BeanError, NotImplementedError):
    pass
