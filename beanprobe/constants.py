from enum import StrEnum


class AccessorPrefix(StrEnum):
    GET = "get"
    IS = "is"
    SET = "set"


class Color(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"


class StyleModifier(StrEnum):
    BOLD = "bold"
    NONE = ""


# (H) Naming conventions
UNDERSCORE = "_"
SEPARATOR_DOT = "."
SEPARATOR_COLON = ":"
DUNDER = "__"

# (H) Reflective type accessor that must never be treated as a getter
GET_CLASS_CANONICAL = "getclass"

# (H) Proxy special cases
HASH_METHOD_NAMES = frozenset({"hashCode", "hash_code", "__hash__"})
STR_METHOD_NAMES = frozenset({"toString", "to_string", "__str__", "__repr__"})
EQUALS_METHOD_NAMES = frozenset({"equals", "__eq__"})
PROXY_CLASS_SUFFIX = "MapProxy"
PROXY_HANDLER_ATTR = "_map_proxy"

# (H) Marker attributes set by decorators on accessor functions
PROP_IGNORE_ATTR = "__prop_ignore__"
TRANSIENT_ATTR = "__transient__"

# (H) Dataclass field metadata keys
META_PROP_IGNORE = "prop_ignore"
META_TRANSIENT = "transient"
META_ALIAS = "alias"

# (H) Types never treated as beans
NON_BEAN_TYPES = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
    list,
    tuple,
    set,
    frozenset,
    dict,
    type(None),
)

# (H) Defaults used when a constructor needs placeholder arguments
PRIMITIVE_DEFAULTS: dict[type, object] = {
    int: 0,
    float: 0.0,
    bool: False,
    str: "",
    bytes: b"",
}

# (H) Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"

# (H) CLI
CLI_APP_NAME = "beanprobe"
CLI_APP_HELP = (
    "Inspect how beanprobe discovers properties on a Python class: "
    "getters, setters, value types and ignore markers."
)
CLI_HELP_DESCRIBE = "Print the property descriptors discovered for a class"
CLI_HELP_TARGET = "Class to describe, as 'package.module:ClassName'"
CLI_HELP_IGNORE_CASE = "Show property names the way a case-insensitive lookup sees them"
CLI_HELP_LOG_LEVEL = "Log level for beanprobe's own diagnostics"
CLI_MSG_NO_PROPERTIES = "No properties discovered for {name}"
CLI_ERR_DESCRIBE = "Could not describe {target}: {error}"

TABLE_TITLE = "Properties of {name}"
TABLE_COL_PROPERTY = "Property"
TABLE_COL_TYPE = "Type"
TABLE_COL_GETTER = "Getter"
TABLE_COL_SETTER = "Setter"
TABLE_COL_FLAGS = "Flags"
TABLE_EMPTY_CELL = "-"
FLAG_IGNORE_GET = "ignore-get"
FLAG_IGNORE_SET = "ignore-set"
FLAG_TRANSIENT = "transient"
FLAG_ACCESSOR_ONLY = "accessor-only"
FLAG_SEPARATOR = ", "

# (H) Comment checker
ALLOWED_COMMENT_MARKERS = frozenset({"(H)", "type:", "noqa", "pyright", "ty:"})
QUOTE_CHARS = frozenset({'"', "'"})
TRIPLE_QUOTES = ('"""', "'''")
COMMENT_CHAR = "#"
ESCAPE_CHAR = "\\"
