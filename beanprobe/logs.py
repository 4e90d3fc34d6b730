from __future__ import annotations

# (H) Discovery logs
DISCOVERING_TYPE = "Discovering properties of {type}"
DISCOVERED_TYPE = "Discovered {count} properties for {type}"
TYPE_HINTS_FALLBACK = "Could not resolve type hints for {type}, using raw annotations: {error}"
SIGNATURE_UNAVAILABLE = "Skipping {name} on {type}: no inspectable signature ({error})"

# (H) Cache logs
CACHE_MISS = "Descriptor cache miss for {type}"
CACHE_DISABLED = "Descriptor cache disabled, rebuilding descriptor for {type}"
CACHE_CLEARED = "Descriptor cache cleared ({count} entries)"

# (H) Read/write logs
READ_IGNORED = "Ignoring read failure of '{name}' on {type}: {error}"
WRITE_IGNORED = "Ignoring write failure of '{name}' on {type}: {error}"
WRITE_SKIPPED = "Skipping write of '{name}', value does not convert to {target}"
CONVERT_IGNORED = "Conversion of {value!r} to {target} failed, keeping default: {error}"
CONVERT_FALLBACK_RAW = "Keeping raw value of '{name}' after failed conversion to {target}"
COPY_MISSING = "Source has no property '{name}', skipping"
COPY_MISSING_IGNORED = "Ignoring missing source property '{name}': {error}"

# (H) Converter logs
CONVERTER_REGISTERED = "Registered converter for {target}"
PICKLE_DISABLED = "Byte payload received for {target} but pickle deserialization is disabled"
INSTANCE_FALLBACK = "Could not call {type}() ({error}), trying placeholder arguments"
INSTANCE_BARE = "Creating {type} without calling its constructor: {error}"

# (H) Proxy logs
PROXY_CLASS_CREATED = "Synthesized proxy class {name} for interface {interface}"
PROXY_UNDERLINE_FALLBACK = "Proxy key '{key}' missing, trying '{fallback}'"

# (H) CLI logs
CLI_DESCRIBING = "Describing {target}"

# (H) Comment checker logs
COMMENTS_FOUND = "Comments without (H) marker found:"
COMMENT_ERROR = "  {error}"
