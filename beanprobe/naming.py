from __future__ import annotations

import re

from . import constants as cs

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")


def canonical(name: str) -> str:
    """Reduce a name to the key used by accessor matching.

    Matching is case-insensitive and ignores underscores, so ``getUserName``,
    ``get_user_name`` and ``GETUSERNAME`` all reduce to ``getusername``.
    """
    return name.replace(cs.UNDERSCORE, "").lower()


def to_underline_case(name: str) -> str:
    if not name:
        return name
    snake = _ACRONYM_WORD.sub(r"\1_\2", name)
    snake = _LOWER_UPPER.sub(r"\1_\2", snake)
    return snake.lower()


def to_camel_case(name: str) -> str:
    if cs.UNDERSCORE not in name.strip(cs.UNDERSCORE):
        return name
    head, *rest = name.lower().split(cs.UNDERSCORE)
    return head + "".join(part[:1].upper() + part[1:] for part in rest if part)


def lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def remove_prefix_and_lower_first(name: str, prefix: str) -> str | None:
    if not name.startswith(prefix):
        return None
    rest = name[len(prefix) :].lstrip(cs.UNDERSCORE)
    if not rest:
        return None
    return lower_first(rest)


def strip_accessor_prefix(name: str, prefix: str) -> str | None:
    """Like ``remove_prefix_and_lower_first`` but only at a word boundary.

    ``get_name`` and ``getName`` yield ``name``; ``getaway`` and ``settle`` yield
    ``None``.
    """
    boundary = name[len(prefix) : len(prefix) + 1]
    if not (boundary == cs.UNDERSCORE or boundary.isupper()):
        return None
    return remove_prefix_and_lower_first(name, prefix)


def prefixed_variants(key: str, prefix: str) -> tuple[str, str]:
    return prefix + upper_first(key), f"{prefix}{cs.UNDERSCORE}{key}"


def is_public(name: str) -> bool:
    return not name.startswith(cs.UNDERSCORE)


def is_dunder(name: str) -> bool:
    return name.startswith(cs.DUNDER) and name.endswith(cs.DUNDER)
