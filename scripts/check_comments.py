#!/usr/bin/env python3
import sys
from pathlib import Path

from loguru import logger

from beanprobe import logs
from beanprobe.constants import (
    ALLOWED_COMMENT_MARKERS,
    COMMENT_CHAR,
    ESCAPE_CHAR,
    QUOTE_CHARS,
    TRIPLE_QUOTES,
)

DEFAULT_ROOT = Path(__file__).resolve().parent.parent / "beanprobe"


def find_comment_start(line: str) -> int | None:
    quote: str | None = None
    skip = False
    for i, char in enumerate(line):
        if skip:
            skip = False
            continue
        if char == ESCAPE_CHAR and quote is not None:
            skip = True
        elif char in QUOTE_CHARS:
            if quote is None:
                quote = char
            elif quote == char:
                quote = None
        elif char == COMMENT_CHAR and quote is None:
            return i
    return None


def is_allowed(comment: str) -> bool:
    return any(marker in comment for marker in ALLOWED_COMMENT_MARKERS)


def check_lines(name: str, lines: list[str]) -> list[str]:
    errors: list[str] = []
    in_docstring = False
    seen_code = False

    for number, line in enumerate(lines, 1):
        if sum(line.count(q) for q in TRIPLE_QUOTES) % 2 == 1:
            in_docstring = not in_docstring
        if in_docstring:
            continue

        stripped = line.strip()
        if not seen_code:
            seen_code = bool(stripped) and not stripped.startswith(
                (COMMENT_CHAR, *TRIPLE_QUOTES)
            )
            if not seen_code:
                continue

        if (start := find_comment_start(line)) is None:
            continue
        comment = line[start:].strip()
        if not is_allowed(comment):
            errors.append(f"{name}:{number}: {comment[:60]}")
    return errors


def iter_sources(args: list[str]) -> list[Path]:
    if args:
        return [Path(arg) for arg in args]
    return sorted(DEFAULT_ROOT.rglob("*.py"))


def main(args: list[str] | None = None) -> int:
    errors: list[str] = []
    for path in iter_sources(sys.argv[1:] if args is None else args):
        errors.extend(check_lines(str(path), path.read_text().splitlines()))

    if not errors:
        return 0
    logger.error(logs.COMMENTS_FOUND)
    for error in errors:
        logger.error(logs.COMMENT_ERROR.format(error=error))
    return 1


if __name__ == "__main__":
    sys.exit(main())
