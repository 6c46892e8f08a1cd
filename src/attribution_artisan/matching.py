"""Minimal glob matching for package-name exclusion."""

import re
from collections.abc import Iterable
from functools import lru_cache


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    # Only "*" is special; everything else is literal.
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")))


def glob_match(text: str, pattern: str) -> bool:
    """Match ``text`` against ``pattern`` over the whole string.

    ``*`` matches any run of characters, including none. There is no
    ``?``, character class or alternation support.

    Example:
        >>> glob_match("@types/node", "@types/*")
        True
        >>> glob_match("types/node", "@types/*")
        False
    """
    return _compile(pattern).fullmatch(text) is not None


def is_excluded(name: str, patterns: Iterable[str]) -> bool:
    """Return True if ``name`` matches any of ``patterns``."""
    return any(glob_match(name, pattern) for pattern in patterns)
