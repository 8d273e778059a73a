"""Rewrite glob patterns so they match file names case-insensitively.

``"src/Main.py"`` becomes ``"[Ss][Rr][Cc]/[Mm][Aa][Ii][Nn].[Pp][Yy]"``.
Patterns that already contain ``[`` or ``]`` are returned unchanged, since
their character classes cannot be rewritten reliably.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _letter_class(char: str) -> str:
    upper = char.upper()
    lower = char.lower()
    # Letters whose case mapping is not a single character (e.g. "ß") are kept.
    if len(upper) != 1 or len(lower) != 1 or upper == lower:
        return char
    return f"[{upper}{lower}]"


def case_insensitive(pattern: str) -> str:
    """Return *pattern* with every letter replaced by an upper/lower class."""
    if "[" in pattern or "]" in pattern:
        logger.warning(
            "patterns containing '[' or ']' can lead to unpredictable results; "
            "consider using wildcards: %s",
            pattern,
        )
        return pattern
    parts: list[str] = []
    for i, char in enumerate(pattern):
        # Windows drive letter, e.g. "C:"
        if i == 0 and pattern[1:2] == ":":
            parts.append(char)
        elif char.isalpha():
            parts.append(_letter_class(char))
        else:
            parts.append(char)
    return "".join(parts)
