"""Enumerations for chars."""

import enum


class Outcome(enum.Enum):
    """How a single source was handled by the classifier."""

    OK = "ok"
    SKIPPED = "skipped"
    ERROR = "error"


class BomKind(enum.Enum):
    """Byte-order marks recognised at the start of a stream."""

    NONE = "none"
    UTF8 = "utf-8"
    UTF16 = "utf-16"
