"""Classification stages and shared types."""

from __future__ import annotations

import dataclasses

from chars.enums import Outcome

#: Counter fields of :class:`StreamResult`, in report column order.
COUNTER_FIELDS: tuple[str, ...] = (
    "crlf_count",
    "lf_count",
    "tab_count",
    "nul_count",
    "bom_utf8_count",
    "bom_utf16_count",
    "non_ascii_count",
    "max_consecutive_non_ascii",
    "bytes_read",
)


@dataclasses.dataclass(slots=True)
class StreamResult:
    """Character-class counts for one processed source.

    Populated once by a single classifier pass.  Only ``failed`` is
    expected to change afterwards, when a failure policy is applied.
    """

    source_name: str
    crlf_count: int = 0
    lf_count: int = 0
    tab_count: int = 0
    nul_count: int = 0
    bom_utf8_count: int = 0
    bom_utf16_count: int = 0
    non_ascii_count: int = 0
    max_consecutive_non_ascii: int = 0
    bytes_read: int = 0
    failed: bool = False

    def counters(self) -> dict[str, int]:
        """Return the counter fields as a plain dict keyed by attribute name."""
        return {name: getattr(self, name) for name in COUNTER_FIELDS}

    def to_dict(self) -> dict[str, str | int | bool]:
        """Convert this result to the JSON report shape.

        :returns: A dict using the report's field names (``bom8``,
            ``nonAscii``, ``bytesRead`` and so on).
        """
        return {
            "filename": self.source_name,
            "crlf": self.crlf_count,
            "lf": self.lf_count,
            "tab": self.tab_count,
            "nul": self.nul_count,
            "bom8": self.bom_utf8_count,
            "bom16": self.bom_utf16_count,
            "nonAscii": self.non_ascii_count,
            "maxConsecutiveNonAscii": self.max_consecutive_non_ascii,
            "bytesRead": self.bytes_read,
            "failed": self.failed,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class ScanOutcome:
    """Tagged result of classifying one source.

    Exactly one of three shapes:

    * ``Outcome.OK`` with ``result`` set,
    * ``Outcome.SKIPPED`` with a ``reason`` (binary content),
    * ``Outcome.ERROR`` with a ``reason`` describing the I/O failure.
    """

    kind: Outcome
    source_name: str
    result: StreamResult | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, result: StreamResult) -> ScanOutcome:
        """Wrap a completed *result*."""
        return cls(Outcome.OK, result.source_name, result=result)

    @classmethod
    def skipped(cls, source_name: str, reason: str) -> ScanOutcome:
        """Record a source left out of the results on purpose."""
        return cls(Outcome.SKIPPED, source_name, reason=reason)

    @classmethod
    def error(cls, source_name: str, reason: str) -> ScanOutcome:
        """Record a source that could not be opened or read."""
        return cls(Outcome.ERROR, source_name, reason=reason)
