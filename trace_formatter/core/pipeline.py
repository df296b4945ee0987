"""
Trace Formatting Pipeline.

This module chains the two parsing stages:
1. Reflow the raw text into one frame per line
2. Parse every line into a Frame or Opaque record

For AI Agents:
    - Pure function, no I/O and no state kept between calls
    - Safe to call on every keystroke; the caller decides how often
    - Never raises on malformed input; unknown lines become Opaque records
"""

from dataclasses import dataclass
from typing import Any

from loguru import logger

from trace_formatter.parsing import Frame, LineParser, Opaque, Record, join_lines, reflow


@dataclass(frozen=True)
class FormattedTrace:
    """
    Result of formatting one pasted trace.

    Attributes:
        raw: Input text as received
        lines: Canonical lines produced by the reflow stage
        records: One record per line, same order
    """
    raw: str
    lines: tuple[str, ...]
    records: tuple[Record, ...]

    @property
    def text(self) -> str:
        """Canonical text, one frame per line (the copy view)."""
        return join_lines(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def char_count(self) -> int:
        return len(self.raw)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def frame_count(self) -> int:
        return sum(1 for record in self.records if isinstance(record, Frame))

    @property
    def opaque_count(self) -> int:
        return sum(1 for record in self.records if isinstance(record, Opaque))

    @property
    def stats(self) -> dict[str, int]:
        return {
            "characters": self.char_count,
            "lines": self.line_count,
            "frames": self.frame_count,
            "opaque": self.opaque_count,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": list(self.lines),
            "records": [record.to_dict() for record in self.records],
            "stats": self.stats,
        }


def format_trace(raw: str, parser: LineParser | None = None) -> FormattedTrace:
    """
    Reflow and parse a raw stack trace.

    Args:
        raw: Text pasted by the user, possibly a single wrapped line
        parser: Line parser to use (a fresh default one if None)

    Returns:
        FormattedTrace with lines and records; both empty for blank input
    """
    parser = parser or LineParser()
    lines = reflow(raw)
    records = parser.parse_many(lines)

    result = FormattedTrace(raw=raw, lines=lines, records=records)
    logger.debug(
        f"Formatted trace: {result.line_count} lines, "
        f"{result.frame_count} frames, {result.opaque_count} opaque"
    )
    return result
