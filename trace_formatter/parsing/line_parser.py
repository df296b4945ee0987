"""
Line Parser Class.

Splits one reflowed line into frame fields, or passes it through untouched.
"""

from collections.abc import Iterable

from .patterns import FRAME_LINE_RE
from .records import Frame, Opaque, Record


class LineParser:
    """
    Classifies trace lines as structured frames or opaque text.

    A frame line looks like ``#<n> <location>(<line info>): <call>``; the line
    info and the call are optional, the colon is not. The location is matched
    lazily so the line info is never swallowed into it, and the call takes the
    rest of the line, further colons and parentheses included.

    The parser holds no state between lines.
    """

    def parse(self, line: str) -> Record:
        """
        Parses a single trimmed line.

        Args:
            line: One line from ``reflow``.

        Returns:
            A Frame when the line has the frame shape, otherwise an Opaque
            record wrapping the line unchanged.
        """
        match = FRAME_LINE_RE.match(line)
        if not match:
            return Opaque(text=line)

        return Frame(
            index=match.group("index"),
            location=match.group("location"),
            line_info=match.group("line_info"),
            call_expression=match.group("call") or None,
        )

    def parse_many(self, lines: Iterable[str]) -> tuple[Record, ...]:
        """Parses lines independently, keeping their order."""
        return tuple(self.parse(line) for line in lines)


_default_parser = LineParser()


def parse_line(line: str) -> Record:
    """Parse one line with a shared stateless LineParser."""
    return _default_parser.parse(line)
