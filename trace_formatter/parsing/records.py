"""
Record types produced by the line parser.

A parsed line is either a structured ``Frame`` or an ``Opaque`` pass-through.
Consumers should branch on the concrete type (or ``kind``) and handle both.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Frame:
    """
    One structured stack frame.

    Attributes:
        index: Raw frame marker including the hash (e.g. "#0").
        location: Text between the index and the line info (usually a path).
        line_info: Parenthesized segment such as "(45)", or None.
        call_expression: Text after the colon, or None when nothing follows it.
    """
    index: str
    location: str
    line_info: str | None = None
    call_expression: str | None = None

    kind = "frame"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "index": self.index,
            "location": self.location,
            "line_info": self.line_info,
            "call_expression": self.call_expression,
        }


@dataclass(frozen=True)
class Opaque:
    """A line that does not look like a frame, kept verbatim."""
    text: str

    kind = "opaque"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


Record = Frame | Opaque
