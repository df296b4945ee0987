"""
Stack trace parsing submodule.
"""

from .reflow import reflow, join_lines
from .line_parser import LineParser, parse_line
from .records import Frame, Opaque, Record

__all__ = ["reflow", "join_lines", "LineParser", "parse_line", "Frame", "Opaque", "Record"]
