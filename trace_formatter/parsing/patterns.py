"""
Regex patterns and constants for stack trace parsing.
"""

import re

# Frame marker: "#" followed by the frame index digits
FRAME_MARKER = r"#\d+"

# Marker embedded mid-line. Matches the whitespace run between the last
# visible character and the marker (possibly empty) so it can be replaced by
# a single line break. The marker stays outside the match, so adjacent
# markers like "#0#1#2" split in one pass.
EMBEDDED_MARKER_RE = re.compile(rf"(?<=\S)\s*(?={FRAME_MARKER})")

# Blank lines left behind by splitting (or already present in the input)
BLANK_LINES_RE = re.compile(r"\n{2,}")

LINE_BREAK = "\n"

# Structured frame line:
#   index      "#12"
#   location   shortest text before the optional line info
#   line_info  "(45)", kept with its parentheses
#   call       everything after the colon, colons and parens included
FRAME_LINE_RE = re.compile(
    rf"^(?P<index>{FRAME_MARKER})\s*"
    r"(?P<location>.*?)"
    r"(?P<line_info>\(.*?\))?"
    r"\s*:\s*"
    r"(?P<call>.*)"
)
