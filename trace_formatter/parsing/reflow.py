"""
Reflow raw stack trace text into one frame per line.
"""

from collections.abc import Iterable

from loguru import logger

from .patterns import BLANK_LINES_RE, EMBEDDED_MARKER_RE, LINE_BREAK


def split_embedded_markers(text: str) -> str:
    """
    Move every frame marker found mid-line onto a line of its own.

    "#0 a.php(1): f() #1 b.php(2): g()" -> "#0 a.php(1): f()\\n#1 b.php(2): g()"
    """
    return EMBEDDED_MARKER_RE.sub(LINE_BREAK, text)


def reflow(raw: str) -> tuple[str, ...]:
    """
    Recover the one-frame-per-line layout of a pasted stack trace.

    Args:
        raw: Arbitrary text, usually a backtrace glued onto a single line.

    Returns:
        Trimmed, non-empty lines in their original order. Empty for blank input.
    """
    if not raw.strip():
        return ()

    text = split_embedded_markers(raw)
    text = BLANK_LINES_RE.sub(LINE_BREAK, text)

    lines = tuple(
        stripped
        for stripped in (line.strip() for line in text.split(LINE_BREAK))
        if stripped
    )
    logger.debug(f"Reflowed {len(raw)} chars into {len(lines)} lines")
    return lines


def join_lines(lines: Iterable[str]) -> str:
    """Newline-joined canonical view, as copied to the clipboard."""
    return LINE_BREAK.join(lines)
