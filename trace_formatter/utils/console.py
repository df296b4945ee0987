"""
Console Output Manager.
Renders formatted stack traces and their counters with Rich.
"""
from rich import box
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from trace_formatter.config.models import ThemeConfig
from trace_formatter.constants import FRAME_SEPARATOR, PLACEHOLDER_TEXT
from trace_formatter.core.pipeline import FormattedTrace
from trace_formatter.parsing import Frame, Opaque, Record

console = Console()


class TraceRenderer:
    """
    Turns parsed records into styled Rich text.

    Every field of a frame gets its own style from the theme; opaque lines
    are printed as-is. No parsing happens here.
    """
    def __init__(self, theme: ThemeConfig | None = None):
        """
        Args:
            theme: Styles per field (defaults to ThemeConfig()).
        """
        self.theme = theme or ThemeConfig()

    def render_record(self, record: Record) -> Text:
        """
        Builds one output line.

        Args:
            record: Frame or Opaque record.

        Returns:
            A Rich Text object. Plain text is used throughout so brackets in
            traces (e.g. "[internal function]") are never read as markup.
        """
        if isinstance(record, Frame):
            line = Text()
            line.append(record.index, style=self.theme.index)
            line.append(" ")
            line.append(record.location, style=self.theme.location)
            if record.line_info:
                line.append(record.line_info, style=self.theme.line_info)
            if record.call_expression:
                line.append(FRAME_SEPARATOR, style=self.theme.separator)
                line.append(record.call_expression, style=self.theme.call)
            return line
        if isinstance(record, Opaque):
            return Text(record.text, style=self.theme.opaque)
        raise TypeError(f"Unsupported record type: {type(record).__name__}")

    def render(self, result: FormattedTrace) -> RenderableType:
        """Renders all records, or the placeholder for blank input."""
        if result.is_empty:
            return Text(PLACEHOLDER_TEXT, style=self.theme.placeholder)
        return Group(*(self.render_record(record) for record in result.records))

    def summary(self, result: FormattedTrace) -> Text:
        """One-line footer, e.g. "4 stack frames formatted"."""
        return Text(f"{result.line_count} stack frames formatted", style=self.theme.placeholder)

    def stats_table(self, result: FormattedTrace, title: str | None = None) -> Table:
        """
        Builds the counters table shown by the stats command.

        Args:
            result: Formatting result to describe.
            title: Optional table title (usually the input name).
        """
        table = Table(title=title, box=box.ROUNDED)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white", justify="right")
        table.add_row("Characters", str(result.char_count))
        table.add_row("Lines", str(result.line_count))
        table.add_row("Frames", str(result.frame_count))
        table.add_row("Opaque lines", str(result.opaque_count))
        return table
