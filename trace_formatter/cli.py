"""
Stack Trace Formatter - CLI Interface.

Usage:
    trace-formatter format trace.txt
    pbpaste | trace-formatter format -o text | pbcopy
    trace-formatter format error.log -o json
    trace-formatter stats trace.txt
    trace-formatter example
"""

import json
from pathlib import Path

import click
from loguru import logger
from rich.markup import escape

from trace_formatter.config.global_config import GlobalConfig, resolve_config
from trace_formatter.constants import EXAMPLE_TRACE, OUTPUT_FORMATS
from trace_formatter.core.pipeline import FormattedTrace, format_trace
from trace_formatter.utils.console import TraceRenderer, console

__version__ = "0.1.0"


def setup_logging(config: GlobalConfig, verbose: bool = False) -> None:
    """
    Configures the logger to write to a rotating file.

    Logging to stdout is disabled so log lines never end up in formatted
    output that is piped or copied.

    Args:
        config: Loaded configuration (log file and rotation).
        verbose: If True, sets log level to DEBUG; otherwise INFO.

    Raises:
        click.BadParameter: If loguru rejects the configured log_rotation.
    """
    logger.remove()
    if not config.log_file:
        return
    try:
        logger.add(config.log_file, rotation=config.log_rotation, level="DEBUG" if verbose else "INFO")
    except ValueError as e:
        raise click.BadParameter(f"Invalid log_rotation: {e}", param_hint="--config") from None


def load_config(config_path: Path | None) -> GlobalConfig:
    """
    Loads configuration, turning loader errors into CLI usage errors.

    Args:
        config_path: Explicit --config value, or None for defaults.toml.
    """
    try:
        return resolve_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from None


def emit(result: FormattedTrace, config: GlobalConfig, output_format: str, show_summary: bool) -> None:
    """
    Prints a formatting result in the requested mode.

    Args:
        result: Output of format_trace.
        config: Configuration holding the theme.
        output_format: One of "rich", "text" or "json".
        show_summary: Print the frame counter after rich output.
    """
    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    if output_format == "text":
        if not result.is_empty:
            click.echo(result.text)
        return

    renderer = TraceRenderer(config.theme)
    console.print(renderer.render(result), soft_wrap=True)
    if show_summary and not result.is_empty:
        console.print(renderer.summary(result))


def run_format(
    raw: str,
    config_path: Path | None,
    output_format: str | None,
    summary: bool | None,
    verbose: bool,
) -> None:
    """Shared body of the format and example commands."""
    config = load_config(config_path)
    setup_logging(config, verbose)

    result = format_trace(raw)
    logger.info(f"Formatted {result.char_count} chars into {result.line_count} lines")

    emit(
        result,
        config,
        output_format=(output_format or config.output_format).lower(),
        show_summary=config.show_summary if summary is None else summary,
    )


config_option = click.option(
    "-c", "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="TOML config file (defaults to config/defaults.toml when present)",
)
output_option = click.option(
    "-o", "--output", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="Output mode (overrides config)",
)
summary_option = click.option(
    "--summary/--no-summary", default=None, help="Print the frame counter after rich output",
)
verbose_option = click.option("-v", "--verbose", is_flag=True, help="Verbose logging")


@click.group()
@click.version_option(version=__version__, prog_name="trace-formatter")
def cli():
    """Stack Trace Formatter: one frame per line, fields highlighted."""
    pass


@cli.command("format")
@click.argument("input_file", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
@config_option
@output_option
@summary_option
@verbose_option
def format_command(
    input_file,
    config_path: Path | None,
    output_format: str | None,
    summary: bool | None,
    verbose: bool,
):
    """
    Format a raw stack trace read from INPUT_FILE (stdin by default).
    """
    run_format(input_file.read(), config_path, output_format, summary, verbose)


@cli.command()
@config_option
@output_option
@summary_option
@verbose_option
def example(
    config_path: Path | None,
    output_format: str | None,
    summary: bool | None,
    verbose: bool,
):
    """Format a built-in sample PHP stack trace."""
    run_format(EXAMPLE_TRACE, config_path, output_format, summary, verbose)


@cli.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
@config_option
@verbose_option
def stats(input_file, config_path: Path | None, verbose: bool):
    """Display character, line and frame counts for INPUT_FILE."""
    config = load_config(config_path)
    setup_logging(config, verbose)

    result = format_trace(input_file.read())
    renderer = TraceRenderer(config.theme)
    console.print(renderer.stats_table(result, title=f"Trace Info: {escape(input_file.name)}"))


if __name__ == "__main__":
    cli()
