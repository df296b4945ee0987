#!/usr/bin/env python3
"""
Stack Trace Formatter - CLI entry point.

Usage:
    python main.py format trace.txt
    python main.py format trace.txt -o json
    python main.py stats trace.txt
    python main.py example
"""

from trace_formatter.cli import cli

if __name__ == "__main__":
    cli()
