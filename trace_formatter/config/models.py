"""
Pydantic models for configuration validation.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ThemeConfig(BaseModel):
    """Rich style strings for each part of a rendered frame."""
    index: str = "bold blue"
    location: str = "grey70"
    line_info: str = "yellow"
    separator: str = "grey50"
    call: str = "green"
    opaque: str = "grey70"
    placeholder: str = "dim"


class GlobalConfigModel(BaseModel):
    """
    Main configuration model for the application.
    Validates input from defaults.toml.
    """
    # Output
    output_format: Literal["rich", "text", "json"] = "rich"
    show_summary: bool = True

    # Logging (an empty log_file disables the file sink)
    log_file: str = "trace_formatter.log"
    log_rotation: str = "10 MB"

    # Sub-configs
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
