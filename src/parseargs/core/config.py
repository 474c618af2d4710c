"""
Configuration models for parseargs.

These models describe how an ArgParser is set up and how its help output is
laid out, with validation and type safety via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from parseargs.core.help import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH


class HelpConfig(BaseModel):
    """
    Layout of the rendered help text.

    Descriptions start at indent_width and wrap at line_width.
    """

    model_config = ConfigDict(frozen=True)

    indent_width: int = Field(
        default=DEFAULT_INDENT_WIDTH,
        ge=0,
        description="Column where option/positional descriptions start",
    )
    line_width: int = Field(
        default=DEFAULT_LINE_WIDTH,
        ge=1,
        description="Total width of a help line, indent included",
    )

    @model_validator(mode="after")
    def check_widths(self) -> "HelpConfig":
        """The indent has to leave room for at least one character."""
        if self.indent_width >= self.line_width:
            raise ValueError(
                f"indent_width ({self.indent_width}) must be smaller than "
                f"line_width ({self.line_width})"
            )
        return self


class ParserConfig(BaseModel):
    """
    Features of an ArgParser that are switched on at construction.
    """

    model_config = ConfigDict(frozen=True)

    double_dash: bool = Field(
        default=False,
        description="Treat a bare '--' as the end of options",
    )
    help: bool = Field(
        default=False,
        description="Register the reserved -h/--help flag",
    )
    help_layout: HelpConfig = Field(
        default_factory=HelpConfig,
        description="Layout used by ArgParser.help()",
    )
