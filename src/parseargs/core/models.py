"""
Grammar models for parseargs.

Positionals and options are frozen Pydantic models. They are created by the
Grammar registry and never change afterwards, so a built grammar can be
shared between any number of parse calls.
"""

from pydantic import BaseModel, ConfigDict, Field

# Reserved identifiers for the built-in help flag
HELP_UID = "help"
HELP_SHORT_NAME = "h"
HELP_LONG_NAME = "help"
HELP_DESCRIPTION = "Shows this list of arguments, then quits."


class Positional(BaseModel):
    """
    A positional argument, matched by where it appears on the command line.

    The index is the registration order and doubles as the position the
    argument is expected at.
    """

    model_config = ConfigDict(frozen=True)

    uid: str = Field(..., description="Identifier used to query the result")
    index: int = Field(..., ge=0, description="0-based registration order")
    name: str = Field(..., description="Human-readable name for usage/help")
    description: str = Field(default="", description="Help text")


class Option(BaseModel):
    """
    A named option, given as ``-s`` or ``--long``, taking 0 or more values.

    An empty short name means the option only has a long form.
    """

    model_config = ConfigDict(frozen=True)

    uid: str = Field(..., description="Identifier used to query the result")
    short_name: str = Field(default="", max_length=1, description="Single character or empty")
    long_name: str = Field(..., min_length=1, description="Name after the double dash")
    min_values: int = Field(default=0, ge=0, description="Minimum number of values")
    max_values: int = Field(default=0, ge=0, description="Maximum number of values")
    param_hint: str = Field(default="", description="Value placeholder shown in help")
    description: str = Field(default="", description="Help text")

    @property
    def is_flag(self) -> bool:
        """True if the option never takes values."""
        return self.max_values == 0

    @property
    def label(self) -> str:
        """The option as written in help output, e.g. ``-o,--output <file>``."""
        short = f"-{self.short_name}," if self.short_name else ""
        hint = f" {self.param_hint}" if self.param_hint else ""
        return f"{short}--{self.long_name}{hint}"


def help_option() -> Option:
    """Build the reserved help flag."""
    return Option(
        uid=HELP_UID,
        short_name=HELP_SHORT_NAME,
        long_name=HELP_LONG_NAME,
        min_values=0,
        max_values=0,
        description=HELP_DESCRIPTION,
    )
