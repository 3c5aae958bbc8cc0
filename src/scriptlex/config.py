"""
scriptlex - Driver Configuration
================================

Settings for the ``sclex`` token printer. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied on top by the CLI)
"""

from dataclasses import dataclass
import os

from scriptlex.errors import ConfigError


OUTPUT_FORMATS = ("text", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass
class DriverConfig:
    """
    Configuration for printing a token stream.

    Attributes:
        output_format: "text" (one token per line) or "json"
        include_eof: Print the trailing EOF token (default: True)
        strict: Exit with an error if any ILLEGAL token is produced
        verbose: Enable debug logging and a summary line
    """

    output_format: str = "text"
    include_eof: bool = True
    strict: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"unknown output format '{self.output_format}'",
                hint=f"use one of: {', '.join(OUTPUT_FORMATS)}",
            )

    @classmethod
    def from_env(cls) -> "DriverConfig":
        """
        Create DriverConfig from environment variables.

        Environment variables (all optional):
            SCRIPTLEX_FORMAT: Output format ("text" or "json")
            SCRIPTLEX_STRICT: Boolean, fail on ILLEGAL tokens
            SCRIPTLEX_VERBOSE: Boolean, enable debug logging

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        defaults = cls()
        output_format = os.environ.get("SCRIPTLEX_FORMAT") or defaults.output_format

        return cls(
            output_format=output_format.lower(),
            strict=_env_flag("SCRIPTLEX_STRICT", defaults.strict),
            verbose=_env_flag("SCRIPTLEX_VERBOSE", defaults.verbose),
        )


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"invalid boolean value {value!r} for {name}",
        hint="use 1/0, true/false, yes/no or on/off",
    )
