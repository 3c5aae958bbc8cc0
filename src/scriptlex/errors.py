"""
scriptlex Error Hierarchy
=========================

This module defines the exception hierarchy for the scriptlex package.
All exceptions inherit from ScriptLexError, allowing callers to catch
every package error with a single except clause.

Exception Hierarchy
-------------------
ScriptLexError (base)
├── IllegalCharacterError - strict check found an ILLEGAL token
└── ConfigError - invalid configuration value

The scanner itself never raises: an unrecognized character becomes an
ILLEGAL token. IllegalCharacterError only exists for callers that opt in
to treating such tokens as fatal (see ``scriptlex.lexer.check_tokens``).

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from scriptlex.lexer import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class ScriptLexError(Exception):
    """
    Base exception for all scriptlex errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: illegal character '@' (0x40)
            hint: remove the character or replace it with an operator
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class IllegalCharacterError(ScriptLexError):
    """
    An ILLEGAL token was found by a strict check.

    Attributes:
        token: The offending ILLEGAL token
        char: The unrecognized character
    """

    def __init__(self, token: "Token"):
        self.token = token
        self.char = token.text
        super().__init__(
            f"illegal character {self.char!r} (U+{ord(self.char):04X})",
            hint="remove the character or replace it with a supported operator",
        )


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(ScriptLexError):
    """Invalid configuration value (for example from the environment)."""
    pass
