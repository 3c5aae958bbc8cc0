"""
scriptlex - Scanner for a Small C-like Scripting Language
=========================================================

This package turns source text of a small C-like scripting language into
a stream of tokens (keywords, identifiers, integers, operators and
delimiters) for a parser to consume.

Main Components
---------------
- **lexer**: the Lexer class, Token and TokenType
- **config**: settings for the token printer
- **cli**: the ``sclex`` command-line token printer

Quick Start
-----------
    >>> from scriptlex import tokenize
    >>> [t.kind.name for t in tokenize("let x = 5;")]
    ['LET', 'IDENT', 'ASSIGN', 'INT', 'SEMICOLON', 'EOF']

Or from the shell:
    $ sclex -e "let x = 5;"
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from scriptlex.errors import (
    ScriptLexError,
    IllegalCharacterError,
    ConfigError,
)
from scriptlex.lexer import (
    Lexer,
    Token,
    TokenType,
    KEYWORDS,
    END_OF_INPUT,
    tokenize,
    check_tokens,
)
from scriptlex.config import DriverConfig

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "END_OF_INPUT",
    "tokenize",
    "check_tokens",
    # Configuration
    "DriverConfig",
    # Exception hierarchy
    "ScriptLexError",
    "IllegalCharacterError",
    "ConfigError",
]
