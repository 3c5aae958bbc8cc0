"""
Script Lexer (Scanner)
======================

This module implements the scanner for a small C-like scripting language.
It converts source text into tokens for a parser, one token per call.

Token Categories
----------------
- Keywords: fn, let, if, else, true, false, return
- Identifiers: runs of ASCII letters, '_' and '$' (digits never belong
  to an identifier, so ``abc123`` scans as IDENT then INT)
- Integers: runs of ASCII digits, kept as their raw text
- Operators: =, ==, !, !=, +, -, *, /, <, >
- Delimiters: ( ) { } , ;

Anything else becomes a single-character ILLEGAL token. The scanner never
raises; scanning always ends with an EOF token, and asking for more tokens
after that keeps returning EOF.

Example Usage
-------------
>>> from scriptlex.lexer import Lexer
>>> lexer = Lexer("let x = 5;")
>>> for token in lexer.tokenize():
...     print(token)
Token(LET, 'let')
Token(IDENT, 'x')
Token(ASSIGN, '=')
Token(INT, '5')
Token(SEMICOLON, ';')
Token(EOF, 'EOF')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, Optional
import logging
import string

from scriptlex.errors import IllegalCharacterError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the scripting language.

    Keywords get their own types so the parser never has to compare
    identifier text.
    """

    # === Structural Tokens ===
    EOF = auto()            # End of input
    ILLEGAL = auto()        # Unrecognized character

    # === Identifiers and Literals ===
    IDENT = auto()          # Variable/function names
    INT = auto()            # Integer literals (raw digits)

    # === Operators ===
    ASSIGN = auto()         # =
    EQ = auto()             # ==
    NOT_EQ = auto()         # !=
    BANG = auto()           # !
    PLUS = auto()           # +
    MINUS = auto()          # -
    ASTERISK = auto()       # *
    SLASH = auto()          # /
    LT = auto()             # <
    GT = auto()             # >

    # === Delimiters ===
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }

    # === Keywords ===
    FUNCTION = auto()       # fn
    LET = auto()            # let
    IF = auto()             # if
    ELSE = auto()           # else
    TRUE = auto()           # true
    FALSE = auto()          # false
    RETURN = auto()         # return

    @property
    def symbol(self) -> Optional[str]:
        """Fixed text of this token type, or None for IDENT/INT/ILLEGAL."""
        return _FIXED_TEXT.get(self)


# =============================================================================
# Keyword and Operator Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "return": TokenType.RETURN,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

TWO_CHAR_TOKENS: dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}

# Value of current_char once the cursor has passed the last character
END_OF_INPUT = ""

# Text carried by the EOF token
EOF_TEXT = "EOF"

_FIXED_TEXT: dict[TokenType, str] = {
    TokenType.EOF: EOF_TEXT,
    **{kind: text for text, kind in SINGLE_CHAR_TOKENS.items()},
    **{kind: text for text, kind in TWO_CHAR_TOKENS.items()},
    **{kind: text for text, kind in KEYWORDS.items()},
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from the source.

    Attributes:
        kind: The TokenType classification
        text: Source text for identifiers, integers, keywords and illegal
              characters; the fixed symbol for operators; "EOF" at the end
    """
    kind: TokenType
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.kind in _KEYWORD_TYPES


_KEYWORD_TYPES = frozenset(KEYWORDS.values())


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Scans source text into tokens, one per call to next_token().

    The cursor is the pair (position, read_position) plus the character
    under it. read_position is always position + 1; current_char is
    source[position], or END_OF_INPUT once position reaches the end.

    A Lexer belongs to a single caller and is not safe to share between
    threads. Build one per source text.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())
    """

    # Characters that start and continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + "_$")

    # Characters of an integer literal
    DIGITS = frozenset(string.digits)

    WHITESPACE = frozenset(" \t\r\n")

    def __init__(self, source: str):
        """
        Initialize the lexer and prime the cursor on the first character.

        Args:
            source: The complete source text to scan
        """
        self._source = source
        self._position = 0
        self._read_position = 0
        self._char = END_OF_INPUT
        self._read_char()

        logger.debug(
            "lexer primed: position=%d read_position=%d char=%r",
            self._position,
            self._read_position,
            self._char,
        )

    # =========================================================================
    # Cursor State (read-only)
    # =========================================================================

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def read_position(self) -> int:
        return self._read_position

    @property
    def current_char(self) -> str:
        return self._char

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Whitespace is skipped first. The cursor ends exactly one past the
        last character of the returned token. At end of input the EOF
        token is returned and the cursor stays where it is.
        """
        self._skip_whitespace()
        char = self._char

        # Identifiers and keywords
        if char in self.IDENT_CHARS:
            text = self._read_run(self.IDENT_CHARS)
            return Token(KEYWORDS.get(text, TokenType.IDENT), text)

        # Integers
        if char in self.DIGITS:
            return Token(TokenType.INT, self._read_run(self.DIGITS))

        if char == END_OF_INPUT:
            return Token(TokenType.EOF, EOF_TEXT)

        pair = char + self.peek_char()
        if pair in TWO_CHAR_TOKENS:
            token = Token(TWO_CHAR_TOKENS[pair], pair)
        elif char in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[char], char)
        else:
            token = Token(TokenType.ILLEGAL, char)
            logger.debug("illegal character %r at offset %d", char, self._position)

        self._advance(len(token.text))
        return token

    def peek_char(self) -> str:
        """
        Return the character after the current one without moving.

        Returns END_OF_INPUT when there is no such character.
        """
        if self._read_position >= len(self._source):
            return END_OF_INPUT
        return self._source[self._read_position]

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF token.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenType.EOF:
                return

    # =========================================================================
    # Cursor Movement
    # =========================================================================

    def _read_char(self) -> None:
        """Move the cursor one character to the right."""
        if self._read_position >= len(self._source):
            self._char = END_OF_INPUT
        else:
            self._char = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _advance(self, count: int) -> None:
        for _ in range(count):
            self._read_char()

    def _skip_whitespace(self) -> None:
        while self._char in self.WHITESPACE:
            self._read_char()

    def _read_run(self, chars: frozenset) -> str:
        """Consume the longest run of characters in ``chars`` and return it."""
        start = self._position
        while self._char in chars:
            self._read_char()
        return self._source[start:self._position]


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """
    Scan a whole source string.

    Returns:
        All tokens of the source, ending with the EOF token
    """
    return list(Lexer(source).tokenize())


def check_tokens(tokens: Iterable[Token]) -> list[Token]:
    """
    Treat ILLEGAL tokens as fatal.

    Returns:
        The tokens as a list, unchanged

    Raises:
        IllegalCharacterError: For the first ILLEGAL token found
    """
    result = list(tokens)
    for token in result:
        if token.kind is TokenType.ILLEGAL:
            raise IllegalCharacterError(token)
    return result
