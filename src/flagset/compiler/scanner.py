# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for flag invocations.

Converts invocation text such as ``ponydom::Flags::{Winged | Horned}`` into a
sequence of tokens for subsequent parsing.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the flag scanner."""

    # Symbols and operators
    PATH_SEP = "::"
    LBRACE = "{"
    RBRACE = "}"
    PIPE = "|"
    COMMA = ","

    # Literals
    INTEGER = "INTEGER"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # Any other single character; reported by the parser in context
    SYMBOL = "SYMBOL"

    # End of input
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


def tokenize(source: str) -> list[Token]:
    """Tokenize invocation text into a sequence of tokens.

    Whitespace is consumed and not included in the output. Characters that
    have no meaning in the grammar are returned as SYMBOL tokens rather than
    rejected, so the parser can say where they appeared.

    Args:
        source: The invocation text.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return _Scanner(source).tokenize()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "|": TokenType.PIPE,
    ",": TokenType.COMMA,
}


class _Scanner:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current().isspace():
            self._advance()

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, line, col))
        elif ch == ":" and self._peek() == ":":
            self._advance()  # :
            self._advance()  # :
            self._tokens.append(Token(TokenType.PATH_SEP, "::", line, col))
        elif ch.isdigit():
            self._scan_number(line, col)
        elif ch.isalpha() or ch == "_":
            self._scan_identifier(line, col)
        else:
            self._advance()
            self._tokens.append(Token(TokenType.SYMBOL, ch, line, col))

    def _scan_number(self, line: int, col: int) -> None:
        """Scan a run of digits (and trailing identifier characters, e.g. ``0b01``)."""
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        self._tokens.append(Token(TokenType.INTEGER, self._source[start : self._pos], line, col))

    def _scan_identifier(self, line: int, col: int) -> None:
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        self._tokens.append(Token(TokenType.IDENTIFIER, self._source[start : self._pos], line, col))
