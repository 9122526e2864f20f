# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for flag invocations.

Converts a token stream produced by the scanner into an Invocation: the
containing path plus the ordered list of item names inside the braces.
"""

import logging

from flagset.compiler.scanner import Token, TokenType, tokenize
from flagset.config import MixedSeparators, ParserOptions
from flagset.errors import EmptyPathError, MalformedListError, ParseError
from flagset.model.entities import FlagPath, Invocation, Separator

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(source: str, options: ParserOptions | None = None) -> Invocation:
    """Parse invocation text of the form ``seg1::seg2::{item1 | item2}``.

    Args:
        source: The invocation text.
        options: Parser options; defaults to ``ParserOptions()``.

    Returns:
        The parsed Invocation.

    Raises:
        EmptyPathError: If no path segment precedes the braces.
        MalformedListError: If the brace contents do not match the grammar.
        ParseError: If the path prefix is malformed or tokens follow the
            closing brace.
    """
    tokens = tokenize(source)
    invocation = _Parser(tokens, options or ParserOptions()).parse()
    logger.debug("Parsed %r into %d item(s) under %s", source, len(invocation.items), invocation.path)
    return invocation


# ################
# Implementation
# ################

_SEPARATOR_TYPES: dict[TokenType, Separator] = {
    TokenType.PIPE: Separator.PIPE,
    TokenType.COMMA: Separator.COMMA,
}


class _Parser:
    """Recursive-descent parser for flag invocation token streams."""

    def __init__(self, tokens: list[Token], options: ParserOptions) -> None:
        self._tokens = tokens
        self._options = options
        self._pos = 0

    def parse(self) -> Invocation:
        """Parse the full token stream and return an Invocation."""
        path = self._parse_path()
        items, separators = self._parse_item_block()
        if not self._at_end():
            tok = self._current()
            raise ParseError(f"Unexpected token {tok.value!r} after '}}'", tok.line, tok.column)
        return Invocation(path=path, items=tuple(items), separators=tuple(separators))

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _peek_type(self) -> TokenType:
        return self._tokens[self._pos].type

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._peek_type() == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        tok = self._current()
        if tok.type not in types:
            expected = ", ".join(repr(t.value) for t in types)
            got = "end of input" if tok.type == TokenType.EOF else repr(tok.value)
            raise ParseError(f"Expected {expected}, got {got}", tok.line, tok.column)
        return self._advance()

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without
        consuming).
        """
        return self._peek_type() in types

    # ------------------------------------------------------------------
    # Path prefix
    # ------------------------------------------------------------------

    def _parse_path(self) -> FlagPath:
        """Parse: (segment '::')+ up to the opening brace."""
        tok = self._current()
        if tok.type in (TokenType.LBRACE, TokenType.PATH_SEP, TokenType.EOF):
            raise EmptyPathError(
                "The path prefix (`A::` of `A::{...}`) must not be empty",
                tok.line,
                tok.column,
            )
        segments: list[str] = []
        while not self._check(TokenType.LBRACE):
            seg = self._current()
            if seg.type != TokenType.IDENTIFIER:
                got = "end of input" if seg.type == TokenType.EOF else repr(seg.value)
                raise ParseError(f"Expected path segment or '{{', got {got}", seg.line, seg.column)
            if not seg.value.isidentifier():
                raise ParseError(f"{seg.value!r} is not a valid Python identifier", seg.line, seg.column)
            self._advance()
            self._expect(TokenType.PATH_SEP)
            segments.append(seg.value)
        return FlagPath(segments=tuple(segments))

    # ------------------------------------------------------------------
    # Item list
    # ------------------------------------------------------------------

    def _parse_item_block(self) -> tuple[list[str], list[Separator]]:
        """Parse: '{' [item (sep item)*] '}'"""
        open_brace = self._expect(TokenType.LBRACE)
        items: list[str] = []
        separators: list[Separator] = []
        if self._check(TokenType.RBRACE):
            self._advance()
            return items, separators

        items.append(self._parse_item(open_brace))
        while not self._check(TokenType.RBRACE):
            sep_tok = self._current()
            separator = _SEPARATOR_TYPES.get(sep_tok.type)
            if separator is None:
                if sep_tok.type == TokenType.EOF:
                    raise MalformedListError("Unmatched '{'", open_brace.line, open_brace.column)
                raise MalformedListError(
                    f"Expected '|', ',' or '}}', got {sep_tok.value!r}",
                    sep_tok.line,
                    sep_tok.column,
                )
            self._advance()
            if (
                self._options.mixed_separators == MixedSeparators.FORBID
                and separators
                and separator != separators[0]
            ):
                raise MalformedListError(
                    f"Mixed separators: {sep_tok.value!r} after {separators[0].value!r}",
                    sep_tok.line,
                    sep_tok.column,
                )
            if self._check(TokenType.RBRACE):
                raise MalformedListError(
                    f"Trailing separator {sep_tok.value!r} before '}}'",
                    sep_tok.line,
                    sep_tok.column,
                )
            separators.append(separator)
            items.append(self._parse_item(open_brace))
        self._advance()  # consume }
        return items, separators

    def _parse_item(self, open_brace: Token) -> str:
        """Parse one bare item name."""
        tok = self._current()
        if tok.type == TokenType.IDENTIFIER:
            if not tok.value.isidentifier():
                raise MalformedListError(f"{tok.value!r} is not a valid Python identifier", tok.line, tok.column)
            return self._advance().value
        if tok.type == TokenType.EOF:
            raise MalformedListError("Unmatched '{'", open_brace.line, open_brace.column)
        if tok.type == TokenType.INTEGER:
            message = f"Numeric literal {tok.value!r} is not a flag name"
        elif tok.type == TokenType.LBRACE:
            message = "Nested brace groups are not supported"
        else:
            message = f"Expected flag name, got {tok.value!r}"
        raise MalformedListError(message, tok.line, tok.column)
