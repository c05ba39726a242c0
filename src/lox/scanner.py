"""Lexical analysis for the Lox language."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import Diagnostics, LoxError
from .token import KEYWORDS, LiteralValue, Token, TokenType

logger = logging.getLogger(__name__)

_SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

#one-character operator -> (variant when followed by '=', plain variant)
_EQUAL_SUFFIXED = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


#walks one source text left to right, emitting Lox tokens and reporting bad input
@dataclass(slots=True)
class Scanner:
    """Single-pass scanner over one compilation unit.

    Lexical errors are reported to ``diagnostics`` and scanning carries on,
    so a single pass surfaces every bad character in the source.
    """

    source: str
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    _tokens: List[Token] = field(init=False, default_factory=list)
    _start: int = field(init=False, default=0)
    _current: int = field(init=False, default=0)
    _line: int = field(init=False, default=1)
    _done: bool = field(init=False, default=False)

    def scan_tokens(self) -> List[Token]:
        if self._done:
            raise LoxError("scanner has already produced its tokens")
        self._done = True

        while not self._is_at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        logger.debug(
            "scanned %d tokens over %d lines (%d errors)",
            len(self._tokens),
            self._line,
            len(self.diagnostics),
        )
        return self._tokens

    # Dispatch ---------------------------------------------------------

    def _scan_token(self) -> None:
        char = self._advance()

        if char in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[char])
            return

        if char in _EQUAL_SUFFIXED:
            two_char, one_char = _EQUAL_SUFFIXED[char]
            self._add_token(two_char if self._match("=") else one_char)
            return

        match char:
            case "/":
                if self._match("/"):
                    self._line_comment()
                elif self._match("*"):
                    self._block_comment()
                else:
                    self._add_token(TokenType.SLASH)
            case '"':
                self._string()
            case " " | "\r" | "\t":
                pass
            case "\n":
                self._line += 1
            case _ if _is_digit(char):
                self._number()
            case _ if _is_alpha(char):
                self._identifier()
            case _:
                self.diagnostics.report(self._line, f"Unexpected character {char!r}.")

    # Internal helpers -------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        char = self.source[self._current]
        self._current += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return "\0"
        return self.source[self._current + 1]

    def _match(self, expected: str) -> bool:
        if self._is_at_end():
            return False
        if self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _add_token(self, token_type: TokenType, literal: Optional[LiteralValue] = None) -> None:
        lexeme = self.source[self._start : self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._line))

    # Lexical units ----------------------------------------------------

    def _line_comment(self) -> None:
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    #first '*/' closes the comment; nested '/*' is just comment text
    def _block_comment(self) -> None:
        opened_on = self._line
        while not self._is_at_end() and not (self._peek() == "*" and self._peek_next() == "/"):
            if self._advance() == "\n":
                self._line += 1

        if self._is_at_end():
            logger.warning("block comment opened on line %d is never closed", opened_on)
            return

        self._current += 2
        logger.debug("skipped block comment %r", self.source[self._start : self._current])

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self.diagnostics.report(self._line, "Unterminated string.")
            return

        self._advance()  # closing quote
        value = self.source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()  # consume '.'
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self._start : self._current]))

    def _identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


#one-shot helper: fresh scanner, optional shared collector
def scan(source: str, diagnostics: Optional[Diagnostics] = None) -> List[Token]:
    if diagnostics is None:
        diagnostics = Diagnostics()
    return Scanner(source, diagnostics).scan_tokens()


__all__ = ["Scanner", "scan"]
