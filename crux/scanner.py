"""Lexical scanner turning Crux source text into tokens."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Kinds of token produced by the scanner."""

    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_SQUARE = auto()
    RIGHT_SQUARE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    BACKSLASH = auto()
    STAR = auto()
    STAR_STAR = auto()
    PERCENT = auto()
    COLON = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()
    # One or two character tokens.
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    LEFT_SHIFT = auto()
    RIGHT_SHIFT = auto()
    PLUS_EQUAL = auto()
    MINUS_EQUAL = auto()
    STAR_EQUAL = auto()
    SLASH_EQUAL = auto()
    BACK_SLASH_EQUAL = auto()
    PERCENT_EQUAL = auto()
    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    INT = auto()
    FLOAT = auto()
    # Keywords.
    AND = auto()
    NOT = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    RETURN = auto()
    SUPER = auto()
    SELF = auto()
    TRUE = auto()
    LET = auto()
    WHILE = auto()
    ERROR = auto()
    BREAK = auto()
    CONTINUE = auto()
    USE = auto()
    FROM = auto()
    PUB = auto()
    AS = auto()
    EOF = auto()
    MATCH = auto()
    EQUAL_ARROW = auto()
    OK = auto()
    ERR = auto()
    DEFAULT = auto()
    GIVE = auto()


@dataclass(frozen=True)
class Token:
    """A scanned token; for ERROR tokens the lexeme holds the message."""

    type: TokenType
    lexeme: str
    line: int


_ALPHA = frozenset(string.ascii_letters + "_")
_IDENTIFIER_START = _ALPHA | {"$"}
_DIGITS = frozenset(string.digits)

_SINGLE_CHAR = {
    ":": TokenType.COLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_SQUARE,
    "]": TokenType.RIGHT_SQUARE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
}

# Characters whose token gains "_EQUAL" when followed by '='.
_WITH_EQUAL = {
    "-": (TokenType.MINUS, TokenType.MINUS_EQUAL),
    "+": (TokenType.PLUS, TokenType.PLUS_EQUAL),
    "/": (TokenType.SLASH, TokenType.SLASH_EQUAL),
    "\\": (TokenType.BACKSLASH, TokenType.BACK_SLASH_EQUAL),
    "%": (TokenType.PERCENT, TokenType.PERCENT_EQUAL),
}

_SIMPLE_KEYWORDS = {
    "b": ("reak", TokenType.BREAK),
    "d": ("efault", TokenType.DEFAULT),
    "e": ("lse", TokenType.ELSE),
    "g": ("ive", TokenType.GIVE),
    "i": ("f", TokenType.IF),
    "l": ("et", TokenType.LET),
    "o": ("r", TokenType.OR),
    "r": ("eturn", TokenType.RETURN),
    "w": ("hile", TokenType.WHILE),
    "m": ("atch", TokenType.MATCH),
    "t": ("rue", TokenType.TRUE),
    "u": ("se", TokenType.USE),
    "p": ("ub", TokenType.PUB),
    "E": ("rr", TokenType.ERR),
    "O": ("k", TokenType.OK),
}


def _check(text: str, start: int, rest: str, kind: TokenType) -> TokenType:
    if len(text) == start + len(rest) and text[start:] == rest:
        return kind
    return TokenType.IDENTIFIER


def _identifier_type(text: str) -> TokenType:
    """Classify an identifier lexeme as a keyword or plain identifier."""
    first = text[0]
    second = text[1] if len(text) > 1 else ""

    if first == "a":
        if second == "s":
            return _check(text, 2, "", TokenType.AS)
        if second == "n":
            return _check(text, 2, "d", TokenType.AND)
        return _check(text, 1, "reak", TokenType.BREAK)
    if first == "c":
        if second == "l":
            return _check(text, 2, "ass", TokenType.CLASS)
        if second == "o":
            return _check(text, 2, "ntinue", TokenType.CONTINUE)
        return _check(text, 1, "lass", TokenType.CLASS)
    if first == "n":
        if second == "o":
            return _check(text, 2, "t", TokenType.NOT)
        if second == "i":
            return _check(text, 2, "l", TokenType.NIL)
        return _check(text, 1, "r", TokenType.OR)
    if first == "s":
        if second == "e" and len(text) > 2:
            return _check(text, 2, "lf", TokenType.SELF)
        if second in ("e", "u"):
            return _check(text, 2, "per", TokenType.SUPER)
        return _check(text, 1, "hile", TokenType.WHILE)
    if first == "f":
        if second:
            if second == "a":
                return _check(text, 2, "lse", TokenType.FALSE)
            if second == "o":
                return _check(text, 2, "r", TokenType.FOR)
            if second == "n":
                return TokenType.FN
            if second == "r":
                return _check(text, 2, "om", TokenType.FROM)
            return TokenType.IDENTIFIER
        return _check(text, 1, "atch", TokenType.MATCH)
    if first in _SIMPLE_KEYWORDS:
        rest, kind = _SIMPLE_KEYWORDS[first]
        return _check(text, 1, rest, kind)
    return TokenType.IDENTIFIER


class Scanner:
    """Produces tokens one at a time from a source string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._start = 0
        self._current = 0
        self.line = 1

    def _at_end(self) -> bool:
        return self._current >= len(self._source) or self._source[self._current] == "\0"

    def _peek(self) -> str:
        return "\0" if self._at_end() else self._source[self._current]

    def _peek_next(self) -> str:
        if self._at_end() or self._current + 1 >= len(self._source):
            return "\0"
        return self._source[self._current + 1]

    def _advance(self) -> str:
        char = self._source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _make(self, kind: TokenType) -> Token:
        return Token(kind, self._source[self._start:self._current], self.line)

    def _error(self, message: str) -> Token:
        return Token(TokenType.ERROR, message, self.line)

    def _skip_whitespace(self) -> None:
        while True:
            char = self._peek()
            if char in (" ", "\r", "\t"):
                self._advance()
            elif char == "\n":
                self.line += 1
                self._advance()
            elif char == "/" and self._peek_next() == "/":
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                return

    def _string(self, quote: str) -> Token:
        while not self._at_end():
            char = self._peek()
            if char == quote:
                break
            if char == "\\":
                self._advance()
                if not self._at_end():
                    self._advance()
                continue
            if char == "\n":
                self.line += 1
            self._advance()

        if self._at_end():
            return self._error("Unterminated String")
        self._advance()
        return self._make(TokenType.STRING)

    def _number(self) -> Token:
        while self._peek() in _DIGITS:
            self._advance()
        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._advance()
            while self._peek() in _DIGITS:
                self._advance()
            return self._make(TokenType.FLOAT)
        return self._make(TokenType.INT)

    def _identifier(self) -> Token:
        while self._peek() in _ALPHA or self._peek() in _DIGITS:
            self._advance()
        return self._make(_identifier_type(self._source[self._start:self._current]))

    def scan_token(self) -> Token:
        """Scan and return the next token; EOF is returned repeatedly at the end."""
        self._skip_whitespace()
        self._start = self._current
        if self._at_end():
            return self._make(TokenType.EOF)

        char = self._advance()
        if char in _DIGITS:
            return self._number()
        if char in _IDENTIFIER_START:
            return self._identifier()
        if char in _SINGLE_CHAR:
            return self._make(_SINGLE_CHAR[char])
        if char in _WITH_EQUAL:
            plain, with_equal = _WITH_EQUAL[char]
            return self._make(with_equal if self._match("=") else plain)
        if char == "*":
            if self._match("*"):
                return self._make(TokenType.STAR_STAR)
            if self._match("="):
                return self._make(TokenType.STAR_EQUAL)
            return self._make(TokenType.STAR)
        if char in ("!", "="):
            # A lone '!' is scanned with the same rules as '='.
            if char == "!" and self._match("="):
                return self._make(TokenType.BANG_EQUAL)
            if self._match("="):
                return self._make(TokenType.EQUAL_EQUAL)
            if self._match(">"):
                return self._make(TokenType.EQUAL_ARROW)
            return self._make(TokenType.EQUAL)
        if char == "<":
            if self._match("<"):
                return self._make(TokenType.LEFT_SHIFT)
            return self._make(TokenType.LESS_EQUAL if self._match("=") else TokenType.LESS)
        if char == ">":
            if self._match(">"):
                return self._make(TokenType.RIGHT_SHIFT)
            return self._make(TokenType.GREATER_EQUAL if self._match("=") else TokenType.GREATER)
        if char in ('"', "'"):
            return self._string(char)
        return self._error("Unexpected character.")

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.scan_token()
            yield token
            if token.type is TokenType.EOF:
                return


def tokenize(source: str) -> list[Token]:
    """Scan the whole source, returning every token up to and including EOF."""
    return list(Scanner(source))