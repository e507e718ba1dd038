"""
  RISP tokenizer

- Single left-to-right scan, one character of lookahead
- Never fails: text that is not a valid literal is folded into the nearest
  number or name scan, and malformed digit runs are dropped

    - whitespace        -> separator, otherwise ignored
    - ( ) [ ] -         -> fixed tokens
    - "..."             -> STRING, verbatim, unterminated strings run to end of input
    - digit run         -> NUMBER, only when it is a valid signed 64-bit integer
    - if defn           -> keyword tokens
    - true false        -> BOOLEAN
    - anything else     -> NAME
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TokenKind(Enum):
    OPENING_PARENTHESIS = auto()
    CLOSING_PARENTHESIS = auto()
    OPENING_BRACKET = auto()
    CLOSING_BRACKET = auto()
    NEGATIVE_SYMBOL = auto()
    IF_KEYWORD = auto()
    DEFN_KEYWORD = auto()
    NUMBER = auto()
    STRING = auto()
    BOOLEAN = auto()
    NAME = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Any = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"


OPENING_PARENTHESIS = Token(TokenKind.OPENING_PARENTHESIS)
CLOSING_PARENTHESIS = Token(TokenKind.CLOSING_PARENTHESIS)
OPENING_BRACKET = Token(TokenKind.OPENING_BRACKET)
CLOSING_BRACKET = Token(TokenKind.CLOSING_BRACKET)
NEGATIVE_SYMBOL = Token(TokenKind.NEGATIVE_SYMBOL)
IF_KEYWORD = Token(TokenKind.IF_KEYWORD)
DEFN_KEYWORD = Token(TokenKind.DEFN_KEYWORD)

SINGLE_CHARACTER_TOKENS: dict[str, Token] = {
    "(": OPENING_PARENTHESIS,
    ")": CLOSING_PARENTHESIS,
    "[": OPENING_BRACKET,
    "]": CLOSING_BRACKET,
    "-": NEGATIVE_SYMBOL,
}

KEYWORDS: dict[str, Token] = {
    "if": IF_KEYWORD,
    "defn": DEFN_KEYWORD,
    "true": Token(TokenKind.BOOLEAN, True),
    "false": Token(TokenKind.BOOLEAN, False),
}

# Characters that end a number or name scan besides whitespace
CLOSING_DELIMITERS = frozenset(")]")


def _scan_word(source: str, pos: int) -> int:
    """Return the index just past the word starting at `pos`."""
    n = len(source)
    while pos < n and not source[pos].isspace() and source[pos] not in CLOSING_DELIMITERS:
        pos += 1
    return pos


def _parse_int64(text: str) -> int | None:
    if not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def scan(source: str) -> Iterator[tuple[int, Token]]:
    """Token generator over `source`: yields (offset, token) pairs."""
    pos = 0
    n = len(source)

    while pos < n:
        current_char = source[pos]

        if current_char.isspace():
            pos += 1
            continue

        if current_char.isnumeric():
            end = _scan_word(source, pos)
            number = _parse_int64(source[pos:end])
            if number is not None:
                yield pos, Token(TokenKind.NUMBER, number)
            pos = end
            continue

        if current_char in SINGLE_CHARACTER_TOKENS:
            yield pos, SINGLE_CHARACTER_TOKENS[current_char]
            pos += 1
            continue

        if current_char == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                yield pos, Token(TokenKind.STRING, source[pos + 1:])
                return
            yield pos, Token(TokenKind.STRING, source[pos + 1:end])
            pos = end + 1
            continue

        end = _scan_word(source, pos)
        name = source[pos:end]
        yield pos, KEYWORDS.get(name, Token(TokenKind.NAME, name))
        pos = end


def lex(source: str) -> Iterator[Token]:
    for _, token in scan(source):
        yield token


def tokenize(source: str) -> list[Token]:
    return list(lex(source))
