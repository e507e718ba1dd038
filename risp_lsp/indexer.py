"""
Static index of a RISP document, built without evaluating any code.

We run the RISP tokenizer and parser over the text and record:
- top-level definitions: (defn name [params] body) and (define name value)
- the first parse error, with its position
- paren balance and unterminated strings, for warnings

Everything here is a pure function of the document text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from risp.errors import RispParseError, RispUnexpectedToken
from risp.reader.parser import TokenStream
from risp.reader.tokenizer import Token, TokenKind, scan


@dataclass
class SymbolDef:
    name: str
    kind: str  # "function" | "var"
    line: int
    col: int
    detail: str = ""


@dataclass
class ParseProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    parse_error: Optional[ParseProblem] = None
    paren_balance: int = 0
    has_unmatched_quote: bool = False


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _is_name(token: Token, value: Optional[str] = None) -> bool:
    return token.kind is TokenKind.NAME and (value is None or token.value == value)


def _collect_definitions(text: str, tokens: List[Token], offsets: List[int], idx: DocumentIndex) -> None:
    depth = 0
    for i, tok in enumerate(tokens):
        if tok.kind is TokenKind.OPENING_PARENTHESIS:
            depth += 1
            if depth != 1 or i + 2 >= len(tokens):
                continue
            head, name = tokens[i + 1], tokens[i + 2]
            if not _is_name(name):
                continue
            line, col = position_from_offset(text, offsets[i + 2])
            if head.kind is TokenKind.DEFN_KEYWORD:
                params = []
                for param in tokens[i + 4:]:
                    if not _is_name(param):
                        break
                    params.append(param.value)
                detail = f"(defn {name.value} [{' '.join(params)}])"
                idx.symbols[name.value] = SymbolDef(name.value, "function", line, col, detail)
            elif _is_name(head, "define"):
                idx.symbols[name.value] = SymbolDef(name.value, "var", line, col, f"(define {name.value} ...)")
        elif tok.kind is TokenKind.CLOSING_PARENTHESIS:
            depth = max(depth - 1, 0)


def _error_offset(error: RispParseError, stream: TokenStream, tokens: List[Token], offsets: List[int], text: str) -> int:
    if not isinstance(error, RispUnexpectedToken):
        return len(text)
    # The offending token is either buffered by a peek or among those consumed
    last = min(stream.consumed + len(stream.buffer), len(tokens)) - 1
    for i in range(last, -1, -1):
        if tokens[i] == error.token:
            return offsets[i]
    return len(text)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    scanned = list(scan(text))
    offsets = [offset for offset, _ in scanned]
    tokens = [token for _, token in scanned]

    for tok in tokens:
        if tok.kind is TokenKind.OPENING_PARENTHESIS:
            idx.paren_balance += 1
        elif tok.kind is TokenKind.CLOSING_PARENTHESIS:
            idx.paren_balance -= 1
    idx.has_unmatched_quote = text.count('"') % 2 == 1

    _collect_definitions(text, tokens, offsets, idx)

    stream = TokenStream(tokens)
    try:
        for _ in stream.parse_all():
            pass
    except RispParseError as e:
        line, col = position_from_offset(text, _error_offset(e, stream, tokens, offsets, text))
        idx.parse_error = ParseProblem(str(e), line, col)

    return idx
