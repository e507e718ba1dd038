"""
  RISP parser

Recursive descent over the token list with one token of lookahead:

    expr     ::= NUMBER | BOOLEAN | STRING | NAME
               | "-" NUMBER
               | "(" "if" expr expr expr ")"
               | "(" "defn" NAME "[" NAME* "]" expr ")"
               | "(" "list" expr* ")"
               | "(" NAME expr* ")"
    program  ::= expr*
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from risp.errors import RispMissingToken, RispUnexpectedToken
from risp.reader.nodes import (
    ASTNode,
    BooleanLiteral,
    CallExpression,
    FunctionDeclaration,
    Identifier,
    IfExpression,
    ListExpression,
    NumberLiteral,
    StringLiteral,
)
from risp.reader.tokenizer import Token, TokenKind

LIST_FORM = "list"


class TokenStream:
    """Cursor over a token sequence, shared by nested parse_node calls."""

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.buffer: list[Token] = []
        # Number of tokens consumed so far
        self.consumed = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens, None)
        if tok is not None:
            self.consumed += 1
        return tok

    def at_end(self) -> bool:
        return self.peek() is None

    def expect(self, kind: TokenKind) -> Token:
        """Consume the next token, which must be of the given kind."""
        tok = self.advance()
        if tok is None:
            raise RispMissingToken(f"Expected {kind.name}, reached end of input")
        if tok.kind is not kind:
            raise RispUnexpectedToken(tok)
        return tok

    def parse_node(self) -> ASTNode:
        tok = self.advance()
        if tok is None:
            raise RispMissingToken("Expected an expression, reached end of input")

        match tok.kind:
            case TokenKind.NUMBER:
                return NumberLiteral(tok.value)
            case TokenKind.BOOLEAN:
                return BooleanLiteral(tok.value)
            case TokenKind.STRING:
                return StringLiteral(tok.value)
            case TokenKind.NAME:
                return Identifier(tok.value)
            case TokenKind.NEGATIVE_SYMBOL:
                operand = self.parse_node()
                if not isinstance(operand, NumberLiteral):
                    raise RispUnexpectedToken(tok, "'-' must be followed by a number")
                return NumberLiteral(-operand.value)
            case TokenKind.OPENING_PARENTHESIS:
                return self._parse_form()

        raise RispUnexpectedToken(tok)

    def parse_all(self) -> Iterator[ASTNode]:
        while not self.at_end():
            yield self.parse_node()

    # --- Parenthesised forms ---
    def _parse_form(self) -> ASTNode:
        head = self.peek()
        if head is None:
            raise RispMissingToken("Expected a form after '('")

        if head.kind is TokenKind.IF_KEYWORD:
            self.advance()
            return self._parse_if()
        if head.kind is TokenKind.DEFN_KEYWORD:
            self.advance()
            return self._parse_function_declaration()
        if head.kind is TokenKind.NAME:
            if head.value == LIST_FORM:
                self.advance()
                return ListExpression(self._parse_until_closing())
            return self._parse_call()

        raise RispUnexpectedToken(head)

    def _parse_until_closing(self) -> list[ASTNode]:
        """Parse nodes up to and including the closing parenthesis."""
        items: list[ASTNode] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise RispMissingToken("Unmatched '('")
            if tok.kind is TokenKind.CLOSING_PARENTHESIS:
                self.advance()
                return items
            items.append(self.parse_node())

    def _parse_call(self) -> CallExpression:
        callee = self.expect(TokenKind.NAME)
        return CallExpression(callee.value, self._parse_until_closing())

    def _parse_if(self) -> IfExpression:
        condition = self.parse_node()
        when_true = self.parse_node()
        when_false = self.parse_node()
        self.expect(TokenKind.CLOSING_PARENTHESIS)
        return IfExpression(condition, when_true, when_false)

    def _parse_function_declaration(self) -> FunctionDeclaration:
        identifier = self.expect(TokenKind.NAME).value
        self.expect(TokenKind.OPENING_BRACKET)

        parameter_list: list[str] = []
        while True:
            tok = self.advance()
            if tok is None:
                raise RispMissingToken("Unterminated parameter list")
            if tok.kind is TokenKind.CLOSING_BRACKET:
                break
            if tok.kind is not TokenKind.NAME:
                raise RispUnexpectedToken(tok)
            parameter_list.append(tok.value)

        body = self.parse_node()
        self.expect(TokenKind.CLOSING_PARENTHESIS)
        return FunctionDeclaration(identifier, parameter_list, body)


def _as_stream(tokens: TokenStream | Iterable[Token]) -> TokenStream:
    return tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)


def parse_node(tokens: TokenStream | Iterable[Token]) -> ASTNode:
    """Parse exactly one expression, leaving the stream positioned after it."""
    return _as_stream(tokens).parse_node()


def parse(tokens: TokenStream | Iterable[Token]) -> list[ASTNode]:
    """Parse a whole program into its top-level expressions."""
    return list(_as_stream(tokens).parse_all())
