"""AST node types produced by the RISP parser.

The node set is closed; the evaluator matches on these classes directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class NumberLiteral:
    value: int


@dataclass
class BooleanLiteral:
    value: bool


@dataclass
class StringLiteral:
    value: str


@dataclass
class Identifier:
    name: str


@dataclass
class ListExpression:
    elements: list[ASTNode] = field(default_factory=list)


@dataclass
class CallExpression:
    name: str
    arguments: list[ASTNode] = field(default_factory=list)


@dataclass
class IfExpression:
    condition: ASTNode
    when_true: ASTNode
    when_false: ASTNode


@dataclass
class FunctionDeclaration:
    identifier: str
    parameter_list: list[str]
    body: ASTNode


ASTNode = Union[
    NumberLiteral,
    BooleanLiteral,
    StringLiteral,
    Identifier,
    ListExpression,
    CallExpression,
    IfExpression,
    FunctionDeclaration,
]
