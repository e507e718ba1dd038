"""User-defined function values created by `defn`."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass

from risp.reader.nodes import ASTNode


@dataclass(frozen=True)
class Function:
    """A named function with positional parameters and a body.

    The body is an AST node owned by the function: `from_declaration` copies it
    out of the declaring node, so the function never shares structure with the
    parsed program. Functions do not capture their defining environment; the
    body sees whatever frames are active when it is called.
    """

    identifier: str
    parameter_list: tuple[str, ...]
    body: ASTNode

    @classmethod
    def from_declaration(
        cls, identifier: str, parameter_list: list[str], body: ASTNode
    ) -> Function:
        return cls(identifier, tuple(parameter_list), deepcopy(body))

    @property
    def arity(self) -> int:
        return len(self.parameter_list)

    def __str__(self) -> str:
        return f"#<Function:{self.identifier}>"
