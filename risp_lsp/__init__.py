"""RISP Language Server package.

This package provides:
- A pygls-based Language Server for RISP source files.
- A lightweight indexer that runs the RISP reader over a document without
  evaluating it.
"""

__all__ = [
    "server",
    "indexer",
]
