"""Syntax tree nodes and scoped semantic analysis for a small C-minus language."""

__version__ = "0.1.0"
__all__ = ["ast", "semantic"]