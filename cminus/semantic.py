"""Scoped symbol tables and semantic checking of the syntax tree."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from cminus.ast import Node

_GLOBAL_SEPARATOR = "-------------------------------------------"
_FUNCTION_SEPARATOR = "---------------------------------------"
_DIGITS = "0123456789"


class Type(Enum):
    """Types known to the checker."""

    INT = "int"
    VOID = "void"
    UNDEFINED = "indefinido"


class SemanticError(Exception):
    """Raised for errors that stop the analysis."""


@dataclass(frozen=True)
class Symbol:
    """A declared name with its type and whether it is an array."""

    name: str
    type: Type
    is_array: bool = False

    def describe(self) -> str:
        """Return the symbol as one line of a symbol table."""
        return format_symbol(self)


@dataclass
class Scope:
    """One level of the scope stack; symbols are kept in declaration order."""

    symbols: list[Symbol] = field(default_factory=list)

    def find(self, name: str) -> Symbol | None:
        """Return the most recently declared symbol called ``name``."""
        return next((s for s in reversed(self.symbols) if s.name == name), None)

    def newest_first(self) -> Iterator[Symbol]:
        return reversed(self.symbols)


@dataclass
class FunctionSymbols:
    """Snapshot of the local symbols of one function."""

    name: str
    symbols: list[Symbol] = field(default_factory=list)


def convert_type(type_str: str) -> Type:
    """Map a type keyword to a :class:`Type`."""
    if type_str == "int":
        return Type.INT
    if type_str == "void":
        return Type.VOID
    return Type.UNDEFINED


def format_symbol(symbol: Symbol) -> str:
    """Format a symbol the way the symbol tables print it."""
    suffix = " [vetor]" if symbol.is_array else ""
    return f"Nome: {symbol.name:<10} | Tipo: {symbol.type.value:<8}{suffix}"


def _child(node: Node, index: int) -> Node | None:
    return node.children[index] if len(node.children) > index else None


def _child_value(node: Node, index: int) -> str | None:
    child = _child(node, index)
    return child.value if child is not None else None


class SemanticAnalyzer:
    """Walks a syntax tree, maintaining scopes and reporting type errors.

    Non-fatal errors are collected in :attr:`errors` and written to ``err``
    (standard error by default). Use of an undeclared variable raises
    :class:`SemanticError`.
    """

    def __init__(self, err: TextIO | None = None) -> None:
        self.scopes: list[Scope] = []
        self.function_symbols: list[FunctionSymbols] = []
        self.errors: list[str] = []
        self._err = err

    @property
    def current_scope(self) -> Scope | None:
        return self.scopes[-1] if self.scopes else None

    def _report(self, message: str) -> None:
        self.errors.append(message)
        stream = self._err if self._err is not None else sys.stderr
        stream.write(message + "\n")

    def push_scope(self) -> Scope:
        """Open a new innermost scope and return it."""
        scope = Scope()
        self.scopes.append(scope)
        return scope

    def pop_scope(self) -> Scope | None:
        """Close the innermost scope; does nothing when none is open."""
        return self.scopes.pop() if self.scopes else None

    def add_symbol(self, name: str, type_: Type, is_array: bool = False) -> Symbol | None:
        """Declare ``name`` in the innermost scope, reporting redeclarations."""
        scope = self.current_scope or self.push_scope()
        if scope.find(name) is not None:
            self._report(f"Erro semântico: '{name}' já declarada neste escopo.")
            return None
        symbol = Symbol(name, type_, bool(is_array))
        scope.symbols.append(symbol)
        return symbol

    def lookup(self, name: str) -> Symbol | None:
        """Find ``name`` searching from the innermost scope outwards."""
        for scope in reversed(self.scopes):
            symbol = scope.find(name)
            if symbol is not None:
                return symbol
        return None

    def symbol_table_report(self) -> str:
        """Return the symbol table of the innermost scope as text."""
        scope = self.current_scope
        if scope is None:
            return "Nenhum escopo ativo.\n"
        lines = [format_symbol(s) for s in scope.newest_first()]
        lines.append(_GLOBAL_SEPARATOR)
        return "".join(line + "\n" for line in lines)

    def function_symbols_report(self) -> str:
        """Return the local symbols of every analysed function, newest first."""
        parts = []
        for entry in reversed(self.function_symbols):
            parts.append(f"\n--- Símbolos locais da função '{entry.name}' ---\n")
            parts.extend(format_symbol(s) + "\n" for s in reversed(entry.symbols))
            parts.append(_FUNCTION_SEPARATOR + "\n")
        return "".join(parts)

    def _declaration(self, node: Node) -> Type:
        type_str = _child_value(node, 0)
        type_ = convert_type(type_str) if type_str else Type.UNDEFINED
        name = _child_value(node, 1)
        if name:
            self.add_symbol(name, type_, node.value == "vetor")
        return type_

    def _function(self, node: Node) -> Type:
        type_str = _child_value(node, 0)
        type_ = convert_type(type_str) if type_str else Type.UNDEFINED
        name = _child_value(node, 1)
        if name is None:
            raise SemanticError("Erro semântico: declaração de função sem nome.")
        if name:
            self.add_symbol(name, type_, False)
        scope = self.push_scope()
        for child in node.children[2:]:
            self.check(child)
        self.function_symbols.append(FunctionSymbols(name, list(scope.symbols)))
        self.pop_scope()
        return type_

    def _array_access(self, node: Node) -> Type:
        name = _child_value(node, 0)
        symbol = self.lookup(name)
        if symbol is None:
            self._report(f"Erro semântico: variável '{name}' não declarada.")
            return Type.UNDEFINED
        if not symbol.is_array:
            self._report(f"Erro semântico: variável '{name}' não é um vetor.")
            return Type.UNDEFINED
        if self.check(node.children[1]) is not Type.INT:
            self._report(f"Erro semântico: índice de vetor '{name}' deve ser do tipo int.")
            return Type.UNDEFINED
        return symbol.type

    def _assignment(self, node: Node) -> Type:
        left = self.check(node.children[0])
        right = self.check(node.children[1])
        if left is not right:
            target = _child_value(node, 0)
            self._report(
                "Erro semântico: incompatibilidade de tipos na atribuição de "
                f"'{target if target is not None else '(null)'}'."
            )
            return Type.UNDEFINED
        return left

    def _call(self, node: Node) -> Type:
        name = _child_value(node, 0)
        if not name:
            return Type.UNDEFINED
        if name == "input":
            return Type.INT
        if name == "output":
            return Type.VOID
        symbol = self.lookup(name)
        if symbol is None:
            self._report(f"Erro semântico: função '{name}' não declarada.")
            return Type.UNDEFINED
        return symbol.type

    def _block(self, node: Node) -> Type:
        self.push_scope()
        for child in node.children:
            self.check(child)
        inner = self.pop_scope()
        parent = self.current_scope
        if parent is not None and inner is not None:
            # Block locals are folded into the enclosing scope.
            parent.symbols.extend(reversed(inner.symbols))
        return Type.UNDEFINED

    def check(self, node: Node | None) -> Type:
        """Check ``node`` and its subtree, returning the node's type."""
        if node is None:
            return Type.UNDEFINED
        kind = node.name
        if kind == "fator" and node.value and node.value[0] in _DIGITS:
            return Type.INT
        if kind == "declaracao_variavel" or kind == "parametro":
            return self._declaration(node)
        if kind == "declaracao_funcao":
            return self._function(node)
        if kind == "var" and node.value:
            symbol = self.lookup(node.value)
            if symbol is None:
                raise SemanticError(
                    f"Erro semântico: variável '{node.value}' não declarada."
                )
            return symbol.type
        if kind == "array_access" and len(node.children) >= 2 and _child_value(node, 0):
            return self._array_access(node)
        if kind == "expressao" and len(node.children) >= 2:
            return self._assignment(node)
        if kind == "chamada_funcao":
            return self._call(node)
        if kind == "comando_composto":
            return self._block(node)
        result = Type.UNDEFINED
        for child in node.children:
            result = self.check(child)
        return result

    def analyze(self, root: Node | None, out: TextIO | None = None) -> Scope:
        """Run the full analysis, print the reports and return the global scope."""
        stream = out if out is not None else sys.stdout
        stream.write("Iniciando a análise semântica...\n")
        try:
            global_scope = self.push_scope()
            self.check(root)
            stream.write("\nTabela de Símbolos (escopo global):\n")
            stream.write(self.symbol_table_report())
            self.pop_scope()
            stream.write(self.function_symbols_report())
        finally:
            self.function_symbols.clear()
            self.scopes.clear()
        return global_scope


def analyze(root: Node | None, out: TextIO | None = None) -> Scope:
    """Analyse ``root`` with a fresh analyzer and return the global scope."""
    return SemanticAnalyzer().analyze(root, out)