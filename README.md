# cminus

This package provides parts of the front end of a compiler for a small C-minus language:

- `cminus.ast.Node` is a syntax tree node. It holds a `name`, an optional
  `value` and a list of `children`. A child may be `None` for an optional part
  of the grammar. `render(indent=0)` returns the tree as an outline with two
  spaces of indentation per level. `dump(indent=0, file=None)` writes that
  outline to a stream, which is standard output by default.
- `cminus.semantic` is a semantic analyser with nested scopes. It checks a
  syntax tree for these problems:
  - undeclared variables and functions
  - names declared twice in one scope
  - indexing of a variable that is not an array
  - array indices that are not integers
  - assignments whose two sides have different types

  It also reports the global symbol table and the local symbols of every
  function.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from cminus.ast import Node
from cminus.semantic import analyze

tree = Node("programa", children=[
    Node("declaracao_variavel", children=[
        Node("tipo", "int"),
        Node("id", "x"),
    ]),
    Node("declaracao_funcao", children=[
        Node("tipo", "void"),
        Node("id", "main"),
        Node("comando_composto", children=[
            Node("expressao", children=[
                Node("var", "x"),
                Node("fator", "42"),
            ]),
        ]),
    ]),
])

print(tree.render())
global_scope = analyze(tree)
```

`analyze(root, out=None)` runs the analysis with a new `SemanticAnalyzer`. It
writes the report to `out`, which is standard output by default, and returns
the global `Scope`.

### Node kinds the analyser recognises

| Node name | Meaning |
| --- | --- |
| `declaracao_variavel` | variable declaration |
| `parametro` | parameter |
| `declaracao_funcao` | function declaration |
| `var` | variable use |
| `array_access` | array access |
| `expressao` | assignment, when the node has two or more children |
| `chamada_funcao` | function call; `input` is treated as `int` and `output` as `void` |
| `comando_composto` | block |
| `fator` | numeric literal, when the value starts with a digit |

For a declaration or a parameter, the type keyword is in child 0 and the name
is in child 1. A value of `"vetor"` marks an array. The analyser walks the
children of any other node in order.

### Errors

Two problems stop the analysis and raise `cminus.semantic.SemanticError`:

- using an undeclared variable
- a function declaration without a name

All other problems are reported as diagnostics and the analysis goes on.
Diagnostics are written to standard error, or to the `err` stream given to
`SemanticAnalyzer(err=...)`. They are also collected in
`SemanticAnalyzer.errors`.

### Working with scopes directly

`SemanticAnalyzer` provides:

- `push_scope`
- `pop_scope`
- `add_symbol(name, type_, is_array)`
- `lookup(name)`
- `check(node)`, which returns a `Type`: `INT`, `VOID` or `UNDEFINED`
- `symbol_table_report()`, which covers the innermost scope
- `function_symbols_report()`

The helpers `convert_type` and `format_symbol` and the method
`Symbol.describe` are available as well.

## What the package does not do

The package has no lexer or parser, so it cannot read C-minus source text. It
also generates no code and has no command-line program. Before you call
`analyze`, build the syntax tree yourself from `Node` objects.