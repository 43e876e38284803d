import io

from cminus.ast import Node


def sample_tree():
    return Node(
        "programa",
        None,
        [
            Node("declaracao_variavel", None, [Node("tipo", "int"), Node("id", "x")]),
            None,
            Node("fator", "42"),
        ],
    )


def test_render_single_node_with_value():
    assert Node("var", "x").render() == "var: x\n"


def test_render_empty_value_is_omitted():
    assert Node("programa", "").render() == "programa\n"


def test_render_indents_children_two_spaces_per_level():
    lines = sample_tree().render().splitlines()
    assert lines[0] == "programa"
    assert lines[1] == "  declaracao_variavel"
    assert lines[2] == "    tipo: int"
    assert lines[3] == "    id: x"
    assert lines[4] == "  fator: 42"


def test_render_skips_none_children():
    lines = sample_tree().render().splitlines()
    assert len(lines) == 5


def test_render_initial_indent_applies_to_every_line():
    plain = sample_tree().render().splitlines()
    shifted = sample_tree().render(2).splitlines()
    assert shifted == ["    " + line for line in plain]


def test_dump_writes_rendered_text():
    buffer = io.StringIO()
    tree = sample_tree()
    tree.dump(1, buffer)
    assert buffer.getvalue() == tree.render(1)


def test_dump_defaults_to_stdout(capsys):
    Node("fator", "7").dump()
    assert capsys.readouterr().out == "fator: 7\n"