import re

import pytest

from markuptree.nodes import ContainerNode, ContentNode, Node, PlainNode, VoidNode
from markuptree.serialize import (
    INDENT,
    TreeDepthError,
    render,
    render_indented,
    render_minified,
)


def _sample_tree() -> ContainerNode:
    body = ContainerNode("body", classes=["page"])
    nav = ContainerNode("nav", id="top")
    nav.append_child(ContentNode("a", "Home", attributes=[("href", "/"), ("target", None)]))
    nav.append_child(VoidNode("br", True))
    body.append_child(nav)
    body.append_child(PlainNode("loose text"))
    section = ContainerNode("section")
    section.append_child(ContentNode("p", "Deep"))
    section.append_child(ContainerNode("div"))
    body.append_child(section)
    return body


def _count_lines(node: Node) -> int:
    if isinstance(node, ContainerNode):
        return 2 + sum(_count_lines(child) for child in node.children)
    return 1


def test_indented_layout():
    expected = (
        '<body class="page">\n'
        '    <nav id="top">\n'
        '        <a href="/">Home</a>\n'
        "        <br />\n"
        "    </nav>\n"
        "    loose text\n"
        "    <section>\n"
        "        <p>Deep</p>\n"
        "        <div>\n"
        "        </div>\n"
        "    </section>\n"
        "</body>\n"
    )
    assert render(_sample_tree()) == expected


def test_minified_layout():
    expected = (
        '<body class="page"><nav id="top"><a href="/">Home</a><br /></nav>'
        "loose text<section><p>Deep</p><div></div></section></body>"
    )
    assert render(_sample_tree(), minified=True) == expected


def test_line_count_matches_node_count():
    tree = _sample_tree()
    output = render(tree)
    assert output.endswith("\n")
    assert len(output.splitlines()) == _count_lines(tree)


def test_indentation_grows_four_spaces_per_level():
    root = ContainerNode("div")
    current = root
    for _ in range(5):
        child = ContainerNode("div")
        current.append_child(child)
        current = child
    current.append_child(PlainNode("leaf"))

    lines = render(root).splitlines()
    opens = lines[:6]
    closes = lines[7:]
    for depth, line in enumerate(opens):
        assert line == " " * (4 * depth) + "<div>"
    assert lines[6] == " " * 24 + "leaf"
    for depth, line in zip(range(5, -1, -1), closes):
        assert line == " " * (4 * depth) + "</div>"


def test_empty_container_has_adjacent_open_and_close_lines():
    assert render(ContainerNode("ul")) == "<ul>\n</ul>\n"
    assert render(ContainerNode("ul"), minified=True) == "<ul></ul>"


def test_minified_output_has_no_layout_whitespace():
    output = render(_sample_tree(), minified=True)
    assert "\n" not in output
    assert not re.search(r">\s+<", output)


def test_minified_keeps_whitespace_from_literal_content():
    node = ContainerNode("pre")
    node.append_child(PlainNode("  spaced\n  lines"))
    assert render(node, minified=True) == "<pre>  spaced\n  lines</pre>"


def test_void_slash_flag():
    assert render(VoidNode("br", True), minified=True) == "<br />"
    assert render(VoidNode("br", False), minified=True) == "<br>"
    assert render(VoidNode("br", True)) == "<br />\n"


def test_content_is_not_escaped():
    node = ContentNode("p", "a < b & c", attributes=[("title", '"q"')])
    assert render(node, minified=True) == '<p title=""q"">a < b & c</p>'


def test_plain_node_ignores_element_fields():
    assert render(PlainNode("just text")) == "just text\n"


def test_render_indented_appends_to_existing_buffer_with_prefix():
    parts = ["<!-- head -->\n"]
    render_indented(ContentNode("h1", "Hi"), parts, INDENT)
    assert "".join(parts) == "<!-- head -->\n    <h1>Hi</h1>\n"


def test_render_minified_appends_to_buffer():
    parts: list = []
    render_minified(ContentNode("h1", "Hi"), parts)
    render_minified(VoidNode("hr"), parts)
    assert "".join(parts) == "<h1>Hi</h1><hr>"


def test_render_is_idempotent():
    tree = _sample_tree()
    assert render(tree) == render(tree)
    assert render(tree, minified=True) == render(tree, minified=True)


def test_render_reflects_later_appends():
    tree = ContainerNode("div")
    before = render(tree, minified=True)
    tree.append_child(PlainNode("x"))
    assert before == "<div></div>"
    assert render(tree, minified=True) == "<div>x</div>"


def test_shared_child_is_rendered_at_each_position():
    shared = ContentNode("span", "s")
    tree = ContainerNode("div")
    tree.append_child(shared)
    tree.append_child(shared)
    assert render(tree, minified=True) == "<div><span>s</span><span>s</span></div>"


def _nested(depth: int) -> ContainerNode:
    root = ContainerNode("div")
    current = root
    for _ in range(depth):
        child = ContainerNode("div")
        current.append_child(child)
        current = child
    return root


def test_deep_tree_renders_without_hitting_recursion_limit():
    output = render(_nested(5000), minified=True, max_depth=None)
    assert output.count("<div>") == 5001
    assert output.endswith("</div>" * 5001)


def test_depth_limit_raises_tree_depth_error():
    with pytest.raises(TreeDepthError) as excinfo:
        render(_nested(20), max_depth=10)
    assert excinfo.value.max_depth == 10
    assert isinstance(excinfo.value, RecursionError)


def test_depth_limit_allows_tree_at_the_limit():
    assert render(_nested(10), minified=True, max_depth=10).count("<div>") == 11


def test_cycle_is_reported_instead_of_looping():
    node = ContainerNode("div")
    node.append_child(node)
    with pytest.raises(TreeDepthError):
        render(node, minified=True, max_depth=50)


def test_unknown_node_type_is_rejected():
    with pytest.raises(TypeError):
        render(object())  # type: ignore[arg-type]
