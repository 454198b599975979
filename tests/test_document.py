import unittest

from bs4 import BeautifulSoup

from markuptree.document import HtmlDocument
from markuptree.nodes import ContainerNode, ContentNode, VoidNode, append_child


def _scenario() -> HtmlDocument:
    root = HtmlDocument(lang="en")
    div = ContainerNode("div", classes=["main"])
    append_child(div, ContentNode("h1", "Hi"))
    append_child(root, div)
    return root


class HtmlDocumentTest(unittest.TestCase):
    def test_indented_scenario(self) -> None:
        expected = (
            '<html lang="en">\n'
            '    <div class="main">\n'
            "        <h1>Hi</h1>\n"
            "    </div>\n"
            "</html>\n"
        )
        self.assertEqual(_scenario().render(), expected)

    def test_minified_scenario(self) -> None:
        self.assertEqual(
            _scenario().render(minified=True),
            '<html lang="en"><div class="main"><h1>Hi</h1></div></html>',
        )

    def test_str_is_indented_render(self) -> None:
        root = _scenario()
        self.assertEqual(str(root), root.render())

    def test_render_is_idempotent(self) -> None:
        root = _scenario()
        self.assertEqual(root.render(), root.render())
        self.assertEqual(root.render(True), root.render(True))

    def test_root_attributes_order_and_suppression(self) -> None:
        root = HtmlDocument(id="doc", classes=["a", "b"], xmlns="http://www.w3.org/1999/xhtml", lang="en")
        self.assertEqual(root.name, "html")
        self.assertEqual(
            root.attributes,
            (("xmlns", "http://www.w3.org/1999/xhtml"), ("lang", "en")),
        )
        self.assertEqual(
            root.render(minified=True),
            '<html id="doc" class="a b" xmlns="http://www.w3.org/1999/xhtml" lang="en"></html>',
        )

    def test_positional_arguments_follow_id_classes_xmlns_lang(self) -> None:
        root = HtmlDocument("doc", ["a"], "http://www.w3.org/1999/xhtml", "en")
        self.assertEqual(root.id, "doc")
        self.assertEqual(root.classes, ("a",))
        self.assertEqual(root.children, [])
        self.assertEqual(
            root.attributes,
            (("xmlns", "http://www.w3.org/1999/xhtml"), ("lang", "en")),
        )
        self.assertEqual(
            root.render(minified=True),
            '<html id="doc" class="a" xmlns="http://www.w3.org/1999/xhtml" lang="en"></html>',
        )

    def test_children_can_be_passed_by_keyword(self) -> None:
        heading = ContentNode("h1", "Hi")
        root = HtmlDocument(lang="en", children=[heading])
        self.assertEqual(root.children, [heading])
        self.assertEqual(root.render(minified=True), '<html lang="en"><h1>Hi</h1></html>')

    def test_bare_root(self) -> None:
        root = HtmlDocument()
        self.assertEqual(root.attributes, (("xmlns", None), ("lang", None)))
        self.assertEqual(root.render(), "<html>\n</html>\n")
        self.assertEqual(root.render(minified=True), "<html></html>")

    def test_output_parses_as_html(self) -> None:
        root = _scenario()
        append_child(root, VoidNode("img", True, attributes=[("src", "logo.png"), ("alt", "Logo")]))
        soup = BeautifulSoup(root.render(), "html.parser")
        self.assertEqual(soup.html["lang"], "en")
        self.assertEqual(soup.select_one("div.main > h1").get_text(), "Hi")
        self.assertEqual(soup.find("img")["src"], "logo.png")


if __name__ == "__main__":
    unittest.main()
