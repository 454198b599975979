"""Fluent builder deriving one method per element from the tag catalog.

Example::

    doc = html(lang="en")
    with doc.div(classes=["main"]) as main:
        main.h1("Hi")
        main.img(src="logo.png", alt="Logo", slash=True)
    print(doc.render())

Tags spelled like Python keywords take a trailing underscore (``doc.del_``),
as do such attributes (``label(for_="name")``); dashed attribute names use
underscores (``meta(http_equiv="refresh")``).
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterable, Optional, Sequence

from .catalog import TagCatalog, TagSpec, load_catalog
from .document import HtmlDocument
from .nodes import Attribute, ContainerNode, ContentNode, Node, PlainNode, VoidNode
from .serialize import DEFAULT_MAX_DEPTH


class TreeBuilder:
    """Appends nodes to a container; container elements return nested builders."""

    def __init__(self, node: ContainerNode, catalog: TagCatalog | None = None) -> None:
        self.node = node
        self.catalog = catalog if catalog is not None else load_catalog()

    def __enter__(self) -> "TreeBuilder":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_") or name in ("node", "catalog"):
            raise AttributeError(name)
        spec = self.catalog.get(name)
        if spec is None:
            raise AttributeError(f"unknown element '{name}'")
        return partial(self.element, spec.name)

    def append(self, child: Node) -> Node:
        self.node.append_child(child)
        return child

    def plain(self, text: str) -> PlainNode:
        """Inline raw text; it is rendered without any tag around it."""
        return self.append(PlainNode(text))

    def void(
        self,
        name: str,
        slash: bool = False,
        id: Optional[str] = None,
        classes: Sequence[str] = (),
        attributes: Iterable[Attribute] = (),
    ) -> VoidNode:
        node = VoidNode(name, slash, id=id, classes=classes, attributes=tuple(attributes))
        return self.append(node)

    def content(
        self,
        name: str,
        content: str = "",
        id: Optional[str] = None,
        classes: Sequence[str] = (),
        attributes: Iterable[Attribute] = (),
    ) -> ContentNode:
        node = ContentNode(name, content, id=id, classes=classes, attributes=tuple(attributes))
        return self.append(node)

    def container(
        self,
        name: str,
        id: Optional[str] = None,
        classes: Sequence[str] = (),
        attributes: Iterable[Attribute] = (),
    ) -> "TreeBuilder":
        node = ContainerNode(name, id=id, classes=classes, attributes=tuple(attributes))
        self.append(node)
        return TreeBuilder(node, self.catalog)

    def element(
        self,
        tag: str,
        text: Optional[str] = None,
        /,
        *,
        id: Optional[str] = None,
        classes: Sequence[str] = (),
        slash: bool = False,
        attributes: Iterable[Attribute] = (),
        **attrs: Any,
    ) -> Any:
        """Append a catalog element and return the node, or a builder for containers.

        Elements with both a text and a container form (``p``) pick the text
        form when ``text`` is given. ``content=`` is accepted as an alias for
        ``text`` on elements that have no ``content`` attribute.
        """

        spec = self._spec(tag)
        if text is None and "content" in attrs and not _declares(spec, "content"):
            text = attrs.pop("content")
        pairs = spec.attribute_pairs(attrs) + list(attributes)

        if spec.has_kind("void"):
            if text is not None:
                raise TypeError(f"{spec.method_name}() is a void element and takes no text")
            return self.void(spec.name, slash, id=id, classes=classes, attributes=pairs)
        if text is not None and spec.has_kind("content"):
            return self.content(spec.name, text, id=id, classes=classes, attributes=pairs)
        if spec.has_kind("container"):
            if text is not None:
                raise TypeError(f"{spec.method_name}() holds child elements; use plain() for text")
            return self.container(spec.name, id=id, classes=classes, attributes=pairs)
        return self.content(spec.name, "", id=id, classes=classes, attributes=pairs)

    def _spec(self, tag: str) -> TagSpec:
        spec = self.catalog.get(tag)
        if spec is None:
            raise AttributeError(f"unknown element '{tag}'")
        return spec


def _declares(spec: TagSpec, attribute: str) -> bool:
    return any(item.name == attribute for item in spec.attributes)


class DocumentBuilder(TreeBuilder):
    """Builder rooted at an ``<html>`` document."""

    node: HtmlDocument

    @property
    def document(self) -> HtmlDocument:
        return self.node

    def render(self, minified: bool = False, *, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> str:
        return self.node.render(minified, max_depth=max_depth)

    def __str__(self) -> str:
        return self.render()


def html(
    id: Optional[str] = None,
    classes: Sequence[str] = (),
    xmlns: Optional[str] = None,
    lang: Optional[str] = None,
    catalog: TagCatalog | None = None,
) -> DocumentBuilder:
    """Start a document; ``xmlns`` and ``lang`` land on the ``<html>`` tag."""

    document = HtmlDocument(id=id, classes=classes, xmlns=xmlns, lang=lang)
    return DocumentBuilder(document, catalog)


__all__ = ["DocumentBuilder", "TreeBuilder", "html"]
