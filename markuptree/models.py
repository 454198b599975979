"""Pydantic models describing a document tree in YAML."""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .document import HtmlDocument
from .nodes import Attribute, ContainerNode, ContentNode, Node, PlainNode, VoidNode


class TreeModel(BaseModel):
    """Base for tree entries; numeric YAML scalars are read as text."""

    model_config = ConfigDict(coerce_numbers_to_str=True)


class ElementFields(TreeModel):
    """Fields shared by every tag-bearing entry."""

    tag: str = Field(..., min_length=1, description="Tag name, e.g. div.")
    id: Optional[str] = Field(None, description="Element id.")
    classes: List[str] = Field(
        default_factory=list, description="Class names in output order."
    )
    attributes: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Attributes in output order; null values are left out.",
    )

    def attribute_pairs(self) -> List[Attribute]:
        return list(self.attributes.items())


class PlainSpec(TreeModel):
    """Raw text inlined into its parent."""

    kind: Literal["plain"] = "plain"
    content: str = Field(..., description="Text emitted verbatim.")


class VoidSpec(ElementFields):
    """Self-closing element."""

    kind: Literal["void"] = "void"
    slash: bool = Field(False, description="End the tag with ' />' instead of '>'.")


class ContentSpec(ElementFields):
    """Element with a single text body."""

    kind: Literal["content"] = "content"
    content: str = Field("", description="Text between the open and close tags.")


class ContainerSpec(ElementFields):
    """Element holding child entries."""

    kind: Literal["container"] = "container"
    children: List["NodeSpec"] = Field(default_factory=list, description="Child entries.")


NodeSpec = Annotated[
    Union[PlainSpec, VoidSpec, ContentSpec, ContainerSpec],
    Field(discriminator="kind"),
]

ContainerSpec.model_rebuild()


class DocumentSpec(TreeModel):
    """Top-level document; becomes the ``<html>`` root."""

    id: Optional[str] = Field(None, description="Id of the html element.")
    classes: List[str] = Field(default_factory=list, description="Classes of the html element.")
    xmlns: Optional[str] = Field(None, description="XML namespace of the document.")
    lang: Optional[str] = Field(None, description="Language of the document.")
    children: List[NodeSpec] = Field(default_factory=list, description="Top-level entries.")

    def to_document(self) -> HtmlDocument:
        document = HtmlDocument(id=self.id, classes=self.classes, xmlns=self.xmlns, lang=self.lang)
        _append_all(document, self.children)
        return document

    def iter_elements(self) -> List[Union[VoidSpec, ContentSpec, ContainerSpec]]:
        """Return every tag-bearing entry in document order."""

        found: List[Union[VoidSpec, ContentSpec, ContainerSpec]] = []
        pending: List[NodeSpec] = list(reversed(self.children))
        while pending:
            entry = pending.pop()
            if isinstance(entry, PlainSpec):
                continue
            found.append(entry)
            if isinstance(entry, ContainerSpec):
                pending.extend(reversed(entry.children))
        return found


def _to_node(entry: NodeSpec) -> Node:
    if isinstance(entry, PlainSpec):
        return PlainNode(entry.content)
    if isinstance(entry, VoidSpec):
        return VoidNode(
            entry.tag,
            entry.slash,
            id=entry.id,
            classes=entry.classes,
            attributes=entry.attribute_pairs(),
        )
    if isinstance(entry, ContentSpec):
        return ContentNode(
            entry.tag,
            entry.content,
            id=entry.id,
            classes=entry.classes,
            attributes=entry.attribute_pairs(),
        )
    container = ContainerNode(
        entry.tag,
        id=entry.id,
        classes=entry.classes,
        attributes=entry.attribute_pairs(),
    )
    _append_all(container, entry.children)
    return container


def _append_all(parent: ContainerNode, entries: List[NodeSpec]) -> None:
    for entry in entries:
        parent.append_child(_to_node(entry))


__all__ = [
    "ContainerSpec",
    "ContentSpec",
    "DocumentSpec",
    "NodeSpec",
    "PlainSpec",
    "VoidSpec",
]
