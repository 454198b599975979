"""Node model for markup trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

PLAIN_NAME = "_plain"

Attribute = Tuple[str, Optional[str]]


def _freeze(node: object, classes: Sequence[str], attributes: Sequence[Attribute]) -> None:
    object.__setattr__(node, "classes", tuple(classes))
    object.__setattr__(node, "attributes", tuple((key, value) for key, value in attributes))


class Node:
    """Common shape shared by every node variant.

    ``name`` is the tag identifier, ``id`` an optional element id, ``classes``
    the class names in insertion order and ``attributes`` ordered
    ``(key, value)`` pairs where a ``None`` value is never rendered.
    """

    name: str
    id: Optional[str]
    classes: Tuple[str, ...]
    attributes: Tuple[Attribute, ...]


@dataclass(frozen=True)
class PlainNode(Node):
    """Raw text inlined into the tree; carries no id, classes or attributes."""

    content: str
    name: str = field(default=PLAIN_NAME, init=False)
    id: Optional[str] = field(default=None, init=False)
    classes: Tuple[str, ...] = field(default=(), init=False)
    attributes: Tuple[Attribute, ...] = field(default=(), init=False)


@dataclass(frozen=True)
class VoidNode(Node):
    """Self-closing element such as ``<br>`` or ``<img />``."""

    name: str
    self_closing_slash: bool = False
    id: Optional[str] = None
    classes: Sequence[str] = ()
    attributes: Sequence[Attribute] = ()

    def __post_init__(self) -> None:
        _freeze(self, self.classes, self.attributes)


@dataclass(frozen=True)
class ContentNode(Node):
    """Single-line element whose body is literal text."""

    name: str
    content: str = ""
    id: Optional[str] = None
    classes: Sequence[str] = ()
    attributes: Sequence[Attribute] = ()

    def __post_init__(self) -> None:
        _freeze(self, self.classes, self.attributes)


@dataclass(frozen=True, eq=False)
class ContainerNode(Node):
    """Element holding an ordered, append-only list of child nodes."""

    name: str
    id: Optional[str] = None
    classes: Sequence[str] = ()
    attributes: Sequence[Attribute] = ()
    children: List[Node] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        _freeze(self, self.classes, self.attributes)
        object.__setattr__(self, "children", list(self.children))

    def append_child(self, child: Node) -> bool:
        """Append ``child`` after the existing children.

        Any node is accepted under any container; there is no nesting,
        duplicate-id or cycle check. Always returns ``True``.
        """
        self.children.append(child)
        return True


def append_child(parent: ContainerNode, child: Node) -> bool:
    return parent.append_child(child)


__all__ = [
    "Attribute",
    "ContainerNode",
    "ContentNode",
    "Node",
    "PLAIN_NAME",
    "PlainNode",
    "VoidNode",
    "append_child",
]
