"""Formatting helpers for ids, classes and attributes inside an open tag.

Values are emitted verbatim. Quotes, ampersands and angle brackets are not
escaped; callers that need escaping must do it before building the tree.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .nodes import Attribute, Node, VoidNode


def format_id(node_id: Optional[str]) -> str:
    if node_id is None:
        return ""
    return f'id="{node_id}"'


def format_classes(classes: Iterable[str]) -> str:
    names = list(classes)
    if not names:
        return ""
    return f'class="{" ".join(names)}"'


def format_attributes(attributes: Iterable[Attribute]) -> str:
    """Render ``key="value"`` pairs, skipping pairs whose value is ``None``."""
    return " ".join(f'{key}="{value}"' for key, value in attributes if value is not None)


def open_tag(node: Node) -> str:
    """Return the text between ``<`` and ``>`` of the node's opening tag.

    Empty fragments are dropped before joining so the result never carries
    doubled, leading or trailing spaces.
    """
    fragments = [
        node.name,
        format_id(node.id),
        format_classes(node.classes),
        format_attributes(node.attributes),
    ]
    if isinstance(node, VoidNode) and node.self_closing_slash:
        fragments.append("/")
    return " ".join(fragment for fragment in fragments if fragment)


__all__ = ["format_attributes", "format_classes", "format_id", "open_tag"]
