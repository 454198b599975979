"""Indented and minified serialization of node trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from .attrs import open_tag
from .nodes import ContainerNode, ContentNode, Node, PlainNode, VoidNode

INDENT = "    "
DEFAULT_MAX_DEPTH = 1000


class TreeDepthError(RecursionError):
    """Raised when a tree is nested deeper than the configured limit."""

    def __init__(self, max_depth: int, name: str) -> None:
        super().__init__(f"tree depth exceeds {max_depth} at <{name}>")
        self.max_depth = max_depth
        self.name = name


@dataclass(frozen=True)
class _Layout:
    unit: str
    newline: str


INDENTED = _Layout(unit=INDENT, newline="\n")
MINIFIED = _Layout(unit="", newline="")


@dataclass(frozen=True)
class _Visit:
    node: Node
    prefix: str
    depth: int


@dataclass(frozen=True)
class _Close:
    name: str
    prefix: str


def _walk(
    root: Node,
    out: List[str],
    prefix: str,
    layout: _Layout,
    max_depth: Optional[int],
) -> None:
    # Explicit stack: deep trees must not depend on the interpreter's recursion limit.
    stack: List[Union[_Visit, _Close]] = [_Visit(root, prefix, 0)]
    newline = layout.newline
    while stack:
        item = stack.pop()
        if isinstance(item, _Close):
            out.append(f"{item.prefix}</{item.name}>{newline}")
            continue

        node, indent = item.node, item.prefix
        if max_depth is not None and item.depth > max_depth:
            raise TreeDepthError(max_depth, node.name)

        if isinstance(node, PlainNode):
            out.append(f"{indent}{node.content}{newline}")
        elif isinstance(node, VoidNode):
            out.append(f"{indent}<{open_tag(node)}>{newline}")
        elif isinstance(node, ContentNode):
            out.append(f"{indent}<{open_tag(node)}>{node.content}</{node.name}>{newline}")
        elif isinstance(node, ContainerNode):
            out.append(f"{indent}<{open_tag(node)}>{newline}")
            stack.append(_Close(node.name, indent))
            child_prefix = indent + layout.unit
            for child in reversed(node.children):
                stack.append(_Visit(child, child_prefix, item.depth + 1))
        else:
            raise TypeError(f"cannot serialize {type(node).__name__}")


def render_indented(
    node: Node,
    out: List[str],
    indent: str = "",
    *,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> None:
    """Append one line per node to ``out``; containers take an open and a close line.

    Children are indented by one more ``INDENT`` than their container.
    """
    _walk(node, out, indent, INDENTED, max_depth)


def render_minified(
    node: Node,
    out: List[str],
    *,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> None:
    """Append the node to ``out`` with no indentation and no newlines."""
    _walk(node, out, "", MINIFIED, max_depth)


def render(
    node: Node,
    minified: bool = False,
    *,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> str:
    parts: List[str] = []
    if minified:
        render_minified(node, parts, max_depth=max_depth)
    else:
        render_indented(node, parts, max_depth=max_depth)
    return "".join(parts)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "INDENT",
    "TreeDepthError",
    "render",
    "render_indented",
    "render_minified",
]
