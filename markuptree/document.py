"""Root ``<html>`` node and its render entry point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .nodes import Attribute, ContainerNode, Node
from .serialize import DEFAULT_MAX_DEPTH, render


@dataclass(frozen=True, eq=False)
class HtmlDocument(ContainerNode):
    """Container fixed to ``html`` that turns the whole tree into text.

    ``xmlns`` and ``lang`` are folded into the attribute list, in that order,
    and are skipped on output when absent.
    """

    name: str = field(default="html", init=False)
    attributes: Sequence[Attribute] = field(default=(), init=False)
    # Keyword-only so the positional order is (id, classes, xmlns, lang).
    children: List[Node] = field(default_factory=list, repr=False, kw_only=True)
    xmlns: Optional[str] = None
    lang: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", (("xmlns", self.xmlns), ("lang", self.lang)))
        super().__post_init__()

    def render(self, minified: bool = False, *, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> str:
        """Serialize the tree rooted here.

        Each call starts from a fresh buffer, so rendering an unchanged tree
        twice yields identical text.
        """
        return render(self, minified, max_depth=max_depth)

    def __str__(self) -> str:
        return self.render()


__all__ = ["HtmlDocument"]
