"""Declarative element catalog backing the fluent builder."""

from __future__ import annotations

import keyword
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .nodes import Attribute

DEFAULT_CATALOG_PATH = Path(__file__).parent / "tags.yaml"

TagKind = Literal["void", "content", "container"]


def python_identifier(name: str) -> str:
    """Spell a tag or attribute name as a usable Python identifier."""

    identifier = name.replace("-", "_")
    if keyword.iskeyword(identifier):
        identifier += "_"
    return identifier


class AttributeSpec(BaseModel):
    """Attribute recognized by an element, with its keyword-argument spelling."""

    name: str = Field(..., description="Attribute key as written in markup.")
    arg: Optional[str] = Field(
        None, description="Keyword argument name; derived from the key when omitted."
    )

    @model_validator(mode="after")
    def _derive_arg(self) -> "AttributeSpec":
        if self.arg is None:
            self.arg = python_identifier(self.name)
        return self


class TagSpec(BaseModel):
    """One element of the catalog."""

    name: str = Field(..., description="Tag name, e.g. div.")
    kinds: List[TagKind] = Field(..., description="Node variants the tag can produce.")
    description: Optional[str] = Field(None, description="What the element represents.")
    attributes: List[AttributeSpec] = Field(
        default_factory=list, description="Recognized attributes in render order."
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def _expand_attribute_names(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    @model_validator(mode="after")
    def _check_consistency(self) -> "TagSpec":
        if not self.kinds:
            raise ValueError(f"{self.name}: kinds must not be empty")
        if "void" in self.kinds and len(set(self.kinds)) > 1:
            raise ValueError(f"{self.name}: a void element cannot also hold content or children")
        seen: set[str] = set()
        for attribute in self.attributes:
            if attribute.name in seen:
                raise ValueError(f"{self.name}: duplicate attribute '{attribute.name}'")
            seen.add(attribute.name)
        return self

    @property
    def method_name(self) -> str:
        return python_identifier(self.name)

    def has_kind(self, kind: str) -> bool:
        return kind in self.kinds

    def attribute_pairs(self, values: Dict[str, Any]) -> List[Attribute]:
        """Map keyword arguments onto the declared attributes, in declared order.

        Undeclared attributes become absent pairs. Unknown keywords raise
        ``TypeError`` the way a Python call with a bad keyword would.
        """

        by_arg = {attribute.arg: attribute for attribute in self.attributes}
        unknown = [key for key in values if key not in by_arg]
        if unknown:
            raise TypeError(f"{self.method_name}() got an unexpected keyword argument '{unknown[0]}'")

        pairs: List[Attribute] = []
        for attribute in self.attributes:
            value = values.get(attribute.arg)
            pairs.append((attribute.name, None if value is None else str(value)))
        return pairs


class TagCatalog(BaseModel):
    """Collection of element specs addressable by tag or method name."""

    tags: List[TagSpec] = Field(default_factory=list, description="Known elements.")

    @model_validator(mode="after")
    def _check_unique(self) -> "TagCatalog":
        names = [tag.name for tag in self.tags]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate tag names: {', '.join(duplicates)}")
        return self

    def get(self, name: str) -> Optional[TagSpec]:
        for tag in self.tags:
            if name in (tag.name, tag.method_name):
                return tag
        return None

    def names(self) -> List[str]:
        return [tag.name for tag in self.tags]

    def by_kind(self, kind: str) -> List[TagSpec]:
        return [tag for tag in self.tags if tag.has_kind(kind)]


def _read_catalog(path: Path) -> TagCatalog:
    if not path.exists():
        raise FileNotFoundError(f"Tag catalog not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return TagCatalog.model_validate(data)


@lru_cache(maxsize=1)
def _default_catalog() -> TagCatalog:
    return _read_catalog(DEFAULT_CATALOG_PATH)


def load_catalog(path: Path | None = None) -> TagCatalog:
    """Load a tag catalog; the bundled catalog is parsed once and reused."""

    if path is None:
        return _default_catalog()
    return _read_catalog(Path(path))


__all__ = [
    "AttributeSpec",
    "DEFAULT_CATALOG_PATH",
    "TagCatalog",
    "TagKind",
    "TagSpec",
    "load_catalog",
    "python_identifier",
]
