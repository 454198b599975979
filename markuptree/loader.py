"""Load document trees from YAML files, optionally written as Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jinja2 import Environment, StrictUndefined

from .catalog import TagCatalog, load_catalog
from .document import HtmlDocument
from .io_utils import read_text, warn
from .models import DocumentSpec


class TreeYamlLoader(yaml.SafeLoader):
    """Safe loader that leaves yes/no/on/off/true/false as plain strings.

    Attribute values such as ``autocomplete: on`` or ``lang: no`` are text in
    HTML; pydantic still turns these words into booleans for ``slash``.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def template_env() -> Environment:
    """Environment used to expand tree files before they are parsed as YAML.

    Autoescaping is off: the tree is emitted verbatim and escaping is left to
    whoever writes the values.
    """

    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_source(source: str, variables: Mapping[str, Any] | None = None) -> str:
    template = template_env().from_string(source)
    return template.render(**dict(variables or {}))


def parse_document(source: str, variables: Mapping[str, Any] | None = None) -> DocumentSpec:
    data = yaml.load(render_source(source, variables), Loader=TreeYamlLoader) or {}
    if not isinstance(data, dict):
        raise ValueError("tree file must contain a mapping at the top level.")
    return DocumentSpec.model_validate(data)


def unknown_elements(spec: DocumentSpec, catalog: TagCatalog) -> list[str]:
    """List entries whose tag the catalog does not know in the requested form."""

    messages: list[str] = []
    for entry in spec.iter_elements():
        tag = catalog.get(entry.tag)
        if tag is None:
            messages.append(f"<{entry.tag}> is not in the tag catalog")
        elif not tag.has_kind(entry.kind):
            kinds = ", ".join(tag.kinds)
            messages.append(f"<{entry.tag}> is listed as {kinds}, not {entry.kind}")
    return messages


def load_document(
    path: Path,
    variables: Mapping[str, Any] | None = None,
    catalog: TagCatalog | None = None,
) -> HtmlDocument:
    """Build an ``HtmlDocument`` from a tree file.

    Tags missing from the catalog only produce a warning; the tree is built
    as written.
    """

    spec = parse_document(read_text(path), variables)
    for message in unknown_elements(spec, catalog or load_catalog()):
        warn(f"{message}; rendering anyway", tag="tree", source=path)
    return spec.to_document()


__all__ = ["TreeYamlLoader", "load_document", "parse_document", "render_source", "template_env", "unknown_elements"]
