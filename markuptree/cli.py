"""Command-line interface for markuptree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from jinja2 import TemplateError
from pydantic import ValidationError

from .catalog import load_catalog
from .io_utils import warn, write_text
from .loader import load_document
from .serialize import DEFAULT_MAX_DEPTH, TreeDepthError


def _parse_vars(pairs: Iterable[str]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"Invalid --var '{pair}': expected KEY=VALUE.")
        variables[key] = value
    return variables


def _max_depth(value: int) -> Optional[int]:
    return None if value <= 0 else value


def _handle_render(args: argparse.Namespace) -> None:
    tree_path = Path(args.tree)
    variables = _parse_vars(args.var or [])
    try:
        catalog = load_catalog(Path(args.catalog)) if args.catalog else None
        document = load_document(tree_path, variables, catalog)
        output = document.render(args.minified, max_depth=_max_depth(args.max_depth))
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except TemplateError as exc:
        raise SystemExit(f"Template error in {tree_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {tree_path}: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid tree in {tree_path}: {exc}") from exc
    except TreeDepthError as exc:
        raise SystemExit(f"Cannot render {tree_path}: {exc}") from exc

    if args.out:
        try:
            written = write_text(args.out, output)
        except IsADirectoryError as exc:
            raise SystemExit(str(exc)) from exc
        warn(f"Wrote {len(output)} character(s) to {written}")
        return
    sys.stdout.write(output)


def _handle_tags(args: argparse.Namespace) -> None:
    try:
        catalog = load_catalog(Path(args.catalog)) if args.catalog else load_catalog()
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid tag catalog: {exc}") from exc
    tags = catalog.by_kind(args.kind) if args.kind else catalog.tags
    for tag in tags:
        print(f"{tag.name}\t{','.join(tag.kinds)}\t{tag.description or ''}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build and render markup trees.")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML tree file to HTML.",
        description="Expand a tree file as a Jinja template, then render it as HTML.",
    )
    render_parser.add_argument("tree", help="Path to the YAML tree file.")
    render_parser.add_argument("--out", default=None, help="Write output here instead of stdout.")
    render_parser.add_argument(
        "--minified",
        action="store_true",
        help="Render on a single line without indentation.",
    )
    render_parser.add_argument(
        "--var",
        action="append",
        metavar="KEY=VALUE",
        help="Template variable available inside the tree file (repeatable).",
    )
    render_parser.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="Fail when the tree nests deeper than this; 0 disables the limit.",
    )
    render_parser.add_argument(
        "--catalog",
        default=None,
        help="Tag catalog YAML used for warnings (defaults to the bundled one).",
    )
    render_parser.set_defaults(func=_handle_render)

    tags_parser = subparsers.add_parser(
        "tags",
        help="List known elements.",
        description="Print the tag catalog as tab-separated name, kinds and description.",
    )
    tags_parser.add_argument(
        "--kind",
        choices=["void", "content", "container"],
        default=None,
        help="Only list elements that support this kind.",
    )
    tags_parser.add_argument("--catalog", default=None, help="Tag catalog YAML to list.")
    tags_parser.set_defaults(func=_handle_tags)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
