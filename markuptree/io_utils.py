"""Reading tree files, writing rendered output and reporting to stderr."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Input not found: {file_path}")
    return file_path.read_text(encoding=encoding)


def write_text(path: PathLike, text: str, *, encoding: str = "utf-8") -> Path:
    """Write rendered output to ``path``, creating missing parent directories."""

    file_path = Path(path)
    if file_path.is_dir():
        raise IsADirectoryError(f"Output is a directory: {file_path}")
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding=encoding)
    return file_path


def warn(message: str, *, tag: Optional[str] = None, source: Optional[PathLike] = None) -> None:
    """Print one diagnostic line to stderr as ``[tag] source: message``."""

    prefix = f"[{tag}] " if tag else ""
    where = f"{source}: " if source is not None else ""
    print(f"{prefix}{where}{message}", file=sys.stderr)


__all__ = ["read_text", "warn", "write_text"]
