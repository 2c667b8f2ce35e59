"""Recursive listing of documents under the content directory."""

from collections.abc import Iterable
from pathlib import Path


def find_markdown_files(root: Path, extensions: Iterable[str] = (".md", ".mdx")) -> list[Path]:
    suffixes = {ext.lower() for ext in extensions}
    return sorted(path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in suffixes)
