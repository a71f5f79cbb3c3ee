"""Find where functions defined in one file show up across a codebase."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Iterator

from terrier.utils import (
    EXCLUDED_DIRECTORIES,
    SUPPORTED_TYPES,
    _read_source,
    render_table,
)

_FUNCTION_PATTERNS = {
    "py": re.compile(r"def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\((.*?)\)"),
    "rs": re.compile(r"fn\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\((.*?)\)"),
    "js": re.compile(r"function\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\((.*?)\)"),
}


def _excluded(name: str) -> bool:
    return name in EXCLUDED_DIRECTORIES or name.startswith(".")


def _walk_files(root: Path) -> Iterator[Path]:
    if _excluded(root.name or str(root)):
        return
    if root.is_file():
        yield root
        return
    yield from _walk_directory(root)


def _walk_directory(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as scan:
        entries = sorted(scan, key=lambda entry: entry.name)
    for entry in entries:
        if _excluded(entry.name):
            continue
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_directory(Path(entry.path))
        elif entry.is_file(follow_symlinks=False):
            yield Path(entry.path)


class CodeLinkAnalyzer:
    """Collects source files, their functions and where those functions appear."""

    def __init__(self) -> None:
        self.file_contents: dict[str, tuple[str, str]] = {}
        self.extracted_functions: dict[str, list[str]] = {}
        self._call_graph: dict[str, list[str]] = {}

    def file_content_extractor(self, path) -> None:
        """Read every supported file under path, keyed by file name."""
        for file_path in _walk_files(Path(path)):
            extension = file_path.suffix[1:]
            if extension in SUPPORTED_TYPES:
                self.file_contents[file_path.name] = (extension, _read_source(file_path))

    def function_extractor(self) -> None:
        """Extract function signatures from every collected file."""
        for name, (extension, contents) in self.file_contents.items():
            pattern = _FUNCTION_PATTERNS.get(extension)
            if pattern is None:
                print(
                    f"Warning: Unsupported file type '{extension}', skipping file: {name}",
                    file=sys.stderr,
                )
                continue
            for match in pattern.finditer(contents):
                self.extracted_functions.setdefault(name, []).append(match.group(0))

    def overlaps(self) -> None:
        """Record, for every extracted function, the files that reference it."""
        for file_name, (_, contents) in self.file_contents.items():
            for source, functions in self.extracted_functions.items():
                for function in functions:
                    if re.search(re.escape(function) + r"[\s(]", contents):
                        key = f"{source}::{function}"
                        self._call_graph.setdefault(key, []).append(file_name)

    def link_rows(self) -> list[tuple[str, str, str]]:
        """Return (source file, function, references) rows ordered by key."""
        rows = []
        for key in sorted(self._call_graph):
            parts = key.split("::")
            if len(parts) >= 2:
                rows.append((parts[0], parts[1], ", ".join(self._call_graph[key])))
        return rows

    def link_builder(self) -> str:
        """Render the call graph as a table."""
        header = ("Source File", "Function Name", "References")
        return render_table([header, *self.link_rows()], style="grid")