"""Shared helpers: supported file types, extension checks and table rendering."""

from __future__ import annotations

import errno
import re
from pathlib import Path
from typing import Iterable, Optional, Sequence

from tabulate import tabulate
from termcolor import colored

EXCLUDED_DIRECTORIES = frozenset(
    {
        "venv",
        "env",
        "uv.lock",
        "node_modules",
        "__pycache__",
        "site-packages",
        "dist",
        "build",
        "target",
        ".git",
    }
)

SUPPORTED_TYPES = ("py", "rs", "js")

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class UnsupportedFileTypeError(ValueError):
    """Raised when a file's extension is not one of SUPPORTED_TYPES."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"File type not supported: {extension!r}. "
            f"Must be one of {list(SUPPORTED_TYPES)}"
        )


def get_extension_from_filename(filename) -> Optional[str]:
    """Return the supported extension of an existing file.

    Returns None when the file has no extension, raises FileNotFoundError
    when it does not exist and UnsupportedFileTypeError for other types.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, "File not found", str(path))
    if not path.suffix:
        return None
    extension = path.suffix[1:]
    if extension not in SUPPORTED_TYPES:
        raise UnsupportedFileTypeError(extension)
    return extension


def _split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping a trailing empty line and any CR."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_source(path) -> str:
    """Read a UTF-8 file without translating line endings."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _visible_width(text: str) -> int:
    return len(_ANSI_ESCAPE.sub("", text))


def render_table(
    rows: Iterable[Sequence[object]],
    title: Optional[str] = None,
    style: str = "simple_grid",
) -> str:
    """Render rows as a table.

    With a title, the title is centred above the table in blue. Without one,
    the first row becomes the highlighted header row.
    """
    cells = [[str(cell) for cell in row] for row in rows]
    if title is None:
        if not cells:
            return ""
        headers = [colored(cell, "blue", attrs=["bold"]) for cell in cells[0]]
        return tabulate(cells[1:], headers=headers, tablefmt=style, disable_numparse=True)

    body = tabulate(cells, tablefmt=style, disable_numparse=True)
    width = max((_visible_width(line) for line in body.splitlines()), default=0)
    heading = colored(title.center(max(width, len(title))).rstrip(), "blue")
    return f"{heading}\n{body}" if body else heading