"""Count function definitions in a single source file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from terrier.utils import (
    UnsupportedFileTypeError,
    _read_source,
    _split_lines,
    get_extension_from_filename,
    render_table,
)

_LANGUAGES = {
    "rs": ("fn", "Rust"),
    "py": ("def", "Python"),
    "js": ("function", "Javascript"),
}


def function_keyword(extension: str) -> str:
    """Return the keyword that introduces a function for the extension."""
    try:
        return _LANGUAGES[extension][0]
    except KeyError:
        raise UnsupportedFileTypeError(extension) from None


@dataclass(frozen=True)
class FuncSummary:
    """Line and function counts for one file."""

    file_name: str
    language: str
    total_lines: int
    functions: int

    def render(self) -> str:
        """Render the summary as a titled table."""
        return render_table(
            [["Total Lines", self.total_lines], ["Functions", self.functions]],
            title=self.file_name,
        )


def func_identification(filename) -> Optional[FuncSummary]:
    """Summarise a file's functions, or return None if it has no extension."""
    path = Path(filename)
    extension = get_extension_from_filename(path)
    if extension is None:
        return None
    keyword = function_keyword(extension)
    lines = _split_lines(_read_source(path))
    return FuncSummary(
        file_name=path.name,
        language=_LANGUAGES[extension][1],
        total_lines=len(lines),
        functions=sum(1 for line in lines if keyword in line),
    )