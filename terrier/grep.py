"""Fuzzy keyword search over the lines of a single file."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from terrier.utils import _read_source, _split_lines, render_table


def fuzzy_match(line: str, pattern: str) -> bool:
    """Return whether the pattern's characters occur in order within the line.

    Matching is smart-case: case-insensitive unless the pattern has an
    uppercase character.
    """
    if not any(char.isupper() for char in pattern):
        line = line.lower()
    remaining = iter(line)
    return all(char in remaining for char in pattern)


def count_matches(lines: Iterable[str], keyword: str) -> int:
    """Count the lines that fuzzily match the keyword."""
    return sum(1 for line in lines if fuzzy_match(line, keyword))


@dataclass(frozen=True)
class GrepSummary:
    """Result of searching one file for a keyword."""

    keyword: str
    file_name: str
    total_lines: int
    matches: int

    @property
    def match_density(self) -> float:
        """Percentage of lines that matched."""
        if self.total_lines == 0:
            return math.nan
        return self.matches / self.total_lines * 100.0

    @property
    def density_text(self) -> str:
        density = self.match_density
        return "NaN%" if math.isnan(density) else f"{density:.2f}%"

    def render(self) -> str:
        """Render the summary as a titled table."""
        return render_table(
            [
                ["Total Lines", self.total_lines],
                ["Matches", self.matches],
                ["Match Density", self.density_text],
            ],
            title=f"{self.keyword} in {self.file_name}",
        )


def search_file_for_keyword(keyword: str, filename) -> GrepSummary:
    """Search a file line by line for the keyword."""
    path = Path(filename)
    lines = _split_lines(_read_source(path))
    return GrepSummary(
        keyword=keyword,
        file_name=path.name,
        total_lines=len(lines),
        matches=count_matches(lines, keyword),
    )