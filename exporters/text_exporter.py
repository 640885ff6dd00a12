"""Tree-style text exporter for parse results."""

from pathlib import Path
from typing import List, Optional

from citations.model import ParseResult
from .paths import get_path_str


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "


def to_text(
    result: ParseResult,
    base: Optional[Path] = None,
    style: str = "tree",
) -> str:
    """
    Convert a parse result to a human-readable tree.

    Each cited key is a root with one branch per occurrence (file:line),
    followed by the list of parsed files.

    Args:
        result: The parse result to export.
        base: Optional base path for relative path display.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).

    Returns:
        Text report.
    """
    if style == "ascii":
        branch, last = ASCII_BRANCH, ASCII_LAST
    else:
        branch, last = UNICODE_BRANCH, UNICODE_LAST

    lines: List[str] = []

    for key, occurrences in result.key_occurrences.items():
        lines.append(f"{key} ({len(occurrences)})")
        for i, occurrence in enumerate(occurrences):
            connector = last if i == len(occurrences) - 1 else branch
            location = f"{get_path_str(occurrence.file, base)}:{occurrence.line}"
            lines.append(f"{connector}{location} [{occurrence.start}:{occurrence.end}]")

    files = result.parsed_files
    if files:
        if lines:
            lines.append("")
        lines.append(f"Files ({len(files)})")
        for i, file in enumerate(files):
            connector = last if i == len(files) - 1 else branch
            lines.append(f"{connector}{get_path_str(file, base)}")

    return "\n".join(lines)
