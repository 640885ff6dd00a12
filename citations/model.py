"""Result model for storing citation occurrences and visited files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class Occurrence:
    """One location where a citation key was found."""

    key: str
    file: Path
    line: int
    start: int
    end: int
    text: str


class ParseResult:
    """
    Everything collected by one parse run.

    Keys map to their occurrences in discovery order: files in the order they
    were scanned, lines top to bottom within a file. Parsed files are kept as
    an insertion-ordered set.
    """

    def __init__(self):
        self._key_occurrences: Dict[str, List[Occurrence]] = {}
        self._parsed_files: Dict[Path, None] = {}

    @property
    def key_occurrences(self) -> Dict[str, List[Occurrence]]:
        """Return citation keys mapped to their occurrences."""
        return {k: list(v) for k, v in self._key_occurrences.items()}

    @property
    def parsed_files(self) -> List[Path]:
        """Return all parsed files, in the order they were registered."""
        return list(self._parsed_files)

    @property
    def keys(self) -> List[str]:
        """Return citation keys in first-discovery order."""
        return list(self._key_occurrences)

    def record_occurrence(self, occurrence: Occurrence) -> None:
        """
        Append an occurrence under its key.

        The occurrence's file is registered as parsed if it is not already.
        """
        self._parsed_files.setdefault(occurrence.file, None)
        self._key_occurrences.setdefault(occurrence.key, []).append(occurrence)

    def record_parsed_files(self, files: Iterable[Path]) -> None:
        """Register files as parsed."""
        for file in files:
            self._parsed_files.setdefault(file, None)

    def get_occurrences(self, key: str) -> List[Occurrence]:
        """Get all occurrences of a key (empty if never cited)."""
        return list(self._key_occurrences.get(key, []))

    def first_occurrence(self, key: str) -> Occurrence:
        """Get the earliest scanned occurrence of a key."""
        return self._key_occurrences[key][0]

    def has_file(self, file: Path) -> bool:
        """Check if a file has been parsed (or registered for parsing)."""
        return file in self._parsed_files

    def iter_occurrences(self) -> Iterator[Tuple[str, Occurrence]]:
        """Iterate over all occurrences as (key, occurrence) tuples."""
        for key, occurrences in self._key_occurrences.items():
            for occurrence in occurrences:
                yield key, occurrence

    def __len__(self) -> int:
        """Return the number of distinct citation keys."""
        return len(self._key_occurrences)

    def __contains__(self, key: str) -> bool:
        """Check if a key was cited."""
        return key in self._key_occurrences

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return (
            self._key_occurrences == other._key_occurrences
            and list(self._parsed_files) == list(other._parsed_files)
        )

    def __repr__(self) -> str:
        occurrence_count = sum(len(o) for o in self._key_occurrences.values())
        return f"ParseResult(keys={len(self._key_occurrences)}, occurrences={occurrence_count}, files={len(self._parsed_files)})"
