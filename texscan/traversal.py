"""Recursive citation extraction over TeX files and their inclusions."""

import logging
import os
from pathlib import Path
from threading import Event
from typing import Iterable, List, Optional, Sequence, Union

from citations.model import ParseResult
from .config import ScanConfig
from .exceptions import ParseCancelled
from .patterns import CitePatternMatcher, IncludePatternMatcher
from .reader import scan_file, scan_line

logger = logging.getLogger(__name__)

# Pseudo-file used for occurrences parsed from a plain string.
TEXT_PLACEHOLDER = Path("")

Source = Union[str, "os.PathLike[str]", Iterable[Union[str, "os.PathLike[str]"]]]


class TexParser:
    """
    Extracts citation keys from TeX documents.

    The compiled patterns are built once and only read afterwards, so one
    parser can serve concurrent parse calls. Each call owns its own result.
    """

    def __init__(self, config: Optional[ScanConfig] = None, cancel_event: Optional[Event] = None):
        self.config = config or ScanConfig()
        self.cancel_event = cancel_event
        self.cite_matcher = CitePatternMatcher(self.config.cite_commands)
        self.include_matcher = IncludePatternMatcher(
            self.config.include_commands, self.config.extension
        )

    def parse(self, source: Source) -> Optional[ParseResult]:
        """
        Parse a string, a single path, or a sequence of paths.

        A str is treated as one line of TeX, not as a file name; pass a Path
        to parse a file.
        """
        if isinstance(source, str):
            return self.parse_text(source)
        if isinstance(source, os.PathLike):
            return self.parse_file(source)
        return self.parse_files(list(source))

    def parse_text(self, text: str) -> ParseResult:
        """Match citations in text as line 1 of a nameless file."""
        result = ParseResult()
        result.record_parsed_files([TEXT_PLACEHOLDER])
        for occurrence in scan_line(TEXT_PLACEHOLDER, 1, text, self.cite_matcher):
            result.record_occurrence(occurrence)
        return result

    def parse_file(self, file: Union[str, "os.PathLike[str]"]) -> Optional[ParseResult]:
        """Parse one file and everything it includes."""
        return self.parse_files([file])

    def parse_files(self, files: Sequence[Union[str, "os.PathLike[str]"]]) -> Optional[ParseResult]:
        """
        Parse files and, batch by batch, every file they include.

        Args:
            files: Top-level files. Missing ones are logged and skipped.

        Returns:
            The collected result, or None if the run was cancelled.
        """
        result = ParseResult()

        batch: List[Path] = []
        for file in files:
            try:
                path = Path(file).resolve()
                exists = path.is_file()
            except (OSError, ValueError):
                logger.error("File does not exist: %s", file)
                continue
            if path in batch:
                continue
            if not exists:
                logger.error("File does not exist: %s", path)
                continue
            batch.append(path)

        try:
            while batch:
                logger.debug("Scanning batch of %d file(s)", len(batch))
                result.record_parsed_files(batch)
                batch = self._scan_batch(batch, result)
        except ParseCancelled as e:
            logger.error("Parsing has been interrupted: %s", e)
            return None

        return result

    def _scan_batch(self, batch: List[Path], result: ParseResult) -> List[Path]:
        """Scan every file of a batch and return newly discovered includes."""
        candidates: List[Path] = []

        for file in batch:
            if self.cancel_event is not None and self.cancel_event.is_set():
                raise ParseCancelled(f"Parsing was cancelled before {file}")
            try:
                for scanned in scan_file(
                    file,
                    self.cite_matcher,
                    self.include_matcher,
                    encoding=self.config.encoding,
                    comment_marker=self.config.comment_marker,
                    cancel_event=self.cancel_event,
                ):
                    for occurrence in scanned.occurrences:
                        result.record_occurrence(occurrence)
                    for include in scanned.includes:
                        if not result.has_file(include) and include not in candidates:
                            candidates.append(include)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("%s while parsing %s: %s", type(e).__name__, file, e)

        return candidates


def parse(source: Source, config: Optional[ScanConfig] = None) -> Optional[ParseResult]:
    """Parse a string, a path, or a sequence of paths with a fresh parser."""
    return TexParser(config).parse(source)
