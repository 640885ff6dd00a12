"""Regex rules for citation and inclusion commands."""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional

from .config import DEFAULT_CITE_COMMANDS, DEFAULT_EXTENSION, DEFAULT_INCLUDE_COMMANDS

CITE_GROUP = "key"
INCLUDE_GROUP = "file"

logger = logging.getLogger(__name__)


class CiteMatch(NamedTuple):
    """A matched citation command: its raw key list and span in the line."""

    raw_keys: str
    start: int
    end: int


def build_cite_pattern(commands: Iterable[str] = DEFAULT_CITE_COMMANDS) -> re.Pattern:
    """
    Compile citation command shapes into a single rule.

    Each command may carry a star, up to two bracketed arguments, one braced
    key list and one trailing braced argument, e.g.
    ``\\citep*[see][p. 4]{a,b}`` or ``\\textcquote{key}{quoted text}``.
    """
    alternation = "|".join(commands)
    return re.compile(
        r"\\(%s)\*?(?:\[[^\]]*\]){0,2}\{(?P<%s>[^}]*)\}(?:\{[^}]*\})?"
        % (alternation, CITE_GROUP)
    )


def build_include_pattern(commands: Iterable[str] = DEFAULT_INCLUDE_COMMANDS) -> re.Pattern:
    """Compile inclusion command names (literal, not regex) into a single rule."""
    alternation = "|".join(re.escape(c) for c in commands)
    return re.compile(r"\\(?:%s)\{(?P<%s>[^}]*)\}" % (alternation, INCLUDE_GROUP))


def split_keys(raw_keys: str) -> List[str]:
    """Split a comma-separated key list, dropping blanks."""
    keys = []
    for key in raw_keys.split(","):
        key = key.strip()
        if key:
            keys.append(key)
    return keys


def resolve_include(source_file: Path, stem: str, extension: str = DEFAULT_EXTENSION) -> Optional[Path]:
    """
    Resolve an included stem relative to the including file's directory.

    Args:
        source_file: The file containing the inclusion directive.
        stem: The braced argument of the directive.
        extension: Appended when the stem does not already end with it.

    Returns:
        Normalised path of an existing readable file, None otherwise.
    """
    stem = stem.strip()
    if not stem:
        return None
    if not stem.endswith(extension):
        stem = stem + extension

    try:
        resolved = (source_file.parent / stem).resolve()
    except (OSError, ValueError, RuntimeError):
        return None

    if resolved.is_file() and os.access(resolved, os.R_OK):
        return resolved
    return None


class CitePatternMatcher:
    """Finds citation commands in a line of text."""

    def __init__(self, commands: Iterable[str] = DEFAULT_CITE_COMMANDS):
        self.pattern = build_cite_pattern(commands)

    def iter_matches(self, line: str) -> Iterator[CiteMatch]:
        """Yield every citation command found in the line, left to right."""
        for match in self.pattern.finditer(line):
            yield CiteMatch(match.group(CITE_GROUP), match.start(), match.end())


class IncludePatternMatcher:
    """Finds inclusion directives in a line of text."""

    def __init__(
        self,
        commands: Iterable[str] = DEFAULT_INCLUDE_COMMANDS,
        extension: str = DEFAULT_EXTENSION,
    ):
        self.pattern = build_include_pattern(commands)
        self.extension = extension

    def iter_stems(self, line: str) -> Iterator[str]:
        """Yield the raw file stems named by directives in the line."""
        for match in self.pattern.finditer(line):
            yield match.group(INCLUDE_GROUP)

    def iter_includes(self, source_file: Path, line: str) -> Iterator[Path]:
        """
        Yield existing files included by the line.

        Directives naming files that do not exist are dropped silently.
        """
        for stem in self.iter_stems(line):
            resolved = resolve_include(source_file, stem, self.extension)
            if resolved is None:
                logger.debug("Skipping missing include %r in %s", stem, source_file)
                continue
            yield resolved
