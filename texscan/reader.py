"""Line-by-line scanning of a single TeX file."""

from pathlib import Path
from threading import Event
from typing import Iterator, List, NamedTuple, Optional

from citations.model import Occurrence
from .config import DEFAULT_COMMENT_MARKER, DEFAULT_ENCODING
from .exceptions import ParseCancelled
from .patterns import CitePatternMatcher, IncludePatternMatcher, split_keys


class ScannedLine(NamedTuple):
    """Citations and inclusions found on one line."""

    number: int
    text: str
    occurrences: List[Occurrence]
    includes: List[Path]


def is_skippable(line: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> bool:
    """Check if a line is blank or a full-line comment."""
    stripped = line.strip()
    return not stripped or stripped.startswith(comment_marker)


def scan_line(
    file: Path,
    number: int,
    line: str,
    cite_matcher: CitePatternMatcher,
) -> List[Occurrence]:
    """
    Extract citation occurrences from one line.

    Every key of a command shares that command's span.
    """
    occurrences = []
    for match in cite_matcher.iter_matches(line):
        for key in split_keys(match.raw_keys):
            occurrences.append(Occurrence(key, file, number, match.start, match.end, line))
    return occurrences


def scan_file(
    file: Path,
    cite_matcher: CitePatternMatcher,
    include_matcher: IncludePatternMatcher,
    encoding: str = DEFAULT_ENCODING,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
    cancel_event: Optional[Event] = None,
) -> Iterator[ScannedLine]:
    """
    Scan a file and yield the lines that cite or include something.

    Lines are numbered from 1. The file is closed on every exit path,
    including when the consumer stops early or a read fails.

    Raises:
        ParseCancelled: If cancel_event is set or a read is interrupted.
        OSError, UnicodeDecodeError: On read failures; lines already yielded
            stay valid.
    """
    try:
        with file.open("r", encoding=encoding) as handle:
            for number, raw in enumerate(handle, start=1):
                if cancel_event is not None and cancel_event.is_set():
                    raise ParseCancelled(f"Parsing of {file} was cancelled")

                line = raw.rstrip("\r\n")
                if is_skippable(line, comment_marker):
                    continue

                occurrences = scan_line(file, number, line, cite_matcher)
                includes = list(include_matcher.iter_includes(file, line))
                if occurrences or includes:
                    yield ScannedLine(number, line, occurrences, includes)
    except InterruptedError as e:
        raise ParseCancelled(f"Reading {file} was interrupted", e)
