"""JSON exporter for parse results (machine-friendly format)."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from citations.model import ParseResult
from .paths import get_path_str


def to_json(
    result: ParseResult,
    base: Optional[Path] = None,
    indent: int = 2,
) -> str:
    """
    Convert a parse result to JSON format.

    Args:
        result: The parse result to export.
        base: Optional base path for relative path display.
        indent: JSON indentation level.

    Returns:
        JSON string with "files" and "keys"; keys keep first-discovery order.
    """
    files: List[str] = [get_path_str(f, base) for f in result.parsed_files]

    keys: Dict[str, List[Dict[str, Any]]] = {}
    for key, occurrence in result.iter_occurrences():
        keys.setdefault(key, []).append({
            "file": get_path_str(occurrence.file, base),
            "line": occurrence.line,
            "start": occurrence.start,
            "end": occurrence.end,
            "text": occurrence.text,
        })

    data: Dict[str, Any] = {
        "files": files,
        "keys": keys,
    }

    return json.dumps(data, indent=indent)
