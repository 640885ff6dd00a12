"""Path display helpers shared by exporters."""

from pathlib import Path
from typing import Optional


def get_path_str(path: Path, base: Optional[Path] = None) -> str:
    """Get the display string of a path, relative to base when possible."""
    if path == Path(""):
        return "<text>"
    if base is not None:
        try:
            rel_path = path.resolve().relative_to(base.resolve())
            return str(rel_path).replace("\\", "/")
        except ValueError:
            pass
    return str(path).replace("\\", "/")
