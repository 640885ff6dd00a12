"""Scanner package for extracting citation keys from TeX sources."""

from .config import ScanConfig, load_config
from .exceptions import ConfigError, ParseCancelled, TexScanError
from .patterns import CitePatternMatcher, IncludePatternMatcher, split_keys
from .reader import scan_file, scan_line
from .traversal import TexParser, parse

__all__ = [
    "ScanConfig",
    "load_config",
    "ConfigError",
    "ParseCancelled",
    "TexScanError",
    "CitePatternMatcher",
    "IncludePatternMatcher",
    "split_keys",
    "scan_file",
    "scan_line",
    "TexParser",
    "parse",
]
