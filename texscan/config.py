"""Scan configuration and YAML loading."""

import codecs
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .exceptions import ConfigError


# New citation command shapes may be appended here.
# Valid examples: "citep", "[cC]ite", and "[cC]ite(author|title|year|t|p)?".
DEFAULT_CITE_COMMANDS: Tuple[str, ...] = (
    "[cC]ite(alt|alp|author|authorfull|date|num|p|t|text|title|url|year|yearpar)?",
    "([aA]|[aA]uto|fnote|foot|footfull|full|no|[nN]ote|[pP]aren|[pP]note|[tT]ext|[sS]mart|super)cite",
    "footcitetext",
    "(block|text)cquote",
)
DEFAULT_INCLUDE_COMMANDS: Tuple[str, ...] = ("include", "input")
DEFAULT_EXTENSION = ".tex"
DEFAULT_COMMENT_MARKER = "%"
DEFAULT_ENCODING = "utf-8"

_CONFIG_KEYS = {
    "cite_commands",
    "extra_cite_commands",
    "include_commands",
    "extension",
    "comment_marker",
    "encoding",
}


@dataclass(frozen=True)
class ScanConfig:
    """
    Settings shared by every parse run of a parser.

    Attributes:
        cite_commands: Regex fragments naming citation commands.
        include_commands: Literal names of inclusion commands.
        extension: Extension appended to included stems that lack it.
        comment_marker: Lines starting with this (after indentation) are skipped.
        encoding: Text encoding used to read files.
    """

    cite_commands: Tuple[str, ...] = field(default=DEFAULT_CITE_COMMANDS)
    include_commands: Tuple[str, ...] = field(default=DEFAULT_INCLUDE_COMMANDS)
    extension: str = field(default=DEFAULT_EXTENSION)
    comment_marker: str = field(default=DEFAULT_COMMENT_MARKER)
    encoding: str = field(default=DEFAULT_ENCODING)

    def __post_init__(self):
        if not self.cite_commands:
            raise ConfigError("At least one citation command is required")
        if not self.include_commands:
            raise ConfigError("At least one include command is required")
        if not self.comment_marker:
            raise ConfigError("Comment marker must not be empty")
        for command in self.cite_commands:
            try:
                re.compile(command)
            except re.error as e:
                raise ConfigError(f"Invalid citation command pattern {command!r}: {e}", e)

        from .patterns import build_cite_pattern

        try:
            build_cite_pattern(self.cite_commands)
        except re.error as e:
            raise ConfigError(f"Citation command patterns cannot be combined: {e}", e)

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"Unknown encoding {self.encoding!r}", e)

    def with_extra_cite_commands(self, *commands: str) -> "ScanConfig":
        """Return a copy with additional citation command patterns."""
        return replace(self, cite_commands=self.cite_commands + tuple(commands))


def _as_tuple(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def _as_str(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string")
    return value


def load_config(path: Optional[Union[str, Path]] = None) -> ScanConfig:
    """
    Load a scan configuration from a YAML file.

    Args:
        path: YAML file to read. None returns the defaults.

    Returns:
        The resulting ScanConfig. An empty document yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    if path is None:
        return ScanConfig()

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", e)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}", e)

    if data is None:
        return ScanConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = set(data) - _CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    kwargs: Dict[str, Any] = {}
    if "cite_commands" in data:
        kwargs["cite_commands"] = _as_tuple(data, "cite_commands")
    if "include_commands" in data:
        kwargs["include_commands"] = _as_tuple(data, "include_commands")
    for key in ("extension", "comment_marker", "encoding"):
        if key in data:
            kwargs[key] = _as_str(data, key)

    config = ScanConfig(**kwargs)
    if "extra_cite_commands" in data:
        config = config.with_extra_cite_commands(*_as_tuple(data, "extra_cite_commands"))
    return config
