"""Citation result model."""

from .model import Occurrence, ParseResult

__all__ = ["Occurrence", "ParseResult"]
