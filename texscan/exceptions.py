"""Exceptions raised by the TeX citation scanner."""

from typing import Optional


class TexScanError(Exception):
    """Base exception for all scanner errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class ParseCancelled(TexScanError):
    """
    Raised when a parse run is interrupted.

    Never escapes the traversal: the run is abandoned and the caller gets None.
    """


class ConfigError(TexScanError):
    """Raised when a scan configuration is invalid."""
