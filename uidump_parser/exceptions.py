# uidump_parser/exceptions.py
from __future__ import annotations
from typing import Optional


class UIDumpError(Exception):
    """Base exception for uidump-parser."""


class ConfigError(UIDumpError):
    """Raised when command-line or YAML configuration is invalid."""


class DocumentLoadError(UIDumpError):
    """Raised when a UI dump file cannot be read or is not well-formed XML."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        super().__init__(self.__str__())

    def __str__(self) -> str:
        base = f"could not parse file {self.path}"
        if self.reason:
            base += f" ({self.reason})"
        return base
