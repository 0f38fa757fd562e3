"""Exception classes for the media type registry."""

from pathlib import Path
from typing import Any


class MediaTypeError(Exception):
    """Base exception for media type registry errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def __str__(self) -> str:
        if self.data:
            return f"{self.message}: {self.data}"
        return self.message


class UnknownExtensionError(MediaTypeError):
    """Lookup of an extension that was never registered."""

    def __init__(self, extension: str):
        super().__init__(f"Unknown extension: {extension}", {"extension": extension})
        self.extension = extension

    def __str__(self) -> str:
        return self.message


class SeedFileError(MediaTypeError):
    """The seed file could not be opened or read."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Unable to open {path}", {"reason": reason})
        self.path = Path(path)
