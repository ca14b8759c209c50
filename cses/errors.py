"""Exception hierarchy for reading and writing CSES documents.

Each error also derives from the builtin it refines, so callers that already
catch ``FileNotFoundError``, ``ValueError`` or ``OSError`` keep working.
"""

from pathlib import Path


class CSESError(Exception):
    """Base class for every error raised by the cses package."""


class CSESNotFoundError(CSESError, FileNotFoundError):
    """The document path does not exist or cannot be opened for reading."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"File {self.path} Not Found")

    def __str__(self) -> str:
        return self.args[0]


class CSESFormatError(CSESError, ValueError):
    """The document is not valid YAML or is not shaped like a CSES document."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.message = message
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            super().__init__(f"{self.path}: {message}")
        else:
            super().__init__(message)


class CSESWriteError(CSESError, OSError):
    """The document could not be written to its destination."""

    def __init__(self, path: str | Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"Failed to write {self.path}: {message}")

    def __str__(self) -> str:
        return self.args[0]
