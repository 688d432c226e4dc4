"""Fatal errors raised by readmegen.

Everything else the generator encounters is absorbed into sentinel values;
only these propagate to the CLI, which turns them into a non-zero exit.
"""

from pathlib import Path


class ReadmegenError(Exception):
    """Base class for unrecoverable generator errors."""


class TemplateError(ReadmegenError):
    """Raised when an existing template file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read template {path}: {reason}")


class OutputWriteError(ReadmegenError):
    """Raised when the rendered README cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
