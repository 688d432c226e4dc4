"""Route entity: one HTTP endpoint declared in a Java source file."""

from dataclasses import dataclass
from typing import Any

NO_HANDLER = "—"


@dataclass(frozen=True)
class Route:
    """HTTP endpoint found by the route scanner.

    Attributes:
        verb: HTTP verb (GET, POST, PUT, DELETE, PATCH)
        path: Class-level base path joined with the method-level path
        source_file: File name (without directories) declaring the route
        handler: Handler method formatted as "name()", or NO_HANDLER
    """

    verb: str
    path: str
    source_file: str
    handler: str = NO_HANDLER

    @property
    def origin(self) -> str:
        """Return "<filename>::<handler>"."""
        return f"{self.source_file}::{self.handler}"

    def to_row(self) -> str:
        """Render the route as a markdown table row (with trailing newline)."""
        return f"| `{self.verb}` | `{self.path}` | `{self.origin}` |\n"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "verb": self.verb,
            "path": self.path,
            "source_file": self.source_file,
            "handler": self.handler,
        }
