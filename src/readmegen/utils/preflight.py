"""Availability checks for the external tools readmegen consults.

Neither git nor java is required: the README still renders without them,
but the placeholders they feed fall back to N/A. `readmegen check` reports
which sections would be degraded before the build runs.
"""

import shutil
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from readmegen.utils.process import NOT_AVAILABLE, ProcessRunner


@dataclass(frozen=True)
class ExternalTool:
    """An executable queried during generation.

    Attributes:
        name: Display name
        version_args: Arguments that print the tool's version
        placeholders: Keys that become N/A when the tool is missing
    """

    name: str
    version_args: tuple[str, ...]
    placeholders: tuple[str, ...]


GIT = ExternalTool("git", ("--version",), ("GIT_BRANCH", "GIT_COMMIT", "GIT_MESSAGE"))
JAVA = ExternalTool("java", ("-version",), ("JAVA_VERSION",))


@dataclass
class ToolCheck:
    """Outcome of checking one tool.

    Attributes:
        name: Tool name
        available: Whether the executable was found on PATH
        version: First line of the version output, if any
        path: Resolved executable path
        degraded: Placeholders that will be N/A because the tool is missing
    """

    name: str
    available: bool
    version: str | None = None
    path: str | None = None
    degraded: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if self.available:
            return ""
        return f"{', '.join(self.degraded)} will be N/A"


@dataclass
class PreflightResult:
    """All tool checks of one run."""

    checks: list[ToolCheck] = field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return [f"{c.name} not found: {c.message}" for c in self.checks if not c.available]

    @property
    def ready(self) -> bool:
        """Return True if every tool is available."""
        return all(c.available for c in self.checks)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "ready": self.ready,
            "checks": [{**asdict(c), "message": c.message} for c in self.checks],
            "warnings": self.warnings,
        }


class PreflightChecker:
    """Looks up git and java and asks them for their versions.

    Usage:
        result = PreflightChecker().check_all(git_executable="git")
        for warning in result.warnings:
            print(warning)
    """

    def __init__(self, runner: ProcessRunner | None = None) -> None:
        self.runner = runner or ProcessRunner(timeout=10)

    def version_of(self, executable: str, version_args: tuple[str, ...]) -> str | None:
        """Return the first line the executable prints for its version.

        java writes its banner to stderr; the runner merges both streams.
        """
        output = self.runner.run(Path.cwd(), [executable, *version_args])
        if output == NOT_AVAILABLE:
            return None
        return output.splitlines()[0]

    def check(self, tool: ExternalTool, executable: str | None = None) -> ToolCheck:
        """Check one tool, optionally under a different executable name."""
        path = shutil.which(executable or tool.name)
        if path is None:
            return ToolCheck(name=tool.name, available=False, degraded=tool.placeholders)

        return ToolCheck(
            name=tool.name,
            available=True,
            version=self.version_of(path, tool.version_args),
            path=path,
        )

    def check_all(self, git_executable: str = "git") -> PreflightResult:
        """Check git (under the configured executable) and java."""
        return PreflightResult(checks=[self.check(GIT, git_executable), self.check(JAVA)])
