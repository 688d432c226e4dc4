"""Git metadata for the README (branch, short commit, last message)."""

import logging
from pathlib import Path

from readmegen.models.metadata import MetadataMap
from readmegen.utils.process import ProcessRunner

logger = logging.getLogger(__name__)

# Placeholder key -> git arguments
GIT_QUERIES: dict[str, tuple[str, ...]] = {
    "GIT_BRANCH": ("rev-parse", "--abbrev-ref", "HEAD"),
    "GIT_COMMIT": ("rev-parse", "--short", "HEAD"),
    "GIT_MESSAGE": ("log", "-1", "--pretty=%s"),
}


class GitProbe:
    """Queries git for the current branch and last commit.

    A missing git executable, a directory outside any repository or a
    repository without commits all yield N/A for the affected keys.
    """

    def __init__(self, runner: ProcessRunner | None = None, executable: str = "git") -> None:
        """Initialize the probe.

        Args:
            runner: Runner used for git invocations
            executable: git executable name or path
        """
        self.runner = runner or ProcessRunner()
        self.executable = executable

    def collect(self, repo_path: Path) -> MetadataMap:
        """Collect GIT_BRANCH, GIT_COMMIT and GIT_MESSAGE."""
        meta: MetadataMap = {}
        for key, args in GIT_QUERIES.items():
            meta[key] = self.runner.run(repo_path, [self.executable, *args])
        logger.debug("Git: %s@%s", meta["GIT_BRANCH"], meta["GIT_COMMIT"])
        return meta
