"""Best-effort external command execution.

Version-control data is optional for a README, so command failures never
propagate: every failure collapses into the NOT_AVAILABLE sentinel.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


class ProcessRunner:
    """Runs external commands and returns their trimmed combined output.

    Usage:
        runner = ProcessRunner()
        branch = runner.run(project_root, ["git", "rev-parse", "--abbrev-ref", "HEAD"])
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize the runner.

        Args:
            timeout: Seconds to wait for each command (None waits indefinitely)
        """
        self.timeout = timeout

    def run(self, cwd: Path, argv: Sequence[str]) -> str:
        """Run a command and capture stdout and stderr together.

        Args:
            cwd: Working directory for the command
            argv: Command and arguments

        Returns:
            Trimmed output, or NOT_AVAILABLE if the command is missing, exits
            non-zero, fails with an I/O error or prints nothing
        """
        try:
            result = subprocess.run(
                list(argv),
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            logger.debug("Command %s failed to start: %s", " ".join(argv), e)
            return NOT_AVAILABLE

        if result.returncode != 0:
            logger.debug("Command %s exited with %d", " ".join(argv), result.returncode)
            return NOT_AVAILABLE

        output = result.stdout.decode("utf-8", errors="replace").strip()
        return output or NOT_AVAILABLE
