"""Host environment properties for the build information section."""

import getpass
import logging
import os
import platform
import re
import shutil
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from readmegen.models.metadata import NOT_AVAILABLE, UNKNOWN, MetadataMap
from readmegen.utils.process import ProcessRunner

logger = logging.getLogger(__name__)

BUILD_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_JAVA_VERSION_PATTERN = re.compile(r'version\s+"([^"]+)"')


class EnvironmentProbe:
    """Reads build time, Java runtime, OS and user properties.

    Usage:
        probe = EnvironmentProbe()
        meta = probe.collect(project_root)
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the probe.

        Args:
            runner: Runner used to query the java executable
            clock: Returns the local wall-clock time
        """
        self.runner = runner or ProcessRunner()
        self.clock = clock

    def build_time(self) -> str:
        """Return the local build timestamp."""
        return self.clock().strftime(BUILD_TIME_FORMAT)

    def java_version(self, cwd: Path) -> str:
        """Return the version reported by `java -version`, or N/A."""
        output = self.runner.run(cwd, ["java", "-version"])
        if output == NOT_AVAILABLE:
            return NOT_AVAILABLE
        match = _JAVA_VERSION_PATTERN.search(output)
        return match.group(1) if match else NOT_AVAILABLE

    def java_home(self) -> str:
        """Return JAVA_HOME, or the install directory of java on PATH."""
        env_home = os.environ.get("JAVA_HOME", "").strip()
        if env_home:
            return env_home

        executable = shutil.which("java")
        if executable is None:
            return NOT_AVAILABLE
        # <home>/bin/java
        return str(Path(executable).resolve().parent.parent)

    @staticmethod
    def user_name() -> str:
        """Return the login name of the current user."""
        try:
            return getpass.getuser()
        except (OSError, KeyError, ImportError):
            # No LOGNAME/USER and no passwd entry (common in containers)
            return UNKNOWN

    def collect(self, cwd: Path) -> MetadataMap:
        """Collect all environment keys.

        Args:
            cwd: Working directory for the java query

        Returns:
            Metadata for BUILD_TIME, JAVA_VERSION, JAVA_HOME, OS_NAME,
            OS_ARCH and USER_NAME
        """
        return {
            "BUILD_TIME": self.build_time(),
            "JAVA_VERSION": self.java_version(cwd),
            "JAVA_HOME": self.java_home(),
            "OS_NAME": platform.system() or UNKNOWN,
            "OS_ARCH": platform.machine() or UNKNOWN,
            "USER_NAME": self.user_name(),
        }
