"""Console logging for readmegen.

Output modes:
- human: [LEVEL] message
- verbose: [LEVEL][HH:MM:SS] message
- json: one {"level", "ts", "logger", "msg"} object per line

Records below WARNING are written to stdout next to the banner and summary;
warnings and errors (an unparseable pom.xml, a failed write) go to stderr.
Level tags are colored only on a TTY and only when NO_COLOR is unset.
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import TextIO

ROOT_LOGGER = "readmegen"


class LogMode(Enum):
    """Logging output mode."""

    HUMAN = "human"
    VERBOSE = "verbose"
    JSON = "json"


class Colors:
    """ANSI escape sequences for level tags."""

    RESET = "\033[0m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    GRAY = "\033[90m"


_TAG_COLORS = {
    logging.DEBUG: Colors.GRAY,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
}


def colors_enabled(stream: TextIO | None = None) -> bool:
    """Return True if ANSI colors may be written to stream (stdout by default)."""
    if os.environ.get("NO_COLOR"):
        return False
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


class _TaggedFormatter(logging.Formatter):
    """Prefixes each message with a [LEVEL] tag, optionally colored."""

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def _tag(self, record: logging.LogRecord) -> str:
        tag = f"[{record.levelname}]"
        if not self.use_colors:
            return tag
        color = _TAG_COLORS.get(record.levelno, Colors.RED)
        return f"{color}{tag}{Colors.RESET}"

    def _suffix(self, record: logging.LogRecord) -> str:
        return ""

    def format(self, record: logging.LogRecord) -> str:
        return f"{self._tag(record)}{self._suffix(record)} {record.getMessage()}"


class HumanFormatter(_TaggedFormatter):
    """[LEVEL] message"""


class VerboseFormatter(_TaggedFormatter):
    """[LEVEL][HH:MM:SS] message"""

    def _suffix(self, record: logging.LogRecord) -> str:
        return datetime.fromtimestamp(record.created).strftime("[%H:%M:%S]")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for CI logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "level": record.levelname,
                "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
                "logger": record.name,
                "msg": record.getMessage(),
            }
        )


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger below the readmegen root logger."""
    return logging.getLogger(name)


def _formatter_for(mode: LogMode, stream: TextIO) -> logging.Formatter:
    if mode is LogMode.JSON:
        return JSONFormatter()
    if mode is LogMode.VERBOSE:
        return VerboseFormatter(use_colors=colors_enabled(stream))
    return HumanFormatter(use_colors=colors_enabled(stream))


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
    error_stream: TextIO | None = None,
) -> None:
    """Configure the readmegen root logger.

    Safe to call repeatedly; existing handlers are replaced.

    Args:
        mode: Output mode
        level: Minimum level
        stream: Destination below WARNING (default: stdout)
        error_stream: Destination for WARNING and above (default: stderr)
    """
    out = sys.stdout if stream is None else stream
    err = sys.stderr if error_stream is None else error_stream

    progress = logging.StreamHandler(out)
    progress.addFilter(_BelowLevelFilter(logging.WARNING))
    progress.setFormatter(_formatter_for(mode, out))

    problems = logging.StreamHandler(err)
    problems.setLevel(logging.WARNING)
    problems.setFormatter(_formatter_for(mode, err))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers = [progress, problems]
    logger.setLevel(level)
    logger.propagate = False


def configure_from_cli(verbose: bool = False, quiet: bool = False, ci: bool = False) -> None:
    """Configure logging from the global CLI flags.

    --ci selects JSON output and wins over --verbose for the format;
    --quiet wins over --verbose for the level.
    """
    if ci:
        mode = LogMode.JSON
    elif verbose:
        mode = LogMode.VERBOSE
    else:
        mode = LogMode.HUMAN

    level = logging.WARNING if quiet else logging.DEBUG if verbose else logging.INFO
    setup_logging(mode=mode, level=level)
