"""readmegen utility modules.

- logging: Standardized logging with human/verbose/JSON modes
- preflight: External tool availability checks
- process: Best-effort command execution with the N/A sentinel
"""

from readmegen.utils.logging import get_logger, setup_logging
from readmegen.utils.preflight import PreflightChecker, PreflightResult
from readmegen.utils.process import NOT_AVAILABLE, ProcessRunner

__all__ = [
    "get_logger",
    "setup_logging",
    "PreflightChecker",
    "PreflightResult",
    "NOT_AVAILABLE",
    "ProcessRunner",
]
