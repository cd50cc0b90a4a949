"""Error presentation utilities.

Centralized error formatting and exit code mapping for the detect command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from impacted.core.errors import ErrorCode
from impacted.output.console import Style
from impacted.services.errors import DetectError

if TYPE_CHECKING:
    from impacted.output.console import ConsoleProtocol

__all__ = ["detect_error_exit_code", "print_detect_error"]


def print_detect_error(error: DetectError, console: ConsoleProtocol) -> None:
    """Print a fatal detection error."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def detect_error_exit_code(error: DetectError) -> int:
    match error.kind:
        case "manifest_missing":
            return int(ErrorCode.ENV_ERROR)
        case "manifest_invalid":
            return int(ErrorCode.USER_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
