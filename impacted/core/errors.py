"""Error codes for CLI exit status.

The numeric values are used as process exit codes and should remain stable.
A GitHub Actions step fails on any non-zero code.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success (including runs where nothing was impacted)
    - 1: User error (invalid manifest, bad arguments)
    - 2: Environment error (manifest missing from the checkout)
    - 5: I/O error (step outputs could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
