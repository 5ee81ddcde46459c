"""
witsh Exception Hierarchy

All shell failures derive from ShellException. Each is reported to the
user as the same uniform message; the exception carries the detail for
the log.

Architecture:
    ShellException (Base)
    ├── NormalizationError
    ├── ShellSyntaxError
    ├── BuiltinUsageError
    ├── ChangeDirectoryError
    ├── CommandNotFoundError
    ├── TooManySegmentsError
    ├── UsageError
    ├── BatchFileError
    ├── ConfigValidationError
    └── ProcessException
        ├── SpawnError
        ├── RedirectionError
        └── ExecError
"""

from .shell_exceptions import (
    ShellException,
    NormalizationError,
    ShellSyntaxError,
    BuiltinUsageError,
    ChangeDirectoryError,
    CommandNotFoundError,
    TooManySegmentsError,
    UsageError,
    BatchFileError,
)

from .process_exceptions import (
    ProcessException,
    SpawnError,
    RedirectionError,
    ExecError,
)

__all__ = [
    # Shell exceptions
    "ShellException",
    "NormalizationError",
    "ShellSyntaxError",
    "BuiltinUsageError",
    "ChangeDirectoryError",
    "CommandNotFoundError",
    "TooManySegmentsError",
    "UsageError",
    "BatchFileError",
    # Process exceptions
    "ProcessException",
    "SpawnError",
    "RedirectionError",
    "ExecError",
]
