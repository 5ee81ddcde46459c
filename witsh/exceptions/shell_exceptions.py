"""
Shell Exceptions

Exceptions raised while reading, parsing and dispatching command lines.
Every one of them is recoverable: the shell reports the uniform error
message and moves on to the next segment or line.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all shell errors.

    Attributes:
        message: Human-readable error description (logged, never shown)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise ShellException("Unexpected token", error_code=1000)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class NormalizationError(ShellException):
    """
    A raw line could not be normalized.

    Only raised when the interpreter runs out of memory while rewriting
    a line. The stream processor treats this as fatal for the stream.
    """

    def __init__(self, message: str = "Cannot normalize line") -> None:
        super().__init__(message, error_code=1001)


class ShellSyntaxError(ShellException):
    """
    Malformed command segment.

    Raised by the parser for misplaced or repeated redirection
    operators.

    Example:
        >>> raise ShellSyntaxError("Missing redirection target", segment="ls >")
    """

    def __init__(self, message: str, segment: Optional[str] = None) -> None:
        ctx = {}
        if segment is not None:
            ctx["segment"] = segment
        super().__init__(message, error_code=1002, context=ctx)
        self.segment = segment


class BuiltinUsageError(ShellException):
    """Built-in command called with the wrong arguments or a redirection."""

    def __init__(self, builtin: str, message: str) -> None:
        super().__init__(message, error_code=1003, context={"builtin": builtin})
        self.builtin = builtin


class ChangeDirectoryError(ShellException):
    """The cd built-in could not change the working directory."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot change directory to {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, error_code=1004, context={"path": path})
        self.path = path


class CommandNotFoundError(ShellException):
    """
    An external command could not be resolved to an executable file.

    Raised when the search list is empty, when no directory in it holds
    an executable with the given name, or when a name containing a path
    separator does not point at an executable.
    """

    def __init__(self, name: str, searched: Optional[list[str]] = None) -> None:
        ctx: dict[str, Any] = {"command": name}
        if searched is not None:
            ctx["searched"] = len(searched)
        super().__init__(f"Command not found: {name}", error_code=1005, context=ctx)
        self.name = name
        self.searched = searched or []


class TooManySegmentsError(ShellException):
    """A line holds more parallel segments than the configured maximum."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"Line has {count} segments, limit is {limit}",
            error_code=1006,
            context={"count": count, "limit": limit}
        )
        self.count = count
        self.limit = limit


class UsageError(ShellException):
    """The interpreter was invoked with a malformed argument list."""

    def __init__(self, argc: int) -> None:
        super().__init__(
            f"Expected at most one script argument, got {argc}",
            error_code=1007
        )
        self.argc = argc


class BatchFileError(ShellException):
    """The batch script named on the command line cannot be opened."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot open batch file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, error_code=1008, context={"path": path})
        self.path = path
