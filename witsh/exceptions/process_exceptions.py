"""
Process Exceptions

Exceptions related to creating child processes and replacing their
program image. SpawnError is raised in the interpreter itself; the
redirection and exec errors only ever exist inside a freshly forked
child, which reports them and exits.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ProcessException(ShellException):
    """
    Base exception for all process-related errors.

    Attributes:
        message: Human-readable error description
        pid: Process ID associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        pid: Optional[int] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if pid is not None:
            ctx["pid"] = pid
        super().__init__(message, error_code=error_code or 2000, context=ctx)
        self.pid = pid

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.pid is not None:
            base = f"{base} (pid={self.pid})"
        return base


class SpawnError(ProcessException):
    """
    Error during fork().

    Raised in the parent when a new process cannot be created, usually
    because of a process limit or memory exhaustion.

    Example:
        >>> raise SpawnError("Resource temporarily unavailable", command="ls")
    """

    def __init__(self, message: str, command: Optional[str] = None) -> None:
        ctx = {}
        if command:
            ctx["command"] = command
        super().__init__(message=message, error_code=2001, context=ctx)
        self.command = command


class RedirectionError(ProcessException):
    """
    The redirection target could not be opened or duplicated.

    Raised inside the child before exec; the child reports it and exits
    with failure status without touching the filesystem further.
    """

    def __init__(self, path: str, pid: int, reason: Optional[str] = None) -> None:
        message = f"Cannot redirect output to {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            pid=pid,
            error_code=2002,
            context={"path": path}
        )
        self.path = path


class ExecError(ProcessException):
    """
    Error during exec().

    Raised inside the child when the resolved executable can no longer
    be run, e.g. it was removed or lost its execute bit after
    resolution.

    Example:
        >>> raise ExecError("Permission denied", pid=42, path="/bin/ls")
    """

    def __init__(
        self,
        message: str,
        pid: int,
        path: Optional[str] = None
    ) -> None:
        ctx = {}
        if path:
            ctx["path"] = path
        super().__init__(
            message=message,
            pid=pid,
            error_code=2003,
            context=ctx
        )
        self.path = path
