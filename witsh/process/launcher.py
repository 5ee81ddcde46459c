"""
Process Launcher Module

Starts external commands with fork/exec, applying output redirection in
the child before the program image is replaced.

Author: YSNRFD
Version: 1.0.0
"""

import os
import signal
import sys
from typing import NoReturn, Optional, Sequence

from witsh.exceptions import ProcessException, SpawnError, RedirectionError, ExecError
from witsh.logger import get_logger
from witsh.diagnostics import report_error
from .child import ChildProcess
from .states import EXIT_FAILURE

STDOUT_FILENO = 1
STDERR_FILENO = 2

REDIRECT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
REDIRECT_MODE = 0o666

# Ignored by the interpreter at startup; an ignored disposition survives exec.
RESTORED_SIGNALS = tuple(
    getattr(signal, name) for name in ('SIGPIPE', 'SIGXFSZ') if hasattr(signal, name)
)


class ProcessLauncher:
    """
    Creates child processes for external commands.

    spawn() returns to the caller only in the parent. The child either
    becomes the target program or reports the failure and exits with
    EXIT_FAILURE; it never runs interpreter code after that.

    Example:
        >>> launcher = ProcessLauncher()
        >>> child = launcher.spawn('/bin/ls', ['ls', '-l'], redirect='out.txt')
        >>> child.wait()
    """

    def __init__(self):
        self._logger = get_logger('launcher')

    def spawn(
        self,
        path: str,
        argv: Sequence[str],
        redirect: Optional[str] = None
    ) -> ChildProcess:
        """
        Start an external command.

        Args:
            path: Resolved executable path
            argv: Argument vector; argv[0] is the name as typed
            redirect: File receiving stdout and stderr, or None

        Returns:
            Handle of the running child

        Raises:
            SpawnError: If the new process cannot be created
        """
        argv = list(argv)

        # Buffered output would otherwise be written twice.
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            pid = os.fork()
        except OSError as e:
            raise SpawnError(e.strerror or str(e), command=argv[0]) from e

        if pid == 0:
            self._run_child(path, argv, redirect)

        child = ChildProcess(pid=pid, argv=argv, path=path, redirect=redirect)
        self._logger.debug(
            "Spawned child",
            pid=pid,
            context={'path': path, 'redirect': redirect}
        )
        return child

    def _run_child(
        self,
        path: str,
        argv: list,
        redirect: Optional[str]
    ) -> NoReturn:
        """Child side of spawn(); never returns."""
        try:
            self._restore_signals()
            if redirect is not None:
                self._redirect_output(redirect)
            self._exec(path, argv)
        except ProcessException as e:
            report_error(e, pid=os.getpid())
        finally:
            os._exit(EXIT_FAILURE)

    @staticmethod
    def _restore_signals() -> None:
        for signum in RESTORED_SIGNALS:
            signal.signal(signum, signal.SIG_DFL)

    @staticmethod
    def _redirect_output(target: str) -> None:
        """Point stdout and stderr of the current process at target."""
        try:
            fd = os.open(target, REDIRECT_FLAGS, REDIRECT_MODE)
        except OSError as e:
            raise RedirectionError(target, os.getpid(), e.strerror) from e
        except ValueError as e:
            # embedded NUL in the file name
            raise RedirectionError(target, os.getpid(), str(e)) from e

        try:
            os.dup2(fd, STDOUT_FILENO)
            os.dup2(fd, STDERR_FILENO)
        except OSError as e:
            raise RedirectionError(target, os.getpid(), e.strerror) from e
        finally:
            if fd not in (STDOUT_FILENO, STDERR_FILENO):
                os.close(fd)

    @staticmethod
    def _exec(path: str, argv: list) -> NoReturn:
        try:
            os.execv(path, argv)
        except OSError as e:
            raise ExecError(e.strerror or str(e), pid=os.getpid(), path=path) from e
        except ValueError as e:
            raise ExecError(str(e), pid=os.getpid(), path=path) from e
