"""
Child Process Module

Handle for an external command started by the launcher.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass, field
from typing import Optional, List

from .states import ProcessState


@dataclass
class ChildProcess:
    """
    A spawned external command.

    Owned by the line that launched it until wait() reaps it.

    Attributes:
        pid: Process ID of the child
        argv: Argument vector passed to exec (argv[0] as typed)
        path: Resolved executable path
        redirect: Output redirection target, if any
        state: Current lifecycle state
        exit_code: Exit code once terminated normally
        term_signal: Signal number if the child was killed by a signal
    """
    pid: int
    argv: List[str] = field(default_factory=list)
    path: str = ""
    redirect: Optional[str] = None
    state: ProcessState = ProcessState.RUNNING
    exit_code: Optional[int] = None
    term_signal: Optional[int] = None

    @property
    def name(self) -> str:
        return self.argv[0] if self.argv else self.path

    def is_running(self) -> bool:
        return self.state == ProcessState.RUNNING

    def wait(self) -> ProcessState:
        """
        Block until the child terminates and reap it.

        Waiting on a child that was already reaped is a no-op.
        """
        if self.state != ProcessState.RUNNING:
            return self.state

        try:
            _, status = os.waitpid(self.pid, 0)
        except ChildProcessError:
            self.state = ProcessState.LOST
            return self.state

        if os.WIFSIGNALED(status):
            self.term_signal = os.WTERMSIG(status)
        else:
            self.exit_code = os.waitstatus_to_exitcode(status)
        self.state = ProcessState.TERMINATED
        return self.state
