"""
Process States Module

Defines the lifecycle states of a spawned child process.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto


class ProcessState(Enum):
    """
    Child process lifecycle states.

    State transitions:
        RUNNING -> TERMINATED: Child exited or was killed and was reaped
        RUNNING -> LOST: Child was reaped by someone else
    """

    RUNNING = auto()
    """Child has been forked and not yet reaped."""

    TERMINATED = auto()
    """Child has finished and its exit status was collected."""

    LOST = auto()
    """Child could not be waited on (already reaped elsewhere)."""


EXIT_SUCCESS = 0
EXIT_FAILURE = 1
