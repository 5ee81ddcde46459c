"""
witsh Process Module

Creation and reaping of external command processes:
- Fork/exec launcher with output redirection
- Child process handles
- Per-line job sets
"""

from .states import ProcessState, EXIT_SUCCESS, EXIT_FAILURE
from .child import ChildProcess
from .launcher import ProcessLauncher
from .job_set import JobSet

__all__ = [
    'ProcessState',
    'EXIT_SUCCESS',
    'EXIT_FAILURE',
    'ChildProcess',
    'ProcessLauncher',
    'JobSet',
]
