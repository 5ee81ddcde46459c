"""
Job Set Module

The children launched by one input line, waited on together once the
whole line has been dispatched.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Iterator, List

from witsh.logger import get_logger
from .child import ChildProcess


class JobSet:
    """
    Pending completions for a single line.

    Children are added as they are launched and drained by a single
    wait_all() call. Completion order is not tracked; exit statuses are
    kept on the handles but nothing acts on them.
    """

    def __init__(self):
        self._logger = get_logger('jobs')
        self._pending: List[ChildProcess] = []

    def add(self, child: ChildProcess) -> None:
        self._pending.append(child)

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[ChildProcess]:
        return iter(list(self._pending))

    @property
    def pids(self) -> List[int]:
        return [child.pid for child in self._pending]

    def wait_all(self) -> List[ChildProcess]:
        """
        Block until every pending child has terminated.

        Returns:
            The reaped children, in launch order
        """
        finished = []
        while self._pending:
            child = self._pending.pop(0)
            child.wait()
            self._logger.debug(
                "Reaped child",
                pid=child.pid,
                context={
                    'state': child.state.name,
                    'exit_code': child.exit_code,
                }
            )
            finished.append(child)
        return finished
