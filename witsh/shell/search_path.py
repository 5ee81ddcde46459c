"""
Search Path Module

The ordered list of directories consulted to locate an external command
given by bare name.

Author: YSNRFD
Version: 1.0.0
"""

import os
from typing import Iterable, Iterator, List

from witsh.exceptions import CommandNotFoundError
from witsh.logger import get_logger


class SearchPath:
    """
    Ordered executable search list.

    The list is only ever replaced as a whole (by the 'path' built-in);
    the first directory holding an executable with the requested name
    wins.

    Example:
        >>> search = SearchPath(['/usr/local/bin', '/bin'])
        >>> search.resolve('ls')
        '/bin/ls'
    """

    def __init__(self, directories: Iterable[str] = ()):
        self._logger = get_logger('search_path')
        self._directories: List[str] = list(directories)

    @property
    def directories(self) -> List[str]:
        """Snapshot of the current search list."""
        return list(self._directories)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._directories))

    def __len__(self) -> int:
        return len(self._directories)

    def is_empty(self) -> bool:
        return not self._directories

    def replace(self, directories: Iterable[str]) -> None:
        """Replace the whole search list, keeping the given order."""
        self._directories = list(directories)
        self._logger.debug(
            "Search list replaced",
            context={'directories': ':'.join(self._directories)}
        )

    @staticmethod
    def is_executable(path: str) -> bool:
        try:
            return os.access(path, os.X_OK)
        except ValueError:
            # embedded NUL: no such file can exist
            return False

    def resolve(self, name: str) -> str:
        """
        Resolve a command name to an executable path.

        A name containing a path separator is checked as-is and returned
        unchanged. Anything else is joined with each directory of the
        search list in order.

        Args:
            name: Command name (argv[0])

        Returns:
            Path of the executable to run

        Raises:
            CommandNotFoundError: If no executable matches
        """
        if not name:
            raise CommandNotFoundError(name, self._directories)

        if os.sep in name:
            if self.is_executable(name):
                return name
            raise CommandNotFoundError(name)

        for directory in self._directories:
            candidate = os.path.join(directory, name)
            if self.is_executable(candidate):
                self._logger.debug(
                    "Resolved command",
                    context={'command': name, 'path': candidate}
                )
                return candidate

        raise CommandNotFoundError(name, self._directories)
