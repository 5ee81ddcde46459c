"""
Shell Built-in Commands

Implements the built-in commands exit, cd and path.

Author: YSNRFD
Version: 1.0.0
"""

import os
from dataclasses import dataclass
from typing import Callable, List

from witsh.exceptions import BuiltinUsageError, ChangeDirectoryError
from witsh.logger import get_logger
from .context import ShellContext
from .parser import ParsedCommand


@dataclass
class BuiltinResult:
    """Outcome of a successful built-in command."""
    exit_requested: bool = False


class BuiltinCommands:
    """
    Built-in shell commands.

    These commands are executed directly by the interpreter without
    creating a new process. None of them accepts a redirection.
    """

    def __init__(self, context: ShellContext):
        """
        Initialize built-in commands.

        Args:
            context: The interpreter state the commands operate on
        """
        self._context = context
        self._logger = get_logger('builtins')
        self._commands: dict[str, Callable[[List[str]], BuiltinResult]] = {
            'exit': self.cmd_exit,
            'cd': self.cmd_cd,
            'path': self.cmd_path,
        }

    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands

    def execute(self, cmd: ParsedCommand) -> BuiltinResult:
        """
        Execute a built-in command.

        Args:
            cmd: Parsed command whose name is a built-in

        Returns:
            BuiltinResult

        Raises:
            BuiltinUsageError: On a redirection or wrong argument count
            ChangeDirectoryError: If cd fails
        """
        if cmd.has_redirect:
            raise BuiltinUsageError(cmd.command, "Built-ins do not support redirection")

        self._logger.debug("Running built-in", context={'argv': ' '.join(cmd.argv)})
        return self._commands[cmd.command](cmd.args)

    # Command implementations

    def cmd_exit(self, args: List[str]) -> BuiltinResult:
        """Request interpreter termination."""
        if args:
            raise BuiltinUsageError('exit', "exit takes no arguments")
        return BuiltinResult(exit_requested=True)

    def cmd_cd(self, args: List[str]) -> BuiltinResult:
        """Change directory."""
        if len(args) != 1:
            raise BuiltinUsageError('cd', "cd takes exactly one argument")

        try:
            os.chdir(args[0])
        except OSError as e:
            raise ChangeDirectoryError(args[0], e.strerror) from e
        except ValueError as e:
            raise ChangeDirectoryError(args[0], str(e)) from e

        self._logger.debug("Changed directory", context={'path': args[0]})
        return BuiltinResult()

    def cmd_path(self, args: List[str]) -> BuiltinResult:
        """Replace the search list."""
        self._context.search_path.replace(args)
        return BuiltinResult()
