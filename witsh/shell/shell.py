"""
witsh Shell Module

The read-normalize-execute loop over one input source, in interactive
or batch mode.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from witsh.core.config_loader import Config, get_config
from witsh.diagnostics import report_error
from witsh.exceptions import BatchFileError, NormalizationError
from witsh.logger import get_logger
from .context import ShellContext
from .executor import LineExecutor, LineResult
from .normalizer import normalize_line

LINE_TERMINATORS = ('\n', '\r')


class Shell:
    """
    witsh command interpreter.

    Provides:
    - Interactive mode with a prompt
    - Batch mode reading commands from a script
    - Built-in exit, cd and path commands
    - Output redirection with '>'
    - Parallel commands with '&'

    Example:
        >>> shell = Shell()
        >>> shell.run_batch('commands.txt')
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        context: Optional[ShellContext] = None,
        line_executor: Optional[LineExecutor] = None
    ):
        self._config = config or get_config()
        self._context = context or ShellContext(config=self._config.shell)
        self._executor = line_executor or LineExecutor(self._context)
        self._logger = get_logger('shell')
        self._exiting = False
        self._lines_executed = 0

    @property
    def context(self) -> ShellContext:
        return self._context

    @property
    def prompt(self) -> str:
        return self._context.config.prompt

    @property
    def exiting(self) -> bool:
        return self._exiting

    @property
    def lines_executed(self) -> int:
        return self._lines_executed

    def request_exit(self) -> None:
        """Stop reading once the current line has finished."""
        self._exiting = True

    def run_interactive(
        self,
        stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None
    ) -> None:
        """Read commands from standard input, prompting before each line."""
        self._logger.info("Starting interactive session")
        self.process_stream(stream or sys.stdin, interactive=True, output=output)

    def run_batch(self, script_path: str) -> None:
        """
        Run the commands of a batch script.

        Raises:
            BatchFileError: If the script cannot be opened
        """
        try:
            # lines end at LF only; a stray CR stays in the line as whitespace
            script = open(
                script_path, 'r',
                encoding='utf-8', errors='surrogateescape', newline='\n'
            )
        except OSError as e:
            raise BatchFileError(script_path, e.strerror) from e

        self._logger.info("Running batch script", context={'path': script_path})
        with script:
            self.process_stream(script, interactive=False)

    def process_stream(
        self,
        stream: TextIO,
        interactive: bool,
        output: Optional[TextIO] = None
    ) -> None:
        """
        Execute lines from stream until end of input or exit.

        Args:
            stream: Source of command lines
            interactive: Whether to show a prompt before each read
            output: Where the prompt goes (defaults to sys.stdout)
        """
        while not self._exiting:
            if interactive:
                out = output or sys.stdout
                out.write(self.prompt)
                out.flush()

            line = stream.readline()
            if not line:
                break

            try:
                normalized = normalize_line(self._strip_terminator(line))
            except NormalizationError as e:
                report_error(e)
                break

            result = self.execute_line(normalized)
            if result.exit_requested:
                self.request_exit()

        self._logger.info(
            "Input stream finished",
            context={'lines': self._lines_executed, 'exit': self._exiting}
        )

    def execute_line(self, normalized: str) -> LineResult:
        """Run one normalized line and wait for all of its children."""
        self._lines_executed += 1
        return self._executor.execute(normalized)

    @staticmethod
    def _strip_terminator(line: str) -> str:
        if line.endswith(LINE_TERMINATORS):
            return line[:-1]
        return line


def create_shell(config: Optional[Config] = None) -> Shell:
    """Factory function to create a shell."""
    return Shell(config)
