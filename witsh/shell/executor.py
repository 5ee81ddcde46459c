"""
Command Executor Module

Runs the segments of one normalized line: built-ins synchronously in
the interpreter, external commands in child processes that are all
started before any of them is waited on.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List

from witsh.diagnostics import report_error
from witsh.exceptions import ShellException, CommandNotFoundError, TooManySegmentsError
from witsh.logger import get_logger
from witsh.process import ChildProcess, JobSet, ProcessLauncher
from .builtins import BuiltinCommands
from .context import ShellContext
from .normalizer import split_segments
from .parser import CommandParser, ParsedCommand


@dataclass
class SegmentResult:
    """Outcome of one segment."""
    child: Optional[ChildProcess] = None
    exit_requested: bool = False
    failed: bool = False


@dataclass
class LineResult:
    """Outcome of one line, available after all its children finished."""
    exit_requested: bool = False
    children: List[ChildProcess] = field(default_factory=list)
    errors: int = 0


class SegmentExecutor:
    """
    Executes a single command segment.

    Every error is reported here, with the uniform message, and turned
    into a failed SegmentResult so that sibling segments still run.
    """

    def __init__(
        self,
        context: ShellContext,
        parser: Optional[CommandParser] = None,
        builtins: Optional[BuiltinCommands] = None,
        launcher: Optional[ProcessLauncher] = None
    ):
        self._context = context
        self._parser = parser or CommandParser()
        self._builtins = builtins or BuiltinCommands(context)
        self._launcher = launcher or ProcessLauncher()
        self._logger = get_logger('executor')

    @property
    def builtins(self) -> BuiltinCommands:
        return self._builtins

    def execute(self, segment: str) -> SegmentResult:
        """
        Parse and run one segment.

        Returns:
            SegmentResult holding the spawned child, if any
        """
        try:
            cmd = self._parser.parse(segment)
            if cmd is None:
                return SegmentResult()

            if self._builtins.is_builtin(cmd.command):
                outcome = self._builtins.execute(cmd)
                return SegmentResult(exit_requested=outcome.exit_requested)

            return SegmentResult(child=self._execute_external(cmd))

        except (ShellException, MemoryError) as e:
            report_error(e)
            return SegmentResult(failed=True)

    def _execute_external(self, cmd: ParsedCommand) -> ChildProcess:
        """Resolve and launch an external command."""
        search_path = self._context.search_path

        if search_path.is_empty():
            raise CommandNotFoundError(cmd.command, [])

        path = search_path.resolve(cmd.command)
        return self._launcher.spawn(path, cmd.argv, cmd.redirect)


class LineExecutor:
    """
    Executes every segment of a normalized line.

    Segments are dispatched left to right. External children are
    collected in a JobSet that is drained only after the last segment
    was dispatched, so '&'-separated commands run concurrently and the
    next line never overlaps with this one.

    Example:
        >>> executor = LineExecutor(ShellContext())
        >>> result = executor.execute("sleep 1 & sleep 1")
        >>> len(result.children)
        2
    """

    def __init__(
        self,
        context: ShellContext,
        segment_executor: Optional[SegmentExecutor] = None
    ):
        self._context = context
        self._segments = segment_executor or SegmentExecutor(context)
        self._logger = get_logger('executor')

    @property
    def segment_executor(self) -> SegmentExecutor:
        return self._segments

    def execute(self, line: str) -> LineResult:
        """
        Run a normalized line and wait for all of its children.

        Args:
            line: Output of normalize_line()

        Returns:
            LineResult; exit_requested is set if any segment ran exit
        """
        result = LineResult()
        segments = split_segments(line)

        limit = self._context.config.max_parallel_segments
        if limit and len(segments) > limit:
            report_error(TooManySegmentsError(len(segments), limit))
            result.errors += 1
            segments = segments[:limit]

        jobs = JobSet()
        for segment in segments:
            outcome = self._segments.execute(segment)
            if outcome.child is not None:
                jobs.add(outcome.child)
            if outcome.exit_requested:
                result.exit_requested = True
            if outcome.failed:
                result.errors += 1

        if len(jobs):
            self._logger.debug("Waiting for line", context={'pids': jobs.pids})
        result.children = jobs.wait_all()
        return result
