"""
User-facing error reporting.

Every recoverable failure produces the same single line on file
descriptor 2. The line is written with os.write so that it is never held
in a Python buffer across fork() and so that a child whose stderr was
redirected reports into the redirection target.
"""

import os
from typing import Optional

from witsh.core.config_loader import get_config
from witsh.exceptions import ShellException
from witsh.logger import get_logger

STDERR_FILENO = 2

_logger = get_logger('diagnostics')


def report_error(exc: Optional[BaseException] = None, pid: Optional[int] = None) -> None:
    """
    Write the uniform error message to standard error.

    The exception, if given, is only logged; its detail is never shown
    to the user.
    """
    if exc is not None:
        context = exc.context if isinstance(exc, ShellException) else None
        _logger.warning(str(exc), pid=pid, context=context)

    message = get_config().shell.error_message + "\n"
    try:
        os.write(STDERR_FILENO, message.encode())
    except OSError:
        # stderr closed; nowhere left to report to
        pass
