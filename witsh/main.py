#!/usr/bin/env python3
"""
witsh - a small UNIX command interpreter

This is the main entry point for witsh.

Usage:
    witsh              interactive mode, prompt on standard output
    witsh SCRIPT       batch mode, commands read from SCRIPT

Features:
- External commands resolved through a replaceable search list
- Output redirection with '>' (stdout and stderr)
- Parallel commands on one line with '&'
- Built-in exit, cd and path

Set WITSH_CONFIG to the path of a JSON file to override the defaults
(prompt, initial search list, logging).

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys
from typing import Optional, List

from witsh.core.config_loader import Config, ConfigLoader, ConfigValidationError
from witsh.diagnostics import report_error
from witsh.exceptions import BatchFileError, UsageError
from witsh.logger import Logger, LogLevel, get_logger
from witsh.shell.shell import Shell

CONFIG_ENV_VAR = 'WITSH_CONFIG'

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def load_config(environ: Optional[dict] = None) -> Config:
    """
    Load the configuration named by WITSH_CONFIG, if any.

    A broken configuration file is reported and the defaults are used.
    """
    environ = os.environ if environ is None else environ
    loader = ConfigLoader()
    config_path = environ.get(CONFIG_ENV_VAR)

    if config_path:
        try:
            return loader.load(config_path)
        except ConfigValidationError as e:
            loader.reset()
            report_error(e)

    return loader.config


def init_logging(config: Config) -> None:
    """Configure logging from the logging section of config."""
    try:
        level = LogLevel.from_name(config.logging.level)
    except ValueError as e:
        report_error(e)
        level = LogLevel.WARNING

    try:
        Logger.initialize(
            level=level,
            log_file=config.logging.log_file,
            console_output=config.logging.console_output,
        )
    except OSError as e:
        # unusable log file: carry on without file logging
        report_error(e)
        Logger.reset()
        Logger.initialize(level=level, console_output=config.logging.console_output)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for witsh.

    Startup sequence:
    1. Load configuration
    2. Initialize logging
    3. Validate arguments
    4. Run the interactive or batch loop

    Returns:
        Process exit status
    """
    args = sys.argv[1:] if argv is None else argv

    config = load_config()
    init_logging(config)
    logger = get_logger('main')

    if len(args) > 1:
        report_error(UsageError(len(args)))
        return EXIT_ERROR

    if hasattr(sys.stdin, 'reconfigure'):
        sys.stdin.reconfigure(errors='surrogateescape', newline='\n')

    shell = Shell(config)

    try:
        if args:
            shell.run_batch(args[0])
        else:
            shell.run_interactive()
    except BatchFileError as e:
        report_error(e)
        return EXIT_ERROR
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return EXIT_INTERRUPTED

    logger.info("Shutting down", context={'lines': shell.lines_executed})
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
