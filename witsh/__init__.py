"""
witsh - A small UNIX command interpreter

Reads commands from a terminal or a batch script, runs external programs
found through a replaceable search list, supports '>' output redirection
and '&' parallel commands, and implements the exit, cd and path
built-ins.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .shell.shell import Shell, create_shell

__all__ = [
    'Shell',
    'create_shell',
]
