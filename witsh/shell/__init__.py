"""
witsh Shell Module

Provides the command interpreter:
- Line normalization and segment splitting
- Command parsing
- Search-list resolution
- Built-in commands
- Segment and line execution
"""

from .normalizer import normalize_line, split_segments
from .parser import CommandParser, ParsedCommand, Token, TokenType
from .search_path import SearchPath
from .context import ShellContext
from .builtins import BuiltinCommands, BuiltinResult
from .executor import SegmentExecutor, SegmentResult, LineExecutor, LineResult
from .shell import Shell, create_shell

__all__ = [
    'normalize_line',
    'split_segments',
    'CommandParser',
    'ParsedCommand',
    'Token',
    'TokenType',
    'SearchPath',
    'ShellContext',
    'BuiltinCommands',
    'BuiltinResult',
    'SegmentExecutor',
    'SegmentResult',
    'LineExecutor',
    'LineResult',
    'Shell',
    'create_shell',
]
