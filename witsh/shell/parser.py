"""
Command Parser Module

Parses one command segment into an argument vector and an optional
output redirection target.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum

from witsh.exceptions import ShellSyntaxError
from witsh.logger import get_logger
from .normalizer import REDIRECT_OPERATOR


class TokenType(Enum):
    """Token types for command parsing."""
    WORD = "word"
    REDIRECT_OUT = "redirect_out"


@dataclass
class Token:
    """A parsed token."""
    type: TokenType
    value: str


@dataclass
class ParsedCommand:
    """
    A parsed command segment.

    argv[0] is the command name as typed; redirect is the target file
    for standard output and standard error, or None.
    """
    argv: List[str] = field(default_factory=list)
    redirect: Optional[str] = None

    @property
    def command(self) -> str:
        return self.argv[0]

    @property
    def args(self) -> List[str]:
        return self.argv[1:]

    @property
    def has_redirect(self) -> bool:
        return self.redirect is not None


class CommandParser:
    """
    Parses shell command segments.

    Segments are expected to come from split_segments(), i.e. they are
    already normalized and hold no '&'. Tokenization is whitespace-only;
    a token that is exactly '>' is the redirection operator.

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("ls -la > listing.txt")
        >>> cmd.argv, cmd.redirect
        (['ls', '-la'], 'listing.txt')
    """

    def __init__(self):
        self._logger = get_logger('parser')

    def tokenize(self, segment: str) -> List[Token]:
        """Convert a segment into tokens."""
        tokens = []
        for word in segment.split():
            if word == REDIRECT_OPERATOR:
                tokens.append(Token(TokenType.REDIRECT_OUT, word))
            else:
                tokens.append(Token(TokenType.WORD, word))
        return tokens

    def parse(self, segment: str) -> Optional[ParsedCommand]:
        """
        Parse a command segment.

        Args:
            segment: One trimmed segment of a normalized line

        Returns:
            ParsedCommand, or None if the segment is blank

        Raises:
            ShellSyntaxError: If the redirection operator is repeated,
                has no command before it, or is not followed by exactly
                one filename
        """
        tokens = self.tokenize(segment)

        if not tokens:
            return None

        redirects = [
            i for i, token in enumerate(tokens)
            if token.type == TokenType.REDIRECT_OUT
        ]

        if not redirects:
            return ParsedCommand(argv=[token.value for token in tokens])

        if len(redirects) > 1:
            raise ShellSyntaxError("Multiple redirection operators", segment=segment)

        position = redirects[0]
        if position == 0:
            raise ShellSyntaxError("Redirection without a command", segment=segment)
        if position == len(tokens) - 1:
            raise ShellSyntaxError("Redirection without a target file", segment=segment)
        if position + 2 != len(tokens):
            raise ShellSyntaxError("Redirection takes exactly one file", segment=segment)

        cmd = ParsedCommand(
            argv=[token.value for token in tokens[:position]],
            redirect=tokens[position + 1].value,
        )
        self._logger.debug(
            "Parsed redirection",
            context={'command': cmd.command, 'target': cmd.redirect}
        )
        return cmd
