"""
Line Normalizer Module

Lexical preprocessing of raw input lines. The redirection operator and
the parallel-segment operator are padded with spaces so that every later
stage can tokenize on whitespace alone, then the line is cut into its
parallel segments.

Author: YSNRFD
Version: 1.0.0
"""

from typing import List

from witsh.exceptions import NormalizationError

REDIRECT_OPERATOR = '>'
PARALLEL_OPERATOR = '&'
OPERATORS = frozenset((REDIRECT_OPERATOR, PARALLEL_OPERATOR))

# Characters that already separate an operator from its neighbours.
_SEPARATORS_BEFORE = frozenset(' \t')
_SEPARATORS_AFTER = frozenset(' \t\r\n')


def normalize_line(line: str) -> str:
    """
    Surround every '>' and '&' with whitespace.

    A space is inserted before an operator unless the character already
    emitted before it is a space or tab, and after it unless the next
    input character is whitespace or the operator ends the line. No
    other character is changed, so the result is idempotent.

    Args:
        line: Raw input line (may be empty)

    Returns:
        The normalized line

    Raises:
        NormalizationError: If memory runs out while building the line

    Example:
        >>> normalize_line("ls>out&pwd")
        'ls > out & pwd'
    """
    try:
        out: List[str] = []
        n = len(line)

        for i, char in enumerate(line):
            if char not in OPERATORS:
                out.append(char)
                continue

            if out and out[-1] not in _SEPARATORS_BEFORE:
                out.append(' ')
            out.append(char)
            if i + 1 < n and line[i + 1] not in _SEPARATORS_AFTER:
                out.append(' ')

        return ''.join(out)
    except MemoryError:
        raise NormalizationError("Out of memory while normalizing line") from None


def split_segments(line: str) -> List[str]:
    """
    Split a normalized line into its parallel segments.

    Pieces are stripped of surrounding whitespace and empty pieces (a
    trailing '&', or '&&') are dropped. The order of the returned list is
    the order in which the segments are launched.

    Example:
        >>> split_segments("a & & b &")
        ['a', 'b']
    """
    segments = []
    for piece in line.split(PARALLEL_OPERATOR):
        piece = piece.strip()
        if piece:
            segments.append(piece)
    return segments
