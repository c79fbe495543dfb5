# -*- coding: utf-8 -*-
""" Work with strings """

import re
import textwrap
from typing import List, Optional, Sequence, Tuple, Union

LINE_SEPARATOR = re.compile(r"\r\n|[\n\r]")


def ensure_unicode(string: Union[str, bytes]) -> str:
    """
    >>> ensure_unicode(b'type Foo')
    'type Foo'

    >>> ensure_unicode('type Foo')
    'type Foo'
    """
    if isinstance(string, bytes):
        return string.decode("utf8")
    return string


# Only used in tests
def dedent(raw_string: str) -> str:
    return textwrap.dedent(raw_string).lstrip()


def leading_whitespace(string: str) -> int:
    """
    >>> leading_whitespace('  foo')
    2

    >>> leading_whitespace('foo')
    0

    >>> leading_whitespace('   ')
    3
    """
    return len(string) - len(string.lstrip())


def strip_common_indent(lines: Sequence[str]) -> Optional[str]:
    """ Remove the smallest leading whitespace prefix shared by all lines and
    join them with newlines.

    Blank lines take part in the computation, which matches how comment
    blocks are usually written (``#`` directly followed by the text).

    Args:
        lines (Sequence[str]): Input lines

    Returns:
        Optional[str]: Joined lines or ``None`` if there are no lines.

    >>> strip_common_indent([' foo', '   bar'])
    'foo\\n  bar'

    >>> strip_common_indent(['foo', ' bar'])
    'foo\\n bar'

    >>> strip_common_indent([]) is None
    True
    """
    if not lines:
        return None
    prefix = min(leading_whitespace(line) for line in lines)
    return "\n".join(line[prefix:] for line in lines)


def index_to_loc(body: str, position: int) -> Tuple[int, int]:
    r""" Get the (line number, column number) tuple from a zero-indexed offset.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character

    Returns:
        Tuple[int, int]: (line number, column number)

    Raises:
        :py:class:`IndexError`: if ``position`` is out of bounds

    >>> index_to_loc("ab\ncd\ne", 0)
    (1, 1)

    >>> index_to_loc("ab\ncd\ne", 3)
    (2, 1)

    >>> index_to_loc("", 0)
    (1, 1)

    >>> index_to_loc("{", 1)
    (1, 2)

    >>> index_to_loc("", 42)
    Traceback (most recent call last):
        ...
    IndexError: 42
    """
    if not body and not position:
        return (1, 1)

    if position > len(body) or position < 0:
        raise IndexError(position)

    lines, cols = 0, 0
    for offset, char in enumerate(body):
        if offset == position:
            return (lines + 1, cols + 1)
        elif char == "\n":
            lines += 1
            cols = 0
        else:
            cols += 1
    return (lines + 1, cols + 1)


def highlight_location(body: str, position: int, delta: int = 2) -> str:
    """ Nicely format a highlited view of a position into a source string.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character
        delta (int): How many lines around the position should this conserve

    Returns:
        str: Formatted view
    """
    line, col = index_to_loc(body, position)
    line_index = line - 1
    lines = LINE_SEPARATOR.split(body)
    min_line = max(0, line_index - delta)
    max_line = min(line_index + delta, len(lines) - 1)
    pad_len = len(str(max_line + 1))

    def numbered(index: int) -> str:
        return "  %s:%s" % (str(index + 1).rjust(pad_len), lines[index])

    output = ["(%d:%d):" % (line, col)]  # type: List[str]
    output.extend(numbered(i) for i in range(min_line, line_index + 1))
    output.append(" " * (2 + pad_len + col) + "^")
    output.extend(numbered(i) for i in range(line_index + 1, max_line + 1))
    return "\n".join(output) + "\n"
