# -*- coding: utf-8 -*-
"""
Character level matching primitives used by :mod:`gql_sdl.lang.parser`.

There is no token stream: grammar rules match literals and patterns directly
against the source text through a :class:`Cursor` and insignificant
characters are skipped around every production wrapped with
:func:`with_position`.
"""

import functools as ft
import re
from typing import Any, Callable, Optional, Pattern, TypeVar, cast

from ..exc import UnexpectedEOF, UnexpectedToken
from . import ast as _ast
from .source import Source

T = TypeVar("T")
Fn = TypeVar("Fn", bound=Callable[..., Any])

# Newlines are skipped separately from the other white space characters.
WHITESPACE = re.compile(
    "[ \f\r\t\v\u00a0\u1680\u180e\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

NAME_CHARS = frozenset(
    "_0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


class Cursor:
    """
    Read position over a :class:`~gql_sdl.lang.source.Source`.

    The cursor never copies the source text: the remaining input is always
    ``body[position:]``. All ``match*`` methods leave the position untouched
    when they fail, so backtracking is only a matter of restoring a
    previously read ``position``.

    Args:
        source: Source being parsed
        position: Starting offset
    """

    __slots__ = ("source", "body", "position")

    def __init__(self, source: Source, position: int = 0):
        self.source = source
        self.body = source.body
        self.position = position

    def __repr__(self) -> str:
        return "<Cursor %d/%d>" % (self.position, len(self.body))

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.body)

    def peek(self) -> Optional[str]:
        """ Current character or ``None`` at the end of the input. """
        try:
            return self.body[self.position]
        except IndexError:
            return None

    def match(self, literal: str) -> Optional[str]:
        """
        Consume ``literal`` if the remaining input starts with it.

        Returns:
            The matched literal or ``None``.
        """
        if self.body.startswith(literal, self.position):
            self.position += len(literal)
            return literal
        return None

    def match_keyword(self, keyword: str) -> Optional[str]:
        """
        Like :meth:`match` but fails when the literal is directly followed by
        a name character, so that ``typeFoo`` is not read as ``type Foo``.
        """
        end = self.position + len(keyword)
        if self.body.startswith(keyword, self.position) and (
            end >= len(self.body) or self.body[end] not in NAME_CHARS
        ):
            self.position = end
            return keyword
        return None

    def match_pattern(self, pattern: Pattern[str]) -> Optional[str]:
        """
        Consume the prefix of the remaining input matched by ``pattern``.

        Returns:
            The matched text or ``None``.
        """
        matched = pattern.match(self.body, self.position)
        if matched is None:
            return None
        self.position = matched.end()
        return matched.group(0)

    def skip_ignored(self) -> None:
        """
        Read over newlines, commas and white space. Idempotent.
        """
        body = self.body
        pos = self.position
        length = len(body)
        while pos < length:
            char = body[pos]
            if char == "\n" or char == ",":
                pos += 1
                continue
            matched = WHITESPACE.match(body, pos)
            if matched is None:
                break
            pos = matched.end()
        self.position = pos

    def next_significant(self) -> int:
        """ Offset of the next character that is not ignored. """
        start = self.position
        self.skip_ignored()
        position, self.position = self.position, start
        return position

    def required(self, value: Optional[T], expected: str) -> T:
        """
        Make sure a production matched.

        Args:
            value: Result of a grammar rule, ``None`` if it didn't match.
            expected: Label describing the expected production.

        Raises:
            :class:`~gql_sdl.exc.UnexpectedToken`: if ``value`` is ``None``.
        """
        if value is not None:
            return value

        position = self.next_significant()
        try:
            char = self.body[position]
        except IndexError:
            raise UnexpectedEOF(
                'Expected %s but got "<EOF>"' % expected, position, self.source
            )
        raise UnexpectedToken(
            'Expected %s but got "%s"' % (expected, char), position, self.source
        )

    def expect(self, literal: str) -> str:
        """ Consume ``literal`` or raise :class:`~gql_sdl.exc.UnexpectedToken`. """
        return self.required(self.match(literal), '"%s"' % literal)


def with_position(fn: Fn) -> Fn:
    """
    Wrap a grammar rule so that insignificant characters are skipped around
    it and the node it returns is annotated with its :class:`Location`.

    The wrapped rule must be a method taking the :class:`Cursor` as its first
    argument and return ``None`` when it does not match, in which case the
    cursor is rewound to where the rule started.

    The recorded ``end`` excludes trailing commas and white space: list rules
    read over separators speculatively so the raw position after the rule
    can overshoot the meaningful text.
    """

    @ft.wraps(fn)
    def wrapper(self, cursor, *args, **kwargs):
        cursor.skip_ignored()
        start = cursor.position
        result = fn(self, cursor, *args, **kwargs)
        if result is None:
            cursor.position = start
            return None

        consumed = cursor.body[start : cursor.position]
        end = start + len(consumed.replace(",", " ").rstrip())
        cursor.skip_ignored()

        if isinstance(result, _ast.Node) and result.loc is None:
            result.loc = _ast.Location(start, end, cursor.source)
        return result

    return cast(Fn, wrapper)
