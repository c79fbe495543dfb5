# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import TYPE_CHECKING, Any, Dict, Optional

from ._string_utils import highlight_location, index_to_loc

if TYPE_CHECKING:
    from .lang.ast import Node
    from .lang.source import Source


class SDLError(Exception):
    """
    Base exception from which all other inherit. You should prefer using one
    of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SDLSyntaxError(SDLError):
    """
    Syntax error while parsing a schema definition document.

    Args:
        message: Explanatory message
        position: 0-indexed position locating the syntax error
        source: Source from which the syntax error originated

    Attributes:
        message (str): Explanatory message
        position (int): 0-indexed position locating the syntax error
        source (gql_sdl.lang.source.Source): Source from which the syntax
            error originated
    """

    def __init__(self, message: str, position: int, source: "Source"):
        super().__init__(message)
        self.source = source
        self.position = position
        self._highlighted = None  # type: Optional[str]

    @property
    def highlighted(self) -> str:
        """
        str: Message followed by a view of the source document pointing at
        the exact location of the error.
        """
        if self._highlighted is not None:
            return self._highlighted

        highlight = highlight_location(self.source.body, self.position)
        self._highlighted = "%s %s" % (self.message, highlight)
        return self._highlighted

    def __str__(self) -> str:
        return self.highlighted

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a JSON serializable dictionnary, suitable
        for reporting errors to tools (editors, linters, etc.).
        """
        line, col = index_to_loc(self.source.body, self.position)
        return {
            "message": self.message,
            "locations": [{"line": line, "column": col}],
            "source": self.source.name,
        }


class UnexpectedToken(SDLSyntaxError):
    """
    A required production could not be matched at the current position.
    """


class UnexpectedEOF(UnexpectedToken):
    """
    A required production could not be matched because the input is
    exhausted.
    """


class UnexpectedCharacter(SDLSyntaxError):
    """
    Input remains after a complete document (or value / type) was parsed.
    """


class InvalidInputField(SDLSyntaxError):
    """
    An input object field defines arguments.
    """


class UnexpectedNode(SDLError, TypeError):
    """
    A node list contains a node kind which is not valid at that point of
    the tree.

    Args:
        node: Offending node

    Attributes:
        node (gql_sdl.lang.ast.Node): Offending node
    """

    def __init__(self, node: "Node"):
        super().__init__("Unexpected node type %s" % node.kind)
        self.node = node
