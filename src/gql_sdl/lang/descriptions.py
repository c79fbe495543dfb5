# -*- coding: utf-8 -*-
"""
Derive descriptions from comments.

The parser keeps ``#`` comments as :class:`~gql_sdl.lang.ast.Comment` nodes
in the lists they appear in. By convention, the run of comments directly
preceding a definition, field, argument or enum value documents it:

.. code-block:: graphql

    # A user of the system.
    type User {
      # Unique identifier.
      id: ID!
    }
"""

from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    Union,
)

from .._string_utils import strip_common_indent
from ..exc import UnexpectedNode
from . import ast as _ast

Kinds = Union[Type[_ast.Node], Tuple[Type[_ast.Node], ...]]

DEFINITION_KINDS = (
    _ast.ObjectTypeDefinition,
    _ast.InterfaceTypeDefinition,
    _ast.UnionTypeDefinition,
    _ast.ScalarTypeDefinition,
    _ast.EnumTypeDefinition,
    _ast.InputObjectTypeDefinition,
    _ast.TypeExtensionDefinition,
)


def comment_text(node: _ast.Comment) -> str:
    """ Comment value without the leading ``#``. """
    return node.value[1:].rstrip("\r")


def iter_described(
    nodes: Iterable[_ast.Node], kinds: Kinds
) -> Iterator[Tuple[_ast.Node, Optional[str]]]:
    """
    Iterate over the non-comment nodes of a list along with the description
    built from the comments preceding each of them.

    Comment lines are stripped of their ``#`` and of the leading white space
    they all have in common. Comments which are not followed by a node are
    dropped.

    Args:
        nodes: Nodes as produced by the parser, comments included
        kinds: Accepted node classes

    Yields:
        ``(node, description)`` tuples, description is ``None`` if no
        comment precedes the node.

    Raises:
        :class:`~gql_sdl.exc.UnexpectedNode`: if a node is neither a comment
            or one of ``kinds``.
    """
    pending = []  # type: List[str]
    for node in nodes:
        if isinstance(node, _ast.Comment):
            pending.append(comment_text(node))
            continue

        if not isinstance(node, kinds):
            raise UnexpectedNode(node)

        yield node, strip_common_indent(pending)
        pending = []


def collect_descriptions(document: _ast.Document) -> Dict[str, str]:
    """
    Map schema coordinates to descriptions for the whole document.

    Coordinates are ``Type``, ``Type.field``, ``Type.field.argument``,
    ``Enum.VALUE`` and ``Input.field``. Fields declared in ``extend type``
    blocks are reported under the extended type; a comment preceding the
    ``extend`` keyword itself is ignored.

    Args:
        document: Parsed document

    Returns:
        Dict[str, str]: Descriptions, undocumented elements are not included.

    Raises:
        :class:`~gql_sdl.exc.UnexpectedNode`: if a list contains an
            unexpected node.
    """
    descriptions = {}  # type: Dict[str, str]

    def add(coordinate: str, description: Optional[str]) -> None:
        if description is not None:
            descriptions[coordinate] = description

    def add_fields(
        prefix: str, fields: Iterable[_ast.Node], kinds: Kinds
    ) -> None:
        for field, description in iter_described(fields, kinds):
            coordinate = "%s.%s" % (prefix, field.name.value)  # type: ignore
            add(coordinate, description)
            arguments = getattr(field, "arguments", None)
            if arguments:
                add_fields(coordinate, arguments, _ast.InputValueDefinition)

    for definition, description in iter_described(
        document.definitions, DEFINITION_KINDS
    ):
        if isinstance(definition, _ast.TypeExtensionDefinition):
            definition = definition.definition
        else:
            add(definition.name.value, description)  # type: ignore

        name = definition.name.value  # type: ignore

        if isinstance(
            definition,
            (_ast.ObjectTypeDefinition, _ast.InterfaceTypeDefinition),
        ):
            add_fields(name, definition.fields, _ast.FieldDefinition)
        elif isinstance(definition, _ast.EnumTypeDefinition):
            add_fields(name, definition.values, _ast.EnumValueDefinition)
        elif isinstance(definition, _ast.InputObjectTypeDefinition):
            add_fields(name, definition.fields, _ast.InputValueDefinition)

    return descriptions
