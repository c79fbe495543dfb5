# -*- coding: utf-8 -*-
"""
AST representations of the GraphQL schema definition language elements.

Every node produced by the parser carries a :class:`Location` in its ``loc``
attribute. Comments are not discarded: they are represented as
:class:`Comment` nodes interleaved with their siblings so that consumers can
derive descriptions from them.
"""

import copy
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Union,
    cast,
)

from .source import Source


class Location(NamedTuple):
    """
    Span of source text a node was parsed from. ``start`` and ``end`` are
    offsets into the original text; ``end`` excludes trailing ignored
    characters.
    """

    start: int
    end: int
    source: Source


class Node:
    """
    Base AST node.
    """

    __slots__ = ()

    loc = None  # type: Optional[Location]

    @property
    def kind(self) -> str:
        """ str: Tag identifying the node type. """
        return self.__class__.__name__

    @property
    def source(self) -> Optional[Source]:
        return self.loc.source if self.loc is not None else None

    def _props(self) -> Iterator[str]:
        for attr in cast(Sequence[str], self.__slots__):
            yield attr

    def __eq__(self, rhs: Any) -> bool:
        return type(rhs) == type(self) and all(
            getattr(self, attr) == getattr(rhs, attr) for attr in self._props()
        )

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return "<%s %s>" % (
            self.__class__.__name__,
            ", ".join(
                "%s=%s" % (attr, getattr(self, attr)) for attr in self._props()
            ),
        )

    def __copy__(self):
        return self.__class__(  # type: ignore
            **{k: getattr(self, k) for k in self.__slots__}  # type: ignore
        )

    def __deepcopy__(self, memo):
        return self.__class__(  # type: ignore
            **{  # type: ignore
                k: copy.deepcopy(getattr(self, k), memo) for k in self.__slots__
            }
        )

    copy = __copy__

    def deepcopy(self):
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the current node and all of its children to a JSON serializable
        format.

        This is mostly useful for testing and when you need to convert nodes to
        JSON such as interop with other languages, printing and serialisation.

        The conversion rules are:

        - Each `Node` subclass is converted to a dict of their own converted
          attributes adding a ``__kind__`` key corresponding to the node's
          classname.
        - Locations are converted to a ``(start, end)`` tuple.
        - Primitive values (int, strings, etc.) are left as is.
        - Lists are converted per-element.

        Returns:
            Dict[str, Any]: Converted value
        """
        return cast(Dict[str, Any], _ast_to_json(self))


class Name(Node):
    __slots__ = ("loc", "value")

    def __init__(self, value: str, loc: Optional[Location] = None):
        self.value = value
        self.loc = loc


class Comment(Node):
    """
    A ``#`` comment running to the end of the line. ``value`` includes the
    leading ``#``.
    """

    __slots__ = ("loc", "value")

    def __init__(self, value: str, loc: Optional[Location] = None):
        self.value = value
        self.loc = loc


class Definition(Node):
    pass


class Value(Node):
    pass


class Type(Node):
    pass


class NamedType(Type):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Location] = None):
        self.name = name
        self.loc = loc


class ListType(Type):
    __slots__ = ("loc", "type")

    def __init__(self, type: Type, loc: Optional[Location] = None):
        self.type = type
        self.loc = loc


class NonNullType(Type):
    __slots__ = ("loc", "type")

    def __init__(self, type: Type, loc: Optional[Location] = None):
        self.type = type
        self.loc = loc


class Document(Node):
    __slots__ = ("loc", "definitions")

    def __init__(
        self,
        definitions: Optional[List[Union[Definition, Comment]]] = None,
        loc: Optional[Location] = None,
    ):
        self.definitions = (
            definitions or []
        )  # type: List[Union[Definition, Comment]]
        self.loc = loc

    @property
    def type_definitions(self) -> Dict[str, "TypeDefinition"]:
        return {
            d.name.value: d
            for d in self.definitions
            if isinstance(d, TypeDefinition)
        }


class Variable(Value):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Location] = None):
        self.name = name
        self.loc = loc


class NumberValue(Value):
    __slots__ = ("loc", "value")

    def __init__(
        self, value: Union[int, float], loc: Optional[Location] = None
    ):
        self.value = value
        self.loc = loc

    def __str__(self):
        return str(self.value)


class StringValue(Value):
    __slots__ = ("loc", "value")

    def __init__(self, value: str, loc: Optional[Location] = None):
        self.value = value
        self.loc = loc

    def __str__(self):
        return '"%s"' % self.value


class BooleanValue(Value):
    __slots__ = ("loc", "value")

    def __init__(self, value: bool, loc: Optional[Location] = None):
        self.value = value
        self.loc = loc

    def __str__(self):
        return str(self.value).lower()


class EnumValue(Value):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Location] = None):
        self.name = name
        self.loc = loc

    def __str__(self):
        return self.name.value


class ListValue(Value):
    __slots__ = ("loc", "values")

    def __init__(
        self,
        values: Optional[List[Union[Value, Comment]]] = None,
        loc: Optional[Location] = None,
    ):
        self.values = values or []  # type: List[Union[Value, Comment]]
        self.loc = loc


class ObjectValue(Value):
    __slots__ = ("loc", "fields")

    def __init__(
        self,
        fields=None,  # type: Optional[List[Union[ObjectField, Comment]]]
        loc: Optional[Location] = None,
    ):
        self.fields = fields or []  # type: List[Union[ObjectField, Comment]]
        self.loc = loc


class ObjectField(Node):
    __slots__ = ("loc", "name", "value")

    def __init__(
        self, name: Name, value: Value, loc: Optional[Location] = None
    ):
        self.name = name
        self.value = value
        self.loc = loc


class TypeDefinition(Definition):
    name = NotImplemented  # type: Name


class ObjectTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "name", "interfaces", "fields")

    def __init__(
        self,
        name: Name,
        interfaces: Optional[List[Union[NamedType, Comment]]] = None,
        fields=None,  # type: Optional[List[Union[FieldDefinition, Comment]]]
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.interfaces = interfaces or []  # type: List[Union[NamedType, Comment]]
        self.fields = (
            fields or []
        )  # type: List[Union[FieldDefinition, Comment]]
        self.loc = loc


class FieldDefinition(Node):
    """
    ``arguments`` is ``None`` when the field has no argument list at all and
    a (possibly empty) list when parentheses are present.
    """

    __slots__ = ("loc", "name", "arguments", "type")

    def __init__(
        self,
        name: Name,
        type: Type,
        arguments=None,  # type: Optional[List[Union[InputValueDefinition, Comment]]]
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.arguments = arguments
        self.type = type
        self.loc = loc


class InputValueDefinition(Node):
    __slots__ = ("loc", "name", "type", "default_value")

    def __init__(
        self,
        name: Name,
        type: Type,
        default_value: Optional[Value] = None,
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.type = type
        self.default_value = default_value
        self.loc = loc


class InterfaceTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "name", "fields")

    def __init__(
        self,
        name: Name,
        fields: Optional[List[Union[FieldDefinition, Comment]]] = None,
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.fields = (
            fields or []
        )  # type: List[Union[FieldDefinition, Comment]]
        self.loc = loc


class UnionTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "name", "types")

    def __init__(
        self,
        name: Name,
        types: Optional[List[NamedType]] = None,
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.types = types or []  # type: List[NamedType]
        self.loc = loc


class ScalarTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Location] = None):
        self.name = name
        self.loc = loc


class EnumTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "name", "values")

    def __init__(
        self,
        name: Name,
        values=None,  # type: Optional[List[Union[EnumValueDefinition, Comment]]]
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.values = (
            values or []
        )  # type: List[Union[EnumValueDefinition, Comment]]
        self.loc = loc


class EnumValueDefinition(Node):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Location] = None):
        self.name = name
        self.loc = loc


class InputObjectTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "name", "fields")

    def __init__(
        self,
        name: Name,
        fields: Optional[List[Union[InputValueDefinition, Comment]]] = None,
        loc: Optional[Location] = None,
    ):
        self.name = name
        self.fields = (
            fields or []
        )  # type: List[Union[InputValueDefinition, Comment]]
        self.loc = loc


class TypeExtensionDefinition(Definition):
    __slots__ = ("loc", "definition")

    def __init__(
        self, definition: ObjectTypeDefinition, loc: Optional[Location] = None
    ):
        self.definition = definition
        self.loc = loc


def _ast_to_json(node):
    if isinstance(node, Node):
        return dict(
            {attr: _ast_to_json(getattr(node, attr)) for attr in node._props()},
            __kind__=node.__class__.__name__,
        )
    elif isinstance(node, Location):
        return (node.start, node.end)
    elif isinstance(node, list):
        return [_ast_to_json(v) for v in node]
    else:
        return node
