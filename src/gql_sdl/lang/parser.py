# -*- coding: utf-8 -*-
"""
Recursive descent parser for the GraphQL schema definition language.

The parser is scannerless: every grammar rule matches directly against the
source text through a :class:`~gql_sdl.lang.cursor.Cursor`. Rules return
``None`` when they do not match, which is what ordered alternation and
repetition are built on; a required production that does not match raises a
:class:`~gql_sdl.exc.SDLSyntaxError` and aborts the whole parse.

Only type system definitions are supported, executable definitions
(operations and fragments) are not.
"""

import contextlib
import functools as ft
import json
import logging
import math
import re
from typing import Any, Callable, Iterator, List, Optional, Union

from ..exc import (
    InvalidInputField,
    SDLSyntaxError,
    UnexpectedCharacter,
    UnexpectedToken,
)
from . import ast as _ast
from .cursor import Cursor, with_position
from .source import Source

logger = logging.getLogger(__name__)

Rule = Callable[..., Optional[Any]]

RESERVED_WORDS = frozenset(
    ["type", "interface", "union", "scalar", "enum", "input", "extend", "null"]
)

NAME = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")

NUMBER = re.compile(
    r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?(?![_0-9A-Za-z.])"
)

STRING = re.compile(r'"(?:[^"\\\n]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*"')

COMMENT = re.compile(r"#[^\n]*")


@contextlib.contextmanager
def _nesting_guard(cursor: Cursor) -> Iterator[None]:
    # Nesting depth is bounded by the interpreter's recursion limit.
    try:
        yield
    except RecursionError:
        raise SDLSyntaxError(
            "Maximum nesting depth exceeded", cursor.position, cursor.source
        ) from None


def parse(source: Union[str, bytes, Source], **kwargs: Any) -> _ast.Document:
    """
    Parse a string as a schema definition document.

    Args:
        source (Union[str, bytes, Source]): source document.
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~gql_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.

    Returns:
        `gql_sdl.lang.ast.Document`: Parsed document.
    """
    parser = Parser(source, **kwargs)
    cursor = parser.cursor()
    with _nesting_guard(cursor):
        document = parser.parse_document(cursor)
    logger.debug(
        "Parsed %d top level node(s) from %s",
        len(document.definitions),
        parser.source.name,
    )
    return document


def parse_value(
    source: Union[str, bytes, Source], const: bool = False, **kwargs: Any
) -> _ast.Value:
    """
    Parse a string as a single value literal.

    This is useful within tools that operate upon values (eg. ``[42]``)
    directly and in isolation of complete documents.

    Args:
        source (Union[str, bytes, Source]): source document
        const (bool): Reject variable references (``$foo``)
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~gql_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.
    """
    parser = Parser(source, **kwargs)
    cursor = parser.cursor()
    with _nesting_guard(cursor):
        value = cursor.required(
            parser.parse_value_literal(cursor, const), "Value"
        )
    parser.expect_end(cursor)
    return value


def parse_type(source: Union[str, bytes, Source], **kwargs: Any) -> _ast.Type:
    """
    Parse a string as a single type reference (eg. ``[Int!]``).

    Args:
        source (Union[str, bytes, Source]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~gql_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.
    """
    parser = Parser(source, **kwargs)
    cursor = parser.cursor()
    with _nesting_guard(cursor):
        type_ = cursor.required(parser.parse_type_reference(cursor), "Type")
    parser.expect_end(cursor)
    return type_


class Parser:
    """
    Schema definition language parser.

    The parser only holds read-only configuration: every ``parse_*`` method
    takes the :class:`~gql_sdl.lang.cursor.Cursor` it operates on, which
    makes it safe to share a parser instance or run multiple parses
    concurrently as long as they don't share a cursor. Call :meth:`cursor` to
    get a fresh one.

    Rules wrapped with :func:`~gql_sdl.lang.cursor.with_position` return
    ``None`` when they don't match and leave the cursor where it was.

    Args:
        source (Union[str, bytes, Source]): source document

        source_name (Optional[str]): Label for the source, used in locations
            and error messages. Ignored if ``source`` is already a
            :class:`~gql_sdl.lang.source.Source`.

        allow_reserved_field_names (bool):
            By default reserved words (``type``, ``input``, etc.) can be used
            as field, argument and input field names where no definition
            keyword can appear. Set this to ``False`` to reject them anywhere
            a name is expected. Type names, type references and enum values
            never accept reserved words.
    """

    __slots__ = ("_source", "_allow_reserved_field_names")

    def __init__(
        self,
        source: Union[str, bytes, Source],
        source_name: Optional[str] = None,
        allow_reserved_field_names: bool = True,
    ):
        self._source = (
            source if isinstance(source, Source) else Source(source, source_name)
        )
        self._allow_reserved_field_names = allow_reserved_field_names

    @property
    def source(self) -> Source:
        return self._source

    def cursor(self) -> Cursor:
        return Cursor(self._source)

    def many(self, cursor: Cursor, parse_fn: Rule, *args: Any) -> List[Any]:
        """
        Zero or more nodes, determined by ``parse_fn``, with comments allowed
        in between. Stops at the first position where neither a comment nor
        ``parse_fn`` match.
        """
        nodes = []
        while True:
            node = self.parse_comment(cursor)
            if node is None:
                node = parse_fn(cursor, *args)
            if node is None:
                return nodes
            nodes.append(node)

    def one_of(self, cursor: Cursor, *parse_fns: Rule) -> Optional[Any]:
        """
        Result of the first of ``parse_fns`` that matches, ``None`` if none
        do.
        """
        for parse_fn in parse_fns:
            node = parse_fn(cursor)
            if node is not None:
                return node
        return None

    def expect_end(self, cursor: Cursor) -> None:
        if not cursor.at_end:
            raise UnexpectedCharacter(
                'Unexpected character "%s"' % cursor.peek(),
                cursor.position,
                cursor.source,
            )

    @with_position
    def parse_document(self, cursor: Cursor) -> _ast.Document:
        """
        Document : (Comment | Definition)*
        """
        definitions = self.many(cursor, self.parse_definition)
        if not cursor.at_end:
            raise UnexpectedCharacter(
                'Unexpected character "%s", expected comment or definition'
                % cursor.peek(),
                cursor.position,
                cursor.source,
            )
        return _ast.Document(definitions=definitions)

    @with_position
    def parse_comment(self, cursor: Cursor) -> Optional[_ast.Comment]:
        """
        Comment : # CommentChar*
        """
        value = cursor.match_pattern(COMMENT)
        if value is None:
            return None
        return _ast.Comment(value)

    @with_position
    def parse_name(
        self, cursor: Cursor, allow_reserved: bool = False
    ) -> Optional[_ast.Name]:
        """
        Name : /[_A-Za-z][_0-9A-Za-z]*/ but not a reserved word

        Args:
            allow_reserved: Accept reserved words
        """
        start = cursor.position
        value = cursor.match_pattern(NAME)
        if value is None:
            return None
        if value in RESERVED_WORDS and not allow_reserved:
            cursor.position = start
            return None
        return _ast.Name(value)

    def parse_field_name(self, cursor: Cursor) -> Optional[_ast.Name]:
        return self.parse_name(cursor, self._allow_reserved_field_names)

    @with_position
    def parse_named_type(self, cursor: Cursor) -> Optional[_ast.NamedType]:
        """
        NamedType : Name
        """
        name = self.parse_name(cursor)
        if name is None:
            return None
        return _ast.NamedType(name, loc=name.loc)

    @with_position
    def parse_list_type(self, cursor: Cursor) -> Optional[_ast.ListType]:
        """
        ListType : [ Type ]
        """
        if cursor.match("[") is None:
            return None
        node = _ast.ListType(
            cursor.required(self.parse_type_reference(cursor), "Type")
        )
        cursor.expect("]")
        return node

    @with_position
    def parse_type_reference(self, cursor: Cursor) -> Optional[_ast.Type]:
        """
        Type : NamedType | ListType | NonNullType

        - NonNullType : NamedType ! | ListType !
        """
        type_ = self.one_of(
            cursor, self.parse_named_type, self.parse_list_type
        )  # type: Optional[_ast.Type]
        if type_ is None:
            return None
        if cursor.match("!") is not None:
            return _ast.NonNullType(type_)
        return type_

    @with_position
    def parse_variable(self, cursor: Cursor) -> Optional[_ast.Variable]:
        """
        Variable : $ Name
        """
        if cursor.match("$") is None:
            return None
        return _ast.Variable(
            cursor.required(self.parse_field_name(cursor), "Name")
        )

    @with_position
    def parse_number_value(
        self, cursor: Cursor
    ) -> Optional[_ast.NumberValue]:
        start = cursor.position
        value = cursor.match_pattern(NUMBER)
        if value is None:
            return None
        number = json.loads(value)
        if isinstance(number, float) and not math.isfinite(number):
            raise UnexpectedToken(
                'Number "%s" is out of range' % value, start, cursor.source
            )
        return _ast.NumberValue(number)

    @with_position
    def parse_string_value(
        self, cursor: Cursor
    ) -> Optional[_ast.StringValue]:
        value = cursor.match_pattern(STRING)
        if value is None:
            return None
        return _ast.StringValue(json.loads(value, strict=False))

    @with_position
    def parse_boolean_value(
        self, cursor: Cursor
    ) -> Optional[_ast.BooleanValue]:
        if cursor.match_keyword("true") is not None:
            return _ast.BooleanValue(True)
        if cursor.match_keyword("false") is not None:
            return _ast.BooleanValue(False)
        return None

    @with_position
    def parse_enum_value(self, cursor: Cursor) -> Optional[_ast.EnumValue]:
        name = self.parse_name(cursor)
        if name is None:
            return None
        return _ast.EnumValue(name)

    @with_position
    def parse_list_value(
        self, cursor: Cursor, const: bool = False
    ) -> Optional[_ast.ListValue]:
        """
        ListValue[Const] : [ Value[?Const]* ]
        """
        if cursor.match("[") is None:
            return None
        node = _ast.ListValue(
            self.many(cursor, self.parse_value_literal, const)
        )
        cursor.expect("]")
        return node

    @with_position
    def parse_object_field(
        self, cursor: Cursor, const: bool = False
    ) -> Optional[_ast.ObjectField]:
        """
        ObjectField[Const] : Name : Value[?Const]
        """
        name = self.parse_field_name(cursor)
        if name is None:
            return None
        cursor.expect(":")
        return _ast.ObjectField(
            name,
            cursor.required(self.parse_value_literal(cursor, const), "Value"),
        )

    @with_position
    def parse_object_value(
        self, cursor: Cursor, const: bool = False
    ) -> Optional[_ast.ObjectValue]:
        """
        ObjectValue[Const] : { ObjectField[?Const]* }
        """
        if cursor.match("{") is None:
            return None
        node = _ast.ObjectValue(
            self.many(cursor, self.parse_object_field, const)
        )
        cursor.expect("}")
        return node

    @with_position
    def parse_value_literal(
        self, cursor: Cursor, const: bool = False
    ) -> Optional[_ast.Value]:
        """
        Any value literal; variable references are only accepted when
        ``const`` is ``False``.
        """
        if not const:
            variable = self.parse_variable(cursor)
            if variable is not None:
                return variable
        return self.one_of(
            cursor,
            self.parse_number_value,
            self.parse_string_value,
            self.parse_boolean_value,
            self.parse_enum_value,
            ft.partial(self.parse_list_value, const=const),
            ft.partial(self.parse_object_value, const=const),
        )

    @with_position
    def parse_default_value(self, cursor: Cursor) -> Optional[_ast.Value]:
        """
        DefaultValue : = Value[Const]
        """
        if cursor.match("=") is None:
            return None
        return cursor.required(self.parse_value_literal(cursor, True), "Value")

    @with_position
    def parse_definition(self, cursor: Cursor) -> Optional[_ast.Definition]:
        # N.B. Operations and fragments are not supported.
        return self.parse_type_definition(cursor)

    @with_position
    def parse_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.Definition]:
        """
        TypeDefinition : ObjectTypeDefinition | InterfaceTypeDefinition \
        | UnionTypeDefinition | ScalarTypeDefinition | EnumTypeDefinition \
        | InputObjectTypeDefinition | TypeExtensionDefinition
        """
        return self.one_of(
            cursor,
            self.parse_object_type_definition,
            self.parse_interface_type_definition,
            self.parse_union_type_definition,
            self.parse_scalar_type_definition,
            self.parse_enum_type_definition,
            self.parse_input_object_type_definition,
            self.parse_type_extension_definition,
        )

    @with_position
    def parse_object_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.ObjectTypeDefinition]:
        """
        ObjectTypeDefinition : \
        type Name ImplementsInterfaces? { FieldDefinition* }
        """
        if cursor.match_keyword("type") is None:
            return None
        name = cursor.required(self.parse_name(cursor), "Name")
        interfaces = self.parse_implements_interfaces(cursor)
        cursor.expect("{")
        fields = self.many(cursor, self.parse_field_definition)
        cursor.expect("}")
        return _ast.ObjectTypeDefinition(
            name,
            interfaces=interfaces if interfaces is not None else [],
            fields=fields,
        )

    @with_position
    def parse_implements_interfaces(
        self, cursor: Cursor
    ) -> Optional[List[Union[_ast.NamedType, _ast.Comment]]]:
        """
        ImplementsInterfaces : implements NamedType*
        """
        if cursor.match_keyword("implements") is None:
            return None
        return self.many(cursor, self.parse_named_type)

    @with_position
    def parse_field_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.FieldDefinition]:
        """
        FieldDefinition : Name ArgumentsDefinition? : Type
        """
        name = self.parse_field_name(cursor)
        if name is None:
            return None
        arguments = self.parse_argument_definitions(cursor)
        cursor.expect(":")
        return _ast.FieldDefinition(
            name,
            cursor.required(self.parse_type_reference(cursor), "Type"),
            arguments=arguments,
        )

    @with_position
    def parse_argument_definitions(
        self, cursor: Cursor
    ) -> Optional[List[Union[_ast.InputValueDefinition, _ast.Comment]]]:
        """
        ArgumentsDefinition : ( InputValueDefinition* )
        """
        if cursor.match("(") is None:
            return None
        arguments = self.many(cursor, self.parse_input_value_definition)
        cursor.expect(")")
        return arguments

    @with_position
    def parse_input_value_definition(
        self, cursor: Cursor, is_input_field: bool = False
    ) -> Optional[_ast.InputValueDefinition]:
        """
        InputValueDefinition : Name : Type DefaultValue?

        Args:
            is_input_field: Reject argument definitions, which input object
                fields cannot have
        """
        name = self.parse_field_name(cursor)
        if name is None:
            return None
        if is_input_field and cursor.peek() == "(":
            raise InvalidInputField(
                'Input field "%s" cannot define arguments' % name.value,
                cursor.position,
                cursor.source,
            )
        cursor.expect(":")
        type_ = cursor.required(self.parse_type_reference(cursor), "Type")
        return _ast.InputValueDefinition(
            name, type_, default_value=self.parse_default_value(cursor)
        )

    @with_position
    def parse_interface_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.InterfaceTypeDefinition]:
        """
        InterfaceTypeDefinition : interface Name { FieldDefinition* }
        """
        if cursor.match_keyword("interface") is None:
            return None
        name = cursor.required(self.parse_name(cursor), "Name")
        cursor.expect("{")
        fields = self.many(cursor, self.parse_field_definition)
        cursor.expect("}")
        return _ast.InterfaceTypeDefinition(name, fields=fields)

    @with_position
    def parse_union_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.UnionTypeDefinition]:
        """
        UnionTypeDefinition : union Name = NamedType ( | NamedType )*
        """
        if cursor.match_keyword("union") is None:
            return None
        name = cursor.required(self.parse_name(cursor), "Name")
        cursor.expect("=")
        types = [cursor.required(self.parse_named_type(cursor), "NamedType")]
        while cursor.match("|") is not None:
            types.append(
                cursor.required(self.parse_named_type(cursor), "NamedType")
            )
        return _ast.UnionTypeDefinition(name, types=types)

    @with_position
    def parse_scalar_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.ScalarTypeDefinition]:
        """
        ScalarTypeDefinition : scalar Name
        """
        if cursor.match_keyword("scalar") is None:
            return None
        return _ast.ScalarTypeDefinition(
            cursor.required(self.parse_name(cursor), "Name")
        )

    @with_position
    def parse_enum_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.EnumTypeDefinition]:
        """
        EnumTypeDefinition : enum Name { EnumValueDefinition* }
        """
        if cursor.match_keyword("enum") is None:
            return None
        name = cursor.required(self.parse_name(cursor), "Name")
        cursor.expect("{")
        values = self.many(cursor, self.parse_enum_value_definition)
        cursor.expect("}")
        return _ast.EnumTypeDefinition(name, values=values)

    @with_position
    def parse_enum_value_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.EnumValueDefinition]:
        """
        EnumValueDefinition : Name
        """
        name = self.parse_name(cursor)
        if name is None:
            return None
        return _ast.EnumValueDefinition(name)

    @with_position
    def parse_input_object_type_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.InputObjectTypeDefinition]:
        """
        InputObjectTypeDefinition : \
        input Name { InputValueDefinition* }
        """
        if cursor.match_keyword("input") is None:
            return None
        name = cursor.required(self.parse_name(cursor), "Name")
        cursor.expect("{")
        fields = self.many(cursor, self.parse_input_value_definition, True)
        cursor.expect("}")
        return _ast.InputObjectTypeDefinition(name, fields=fields)

    @with_position
    def parse_type_extension_definition(
        self, cursor: Cursor
    ) -> Optional[_ast.TypeExtensionDefinition]:
        """
        TypeExtensionDefinition : extend ObjectTypeDefinition
        """
        if cursor.match_keyword("extend") is None:
            return None
        return _ast.TypeExtensionDefinition(
            cursor.required(
                self.parse_object_type_definition(cursor),
                "ObjectTypeDefinition",
            )
        )
