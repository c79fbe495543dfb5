# -*- coding: utf-8 -*-

import json
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, Union

from ..exc import UnexpectedNode
from . import ast as _ast


class ASTPrinter:
    """ String formatter for ast node.

    Comments are printed on their own line where they appear in definition,
    field, argument and enum value lists. Comments found inside interface
    lists and value literals cannot be preserved on a single line and are
    left out.

    Args:
        indent (Union[str, int]): Indent character or number of spaces
    """

    __slots__ = ("indent", "_dispatch")

    def __init__(self, indent: Union[str, int] = 2):
        if isinstance(indent, int):
            self.indent = indent * " "
        else:
            self.indent = indent

        self._dispatch = {
            _ast.Name: self.print_name,
            _ast.Comment: self.print_comment,
            _ast.Document: self.print_document,
            _ast.Variable: self.print_variable,
            _ast.NumberValue: self.print_number_value,
            _ast.StringValue: self.print_string_value,
            _ast.BooleanValue: self.print_boolean_value,
            _ast.EnumValue: self.print_enum_value,
            _ast.ListValue: self.print_list_value,
            _ast.ObjectValue: self.print_object_value,
            _ast.ObjectField: self.print_object_field,
            _ast.NamedType: self.print_named_type,
            _ast.ListType: self.print_list_type,
            _ast.NonNullType: self.print_non_null_type,
            _ast.ObjectTypeDefinition: self.print_object_type_definition,
            _ast.FieldDefinition: self.print_field_definition,
            _ast.InputValueDefinition: self.print_input_value_definition,
            _ast.InterfaceTypeDefinition: self.print_interface_type_definition,
            _ast.UnionTypeDefinition: self.print_union_type_definition,
            _ast.ScalarTypeDefinition: self.print_scalar_type_definition,
            _ast.EnumTypeDefinition: self.print_enum_type_definition,
            _ast.EnumValueDefinition: self.print_enum_value_definition,
            _ast.InputObjectTypeDefinition: self.print_input_object_type_definition,
            _ast.TypeExtensionDefinition: self.print_type_extension_definition,
        }  # type: Dict[Type[_ast.Node], Callable[[Any], str]]

    def __call__(self, node: Optional[_ast.Node]) -> str:
        """ Converts an AST into a string, using a set of reasonable
        formatting rules.

        Args:
            node (gql_sdl.lang.ast.Node): Input node

        Returns:
            str: Formatted value for the provided node
        """
        if node is None:
            return ""

        try:
            print_fn = self._dispatch[node.__class__]
        except KeyError:
            raise UnexpectedNode(node)
        return print_fn(node)

    def print_name(self, node: _ast.Name) -> str:
        return node.value

    def print_comment(self, node: _ast.Comment) -> str:
        return node.value

    def print_document(self, node: _ast.Document) -> str:
        parts = []  # type: List[str]
        previous = None  # type: Optional[_ast.Node]
        for definition in node.definitions:
            if previous is not None:
                parts.append(
                    "\n" if isinstance(previous, _ast.Comment) else "\n\n"
                )
            parts.append(self(definition))
            previous = definition
        return "".join(parts) + "\n"

    def print_variable(self, node: _ast.Variable) -> str:
        return "$%s" % node.name.value

    def print_number_value(self, node: _ast.NumberValue) -> str:
        return json.dumps(node.value)

    def print_string_value(self, node: _ast.StringValue) -> str:
        return json.dumps(node.value)

    def print_boolean_value(self, node: _ast.BooleanValue) -> str:
        return "true" if node.value else "false"

    def print_enum_value(self, node: _ast.EnumValue) -> str:
        return node.name.value

    def print_list_value(self, node: _ast.ListValue) -> str:
        return "[%s]" % _join(map(self, _skip_comments(node.values)), ", ")

    def print_object_value(self, node: _ast.ObjectValue) -> str:
        return "{%s}" % _join(map(self, _skip_comments(node.fields)), ", ")

    def print_object_field(self, node: _ast.ObjectField) -> str:
        return "%s: %s" % (node.name.value, self(node.value))

    def print_named_type(self, node: _ast.NamedType) -> str:
        return node.name.value

    def print_list_type(self, node: _ast.ListType) -> str:
        return "[%s]" % self(node.type)

    def print_non_null_type(self, node: _ast.NonNullType) -> str:
        return "%s!" % self(node.type)

    def print_object_type_definition(
        self, node: _ast.ObjectTypeDefinition
    ) -> str:
        return _join(
            [
                "type",
                node.name.value,
                _wrap(
                    "implements ",
                    _join(map(self, _skip_comments(node.interfaces)), ", "),
                ),
                _block(map(self, node.fields), self.indent),
            ],
            " ",
        )

    def print_field_definition(self, node: _ast.FieldDefinition) -> str:
        return _join(
            [
                node.name.value,
                self.print_argument_definitions(node),
                ": ",
                self(node.type),
            ]
        )

    def print_argument_definitions(self, node: _ast.FieldDefinition) -> str:
        if node.arguments is None:
            return ""
        args = list(map(self, node.arguments))
        if not any(isinstance(a, _ast.Comment) for a in node.arguments):
            return "(%s)" % _join(args, ", ")
        else:
            return "(\n%s\n)" % _indent(_join(args, "\n"), self.indent)

    def print_input_value_definition(
        self, node: _ast.InputValueDefinition
    ) -> str:
        return _join(
            [
                _join([node.name.value, ": ", self(node.type)]),
                _wrap(" = ", self(node.default_value)),
            ]
        )

    def print_interface_type_definition(
        self, node: _ast.InterfaceTypeDefinition
    ) -> str:
        return _join(
            [
                "interface",
                node.name.value,
                _block(map(self, node.fields), self.indent),
            ],
            " ",
        )

    def print_union_type_definition(
        self, node: _ast.UnionTypeDefinition
    ) -> str:
        return _join(
            [
                "union",
                node.name.value,
                _wrap("= ", _join(map(self, node.types), " | ")),
            ],
            " ",
        )

    def print_scalar_type_definition(
        self, node: _ast.ScalarTypeDefinition
    ) -> str:
        return "scalar %s" % node.name.value

    def print_enum_type_definition(self, node: _ast.EnumTypeDefinition) -> str:
        return _join(
            [
                "enum",
                node.name.value,
                _block(map(self, node.values), self.indent),
            ],
            " ",
        )

    def print_enum_value_definition(
        self, node: _ast.EnumValueDefinition
    ) -> str:
        return node.name.value

    def print_input_object_type_definition(
        self, node: _ast.InputObjectTypeDefinition
    ) -> str:
        return _join(
            [
                "input",
                node.name.value,
                _block(map(self, node.fields), self.indent),
            ],
            " ",
        )

    def print_type_extension_definition(
        self, node: _ast.TypeExtensionDefinition
    ) -> str:
        return "extend %s" % self(node.definition)


def _skip_comments(nodes: Iterable[_ast.Node]) -> Iterable[_ast.Node]:
    return (n for n in nodes if not isinstance(n, _ast.Comment))


def _wrap(start: str, maybe_string: Optional[str], end: str = "") -> str:
    return "%s%s%s" % (start, maybe_string, end) if maybe_string else ""


def _join(entries: Iterable[str], separator: str = "") -> str:
    return separator.join([x for x in entries if x])


def _indent(maybe_string: str, indent: str) -> str:
    return maybe_string and (
        indent + maybe_string.replace("\n", "\n%s" % indent)
    )


def _block(iterator: Iterable[str], indent: str) -> str:
    arr = list(iterator)
    if not arr:
        return "{}"
    return "{\n%s\n}" % _join(map(lambda s: _indent(s, indent), arr), "\n")


def print_ast(node: _ast.Node, indent: Union[str, int] = 2) -> str:
    """ Converts an AST node into a valid SDL string, using a set of
    reasonable formatting rules.

    Args:
        node (gql_sdl.lang.ast.Node): Node to format.

        indent (Union[str, int]): Indent character or number of spaces

    Returns:
        str:
    """
    return ASTPrinter(indent=indent)(node)
