# -*- coding: utf-8 -*-

import pytest

from gql_sdl.exc import (
    InvalidInputField,
    UnexpectedCharacter,
    UnexpectedEOF,
    UnexpectedToken,
)
from gql_sdl.lang import ast as _ast
from gql_sdl.lang.parser import parse


# Comparing dicts will result in better assertion diffs from pytest.
def assert_node_equal(ref, expected):
    assert _ast._ast_to_json(expected) == _ast._ast_to_json(ref)


# A few syntactic sugar helpers
def _name(loc, value):
    return _ast.Name(loc=loc, value=value)


def _type(loc, value):
    return _ast.NamedType(loc=loc, name=_ast.Name(loc=loc, value=value))


def _field(loc, name, type_, args=None):
    return _ast.FieldDefinition(loc=loc, name=name, type=type_, arguments=args)


def _input(loc, name, type_, default_value=None):
    return _ast.InputValueDefinition(
        loc=loc, name=name, type=type_, default_value=default_value
    )


def _enum_value(loc, value):
    return _ast.EnumValueDefinition(loc=loc, name=_name(loc, value))


def _doc(loc, defs):
    return _ast.Document(loc=loc, definitions=defs)


def test_it_parses_simple_type():
    body = """
type Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 31),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 31),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    fields=[
                        _field(
                            (16, 29),
                            _name((16, 21), "world"),
                            _type((23, 29), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_extension():
    body = """
extend type Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 38),
            [
                _ast.TypeExtensionDefinition(
                    loc=(1, 38),
                    definition=_ast.ObjectTypeDefinition(
                        loc=(8, 38),
                        name=_name((13, 18), "Hello"),
                        interfaces=[],
                        fields=[
                            _field(
                                (23, 36),
                                _name((23, 28), "world"),
                                _type((30, 36), "String"),
                            )
                        ],
                    ),
                )
            ],
        ),
    )


def test_it_parses_simple_non_null_type():
    body = """
type Hello {
  world: String!
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 32),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 32),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    fields=[
                        _field(
                            (16, 30),
                            _name((16, 21), "world"),
                            _ast.NonNullType(
                                loc=(23, 30), type=_type((23, 29), "String")
                            ),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_type_inheriting_interface():
    assert_node_equal(
        parse("type Hello implements World { }"),
        _doc(
            (0, 31),
            [
                _ast.ObjectTypeDefinition(
                    loc=(0, 31),
                    name=_name((5, 10), "Hello"),
                    interfaces=[_type((22, 27), "World")],
                    fields=[],
                )
            ],
        ),
    )


def test_it_parses_simple_type_inheriting_multiple_interfaces():
    assert_node_equal(
        parse("type Hello implements Wo, rld { }"),
        _doc(
            (0, 33),
            [
                _ast.ObjectTypeDefinition(
                    loc=(0, 33),
                    name=_name((5, 10), "Hello"),
                    interfaces=[
                        _type((22, 24), "Wo"),
                        _type((26, 29), "rld"),
                    ],
                    fields=[],
                )
            ],
        ),
    )


def test_it_parses_single_value_enum():
    assert_node_equal(
        parse("enum Hello { WORLD }"),
        _doc(
            (0, 20),
            [
                _ast.EnumTypeDefinition(
                    loc=(0, 20),
                    name=_name((5, 10), "Hello"),
                    values=[_enum_value((13, 18), "WORLD")],
                )
            ],
        ),
    )


def test_it_parses_double_value_enum():
    assert_node_equal(
        parse("enum Hello { WO, RLD }"),
        _doc(
            (0, 22),
            [
                _ast.EnumTypeDefinition(
                    loc=(0, 22),
                    name=_name((5, 10), "Hello"),
                    values=[
                        _enum_value((13, 15), "WO"),
                        _enum_value((17, 20), "RLD"),
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_interface():
    body = """
interface Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 36),
            [
                _ast.InterfaceTypeDefinition(
                    loc=(1, 36),
                    name=_name((11, 16), "Hello"),
                    fields=[
                        _field(
                            (21, 34),
                            _name((21, 26), "world"),
                            _type((28, 34), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_interface_with_reserved_field_name():
    body = """
interface Hello {
  type: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 35),
            [
                _ast.InterfaceTypeDefinition(
                    loc=(1, 35),
                    name=_name((11, 16), "Hello"),
                    fields=[
                        _field(
                            (21, 33),
                            _name((21, 25), "type"),
                            _type((27, 33), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_rejects_reserved_field_name_when_configured():
    body = """
interface Hello {
  type: String
}"""
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(body, allow_reserved_field_names=False)
    assert exc_info.value.message == 'Expected "}" but got "t"'
    assert exc_info.value.position == 21


def test_it_parses_simple_field_with_arg():
    body = """
type Hello {
  world(flag: Boolean): String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 46),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 46),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    fields=[
                        _field(
                            (16, 44),
                            _name((16, 21), "world"),
                            _type((38, 44), "String"),
                            [
                                _input(
                                    (22, 35),
                                    _name((22, 26), "flag"),
                                    _type((28, 35), "Boolean"),
                                )
                            ],
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_field_with_arg_with_default_value():
    body = """
type Hello {
  world(flag: Boolean = true): String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 53),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 53),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    fields=[
                        _field(
                            (16, 51),
                            _name((16, 21), "world"),
                            _type((45, 51), "String"),
                            [
                                _input(
                                    (22, 42),
                                    _name((22, 26), "flag"),
                                    _type((28, 35), "Boolean"),
                                    _ast.BooleanValue(value=True, loc=(38, 42)),
                                )
                            ],
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_field_with_list_arg():
    body = """
type Hello {
  world(things: [String]): String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 49),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 49),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    fields=[
                        _field(
                            (16, 47),
                            _name((16, 21), "world"),
                            _type((41, 47), "String"),
                            [
                                _input(
                                    (22, 38),
                                    _name((22, 28), "things"),
                                    _ast.ListType(
                                        loc=(30, 38),
                                        type=_type((31, 37), "String"),
                                    ),
                                )
                            ],
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_field_with_two_args():
    body = """
type Hello {
  world(argOne: Boolean, argTwo: Int): String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 61),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 61),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    fields=[
                        _field(
                            (16, 59),
                            _name((16, 21), "world"),
                            _type((53, 59), "String"),
                            [
                                _input(
                                    (22, 37),
                                    _name((22, 28), "argOne"),
                                    _type((30, 37), "Boolean"),
                                ),
                                _input(
                                    (39, 50),
                                    _name((39, 45), "argTwo"),
                                    _type((47, 50), "Int"),
                                ),
                            ],
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_union():
    assert_node_equal(
        parse("union Hello = World"),
        _doc(
            (0, 19),
            [
                _ast.UnionTypeDefinition(
                    loc=(0, 19),
                    name=_name((6, 11), "Hello"),
                    types=[_type((14, 19), "World")],
                )
            ],
        ),
    )


def test_it_parses_union_with_two_types():
    assert_node_equal(
        parse("union Hello = Wo | Rld"),
        _doc(
            (0, 22),
            [
                _ast.UnionTypeDefinition(
                    loc=(0, 22),
                    name=_name((6, 11), "Hello"),
                    types=[_type((14, 16), "Wo"), _type((19, 22), "Rld")],
                )
            ],
        ),
    )


def test_it_parses_scalar():
    assert_node_equal(
        parse("scalar Hello"),
        _doc(
            (0, 12),
            [
                _ast.ScalarTypeDefinition(
                    loc=(0, 12), name=_name((7, 12), "Hello")
                )
            ],
        ),
    )


def test_it_parses_simple_input_object():
    body = """
input Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 32),
            [
                _ast.InputObjectTypeDefinition(
                    loc=(1, 32),
                    name=_name((7, 12), "Hello"),
                    fields=[
                        _input(
                            (17, 30),
                            _name((17, 22), "world"),
                            _type((24, 30), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_fails_on_simple_input_object_with_args():
    body = """
input Hello {
  world(foo: Int): String
}"""
    with pytest.raises(InvalidInputField) as exc_info:
        parse(body)
    assert exc_info.value.position == 22
    assert (
        exc_info.value.message == 'Input field "world" cannot define arguments'
    )


def test_it_keeps_comments_as_nodes():
    body = """# A
type Hello {
  # B
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (0, 40),
            [
                _ast.Comment(loc=(0, 3), value="# A"),
                _ast.ObjectTypeDefinition(
                    loc=(4, 40),
                    name=_name((9, 14), "Hello"),
                    interfaces=[],
                    fields=[
                        _ast.Comment(loc=(19, 22), value="# B"),
                        _field(
                            (25, 38),
                            _name((25, 30), "world"),
                            _type((32, 38), "String"),
                        ),
                    ],
                ),
            ],
        ),
    )


def test_field_location_excludes_trailing_comma():
    doc = parse("type Hello { world: String, foo: Int }")
    world, foo = doc.definitions[0].fields
    assert (world.loc.start, world.loc.end) == (13, 26)
    assert (foo.loc.start, foo.loc.end) == (28, 36)


def test_empty_parentheses_are_distinguished_from_no_arguments():
    doc = parse("type Hello { a: Int, b(): Int }")
    a, b = doc.definitions[0].fields
    assert a.arguments is None
    assert b.arguments == []


def test_default_value_is_none_when_omitted():
    doc = parse("input Hello { a: Int, b: Int = 2 }")
    a, b = doc.definitions[0].fields
    assert a.default_value is None
    assert b.default_value.value == 2


def test_empty_document():
    assert_node_equal(parse(""), _doc((0, 0), []))


@pytest.mark.parametrize(
    "body, error_cls, position, message",
    [
        (
            "type Hello {\n  world: String\n",
            UnexpectedEOF,
            29,
            'Expected "}" but got "<EOF>"',
        ),
        ("type { }", UnexpectedToken, 5, 'Expected Name but got "{"'),
        ("scalar type", UnexpectedToken, 7, 'Expected Name but got "t"'),
        (
            "type Hello { world: }",
            UnexpectedToken,
            20,
            'Expected Type but got "}"',
        ),
        (
            "type Hello { world String }",
            UnexpectedToken,
            19,
            'Expected ":" but got "S"',
        ),
        (
            "type Hello { world: [String }",
            UnexpectedToken,
            28,
            'Expected "]" but got "}"',
        ),
        (
            "union Hello = ",
            UnexpectedEOF,
            14,
            'Expected NamedType but got "<EOF>"',
        ),
        (
            "union Hello = | World",
            UnexpectedToken,
            14,
            'Expected NamedType but got "|"',
        ),
        (
            "union Hello = Wo |",
            UnexpectedEOF,
            18,
            'Expected NamedType but got "<EOF>"',
        ),
        (
            "type Hello { world(flag: Boolean = null): String }",
            UnexpectedToken,
            35,
            'Expected Value but got "n"',
        ),
        (
            "type Hello { world(flag: Boolean = $var): String }",
            UnexpectedToken,
            35,
            'Expected Value but got "$"',
        ),
        (
            "extend scalar Hello",
            UnexpectedToken,
            7,
            'Expected ObjectTypeDefinition but got "s"',
        ),
        ("enum Hello { null }", UnexpectedToken, 13, 'Expected "}" but got "n"'),
        (
            "type Hello { world: String } garbage",
            UnexpectedCharacter,
            29,
            'Unexpected character "g", expected comment or definition',
        ),
        (
            "typeHello { world: String }",
            UnexpectedCharacter,
            0,
            'Unexpected character "t", expected comment or definition',
        ),
        (
            "query { field }",
            UnexpectedCharacter,
            0,
            'Unexpected character "q", expected comment or definition',
        ),
    ],
)
def test_it_provides_useful_errors(body, error_cls, position, message):
    with pytest.raises(error_cls) as exc_info:
        parse(body)

    assert exc_info.value.position == position
    assert exc_info.value.message == message


def test_trailing_garbage_is_reported_before_later_constructs():
    body = "scalar Foo\n}\ntype Bar { field: [Int }"
    with pytest.raises(UnexpectedCharacter) as exc_info:
        parse(body)
    assert exc_info.value.position == 11
    assert exc_info.value.message == (
        'Unexpected character "}", expected comment or definition'
    )
