# -*- coding: utf-8 -*-
"""
gql_sdl
~~~~~~~

gql_sdl is a pure python parser for the GraphQL schema definition language
(SDL). It turns SDL text into a tree of :mod:`gql_sdl.lang.ast` nodes where
every node knows the exact span of source it was parsed from.

Mapping the tree onto a runtime type system is left to consumers; the
:mod:`gql_sdl.lang.descriptions` helpers cover the common need of turning
``#`` comments into description strings.
"""

# flake8: noqa

from .version import __version__  # isort:skip

from . import exc, lang
from .lang import parse, parse_type, parse_value, print_ast
from .lang.descriptions import collect_descriptions

__all__ = (
    "__version__",
    "parse",
    "parse_type",
    "parse_value",
    "print_ast",
    "collect_descriptions",
)
