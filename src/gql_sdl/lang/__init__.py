# -*- coding: utf-8 -*-
"""
The :mod:`gql_sdl.lang` module is responsible for parsing and operating on
schema definition language documents.
"""

# flake8: noqa

from .cursor import Cursor
from .parser import Parser, parse, parse_type, parse_value
from .printer import print_ast
from .source import Source

__all__ = (
    "parse",
    "parse_type",
    "parse_value",
    "print_ast",
    "Parser",
    "Cursor",
    "Source",
)
