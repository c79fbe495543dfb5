# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "gql_sdl"
__description__ = "Scannerless GraphQL schema definition language parser."
__url__ = "https://github.com/lirsacc/gql-sdl"
__version__ = "0.1.0"
__author__ = "Charles Lirsac"
__author_email__ = "c.lirsac@gmail.com"
__license__ = "MIT"
__copyright__ = "Copyright 2019 Charles Lirsac"
