# -*- coding: utf-8 -*-
"""
Source documents.
"""

from typing import Any, Optional, Union

from .._string_utils import ensure_unicode

DEFAULT_SOURCE_NAME = "GraphQL"


class Source:
    """
    Immutable SDL text and the label used to refer to it in locations and
    error messages.

    Args:
        body (Union[str, bytes]): Source text. Bytestrings will be converted
            to unicode.
        name (Optional[str]): Label, defaults to ``"GraphQL"``.
    """

    __slots__ = ("body", "name")

    def __init__(self, body: Union[str, bytes], name: Optional[str] = None):
        self.body = ensure_unicode(body)
        self.name = name or DEFAULT_SOURCE_NAME

    def __len__(self) -> int:
        return len(self.body)

    def __eq__(self, rhs: Any) -> bool:
        return (
            isinstance(rhs, Source)
            and rhs.body == self.body
            and rhs.name == self.name
        )

    def __hash__(self) -> int:
        return hash((self.body, self.name))

    def __repr__(self) -> str:
        return "<Source %s (%d chars)>" % (self.name, len(self.body))
