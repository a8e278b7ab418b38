# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Contextual escaping for HTML text, attribute values and JSON attributes.

Example:
    >>> encode_html('<b>A &gt; B</b>')
    '&lt;b&gt;A &amp;gt; B&lt;/b&gt;'
    >>> encode_html('<b>A &gt; B</b>', double_encode=False)
    '&lt;b&gt;A &gt; B&lt;/b&gt;'
    >>> json_for_attribute([1, 2])
    '[1,2]'
"""

from __future__ import annotations

import json
import re
from html.entities import html5
from typing import Any

_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&apos;',
}

# A character reference (named or numeric) or a single special character.
_TOKEN = re.compile(
    r'&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);'
    r'|[&<>"\']'
)

_SPECIAL = re.compile(r'[&<>"\']')

_JSON_ATTRIBUTE_ESCAPES = str.maketrans({
    '<': '\\u003c',
    '>': '\\u003e',
    '&': '\\u0026',
    "'": '\\u0027',
})


def _is_character_reference(token: str) -> bool:
    """True if token is a well-formed numeric reference or a known entity."""
    if token.startswith('&#'):
        return True
    return token[1:] in html5


def _escape_keeping_references(match: re.Match) -> str:
    token = match.group()
    if len(token) == 1:
        return _ESCAPES[token]
    if _is_character_reference(token):
        return token
    # Unknown entity name: only the ampersand needs escaping.
    return '&amp;' + token[1:]


def encode_html(text: Any, double_encode: bool = True) -> str:
    """Escape text for safe placement in HTML content or quoted attributes.

    Args:
        text: Value to escape; converted with ``str()``.
        double_encode: If False, ampersands that already start a valid
            character reference (``&gt;``, ``&#62;``, ``&#x3E;``) are kept.

    Returns:
        The escaped string.
    """
    text = str(text)
    if double_encode:
        return _SPECIAL.sub(lambda m: _ESCAPES[m.group()], text)
    return _TOKEN.sub(_escape_keeping_references, text)


def encode_attribute(value: Any) -> str:
    """Escape a scalar for use inside a double-quoted attribute value."""
    return encode_html(value, double_encode=True)


def json_for_attribute(value: Any) -> str:
    """Encode value as compact JSON suitable for a single-quoted attribute.

    Double quotes are left as they are; ``<``, ``>``, ``&`` and ``'`` are
    replaced by JSON unicode escapes so the result can never close the
    attribute or open a tag.

    Raises:
        TypeError: If value is not JSON serializable.
        ValueError: If value holds NaN or an infinite float.
    """
    encoded = json.dumps(value, ensure_ascii=False, separators=(',', ':'), allow_nan=False)
    return encoded.translate(_JSON_ATTRIBUTE_ESCAPES)


class NoEncode:
    """Already-rendered markup that must be inserted without escaping.

    Follows the ``__html__`` protocol, so instances are also accepted as
    safe markup by libraries such as MarkupSafe and Jinja2.

    Example:
        >>> str(tag_named('p').content(NoEncode('<b>bold</b>')))
        '<p><b>bold</b></p>'
    """

    __slots__ = ('_markup',)

    def __init__(self, markup: Any) -> None:
        self._markup = str(markup)

    def __str__(self) -> str:
        return self._markup

    def __html__(self) -> str:
        return self._markup

    def __repr__(self) -> str:
        return f"NoEncode({self._markup!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NoEncode):
            return self._markup == other._markup
        return NotImplemented

    def __hash__(self) -> int:
        return hash((NoEncode, self._markup))
