# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlTag - Immutable, chainable HTML tag builders.

A lightweight, zero-dependency library for generating HTML markup with
contextual escaping, attribute serialization and void/normal elements,
for the Genro ecosystem (Genro Kyō).

Example:
    >>> from genro_htmltag import h, tag_named
    >>> str(h.div(h.p('Hello & welcome'), id='main', class_='container'))
    '<div id="main" class="container"><p>Hello &amp; welcome</p></div>'
    >>> str(tag_named('test').content('<b>hello</b>').encode(False))
    '<test><b>hello</b></test>'
"""

__version__ = "0.1.0"

from .attributes import (
    DATA_ATTRIBUTES,
    AttributeValue,
    ClassList,
    Dataset,
    Flag,
    Json,
    Scalar,
    Style,
    classify,
    render_attributes,
)
from .elements import HTML_ELEMENTS, VOID_ELEMENTS, HtmlBuilder, h, is_void_element, tag_named
from .encoding import NoEncode, encode_attribute, encode_html, json_for_attribute
from .exceptions import (
    EmptyTagNameError,
    HtmlTagError,
    InvalidAttributeError,
    InvalidContentError,
    VoidTagError,
)
from .tag import Tag

__all__ = [
    # Core classes
    "Tag",
    "NoEncode",
    # Factories
    "tag_named",
    "HtmlBuilder",
    "h",
    "is_void_element",
    "HTML_ELEMENTS",
    "VOID_ELEMENTS",
    # Attributes
    "AttributeValue",
    "Flag",
    "Scalar",
    "ClassList",
    "Style",
    "Dataset",
    "Json",
    "DATA_ATTRIBUTES",
    "classify",
    "render_attributes",
    # Encoding
    "encode_html",
    "encode_attribute",
    "json_for_attribute",
    # Exceptions
    "HtmlTagError",
    "EmptyTagNameError",
    "InvalidAttributeError",
    "InvalidContentError",
    "VoidTagError",
]
