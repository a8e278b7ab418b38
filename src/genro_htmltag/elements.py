# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML5 element registry and tag factories.

Two ways to create tags:

- ``tag_named(name)`` for any name, void-ness inferred from the registry;
- ``HtmlBuilder`` (and its shared instance ``h``) with one factory per
  HTML5 element, void-ness fixed by the element.

Example:
    >>> str(h.ul(h.li('one'), h.li('two'), class_='menu'))
    '<ul class="menu"><li>one</li><li>two</li></ul>'
    >>> str(h.br())
    '<br>'
    >>> str(tag_named('BR'))
    '<BR>'

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/
    - Void elements: https://html.spec.whatwg.org/multipage/syntax.html#void-elements
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .exceptions import VoidTagError
from .tag import Tag

logger = logging.getLogger(__name__)

# HTML5 void elements (self-closing, no content)
VOID_ELEMENTS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "command",  # obsolete
    "embed",
    "hr",
    "img",
    "input",
    "keygen",  # obsolete
    "link",
    "meta",
    "param",  # deprecated but still valid
    "source",
    "track",
    "wbr",
})

HTML_ELEMENTS = frozenset({
    "a", "abbr", "address", "area", "article", "aside", "audio",
    "b", "base", "bdi", "bdo", "blockquote", "body", "br", "button",
    "canvas", "caption", "cite", "code", "col", "colgroup",
    "data", "datalist", "dd", "del", "details", "dfn", "dialog", "div", "dl", "dt",
    "em", "embed",
    "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup", "hr", "html",
    "i", "iframe", "img", "input", "ins",
    "kbd",
    "label", "legend", "li", "link",
    "main", "map", "mark", "menu", "meta", "meter",
    "nav", "noscript",
    "object", "ol", "optgroup", "option", "output",
    "p", "param", "picture", "pre", "progress",
    "q",
    "rp", "rt", "ruby",
    "s", "samp", "script", "search", "section", "select", "slot", "small",
    "source", "span", "strong", "style", "sub", "summary", "sup",
    "table", "tbody", "td", "template", "textarea", "tfoot", "th", "thead",
    "time", "title", "tr", "track",
    "u", "ul",
    "var", "video",
    "wbr",
})


def is_void_element(name: str) -> bool:
    """True if name is a known void element (case-insensitive)."""
    return name.lower() in VOID_ELEMENTS


def tag_named(name: str) -> Tag:
    """Create a tag with an arbitrary name.

    Known void element names (any case) give a void tag, every other name a
    normal one. Use ``Tag.void()`` / ``Tag.normal()`` to override.

    Raises:
        EmptyTagNameError: If name is empty.
    """
    tag = Tag(name)
    if is_void_element(name):
        logger.debug("Tag '%s' classified as void element", name)
        return tag.void()
    return tag


class HtmlBuilder:
    """Factories for HTML5 elements.

    Provides one callable per element in HTML_ELEMENTS via __getattr__.
    Each factory takes content as positional arguments and attributes as
    keyword arguments (``class_`` for ``class``, underscores become dashes).
    Python keywords take a trailing underscore: ``h.del_()``.

    Usage:
        >>> h = HtmlBuilder()
        >>> str(h.a('Home', href='/'))
        '<a href="/">Home</a>'
        >>> str(h.input(type='checkbox', checked=True))
        '<input type="checkbox" checked>'
    """

    @property
    def VOID_ELEMENTS(self) -> frozenset[str]:
        """Void elements (self-closing, no content)."""
        return VOID_ELEMENTS

    @property
    def ALL_TAGS(self) -> frozenset[str]:
        """All valid HTML5 element names."""
        return HTML_ELEMENTS

    def __getattr__(self, name: str) -> Callable[..., Tag]:
        """Dynamic factory for any HTML tag.

        Raises:
            AttributeError: If name is not a valid HTML tag.
        """
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        tag_name = name[:-1] if name.endswith("_") else name
        if tag_name in HTML_ELEMENTS:
            return self._make_tag_factory(tag_name)

        raise AttributeError(f"'{name}' is not a valid HTML tag")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | HTML_ELEMENTS)

    def _make_tag_factory(self, name: str) -> Callable[..., Tag]:
        """Create the factory for a specific tag."""
        is_void = name in VOID_ELEMENTS

        def tag_factory(*content: Any, **attr: Any) -> Tag:
            tag = Tag(name, void=is_void)
            if attr:
                tag = tag.attributes(**attr)
            if content:
                if is_void:
                    raise VoidTagError(f"Void element '{name}' cannot have content")
                tag = tag.content(*content)
            return tag

        tag_factory.__name__ = name
        tag_factory.__qualname__ = f"{type(self).__name__}.{name}"
        return tag_factory


h = HtmlBuilder()
