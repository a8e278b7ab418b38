# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag - immutable HTML tag model and renderer.

Every builder method returns a new Tag; the receiver is never modified, so
a Tag can be shared freely and used as a template for variants.

Example:
    >>> base = Tag('a').class_('link')
    >>> home = base.attribute('href', '/').content('Home')
    >>> str(home)
    '<a class="link" href="/">Home</a>'
    >>> str(base)
    '<a class="link"></a>'
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .attributes import (
    AttributeValue,
    ClassList,
    class_tokens,
    classify,
    render_attributes,
    split_class_names,
)
from .encoding import encode_html
from .exceptions import EmptyTagNameError, InvalidContentError, VoidTagError

if TYPE_CHECKING:
    from typing import Self


def _attribute_name(key: str) -> str:
    """Convert a keyword argument name to an attribute name.

    A trailing underscore is dropped (``class_``) and inner underscores
    become dashes (``aria_label`` -> ``aria-label``).
    """
    if key.endswith('_'):
        key = key[:-1]
    return key.replace('_', '-')


def _collect(mapping: Mapping[str, Any] | None, kwargs: dict[str, Any]) -> dict[str, Any]:
    raw = dict(mapping) if mapping else {}
    for key, value in kwargs.items():
        raw[_attribute_name(key)] = value
    return raw


def _merge(current: Mapping[str, AttributeValue], raw: Mapping[str, Any]) -> dict[str, AttributeValue]:
    """Overlay raw values on current: known keys keep their slot, None removes."""
    result = dict(current)
    for name, value in raw.items():
        classified = classify(name, value)
        if classified is None:
            result.pop(name, None)
        else:
            result[name] = classified
    return result


def _coerce_content(items: tuple[Any, ...]) -> list[Any]:
    """Flatten content arguments; numbers become text, objects are kept."""
    result: list[Any] = []
    for item in items:
        if item is None:
            raise InvalidContentError("Tag content cannot be None")
        if isinstance(item, (list, tuple)):
            result.extend(_coerce_content(tuple(item)))
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            result.append(str(item))
        else:
            result.append(item)
    return result


class Tag:
    """An HTML element: name, attributes, content and rendering flags.

    Attributes are stored already classified (see ``attributes.classify``),
    content items are stored as given and escaped at render time according
    to the flags in effect when rendering.

    Content escaping is controlled by ``encode``:
    - None (default): text is escaped, nested tags and markup objects
      (anything implementing ``__html__``) are inserted as they are;
    - True: everything is escaped, nested tags included;
    - False: nothing is escaped.

    Args:
        name: Tag name, emitted verbatim.
        void: True for elements without content and closing tag.
    """

    __slots__ = ('_name', '_attributes', '_content', '_void', '_encode', '_double_encode')

    def __init__(self, name: str, *, void: bool = False) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Tag name must be a string, got {type(name).__name__}")
        if not name.strip():
            raise EmptyTagNameError("Tag name cannot be empty")
        self._name = name
        self._attributes: dict[str, AttributeValue] = {}
        self._content: tuple[Any, ...] = ()
        self._void = void
        self._encode: bool | None = None
        self._double_encode = True

    def __repr__(self) -> str:
        kind = 'void' if self._void else 'normal'
        return f"Tag({self._name!r}, {kind}, attrs={len(self._attributes)}, content={len(self._content)})"

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def _evolve(self, **changes: Any) -> Self:
        new = copy.copy(self)
        for key, value in changes.items():
            setattr(new, f'_{key}', value)
        return new

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_void(self) -> bool:
        return self._void

    @property
    def attrs(self) -> Mapping[str, AttributeValue]:
        """Read-only view of the classified attributes, in render order."""
        return MappingProxyType(self._attributes)

    @property
    def children(self) -> tuple[Any, ...]:
        return self._content

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def attribute(self, name: str, value: Any) -> Self:
        """Set a single attribute; None removes it."""
        return self._evolve(attributes=_merge(self._attributes, {name: value}))

    def attributes(self, mapping: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Self:
        """Merge attributes into the existing ones.

        Existing keys keep their position when overwritten, new keys are
        appended and None values remove the key.

        Args:
            mapping: Attribute names to raw values.
            **kwargs: More attributes; ``class_`` becomes ``class`` and
                underscores become dashes.
        """
        return self._evolve(attributes=_merge(self._attributes, _collect(mapping, kwargs)))

    def replace_attributes(self, mapping: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Self:
        """Discard all attributes and set exactly the given ones."""
        return self._evolve(attributes=_merge({}, _collect(mapping, kwargs)))

    def id(self, value: str | None) -> Self:
        return self.attribute('id', value)

    def class_(self, *names: Any) -> Self:
        """Append class names after the existing ones, skipping duplicates.

        Each argument may hold several space-separated names.

        Example:
            >>> str(Tag('p').class_('main').class_('italic bold', 'main'))
            '<p class="main italic bold"></p>'
        """
        tokens = list(class_tokens(self._attributes.get('class')))
        for token in split_class_names(names):
            if token not in tokens:
                tokens.append(token)
        return self._with_class(tokens)

    def replace_class(self, *names: Any) -> Self:
        """Set exactly the given class names; none removes the attribute."""
        return self._with_class(split_class_names(names))

    def _with_class(self, tokens: list[str]) -> Self:
        attributes = dict(self._attributes)
        if tokens:
            attributes['class'] = ClassList(tuple(tokens))
        else:
            attributes.pop('class', None)
        return self._evolve(attributes=attributes)

    # -------------------------------------------------------------------------
    # Content and flags
    # -------------------------------------------------------------------------

    def content(self, *items: Any) -> Self:
        """Replace the content.

        Items may be strings, numbers, nested tags, markup objects or any
        object with a string conversion. Lists and tuples are flattened.
        """
        return self._evolve(content=tuple(_coerce_content(items)))

    def add_content(self, *items: Any) -> Self:
        """Append items to the existing content."""
        return self._evolve(content=self._content + tuple(_coerce_content(items)))

    def encode(self, encode: bool | None) -> Self:
        return self._evolve(encode=encode)

    def double_encode(self, double_encode: bool) -> Self:
        return self._evolve(double_encode=double_encode)

    def void(self) -> Self:
        """Render as a void element: no content, no closing tag."""
        return self._evolve(void=True)

    def normal(self) -> Self:
        return self._evolve(void=False)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def open(self) -> str:
        """Return the opening tag with its attributes."""
        return f'<{self._name}{render_attributes(self._attributes)}>'

    def close(self) -> str:
        """Return the closing tag.

        Raises:
            VoidTagError: If the tag is void.
        """
        if self._void:
            raise VoidTagError(f"Void tag '{self._name}' has no closing tag")
        return f'</{self._name}>'

    def render(self) -> str:
        """Return the full markup; a void tag renders as its opening tag."""
        if self._void:
            return self.open()
        return self.open() + self._render_content() + self.close()

    def _render_content(self) -> str:
        parts = []
        for item in self._content:
            if hasattr(item, '__html__'):
                text, is_markup = item.__html__(), True
            elif isinstance(item, str):
                text, is_markup = item, False
            else:
                text, is_markup = str(item), False

            if self._encode or (self._encode is None and not is_markup):
                text = encode_html(text, self._double_encode)
            parts.append(text)
        return ''.join(parts)
