# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute values and their serialization.

Raw Python values are classified once, when they are set on a tag, into one
of the variants below. Rendering then only dispatches on the variant:

    ==========  ==========================================  =====================
    variant     raw value                                   output
    ==========  ==========================================  =====================
    (omitted)   None                                        nothing
    Flag        bool                                        ``name`` or nothing
    Scalar      str, int, float, Enum                       ``name="value"``
    ClassList   list/tuple under ``class``                  ``class="a b"``
    Style       mapping under ``style``                     ``style="k: v;"``
    Dataset     mapping under ``data``, ``aria``, ...       ``data-k="v"`` ...
    Json        list/tuple/mapping under any other key      ``name='[1,2]'``
    ==========  ==========================================  =====================

Example:
    >>> attrs = {'id': classify('id', 'x'), 'data': classify('data', {'a': 1})}
    >>> render_attributes(attrs)
    ' id="x" data-a="1"'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union

from .encoding import encode_attribute, json_for_attribute
from .exceptions import InvalidAttributeError

# Keys whose mapping values expand into one attribute per entry.
DATA_ATTRIBUTES = frozenset({'data', 'data-ng', 'ng', 'aria'})

_SCALAR_TYPES = (str, int, float)


@dataclass(frozen=True)
class Flag:
    """Presence-only attribute."""

    present: bool

    def render(self, name: str) -> str:
        return f' {name}' if self.present else ''


@dataclass(frozen=True)
class Scalar:
    """Plain value, escaped and double-quoted."""

    text: str

    def render(self, name: str) -> str:
        return f' {name}="{encode_attribute(self.text)}"'


@dataclass(frozen=True)
class ClassList:
    """Ordered class tokens; omitted when empty."""

    tokens: tuple[str, ...]

    def render(self, name: str) -> str:
        if not self.tokens:
            return ''
        return f' {name}="{encode_attribute(" ".join(self.tokens))}"'


@dataclass(frozen=True)
class Style:
    """CSS declarations; omitted when empty."""

    declarations: tuple[tuple[str, str], ...]

    def render(self, name: str) -> str:
        if not self.declarations:
            return ''
        css = ' '.join(f'{prop}: {value};' for prop, value in self.declarations)
        return f' {name}="{encode_attribute(css)}"'


@dataclass(frozen=True)
class Json:
    """JSON-encoded value, always single-quoted."""

    encoded: str

    def render(self, name: str) -> str:
        return f" {name}='{self.encoded}'"


@dataclass(frozen=True)
class Dataset:
    """Prefixed mapping expanded into ``{name}-{key}`` attributes."""

    entries: tuple[tuple[str, Union[Flag, Scalar, Json]], ...]

    def render(self, name: str) -> str:
        return ''.join(value.render(f'{name}-{key}') for key, value in self.entries)


AttributeValue = Union[Flag, Scalar, ClassList, Style, Dataset, Json]


def _scalar_text(value: Any) -> str | None:
    """Return the string form of a scalar, or None if value is not one."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return None
    if isinstance(value, _SCALAR_TYPES):
        return str(value)
    return None


def _to_json(name: str, value: Any) -> Json:
    try:
        return Json(json_for_attribute(value))
    except (TypeError, ValueError) as exc:
        raise InvalidAttributeError(
            f"Attribute '{name}' value is not JSON serializable: {value!r}"
        ) from exc


def _classify_style(value: Mapping) -> Style:
    declarations = []
    for prop, prop_value in value.items():
        if prop_value is None:
            continue
        text = _scalar_text(prop_value)
        if text is None:
            raise InvalidAttributeError(
                f"Style property '{prop}' must be a scalar, got {type(prop_value).__name__}"
            )
        declarations.append((str(prop), text))
    return Style(tuple(declarations))


def _classify_dataset(name: str, value: Mapping) -> Dataset:
    entries: list[tuple[str, Union[Flag, Scalar, Json]]] = []
    for key, sub_value in value.items():
        sub_name = f'{name}-{key}'
        if sub_value is None:
            continue
        if isinstance(sub_value, bool):
            entries.append((str(key), Flag(sub_value)))
            continue
        text = _scalar_text(sub_value)
        if text is not None:
            entries.append((str(key), Scalar(text)))
        elif isinstance(sub_value, (list, tuple, Mapping)):
            entries.append((str(key), _to_json(sub_name, sub_value)))
        else:
            raise InvalidAttributeError(
                f"Unsupported value for attribute '{sub_name}': {type(sub_value).__name__}"
            )
    return Dataset(tuple(entries))


def classify(name: str, value: Any) -> AttributeValue | None:
    """Turn a raw attribute value into its variant.

    Args:
        name: Attribute name; selects the special handling of ``class``,
            ``style`` and the prefixed mapping keys in DATA_ATTRIBUTES.
        value: Raw value. Under ``class`` only lists and tuples are
            accepted as sequences; sets are rejected because they have no
            order.

    Returns:
        The attribute variant, or None when the attribute must be omitted.

    Raises:
        InvalidAttributeError: If name is not a non-empty string or value
            has an unsupported type.
    """
    if not isinstance(name, str) or not name:
        raise InvalidAttributeError(f"Attribute name must be a non-empty string, got {name!r}")

    if value is None:
        return None
    if isinstance(value, bool):
        return Flag(value)

    text = _scalar_text(value)
    if text is not None:
        return Scalar(text)

    if isinstance(value, Mapping):
        if name == 'style':
            return _classify_style(value)
        if name in DATA_ATTRIBUTES:
            return _classify_dataset(name, value)
        return _to_json(name, value)

    if isinstance(value, (list, tuple)):
        if name == 'class':
            return ClassList(tuple(split_class_names(value)))
        return _to_json(name, value)

    raise InvalidAttributeError(
        f"Unsupported value for attribute '{name}': {type(value).__name__}"
    )


def split_class_names(names: Iterable[Any]) -> list[str]:
    """Flatten class arguments into single tokens.

    Each argument may contain several whitespace-separated tokens; None and
    blank arguments are skipped.

    Example:
        >>> split_class_names(['main', 'italic bold', None])
        ['main', 'italic', 'bold']
    """
    tokens: list[str] = []
    for name in names:
        if name is None:
            continue
        text = _scalar_text(name)
        if text is None:
            raise InvalidAttributeError(
                f"Class name must be a string, got {type(name).__name__}"
            )
        tokens.extend(text.split())
    return tokens


def class_tokens(value: AttributeValue | None) -> tuple[str, ...]:
    """Return the class tokens already held by a ``class`` attribute value.

    Raises:
        InvalidAttributeError: If value is not a class list or a scalar.
    """
    if value is None:
        return ()
    if isinstance(value, ClassList):
        return value.tokens
    if isinstance(value, Scalar):
        return tuple(value.text.split())
    raise InvalidAttributeError(
        f"Cannot add class names to a {type(value).__name__} class attribute"
    )


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    """Serialize attributes in mapping order.

    Returns:
        ``' name1="v1" name2'`` style string, empty when nothing is emitted.
    """
    return ''.join(value.render(name) for name, value in attributes.items())
