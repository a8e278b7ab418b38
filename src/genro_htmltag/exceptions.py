# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTag exceptions.

All errors raised by this package signal programming mistakes (contract
violations), never recoverable runtime conditions.
"""

from __future__ import annotations


class HtmlTagError(Exception):
    """Base exception for HtmlTag errors."""

    pass


class EmptyTagNameError(HtmlTagError, ValueError):
    """Raised when a tag is created with an empty name."""

    pass


class InvalidAttributeError(HtmlTagError, TypeError):
    """Raised when an attribute name or value has an unsupported type."""

    pass


class InvalidContentError(HtmlTagError, TypeError):
    """Raised when a content item cannot be used as tag content."""

    pass


class VoidTagError(HtmlTagError):
    """Raised when a closing tag is requested for a void element."""

    pass
