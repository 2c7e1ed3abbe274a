# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute constructors.

Each function formats its argument and returns a Property for the
rendering framework. Attributes that pass their value through unchanged
have no dedicated constructor: use prop(name, value).

Example:
    >>> coords(RectCoords(0, 0, 10, 10))
    Property('coords', '0,0,10,10')
    >>> srcset(SrcsetPair('a.png').width(100), SrcsetPair('b.png').width(200))
    Property('srcset', 'a.png 100w, b.png 200w')
    >>> step(0)
    Property('step', 'any')
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

from .builders.base import MarkupBuilder, TemplateBuilder
from .builders.media import MediaQuery
from .builders.srcset import SrcsetPair, srcset_template
from .cases import (
    AcceptCase,
    DirCase,
    EnctypeCase,
    HttpEquivCase,
    KindCase,
    MethodCase,
    PreloadCase,
    RelCase,
    ScopeCase,
    ShapeCase,
    TargetCase,
    TypeCase,
    WrapCase,
)
from .exceptions import InvalidSizeError
from .property import Property

logger = logging.getLogger(__name__)

# Builder-backed attributes


def coords(value: TemplateBuilder) -> Property:
    """Coordinates of an <area>; value is a RectCoords, CircleCoords or PolyCoords."""
    return Property('coords', value.build())


def media(value: MediaQuery) -> Property:
    """Media/device the linked resource is optimized for."""
    return Property('media', value.build())


def sizes(value: TemplateBuilder) -> Property:
    """Sizes of an image (ImageSizes) or of a linked icon (LinkSizes)."""
    return Property('sizes', value.build())


def srcset(*values: SrcsetPair) -> Property:
    """Image candidates for <img> and <source>."""
    return Property('srcset', srcset_template(*values))


def srcdoc(value: MarkupBuilder) -> Property:
    """Inline HTML content of an <iframe>."""
    return Property('srcdoc', value.build())


# Formatted attributes


def accept_charset(*values: str) -> Property:
    return Property('accept-charset', ' '.join(values))


def autocomplete(flag: bool) -> Property:
    return Property('autocomplete', 'on' if flag else 'off')


def class_(*values: str) -> Property:
    return Property('class', ' '.join(values))


def data_pair(key: str, value: Any) -> Property:
    """Custom data-* attribute."""
    return Property(f"data-{key}", value)


def datetime_(value: datetime) -> Property:
    return Property('datetime', str(value))


def dirname(value: str) -> Property:
    """Name of the field that submits the text direction of value."""
    return Property('dirname', f"{value}.dir")


def download(value: bool | str = True) -> Property:
    """Download flag, or the filename to save the target as."""
    return Property('download', value)


def html_for(value: str) -> Property:
    """Id of the form element a <label> or <output> is bound to."""
    return Property('htmlFor', value)


def pattern(value: re.Pattern[str] | str) -> Property:
    if isinstance(value, re.Pattern):
        value = value.pattern
    return Property('pattern', value)


def step(value: int) -> Property:
    """Legal number interval of an <input>; 0 means any.

    Raises:
        InvalidSizeError: If value is negative.
    """
    if value < 0:
        logger.debug("Rejected step %d", value)
        raise InvalidSizeError(f"step must not be negative, got {value}")
    if value == 0:
        return Property('step', 'any')
    return Property('step', str(value))


def usemap(value: str) -> Property:
    """Client-side image map, given by the id of its <map>."""
    return Property('usemap', f"#{value}")


# Enumerated attributes; the Case members are common values, any string passes


def accept(value: AcceptCase | str) -> Property:
    return Property('accept', str(value))


def dir_(value: DirCase | str) -> Property:
    return Property('dir', str(value))


def enctype(value: EnctypeCase | str) -> Property:
    return Property('enctype', str(value))


def http_equiv(value: HttpEquivCase | str) -> Property:
    return Property('http-equiv', str(value))


def kind(value: KindCase | str) -> Property:
    return Property('kind', str(value))


def method(value: MethodCase | str) -> Property:
    return Property('method', str(value))


def preload(value: PreloadCase | str) -> Property:
    return Property('preload', str(value))


def rel(value: RelCase | str) -> Property:
    return Property('rel', str(value))


def scope(value: ScopeCase | str) -> Property:
    return Property('scope', str(value))


def shape(value: ShapeCase | str) -> Property:
    return Property('shape', str(value))


def target(value: TargetCase | str) -> Property:
    return Property('target', str(value))


def type_(value: TypeCase | str) -> Property:
    return Property('type', str(value))


def wrap(value: WrapCase | str) -> Property:
    return Property('wrap', str(value))
