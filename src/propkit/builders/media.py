# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MediaQuery - fluent builder for the media attribute.

Every call appends one token followed by a single space. The buffer is
never trimmed, so a built query always ends with a space.

Example:
    >>> MediaQuery().screen().and_().width(600).build()
    'screen and (width: 600px) '
    >>> MediaQuery().not_().print().comma().orientation('landscape').build()
    'not print , (orientation: landscape) '
"""

from __future__ import annotations

import logging
import re

from ..cases import OrientationCase, ScanCase
from ..exceptions import InvalidResolutionError
from .base import TemplateBuilder
from .decorators import fluent

logger = logging.getLogger(__name__)

_RESOLUTION_PATTERN = re.compile(r'([0-9]+)(dpi|dpcm)')


class MediaQuery(TemplateBuilder):
    """Accumulator for a CSS media query.

    Keywords with a Python counterpart get a trailing underscore:
    and_() and not_().
    """

    def __init__(self) -> None:
        self._query = ''

    def __repr__(self) -> str:
        return f"MediaQuery({self._query!r})"

    def _append(self, token: str) -> None:
        self._query += f"{token} "

    def _feature(self, name: str, value: object) -> None:
        self._append(f"({name}: {value})")

    # Operators

    @fluent
    def and_(self):
        self._append('and')

    @fluent
    def comma(self):
        # the separator already carries the space
        self._query += ', '

    @fluent
    def not_(self):
        self._append('not')

    # Media types

    @fluent
    def all(self):
        self._append('all')

    @fluent
    def aural(self):
        self._append('aural')

    @fluent
    def braille(self):
        self._append('braille')

    @fluent
    def handheld(self):
        self._append('handheld')

    @fluent
    def projection(self):
        self._append('projection')

    @fluent
    def print(self):
        self._append('print')

    @fluent
    def screen(self):
        self._append('screen')

    @fluent
    def tty(self):
        self._append('tty')

    @fluent
    def tv(self):
        self._append('tv')

    # Media features

    @fluent
    def width(self, value: int):
        self._feature('width', f"{value}px")

    @fluent
    def height(self, value: int):
        self._feature('height', f"{value}px")

    @fluent
    def device_width(self, value: int):
        self._feature('device-width', f"{value}px")

    @fluent
    def device_height(self, value: int):
        self._feature('device-height', f"{value}px")

    @fluent
    def orientation(self, value: OrientationCase | str):
        """Append (orientation: landscape|portrait).

        Raises:
            ValueError: If value is not an OrientationCase.
        """
        self._feature('orientation', OrientationCase(value))

    @fluent
    def aspect_ratio(self, width: int, height: int):
        self._feature('aspect-ratio', f"{width}/{height}")

    @fluent
    def device_aspect_ratio(self, width: int, height: int):
        self._feature('device-aspect-ratio', f"{width}/{height}")

    @fluent
    def color(self, value: int):
        self._feature('color', value)

    @fluent
    def color_index(self, value: int):
        self._feature('color-index', value)

    @fluent
    def monochrome(self, value: int):
        self._feature('monochrome', value)

    @fluent
    def resolution(self, value: str):
        """Append (resolution: value).

        Args:
            value: Digits followed by 'dpi' or 'dpcm', e.g. '300dpi'.

        Raises:
            InvalidResolutionError: If the unit is not dpi or dpcm.
        """
        if not _RESOLUTION_PATTERN.fullmatch(value):
            logger.debug("Rejected resolution %r", value)
            raise InvalidResolutionError(
                f"unknown dimension in resolution '{value}', expected dpi or dpcm"
            )
        self._feature('resolution', value)

    @fluent
    def scan(self, value: ScanCase | str):
        """Append (scan: progressive|interlace).

        Raises:
            ValueError: If value is not a ScanCase.
        """
        self._feature('scan', ScanCase(value))

    @fluent
    def grid(self, value: bool):
        self._feature('grid', 1 if value else 0)

    def build(self) -> str:
        """Return the accumulated query, trailing space included."""
        return self._query


def new_media_query() -> MediaQuery:
    """Return an empty MediaQuery."""
    return MediaQuery()
