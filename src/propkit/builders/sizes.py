# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for the sizes attribute.

The attribute has two unrelated grammars:

    - <img>/<source>: a comma-separated list of media conditions, each
      followed by a slot size, ending with a default size. Built with
      ImageSizes and MediaQuerySize.
    - <link rel="icon">: space-separated WIDTHxHEIGHT tokens, or 'any'.
      Built with LinkSizes.

Example:
    >>> ImageSizes().group(
    ...     MediaQuerySize('50vw').min_width('600px').and_().max_width('900px')
    ... ).default('100vw').build()
    '((min-width: 600px) and (max-width: 900px)) 50vw, 100vw'
    >>> LinkSizes().pair(16, 16).pair(32, 32).build()
    '16x16 32x32 '
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidSizeError
from .base import TemplateBuilder
from .decorators import fluent

logger = logging.getLogger(__name__)


class MediaQuerySize:
    """One media condition and the slot size it selects.

    Conditions are wrapped in parentheses only when more than one token
    has been added.
    """

    def __init__(self, size: str) -> None:
        self.size = size
        self._conditions: list[str] = []

    def __repr__(self) -> str:
        return f"MediaQuerySize({self.size!r}, {self._conditions!r})"

    @fluent
    def min_width(self, value: str):
        self._conditions.append(f"(min-width: {value})")

    @fluent
    def max_width(self, value: str):
        self._conditions.append(f"(max-width: {value})")

    @fluent
    def and_(self):
        self._conditions.append('and')

    @fluent
    def or_(self):
        self._conditions.append('or')

    def build(self) -> str:
        tpl = ' '.join(self._conditions)
        if len(self._conditions) > 1:
            tpl = f"({tpl})"
        return f"{tpl} {self.size}"


class ImageSizes(TemplateBuilder):
    """Sizes list for <img> and <source>."""

    def __init__(self) -> None:
        self._sizes: list[str] = []

    def __repr__(self) -> str:
        return f"ImageSizes({self._sizes!r})"

    @fluent
    def group(self, size: MediaQuerySize):
        """Append a conditional size, built at the time of the call."""
        self._sizes.append(size.build())

    @fluent
    def default(self, size: str):
        """Append an unconditional size."""
        self._sizes.append(size)

    def build(self) -> str:
        return ', '.join(self._sizes)


class LinkSizes(TemplateBuilder):
    """Icon sizes for <link>.

    A pair with a zero width or height means the icon scales to any size,
    and turns the whole value into 'any'.
    """

    def __init__(self) -> None:
        self._sizes: list[tuple[int, int]] = []

    def __repr__(self) -> str:
        return f"LinkSizes({self._sizes!r})"

    @fluent
    def pair(self, width: int, height: int):
        """Append a WIDTHxHEIGHT pair.

        Raises:
            InvalidSizeError: If width or height is negative.
        """
        if width < 0 or height < 0:
            logger.debug("Rejected icon size %dx%d", width, height)
            raise InvalidSizeError(
                f"icon size must not be negative, got {width}x{height}"
            )
        self._sizes.append((width, height))

    def build(self) -> str:
        tpl = ''
        for width, height in self._sizes:
            if width == 0 or height == 0:
                return 'any'
            tpl += f"{width}x{height} "
        return tpl
