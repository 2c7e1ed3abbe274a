# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Image candidates for the srcset attribute."""

from __future__ import annotations

import logging

from ..exceptions import InvalidSizeError, MissingDescriptorError
from .base import TemplateBuilder
from .decorators import fluent

logger = logging.getLogger(__name__)


def _check_descriptor(kind: str, value: int) -> None:
    if value < 0:
        logger.debug("Rejected srcset %s %d", kind, value)
        raise InvalidSizeError(f"srcset {kind} must not be negative, got {value}")


class SrcsetPair(TemplateBuilder):
    """A URL and exactly one width or pixel-density descriptor.

    The last descriptor call wins.

    Example:
        >>> SrcsetPair('a.png').width(100).build()
        'a.png 100w'
        >>> SrcsetPair('a.png').width(100).pixel_density(2).build()
        'a.png 2x'
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._template = ''

    def __repr__(self) -> str:
        return f"SrcsetPair({self.url!r}, template={self._template!r})"

    @fluent
    def width(self, value: int):
        _check_descriptor('width', value)
        self._template = f"{self.url} {value}w"

    @fluent
    def pixel_density(self, value: int):
        _check_descriptor('pixel density', value)
        self._template = f"{self.url} {value}x"

    def build(self) -> str:
        """Return 'url Nw' or 'url Nx'.

        Raises:
            MissingDescriptorError: If neither width() nor pixel_density()
                was called.
        """
        if not self._template:
            logger.debug("Rejected %r: no descriptor", self)
            raise MissingDescriptorError(
                f"Bad value '{self._template}' for attribute srcset on element source: "
                "Must contain one or more image candidate strings."
            )
        return self._template


def srcset_template(*pairs: SrcsetPair) -> str:
    """Join the built candidates with ', '.

    Raises:
        MissingDescriptorError: If any candidate has no descriptor.
    """
    return ', '.join(pair.build() for pair in pairs)
