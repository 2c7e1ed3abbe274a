# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for attribute values and inline markup."""

from .base import MarkupBuilder, TemplateBuilder
from .coords import CircleCoords, PolyCoords, RectCoords
from .decorators import fluent
from .fragment import VOID_ELEMENTS, Attr, Node, RawNode, empty_node
from .media import MediaQuery, new_media_query
from .sizes import ImageSizes, LinkSizes, MediaQuerySize
from .srcset import SrcsetPair, srcset_template

__all__ = [
    'TemplateBuilder',
    'MarkupBuilder',
    'fluent',
    # Coordinates
    'RectCoords',
    'CircleCoords',
    'PolyCoords',
    # Media queries
    'MediaQuery',
    'new_media_query',
    # Sizes
    'MediaQuerySize',
    'ImageSizes',
    'LinkSizes',
    # Srcset
    'SrcsetPair',
    'srcset_template',
    # Markup
    'VOID_ELEMENTS',
    'Attr',
    'Node',
    'RawNode',
    'empty_node',
]
