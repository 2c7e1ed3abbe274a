# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Propkit - typed HTML attribute values for virtual-DOM front ends.

A lightweight, zero-dependency library of builders that validate and
format attribute values (coords, media, sizes, srcset, srcdoc) and hand
them to the rendering framework as Property objects.
"""

__version__ = "0.1.0"

from .builders import (
    VOID_ELEMENTS,
    Attr,
    CircleCoords,
    ImageSizes,
    LinkSizes,
    MarkupBuilder,
    MediaQuery,
    MediaQuerySize,
    Node,
    PolyCoords,
    RawNode,
    RectCoords,
    SrcsetPair,
    TemplateBuilder,
    empty_node,
    new_media_query,
    srcset_template,
)
from .exceptions import (
    InvalidCoordsError,
    InvalidRadiusError,
    InvalidResolutionError,
    InvalidSizeError,
    MissingDescriptorError,
    PropError,
    TooFewPointsError,
)
from .property import Property, PropertyTarget, prop

__all__ = [
    # Property seam
    "Property",
    "PropertyTarget",
    "prop",
    # Builders
    "TemplateBuilder",
    "MarkupBuilder",
    "RectCoords",
    "CircleCoords",
    "PolyCoords",
    "MediaQuery",
    "new_media_query",
    "MediaQuerySize",
    "ImageSizes",
    "LinkSizes",
    "SrcsetPair",
    "srcset_template",
    "VOID_ELEMENTS",
    "Attr",
    "Node",
    "RawNode",
    "empty_node",
    # Exceptions
    "PropError",
    "InvalidCoordsError",
    "InvalidRadiusError",
    "TooFewPointsError",
    "InvalidResolutionError",
    "InvalidSizeError",
    "MissingDescriptorError",
]
