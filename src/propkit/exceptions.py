# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Propkit exceptions."""

from __future__ import annotations


class PropError(ValueError):
    """Base exception for attribute value errors."""

    pass


class InvalidCoordsError(PropError):
    """Raised when rectangle corners are not ordered top-left to bottom-right."""

    pass


class InvalidRadiusError(PropError):
    """Raised when a circle radius is not digits with an optional '%'."""

    pass


class TooFewPointsError(PropError):
    """Raised when a polygon has fewer than three points."""

    pass


class InvalidResolutionError(PropError):
    """Raised when a media query resolution has an unknown unit."""

    pass


class InvalidSizeError(PropError):
    """Raised when a width, height or density is negative."""

    pass


class MissingDescriptorError(PropError):
    """Raised when a srcset candidate has no width or density descriptor."""

    pass
