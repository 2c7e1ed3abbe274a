# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Coordinate sets for the coords attribute of <area>.

Three shapes are supported, matching the values of the shape attribute:

    - RectCoords: 'x1,y1,x2,y2' (top-left and bottom-right corners)
    - CircleCoords: 'x,y,radius' (radius in pixels or percent)
    - PolyCoords: 'x1,y1,x2,y2,...,xn,yn' (at least three points)

Example:
    >>> RectCoords(0, 0, 10, 10).build()
    '0,0,10,10'
    >>> CircleCoords(5, 5, '50%').build()
    '5,5,50%'
    >>> PolyCoords([(0, 0), (1, 1), (2, 2)]).build()
    '0,0,1,1,2,2'
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from ..exceptions import InvalidCoordsError, InvalidRadiusError, TooFewPointsError
from .base import TemplateBuilder

logger = logging.getLogger(__name__)

_RADIUS_PATTERN = re.compile(r'[0-9]+%?')
_NON_DIGIT_PATTERN = re.compile(r'[^0-9]')


class RectCoords(TemplateBuilder):
    """Rectangle given by its top-left and bottom-right corners."""

    __slots__ = ('x_left_top', 'y_left_top', 'x_bottom_right', 'y_bottom_right')

    def __init__(
        self,
        x_left_top: int,
        y_left_top: int,
        x_bottom_right: int,
        y_bottom_right: int,
    ) -> None:
        self.x_left_top = x_left_top
        self.y_left_top = y_left_top
        self.x_bottom_right = x_bottom_right
        self.y_bottom_right = y_bottom_right

    def __repr__(self) -> str:
        return (
            f"RectCoords({self.x_left_top}, {self.y_left_top}, "
            f"{self.x_bottom_right}, {self.y_bottom_right})"
        )

    def build(self) -> str:
        """Return 'x1,y1,x2,y2'.

        Raises:
            InvalidCoordsError: If x1 >= x2 or y1 >= y2.
        """
        if self.x_left_top >= self.x_bottom_right:
            logger.debug("Rejected %r: x order", self)
            raise InvalidCoordsError("the first integer must be less than the third")
        if self.y_left_top >= self.y_bottom_right:
            logger.debug("Rejected %r: y order", self)
            raise InvalidCoordsError("the second integer must be less than the fourth")

        return (
            f"{self.x_left_top},{self.y_left_top},"
            f"{self.x_bottom_right},{self.y_bottom_right}"
        )


class CircleCoords(TemplateBuilder):
    """Circle given by its center and radius.

    The radius is a string so it can carry a trailing '%'.
    """

    __slots__ = ('x', 'y', 'radius')

    def __init__(self, x: int, y: int, radius: str) -> None:
        self.x = x
        self.y = y
        self.radius = radius

    def __repr__(self) -> str:
        return f"CircleCoords({self.x}, {self.y}, {self.radius!r})"

    def build(self) -> str:
        """Return 'x,y,radius'.

        Raises:
            InvalidRadiusError: If radius is not digits with an optional
                trailing '%'. The message names the first non-digit
                character of the radius.
        """
        if not _RADIUS_PATTERN.fullmatch(self.radius):
            logger.debug("Rejected %r: bad radius", self)
            wrong = _NON_DIGIT_PATTERN.search(self.radius)
            if wrong is None:
                raise InvalidRadiusError("expected a digit but saw nothing instead")
            raise InvalidRadiusError(f"expected a digit but saw '{wrong.group()}' instead")

        return f"{self.x},{self.y},{self.radius}"


class PolyCoords(TemplateBuilder):
    """Polygon given by an ordered sequence of (x, y) points."""

    __slots__ = ('points',)

    def __init__(self, points: Iterable[tuple[int, int]] = ()) -> None:
        self.points = [(x, y) for x, y in points]

    def __repr__(self) -> str:
        return f"PolyCoords({self.points!r})"

    def build(self) -> str:
        """Return the comma-separated coordinates of every point.

        Raises:
            TooFewPointsError: If there are fewer than three points.
        """
        if len(self.points) < 3:
            logger.debug("Rejected %r: %d points", self, len(self.points))
            raise TooFewPointsError(
                "a polygon must have at least six comma-separated integers, "
                f"got {len(self.points)} point(s)"
            )

        return ','.join(f"{x},{y}" for x, y in self.points)
