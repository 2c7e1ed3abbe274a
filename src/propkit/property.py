# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Property - the name/value pair handed to the rendering framework."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class PropertyTarget(Protocol):
    """Anything that can receive a property, usually a virtual-DOM element."""

    def set_property(self, name: str, value: Any) -> None:
        ...


class Property:
    """An element property ready to be applied.

    Example:
        >>> p = Property('href', 'https://example.com')
        >>> p.apply(element)  # element.set_property('href', 'https://example.com')
    """

    __slots__ = ('name', 'value')

    def __init__(self, name: str, value: Any) -> None:
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __repr__(self) -> str:
        return f"Property({self.name!r}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def apply(self, target: PropertyTarget) -> None:
        """Set this property on target."""
        logger.debug("Applying %s=%r to %r", self.name, self.value, target)
        target.set_property(self.name, self.value)


def prop(name: str, value: Any) -> Property:
    """Return a Property for an attribute with no formatting of its own.

    Example:
        >>> prop('href', 'https://example.com')
        Property('href', 'https://example.com')
    """
    return Property(name, value)
