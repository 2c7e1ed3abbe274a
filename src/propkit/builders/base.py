# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Abstract base classes for attribute value builders."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TemplateBuilder(ABC):
    """Abstract base class for builders that produce an attribute template.

    A template builder accumulates state through its configuration methods
    and turns it into the final attribute string in build(). Subclasses
    validate their state in build() and raise a PropError subclass when
    it is malformed.

    Usage:
        >>> RectCoords(0, 0, 10, 10).build()
        '0,0,10,10'
        >>> str(LinkSizes().pair(16, 16))
        '16x16 '
    """

    __slots__ = ()

    @abstractmethod
    def build(self) -> str:
        """Return the attribute template for the accumulated state."""

    def __str__(self) -> str:
        return self.build()


class MarkupBuilder(ABC):
    """Abstract base class for inline markup fragments.

    Fragments are nested through include() and serialized depth-first
    by build().
    """

    __slots__ = ()

    @abstractmethod
    def build(self) -> str:
        """Return the serialized markup."""

    def __str__(self) -> str:
        return self.build()
