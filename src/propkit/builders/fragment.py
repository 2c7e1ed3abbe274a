# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Minimal markup tree for inline HTML content such as <iframe srcdoc>.

Attribute values and raw markup are written verbatim, without escaping.

Example:
    Building a fragment::

        page = Node('div', Attr('class', 'card')).include(
            Node('img', Attr('src', 'x.png')),
            RawNode('<p>caption</p>'),
        )
        page.build()
        # '<div class="card"><img src="x.png"><p>caption</p></div>'
"""

from __future__ import annotations

from .base import MarkupBuilder
from .decorators import fluent

# Elements that never have a closing tag
VOID_ELEMENTS = frozenset(
    "area base br col command embed hr img input keygen link meta param source track wbr".split()
)


class Attr:
    """A key="value" pair of a Node."""

    __slots__ = ('key', 'value')

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"Attr({self.key!r}, {self.value!r})"

    def build(self) -> str:
        return f'{self.key}="{self.value}"'


class RawNode(MarkupBuilder):
    """Pre-formatted markup, optionally followed by included fragments."""

    def __init__(self, html: str = '') -> None:
        self.html = html
        self._nodes: list[MarkupBuilder] = []

    def __repr__(self) -> str:
        return f"RawNode({self.html!r}, nodes={len(self._nodes)})"

    @fluent
    def include(self, *nodes: MarkupBuilder):
        self._nodes.extend(nodes)

    def build(self) -> str:
        return self.html + ''.join(node.build() for node in self._nodes)


class Node(MarkupBuilder):
    """An element with ordered attributes and children.

    Usage:
        >>> Node('img', Attr('src', 'x.png')).build()
        '<img src="x.png">'
        >>> Node('div').include(RawNode('text')).build()
        '<div>text</div>'
    """

    def __init__(self, name: str, *attrs: Attr) -> None:
        self.name = name
        self.attrs = list(attrs)
        self._nodes: list[MarkupBuilder] = []

    def __repr__(self) -> str:
        return f"Node({self.name!r}, attrs={self.attrs!r}, nodes={len(self._nodes)})"

    @property
    def is_void(self) -> bool:
        """True if the element never gets a closing tag."""
        return self.name.lower() in VOID_ELEMENTS

    @fluent
    def include(self, *nodes: MarkupBuilder):
        self._nodes.extend(nodes)

    def build(self) -> str:
        attrs = " ".join(attr.build() for attr in self.attrs)
        attrs_str = f" {attrs}" if attrs else ""
        tpl = f"<{self.name}{attrs_str}>"
        tpl += ''.join(node.build() for node in self._nodes)

        if not self.is_void:
            tpl += f"</{self.name}>"
        return tpl


def empty_node(*nodes: MarkupBuilder) -> RawNode:
    """Return a container that only concatenates the markup of nodes."""
    return RawNode().include(*nodes)
