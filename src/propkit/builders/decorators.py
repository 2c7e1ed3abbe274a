# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorators for fluent builder methods."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

_B = TypeVar('_B')


def fluent(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator for builder methods that mutate the builder.

    The decorated method only updates the builder state; the wrapper
    returns the builder itself so calls can be chained.

    Example:
        >>> class Tokens(TemplateBuilder):
        ...     def __init__(self):
        ...         self._tokens = []
        ...
        ...     @fluent
        ...     def add(self, token):
        ...         self._tokens.append(token)
        ...
        ...     def build(self):
        ...         return ' '.join(self._tokens)
        >>> Tokens().add('a').add('b').build()
        'a b'
    """
    @wraps(func)
    def wrapper(self: _B, *args: Any, **kwargs: Any) -> _B:
        func(self, *args, **kwargs)
        return self

    return wrapper
