# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Closed sets of values for enumerated HTML attributes.

Each set is a StrEnum, so members compare equal to (and format as) their
attribute value, and a plain string can be coerced with ``Case(value)``.
"""

from __future__ import annotations

from enum import StrEnum


class AcceptCase(StrEnum):
    MEDIA = "audio/*"
    VIDEO = "video/*"
    IMAGE = "image/*"


class DirCase(StrEnum):
    LTR = "ltr"
    RTL = "rtl"
    AUTO = "auto"


class EnctypeCase(StrEnum):
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    PLAIN_TEXT = "text/plain"


class HttpEquivCase(StrEnum):
    CONTENT_SECURITY_POLICY = "content-security-policy"
    CONTENT_TYPE = "content-type"
    DEFAULT_STYLE = "default-style"
    REFRESH = "refresh"


class KindCase(StrEnum):
    CAPTIONS = "captions"
    CHAPTERS = "chapters"
    DESCRIPTIONS = "descriptions"
    METADATA = "metadata"
    SUBTITLES = "subtitles"


class MethodCase(StrEnum):
    GET = "GET"
    POST = "POST"


class OrientationCase(StrEnum):
    """Values of the orientation media feature."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class PreloadCase(StrEnum):
    AUTO = "auto"
    METADATA = "metadata"
    NONE = "none"


class RelCase(StrEnum):
    ALTERNATE = "alternate"
    AUTHOR = "author"
    BOOKMARK = "bookmark"
    EXTERNAL = "external"
    HELP = "help"
    LICENCE = "licence"
    NEXT = "next"
    NOFOLLOW = "nofollow"
    NOOPENER = "noopener"
    NOREFERRER = "noreferrer"
    PREV = "prev"
    SEARCH = "search"
    TAG = "tag"


class ScanCase(StrEnum):
    """Values of the scan media feature."""

    PROGRESSIVE = "progressive"
    INTERLACE = "interlace"


class ScopeCase(StrEnum):
    COL = "col"
    ROW = "row"
    COLGROUP = "colgroup"
    ROWGROUP = "rowgroup"


class ShapeCase(StrEnum):
    DEFAULT = "default"
    RECT = "rect"
    CIRCLE = "circle"
    POLY = "poly"


class TargetCase(StrEnum):
    BLANK = "_blank"
    SELF = "_self"
    PARENT = "_parent"
    TOP = "_top"


class TypeCase(StrEnum):
    BUTTON = "button"
    CHECKBOX = "checkbox"
    COLOR = "color"
    DATE = "date"
    DATETIME = "datetime"
    DATETIME_LOCAL = "datetime-local"
    EMAIL = "email"
    FILE = "file"
    HIDDEN = "hidden"
    IMAGE = "image"
    MONTH = "month"
    NUMBER = "number"
    PASSWORD = "password"
    RADIO = "radio"
    RANGE = "range"
    MIN = "min"
    MAX = "max"
    VALUE = "value"
    STEP = "step"
    RESET = "reset"
    SEARCH = "search"
    SUBMIT = "submit"
    TEL = "tel"
    TEXT = "text"
    TIME = "time"
    URL = "url"
    WEEK = "week"
    LIST = "list"
    CONTEXT = "context"
    TOOLBAR = "toolbar"
    MODULE = "module"


class WrapCase(StrEnum):
    SOFT = "soft"
    HARD = "hard"
