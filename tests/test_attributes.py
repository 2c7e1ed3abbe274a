# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Property and the attribute constructors."""

import logging
import re
from datetime import datetime

import pytest

from propkit import (
    CircleCoords,
    ImageSizes,
    InvalidCoordsError,
    InvalidSizeError,
    LinkSizes,
    MediaQuery,
    MissingDescriptorError,
    Node,
    Property,
    PropertyTarget,
    RawNode,
    RectCoords,
    SrcsetPair,
    prop,
)
from propkit import attributes as attr
from propkit.cases import DirCase, RelCase, TypeCase


class FakeElement:
    """Records set_property calls."""

    def __init__(self):
        self.props = {}

    def set_property(self, name, value):
        self.props[name] = value


class TestProperty:
    """Tests for Property and prop()."""

    def test_prop(self):
        """Test prop() builds a Property."""
        p = prop('href', 'https://example.com')
        assert p.name == 'href'
        assert p.value == 'https://example.com'

    def test_apply(self):
        """Test apply() forwards to set_property."""
        element = FakeElement()
        prop('id', 'main').apply(element)
        assert element.props == {'id': 'main'}

    def test_apply_logs(self, caplog):
        """Test apply() logs at debug level."""
        with caplog.at_level(logging.DEBUG, logger='propkit.property'):
            prop('id', 'main').apply(FakeElement())
        assert 'id' in caplog.text

    def test_immutable(self):
        """Test properties cannot be reassigned."""
        p = prop('id', 'main')
        with pytest.raises(AttributeError, match="immutable"):
            p.value = 'other'

    def test_equality(self):
        """Test value equality."""
        assert prop('id', 'a') == Property('id', 'a')
        assert prop('id', 'a') != Property('id', 'b')
        assert len({prop('id', 'a'), Property('id', 'a')}) == 1

    def test_repr(self):
        """Test string representation."""
        assert repr(prop('id', 'a')) == "Property('id', 'a')"

    def test_target_protocol(self):
        """Test any object with set_property is a PropertyTarget."""
        assert isinstance(FakeElement(), PropertyTarget)
        assert not isinstance(object(), PropertyTarget)


class TestBuilderAttributes:
    """Tests for attributes backed by builders."""

    def test_coords_rect(self):
        """Test coords from a rectangle."""
        assert attr.coords(RectCoords(0, 0, 10, 10)) == Property('coords', '0,0,10,10')

    def test_coords_circle(self):
        """Test coords from a circle."""
        assert attr.coords(CircleCoords(5, 5, '50%')).value == '5,5,50%'

    def test_coords_invalid(self):
        """Test validation errors surface from the constructor."""
        with pytest.raises(InvalidCoordsError):
            attr.coords(RectCoords(10, 0, 0, 10))

    def test_media(self):
        """Test media keeps the trailing space."""
        p = attr.media(MediaQuery().screen().and_().width(600))
        assert p == Property('media', 'screen and (width: 600px) ')

    def test_sizes_image(self):
        """Test sizes from ImageSizes."""
        assert attr.sizes(ImageSizes().default('100vw')).value == '100vw'

    def test_sizes_link(self):
        """Test sizes from LinkSizes."""
        assert attr.sizes(LinkSizes().pair(16, 16).pair(0, 32)).value == 'any'

    def test_srcset(self):
        """Test srcset joins candidates."""
        p = attr.srcset(SrcsetPair('a.png').width(100), SrcsetPair('b.png').pixel_density(2))
        assert p == Property('srcset', 'a.png 100w, b.png 2x')

    def test_srcset_missing_descriptor(self):
        """Test srcset fails when a candidate has no descriptor."""
        with pytest.raises(MissingDescriptorError):
            attr.srcset(SrcsetPair('a.png'))

    def test_srcdoc(self):
        """Test srcdoc serializes the fragment."""
        p = attr.srcdoc(Node('p').include(RawNode('hello')))
        assert p == Property('srcdoc', '<p>hello</p>')

    def test_applied_to_element(self):
        """Test a built property reaches the element."""
        element = FakeElement()
        attr.media(MediaQuery().print()).apply(element)
        assert element.props == {'media': 'print '}


class TestFormattedAttributes:
    """Tests for attributes with formatting of their own."""

    def test_autocomplete(self):
        """Test booleans become on/off."""
        assert attr.autocomplete(True).value == 'on'
        assert attr.autocomplete(False).value == 'off'

    def test_step(self):
        """Test 0 means any."""
        assert attr.step(0).value == 'any'
        assert attr.step(5).value == '5'

    def test_step_negative_raises(self):
        """Test negative steps are rejected."""
        with pytest.raises(InvalidSizeError, match="-5"):
            attr.step(-5)

    def test_dirname(self):
        """Test the .dir suffix."""
        assert attr.dirname('comment') == Property('dirname', 'comment.dir')

    def test_usemap(self):
        """Test the map reference gets a '#'."""
        assert attr.usemap('planets').value == '#planets'

    def test_class(self):
        """Test class names are space-joined."""
        assert attr.class_('btn', 'primary') == Property('class', 'btn primary')

    def test_accept_charset(self):
        """Test charsets are space-joined."""
        assert attr.accept_charset('utf-8', 'latin1').name == 'accept-charset'
        assert attr.accept_charset('utf-8', 'latin1').value == 'utf-8 latin1'

    def test_data_pair(self):
        """Test the data- prefix."""
        assert attr.data_pair('user-id', 42) == Property('data-user-id', 42)

    def test_datetime(self):
        """Test datetimes are stringified."""
        when = datetime(2024, 5, 1, 12, 30)
        assert attr.datetime_(when).value == '2024-05-01 12:30:00'

    def test_pattern(self):
        """Test compiled and plain patterns."""
        assert attr.pattern(re.compile(r'[0-9]{3}')).value == '[0-9]{3}'
        assert attr.pattern(r'\w+').value == r'\w+'

    def test_download(self):
        """Test flag and filename forms."""
        assert attr.download().value is True
        assert attr.download('report.pdf').value == 'report.pdf'

    def test_html_for(self):
        """Test the DOM property name."""
        assert attr.html_for('email') == Property('htmlFor', 'email')


class TestEnumeratedAttributes:
    """Tests for attributes with named common values."""

    def test_enum_member(self):
        """Test enum members give their plain value."""
        p = attr.rel(RelCase.NOOPENER)
        assert p == Property('rel', 'noopener')
        assert type(p.value) is str

    def test_string_value(self):
        """Test matching strings are accepted."""
        assert attr.type_('datetime-local').value == TypeCase.DATETIME_LOCAL

    def test_rel_outside_cases_passes_through(self):
        """Test a rel value with no Case member is kept as given."""
        assert attr.rel('icon') == Property('rel', 'icon')

    def test_type_outside_cases_passes_through(self):
        """Test a MIME type is accepted for type."""
        p = attr.type_('text/css')
        assert p == Property('type', 'text/css')
        assert type(p.value) is str

    def test_icon_link(self):
        """Test rel and sizes can describe the same icon link."""
        element = FakeElement()
        attr.rel('icon').apply(element)
        attr.sizes(LinkSizes().pair(16, 16)).apply(element)
        assert element.props == {'rel': 'icon', 'sizes': '16x16 '}

    @pytest.mark.parametrize(
        'func, value, name',
        [
            (attr.accept, 'image/*', 'accept'),
            (attr.dir_, DirCase.RTL, 'dir'),
            (attr.enctype, 'multipart/form-data', 'enctype'),
            (attr.http_equiv, 'refresh', 'http-equiv'),
            (attr.kind, 'subtitles', 'kind'),
            (attr.method, 'POST', 'method'),
            (attr.preload, 'none', 'preload'),
            (attr.scope, 'colgroup', 'scope'),
            (attr.shape, 'poly', 'shape'),
            (attr.target, '_blank', 'target'),
            (attr.wrap, 'hard', 'wrap'),
        ],
    )
    def test_names(self, func, value, name):
        """Test each constructor's attribute name."""
        p = func(value)
        assert p.name == name
        assert p.value == str(value)
