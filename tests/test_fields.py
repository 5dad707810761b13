"""Tests for passkit_template.core.fields — the field table and its validators."""

import pytest
from passkit_template.core.errors import ConfigurationError, FormatError
from passkit_template.core.fields import FIELDS, get_field, normalize_https_url, split_known


class TestFieldTable:
    def test_has_all_fields(self):
        assert set(FIELDS) == {
            'passTypeIdentifier',
            'teamIdentifier',
            'backgroundColor',
            'foregroundColor',
            'labelColor',
            'logoText',
            'organizationName',
            'groupingIdentifier',
            'suppressStripShine',
            'webServiceURL',
        }

    def test_kinds(self):
        assert FIELDS['foregroundColor'].kind == 'color'
        assert FIELDS['labelColor'].kind == 'color'
        assert FIELDS['backgroundColor'].kind == 'string'
        assert FIELDS['suppressStripShine'].kind == 'boolean'
        assert FIELDS['webServiceURL'].kind == 'url'

    def test_attr_names(self):
        assert FIELDS['passTypeIdentifier'].attr == 'pass_type_identifier'
        assert FIELDS['webServiceURL'].attr == 'web_service_url'
        assert FIELDS['logoText'].attr == 'logo_text'

    def test_background_color_is_not_checked(self):
        assert FIELDS['backgroundColor'].validator('anything goes') == 'anything goes'

    def test_get_unknown_field(self):
        with pytest.raises(ConfigurationError, match='Unknown pass field'):
            get_field('serialNumber')

    def test_split_known(self):
        known, unknown = split_known({'logoText': 'X', 'eventTicket': {}, 'formatVersion': 1})
        assert known == {'logoText': 'X'}
        assert unknown == ['eventTicket', 'formatVersion']


class TestBooleanField:
    def test_true(self):
        assert FIELDS['suppressStripShine'].validator(True) is True

    def test_false(self):
        assert FIELDS['suppressStripShine'].validator(False) is False

    @pytest.mark.parametrize('value', [1, 0, 'true', None])
    def test_non_boolean(self, value):
        with pytest.raises(ConfigurationError):
            FIELDS['suppressStripShine'].validator(value)


class TestNormalizeHttpsUrl:
    def test_adds_root_path(self):
        assert normalize_https_url('https://example.com') == 'https://example.com/'

    def test_keeps_path_and_query(self):
        assert normalize_https_url('https://example.com/passes?x=1#f') == 'https://example.com/passes?x=1#f'

    def test_lowercases_scheme_and_host(self):
        assert normalize_https_url('HTTPS://Example.COM/Path') == 'https://example.com/Path'

    def test_drops_default_port(self):
        assert normalize_https_url('https://example.com:443/') == 'https://example.com/'

    def test_keeps_other_port(self):
        assert normalize_https_url('https://example.com:8443') == 'https://example.com:8443/'

    def test_http_rejected(self):
        with pytest.raises(FormatError, match='HTTPS'):
            normalize_https_url('http://example.com')

    @pytest.mark.parametrize(
        'value',
        [
            'example.com',
            '/relative/path',
            'https://',
            'https://example.com:port',
            'https://exa mple.com',
            'https://exa\x00mple.com',
            'https://exa<mple.com',
            'https://exa|mple.com',
            'https://exa^mple.com',
            'https://a..b',
        ],
    )
    def test_rejected(self, value):
        with pytest.raises(FormatError):
            normalize_https_url(value)

    def test_non_string(self):
        with pytest.raises(FormatError):
            normalize_https_url(42)

    def test_international_host_is_punycoded(self):
        assert normalize_https_url('https://bücher.example/') == 'https://xn--bcher-kva.example/'

    def test_ipv6_host(self):
        assert normalize_https_url('https://[::1]:8443/x') == 'https://[::1]:8443/x'
