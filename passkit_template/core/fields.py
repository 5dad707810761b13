"""Field table for pass templates.

Maps every recognised pass.json top-level key to a FieldSpec. Each validator
takes the raw value and returns what the Template stores, raising
ConfigurationError or FormatError on bad input. Validators never mutate
anything, so a failed assignment leaves the Template untouched.

Keys not in FIELDS are unknown; what happens to them is the Template's
policy (ignore by default, reject when strict).
"""

import ipaddress
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from passkit_template.core.colors import validate_color_value
from passkit_template.core.errors import ConfigurationError, FormatError
from passkit_template.core.types import FieldSpec


def _any_value(value: Any) -> Any:
    return value


def _color(value: Any) -> Any:
    validate_color_value(value)
    return value


def _boolean(value: Any) -> bool:
    # bool only: 1, 'true' and None are rejected
    if not isinstance(value, bool):
        raise ConfigurationError(f'suppressStripShine value must be a boolean, got {type(value).__name__}')
    return value


# WHATWG forbidden host code points, beyond C0 controls and space
_FORBIDDEN_HOST_CHARS = frozenset('#%/:<>?@[\\]^|')


def _check_host(hostname: str, value: str) -> str:
    """Return the host as it goes into the netloc. Raises FormatError."""
    if ':' in hostname:
        try:
            return f'[{ipaddress.IPv6Address(hostname).compressed}]'
        except ValueError as exc:
            raise FormatError(f'Invalid webServiceURL {value!r}: bad IPv6 host') from exc
    bad = [ch for ch in hostname if ord(ch) <= 0x20 or ord(ch) == 0x7F or ch in _FORBIDDEN_HOST_CHARS]
    if bad:
        raise FormatError(f'Invalid webServiceURL {value!r}: forbidden characters in host')
    try:
        return hostname.encode('idna').decode('ascii')
    except UnicodeError as exc:
        raise FormatError(f'Invalid webServiceURL {value!r}: bad host {hostname!r}') from exc


def normalize_https_url(value: Any) -> str:
    """Validate an absolute https URL and return its normalized string form.

    Scheme and host are lowercased and an empty path becomes '/', so
    'HTTPS://Example.com' is stored as 'https://example.com/'.
    """
    if not isinstance(value, str):
        raise FormatError(f'webServiceURL must be a string, got {type(value).__name__}')
    try:
        parts = urlsplit(value.strip())
        port = parts.port  # raises ValueError on a non-numeric port
    except ValueError as exc:
        raise FormatError(f'Invalid webServiceURL {value!r}: {exc}') from exc

    if not parts.scheme or not parts.hostname:
        raise FormatError(f'Invalid webServiceURL {value!r}: not an absolute URL')
    scheme = parts.scheme.lower()
    if scheme != 'https':
        raise FormatError(f'webServiceURL must be on HTTPS, got {scheme!r}')

    netloc = _check_host(parts.hostname, value)
    if port is not None and port != 443:
        netloc = f'{netloc}:{port}'
    if parts.username is not None:
        userinfo = parts.username if parts.password is None else f'{parts.username}:{parts.password}'
        netloc = f'{userinfo}@{netloc}'
    return urlunsplit((scheme, netloc, parts.path or '/', parts.query, parts.fragment))


FIELDS: dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        FieldSpec('passTypeIdentifier', 'string', _any_value),
        FieldSpec('teamIdentifier', 'string', _any_value),
        # backgroundColor is stored unchecked, unlike foreground/label
        FieldSpec('backgroundColor', 'string', _any_value),
        FieldSpec('foregroundColor', 'color', _color),
        FieldSpec('labelColor', 'color', _color),
        FieldSpec('logoText', 'string', _any_value),
        FieldSpec('organizationName', 'string', _any_value),
        FieldSpec('groupingIdentifier', 'string', _any_value),
        FieldSpec('suppressStripShine', 'boolean', _boolean),
        FieldSpec('webServiceURL', 'url', normalize_https_url),
    )
}


def get_field(name: str) -> FieldSpec:
    """Look up a field by its pass.json key. Raises ConfigurationError."""
    if name not in FIELDS:
        raise ConfigurationError(f'Unknown pass field: {name}. Known: {", ".join(sorted(FIELDS))}')
    return FIELDS[name]


def split_known(fields: dict[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Split a mapping into (known fields, unknown key names)."""
    known = {k: v for k, v in fields.items() if k in FIELDS}
    unknown = [k for k in fields if k not in FIELDS]
    return known, unknown
