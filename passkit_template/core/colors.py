"""Colour values for pass fields.

Pass colours are CSS-style `rgb(R, G, B)` strings with decimal channels in
0..255. Whitespace is allowed around the parentheses and commas.
The stored value is always the caller's original string, not a re-rendering.
"""

import re

from passkit_template.core.errors import FormatError

_RGB_RE = re.compile(r'rgb\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*\)', re.ASCII)


def parse_rgb(value: str) -> tuple[int, int, int]:
    """Parse 'rgb(r, g, b)' into a channel tuple. Raises FormatError."""
    if not isinstance(value, str):
        raise FormatError(f'Invalid color value {value!r}: expected a string')
    m = _RGB_RE.fullmatch(value)
    if not m:
        raise FormatError(f'Invalid color value {value!r}: expected rgb(R, G, B)')
    r, g, b = (int(v) for v in m.groups())
    for channel in (r, g, b):
        if channel < 0 or channel > 255:
            raise FormatError(f'Invalid color value {value!r}: channel {channel} out of range 0-255')
    return (r, g, b)


def validate_color_value(value: str) -> None:
    """Raise FormatError unless value is a valid rgb(...) colour."""
    parse_rgb(value)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'
