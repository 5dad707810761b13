"""Pass style registry.

The closed set of pass styles a Template may take. Order matters: when a
pass definition is scanned for its style, the first registered style found
as a top-level key wins.
"""

from typing import Any

from passkit_template.core.errors import UnknownStyleError

PASS_STYLES: tuple[str, ...] = (
    'boardingPass',
    'coupon',
    'eventTicket',
    'generic',
    'storeCard',
)


def is_registered(style: object) -> bool:
    return isinstance(style, str) and style in PASS_STYLES


def detect_style(definition: dict[str, Any]) -> str:
    """Return the first registered style that is a key of definition."""
    for style in PASS_STYLES:
        if style in definition:
            return style
    raise UnknownStyleError(f'Unknown pass style! Expected one of: {", ".join(PASS_STYLES)}')


def all_styles() -> tuple[str, ...]:
    """Return all registered styles, in registry order."""
    return PASS_STYLES
