"""passkit_template — Reusable pass templates for wallet pass bundles.

A Template holds validated pass fields, a shared image set and signing-key
location metadata. Load one from a bundle directory, then mint passes from it:

    template = await Template.load('bundles/event', key_password='secret')
    ticket = template.create_pass({'serialNumber': '0001'})
"""

from passkit_template.core.errors import (
    ConfigurationError,
    FilesystemError,
    FormatError,
    ParseError,
    PassTemplateError,
    UnknownStyleError,
)
from passkit_template.images import PassImages
from passkit_template.passes import Pass
from passkit_template.registry import PASS_STYLES
from passkit_template.template import Template

__version__ = '0.1.0'

__all__ = [
    'PASS_STYLES',
    'ConfigurationError',
    'FilesystemError',
    'FormatError',
    'ParseError',
    'Pass',
    'PassImages',
    'PassTemplateError',
    'Template',
    'UnknownStyleError',
    '__version__',
]
