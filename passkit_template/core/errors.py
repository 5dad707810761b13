"""Error taxonomy for passkit_template.

Every error raised by the package derives from PassTemplateError, and also
from the builtin it refines (ValueError, OSError) so generic handlers keep
working.
"""


class PassTemplateError(Exception):
    """Base class for all passkit_template errors."""


class ConfigurationError(PassTemplateError, ValueError):
    """Bad style tag, bad boolean, unknown field name or image slot."""


class UnknownStyleError(ConfigurationError):
    """A pass definition names none of the registered styles."""


class FormatError(PassTemplateError, ValueError):
    """Malformed colour, non-https URL or undecodable image."""


class FilesystemError(PassTemplateError, OSError):
    """Path missing, not a directory, or unreadable."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ParseError(PassTemplateError, ValueError):
    """Pass definition file is not a valid JSON object."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
