"""Pass templates.

A Template is a validated, reusable pass configuration: a style, a set of
top-level pass fields, where the signing keys live, and the bundle images.
Passes are minted from it with create_pass().

Fields are read and written through explicit per-field operations generated
from the field table in passkit_template.core.fields:

    template.set_foreground_color('rgb(255, 255, 255)').set_logo_text('ACME')
    template.foreground_color   # 'rgb(255, 255, 255)'

or generically with get(), set() and try_set().
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import stat
from typing import Any

from passkit_template import registry
from passkit_template.core.errors import ConfigurationError, FilesystemError, ParseError, PassTemplateError
from passkit_template.core.fields import FIELDS, get_field, split_known
from passkit_template.core.types import FieldSpec, KeyProbe, KeyProbeStatus, SetResult
from passkit_template.images import PassImages
from passkit_template.passes import Pass

logger = logging.getLogger(__name__)

DEFINITION_FILENAME = 'pass.json'
DEFAULT_KEYS_PATH = 'keys'
_IDENTIFIER_PREFIX = 'pass.'


class Template:
    """Reusable pass configuration.

    Args:
        style: one of registry.PASS_STYLES.
        fields: initial pass fields. Known keys are validated and stored in
            order; the first invalid value aborts construction.
        strict: reject unknown keys in fields instead of ignoring them.
    """

    pass_class: type[Pass] = Pass

    def __init__(self, style: str, fields: dict[str, Any] | None = None, *, strict: bool = False):
        if not registry.is_registered(style):
            raise ConfigurationError(f'Unsupported pass style {style}')
        self._style = style
        self.fields: dict[str, Any] = {}

        known, unknown = split_known(fields or {})
        if unknown:
            if strict:
                raise ConfigurationError(f'Unknown pass fields: {", ".join(unknown)}')
            logger.debug('%s template: ignoring unknown keys %s', style, unknown)
        for name, value in known.items():
            self.set(name, value)

        self.keys_path = DEFAULT_KEYS_PATH
        self.password: str | None = None
        self.images = PassImages()
        self.key_probe: KeyProbe | None = None

    @property
    def style(self) -> str:
        return self._style

    # -- fields ---------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Current value of a field, or None when unset."""
        return self.fields.get(get_field(name).name)

    def set(self, name: str, value: Any) -> Template:
        """Validate and store a field. Returns self for chaining."""
        spec = get_field(name)
        self.fields[spec.name] = spec.validator(value)
        return self

    def try_set(self, name: str, value: Any) -> SetResult:
        """Like set(), but returns the outcome instead of raising."""
        try:
            self.set(name, value)
        except PassTemplateError as exc:
            return SetResult(field=name, ok=False, error=exc)
        return SetResult(field=name, ok=True, value=self.fields[name])

    # -- keys -----------------------------------------------------------------

    def keys(self, path: str | None = None, password: str | None = None) -> None:
        """Set the directory holding key files and the password for them.

        Nothing is checked here; the signer reads the keys.
        """
        if path:
            self.keys_path = path
        if password is not None:
            self.password = password

    # -- passes ---------------------------------------------------------------

    def create_pass(self, fields: dict[str, Any] | None = None) -> Pass:
        """Mint a pass from this template; fields override template fields."""
        merged = {**self.fields, **(fields or {})}
        return self.pass_class(self, merged, self.images)

    def __repr__(self) -> str:
        return f'Template(style={self._style!r}, fields={self.fields!r})'

    # -- loading --------------------------------------------------------------

    @classmethod
    async def load(cls, folder_path: str, key_password: str | None = None) -> Template:
        """Load a Template, its images and its key location from a bundle directory.

        Raises FilesystemError when the folder or its pass.json can't be read,
        ParseError when pass.json is not a JSON object, UnknownStyleError
        when no registered style key is present, and ConfigurationError or
        FormatError for invalid fields or images. A missing or unreadable
        key file never fails the load; see template.key_probe.
        """
        folder_path = os.fspath(folder_path)
        await asyncio.to_thread(_require_directory, folder_path)
        definition = await asyncio.to_thread(_read_definition, folder_path)

        style = registry.detect_style(definition)
        template = cls(style, definition)

        await template.images.load_from_directory(folder_path)

        probe = await asyncio.to_thread(probe_key_file, folder_path, definition.get('passTypeIdentifier'))
        template.key_probe = probe
        if probe.found:
            template.keys(folder_path, key_password)
        elif probe.status is KeyProbeStatus.ERROR:
            logger.warning('could not check key file %s: %s', probe.path, probe.error)

        logger.info(
            'loaded %s template from %s (%d fields, %d images, key %s)',
            style,
            folder_path,
            len(template.fields),
            len(template.images),
            probe.status.value,
        )
        return template


def _require_directory(folder_path: str) -> None:
    try:
        st = os.stat(folder_path)
    except OSError as exc:
        raise FilesystemError(f'Cannot access {folder_path}: {exc}', path=folder_path) from exc
    if not stat.S_ISDIR(st.st_mode):
        raise FilesystemError(f'Path {folder_path} must be a directory!', path=folder_path)


def _reject_constant(name: str) -> Any:
    raise ValueError(f'non-standard JSON constant {name}')


def _read_definition(folder_path: str) -> dict[str, Any]:
    path = os.path.join(folder_path, DEFINITION_FILENAME)
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as exc:
        raise FilesystemError(f'Cannot read {path}: {exc}', path=path) from exc
    try:
        data = json.loads(raw.decode('utf-8'), parse_constant=_reject_constant)
    except UnicodeDecodeError as exc:
        raise ParseError(f'{path} is not valid UTF-8: {exc}', path=path) from exc
    except (json.JSONDecodeError, ValueError) as exc:
        raise ParseError(f'Invalid JSON in {path}: {exc}', path=path) from exc
    if not isinstance(data, dict):
        raise ParseError(f'{path} must contain a JSON object, got {type(data).__name__}', path=path)
    return data


def key_filename(pass_type_identifier: str) -> str:
    """'pass.com.example.ticket' -> 'com.example.ticket.pem'."""
    return f'{pass_type_identifier.removeprefix(_IDENTIFIER_PREFIX)}.pem'


def probe_key_file(folder_path: str, pass_type_identifier: Any) -> KeyProbe:
    """Look for the bundle's signing key next to pass.json.

    FOUND when it is a regular file, ABSENT when there is no identifier or no
    such file, ERROR for any other failure (the error is attached).
    """
    if not isinstance(pass_type_identifier, str) or not pass_type_identifier:
        return KeyProbe(status=KeyProbeStatus.ABSENT)
    path = os.path.join(folder_path, key_filename(pass_type_identifier))
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return KeyProbe(status=KeyProbeStatus.ABSENT, path=path)
    except (OSError, ValueError) as exc:
        # ValueError: embedded NUL in the identifier
        return KeyProbe(status=KeyProbeStatus.ERROR, path=path, error=exc)
    if not stat.S_ISREG(st.st_mode):
        return KeyProbe(status=KeyProbeStatus.ABSENT, path=path)
    return KeyProbe(status=KeyProbeStatus.FOUND, path=path)


def _field_property(spec: FieldSpec) -> property:
    def getter(self: Template) -> Any:
        return self.fields.get(spec.name)

    return property(getter, doc=f'{spec.name} ({spec.kind}), or None when unset.')


def _field_setter(spec: FieldSpec):
    def setter(self: Template, value: Any) -> Template:
        return self.set(spec.name, value)

    setter.__name__ = f'set_{spec.attr}'
    setter.__qualname__ = f'Template.set_{spec.attr}'
    setter.__doc__ = f'Validate and store {spec.name}. Returns the template.'
    return setter


for _spec in FIELDS.values():
    setattr(Template, _spec.attr, _field_property(_spec))
    setattr(Template, f'set_{_spec.attr}', _field_setter(_spec))
del _spec
