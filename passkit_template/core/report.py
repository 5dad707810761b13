"""Report builder — text and JSON output for `passkit-template inspect`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from passkit_template.core.colors import parse_rgb, rgb_to_hex
from passkit_template.core.errors import FormatError
from passkit_template.core.fields import FIELDS

if TYPE_CHECKING:
    from passkit_template.template import Template


def _describe_value(name: str, value: Any) -> str:
    if FIELDS[name].kind == 'color':
        try:
            return f'{value}  ({rgb_to_hex(parse_rgb(value))})'
        except FormatError:
            return str(value)
    return json.dumps(value) if isinstance(value, bool) else str(value)


def format_text(template: Template, folder: str | None = None) -> str:
    """Format a loaded template as human-readable text."""
    lines = []
    header = f'passkit-template: {template.style}'
    if folder:
        header += f' — {folder}'
    lines.append(header)
    lines.append('')

    lines.append('── fields')
    if not template.fields:
        lines.append('  (none)')
    width = max((len(n) for n in template.fields), default=0)
    for name, value in sorted(template.fields.items()):
        lines.append(f'  {name:<{width}}  {_describe_value(name, value)}')
    lines.append('')

    lines.append('── keys')
    lines.append(f'  path: {template.keys_path}')
    lines.append(f'  password: {"set" if template.password is not None else "unset"}')
    if template.key_probe is not None:
        probe = template.key_probe
        lines.append(f'  key file: {probe.status.value}' + (f' ({probe.path})' if probe.path else ''))
    lines.append('')

    lines.append(f'── images ({len(template.images)})')
    for variant in template.images:
        lines.append(f'  {variant.image_type}@{variant.density}  {variant.width}×{variant.height}  {variant.path}')
    return '\n'.join(lines)


def format_json(template: Template, folder: str | None = None) -> str:
    """Format a loaded template as JSON. The key password is never printed."""
    obj: dict[str, Any] = {'style': template.style}
    if folder:
        obj['folder'] = folder
    obj['fields'] = template.fields
    obj['keys'] = {
        'path': template.keys_path,
        'password_set': template.password is not None,
        'key_file': template.key_probe.status.value if template.key_probe else None,
    }
    obj['images'] = [
        {
            'type': v.image_type,
            'density': v.density,
            'path': v.path,
            'width': v.width,
            'height': v.height,
        }
        for v in template.images
    ]
    return json.dumps(obj, indent=2)
