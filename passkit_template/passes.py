"""Pass instances minted from a Template.

A Pass keeps references to the Template it came from, its merged fields,
and the Template's shared PassImages. Archiving and signing live elsewhere;
this class only exposes what a bundler needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from passkit_template.images import PassImages
    from passkit_template.template import Template

FORMAT_VERSION = 1


class Pass:
    def __init__(self, template: Template, fields: dict[str, Any], images: PassImages):
        self.template = template
        self.fields = fields
        self.images = images

    @property
    def style(self) -> str:
        return self.template.style

    def definition(self) -> dict[str, Any]:
        """Build the pass.json mapping for this pass.

        Always carries formatVersion and the style key; the style structure
        comes from the fields when present, else it is an empty object.
        """
        data: dict[str, Any] = {'formatVersion': FORMAT_VERSION}
        data.update(self.fields)
        data.setdefault(self.style, {})
        return data

    def __repr__(self) -> str:
        return f'Pass(style={self.style!r}, fields={sorted(self.fields)!r})'
