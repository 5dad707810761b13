"""Shared types for passkit_template: FieldSpec, SetResult, KeyProbe, ImageVariant."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

_CAMEL_RE = re.compile(r'(?<=[a-z0-9])([A-Z])')


@dataclass(frozen=True)
class FieldSpec:
    """One row of the field table: a pass.json key and how to validate it."""

    name: str  # pass.json key, e.g. 'foregroundColor'
    kind: str  # 'string' | 'color' | 'boolean' | 'url'
    validator: Callable[[Any], Any]  # returns the value to store, or raises

    @property
    def attr(self) -> str:
        """Python attribute name: foregroundColor -> foreground_color."""
        return _CAMEL_RE.sub(r'_\1', self.name).lower()


@dataclass
class SetResult:
    """Outcome of Template.try_set: either the stored value or the error."""

    field: str
    ok: bool
    value: Any = None
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.ok


class KeyProbeStatus(enum.Enum):
    FOUND = 'found'
    ABSENT = 'absent'
    ERROR = 'error'


@dataclass
class KeyProbe:
    """Result of looking for a bundle's signing key file."""

    status: KeyProbeStatus
    path: str | None = None  # key file path that was probed
    error: Exception | None = None  # only set when status is ERROR

    @property
    def found(self) -> bool:
        return self.status is KeyProbeStatus.FOUND


@dataclass(frozen=True)
class ImageVariant:
    """A single image file in a pass bundle."""

    image_type: str  # icon, logo, strip, ...
    density: str  # 1x, 2x, 3x
    path: str
    width: int
    height: int
