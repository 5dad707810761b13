"""Image set for a pass bundle.

Holds PNG image variants keyed by (image_type, density). A bundle directory
names its images `<type>.png`, `<type>@2x.png` or `<type>@3x.png`; anything
else in the directory is ignored.

Every image is probed with Pillow when it is added: the file must decode as
PNG, and its pixel size is recorded. Pixel data is never loaded.

One PassImages instance is shared by a Template and every Pass minted from
it, so images are loaded once.
"""

import asyncio
import logging
import os
import re
from collections.abc import Iterator

from PIL import Image, UnidentifiedImageError

from passkit_template.core.errors import ConfigurationError, FilesystemError, FormatError
from passkit_template.core.types import ImageVariant

logger = logging.getLogger(__name__)

IMAGE_TYPES: tuple[str, ...] = ('background', 'footer', 'icon', 'logo', 'strip', 'thumbnail')
DENSITIES: tuple[str, ...] = ('1x', '2x', '3x')

_FILENAME_RE = re.compile(r'^(' + '|'.join(IMAGE_TYPES) + r')(?:@([23]x))?\.png$')


def parse_image_filename(filename: str) -> tuple[str, str] | None:
    """'logo@2x.png' -> ('logo', '2x'). None if not a pass image name."""
    m = _FILENAME_RE.match(filename)
    if not m:
        return None
    return m.group(1), m.group(2) or '1x'


def _probe_png(path: str) -> tuple[int, int]:
    """Return (width, height) of a PNG file without decoding pixels."""
    try:
        with Image.open(path) as img:
            if img.format != 'PNG':
                raise FormatError(f'Image {path} must be PNG, got {img.format}')
            return img.size
    except UnidentifiedImageError as exc:
        raise FormatError(f'Image {path} is not a readable image') from exc
    except OSError as exc:
        raise FilesystemError(f'Cannot read image {path}: {exc}', path=path) from exc


class PassImages:
    """Image variants of one pass bundle, keyed by (image_type, density)."""

    def __init__(self) -> None:
        self._variants: dict[tuple[str, str], ImageVariant] = {}

    def set_image(self, image_type: str, path: str, density: str = '1x') -> ImageVariant:
        """Add or replace an image variant. Raises ConfigurationError/FormatError/FilesystemError."""
        if image_type not in IMAGE_TYPES:
            raise ConfigurationError(f'Unknown image type {image_type!r}. Available: {", ".join(IMAGE_TYPES)}')
        if density not in DENSITIES:
            raise ConfigurationError(f'Unknown image density {density!r}. Available: {", ".join(DENSITIES)}')
        width, height = _probe_png(path)
        variant = ImageVariant(image_type=image_type, density=density, path=path, width=width, height=height)
        self._variants[(image_type, density)] = variant
        return variant

    def get_image(self, image_type: str, density: str = '1x') -> ImageVariant | None:
        return self._variants.get((image_type, density))

    def image_types(self) -> list[str]:
        """Distinct image types present, sorted."""
        return sorted({t for t, _d in self._variants})

    async def load_from_directory(self, path: str) -> list[ImageVariant]:
        """Add every recognised image file found directly in path.

        Returns the variants added. Any unreadable or non-PNG image aborts
        the load with the error from set_image.
        """
        found = await asyncio.to_thread(self._scan_directory, path)
        added = []
        for image_type, density, file_path in found:
            variant = await asyncio.to_thread(self.set_image, image_type, file_path, density)
            logger.debug('image %s@%s: %s (%dx%d)', image_type, density, file_path, variant.width, variant.height)
            added.append(variant)
        return added

    @staticmethod
    def _scan_directory(path: str) -> list[tuple[str, str, str]]:
        found = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    parsed = parse_image_filename(entry.name)
                    if parsed is None or not entry.is_file():
                        continue
                    image_type, density = parsed
                    found.append((image_type, density, entry.path))
        except OSError as exc:
            raise FilesystemError(f'Cannot list images in {path}: {exc}', path=path) from exc
        found.sort()
        return found

    def __iter__(self) -> Iterator[ImageVariant]:
        return iter(sorted(self._variants.values(), key=lambda v: (v.image_type, v.density)))

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, key: object) -> bool:
        """Accepts an image type ('logo') or an (image_type, density) tuple."""
        if isinstance(key, tuple):
            return key in self._variants
        return any(t == key for t, _d in self._variants)
