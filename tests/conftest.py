"""Shared fixtures: pass bundle directories built in tmp_path."""

import json
from pathlib import Path

import pytest
from PIL import Image

EVENT_DEFINITION = {
    'formatVersion': 1,
    'passTypeIdentifier': 'pass.com.example.event',
    'teamIdentifier': 'ABCDE12345',
    'organizationName': 'Example Events',
    'logoText': 'Example',
    'foregroundColor': 'rgb(255, 255, 255)',
    'labelColor': 'rgb(200, 200, 200)',
    'backgroundColor': 'rgb(60, 65, 76)',
    'eventTicket': {'primaryFields': [{'key': 'event', 'label': 'EVENT', 'value': 'Concert'}]},
}


def write_png(path: Path, size: tuple[int, int] = (29, 29)) -> Path:
    Image.new('RGB', size, (60, 65, 76)).save(path, format='PNG')
    return path


def make_bundle(root: Path, definition: dict | None = None, images: tuple[str, ...] = ('icon.png',)) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    if definition is not None:
        (root / 'pass.json').write_text(json.dumps(definition), encoding='utf-8')
    for name in images:
        write_png(root / name)
    return root


@pytest.fixture
def event_bundle(tmp_path: Path) -> Path:
    return make_bundle(tmp_path / 'event', EVENT_DEFINITION, images=('icon.png', 'icon@2x.png', 'logo.png'))
