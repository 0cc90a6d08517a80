"""Image file utilities: load, save and decode images with Pillow.

A pixel buffer is a PIL.Image.Image. Every function is a single-shot
call; failures propagate to the caller as ImageFileError (a RuntimeError),
or ValueError for a missing byte string.

Resources are looked up the way classpath resources are: an existing path
is used as-is, otherwise the path (leading '/' stripped) is tried under
each directory in PALETTEST_RESOURCE_PATH (see palettest.core.env).

Example:
    image = load_resource('/sampleImages/maps/Rome.png')
    save(image, 'out/rome.jpg', 'jpg')
"""

import io
import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from palettest.core.env import resource_roots

# Pillow format names for the short names callers tend to use.
_FORMAT_ALIASES = {
    'jpg': 'JPEG',
    'jpe': 'JPEG',
    'tif': 'TIFF',
}

DEFAULT_FORMAT = 'PNG'


class ImageFileError(RuntimeError):
    """An image could not be found, read, decoded or written."""


def _resolve(path: str) -> Path | None:
    direct = Path(path)
    if direct.is_file():
        return direct
    relative = path.lstrip('/\\')
    for root in resource_roots():
        candidate = root / relative
        if candidate.is_file():
            return candidate
    return None


def _decode(stream, source: str) -> Image.Image:
    try:
        with Image.open(stream) as img:
            img.load()
            # load() keeps the pixels; copy detaches them from the closed file
            return img.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageFileError(f'{source} could not be decoded as an image') from exc


def load_resource(path: str | None) -> Image.Image:
    """Load an image from a file path or resource-relative path."""
    if path is None:
        raise ImageFileError('An image resource was requested without a path')
    found = _resolve(path)
    if found is None:
        raise ImageFileError(f'Image resource not found: {path}')
    with open(found, 'rb') as fh:
        return _decode(fh, str(found))


def _pillow_format(fmt: str | None, path: str) -> str:
    if fmt is None:
        fmt = os.path.splitext(path)[1].lstrip('.') or DEFAULT_FORMAT
    fmt = fmt.lower()
    return _FORMAT_ALIASES.get(fmt, fmt.upper())


def _make_parent(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def save(image: Image.Image | bytes | None, path: str, fmt: str | None = None) -> None:
    """Write an image (or already-encoded bytes) to path.

    Bytes are written unchanged. Images are encoded as fmt, which defaults
    to the path's extension and wins over it when both are given.
    """
    if image is None:
        raise ImageFileError(f'No image supplied to save to {path}')

    if isinstance(image, (bytes, bytearray)):
        _make_parent(path)
        try:
            with open(path, 'wb') as fh:
                fh.write(image)
        except OSError as exc:
            raise ImageFileError(f'Could not write image bytes to {path}') from exc
        return

    pillow_fmt = _pillow_format(fmt, path)
    Image.init()
    if pillow_fmt not in Image.SAVE:
        raise ImageFileError(f'Cannot save image to {path}: unknown format {fmt or pillow_fmt!r}')
    if pillow_fmt == 'JPEG' and image.mode not in ('RGB', 'L', 'CMYK'):
        image = image.convert('RGB')
    _make_parent(path)
    try:
        # Pillow removes a file it created if encoding fails
        image.save(path, format=pillow_fmt)
    except (KeyError, ValueError, OSError) as exc:
        raise ImageFileError(f'Could not save image to {path} as {fmt or pillow_fmt}') from exc


def as_image(data: bytes | None) -> Image.Image:
    """Decode in-memory image bytes."""
    if data is None:
        raise ValueError('Cannot decode an image from None')
    return _decode(io.BytesIO(data), '<bytes>')
