from __future__ import annotations

import base64
import binascii
import io
import os
from typing import BinaryIO, Union
from urllib.parse import unquote_to_bytes

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import ImageDecodeError

ImageSource = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO, Image.Image]

DATA_URL_PREFIX = "data:"


def load_image(source: ImageSource) -> Image.Image:
    """Decode an image source into an RGB Pillow image.

    Accepts a file path, a ``data:`` URL, raw encoded bytes, a binary file
    object or an already decoded Pillow image. Transparent pixels are
    flattened onto white so they print as blank paper.
    """
    if isinstance(source, Image.Image):
        return _normalize_image(source)
    try:
        img = _open(source)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageDecodeError(f"Cannot decode image: {exc}") from exc
    return _normalize_image(img)


def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, (bytes, bytearray)):
        stream: BinaryIO = io.BytesIO(bytes(source))
        return _load_stream(stream)
    if isinstance(source, str) and source.startswith(DATA_URL_PREFIX):
        return _load_stream(io.BytesIO(decode_data_url(source)))
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as handle:
            return _load_stream(handle)
    return _load_stream(source)


def _load_stream(stream: BinaryIO) -> Image.Image:
    with Image.open(stream) as img:
        img = ImageOps.exif_transpose(img)
        img.load()
        return img.copy()


def decode_data_url(url: str) -> bytes:
    """Return the payload of a ``data:[<mime>][;base64],<data>`` URL."""
    header, sep, payload = url.partition(",")
    if not sep:
        raise ImageDecodeError("Malformed data URL: missing ','")
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ImageDecodeError(f"Malformed base64 in data URL: {exc}") from exc
    return unquote_to_bytes(payload)


def _normalize_image(img: Image.Image) -> Image.Image:
    try:
        if img.mode in ("RGBA", "LA", "PA") or (img.mode == "P" and "transparency" in img.info):
            rgba = img.convert("RGBA")
            background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
            return Image.alpha_composite(background, rgba).convert("RGB")
        if img.mode != "RGB":
            return img.convert("RGB")
    except (OSError, ValueError) as exc:
        raise ImageDecodeError(f"Cannot convert image to RGB: {exc}") from exc
    return img
