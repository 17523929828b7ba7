from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from PIL import Image

from ..errors import ImageDecodeError
from .commands import raster_header

logger = logging.getLogger(__name__)

BAND_HEIGHT = 8
THRESHOLD = 128
BACKGROUND = (255, 255, 255)


@dataclass(frozen=True)
class RasterGeometry:
    """Placement of a scaled image on the padded print canvas."""

    canvas_width: int
    canvas_height: int
    scaled_width: int
    scaled_height: int
    offset_x: int
    offset_y: int

    @property
    def band_count(self) -> int:
        return self.canvas_height // BAND_HEIGHT


def _round_half_up(num: int, den: int) -> int:
    return (2 * num + den) // (2 * den)


def compute_geometry(image_width: int, image_height: int, target_width: int, max_width: int) -> RasterGeometry:
    """Scale into min(target_width, max_width) without upscaling, centred on a max_width canvas.

    Canvas height is the scaled height rounded up to a whole number of
    8-row bands. All arithmetic is done on integers so the padding never
    depends on float rounding.
    """
    if image_width <= 0 or image_height <= 0:
        raise ImageDecodeError(f"Image has no pixels ({image_width}x{image_height})")
    max_width = max(1, max_width)
    effective_width = min(max(1, target_width), max_width)
    if effective_width < image_width:
        num, den = effective_width, image_width
    else:
        num, den = 1, 1

    canvas_height = -(-(image_height * num) // (den * BAND_HEIGHT)) * BAND_HEIGHT
    scaled_width = max(1, _round_half_up(image_width * num, den))
    scaled_height = max(1, _round_half_up(image_height * num, den))
    return RasterGeometry(
        canvas_width=max_width,
        canvas_height=canvas_height,
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        offset_x=(max_width - scaled_width) // 2,
        offset_y=(canvas_height - scaled_height) // 2,
    )


def render_canvas(image: Image.Image, geometry: RasterGeometry) -> Image.Image:
    """Draw the scaled image onto a white RGB canvas."""
    try:
        rgb = image if image.mode == "RGB" else image.convert("RGB")
        size = (geometry.scaled_width, geometry.scaled_height)
        if rgb.size != size:
            rgb = rgb.resize(size, Image.LANCZOS)
        canvas = Image.new("RGB", (geometry.canvas_width, geometry.canvas_height), BACKGROUND)
        canvas.paste(rgb, (geometry.offset_x, geometry.offset_y))
    except (OSError, ValueError) as exc:
        raise ImageDecodeError(f"Cannot rasterise image: {exc}") from exc
    return canvas


def ink_bit(r: int, g: int, b: int) -> int:
    """1 for a printed dot, 0 for blank paper."""
    total = r + g + b
    if total == 0:
        return 1
    return 1 if total / 3 < THRESHOLD else 0


def canvas_to_bits(canvas: Image.Image) -> List[int]:
    """Threshold every pixel of an RGB canvas, row-major."""
    data = canvas.tobytes()
    return [ink_bit(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 3)]


def pack_bands(bits: List[int], width: int, height: int) -> List[bytes]:
    """Pack row-major bits into one byte per column per 8-row band.

    The top row of a band lands in the most significant bit. Rows past
    the bottom of the canvas count as blank.
    """
    if width <= 0:
        raise ValueError("Width must be greater than zero")
    if len(bits) != width * height:
        raise ValueError("Bits length must equal width * height")
    chunks: List[bytes] = []
    for top in range(0, height, BAND_HEIGHT):
        band = bytearray(width)
        for row in range(top, top + BAND_HEIGHT):
            if row < height:
                offset = row * width
                for x in range(width):
                    band[x] = ((band[x] << 1) | bits[offset + x]) & 0xFF
            else:
                for x in range(width):
                    band[x] = (band[x] << 1) & 0xFF
        chunks.append(bytes(band))
    return chunks


def encode(image: Image.Image, target_width: int, max_width: int) -> List[bytes]:
    """Convert an image into ESC * column-strip raster chunks (payload only)."""
    geometry = compute_geometry(image.width, image.height, target_width, max_width)
    canvas = render_canvas(image, geometry)
    chunks = pack_bands(canvas_to_bits(canvas), geometry.canvas_width, geometry.canvas_height)
    logger.debug(
        "Encoded %dx%d image as %dx%d at offset (%d, %d): %d chunks",
        image.width,
        image.height,
        geometry.scaled_width,
        geometry.scaled_height,
        geometry.offset_x,
        geometry.offset_y,
        len(chunks),
    )
    return chunks


def encode_commands(image: Image.Image, target_width: int, max_width: int) -> List[bytes]:
    """Raster chunks each prefixed with their ESC * header."""
    header = raster_header(max(1, max_width))
    return [header + chunk for chunk in encode(image, target_width, max_width)]


class RasterEncoder:
    """Binds the printer's canvas width so images can be encoded by target width only."""

    def __init__(self, max_width: int) -> None:
        self.max_width = max(1, max_width)

    def encode(self, image: Image.Image, target_width: int) -> List[bytes]:
        return encode(image, target_width, self.max_width)

    def encode_commands(self, image: Image.Image, target_width: int) -> List[bytes]:
        return encode_commands(image, target_width, self.max_width)
