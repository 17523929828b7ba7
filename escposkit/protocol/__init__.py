from .commands import (
    bold_cmd,
    cut_cmd,
    feed_dots_cmd,
    justify_cmd,
    new_line_cmd,
    raster_header,
    reset_cmd,
    size_cmd,
    text_cmd,
)
from .raster import RasterEncoder, RasterGeometry, compute_geometry, encode, encode_commands, ink_bit, pack_bands
from .types import Justification, Size

__all__ = [
    "bold_cmd",
    "compute_geometry",
    "cut_cmd",
    "encode",
    "encode_commands",
    "feed_dots_cmd",
    "ink_bit",
    "Justification",
    "justify_cmd",
    "new_line_cmd",
    "pack_bands",
    "raster_header",
    "RasterEncoder",
    "RasterGeometry",
    "reset_cmd",
    "Size",
    "size_cmd",
    "text_cmd",
]
