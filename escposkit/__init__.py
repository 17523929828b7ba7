from .errors import (
    ColumnArityMismatch,
    EscPosError,
    ImageDecodeError,
    InvalidWidth,
    LayoutError,
    TransportError,
    UnknownProfileError,
)
from .profiles import PrinterProfile, PrinterProfileRegistry, PrintSettings
from .protocol import Justification, RasterEncoder, Size, encode, encode_commands, raster_header
from .rendering import TableLayout, layout, load_image, wrap_rows
from .session import PrinterSession
from .transport import ByteSink, DeviceFileTransport, MemorySink, SerialTransport

__version__ = "0.1.0"

__all__ = [
    "ByteSink",
    "ColumnArityMismatch",
    "DeviceFileTransport",
    "encode",
    "encode_commands",
    "EscPosError",
    "ImageDecodeError",
    "InvalidWidth",
    "Justification",
    "layout",
    "LayoutError",
    "load_image",
    "MemorySink",
    "PrinterProfile",
    "PrinterProfileRegistry",
    "PrinterSession",
    "PrintSettings",
    "raster_header",
    "RasterEncoder",
    "SerialTransport",
    "Size",
    "TableLayout",
    "TransportError",
    "UnknownProfileError",
    "wrap_rows",
]
