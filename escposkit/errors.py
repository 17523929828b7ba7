from __future__ import annotations


class EscPosError(Exception):
    """Base error for escposkit."""


class ImageDecodeError(EscPosError):
    """Source image could not be decoded or rasterised."""


class LayoutError(EscPosError, ValueError):
    """Column widths, justifications or rows are malformed."""


class ColumnArityMismatch(LayoutError):
    pass


class InvalidWidth(LayoutError):
    pass


class TransportError(EscPosError, RuntimeError):
    """Writing to the byte sink failed."""


class UnknownProfileError(EscPosError, KeyError):
    pass
