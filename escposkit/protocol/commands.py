from __future__ import annotations

from typing import Dict, Union

from .types import Justification, Size

ESC = 0x1B
GS = 0x1D
LF = 0x0A

RESET = bytes([ESC, 0x40])
PARTIAL_CUT = bytes([GS, 0x56, 0x01])
FULL_CUT = bytes([GS, 0x56, 0x00])

JUSTIFY_COMMANDS: Dict[Justification, bytes] = {
    Justification.LEFT: bytes([ESC, 0x61, 0x00]),
    Justification.CENTER: bytes([ESC, 0x61, 0x01]),
    Justification.RIGHT: bytes([ESC, 0x61, 0x02]),
}

SIZE_COMMANDS: Dict[Size, bytes] = {
    Size.NORMAL: bytes([ESC, 0x21, 0x00]),
    Size.DOUBLE_HEIGHT: bytes([ESC, 0x21, 0x10]),
    Size.DOUBLE_WIDTH: bytes([ESC, 0x21, 0x20]),
    Size.QUAD: bytes([ESC, 0x21, 0x30]),
}


def reset_cmd() -> bytes:
    """Initialise the printer (ESC @)."""
    return RESET


def new_line_cmd(count: int = 1) -> bytes:
    """Line feeds; empty when count < 1."""
    if count < 1:
        return b""
    return bytes([LF]) * count


def cut_cmd(partial: bool) -> bytes:
    return PARTIAL_CUT if partial else FULL_CUT


def bold_cmd(enable: bool) -> bytes:
    return bytes([ESC, 0x45, 0x01 if enable else 0x00])


def justify_cmd(justification: Union[Justification, str]) -> bytes:
    return JUSTIFY_COMMANDS[Justification.coerce(justification)]


def size_cmd(size: Union[Size, str]) -> bytes:
    return SIZE_COMMANDS[Size.coerce(size)]


def feed_dots_cmd(dots: int) -> bytes:
    """Print buffer and feed paper by n dots (ESC J n); empty outside 1..255."""
    if dots <= 0 or dots > 255:
        return b""
    return bytes([ESC, 0x4A, dots])


def text_cmd(text: str, encoding: str = "utf-8") -> bytes:
    """Encode one line of text, terminated with a line feed."""
    return (text + "\n").encode(encoding)


def raster_header(max_width: int) -> bytes:
    """ESC * in 8-dot single density mode, column count little-endian."""
    return bytes(
        [
            ESC,
            0x2A,
            0x00,
            max_width % 256,
            (max_width >> 8) & 0xFF,
        ]
    )
