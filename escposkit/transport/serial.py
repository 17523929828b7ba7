from __future__ import annotations

import asyncio
import time
from typing import Optional

import serial

from ..errors import TransportError

SERIAL_BAUD_RATE = 19200
DEFAULT_CHUNK_SIZE = 4096


class SerialTransport:
    """ByteSink over a serial port.

    The port is opened on the first write and stays open until close(), so
    a multi-strip job reuses one connection. Use ``async with`` to close it
    when the job is done.
    """

    def __init__(
        self,
        port: str,
        baud_rate: int = SERIAL_BAUD_RATE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        interval_ms: int = 0,
    ) -> None:
        self._port = port
        self._baud_rate = baud_rate
        self._chunk_size = max(1, chunk_size)
        self._interval_ms = interval_ms
        self._ser: Optional[serial.Serial] = None

    @property
    def is_open(self) -> bool:
        return self._ser is not None

    async def write(self, data: bytes) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_blocking, bytes(data))

    async def close(self) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._close_blocking)

    async def __aenter__(self) -> "SerialTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _open_blocking(self) -> serial.Serial:
        if self._ser is None:
            self._ser = serial.Serial(self._port, self._baud_rate, timeout=1, write_timeout=5)
        return self._ser

    def _write_blocking(self, data: bytes) -> None:
        interval = max(0.0, self._interval_ms / 1000.0)
        try:
            ser = self._open_blocking()
            offset = 0
            while offset < len(data):
                chunk = data[offset : offset + self._chunk_size]
                ser.write(chunk)
                offset += len(chunk)
                if interval:
                    time.sleep(interval)
            ser.flush()
        except (serial.SerialException, OSError) as exc:
            self._close_quietly()
            raise TransportError(f"Serial write to {self._port} failed: {exc}") from exc

    def _close_blocking(self) -> None:
        ser, self._ser = self._ser, None
        if ser is None:
            return
        try:
            ser.close()
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"Closing {self._port} failed: {exc}") from exc

    def _close_quietly(self) -> None:
        # the write error is the one reported; a broken port is reopened next write
        ser, self._ser = self._ser, None
        if ser is not None:
            try:
                ser.close()
            except (serial.SerialException, OSError):
                pass
