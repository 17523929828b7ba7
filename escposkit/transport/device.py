from __future__ import annotations

import asyncio
import os

from ..errors import TransportError

DEFAULT_DEVICE = "/dev/usb/lp0"


class DeviceFileTransport:
    """ByteSink writing to a printer character device, e.g. the usblp node."""

    def __init__(self, path: str = DEFAULT_DEVICE) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    async def write(self, data: bytes) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_blocking, bytes(data))

    def _write_blocking(self, data: bytes) -> None:
        try:
            with open(self._path, "wb") as handle:
                handle.write(data)
                handle.flush()
        except OSError as exc:
            raise TransportError(f"Write to {self._path} failed: {exc}") from exc


def device_from_env(env_var: str = "ESCPOSKIT_DEVICE") -> DeviceFileTransport:
    return DeviceFileTransport(os.environ.get(env_var, DEFAULT_DEVICE))
