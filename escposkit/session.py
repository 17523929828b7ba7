from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Union

from .errors import TransportError
from .profiles import PrinterProfile, PrinterProfileRegistry, PrintSettings
from .protocol.commands import (
    bold_cmd,
    cut_cmd,
    feed_dots_cmd,
    justify_cmd,
    new_line_cmd,
    reset_cmd,
    size_cmd,
    text_cmd,
)
from .protocol.raster import encode_commands
from .protocol.types import Size
from .rendering.image import ImageSource, load_image
from .rendering.table import JustificationLike, layout
from .transport.base import ByteSink

logger = logging.getLogger(__name__)


class PrinterSession:
    """Sends ESC/POS commands, raster images and tables to a ByteSink.

    Every operation encodes its full output before the first write, so
    malformed input never leaves a half-sent job. Writes of one operation
    are sent in order under a per-session lock.
    """

    def __init__(
        self,
        sink: ByteSink,
        profile: Optional[PrinterProfile] = None,
        settings: Optional[PrintSettings] = None,
    ) -> None:
        self.sink = sink
        self.profile = profile or PrinterProfileRegistry.load().default()
        self.settings = settings or PrintSettings()
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _job_lock(self) -> asyncio.Lock:
        # asyncio locks belong to one loop; a session reused under a new loop gets a new lock
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _send(self, *parts: bytes) -> None:
        async with self._job_lock():
            for part in parts:
                if not part:
                    continue
                try:
                    await self.sink.write(part)
                except TransportError as exc:
                    logger.error("Printer write failed: %s", exc)
                    raise

    async def reset(self) -> None:
        await self._send(reset_cmd())

    async def new_line(self, count: int = 1) -> None:
        await self._send(new_line_cmd(count))

    async def partial_cut(self, new_line_count: Optional[int] = None) -> None:
        if new_line_count is None:
            new_line_count = self._cut_feed_lines()
        await self._send(new_line_cmd(new_line_count), cut_cmd(partial=True))

    async def full_cut(self) -> None:
        await self._send(cut_cmd(partial=False))

    async def bold(self, enable: bool = True) -> None:
        await self._send(bold_cmd(enable))

    async def justify(self, justification: JustificationLike) -> None:
        await self._send(justify_cmd(justification))

    async def size(self, size: Union[Size, str]) -> None:
        await self._send(size_cmd(size))

    async def text(self, text: str) -> None:
        await self._send(text_cmd(text, self.settings.encoding))

    async def image(
        self,
        source: ImageSource,
        width: int,
        max_width: Optional[int] = None,
        feed_count: Optional[int] = None,
    ) -> int:
        """Print an image as ESC * strips; returns the number of strips sent."""
        if max_width is None:
            max_width = self.profile.max_width
        if feed_count is None:
            feed_count = self.settings.image_feed
        commands = encode_commands(load_image(source), width, max_width)
        feed = feed_dots_cmd(feed_count)
        parts: List[bytes] = []
        for command in commands:
            parts.append(command)
            if feed:
                parts.append(feed)
        logger.debug("Sending image: %d strips, width %d of %d", len(commands), width, max_width)
        await self._send(*parts)
        return len(commands)

    async def table(
        self,
        widths: Sequence[int],
        justifications: Sequence[JustificationLike],
        rows: Sequence[Sequence[str]],
    ) -> List[str]:
        """Print rows as a fixed-width table; returns the printed lines."""
        lines = layout(widths, justifications, rows)
        encoding = self.settings.encoding
        await self._send(*(text_cmd(line, encoding) for line in lines))
        return lines

    def _cut_feed_lines(self) -> int:
        if self.settings.cut_feed_lines is not None:
            return self.settings.cut_feed_lines
        return self.profile.feed_lines_before_cut


__all__ = ["PrinterSession"]
