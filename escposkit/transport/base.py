from __future__ import annotations

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class ByteSink(Protocol):
    """Ordered, fallible destination for printer bytes."""

    async def write(self, data: bytes) -> None:
        ...


class MemorySink:
    """Collects every write in order; useful for previews and tests."""

    def __init__(self) -> None:
        self.writes: List[bytes] = []

    async def write(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    @property
    def data(self) -> bytes:
        return b"".join(self.writes)

    def clear(self) -> None:
        self.writes.clear()
