"""Cursor over a received packet."""

from __future__ import annotations

from valhalla.packet import Packet

__all__ = ["Reader"]


class Reader:
    """Reads little-endian values from a packet.

    Reading past the end yields a zero value and leaves the cursor
    where it was, so a short packet never raises.
    """

    def __init__(self, packet: bytes | bytearray, time: int = 0) -> None:
        self.packet = packet
        self.pos = 0
        self.time = time

    def __str__(self) -> str:
        return str(Packet(self.packet))

    @property
    def buffer(self) -> bytes:
        """The whole packet, independent of the cursor."""
        return bytes(self.packet)

    @property
    def remaining(self) -> int:
        return len(self.packet) - self.pos

    def _take(self, size: int) -> bytes | None:
        if self.remaining < size:
            return None
        chunk = bytes(self.packet[self.pos : self.pos + size])
        self.pos += size
        return chunk

    def _read_int(self, width: int, signed: bool) -> int:
        chunk = self._take(width)
        if chunk is None:
            return 0
        return int.from_bytes(chunk, "little", signed=signed)

    def skip(self, amount: int) -> None:
        """Move the cursor forward if that stays inside the packet."""
        if len(self.packet) - (self.pos + amount) >= 0:
            self.pos += amount

    def rest(self) -> bytes:
        """Everything from the cursor to the end."""
        return bytes(self.packet[self.pos :])

    def read_byte(self) -> int:
        return self._read_int(1, False)

    def read_int8(self) -> int:
        return self._read_int(1, True)

    def read_bool(self) -> bool:
        return self._read_int(1, False) != 0

    def read_bytes(self, size: int) -> bytes:
        """Read ``size`` bytes, or a single zero byte if too few remain."""
        if size < 0:
            raise ValueError(f"negative read size: {size}")
        chunk = self._take(size)
        return b"\x00" if chunk is None else chunk

    def read_int16(self) -> int:
        return self._read_int(2, True)

    def read_int32(self) -> int:
        return self._read_int(4, True)

    def read_int64(self) -> int:
        return self._read_int(8, True)

    def read_uint16(self) -> int:
        return self._read_int(2, False)

    def read_uint32(self) -> int:
        return self._read_int(4, False)

    def read_uint64(self) -> int:
        return self._read_int(8, False)

    def read_string(self, size: int) -> str:
        """Read ``size`` bytes as text, or an empty string if too few remain."""
        if size < 0:
            raise ValueError(f"negative string length: {size}")
        chunk = self._take(size)
        if chunk is None:
            return ""
        return chunk.decode("utf-8", "surrogateescape")