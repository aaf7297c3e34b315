"""Little-endian packet buffer used for client and inter-server traffic."""

from __future__ import annotations

__all__ = ["Packet", "create_with_opcode", "create_internal"]


class Packet(bytearray):
    """A growable byte buffer with little-endian writers.

    Integer writers truncate their argument to the field width, so
    negative values are stored in two's complement.
    """

    def __str__(self) -> str:
        return f"[Packet] ({len(self)}) : {self.hex(' ').upper()}"

    def _write_uint(self, value: int, width: int) -> None:
        mask = (1 << (8 * width)) - 1
        self.extend((int(value) & mask).to_bytes(width, "little"))

    def write_byte(self, value: int) -> None:
        """Append one unsigned byte."""
        self._write_uint(value, 1)

    def write_int8(self, value: int) -> None:
        """Append one signed byte."""
        self._write_uint(value, 1)

    def write_bool(self, value: bool) -> None:
        """Append 1 for a true value and 0 otherwise."""
        self.append(1 if value else 0)

    def write_uint16(self, value: int) -> None:
        self._write_uint(value, 2)

    def write_uint32(self, value: int) -> None:
        self._write_uint(value, 4)

    def write_uint64(self, value: int) -> None:
        self._write_uint(value, 8)

    def write_int16(self, value: int) -> None:
        self._write_uint(value, 2)

    def write_int32(self, value: int) -> None:
        self._write_uint(value, 4)

    def write_int64(self, value: int) -> None:
        self._write_uint(value, 8)

    def write_bytes(self, data: bytes | bytearray) -> None:
        """Append raw bytes."""
        self.extend(data)

    def write_string(self, text: str) -> None:
        """Append a 16-bit length prefix followed by the encoded text."""
        encoded = text.encode("utf-8", "surrogateescape")
        self.write_uint16(len(encoded))
        self.extend(encoded)

    def write_padded_string(self, text: str, size: int) -> None:
        """Append text cut or zero-padded to exactly ``size`` bytes."""
        encoded = text.encode("utf-8", "surrogateescape")
        if len(encoded) > size:
            self.extend(encoded[:size])
        else:
            self.extend(encoded)
            self.extend(bytes(size - len(encoded)))


def create_with_opcode(op: int) -> Packet:
    """Start a client packet: four header bytes then the opcode."""
    packet = Packet()
    packet.write_int32(0)
    packet.write_byte(op)
    return packet


def create_internal(op: int) -> Packet:
    """Start an inter-server packet: one length byte then the opcode."""
    packet = Packet()
    packet.write_byte(0)
    packet.write_byte(op)
    return packet