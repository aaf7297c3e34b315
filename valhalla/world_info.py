"""World and channel descriptions exchanged between servers."""

from dataclasses import dataclass, field
from typing import Any

from valhalla.packet import Packet, create_internal
from valhalla.reader import Reader

__all__ = ["Channel", "World", "read_channel"]


@dataclass
class Channel:
    """A channel's public address and population."""

    ip: bytes = bytes(4)
    port: int = 0
    max_pop: int = 0
    pop: int = 0
    conn: Any = field(default=None, compare=False, repr=False)

    def encode(self) -> Packet:
        """Address, port and population in wire order."""
        packet = Packet()
        packet.write_bytes(self.ip)
        packet.write_int16(self.port)
        packet.write_int16(self.max_pop)
        packet.write_int16(self.pop)
        return packet


def read_channel(reader: Reader) -> Channel:
    """Read a channel written by :meth:`Channel.encode`."""
    ip = reader.read_bytes(4)
    port = reader.read_int16()
    max_pop = reader.read_int16()
    pop = reader.read_int16()
    return Channel(ip=ip, port=port, max_pop=max_pop, pop=pop)


@dataclass
class World:
    """A world with its channels, as known to the login server."""

    icon: int = 0
    name: str = ""
    message: str = ""
    ribbon: int = 0
    channels: list[Channel] = field(default_factory=list)
    conn: Any = field(default=None, compare=False, repr=False)

    def encode(self, opcode: int) -> Packet:
        """An inter-server info packet carrying this world."""
        packet = create_internal(opcode)
        packet.write_byte(self.icon)
        packet.write_string(self.name)
        packet.write_string(self.message)
        packet.write_byte(self.ribbon)
        packet.write_byte(len(self.channels))
        for channel in self.channels:
            packet.write_bytes(channel.encode())
        return packet

    def update_from(self, reader: Reader) -> None:
        """Replace this world's fields with those read after the opcode."""
        self.icon = reader.read_byte()
        self.name = reader.read_string(reader.read_int16())
        self.message = reader.read_string(reader.read_int16())
        self.ribbon = reader.read_byte()
        count = reader.read_byte()
        self.channels = [read_channel(reader) for _ in range(count)]