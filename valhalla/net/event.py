"""Events produced by connections for the server's event loop."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

__all__ = ["EventType", "Event"]


class EventType(IntEnum):
    CLIENT_CONNECTED = 0
    CLIENT_DISCONNECT = 1
    CLIENT_PACKET = 2
    SERVER_CONNECTED = 3
    SERVER_DISCONNECT = 4
    SERVER_PACKET = 5

    @property
    def from_client(self) -> bool:
        """True for events raised by a game client connection."""
        return self <= EventType.CLIENT_PACKET


@dataclass(frozen=True)
class Event:
    """Something that happened on a connection."""

    type: EventType
    conn: Any
    packet: bytes = b""