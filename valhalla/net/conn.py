"""Asyncio connections to game clients and to other servers."""

import asyncio
import random

from valhalla.constants import CLIENT_HEADER_SIZE, MAPLE_VERSION
from valhalla.crypt import MapleCipher, packet_length
from valhalla.net.event import Event, EventType

__all__ = ["Connection", "ServerConnection", "ClientConnection"]


class Connection:
    """A framed stream that turns reads into events and queues writes.

    :meth:`reader` and :meth:`writer` are coroutines meant to run as
    tasks. :meth:`send` queues a packet and raises ``asyncio.QueueFull``
    when a bounded queue is full.
    """

    header_size = 1
    inter_server = True
    connected_type = EventType.SERVER_CONNECTED
    disconnect_type = EventType.SERVER_DISCONNECT
    packet_type = EventType.SERVER_PACKET

    def __init__(
        self,
        stream_reader: asyncio.StreamReader,
        stream_writer: asyncio.StreamWriter,
        events: asyncio.Queue,
        queue_size: int = 0,
        *,
        cipher_send: MapleCipher | None = None,
        cipher_recv: MapleCipher | None = None,
        latency: int = 0,
        jitter: int = 0,
    ) -> None:
        self._stream_reader = stream_reader
        self._stream_writer = stream_writer
        self.events = events
        self._send_queue: asyncio.Queue = asyncio.Queue(maxsize=max(queue_size, 0))
        self.cipher_send = cipher_send
        self.cipher_recv = cipher_recv
        self.latency = latency
        self.jitter = jitter
        self.closed = False

    def __str__(self) -> str:
        peer = self._stream_writer.get_extra_info("peername")
        if isinstance(peer, tuple) and len(peer) >= 2:
            return f"{peer[0]}:{peer[1]}"
        return str(peer)

    def send(self, packet: bytes | bytearray) -> None:
        """Queue a packet for the writer; ignored once cleaned up."""
        if self.closed:
            return
        if self.inter_server and not packet:
            raise ValueError("inter-server packet needs a length byte")
        self._send_queue.put_nowait(bytes(packet))

    def cleanup(self) -> None:
        """Stop accepting packets and let the writer finish."""
        if self.closed:
            return
        self.closed = True
        self._send_queue.put_nowait(None)

    def _body_length(self, header: bytes) -> int:
        return header[0]

    def _decode(self, body: bytes) -> bytes:
        return body

    def _encode(self, packet: bytes) -> bytes:
        out = bytearray(packet)
        if self.cipher_send is not None:
            out = bytearray(self.cipher_send.encrypt(out, True, False))
        if self.inter_server:
            out[0] = (len(out) - 1) & 0xFF
        return bytes(out)

    async def reader(self) -> None:
        """Read frames until the stream ends, posting an event for each."""
        await self.events.put(Event(self.connected_type, self))
        try:
            while True:
                header = await self._stream_reader.readexactly(self.header_size)
                body = await self._stream_reader.readexactly(self._body_length(header))
                await self.events.put(Event(self.packet_type, self, self._decode(body)))
        except (asyncio.IncompleteReadError, ConnectionError, OSError):
            await self.events.put(Event(self.disconnect_type, self))

    async def _write(self, data: bytes) -> None:
        try:
            self._stream_writer.write(data)
            await self._stream_writer.drain()
        except (ConnectionError, OSError):
            pass

    async def _delayed_writer(self, queue: asyncio.Queue) -> None:
        loop = asyncio.get_running_loop()
        while True:
            item = await queue.get()
            if item is None:
                return
            send_at, data = item
            delay = send_at - loop.time()
            if delay > 0:
                await asyncio.sleep(delay)
            await self._write(data)

    async def writer(self) -> None:
        """Encode and write queued packets until :meth:`cleanup` is called."""
        loop = asyncio.get_running_loop()
        delayed: asyncio.Queue | None = None
        delayed_task = None
        if self.latency > 0:
            delayed = asyncio.Queue()
            delayed_task = asyncio.create_task(self._delayed_writer(delayed))
        while True:
            packet = await self._send_queue.get()
            if packet is None:
                break
            data = self._encode(packet)
            if delayed is not None:
                extra = random.randrange(self.jitter) if self.jitter > 0 else 0
                delayed.put_nowait((loop.time() + (extra + self.latency) / 1000, data))
            else:
                await self._write(data)
        if delayed is not None and delayed_task is not None:
            delayed.put_nowait(None)
            await delayed_task


class ServerConnection(Connection):
    """A link to another server: one length byte, then the body."""


class ClientConnection(Connection):
    """A game client: encrypted four-byte header, then an encrypted body."""

    header_size = CLIENT_HEADER_SIZE
    inter_server = False
    connected_type = EventType.CLIENT_CONNECTED
    disconnect_type = EventType.CLIENT_DISCONNECT
    packet_type = EventType.CLIENT_PACKET

    def __init__(
        self,
        stream_reader: asyncio.StreamReader,
        stream_writer: asyncio.StreamWriter,
        events: asyncio.Queue,
        queue_size: int,
        key_send: bytes,
        key_recv: bytes,
        latency: int = 0,
        jitter: int = 0,
    ) -> None:
        super().__init__(
            stream_reader,
            stream_writer,
            events,
            queue_size,
            cipher_send=MapleCipher(key_send, MAPLE_VERSION),
            cipher_recv=MapleCipher(key_recv, MAPLE_VERSION),
            latency=latency,
            jitter=jitter,
        )
        self.logged_in = False
        self.account_id = 0
        self.gender = 0
        self.world_id = 0
        self.channel_id = 0
        self.admin_level = 0

    def _body_length(self, header: bytes) -> int:
        return packet_length(header)

    def _decode(self, body: bytes) -> bytes:
        if self.cipher_recv is None:
            return body
        return self.cipher_recv.decrypt(body, True, False)