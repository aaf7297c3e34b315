import asyncio

import pytest

from valhalla.constants import MAPLE_VERSION
from valhalla.crypt import MapleCipher, packet_length
from valhalla.net.conn import ClientConnection, ServerConnection
from valhalla.net.event import EventType
from valhalla.packet import create_internal, create_with_opcode

KEY_SEND = bytes([1, 2, 3, 4])
KEY_RECV = bytes([9, 8, 7, 6])


class FakeWriter:
    def __init__(self):
        self.data = bytearray()

    def write(self, data):
        self.data.extend(data)

    async def drain(self):
        return None

    def get_extra_info(self, name, default=None):
        if name == "peername":
            return ("127.0.0.1", 8484)
        return default


def drain_events(queue):
    events = []
    while not queue.empty():
        events.append(queue.get_nowait())
    return events


def make_client(stream=None, writer=None, events=None, latency=0, jitter=0):
    return ClientConnection(
        stream or asyncio.StreamReader(),
        writer or FakeWriter(),
        events or asyncio.Queue(),
        16,
        KEY_SEND,
        KEY_RECV,
        latency,
        jitter,
    )


@pytest.mark.asyncio
async def test_server_reader_frames_packets():
    stream = asyncio.StreamReader()
    stream.feed_data(b"\x03abc\x01z")
    stream.feed_eof()
    events = asyncio.Queue()
    conn = ServerConnection(stream, FakeWriter(), events)
    await conn.reader()
    got = drain_events(events)
    assert [e.type for e in got] == [
        EventType.SERVER_CONNECTED,
        EventType.SERVER_PACKET,
        EventType.SERVER_PACKET,
        EventType.SERVER_DISCONNECT,
    ]
    assert got[1].packet == b"abc"
    assert got[2].packet == b"z"
    assert all(e.conn is conn for e in got)


@pytest.mark.asyncio
async def test_server_writer_sets_length_byte():
    writer = FakeWriter()
    conn = ServerConnection(asyncio.StreamReader(), writer, asyncio.Queue())
    packet = create_internal(9)
    packet.write_int32(7)
    task = asyncio.create_task(conn.writer())
    conn.send(packet)
    conn.cleanup()
    await asyncio.wait_for(task, 1)
    assert writer.data[0] == len(writer.data) - 1
    assert bytes(writer.data[1:]) == bytes(packet[1:])


@pytest.mark.asyncio
async def test_server_rejects_empty_packet():
    conn = ServerConnection(asyncio.StreamReader(), FakeWriter(), asyncio.Queue())
    with pytest.raises(ValueError):
        conn.send(b"")


@pytest.mark.asyncio
async def test_client_reader_decrypts():
    remote = MapleCipher(KEY_RECV, MAPLE_VERSION)
    bodies = [b"\x01hello", b"\x02world!"]
    stream = asyncio.StreamReader()
    for body in bodies:
        stream.feed_data(remote.encrypt(bytes(4) + body))
    stream.feed_eof()
    events = asyncio.Queue()
    client = make_client(stream=stream, events=events)
    await client.reader()
    got = drain_events(events)
    assert [e.type for e in got] == [
        EventType.CLIENT_CONNECTED,
        EventType.CLIENT_PACKET,
        EventType.CLIENT_PACKET,
        EventType.CLIENT_DISCONNECT,
    ]
    assert [e.packet for e in got[1:3]] == bodies


@pytest.mark.asyncio
async def test_client_partial_header_disconnects():
    stream = asyncio.StreamReader()
    stream.feed_data(b"\x01\x02")
    stream.feed_eof()
    events = asyncio.Queue()
    await make_client(stream=stream, events=events).reader()
    assert [e.type for e in drain_events(events)] == [
        EventType.CLIENT_CONNECTED,
        EventType.CLIENT_DISCONNECT,
    ]


@pytest.mark.asyncio
async def test_client_writer_encrypts():
    writer = FakeWriter()
    client = make_client(writer=writer)
    packet = create_with_opcode(7)
    packet.write_string("abc")
    body = bytes(packet[4:])
    task = asyncio.create_task(client.writer())
    client.send(packet)
    client.cleanup()
    await asyncio.wait_for(task, 1)
    out = bytes(writer.data)
    assert packet_length(out[:4]) == len(body)
    remote = MapleCipher(KEY_SEND, MAPLE_VERSION)
    assert remote.decrypt(out[4:]) == body


@pytest.mark.asyncio
async def test_latency_delivers_same_bytes():
    plain_writer = FakeWriter()
    slow_writer = FakeWriter()
    plain = make_client(writer=plain_writer)
    slow = make_client(writer=slow_writer, latency=5, jitter=2)
    for conn in (plain, slow):
        task = asyncio.create_task(conn.writer())
        conn.send(create_with_opcode(1))
        conn.send(create_with_opcode(2))
        conn.cleanup()
        await asyncio.wait_for(task, 2)
    assert len(slow_writer.data) > 0
    assert slow_writer.data == plain_writer.data


@pytest.mark.asyncio
async def test_send_after_cleanup_is_ignored():
    writer = FakeWriter()
    client = make_client(writer=writer)
    client.cleanup()
    client.send(create_with_opcode(1))
    await asyncio.wait_for(client.writer(), 1)
    assert client.closed
    assert writer.data == bytearray()


@pytest.mark.asyncio
async def test_client_state_and_address():
    client = make_client()
    assert client.logged_in is False
    assert client.account_id == 0
    assert client.admin_level == 0
    assert str(client) == "127.0.0.1:8484"
    client.account_id = 42
    assert client.account_id == 42