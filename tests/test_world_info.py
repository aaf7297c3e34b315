import pytest

from valhalla.reader import Reader
from valhalla.world_info import Channel, World, read_channel


def test_channel_encode_layout():
    channel = Channel(ip=bytes([127, 0, 0, 1]), port=8685, max_pop=250, pop=3)
    data = bytes(channel.encode())
    assert len(data) == 10
    assert data[:4] == bytes([127, 0, 0, 1])


def test_channel_round_trip():
    channel = Channel(ip=bytes([10, 1, 2, 3]), port=-2, max_pop=250, pop=17)
    assert read_channel(Reader(channel.encode())) == channel


def test_world_encode_header():
    world = World(icon=1, name="Scania", message="hi", ribbon=2)
    data = bytes(world.encode(0x21))
    assert data[:2] == bytes([0, 0x21])


def test_world_round_trip():
    world = World(
        icon=1,
        name="Scania",
        message="welcome",
        ribbon=3,
        channels=[
            Channel(ip=bytes([127, 0, 0, 1]), port=8685, max_pop=250, pop=1),
            Channel(ip=bytes([127, 0, 0, 1]), port=8686, max_pop=100, pop=0),
        ],
    )
    data = world.encode(0x21)
    reader = Reader(data[1:])
    assert reader.read_byte() == 0x21
    received = World()
    received.update_from(reader)
    assert received == world
    assert reader.remaining == 0


def test_update_replaces_channels():
    source = World(name="Bera", channels=[Channel(port=1)])
    target = World(channels=[Channel(port=5), Channel(port=6)])
    reader = Reader(source.encode(7)[2:])
    target.update_from(reader)
    assert target.channels == [Channel(port=1)]
    assert target.name == "Bera"


def test_conn_ignored_in_equality():
    assert Channel(port=1, conn=object()) == Channel(port=1)


def test_negative_name_length_raises():
    reader = Reader(bytes([0, 0xFF, 0xFF]))
    with pytest.raises(ValueError):
        World().update_from(reader)