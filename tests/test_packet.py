import pytest

from valhalla.packet import Packet, create_internal, create_with_opcode
from valhalla.reader import Reader


def test_create_with_opcode_has_four_byte_header():
    packet = create_with_opcode(0x05)
    assert bytes(packet) == b"\x00\x00\x00\x00\x05"


def test_create_internal_has_one_byte_header():
    packet = create_internal(0x07)
    assert bytes(packet) == b"\x00\x07"


def test_int32_is_little_endian():
    packet = Packet()
    packet.write_int32(1)
    assert bytes(packet) == b"\x01\x00\x00\x00"


def test_negative_int16_is_twos_complement():
    packet = Packet()
    packet.write_int16(-1)
    assert bytes(packet) == b"\xff\xff"


def test_write_string_prefixes_length():
    packet = Packet()
    packet.write_string("abc")
    assert bytes(packet) == b"\x03\x00abc"


def test_write_empty_string_is_only_length():
    packet = Packet()
    packet.write_string("")
    assert bytes(packet) == b"\x00\x00"


def test_write_bool():
    packet = Packet()
    packet.write_bool(True)
    packet.write_bool(False)
    assert bytes(packet) == b"\x01\x00"


def test_write_bytes_appends():
    packet = Packet(b"\x09")
    packet.write_bytes(b"xyz")
    assert bytes(packet) == b"\x09xyz"


def test_padded_string_pads_with_zeros():
    packet = Packet()
    packet.write_padded_string("ab", 5)
    assert bytes(packet) == b"ab" + b"\x00" * 3


def test_padded_string_truncates():
    packet = Packet()
    packet.write_padded_string("abcdef", 3)
    assert bytes(packet) == b"abc"


def test_padded_string_exact_length():
    packet = Packet()
    packet.write_padded_string("abcd", 4)
    assert bytes(packet) == b"abcd"


def test_str_format():
    packet = Packet(b"\x01\xab")
    assert str(packet) == "[Packet] (2) : 01 AB"


@pytest.mark.parametrize(
    "write, read, value",
    [
        ("write_byte", "read_byte", 200),
        ("write_int8", "read_int8", -5),
        ("write_int16", "read_int16", -12345),
        ("write_uint16", "read_uint16", 60000),
        ("write_int32", "read_int32", -123456789),
        ("write_uint32", "read_uint32", 4000000000),
        ("write_int64", "read_int64", -(2**62) + 17),
        ("write_uint64", "read_uint64", 2**63 + 99),
    ],
)
def test_integer_round_trip(write, read, value):
    packet = Packet()
    getattr(packet, write)(value)
    reader = Reader(packet)
    assert getattr(reader, read)() == value
    assert reader.rest() == b""


def test_string_round_trip():
    packet = Packet()
    packet.write_string("Scania")
    reader = Reader(packet)
    assert reader.read_string(reader.read_int16()) == "Scania"


def test_mixed_sequence_round_trip():
    packet = create_with_opcode(0x10)
    packet.write_int32(42)
    packet.write_string("hello")
    packet.write_bool(True)
    reader = Reader(packet)
    reader.skip(4)
    assert reader.read_byte() == 0x10
    assert reader.read_int32() == 42
    assert reader.read_string(reader.read_int16()) == "hello"
    assert reader.read_bool() is True


def test_int16_truncates_wide_values():
    packet = Packet()
    packet.write_int16(0x12345)
    assert Reader(packet).read_uint16() == 0x2345
    assert len(packet) == 2