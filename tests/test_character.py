import struct

from valhalla.login.character import Character, Equip, equip_from_nx
from valhalla.nx.items import Item


def i32(value):
    return struct.pack("<i", value)


def test_equip_from_nx_copies_stats():
    item = Item(tuc=7, req_level=10, inc_str=3, inc_pad=12.0, inc_pdd=5.0, inc_mad=2.0, attack_speed=6)
    equip = equip_from_nx(1302000, item, "Maker")
    assert equip.id == 1302000
    assert equip.inv_id == 1
    assert equip.amount == 1
    assert equip.creator_name == "Maker"
    assert equip.upgrade_slots == 7
    assert equip.req_level == 10
    assert equip.str == 3
    assert equip.watk == 12
    assert equip.matk == 2
    assert equip.wdef == 5
    assert equip.mdef == equip.watk
    assert equip.attack_speed == 6


def test_equip_from_nx_without_data():
    equip = equip_from_nx(1040002, None)
    assert equip == Equip(id=1040002, inv_id=1, amount=1)


def test_display_bytes_without_equips():
    character = Character(gender=1, skin=2, face=20000, hair=30000)
    expected = bytes([1, 2]) + i32(20000) + b"\x00" + i32(30000) + b"\xff\xff" + i32(0)
    assert bytes(character.display_bytes()) == expected


def test_display_bytes_with_equips_and_cash_weapon():
    character = Character(
        gender=0,
        skin=0,
        face=20000,
        hair=30000,
        equip=[
            Equip(id=1702000, slot_id=-111),
            Equip(id=1040002, slot_id=-5),
            Equip(id=1002000, slot_id=-101),
            Equip(id=2000000, slot_id=3),
        ],
    )
    expected = (
        bytes([0, 0]) + i32(20000) + b"\x00" + i32(30000)
        + b"\x05" + i32(1040002)
        + b"\x01" + i32(1002000)
        + b"\xff\xff" + i32(1702000)
    )
    assert bytes(character.display_bytes()) == expected


def test_encode_layout():
    character = Character(id=7, name="Alice", gender=1, level=10, exp=500, map_id=100000000)
    data = bytes(character.encode())
    assert data[:4] == i32(7)
    assert data[4:17] == b"Alice" + bytes(8)
    assert bytes(character.display_bytes()) in data
    assert data.endswith(i32(0) + b"\x01" + i32(1) + i32(2) + i32(3) + i32(4))


def test_encode_truncates_long_name():
    name = "AbcdefghijklmnopQRST"
    data = bytes(Character(name=name).encode())
    assert data[4:17] == name[:13].encode()


def test_encode_length_grows_with_display():
    plain = Character(name="Bob")
    equipped = Character(name="Bob", equip=[Equip(id=1040002, slot_id=-5)])
    growth = len(equipped.encode()) - len(plain.encode())
    assert growth == len(equipped.display_bytes()) - len(plain.display_bytes())
    assert growth == 5