"""Characters and equipment as shown on the character selection screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from valhalla.nx.items import Item
from valhalla.packet import Packet

__all__ = ["Equip", "Character", "equip_from_nx"]

_NAME_SIZE = 13
_CASH_WEAPON_SLOT = -111


def _int16(value: float) -> int:
    number = int(value) & 0xFFFF
    return number - 0x10000 if number >> 15 else number


@dataclass
class Equip:
    """An item owned by a character."""

    cash: bool = False
    inv_id: int = 0
    slot_id: int = 0
    id: int = 0
    expire_time: int = 0
    amount: int = 0
    creator_name: str = ""
    flag: int = 0
    upgrade_slots: int = 0
    req_level: int = 0
    scroll_level: int = 0
    str: int = 0
    dex: int = 0
    intelligence: int = 0
    luk: int = 0
    req_str: int = 0
    req_dex: int = 0
    req_int: int = 0
    req_luk: int = 0
    hp: int = 0
    mp: int = 0
    watk: int = 0
    matk: int = 0
    wdef: int = 0
    mdef: int = 0
    accuracy: int = 0
    avoid: int = 0
    hands: int = 0
    speed: int = 0
    jump: int = 0
    attack_speed: int = 0


def equip_from_nx(item_id: int, nx_item: Item | None, creator_name: str = "") -> Equip:
    """A fresh equip with the stats the data files give the item."""
    data = nx_item if nx_item is not None else Item()
    return Equip(
        id=item_id,
        inv_id=1,
        amount=1,
        creator_name=creator_name,
        upgrade_slots=data.tuc,
        req_level=data.req_level,
        str=data.inc_str,
        dex=data.inc_dex,
        intelligence=data.inc_int,
        luk=data.inc_luk,
        req_str=data.req_str,
        req_dex=data.req_dex,
        req_int=data.req_int,
        req_luk=data.req_luk,
        hp=_int16(data.inc_mhp),
        mp=_int16(data.inc_mmp),
        watk=_int16(data.inc_pad),
        matk=_int16(data.inc_mad),
        wdef=_int16(data.inc_pdd),
        # Magic defence takes the attack value, as new characters always have.
        mdef=_int16(data.inc_pad),
        accuracy=_int16(data.inc_acc),
        avoid=_int16(data.inc_eva),
        speed=_int16(data.inc_speed),
        jump=_int16(data.inc_jump),
        attack_speed=data.attack_speed,
    )


@dataclass
class Character:
    """A character on an account."""

    id: int = 0
    account_id: int = 0
    world_id: int = 0
    map_id: int = 0
    map_pos: int = 0
    job: int = 0
    level: int = 0
    str: int = 0
    dex: int = 0
    intelligence: int = 0
    luk: int = 0
    hp: int = 0
    max_hp: int = 0
    mp: int = 0
    max_mp: int = 0
    ap: int = 0
    sp: int = 0
    exp: int = 0
    fame: int = 0
    name: str = ""
    gender: int = 0
    skin: int = 0
    face: int = 0
    hair: int = 0
    chair_id: int = 0
    stance: int = 0
    guild: str = ""
    equip: list[Equip] = field(default_factory=list)

    def display_bytes(self) -> Packet:
        """The look of the character: body, visible equips and cash weapon."""
        packet = Packet()
        packet.write_byte(self.gender)
        packet.write_byte(self.skin)
        packet.write_int32(self.face)
        packet.write_byte(0)
        packet.write_int32(self.hair)

        for item in self.equip:
            if -20 < item.slot_id < 0:
                packet.write_byte(abs(item.slot_id) & 0xFF)
                packet.write_int32(item.id)

        cash_weapon = 0
        for item in self.equip:
            if item.slot_id < -100:
                if item.slot_id == _CASH_WEAPON_SLOT:
                    cash_weapon = item.id
                else:
                    packet.write_byte(abs(item.slot_id + 100) & 0xFF)
                    packet.write_int32(item.id)

        packet.write_byte(0xFF)
        packet.write_byte(0xFF)
        packet.write_int32(cash_weapon)
        return packet

    def encode(self) -> Packet:
        """The character entry of the selection screen's character list."""
        packet = Packet()
        packet.write_int32(self.id)
        packet.write_padded_string(self.name, _NAME_SIZE)
        packet.write_byte(self.gender)
        packet.write_byte(self.skin)
        packet.write_int32(self.face)
        packet.write_int32(self.hair)
        packet.write_int64(0)  # pet cash id

        packet.write_byte(self.level)
        for stat in (
            self.job, self.str, self.dex, self.intelligence, self.luk,
            self.hp, self.max_hp, self.mp, self.max_mp, self.ap, self.sp,
        ):
            packet.write_int16(stat)
        packet.write_int32(self.exp)
        packet.write_int16(self.fame)
        packet.write_int32(self.map_id)
        packet.write_byte(self.map_pos)

        packet.write_bytes(self.display_bytes())

        packet.write_int32(0)  # selected character
        packet.write_byte(1)  # rankings shown
        for value in (1, 2, 3, 4):
            packet.write_int32(value)
        return packet