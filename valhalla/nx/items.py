"""Item records read from the game data tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from valhalla.nx.node import NxNode, apply_options, numeric_id

__all__ = ["Item", "item_from_node", "extract_items"]

log = logging.getLogger(__name__)


@dataclass
class Item:
    """Everything the data files say about one item."""

    inv_tab_id: int = 0
    cash: bool = False
    pet: bool = False
    only: int = 0
    trade_block: int = 0
    expire_on_logout: int = 0
    quest: int = 0
    time_limited: int = 0
    req_level: int = 0
    tuc: int = 0
    slot_max: int = 0
    req_job: int = 0
    req_str: int = 0
    req_dex: int = 0
    req_int: int = 0
    req_luk: int = 0
    inc_str: int = 0
    inc_dex: int = 0
    inc_int: int = 0
    inc_luk: int = 0
    inc_acc: float = 0.0
    inc_eva: float = 0.0
    inc_mdd: float = 0.0
    inc_pdd: float = 0.0
    inc_mad: float = 0.0
    inc_pad: float = 0.0
    inc_mhp: float = 0.0
    inc_mmp: float = 0.0
    attack: float = 0.0
    inc_jump: float = 0.0
    inc_speed: float = 0.0
    recovery_hp: float = 0.0
    attack_speed: int = 0
    price: int = 0
    not_sale: int = 0
    unit_price: float = 0.0
    life: int = 0
    hungry: int = 0
    pickup_item: int = 0
    pickup_all: int = 0
    sweep_for_drop: int = 0
    consume_hp: int = 0
    long_range: int = 0
    recovery: float = 0.0
    req_pop: int = 0
    name_tag: int = 0
    pachinko: int = 0
    v_slot: str = ""
    i_slot: str = ""
    type: int = 0
    success: int = 0
    cursed: int = 0
    add: int = 0
    drop_sweep: int = 0
    rate: int = 0
    meso: int = 0
    path: str = ""
    float_type: int = 0
    no_flip: str = ""
    state_change_item: int = 0
    big_size: int = 0
    sfx: str = ""
    walk: int = 0
    after_image: str = ""
    stand: int = 0
    knockback: int = 0
    fs: int = 0
    chat_balloon: int = 0


def _int16(node: NxNode) -> int:
    return node.as_int(16)


def _int32(node: NxNode) -> int:
    return node.as_int(32)


def _int64(node: NxNode) -> int:
    return node.as_int(64)


def _short_float(node: NxNode) -> float:
    return float(node.as_int(16))


def _byte(node: NxNode) -> int:
    return node.as_byte()


def _bool(node: NxNode) -> bool:
    return node.as_bool()


def _float(node: NxNode) -> float:
    return node.as_float()


def _text(node: NxNode) -> str:
    return node.as_text()


_OPTIONS = {
    "cash": (("cash",), _bool),
    "reqSTR": (("req_str",), _int16),
    "reqDEX": (("req_dex",), _int16),
    "reqINT": (("req_int",), _int16),
    "reqLUK": (("req_luk",), _int16),
    "reqJob": (("req_job",), _int64),
    "reqLevel": (("req_level",), _byte),
    "price": (("price",), _int32),
    "incSTR": (("inc_str",), _int16),
    "incDEX": (("inc_dex",), _int16),
    "incINT": (("inc_int",), _int16),
    "incLUK": (("inc_luk",), _int16),
    "incLUk": (("inc_luk",), _int16),
    "incMMD": (("inc_mdd",), _short_float),
    "incMDD": (("inc_mdd",), _short_float),
    "incPDD": (("inc_pdd",), _short_float),
    "incMAD": (("inc_mad",), _short_float),
    "incPAD": (("inc_pad",), _short_float),
    "incEVA": (("inc_eva",), _short_float),
    "incACC": (("inc_acc",), _short_float),
    "incMHP": (("inc_mhp",), _short_float),
    "recoveryHP": (("recovery_hp",), _short_float),
    "incMMP": (("inc_mmp",), _short_float),
    "only": (("only",), _int64),
    "attackSpeed": (("attack_speed",), _int16),
    "attack": (("attack",), _short_float),
    "incSpeed": (("inc_speed",), _short_float),
    "incJump": (("inc_jump",), _short_float),
    "tuc": (("tuc",), _byte),
    "notSale": (("not_sale",), _int64),
    "tradeBlock": (("trade_block",), _int64),
    "expireOnLogout": (("expire_on_logout",), _int64),
    "slotMax": (("slot_max",), _int16),
    "quest": (("quest",), _int64),
    "life": (("life",), _int64),
    "hungry": (("hungry",), _int64),
    "pickupItem": (("pickup_item",), _int64),
    "pickupAll": (("pickup_all",), _int64),
    "sweepForDrop": (("sweep_for_drop",), _int64),
    "longRange": (("long_range",), _int64),
    "consumeHP": (("consume_hp",), _int64),
    "unitPrice": (("unit_price",), _float),
    "timeLimited": (("time_limited",), _int64),
    "recovery": (("recovery",), _float),
    "regPOP": (("req_pop",), _int64),
    "reqPOP": (("req_pop",), _int64),
    "nameTag": (("name_tag",), _int64),
    "pachinko": (("pachinko",), _int64),
    "vslot": (("v_slot",), _text),
    "islot": (("i_slot",), _text),
    "type": (("type",), _int64),
    "success": (("success",), _int64),
    "cursed": (("cursed",), _int64),
    "add": (("add",), _int64),
    "dropSweep": (("drop_sweep",), _int64),
    "rate": (("rate",), _int64),
    "meso": (("meso",), _int64),
    "path": (("path",), _text),
    "floatType": (("float_type",), _int64),
    "noFlip": (("no_flip",), _text),
    "stateChangeItem": (("state_change_item",), _int64),
    "bigSize": (("big_size",), _int64),
    "sfx": (("sfx",), _text),
    "walk": (("walk",), _int64),
    "afterImage": (("after_image",), _text),
    "stand": (("stand",), _int64),
    "knockback": (("knockback",), _int64),
    "fs": (("fs",), _int64),
    "chatBalloon": (("chat_balloon",), _int64),
}

_IGNORED = {"time", "icon", "iconRaw", "sample", "iconD", "iconRawD", "iconReward"}

_EQUIP_SEARCHES = (
    "/Character/Accessory", "/Character/Cap", "/Character/Cape", "/Character/Coat",
    "/Character/Face", "/Character/Glove", "/Character/Hair", "/Character/Longcoat",
    "/Character/Pants", "/Character/PetEquip", "/Character/Ring", "/Character/Shield",
    "/Character/Shoes", "/Character/Weapon", "Item/Pet",
)

_GROUPED_SEARCHES = ("/Item/Cash", "/Item/Consume", "/Item/Etc", "/Item/Install")

_PET_SEARCH = "/Item/Pet"


def item_from_node(node: NxNode) -> Item:
    """Build an item from its ``info`` node."""
    return apply_options(node, Item(), _OPTIONS, _IGNORED, "item", log)


def _inventory_tab(item_id: int) -> int:
    quotient = abs(item_id) // 1_000_000
    return (quotient if item_id >= 0 else -quotient) & 0xFF


def _read_item(root: NxNode, base: str, name: str) -> tuple[int, Item] | None:
    search = f"{base}/{name}/info"
    info = root.find(search)
    if info is None:
        log.warning("Invalid node search: %s", search)
        item = Item()
    else:
        item = item_from_node(info)
    try:
        item_id = numeric_id(name)
    except ValueError as exc:
        log.warning("%s", exc)
        return None
    item.inv_tab_id = _inventory_tab(item_id)
    return item_id, item


def extract_items(root: NxNode) -> dict[int, Item]:
    """Every equip, usable, etc, set-up, cash and pet item under ``root``."""
    items: dict[int, Item] = {}

    for search in _EQUIP_SEARCHES:
        section = root.find(search)
        if section is None:
            log.warning("Invalid node search: %s", search)
            continue
        for entry in section:
            found = _read_item(root, search, entry.name)
            if found is not None:
                items[found[0]] = found[1]

    for search in _GROUPED_SEARCHES:
        section = root.find(search)
        if section is None:
            log.warning("Invalid node search: %s", search)
            continue
        for group in section:
            for entry in group:
                found = _read_item(root, f"{search}/{group.name}", entry.name)
                if found is not None:
                    items[found[0]] = found[1]

    section = root.find(_PET_SEARCH)
    if section is None:
        log.warning("Invalid node search: %s", _PET_SEARCH)
    else:
        for entry in section:
            found = _read_item(root, _PET_SEARCH, entry.name)
            if found is not None:
                item_id, item = found
                item.pet = True
                items[item_id] = item

    return items