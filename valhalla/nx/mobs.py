"""Mob records read from the game data tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from valhalla.nx.node import NxNode, apply_options, numeric_id

__all__ = ["Mob", "mob_from_node", "extract_mobs"]

log = logging.getLogger(__name__)


@dataclass
class Mob:
    """Everything the data files say about one mob."""

    hp: int = 0
    mp: int = 0
    max_hp: int = 0
    hp_recovery: int = 0
    max_mp: int = 0
    mp_recovery: int = 0
    level: int = 0
    exp: int = 0
    ma_damage: int = 0
    md_damage: int = 0
    pa_damage: int = 0
    pd_damage: int = 0
    speed: int = 0
    eva: int = 0
    acc: int = 0
    summon_type: int = 0
    summon_option: int = 0
    boss: int = 0
    undead: int = 0
    elem_attr: str = ""
    link: int = 0
    fly_speed: int = 0
    no_regen: int = 0
    invincible: int = 0
    self_destruction: int = 0
    explosive_reward: int = 0
    skills: dict[int, int] = field(default_factory=dict)
    revives: list[int] = field(default_factory=list)
    fs: float = 0.0
    pushed: int = 0
    body_attack: int = 0
    no_flip: int = 0
    not_attack: int = 0
    first_attack: int = 0
    remove_quest: int = 0
    remove_after: str = ""
    public_reward: int = 0
    hp_tag_bg_color: int = 0
    hp_tag_color: int = 0


def _skills(node: NxNode) -> dict[int, int]:
    skills: dict[int, int] = {}
    for entry in node:
        skill_id = 0
        level = 0
        for option in entry:
            if option.name == "level":
                level = option.as_byte()
            elif option.name == "skill":
                skill_id = option.as_byte()
            elif option.name not in ("action", "effectAfter"):
                log.warning("Unsupported NX mob skill option: %s -> %r", option.name, option.value)
        skills[skill_id] = level
    return skills


def _revives(node: NxNode) -> list[int]:
    return [entry.as_int(32) for entry in node]


def _summon_option(node: NxNode) -> int:
    log.debug("Got summon option")
    return node.as_int(32)


def _int32(node: NxNode) -> int:
    return node.as_int(32)


def _int64(node: NxNode) -> int:
    return node.as_int(64)


_OPTIONS = {
    "maxHP": (("max_hp", "hp"), _int32),
    "hpRecovery": (("hp_recovery",), _int32),
    "maxMP": (("max_mp", "mp"), _int32),
    "mpRecovery": (("mp_recovery",), _int32),
    "level": (("level",), _int64),
    "exp": (("exp",), _int64),
    "MADamage": (("ma_damage",), _int64),
    "MDDamage": (("md_damage",), _int64),
    "PADamage": (("pa_damage",), _int64),
    "PDDamage": (("pd_damage",), _int64),
    "speed": (("speed",), _int64),
    "eva": (("eva",), _int64),
    "acc": (("acc",), _int64),
    "summonType": (("summon_type",), lambda node: node.as_int(8)),
    "summonOption": (("summon_option",), _summon_option),
    "boss": (("boss",), _int64),
    "undead": (("undead",), _int64),
    "elemAttr": (("elem_attr",), lambda node: node.as_text()),
    "link": (("link",), _int64),
    "flySpeed": (("fly_speed",), _int64),
    "noregen": (("no_regen",), _int64),
    "invincible": (("invincible",), _int64),
    "selfDestruction": (("self_destruction",), _int64),
    "explosiveReward": (("explosive_reward",), _int64),
    "skill": (("skills",), _skills),
    "revive": (("revives",), _revives),
    "fs": (("fs",), lambda node: node.as_float()),
    "pushed": (("pushed",), _int64),
    "bodyAttack": (("body_attack",), _int64),
    "noFlip": (("no_flip",), _int64),
    "notAttack": (("not_attack",), _int64),
    "firstAttack": (("first_attack",), _int64),
    "removeQuest": (("remove_quest",), _int64),
    "removeAfter": (("remove_after",), lambda node: node.as_text()),
    "publicReward": (("public_reward",), _int64),
    "hpTagBgcolor": (("hp_tag_bg_color",), _int64),
    "hpTagColor": (("hp_tag_color",), _int64),
}


def mob_from_node(node: NxNode) -> Mob:
    """Build a mob from its ``info`` node."""
    return apply_options(node, Mob(), _OPTIONS, (), "mob", log)


def extract_mobs(root: NxNode) -> dict[int, Mob]:
    """Every mob under ``/Mob``, keyed by id."""
    mobs: dict[int, Mob] = {}
    search = "/Mob"
    section = root.find(search)
    if section is None:
        log.warning("Invalid node search: %s", search)
        return mobs

    for entry in section:
        sub_search = f"{search}/{entry.name}/info"
        info = root.find(sub_search)
        if info is None:
            log.warning("Invalid node search: %s", sub_search)
            mob = Mob()
        else:
            mob = mob_from_node(info)
        try:
            mob_id = numeric_id(entry.name)
        except ValueError as exc:
            log.warning("%s", exc)
            continue
        mobs[mob_id] = mob
    return mobs