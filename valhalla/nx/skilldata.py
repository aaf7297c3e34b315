"""Player and mob skill levels read from the game data tree."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from valhalla.nx.node import NxNode, apply_options, numeric_id

__all__ = [
    "PlayerSkill",
    "MobSkill",
    "player_skill_from_node",
    "mob_skill_from_node",
    "extract_skills",
]

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_SKILL_ROOT = "/Skill"

T = TypeVar("T")


@dataclass
class PlayerSkill:
    """One level of a player skill."""

    mastery: int = 0
    mad: int = 0
    mdd: int = 0
    pad: int = 0
    pdd: int = 0
    hp: int = 0
    mp: int = 0
    hp_con: int = 0
    mp_con: int = 0
    bullet_consume: int = 0
    money_consume: int = 0
    item_con: int = 0
    item_con_no: int = 0
    time: int = 0
    eva: int = 0
    acc: int = 0
    jump: int = 0
    speed: int = 0
    range: int = 0
    mob_count: int = 0
    attack_count: int = 0
    damage: int = 0
    fixdamage: int = 0
    rb: tuple[int, int] = (0, 0)
    lt: tuple[int, int] = (0, 0)
    hs: str = ""
    x: int = 0
    y: int = 0
    z: int = 0
    prop: int = 0
    bullet_count: int = 0
    action: str = ""


@dataclass
class MobSkill:
    """One level of a mob skill."""

    hp: int = 0
    mp_con: int = 0
    limit: int = 0
    interval: int = 0
    mob_id: list[int] = field(default_factory=list)
    summon_effect: int = 0
    time: int = 0


def _int32(node: NxNode) -> int:
    return node.as_int(32)


def _int64(node: NxNode) -> int:
    return node.as_int(64)


def _text(node: NxNode) -> str:
    return node.as_text()


def _vector(node: NxNode) -> tuple[int, int]:
    value = node.value
    if value is None:
        return (0, 0)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return (int(value[0]), int(value[1]))
    raise TypeError(f"node {node.name!r} holds no vector: {value!r}")


_PLAYER_OPTIONS = {
    "mad": (("mad",), _int64),
    "mdd": (("mdd",), _int64),
    "pad": (("pad",), _int64),
    "pdd": (("pdd",), _int64),
    "hp": (("hp",), _int64),
    "mp": (("mp",), _int64),
    "hpCon": (("hp_con",), _int64),
    "mpCon": (("mp_con",), _int64),
    "bulletConsume": (("bullet_consume",), _int64),
    "moneyCon": (("money_consume",), _int64),
    "itemCon": (("item_con",), _int64),
    "itemConNo": (("item_con_no",), _int64),
    "mastery": (("mastery",), _int64),
    "time": (("time",), _int64),
    "eva": (("eva",), _int64),
    "acc": (("acc",), _int64),
    "jump": (("jump",), _int64),
    "speed": (("speed",), _int64),
    "range": (("range",), _int64),
    "mobCount": (("mob_count",), _int64),
    "attackCount": (("attack_count",), _int64),
    "damage": (("damage",), _int64),
    "fixdamage": (("fixdamage",), _int64),
    "rb": (("rb",), _vector),
    "hs": (("hs",), _text),
    "lt": (("lt",), _vector),
    "x": (("x",), _int64),
    "y": (("y",), _int64),
    "z": (("z",), _int64),
    "prop": (("prop",), _int64),
    "bulletCount": (("bullet_count",), _int64),
    "action": (("action",), _text),
}

_PLAYER_IGNORED = ("ball", "hit", "58")

_MOB_OPTIONS = {
    "hp": (("hp",), _int32),
    "interval": (("interval",), _int64),
    "limit": (("limit",), _int64),
    "summonEffect": (("summon_effect",), _int64),
    "time": (("time",), _int64),
    "mpCon": (("mp_con",), _int32),
}

_MOB_IGNORED = (
    "0", "1", "2", "3", "4", "5",
    "lt", "rb", "effect", "x", "y", "tile", "prop", "affected", "mob", "mob0",
)


def player_skill_from_node(node: NxNode) -> PlayerSkill:
    """Build one player skill level from its level node."""
    return apply_options(node, PlayerSkill(), _PLAYER_OPTIONS, _PLAYER_IGNORED, "player skill", log)


def mob_skill_from_node(node: NxNode) -> MobSkill:
    """Build one mob skill level from its level node."""
    return apply_options(node, MobSkill(), _MOB_OPTIONS, _MOB_IGNORED, "mob skill", log)


def _atoi(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def _read_levels(
    level_node: NxNode,
    path: str,
    factory: Callable[[], T],
    build: Callable[[NxNode], T],
) -> list[T]:
    levels = [factory() for _ in level_node.children]
    for child in level_node:
        level = _atoi(child.name)
        if level is None:
            continue
        if not 1 <= level <= len(levels):
            raise ValueError(f"skill level {level} out of range at {path}")
        levels[level - 1] = build(child)
    return levels


def _collect(
    root: NxNode,
    section_path: str,
    key: Callable[[int], int],
    factory: Callable[[], T],
    build: Callable[[NxNode], T],
    into: dict[int, list[T]],
) -> None:
    section = root.find(section_path)
    if section is None:
        log.warning("Invalid node search: %s", section_path)
        return
    for entry in section:
        level_path = f"{section_path}/{entry.name}/level"
        level_node = root.find(level_path)
        if level_node is None:
            log.warning("Invalid node search: %s", level_path)
            continue
        skill_id = _atoi(entry.name)
        if skill_id is None:
            continue
        into[key(skill_id)] = _read_levels(level_node, level_path, factory, build)


def _int32_key(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def extract_skills(root: NxNode) -> tuple[dict[int, list[PlayerSkill]], dict[int, list[MobSkill]]]:
    """Every player and mob skill under ``/Skill``, as ``(player, mob)``.

    Each value lists the skill's levels, level 1 first.
    """
    player_skills: dict[int, list[PlayerSkill]] = {}
    mob_skills: dict[int, list[MobSkill]] = {}

    skill_root = root.find(_SKILL_ROOT)
    if skill_root is None:
        log.warning("Invalid node search: %s", _SKILL_ROOT)
        return player_skills, mob_skills

    for section in skill_root:
        try:
            numeric_id(section.name)
        except ValueError:
            _collect(
                root,
                f"{_SKILL_ROOT}/{section.name}",
                lambda value: value & 0xFF,
                MobSkill,
                mob_skill_from_node,
                mob_skills,
            )
        else:
            _collect(
                root,
                f"{_SKILL_ROOT}/{section.name}/skill",
                _int32_key,
                PlayerSkill,
                player_skill_from_node,
                player_skills,
            )

    return player_skills, mob_skills