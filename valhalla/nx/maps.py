"""Map records read from the game data tree."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from valhalla.nx.node import NxNode, apply_options, numeric_id

__all__ = [
    "Portal",
    "Life",
    "Reactor",
    "Foothold",
    "Map",
    "map_info_from_node",
    "portals_from_node",
    "lifes_from_node",
    "reactors_from_node",
    "footholds_from_node",
    "extract_maps",
]

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

_MAP_SEARCHES = ("/Map/Map/Map0", "/Map/Map/Map1", "/Map/Map/Map2", "/Map/Map/Map9")


@dataclass
class Portal:
    """A portal placed in a map."""

    id: int = 0
    pn: str = ""
    tm: int = 0
    tn: str = ""
    pt: int = 0
    x: int = 0
    y: int = 0
    script: str = ""


@dataclass
class Life:
    """An NPC or mob spawn point placed in a map."""

    id: int = 0
    type: str = ""
    foothold: int = 0
    face_left: bool = False
    x: int = 0
    y: int = 0
    mob_time: int = 0
    hide: int = 0
    rx0: int = 0
    rx1: int = 0
    cy: int = 0
    info: int = 0


@dataclass
class Reactor:
    """A reactor placed in a map."""

    id: int = 0
    face_left: int = 0
    x: int = 0
    y: int = 0
    reactor_time: int = 0
    name: str = ""


@dataclass
class Foothold:
    """A platform segment characters and mobs stand on."""

    id: int = 0
    x1: int = 0
    x2: int = 0
    y1: int = 0
    y2: int = 0
    prev: int = 0
    next: int = 0


@dataclass
class Map:
    """Everything the data files say about one map."""

    town: bool = False
    forced_return: int = 0
    return_map: int = 0
    mob_rate: float = 0.0
    swim: int = 0
    personal_shop: int = 0
    entrusted_shop: int = 0
    scroll_disable: int = 0
    move_limit: int = 0
    dec_hp: int = 0
    npcs: list[Life] = field(default_factory=list)
    mobs: list[Life] = field(default_factory=list)
    portals: list[Portal] = field(default_factory=list)
    reactors: list[Reactor] = field(default_factory=list)
    footholds: list[Foothold] = field(default_factory=list)
    field_limit: int = 0
    vr_right: int = 0
    vr_top: int = 0
    vr_left: int = 0
    vr_bottom: int = 0
    vr_limit: int = 0
    recovery: float = 0.0
    version: int = 0
    bgm: str = ""
    map_mark: str = ""
    cloud: int = 0
    hide_minimap: int = 0
    map_desc: str = ""
    effect: str = ""
    fs: float = 0.0
    time_limit: int = 0
    field_type: int = 0
    everlast: int = 0
    snow: int = 0
    rain: int = 0
    map_name: str = ""
    street_name: str = ""
    help: str = ""


def _atoi(text: str) -> int | None:
    if _INTEGER.fullmatch(text):
        return int(text)
    return None


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _int16(node: NxNode) -> int:
    return node.as_int(16)


def _int32(node: NxNode) -> int:
    return node.as_int(32)


def _int64(node: NxNode) -> int:
    return node.as_int(64)


def _float(node: NxNode) -> float:
    return node.as_float()


def _bool(node: NxNode) -> bool:
    return node.as_bool()


def _text(node: NxNode) -> str:
    return node.as_text()


_MAP_OPTIONS = {
    "town": (("town",), _bool),
    "mobRate": (("mob_rate",), _float),
    "forcedReturn": (("forced_return",), _int64),
    "personalShop": (("personal_shop",), _int64),
    "entrustedShop": (("entrusted_shop",), _int64),
    "swim": (("swim",), _int64),
    "moveLimit": (("move_limit",), _int64),
    "decHP": (("dec_hp",), _int64),
    "scrollDisable": (("scroll_disable",), _int64),
    "fieldLimit": (("field_limit",), _int64),
    "VRRight": (("vr_right",), _int64),
    "VRTop": (("vr_top",), _int64),
    "VRLeft": (("vr_left",), _int64),
    "VRBottom": (("vr_bottom",), _int64),
    "VRLimit": (("vr_limit",), _int64),
    "recovery": (("recovery",), _float),
    "returnMap": (("return_map",), _int32),
    "version": (("version",), _int64),
    "bgm": (("bgm",), _text),
    "mapMark": (("map_mark",), _text),
    "cloud": (("cloud",), _int64),
    "hideMinimap": (("hide_minimap",), _int64),
    "mapDesc": (("map_desc",), _text),
    "effect": (("effect",), _text),
    "fs": (("fs",), _float),
    "timeLimit": (("time_limit",), _int64),
    "fieldType": (("field_type",), _int64),
    "everlast": (("everlast",), _int64),
    "snow": (("snow",), _int64),
    "rain": (("rain",), _int64),
    "mapName": (("map_name",), _text),
    "streetName": (("street_name",), _text),
    "help": (("help",), _text),
}

_PORTAL_OPTIONS = {
    "pt": (("pt",), _int64),
    "pn": (("pn",), _text),
    "tm": (("tm",), _int32),
    "tn": (("tn",), _text),
    "x": (("x",), _int16),
    "y": (("y",), _int16),
    "script": (("script",), _text),
}

_LIFE_OPTIONS = {
    "type": (("type",), _text),
    "fh": (("foothold",), _int16),
    "f": (("face_left",), _bool),
    "x": (("x",), _int16),
    "y": (("y",), _int16),
    "mobTime": (("mob_time",), lambda node: _wrap(node.as_int(64) * 1000, 64)),
    "hide": (("hide",), _int64),
    "rx0": (("rx0",), _int16),
    "rx1": (("rx1",), _int16),
    "cy": (("cy",), _int64),
    "info": (("info",), _int64),
}

_REACTOR_OPTIONS = {
    "id": (("id",), _int64),
    "x": (("x",), _int64),
    "y": (("y",), _int64),
    "f": (("face_left",), _int64),
    "reactorTime": (("reactor_time",), _int64),
    "name": (("name",), _text),
}

_FOOTHOLD_OPTIONS = {
    "x1": (("x1",), lambda node: _wrap(node.as_int(64), 16)),
    "x2": (("x2",), lambda node: _wrap(node.as_int(64), 16)),
    "y1": (("y1",), lambda node: _wrap(node.as_int(64), 16)),
    "y2": (("y2",), lambda node: _wrap(node.as_int(64), 16)),
    "next": (("next",), _int64),
    "prev": (("prev",), _int64),
}


def map_info_from_node(node: NxNode) -> Map:
    """Build a map from its ``info`` node; objects are left empty."""
    return apply_options(node, Map(), _MAP_OPTIONS, (), "map", log)


def portals_from_node(node: NxNode) -> list[Portal]:
    """One portal per child; a child whose name is not a number stays blank."""
    portals: list[Portal] = []
    for entry in node:
        number = _atoi(entry.name)
        if number is None:
            log.warning("Skipping portal as ID is not a number: %s", entry.name)
            portals.append(Portal())
            continue
        portal = Portal(id=number & 0xFF)
        apply_options(entry, portal, _PORTAL_OPTIONS, (), "portal", log)
        portals.append(portal)
    return portals


def lifes_from_node(node: NxNode) -> tuple[list[Life], list[Life]]:
    """Split the life entries of a map into ``(npcs, mobs)``."""
    npcs: list[Life] = []
    mobs: list[Life] = []
    for entry in node:
        life = Life()
        for option in entry:
            if option.name == "id":
                number = _atoi(option.as_text())
                if number is not None:
                    life.id = _wrap(number, 32)
                continue
            spec = _LIFE_OPTIONS.get(option.name)
            if spec is None:
                log.warning("Unsupported NX life option: %s -> %r", option.name, option.value)
                continue
            attributes, convert = spec
            value = convert(option)
            for attribute in attributes:
                setattr(life, attribute, value)
        if life.type == "m":
            mobs.append(life)
        elif life.type == "n":
            npcs.append(life)
        else:
            log.warning("Unsupported life type: %s", life.type)
    return npcs, mobs


def reactors_from_node(node: NxNode) -> list[Reactor]:
    """One reactor per child of the ``reactor`` node."""
    return [
        apply_options(entry, Reactor(), _REACTOR_OPTIONS, (), "reactor", log)
        for entry in node
    ]


def footholds_from_node(node: NxNode) -> list[Foothold]:
    """Every foothold found three levels below the ``foothold`` node."""
    footholds: list[Foothold] = []
    for layer in node:
        for group in layer:
            for entry in group:
                number = _atoi(entry.name)
                if number is None:
                    log.warning("Error in foothold id conversion: %s", entry.name)
                    continue
                foothold = Foothold(id=_wrap(number, 16))
                apply_options(entry, foothold, _FOOTHOLD_OPTIONS, ("force",), "foothold", log)
                footholds.append(foothold)
    return footholds


def extract_maps(root: NxNode) -> dict[int, Map]:
    """Every map under the ``/Map/Map/Map*`` sections, keyed by id."""
    maps: dict[int, Map] = {}
    for search in _MAP_SEARCHES:
        section = root.find(search)
        if section is None:
            log.warning("Invalid node search: %s", search)
            continue
        for entry in section:
            base = f"{search}/{entry.name}"
            info = root.find(f"{base}/info")
            if info is None:
                log.warning("Invalid node search: %s", search)
                map_data = Map()
            else:
                map_data = map_info_from_node(info)

            life = root.find(f"{base}/life")
            if life is not None:
                map_data.npcs, map_data.mobs = lifes_from_node(life)
            portal = root.find(f"{base}/portal")
            if portal is not None:
                map_data.portals = portals_from_node(portal)
            reactor = root.find(f"{base}/reactor")
            if reactor is not None:
                map_data.reactors = reactors_from_node(reactor)
            foothold = root.find(f"{base}/foothold")
            if foothold is not None:
                map_data.footholds = footholds_from_node(foothold)

            try:
                map_id = numeric_id(entry.name)
            except ValueError as exc:
                log.warning("%s", exc)
                continue
            maps[_wrap(map_id, 32)] = map_data
    return maps