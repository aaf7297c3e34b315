import logging

from valhalla.nx.maps import (
    Foothold,
    Life,
    Map,
    Portal,
    Reactor,
    extract_maps,
    footholds_from_node,
    lifes_from_node,
    map_info_from_node,
    portals_from_node,
    reactors_from_node,
)
from valhalla.nx.node import NxNode


def n(name, value=None, *children):
    return NxNode(name, value, list(children))


def test_map_info_reads_options():
    info = n(
        "info",
        None,
        n("town", 1),
        n("mobRate", 1.5),
        n("returnMap", 100000000),
        n("bgm", "Bgm00/FloralLife"),
        n("mapName", "Henesys"),
        n("VRLeft", -500),
        n("fs", 0.25),
    )
    result = map_info_from_node(info)
    assert result.town is True
    assert result.mob_rate == 1.5
    assert result.return_map == 100000000
    assert result.bgm == "Bgm00/FloralLife"
    assert result.map_name == "Henesys"
    assert result.vr_left == -500
    assert result.fs == 0.25
    assert result.portals == []


def test_map_info_logs_unknown_option(caplog):
    with caplog.at_level(logging.WARNING):
        result = map_info_from_node(n("info", None, n("mystery", 3), n("snow", 1)))
    assert result.snow == 1
    assert "mystery" in caplog.text


def test_portals_keep_slot_for_bad_name():
    node = n(
        "portal",
        None,
        n("0", None, n("pn", "sp"), n("pt", 0), n("x", -10), n("y", 20), n("tm", 999999999)),
        n("abc", None, n("pn", "ignored")),
        n("2", None, n("pn", "out00"), n("tn", "in00"), n("script", "go")),
    )
    portals = portals_from_node(node)
    assert len(portals) == 3
    assert portals[0] == Portal(id=0, pn="sp", pt=0, x=-10, y=20, tm=999999999)
    assert portals[1] == Portal()
    assert portals[2].id == 2
    assert portals[2].tn == "in00"
    assert portals[2].script == "go"


def test_lifes_split_by_type():
    node = n(
        "life",
        None,
        n("0", None, n("id", "1012000"), n("type", "n"), n("x", 5), n("f", 1)),
        n("1", None, n("id", "100100"), n("type", "m"), n("mobTime", 5), n("rx0", -3)),
        n("2", None, n("id", "bad"), n("type", "m")),
        n("3", None, n("id", "7"), n("type", "r")),
    )
    npcs, mobs = lifes_from_node(node)
    assert [life.id for life in npcs] == [1012000]
    assert npcs[0].face_left is True
    assert npcs[0].x == 5
    assert [life.id for life in mobs] == [100100, 0]
    assert mobs[0].mob_time == 5000
    assert mobs[0].rx0 == -3
    assert all(isinstance(life, Life) for life in npcs + mobs)


def test_reactors_one_per_child():
    node = n(
        "reactor",
        None,
        n("0", None, n("id", 2001), n("x", 10), n("y", -4), n("name", "boss"), n("reactorTime", 30)),
        n("1", None),
    )
    reactors = reactors_from_node(node)
    assert reactors == [
        Reactor(id=2001, x=10, y=-4, name="boss", reactor_time=30),
        Reactor(),
    ]


def test_footholds_walk_three_levels():
    node = n(
        "foothold",
        None,
        n(
            "0",
            None,
            n(
                "1",
                None,
                n("10", None, n("x1", -100), n("x2", 100), n("y1", 0), n("y2", 0), n("next", 11), n("prev", 0), n("force", 1)),
                n("oops", None, n("x1", 1)),
                n("11", None, n("x1", 100), n("prev", 10)),
            ),
        ),
    )
    footholds = footholds_from_node(node)
    assert [fh.id for fh in footholds] == [10, 11]
    assert footholds[0] == Foothold(id=10, x1=-100, x2=100, y1=0, y2=0, prev=0, next=11)
    assert footholds[1].prev == 10


def _map_tree():
    henesys = n(
        "100000000.img",
        None,
        n("info", None, n("town", 1), n("returnMap", 100000000)),
        n("portal", None, n("0", None, n("pn", "sp"))),
        n("life", None, n("0", None, n("id", "100100"), n("type", "m"))),
        n("reactor", None, n("0", None, n("id", 5))),
        n("foothold", None, n("0", None, n("0", None, n("1", None, n("x1", 3))))),
    )
    bare = n("200000000.img", None)
    broken = n("notamap.img", None, n("info", None))
    return n(
        "",
        None,
        n("Map", None, n("Map", None, n("Map0", None, henesys, broken), n("Map2", None, bare))),
    )


def test_extract_maps_reads_sections(caplog):
    with caplog.at_level(logging.WARNING):
        maps = extract_maps(_map_tree())
    assert sorted(maps) == [100000000, 200000000]
    henesys = maps[100000000]
    assert henesys.town is True
    assert henesys.portals[0].pn == "sp"
    assert [mob.id for mob in henesys.mobs] == [100100]
    assert henesys.npcs == []
    assert henesys.reactors[0].id == 5
    assert henesys.footholds[0].x1 == 3
    assert maps[200000000] == Map()
    assert "/Map/Map/Map1" in caplog.text


def test_extract_maps_empty_tree():
    assert extract_maps(n("")) == {}