"""Game-wide constants: protocol version, stat flags, jobs and the experience table."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "WORLD_NAMES",
    "MAPLE_VERSION",
    "CLIENT_HEADER_SIZE",
    "INTERSERVER_HEADER_SIZE",
    "OPCODE_LENGTH",
    "MAX_ITEM_STACK",
    "BEGINNER_HP_ADD",
    "BEGINNER_MP_ADD",
    "WARRIOR_HP_ADD",
    "WARRIOR_MP_ADD",
    "MAGICIAN_HP_ADD",
    "MAGICIAN_MP_ADD",
    "BOWMAN_HP_ADD",
    "BOWMAN_MP_ADD",
    "THIEF_HP_ADD",
    "THIEF_MP_ADD",
    "ADMIN_HP_ADD",
    "ADMIN_MP_ADD",
    "MAX_HP_VALUE",
    "MAX_MP_VALUE",
    "MAX_PARTY_SIZE",
    "EXP_TABLE",
    "Job",
    "StatFlag",
    "exp_to_next_level",
]

WORLD_NAMES: tuple[str, ...] = (
    "Scania",
    "Bera",
    "Broa",
    "Windia",
    "Khaini",
    "Bellocan",
    "Mardia",
    "Kradia",
    "Yellonde",
    "Demethos",
    "Galicia",
    "El Nido",
    "Zenith",
    "Arcania",
    "Chaos",
    "Nova",
    "Renegates",
)

MAPLE_VERSION = 28
CLIENT_HEADER_SIZE = 4
INTERSERVER_HEADER_SIZE = 4
OPCODE_LENGTH = 1

MAX_ITEM_STACK = 200

BEGINNER_HP_ADD, BEGINNER_MP_ADD = 12, 10
WARRIOR_HP_ADD, WARRIOR_MP_ADD = 24, 4
MAGICIAN_HP_ADD, MAGICIAN_MP_ADD = 10, 6
BOWMAN_HP_ADD, BOWMAN_MP_ADD = 20, 14
THIEF_HP_ADD, THIEF_MP_ADD = 20, 14
ADMIN_HP_ADD, ADMIN_MP_ADD = 150, 150

MAX_HP_VALUE = MAX_MP_VALUE = 32_767

MAX_PARTY_SIZE = 6


class StatFlag(IntFlag):
    """Bits naming which character stats a stat-update packet carries."""

    LEVEL = 1 << 4
    JOB = 1 << 5
    STR = 1 << 6
    DEX = 1 << 7
    INT = 1 << 8
    LUK = 1 << 9
    HP = 1 << 10
    MAX_HP = 1 << 11
    MP = 1 << 12
    MAX_MP = 1 << 13
    AP = 1 << 14
    SP = 1 << 15
    EXP = 1 << 16
    FAME = 1 << 17
    MESOS = 1 << 18


class Job(IntEnum):
    """Job identifiers."""

    BEGINNER = 0

    WARRIOR = 100
    FIGHTER = 110
    CRUSADER = 111
    PAGE = 120
    WHITE_KNIGHT = 121
    SPEARMAN = 130
    DRAGON_KNIGHT = 131

    MAGICIAN = 200
    FIRE_POISON_WIZARD = 210
    FIRE_POISON_MAGE = 211
    ICE_LIGHT_WIZARD = 220
    ICE_LIGHT_MAGE = 221
    CLERIC = 230
    PRIEST = 231

    BOWMAN = 300
    HUNTER = 310
    RANGER = 311
    CROSSBOWMAN = 320
    SNIPER = 321

    THIEF = 400
    ASSASSIN = 410
    HERMIT = 411
    BANDIT = 420
    CHIEF_BANDIT = 421

    GM = 500
    SUPER_GM = 510


_BEGINNER_EXP = (
    15, 34, 57, 92, 135, 372,
    560, 840, 1_242, 1_144,
)

_FIRST_JOB_EXP = (
    1_573, 2_144, 2_800, 3_640, 4_700, 5_893,
    7_360, 9_144, 11_120, 13_477, 16_268, 19_320,
    22_880, 27_008, 31_477, 36_600, 42_444, 48_720,
    55_813, 63_800,
)

_SECOND_JOB_EXP = (
    86_784, 98_208, 110_932, 124_432, 139_372, 155_865,
    173_280, 192_400, 213_345, 235_372, 259_392, 285_532,
    312_928, 342_624, 374_760, 408_336, 445_544, 483_532,
    524_160, 567_772, 598_886, 631_704, 666_321, 702_836,
    741_351, 781_976, 824_828, 870_028, 917_625, 967_995,
    1_021_041, 1_076_994, 1_136_013, 1_198_266, 1_263_930, 1_333_194,
    1_406_252, 1_483_314, 1_564_600, 1_650_340,
)

_THIRD_JOB_EXP = (
    1_740_778, 1_836_173, 1_936_794, 2_042_930, 2_154_882, 2_272_970,
    2_397_528, 2_528_912, 2_667_496, 2_813_674, 2_967_863, 3_130_502,
    3_302_053, 3_483_005, 3_673_873, 3_875_201, 4_087_562, 4_311_559,
    4_547_832, 4_797_053, 5_059_931, 5_337_215, 5_629_694, 5_938_202,
    6_263_614, 6_606_860, 6_968_915, 7_350_811, 7_753_635, 8_178_534,
    8_626_718, 9_099_462, 9_598_112, 10_124_088, 10_678_888, 11_264_090,
    11_881_362, 12_532_461, 13_219_239, 13_943_653, 14_707_765, 15_513_750,
    16_363_902, 17_260_644, 18_206_527, 19_204_245, 20_256_637, 21_366_700,
    22_537_594, 23_772_654,
)

_FOURTH_JOB_EXP = (
    25_075_395, 26_449_526, 27_898_960, 29_427_822, 31_040_466, 32_741_483,
    34_535_716, 36_428_273, 38_424_542, 40_530_206, 42_751_262, 45_094_030,
    47_565_183, 50_171_755, 52_921_167, 55_821_246, 58_880_250, 62_106_888,
    65_510_344, 69_100_311, 72_887_008, 76_881_216, 81_094_306, 85_594_273,
    90_225_770, 95_170_142, 100_385_466, 105_886_589, 111_689_174, 117_809_740,
    124_265_714, 131_075_474, 138_258_410, 145_834_970, 153_826_726, 162_256_430,
    171_148_082, 180_526_997, 190_419_876, 200_854_885, 211_861_732, 223_471_711,
    223_471_711, 248_635_353, 262_260_570, 276_632_449, 291_791_906, 307_782_102,
    324_648_562, 342_439_302, 361_204_976, 380_999_008, 401_877_754, 423_900_654,
    447_130_410, 471_633_156, 497_478_653, 524_740_482, 553_496_261, 583_827_855,
    615_821_622, 649_568_646, 685_165_008, 722_712_050, 762_316_670, 804_091_623,
    848_155_844, 894_634_784, 943_660_770, 995_373_379, 1_049_919_840, 1_107_455_447,
    1_168_144_006, 1_232_158_297, 1_299_680_571, 1_370_903_066, 1_446_028_554, 1_525_246_918,
    1_608_855_764, 1_697_021_059,
)

EXP_TABLE: tuple[int, ...] = (
    _BEGINNER_EXP + _FIRST_JOB_EXP + _SECOND_JOB_EXP + _THIRD_JOB_EXP + _FOURTH_JOB_EXP
)


def exp_to_next_level(level: int) -> int:
    """Experience a character of ``level`` needs to reach the next level."""
    if not 1 <= level <= len(EXP_TABLE):
        raise ValueError(f"no experience entry for level {level}")
    return EXP_TABLE[level - 1]