"""Mob skill identifiers and mob status bit flags."""

from enum import IntEnum, IntFlag

__all__ = ["MobSkillId", "MobStat", "MobStatus"]


class MobSkillId(IntEnum):
    """Identifiers of the skills a mob can use."""

    WEAPON_ATTACK_UP = 100
    MAGIC_ATTACK_UP = 101
    WEAPON_DEFENCE_UP = 102
    MAGIC_DEFENCE_UP = 103
    WEAPON_ATTACK_UP_AOE = 110
    MAGIC_ATTACK_UP_AOE = 111
    WEAPON_DEFENCE_UP_AOE = 112
    MAGIC_DEFENCE_UP_AOE = 113
    HEAL_AOE = 114
    SPEED_UP_AOE = 115
    SEAL = 120
    DARKNESS = 121
    WEAKNESS = 122
    STUN = 123
    CURSE = 124
    POISON = 125
    SLOW = 126
    DISPEL = 127
    SEDUCE = 128
    SEND_TO_TOWN = 129
    POISON_MIST = 131
    CRAZY_SKULL = 132
    ZOMBIFY = 133
    WEAPON_IMMUNITY = 140
    MAGIC_IMMUNITY = 141
    ARMOR_SKILL = 142
    WEAPON_DAMAGE_REFLECT = 143
    MAGIC_DAMAGE_REFLECT = 144
    ANY_DAMAGE_REFLECT = 145
    MC_WEAPON_ATTACK_UP = 150
    MC_MAGIC_ATTACK_UP = 151
    MC_WEAPON_DEFENSE_UP = 152
    MC_MAGIC_DEFENSE_UP = 153
    MC_ACCURACY_UP = 154
    MC_AVOID_UP = 155
    MC_SPEED_UP = 156
    MC_SEAL = 157  # not used in Monster Carnival
    SUMMON = 200


class MobStat(IntFlag):
    """Temporary stat bits applied to a mob by player skills.

    ``PHYSICAL_IMMUNE`` shares its bit with ``POWER_GUARD_UP`` and is
    therefore an alias of it.
    """

    PHYSICAL_DAMAGE = 0x1
    PHYSICAL_DEFENSE = 0x2
    MAGIC_DAMAGE = 0x4
    MAGIC_DEFENSE = 0x8
    ACCURRENCY = 0x10
    EVASION = 0x20
    SPEED = 0x40
    STUN = 0x80
    FREEZE = 0x100
    POISON = 0x200
    SEAL = 0x400
    DARKNESS = 0x800
    POWER_UP = 0x1000
    MAGIC_UP = 0x2000
    POWER_GUARD_UP = 0x4000
    MAGIC_GUARD_UP = 0x8000
    DOOM = 0x10000
    WEB = 0x20000
    PHYSICAL_IMMUNE = 0x4000
    MAGIC_IMMUNE = 0x80000
    HARD_SKIN = 0x200000
    AMBUSH = 0x400000
    VENOM = 0x1000000
    BLIND = 0x2000000
    SEAL_SKILL = 0x4000000


class MobStatus(IntFlag):
    """Status bits sent with a mob; 32 bits in all."""

    WATK = 0x01
    WDEF = 0x02
    MATK = 0x04
    MDEF = 0x08
    ACC = 0x10
    AVOID = 0x20
    SPEED = 0x40
    STUN = 0x80
    FREEZE = 0x100
    POISON = 0x200
    SEAL = 0x400
    NO_CLUE_1 = 0x800
    WEAPON_ATTACK_UP = 0x1000
    WEAPON_DEFENSE_UP = 0x2000
    MAGIC_ATTACK_UP = 0x4000
    MAGIC_DEFENSE_UP = 0x8000
    DOOM = 0x10000
    SHADOW_WEB = 0x20000
    WEAPON_IMMUNITY = 0x40000
    MAGIC_IMMUNITY = 0x80000
    NO_CLUE_2 = 0x100000
    NO_CLUE_3 = 0x200000
    NINJA_AMBUSH = 0x400000
    NO_CLUE_4 = 0x800000
    VENOMOUS_WEAPON = 0x1000000
    NO_CLUE_5 = 0x2000000
    NO_CLUE_6 = 0x4000000
    EMPTY = 0x8000000  # every mob has this when it spawns
    HYPNOTIZE = 0x10000000
    WEAPON_DAMAGE_REFLECT = 0x20000000
    MAGIC_DAMAGE_REFLECT = 0x40000000
    NO_CLUE_7 = 0x80000000