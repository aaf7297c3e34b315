from valhalla.mob_constants import MobSkillId, MobStat, MobStatus


def test_mob_skill_ids_from_source():
    assert MobSkillId.SUMMON == 200
    assert MobSkillId.HEAL_AOE == 114
    assert MobSkillId(157) is MobSkillId.MC_SEAL


def test_mob_skill_ids_unique():
    values = [member.value for member in MobSkillId]
    assert len(values) == len(set(values))
    assert all(MobSkillId(value).value == value for value in values)


def test_physical_immune_aliases_power_guard_up():
    assert MobStat(0x4000) is MobStat.POWER_GUARD_UP
    assert MobStat.PHYSICAL_IMMUNE is MobStat(0x4000)


def test_mob_stat_values_are_single_bits():
    for member in MobStat:
        assert MobStat(member.value) is member
        assert member.value & (member.value - 1) == 0


def test_mob_status_covers_all_32_bits():
    combined = MobStatus(0)
    for member in MobStatus:
        combined |= member
    assert int(combined) == 0xFFFFFFFF
    assert len(list(MobStatus)) == 32


def test_mob_status_pinned_values():
    assert MobStatus(0x8000000) is MobStatus.EMPTY
    assert MobStatus(0x80000000) is MobStatus.NO_CLUE_7


def test_mob_status_combination():
    flags = MobStatus(0x80 | 0x200)
    assert MobStatus.STUN in flags
    assert MobStatus.POISON in flags
    assert MobStatus.SEAL not in flags