import pytest

from draftrec.config import SLOT_ELIGIBILITY, eligible_positions, get_rules, is_flex_slot, iter_rules


def test_get_rules_is_case_insensitive():
    rules = get_rules("standard")
    assert rules.name == "STANDARD"
    assert rules.roster_order[0] == "QB"
    assert rules.requirements["RB"] == 2


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("CURLING")


def test_every_preset_uses_known_slots():
    for rules in iter_rules():
        assert all(slot in SLOT_ELIGIBILITY for slot in rules.roster_order)
        assert set(rules.slot_positions) == set(rules.roster_order)


def test_flex_detection():
    assert not is_flex_slot("RB")
    assert is_flex_slot("FLEX")
    assert is_flex_slot("SUPERFLEX")
    assert not is_flex_slot("BENCH")
    assert eligible_positions("BENCH") == ()
    assert eligible_positions("TE_FLEX") == ("TE", "WR", "RB")
