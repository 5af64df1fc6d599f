"""Tests for Action and BlindStructure."""

import pytest
from holdem_player.game.actions import Action
from holdem_player.game.rules import DEFAULT_BLINDS, BlindStructure


class TestAction:
    def test_from_str(self):
        assert Action.from_str("fold") == Action.FOLD
        assert Action.from_str("ALL_IN") == Action.ALL_IN
        assert Action.from_str("all-in") == Action.ALL_IN
        assert Action.from_str(" big_blind ") == Action.BIG_BLIND

    def test_from_str_unknown(self):
        with pytest.raises(ValueError):
            Action.from_str("muck")

    def test_str_is_value(self):
        assert str(Action.SMALL_BLIND) == "small_blind"

    def test_every_action_has_label_and_verb(self):
        for action in Action:
            assert action.label
            assert action.verb

    def test_classification(self):
        assert Action.SMALL_BLIND.is_blind
        assert Action.BIG_BLIND.is_blind
        assert not Action.CALL.is_blind
        assert not Action.ALL_IN.is_blind


class TestBlindStructure:
    def test_defaults(self):
        assert DEFAULT_BLINDS.small_blind == 10
        assert DEFAULT_BLINDS.big_blind == 20

    def test_equal_blinds_allowed(self):
        b = BlindStructure(small_blind=20, big_blind=20)
        assert b.small_blind == b.big_blind

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            BlindStructure(small_blind=-1, big_blind=2)

    def test_big_smaller_than_small_rejected(self):
        with pytest.raises(ValueError):
            BlindStructure(small_blind=20, big_blind=10)
