"""Tests for decision strategies and Player.act delegation."""

import click
import pytest
from click.testing import CliRunner

from holdem_player.game.actions import Action
from holdem_player.game.card import parse_cards
from holdem_player.game.hand import Hand
from holdem_player.game.player import Player
from holdem_player.game.strategy import DecisionStrategy, PromptStrategy, ScriptedStrategy

ALLOWED = {Action.FOLD, Action.CALL, Action.RAISE}


class RecordingStrategy(DecisionStrategy):
    def __init__(self):
        self.calls = []
        self.shown = []

    def act(self, player, min_bet, bet, allowed_actions, board=None):
        self.calls.append((player, min_bet, bet, allowed_actions, board))
        return Action.CALL

    def show_actions(self, allowed_actions):
        self.shown.append(allowed_actions)


class TestPlayerAct:
    def test_without_strategy(self):
        p = Player("Alice", 100)
        with pytest.raises(NotImplementedError):
            p.act(20, 20, ALLOWED)
        with pytest.raises(NotImplementedError):
            p.show_actions(ALLOWED)
        with pytest.raises(NotImplementedError):
            p.do_bet(20)

    def test_delegates_without_board(self):
        s = RecordingStrategy()
        p = Player("Alice", 100, strategy=s)
        assert p.act(20, 40, ALLOWED) == Action.CALL
        assert s.calls == [(p, 20, 40, ALLOWED, None)]

    def test_delegates_with_board(self):
        s = RecordingStrategy()
        p = Player("Alice", 100, strategy=s)
        board = Hand(parse_cards("2c 7d Th"))
        p.act(20, 0, ALLOWED, board)
        assert s.calls[0][4] is board

    def test_show_actions(self):
        s = RecordingStrategy()
        p = Player("Alice", 100, strategy=s)
        p.show_actions(ALLOWED)
        assert s.shown == [ALLOWED]

    def test_default_amounts(self):
        p = Player("Alice", 100, strategy=RecordingStrategy())
        assert p.do_bet(20) == 20
        assert p.do_raise(40) == 40

    def test_abstract(self):
        with pytest.raises(TypeError):
            DecisionStrategy()


class TestScriptedStrategy:
    def test_replays_in_order(self):
        s = ScriptedStrategy([Action.CALL, Action.RAISE])
        p = Player("Alice", 100, strategy=s)
        assert p.act(20, 20, ALLOWED) == Action.CALL
        assert s.remaining == 1
        assert p.act(20, 40, ALLOWED) == Action.RAISE
        assert s.remaining == 0

    def test_exhausted(self):
        p = Player("Alice", 100, strategy=ScriptedStrategy([]))
        with pytest.raises(RuntimeError):
            p.act(20, 20, ALLOWED)

    def test_disallowed_action(self):
        p = Player("Alice", 100, strategy=ScriptedStrategy([Action.CHECK]))
        with pytest.raises(ValueError, match="not allowed"):
            p.act(20, 20, ALLOWED)

    def test_amounts(self):
        p = Player("Alice", 100, strategy=ScriptedStrategy([], amounts=[60, 20]))
        assert p.do_raise(40) == 60
        assert p.do_bet(20) == 20
        assert p.do_bet(20) == 20

    def test_amount_below_minimum(self):
        p = Player("Alice", 100, strategy=ScriptedStrategy([], amounts=[5]))
        with pytest.raises(ValueError, match="below the minimum 20"):
            p.do_bet(20)


class TestPromptStrategy:
    def _run(self, fn, input_text):
        @click.command()
        def cmd():
            click.echo(f"result={fn()}")

        return CliRunner().invoke(cmd, input=input_text)

    def test_prompts_for_action(self):
        p = Player("Alice", 100, strategy=PromptStrategy())
        p.set_cards(parse_cards("As Kd"))
        result = self._run(lambda: p.act(20, 20, ALLOWED), "call\n")
        assert result.exit_code == 0
        assert "Available actions: Fold, Call, Raise" in result.output
        assert "A♠ K♦" in result.output
        assert "result=call" in result.output

    def test_rejects_illegal_choice(self):
        p = Player("Alice", 100, strategy=PromptStrategy())
        result = self._run(lambda: p.act(20, 20, ALLOWED), "check\nfold\n")
        assert "result=fold" in result.output

    def test_amount_prompt(self):
        p = Player("Alice", 100, strategy=PromptStrategy())
        result = self._run(lambda: p.do_raise(40), "75\n")
        assert "result=75" in result.output

    def test_amount_default(self):
        p = Player("Alice", 100, strategy=PromptStrategy())
        result = self._run(lambda: p.do_bet(20), "\n")
        assert "result=20" in result.output
