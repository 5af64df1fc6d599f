"""Decision strategies: pluggable sources of a player's actions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Set
from typing import TYPE_CHECKING

import click

from holdem_player.game.actions import Action
from holdem_player.game.hand import Hand

if TYPE_CHECKING:
    from holdem_player.game.player import Player

logger = logging.getLogger(__name__)


class DecisionStrategy(ABC):
    """Abstract interface for anything that chooses a player's move.

    The betting orchestrator owns turn order and validation; a strategy only
    picks one of the actions it is offered.
    """

    @abstractmethod
    def act(
        self,
        player: Player,
        min_bet: int,
        bet: int,
        allowed_actions: Set[Action],
        board: Hand | None = None,
    ) -> Action:
        """Return one of ``allowed_actions`` for ``player``.

        ``min_bet`` is the minimum bet or raise increment, ``bet`` the amount
        currently to match. ``board`` holds the community cards when the
        caller chooses to share them.
        """

    def show_actions(self, allowed_actions: Set[Action]) -> None:
        """Present the legal actions before asking. No-op by default."""

    def choose_amount(self, player: Player, action: Action, min_amount: int) -> int:
        """Return the chip amount for a bet or raise."""
        return min_amount


def _sorted_actions(actions: Iterable[Action]) -> list[Action]:
    order = list(Action)
    return sorted(actions, key=order.index)


class ScriptedStrategy(DecisionStrategy):
    """Replays a fixed sequence of actions and bet amounts."""

    def __init__(self, actions: Iterable[Action], amounts: Iterable[int] = ()) -> None:
        self._actions = deque(actions)
        self._amounts = deque(amounts)

    @property
    def remaining(self) -> int:
        return len(self._actions)

    def act(
        self,
        player: Player,
        min_bet: int,
        bet: int,
        allowed_actions: Set[Action],
        board: Hand | None = None,
    ) -> Action:
        if not self._actions:
            raise RuntimeError(f"No scripted actions left for {player.name}")
        action = self._actions.popleft()
        if action not in allowed_actions:
            raise ValueError(
                f"Scripted action {action} not allowed for {player.name}; "
                f"legal: {', '.join(str(a) for a in _sorted_actions(allowed_actions))}"
            )
        logger.debug("%s %s (scripted)", player.name, action.verb)
        return action

    def choose_amount(self, player: Player, action: Action, min_amount: int) -> int:
        if not self._amounts:
            return min_amount
        amount = self._amounts.popleft()
        if amount < min_amount:
            raise ValueError(
                f"Scripted {action} of {amount} for {player.name} is below the minimum {min_amount}"
            )
        return amount


class PromptStrategy(DecisionStrategy):
    """Asks a human at the terminal."""

    def show_actions(self, allowed_actions: Set[Action]) -> None:
        labels = ", ".join(a.label for a in _sorted_actions(allowed_actions))
        click.echo(f"Available actions: {labels}")

    def act(
        self,
        player: Player,
        min_bet: int,
        bet: int,
        allowed_actions: Set[Action],
        board: Hand | None = None,
    ) -> Action:
        click.echo(f"{player.name}: cash {player.cash}, bet {player.bet}, to match {bet}")
        if board is not None and len(board):
            click.echo(f"Board: {board.pretty()}")
        click.echo(f"Your cards: {player.hand.pretty()}")
        self.show_actions(allowed_actions)
        choice = click.prompt(
            "Action",
            type=click.Choice([a.value for a in _sorted_actions(allowed_actions)]),
        )
        return Action.from_str(choice)

    def choose_amount(self, player: Player, action: Action, min_amount: int) -> int:
        return click.prompt(
            f"{action.label} amount",
            type=click.IntRange(min_amount, max(min_amount, player.cash)),
            default=min_amount,
        )
