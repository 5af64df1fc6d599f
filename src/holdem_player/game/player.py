"""Player betting state: cash, hole cards, current bet and last action."""

from __future__ import annotations

import logging
from collections.abc import Sequence, Set

from holdem_player.game.actions import Action
from holdem_player.game.card import Card
from holdem_player.game.hand import Hand
from holdem_player.game.rules import CARDS_PER_PLAYER
from holdem_player.game.strategy import DecisionStrategy

logger = logging.getLogger(__name__)


def _check_amount(amount: int, what: str) -> None:
    if amount < 0:
        raise ValueError(f"{what} must be non-negative, got {amount}")


class Player:
    """A seat at the table, persistent across hands.

    Two views of "all-in" exist. ``is_all_in()`` is recomputed on every call
    and is the one to trust mid-round. ``action`` only becomes
    ``Action.ALL_IN`` when ``reset_bet()`` runs at the start of a betting
    round, so that a busted player keeps showing as all-in for the rest of
    the hand.

    Hole cards never leave through ``public_clone()`` or ``to_dict()``;
    ``get_cards()`` and ``hand`` are for the owner and for showdown.
    """

    def __init__(
        self,
        name: str,
        cash: int,
        strategy: DecisionStrategy | None = None,
    ) -> None:
        if not name:
            raise ValueError("Player name must not be empty")
        _check_amount(cash, "Starting cash")
        self._name = name
        self._cash = cash
        self._hand = Hand()
        self._has_cards = False
        self._bet = 0
        self._action: Action | None = None
        self.strategy = strategy
        self.reset_hand()

    # --- identity and state ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def cash(self) -> int:
        return self._cash

    @property
    def hand(self) -> Hand:
        return self._hand

    @property
    def bet(self) -> int:
        """Chips put in during the current betting round."""
        return self._bet

    @bet.setter
    def bet(self, bet: int) -> None:
        _check_amount(bet, "Bet")
        self._bet = bet

    @property
    def action(self) -> Action | None:
        """Most recent action this round, or None."""
        return self._action

    @action.setter
    def action(self, action: Action | None) -> None:
        self._action = action

    def has_cards(self) -> bool:
        return self._has_cards

    def is_all_in(self) -> bool:
        return self._has_cards and self._cash == 0

    def get_cards(self) -> tuple[Card, ...]:
        return self._hand.cards

    # --- hand and round transitions ---

    def reset_hand(self) -> None:
        """Prepare for a new hand: drop hole cards, then reset the bet."""
        self._has_cards = False
        self._hand.remove_all_cards()
        self.reset_bet()

    def reset_bet(self) -> None:
        """Start a new betting round."""
        self._bet = 0
        self._action = Action.ALL_IN if self.is_all_in() else None

    def set_cards(self, cards: Sequence[Card] | None) -> None:
        """Assign the hole cards. None or an empty sequence clears them."""
        new = list(cards) if cards is not None else []
        if len(new) not in (0, CARDS_PER_PLAYER):
            raise ValueError(
                f"Invalid number of cards: expected {CARDS_PER_PLAYER}, got {len(new)}"
            )
        if not all(isinstance(c, Card) for c in new):
            raise ValueError(f"Hole cards must be Card values, got {new!r}")
        self._hand.remove_all_cards()
        if not new:
            self._has_cards = False
            return
        self._hand.add_cards(new)
        self._has_cards = True
        logger.debug("%s's cards: %s", self._name, self._hand)

    # --- chips ---

    def post_small_blind(self, blind: int) -> None:
        self._post_blind(Action.SMALL_BLIND, blind)

    def post_big_blind(self, blind: int) -> None:
        self._post_blind(Action.BIG_BLIND, blind)

    def _post_blind(self, action: Action, blind: int) -> None:
        _check_amount(blind, "Blind")
        if blind > self._cash:
            raise RuntimeError(
                f"{self._name} cannot post a blind of {blind} with {self._cash} cash"
            )
        self._action = action
        self._cash -= blind
        self._bet += blind
        logger.debug("%s %s of %d", self._name, action.verb, blind)

    def pay_cash(self, amount: int) -> None:
        _check_amount(amount, "Payment")
        if amount > self._cash:
            raise RuntimeError(
                f"{self._name} asked to pay {amount} but only has {self._cash}"
            )
        self._cash -= amount
        logger.debug("%s pays %d, %d left", self._name, amount, self._cash)

    def win(self, amount: int) -> None:
        _check_amount(amount, "Winnings")
        self._cash += amount
        logger.debug("%s wins %d", self._name, amount)

    # --- public view ---

    def public_clone(self) -> Player:
        """Copy safe to show opponents: same chips and flags, no hole cards."""
        clone = Player(self._name, self._cash)
        clone._has_cards = self._has_cards
        clone._bet = self._bet
        clone._action = self._action
        return clone

    def to_dict(self, include_cards: bool = False) -> dict:
        data = {
            "name": self._name,
            "cash": self._cash,
            "bet": self._bet,
            "action": self._action.value if self._action else None,
            "has_cards": self._has_cards,
            "all_in": self.is_all_in(),
        }
        if include_cards:
            data["cards"] = [str(c) for c in self._hand]
        return data

    # --- decisions ---

    def _require_strategy(self) -> DecisionStrategy:
        if self.strategy is None:
            raise NotImplementedError(f"{self._name} has no decision strategy")
        return self.strategy

    def act(
        self,
        min_bet: int,
        bet: int,
        allowed_actions: Set[Action],
        board: Hand | None = None,
    ) -> Action:
        """Ask the attached strategy for the next action."""
        return self._require_strategy().act(self, min_bet, bet, allowed_actions, board)

    def show_actions(self, allowed_actions: Set[Action]) -> None:
        self._require_strategy().show_actions(allowed_actions)

    def do_bet(self, min_bet: int) -> int:
        return self._require_strategy().choose_amount(self, Action.BET, min_bet)

    def do_raise(self, min_raise: int) -> int:
        return self._require_strategy().choose_amount(self, Action.RAISE, min_raise)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Player({self._name!r}, cash={self._cash}, bet={self._bet}, action={self._action})"
