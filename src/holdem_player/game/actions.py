"""Action types a player can take at the table."""

from __future__ import annotations

import enum


class Action(enum.Enum):
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    ALL_IN = "all_in"
    SMALL_BLIND = "small_blind"
    BIG_BLIND = "big_blind"
    CONTINUE = "continue"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def verb(self) -> str:
        return _VERBS[self]

    @property
    def is_blind(self) -> bool:
        return self in (Action.SMALL_BLIND, Action.BIG_BLIND)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, s: str) -> Action:
        """Parse 'all_in', 'ALL_IN' or 'all-in' into an Action."""
        key = s.strip().lower().replace("-", "_")
        for action in cls:
            if action.value == key:
                return action
        raise ValueError(f"Unknown action: {s!r}")


_LABELS = {
    Action.FOLD: "Fold",
    Action.CHECK: "Check",
    Action.CALL: "Call",
    Action.BET: "Bet",
    Action.RAISE: "Raise",
    Action.ALL_IN: "All-in",
    Action.SMALL_BLIND: "Small blind",
    Action.BIG_BLIND: "Big blind",
    Action.CONTINUE: "Continue",
}

_VERBS = {
    Action.FOLD: "folds",
    Action.CHECK: "checks",
    Action.CALL: "calls",
    Action.BET: "bets",
    Action.RAISE: "raises",
    Action.ALL_IN: "goes all-in",
    Action.SMALL_BLIND: "posts the small blind",
    Action.BIG_BLIND: "posts the big blind",
    Action.CONTINUE: "continues",
}
