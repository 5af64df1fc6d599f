"""Table configuration: blinds and card counts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BlindStructure:
    small_blind: int
    big_blind: int

    def __post_init__(self) -> None:
        if min(self.small_blind, self.big_blind) < 0:
            raise ValueError(f"Blinds must be non-negative: {self}")
        if self.big_blind < self.small_blind:
            raise ValueError(
                f"Big blind {self.big_blind} is smaller than small blind {self.small_blind}"
            )


DEFAULT_BLINDS = BlindStructure(small_blind=10, big_blind=20)
DEFAULT_STARTING_CASH = 1000

CARDS_PER_PLAYER = 2
# Hole cards plus a full board.
MAX_HAND_CARDS = 7
