"""The card container a player owns."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from holdem_player.game.card import Card
from holdem_player.game.rules import MAX_HAND_CARDS


class Hand:
    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = []
        self.add_cards(cards)

    def add_card(self, card: Card) -> None:
        self.add_cards([card])

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Append cards in order; nothing is added if any card is rejected."""
        new = list(cards)
        if any(c is None for c in new):
            raise ValueError("Cannot add a null card")
        if len(self._cards) + len(new) > MAX_HAND_CARDS:
            raise ValueError(
                f"Too many cards in hand: {len(self._cards)} + {len(new)} > {MAX_HAND_CARDS}"
            )
        self._cards.extend(new)

    def remove_all_cards(self) -> None:
        self._cards.clear()

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __str__(self) -> str:
        return " ".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self})"

    def pretty(self) -> str:
        return " ".join(c.pretty() for c in self._cards)
