"""Card values handed to players, and parsing them from text."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_RANK_CHARS = "23456789TJQKA"
_SUIT_CHARS = "cdhs"
_SUIT_SYMBOLS = "♣♦♥♠"


class Suit(enum.IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def char(self) -> str:
        return _SUIT_CHARS[self]

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


class Rank(enum.IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        return _RANK_CHARS[self - 2]


@dataclass(frozen=True, slots=True)
class Card:
    """Opaque card value; players only store and hand these back."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Parse 'As', 'kh' or 'TD'. Rank and suit are case-insensitive."""
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s!r}")
        r, su = _RANK_CHARS.find(s[0].upper()), _SUIT_CHARS.find(s[1].lower())
        if r < 0:
            raise ValueError(f"Invalid rank char: {s[0]!r}")
        if su < 0:
            raise ValueError(f"Invalid suit char: {s[1]!r}")
        return cls(Rank(r + 2), Suit(su))

    def __str__(self) -> str:
        return self.rank.char + self.suit.char

    def __repr__(self) -> str:
        return f"Card({self})"

    def pretty(self) -> str:
        return self.rank.char + self.suit.symbol


def parse_cards(text: str) -> list[Card]:
    """Parse whitespace or comma separated cards, e.g. 'As Kd' or 'As,Kd'."""
    return [Card.from_str(tok) for tok in text.replace(",", " ").split()]
