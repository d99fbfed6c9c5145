"""Hands as card matrices, and their high-card and shape evaluation."""
from collections import namedtuple

import numpy as np

from bidlogic.bridge.calls import suits


ranks = ("2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A")
ACE = ranks.index("A")
KING = ranks.index("K")

# 4-3-2-1 count, indexed like ranks
hcp_weights = np.array([0] * 9 + [1, 2, 3, 4], dtype=np.int8)

HandEvaluation = namedtuple("HandEvaluation", ["hcp", "shape"])


class ParseError(ValueError):
    pass


class Hand:
    """Cards held by one seat: a 4x13 matrix, rows in suit order S, H, D, C."""
    def __init__(self, cards=None):
        self.cards = np.zeros((4, 13), dtype=np.int8)
        if cards is not None:
            self.cards[:] = cards

    @classmethod
    def parse(cls, data):
        """Parses PBN-style "AKQ2.KJ3.Q54.932" (spades first)."""
        holdings = data.strip().split(".")
        if len(holdings) != 4:
            raise ParseError(f"invalid hand {data!r}")
        hand = cls()
        for suit, holding in enumerate(holdings):
            for r in holding.upper().replace("10", "T"):
                if r not in ranks:
                    raise ParseError(f"invalid rank {r!r} in {data!r}")
                rank = ranks.index(r)
                if hand.cards[suit, rank]:
                    raise ParseError(f"duplicate card {suits[suit]}{r}")
                hand.cards[suit, rank] = 1
        return hand

    @classmethod
    def empty(cls):
        return cls()

    def num_cards(self):
        return int(self.cards.sum())

    def count_rank(self, rank):
        return int(self.cards[:, rank].sum())

    def __eq__(self, other):
        return isinstance(other, Hand) and (self.cards == other.cards).all()

    def __repr__(self):
        holdings = []
        for suit in range(4):
            holdings.append("".join(ranks[r] for r in reversed(range(13))
                                    if self.cards[suit, r]))
        return f"Hand({'.'.join(holdings)!r})"


def evaluate_hand(hand):
    hcp = int((hand.cards * hcp_weights).sum())
    shape = tuple(int(n) for n in hand.cards.sum(axis=1))
    return HandEvaluation(hcp, shape)


def count_aces(hand):
    return hand.count_rank(ACE)


def count_kings(hand):
    return hand.count_rank(KING)


def is_balanced_shape(shape):
    """4-3-3-3, 4-4-3-2 and 5-3-3-2 are balanced."""
    return tuple(sorted(shape, reverse=True)) in (
        (4, 3, 3, 3), (4, 4, 3, 2), (5, 3, 3, 2))
