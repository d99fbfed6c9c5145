"""Folds a seat's partial hand constraints into one consistent belief.

Bounds tighten: the largest minimum and the smallest maximum win. On a
contradiction the result is clamped rather than left inconsistent:
  * HCP min above max: both bounds come from the latest contribution that
    bounds HCP at all, its missing side taking the default;
  * a suit's min above its max: min drops to max.
The balanced flag is last-writer-wins.
"""
import numpy as np

from bidlogic.bridge.calls import suits
from bidlogic.inference.types import (
    MAX_HCP, MAX_LENGTH, MIN_HCP, MIN_LENGTH, HandInference, InferredHoldings,
    Range, SuitInference)


# Bounds matrices have one column for HCP, then one per suit in `suits` order.
_FLOOR = np.array([MIN_HCP] + [MIN_LENGTH] * len(suits), dtype=np.int64)
_CEILING = np.array([MAX_HCP] + [MAX_LENGTH] * len(suits), dtype=np.int64)


def _last_hcp_bounds(inferences):
    for inf in reversed(inferences):
        if inf.min_hcp is not None or inf.max_hcp is not None:
            lo = inf.min_hcp if inf.min_hcp is not None else MIN_HCP
            hi = inf.max_hcp if inf.max_hcp is not None else MAX_HCP
            return lo, hi
    return MIN_HCP, MAX_HCP


def _bound_pairs(inf):
    yield inf.min_hcp, inf.max_hcp
    for suit in suits:
        si = inf.suits.get(suit, SuitInference())
        yield si.min_length, si.max_length


def _fold(inferences):
    """Returns (lows, highs, has_low, has_high, balanced).

    lows and highs are the folded bound vectors, with absent bounds at the
    full-range defaults; the has_ masks say which bounds any contribution set.
    Contradictions are already clamped.
    """
    rows = len(inferences) + 1
    lows = np.tile(_FLOOR, (rows, 1))
    highs = np.tile(_CEILING, (rows, 1))
    set_low = np.zeros(lows.shape, dtype=bool)
    set_high = np.zeros(highs.shape, dtype=bool)
    balanced = None
    for row, inf in enumerate(inferences, start=1):
        for col, (lo, hi) in enumerate(_bound_pairs(inf)):
            if lo is not None:
                lows[row, col], set_low[row, col] = lo, True
            if hi is not None:
                highs[row, col], set_high[row, col] = hi, True
        if inf.is_balanced is not None:
            balanced = inf.is_balanced

    low, high = lows.max(axis=0), highs.min(axis=0)
    if low[0] > high[0]:
        low[0], high[0] = _last_hcp_bounds(inferences)
    low[1:] = np.minimum(low[1:], high[1:])
    return low, high, set_low.any(axis=0), set_high.any(axis=0), balanced


def merge_inferences(seat, inferences):
    """InferredHoldings for one seat. Never raises; [] gives full ranges."""
    inferences = tuple(inferences)
    low, high, _, _, balanced = _fold(inferences)
    suit_lengths = {suit: Range(int(low[i]), int(high[i]))
                    for i, suit in enumerate(suits, start=1)}
    return InferredHoldings(
        seat=seat,
        hcp_range=Range(int(low[0]), int(high[0])),
        suit_lengths=suit_lengths,
        is_balanced=balanced,
        inferences=inferences)


def merge_hand_inferences(inferences, seat, source):
    """Combines several partial constraints from one call into one.

    Same rules as merge_inferences(), but over present bounds only: a bound
    no contribution sets stays None.
    """
    low, high, has_low, has_high, balanced = _fold(tuple(inferences))

    def bound(values, present, col):
        return int(values[col]) if present[col] else None

    suit_map = {}
    for i, suit in enumerate(suits, start=1):
        if has_low[i] or has_high[i]:
            suit_map[suit] = SuitInference(bound(low, has_low, i),
                                           bound(high, has_high, i))
    return HandInference(seat, min_hcp=bound(low, has_low, 0),
                         max_hcp=bound(high, has_high, 0),
                         is_balanced=balanced, suits=suit_map, source=source)
