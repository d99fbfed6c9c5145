"""Maps condition inference descriptors to hand constraints, and inverts them.

An inverted descriptor describes what a *failed* condition reveals. Inverting
a range gives a disjunction (below it or above it), returned as a list; a
caller picks one branch with resolve_disjunction().
"""
from absl import logging

from bidlogic.conventions import conditions as cond
from bidlogic.conventions.conditions import ConditionInference
from bidlogic.inference.types import (
    MAX_HCP, MAX_LENGTH, MIN_HCP, MIN_LENGTH, HandInference, SuitInference,
    suit_for_index)


def extract_inference(condition):
    return getattr(condition, "inference", None)


def condition_to_hand_inference(ci, seat, source):
    """A partial HandInference, or None for kinds that bound nothing."""
    kind, p = ci.kind, ci.params
    if kind == cond.HCP_MIN:
        return HandInference(seat, min_hcp=p["min"], source=source)
    if kind == cond.HCP_MAX:
        return HandInference(seat, max_hcp=p["max"], source=source)
    if kind == cond.HCP_RANGE:
        return HandInference(seat, min_hcp=p["min"], max_hcp=p["max"],
                             source=source)
    if kind in (cond.SUIT_MIN, cond.SUIT_MAX):
        suit = suit_for_index(p["suit_index"])
        if suit is None:
            return None
        if kind == cond.SUIT_MIN:
            si = SuitInference(min_length=p["min"])
        else:
            si = SuitInference(max_length=p["max"])
        return HandInference(seat, suits={suit: si}, source=source)
    if kind == cond.BALANCED:
        return HandInference(seat, is_balanced=True, source=source)
    if kind == cond.NOT_BALANCED:
        return HandInference(seat, is_balanced=False, source=source)
    # ace-count, king-count, two-suited: no bound on HCP or a known suit
    return None


def _in_range(value, lo, hi):
    return lo <= value <= hi


def _invert_range(make_below, make_above, below, above, lo, hi):
    options = []
    if _in_range(below, lo, hi):
        options.append(make_below(below))
    if _in_range(above, lo, hi):
        options.append(make_above(above))
    if not options:
        return None
    if len(options) == 1:
        return options[0]
    return options


def invert_inference(ci):
    """What failing the condition reveals.

    Returns a ConditionInference, a list of alternatives (any one holds), or
    None when there is no representable inverse.
    """
    kind, p = ci.kind, ci.params
    if kind == cond.HCP_MIN:
        k = p["min"] - 1
        return ConditionInference.hcp_max(k) if k >= MIN_HCP else None
    if kind == cond.HCP_MAX:
        k = p["max"] + 1
        return ConditionInference.hcp_min(k) if k <= MAX_HCP else None
    if kind == cond.HCP_RANGE:
        return _invert_range(ConditionInference.hcp_max,
                             ConditionInference.hcp_min,
                             p["min"] - 1, p["max"] + 1, MIN_HCP, MAX_HCP)
    if kind == cond.SUIT_MIN:
        k = p["min"] - 1
        if k < MIN_LENGTH:
            return None
        return ConditionInference.suit_max(p["suit_index"], k)
    if kind == cond.SUIT_MAX:
        k = p["max"] + 1
        if k > MAX_LENGTH:
            return None
        return ConditionInference.suit_min(p["suit_index"], k)
    if kind == cond.BALANCED:
        return ConditionInference.not_balanced()
    if kind == cond.NOT_BALANCED:
        return ConditionInference.balanced()
    return None


def contradicts(ci, cumulative):
    """True if ci cannot hold together with the HandInference cumulative."""
    if cumulative is None:
        return False
    kind, p = ci.kind, ci.params
    lo, hi = cumulative.min_hcp, cumulative.max_hcp
    if kind == cond.HCP_MIN:
        return hi is not None and p["min"] > hi
    if kind == cond.HCP_MAX:
        return lo is not None and p["max"] < lo
    if kind == cond.HCP_RANGE:
        return ((hi is not None and p["min"] > hi)
                or (lo is not None and p["max"] < lo))
    if kind in (cond.SUIT_MIN, cond.SUIT_MAX):
        si = cumulative.suits.get(suit_for_index(p["suit_index"]))
        if si is None:
            return False
        if kind == cond.SUIT_MIN:
            return si.max_length is not None and p["min"] > si.max_length
        return si.min_length is not None and p["max"] < si.min_length
    if kind == cond.BALANCED:
        return cumulative.is_balanced is False
    if kind == cond.NOT_BALANCED:
        return cumulative.is_balanced is True
    return False


def resolve_disjunction(options, cumulative):
    """First option consistent with cumulative, or None if every one conflicts."""
    for ci in options:
        if not contradicts(ci, cumulative):
            return ci
    logging.debug("no disjunct of %s fits %s", options, cumulative)
    return None
