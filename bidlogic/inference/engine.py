"""Incremental, partnership-asymmetric hand inference.

An engine sees the table from one observer seat. Calls by the observer and
partner are read with the own-partnership provider, calls by the opponents
with the opponent provider. Each seat keeps its raw contributions; merged
beliefs are recomputed on demand.
"""
from collections import namedtuple

from absl import logging

from bidlogic.bridge import calls
from bidlogic.inference.merge import merge_inferences
from bidlogic.inference.types import InferenceSnapshot


ProviderOutcome = namedtuple("ProviderOutcome", ["inference", "error"])


def call_provider(provider, entry, auction_before):
    """Runs a provider; a failure becomes an outcome, never an exception."""
    try:
        return ProviderOutcome(
            provider.infer_from_bid(entry, auction_before, entry.seat), None)
    except Exception as err:
        return ProviderOutcome(None, err)


class InferenceEngine:
    def __init__(self, config, observer_seat):
        self.config = config
        self.observer_seat = observer_seat
        self._raw = {seat: [] for seat in calls.seats}
        self._timeline = []

    def provider_for(self, seat):
        if calls.same_side(seat, self.observer_seat):
            return self.config.own_partnership
        return self.config.opponent_partnership

    def process_bid(self, entry, auction_before):
        provider = self.provider_for(entry.seat)
        outcome = call_provider(provider, entry, tuple(auction_before))
        if outcome.error is not None:
            logging.warning("provider %s failed on %s %s: %s", provider.id,
                            entry.seat, entry.call, outcome.error)
        if outcome.inference is not None:
            self._raw[entry.seat].append(outcome.inference)
        self._timeline.append(InferenceSnapshot(
            entry, outcome.inference, self.get_inferences()))
        return outcome

    def get_inferences(self):
        """Seat -> InferredHoldings, merged from every contribution so far."""
        return {seat: merge_inferences(seat, self._raw[seat])
                for seat in calls.seats}

    def get_timeline(self):
        return list(self._timeline)

    def reset(self):
        for contributions in self._raw.values():
            contributions.clear()
        self._timeline.clear()


def replay_auction(engine, auction):
    """Feeds every entry of an auction to the engine, in order."""
    for i, entry in enumerate(auction):
        engine.process_bid(entry, auction[:i])
    return engine.get_inferences()
