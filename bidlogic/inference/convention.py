"""Inference from one convention's rule tree.

Positive inference comes from the flattened rule that explains the observed
call: the inference descriptors on its hand conditions. Negative inference
comes from evaluating the tree itself against the auction: an auction
decision that was rejected, inverted. Rejected hand decisions are ignored,
because the tree only ever sees an empty hand here.
"""
from absl import logging

from bidlogic.bridge import calls
from bidlogic.conventions.conditions import is_auction_condition
from bidlogic.conventions.context import BiddingContext, auction_context
from bidlogic.conventions.evaluator import evaluate_tree
from bidlogic.conventions.flatten import flatten_tree
from bidlogic.inference.condition_mapper import (
    condition_to_hand_inference, extract_inference, invert_inference,
    resolve_disjunction)
from bidlogic.inference.merge import merge_hand_inferences
from bidlogic.inference.types import InferenceProvider


# Call functions that need a real hand or auction fail on this; such rules
# are matched on their auction conditions alone.
probe_context = BiddingContext(hand=None, auction=None, seat=None,
                               evaluation=None)


def probe_call(rule):
    """The call a rule makes regardless of context, or None if it can't tell."""
    try:
        return rule.call(probe_context)
    except Exception:
        return None


class ConventionInferenceProvider(InferenceProvider):
    """
    Args:
      convention_id: id to look up.
      lookup: a Registry, or any callable id -> Convention or None.
    """
    def __init__(self, convention_id, lookup):
        self.convention_id = convention_id
        self.id = f"convention:{convention_id}"
        self.name = f"Convention: {convention_id}"
        self._lookup = lookup
        self._tree = None
        self._rules = None

    @property
    def cached_rules(self):
        return self._rules

    def _load(self):
        if self._rules is not None:
            return self._tree, self._rules
        try:
            convention = self._lookup(self.convention_id)
        except KeyError:
            convention = None
        tree = getattr(convention, "tree", None)
        if tree is None:
            return None, None
        self._tree, self._rules = tree, flatten_tree(tree)
        return self._tree, self._rules

    def infer_from_bid(self, entry, auction_before, seat):
        tree, rules = self._load()
        if tree is None:
            logging.debug("%s: convention not available", self.id)
            return None
        ctx = auction_context(auction_before, seat)

        inferences = []
        source = self.id
        rule = self.match_rule(rules, entry.call, ctx)
        if rule is not None:
            source = rule.name
            for cond in rule.hand_conditions:
                ci = extract_inference(cond)
                if ci is None:
                    continue
                hi = condition_to_hand_inference(ci, seat, source)
                if hi is not None:
                    inferences.append(hi)
            logging.debug("%s: %s matched %s", self.id, entry.call, rule.name)

        cumulative = (merge_hand_inferences(inferences, seat, source)
                      if inferences else None)
        for rejected in evaluate_tree(tree, ctx).rejected_decisions:
            condition = rejected.node.condition
            if not is_auction_condition(condition):
                continue
            ci = extract_inference(condition)
            if ci is None:
                continue
            inverted = invert_inference(ci)
            if isinstance(inverted, list):
                inverted = resolve_disjunction(inverted, cumulative)
            if inverted is None:
                logging.debug("%s: nothing inferred from rejected %s",
                              self.id, rejected.node.name)
                continue
            hi = condition_to_hand_inference(inverted, seat, source)
            if hi is None:
                continue
            logging.debug("%s: rejected %s implies %s", self.id,
                          rejected.node.name, inverted.kind)
            inferences.append(hi)
            cumulative = merge_hand_inferences(inferences, seat, source)

        return cumulative

    @staticmethod
    def match_rule(rules, call, ctx):
        """First rule making `call` whose auction conditions hold in ctx."""
        for rule in rules:
            made = probe_call(rule)
            if made is not None and not calls.calls_match(made, call):
                continue
            if all(c.test(ctx) for c in rule.auction_conditions):
                return rule
        return None
