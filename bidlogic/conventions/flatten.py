"""Flattens a rule tree into independent (auction, hand, call) rules."""
from collections import namedtuple

from absl import logging

from bidlogic.bridge import calls
from bidlogic.conventions.conditions import is_auction_condition, not_
from bidlogic.conventions.evaluator import RuleResult, build_explanation
from bidlogic.conventions.rule_tree import (
    Bid, Decision, Fallback, TreeInvariantError)


class FlatRule(namedtuple("FlatRule", ["name", "auction_conditions",
                                       "hand_conditions", "call", "meaning"])):
    """One root-to-Bid path. `call` is the Bid's call function."""
    __slots__ = ()

    @property
    def conditions(self):
        return self.auction_conditions + self.hand_conditions

    def matches(self, ctx):
        return all([c.test(ctx) for c in self.conditions])


# One row per rule from evaluate_all_rules. call is None when the rule's
# conditions failed.
RuleDebug = namedtuple("RuleDebug", ["rule", "matched", "is_legal", "call",
                                     "condition_results"])


def flatten_tree(tree):
    """One FlatRule per root-to-Bid path, depth first, yes-branch first.

    Fallback leaves produce nothing. The tree must not share subtrees.
    Negated decisions carry no inverted inference.
    """
    rules = []
    stack = [(tree, ())]
    while stack:
        node, conds = stack.pop()
        if isinstance(node, Fallback):
            continue
        if isinstance(node, Bid):
            auction = tuple(c for c in conds if is_auction_condition(c))
            hand = tuple(c for c in conds if not is_auction_condition(c))
            rules.append(FlatRule(node.name, auction, hand, node.call,
                                  node.meaning))
            continue
        if not isinstance(node, Decision):
            raise TreeInvariantError(f"unrecognized rule node {node!r}")
        stack.append((node.no, conds + (not_(node.condition),)))
        stack.append((node.yes, conds + (node.condition,)))
    logging.debug("flattened tree into %d rules", len(rules))
    return rules


def _legality(is_legal):
    return calls.is_legal_call if is_legal is None else is_legal


def evaluate_rules(rules, ctx, is_legal=None):
    """RuleResult for the first matching rule whose call is legal, else None.

    Args:
      rules: FlatRules in priority order.
      ctx: BiddingContext.
      is_legal: callable (auction, call, seat) -> bool. Defaults to
        calls.is_legal_call.
    """
    is_legal = _legality(is_legal)
    for rule in rules:
        if not rule.matches(ctx):
            continue
        call = rule.call(ctx)
        if call is None or not is_legal(ctx.auction, call, ctx.seat):
            logging.debug("rule %s matched but %s is not legal", rule.name, call)
            continue
        results = [c.result(ctx) for c in rule.conditions]
        return RuleResult(call=call, rule=rule.name,
                          explanation=build_explanation(results),
                          meaning=rule.meaning, condition_results=results)
    return None


def evaluate_all_rules(rules, ctx, is_legal=None):
    """A RuleDebug for every rule, matched or not, in rule order."""
    is_legal = _legality(is_legal)
    out = []
    for rule in rules:
        results = [c.result(ctx) for c in rule.conditions]
        matched = all(r.passed for r in results)
        call = rule.call(ctx) if matched else None
        legal = call is not None and is_legal(ctx.auction, call, ctx.seat)
        out.append(RuleDebug(rule.name, matched, legal, call, results))
    return out
