"""Walks a rule tree against one bidding context."""
from collections import namedtuple

from absl import logging

from bidlogic.conventions.conditions import ConditionResult
from bidlogic.conventions.rule_tree import (
    Bid, Decision, Fallback, TreeInvariantError)


PathEntry = namedtuple("PathEntry", ["node", "passed", "description"])

# matched is a Bid or None; path holds passing decisions, rejected_decisions
# failing ones, visited both in traversal order.
TreeEvalResult = namedtuple("TreeEvalResult",
                            ["matched", "path", "rejected_decisions", "visited"])

RuleResult = namedtuple("RuleResult", ["call", "rule", "explanation", "meaning",
                                       "condition_results"])


def evaluate_tree(tree, ctx):
    """Returns a TreeEvalResult. Condition and call errors propagate."""
    path, rejected, visited = [], [], []
    node = tree
    while True:
        if isinstance(node, Bid):
            logging.debug("tree matched %s", node.name)
            return TreeEvalResult(node, path, rejected, visited)
        if isinstance(node, Fallback):
            logging.debug("tree fell back: %s", node.reason)
            return TreeEvalResult(None, path, rejected, visited)
        if not isinstance(node, Decision):
            raise TreeInvariantError(f"unrecognized rule node {node!r}")
        passed = node.condition.test(ctx)
        entry = PathEntry(node, passed, node.condition.describe(ctx))
        visited.append(entry)
        logging.debug("decision %s: %s", node.name, "yes" if passed else "no")
        if passed:
            path.append(entry)
            node = node.yes
        else:
            rejected.append(entry)
            node = node.no


def evaluate_tree_fast(tree, ctx):
    """Matched Bid or None, skipping describe() and history."""
    node = tree
    while True:
        if isinstance(node, Bid):
            return node
        if isinstance(node, Fallback):
            return None
        if not isinstance(node, Decision):
            raise TreeInvariantError(f"unrecognized rule node {node!r}")
        node = node.yes if node.condition.test(ctx) else node.no


def build_explanation(condition_results):
    """Joins ConditionResults as "✓ desc; ✗ desc", in order."""
    return "; ".join(
        f"{'✓' if r.passed else '✗'} {r.description}" for r in condition_results)


def tree_result_to_rule_result(result, ctx):
    if result.matched is None:
        return None
    condition_results = [
        ConditionResult(e.node.condition, e.passed, e.description)
        for e in result.visited]
    return RuleResult(
        call=result.matched.call(ctx),
        rule=result.matched.name,
        explanation=build_explanation(condition_results),
        meaning=result.matched.meaning,
        condition_results=condition_results)
