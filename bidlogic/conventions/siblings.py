"""Alternative bids reachable from the same auction position.

The hand subtree is what is left of a tree once every auction decision has
been followed the way the context evaluates it. Its other Bid leaves are the
siblings of the matched bid, each with the conditions the hand would have
had to satisfy differently to reach it.
"""
from collections import namedtuple

from absl import logging

from bidlogic.conventions.conditions import is_auction_condition
from bidlogic.conventions.rule_tree import (
    Bid, Decision, Fallback, TreeInvariantError)


SiblingConditionDetail = namedtuple("SiblingConditionDetail",
                                    ["name", "description"])

SiblingBid = namedtuple("SiblingBid",
                        ["bid_name", "meaning", "call", "failed_conditions"])


def hand_subtree_root(tree, ctx):
    node = tree
    while isinstance(node, Decision) and is_auction_condition(node.condition):
        node = node.yes if node.condition.test(ctx) else node.no
    return node


def _sibling(node, ctx, path):
    try:
        call = node.call(ctx)
    except Exception as err:
        logging.warning("sibling bid %s call() raised: %s", node.name, err)
        return None
    failed = [SiblingConditionDetail(cond.name, cond.describe(ctx))
              for cond, required in path if cond.test(ctx) != required]
    return SiblingBid(node.name, node.meaning, call, failed)


def find_sibling_bids(tree, matched, ctx):
    """Returns SiblingBid records in depth-first order, yes-branch first.

    Raises TreeInvariantError if an auction condition appears below the
    first hand condition.
    """
    root = hand_subtree_root(tree, ctx)
    if not isinstance(root, Decision):
        return []
    results = []
    stack = [(root, ())]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Fallback):
            continue
        if isinstance(node, Bid):
            if node is matched:
                continue
            sibling = _sibling(node, ctx, path)
            if sibling is not None:
                results.append(sibling)
            continue
        if not isinstance(node, Decision):
            raise TreeInvariantError(f"unrecognized rule node {node!r}")
        if is_auction_condition(node.condition):
            raise TreeInvariantError(
                f"auction condition {node.condition.name!r} found inside "
                f"hand subtree at {node.name!r}")
        stack.append((node.no, path + ((node.condition, False),)))
        stack.append((node.yes, path + ((node.condition, True),)))
    return results
