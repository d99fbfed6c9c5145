"""Immutable convention decision trees.

A tree is built once per convention and never mutated. Every node is owned
by exactly one parent: sharing a subtree between two branches breaks
flattening and sibling enumeration. Nodes compare by identity.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional

from bidlogic.bridge.calls import parse_call
from bidlogic.conventions.conditions import Condition


class TreeInvariantError(ValueError):
    pass


@dataclass(frozen=True, eq=False)
class Decision:
    name: str
    condition: Condition
    yes: Any
    no: Any


@dataclass(frozen=True, eq=False)
class Bid:
    name: str
    call: Callable  # BiddingContext -> Call
    meaning: Optional[str] = None


@dataclass(frozen=True, eq=False)
class Fallback:
    reason: Optional[str] = None


def decision(name, condition, yes, no):
    return Decision(name, condition, yes, no)


def bid(name, meaning, call):
    """A leaf. `call` is a Call, a call token, or a function of the context."""
    if not callable(call):
        fixed = parse_call(call)
        call = lambda ctx: fixed
    return Bid(name, call, meaning)


def fallback(reason=None):
    return Fallback(reason)


def check_node(node):
    if not isinstance(node, (Decision, Bid, Fallback)):
        raise TreeInvariantError(f"unrecognized rule node {node!r}")
    return node


def iter_nodes(tree):
    """Pre-order walk, yes-branch first."""
    stack = [tree]
    while stack:
        node = check_node(stack.pop())
        yield node
        if isinstance(node, Decision):
            stack.append(node.no)
            stack.append(node.yes)


def bids(tree):
    return [n for n in iter_nodes(tree) if isinstance(n, Bid)]


def check_tree_shape(tree):
    """Raises TreeInvariantError if any node is reachable twice."""
    seen = set()
    for node in iter_nodes(tree):
        if id(node) in seen:
            raise TreeInvariantError(f"node {node!r} appears in two branches")
        seen.add(id(node))
