"""Condition model: named predicates over a BiddingContext, and combinators.

A condition tests a context, describes what it found in that context, and
may carry:
  * a category, "auction" or "hand", telling where in a convention's logic
    it belongs (flattening and sibling search split on it);
  * an inference descriptor, a ConditionInference saying what passing the
    condition reveals about the hand.

A leaf factory that omits the inference descriptor simply gives the
inference engine nothing to extract from that condition.
"""
from collections import namedtuple
from dataclasses import dataclass, field


AUCTION = "auction"
HAND = "hand"

MAX_OR_BRANCHES = 4

NEGATION_PREFIX = "not-"

# ConditionInference kinds
HCP_MIN = "hcp-min"
HCP_MAX = "hcp-max"
HCP_RANGE = "hcp-range"
SUIT_MIN = "suit-min"
SUIT_MAX = "suit-max"
BALANCED = "balanced"
NOT_BALANCED = "not-balanced"
ACE_COUNT = "ace-count"
KING_COUNT = "king-count"
TWO_SUITED = "two-suited"


class ConditionError(ValueError):
    pass


@dataclass(frozen=True)
class ConditionInference:
    kind: str
    params: dict = field(default_factory=dict)

    @classmethod
    def hcp_min(cls, min_):
        return cls(HCP_MIN, {"min": min_})

    @classmethod
    def hcp_max(cls, max_):
        return cls(HCP_MAX, {"max": max_})

    @classmethod
    def hcp_range(cls, min_, max_):
        return cls(HCP_RANGE, {"min": min_, "max": max_})

    @classmethod
    def suit_min(cls, suit_index, min_):
        return cls(SUIT_MIN, {"suit_index": suit_index, "min": min_})

    @classmethod
    def suit_max(cls, suit_index, max_):
        return cls(SUIT_MAX, {"suit_index": suit_index, "max": max_})

    @classmethod
    def balanced(cls):
        return cls(BALANCED)

    @classmethod
    def not_balanced(cls):
        return cls(NOT_BALANCED)

    @classmethod
    def ace_count(cls, count):
        return cls(ACE_COUNT, {"count": count})

    @classmethod
    def king_count(cls, count):
        return cls(KING_COUNT, {"count": count})

    @classmethod
    def two_suited(cls, min_long, min_short):
        return cls(TWO_SUITED, {"min_long": min_long, "min_short": min_short})


ConditionResult = namedtuple("ConditionResult",
                             ["condition", "passed", "description"])

ConditionBranch = namedtuple("ConditionBranch", ["results", "passed"])


class Condition:
    def __init__(self, name, label, test, describe, category=None,
                 inference=None):
        self.name = name
        self.label = label
        self.category = category
        self.inference = inference
        self._test = test
        self._describe = describe

    def test(self, ctx):
        return bool(self._test(ctx))

    def describe(self, ctx):
        return self._describe(ctx)

    def evaluate_children(self, ctx):
        """Per-branch sub-results for compound conditions, None for leaves."""
        return None

    def result(self, ctx):
        return ConditionResult(self, self.test(ctx), self.describe(ctx))

    def __repr__(self):
        return f"Condition(name={self.name!r}, category={self.category!r})"


def not_(cond):
    """Inverts a condition. The inverse carries no inference descriptor."""
    return Condition(
        name=f"{NEGATION_PREFIX}{cond.name}",
        label=f"Not: {cond.label}",
        test=lambda ctx: not cond.test(ctx),
        describe=lambda ctx: f"Not: {cond.describe(ctx)}",
        category=cond.category)


class _AllOf(Condition):
    def __init__(self, conds):
        super().__init__(
            name="and",
            label="; ".join(c.label for c in conds),
            test=self._all,
            describe=lambda ctx: "; ".join(c.describe(ctx) for c in conds))
        self.children = tuple(conds)

    def _all(self, ctx):
        # every child runs so that branch data stays complete
        results = [c.test(ctx) for c in self.children]
        return all(results)

    def evaluate_children(self, ctx):
        results = [c.result(ctx) for c in self.children]
        return [ConditionBranch(results, all(r.passed for r in results))]


class _AnyOf(Condition):
    def __init__(self, conds):
        super().__init__(
            name="or",
            label=" or ".join(c.label for c in conds),
            test=self._any,
            describe=self._describe_any)
        self.children = tuple(conds)

    def _any(self, ctx):
        results = [c.test(ctx) for c in self.children]
        return any(results)

    def _describe_any(self, ctx):
        for c in self.children:
            if c.test(ctx):
                return c.describe(ctx)
        return " or ".join(c.describe(ctx) for c in self.children)

    def evaluate_children(self, ctx):
        branches = []
        for c in self.children:
            sub = c.evaluate_children(ctx)
            if sub is not None:
                results = [r for b in sub for r in b.results]
            else:
                results = [c.result(ctx)]
            branches.append(ConditionBranch(results, c.test(ctx)))
        return branches


def and_(*conds):
    """All conditions must pass. Never short-circuits."""
    if not conds:
        raise ConditionError("and_() needs at least one condition")
    return _AllOf(conds)


def or_(*conds):
    """At least one condition must pass. Every branch is always evaluated."""
    if not conds:
        raise ConditionError("or_() needs at least one condition")
    if len(conds) > MAX_OR_BRANCHES:
        raise ConditionError(
            f"or_() supports at most {MAX_OR_BRANCHES} branches, got {len(conds)}")
    return _AnyOf(conds)


def is_auction_condition(cond):
    """Uncategorized conditions count as hand conditions."""
    return cond.category == AUCTION
