"""Conditions on the evaluating seat's own cards.

Factories attach a ConditionInference wherever what the condition proves
fits a bound; the rest (any-of-suits, any-of-counts, void checks) carry
none.
"""
from bidlogic.bridge.hand import count_aces, count_kings, is_balanced_shape
from bidlogic.conventions.conditions import (
    HAND, Condition, ConditionInference, and_, or_)


suit_names = ("spades", "hearts", "diamonds", "clubs")

SPADES, HEARTS, DIAMONDS, CLUBS = range(4)


def _shape_text(shape):
    return "-".join(str(n) for n in shape)


def hcp_min(min_):
    def describe(ctx):
        hcp = ctx.evaluation.hcp
        if hcp >= min_:
            return f"{hcp} HCP ({min_}+ required)"
        return f"Only {hcp} HCP (need {min_}+)"

    return Condition("hcp-min", f"{min_}+ HCP",
                     lambda ctx: ctx.evaluation.hcp >= min_, describe,
                     category=HAND,
                     inference=ConditionInference.hcp_min(min_))


def hcp_max(max_):
    def describe(ctx):
        hcp = ctx.evaluation.hcp
        if hcp <= max_:
            return f"{hcp} HCP ({max_} max)"
        return f"{hcp} HCP (exceeds {max_} max)"

    return Condition("hcp-max", f"{max_} max HCP",
                     lambda ctx: ctx.evaluation.hcp <= max_, describe,
                     category=HAND,
                     inference=ConditionInference.hcp_max(max_))


def hcp_range(min_, max_):
    def test(ctx):
        return min_ <= ctx.evaluation.hcp <= max_

    def describe(ctx):
        hcp = ctx.evaluation.hcp
        if test(ctx):
            return f"{hcp} HCP (in {min_}-{max_} range)"
        return f"{hcp} HCP (outside {min_}-{max_} range)"

    return Condition("hcp-range", f"{min_}-{max_} HCP", test, describe,
                     category=HAND,
                     inference=ConditionInference.hcp_range(min_, max_))


def suit_min(suit_index, suit_name, min_):
    """At least `min_` cards in one suit. suit_index follows hand row order."""
    def describe(ctx):
        n = ctx.evaluation.shape[suit_index]
        if n >= min_:
            return f"{n} {suit_name} ({min_}+ required)"
        return f"Only {n} {suit_name} (need {min_}+)"

    return Condition(f"{suit_name}-min", f"{min_}+ {suit_name}",
                     lambda ctx: ctx.evaluation.shape[suit_index] >= min_,
                     describe, category=HAND,
                     inference=ConditionInference.suit_min(suit_index, min_))


def suit_below(suit_index, suit_name, threshold):
    """Strictly fewer than `threshold` cards in one suit."""
    def describe(ctx):
        n = ctx.evaluation.shape[suit_index]
        if n < threshold:
            return f"{n} {suit_name} (fewer than {threshold})"
        return f"{n} {suit_name} (need fewer than {threshold})"

    return Condition(f"{suit_name}-below", f"Fewer than {threshold} {suit_name}",
                     lambda ctx: ctx.evaluation.shape[suit_index] < threshold,
                     describe, category=HAND,
                     inference=ConditionInference.suit_max(suit_index,
                                                           threshold - 1))


def any_suit_min(suit_indices, min_):
    names = "/".join(suit_names[i] for i in suit_indices)

    def found(ctx):
        for i in suit_indices:
            if ctx.evaluation.shape[i] >= min_:
                return i
        return None

    def describe(ctx):
        i = found(ctx)
        if i is not None:
            return f"{ctx.evaluation.shape[i]} {suit_names[i]} ({min_}+ in {names})"
        counts = ", ".join(f"{ctx.evaluation.shape[i]} {suit_names[i]}"
                           for i in suit_indices)
        return f"Only {counts} (need {min_}+ in {names})"

    return Condition(f"any-{names}-min", f"{min_}+ in {names}",
                     lambda ctx: found(ctx) is not None, describe,
                     category=HAND)


def _count_condition(name, what, counter, count, inference):
    def describe(ctx):
        n = counter(ctx.hand)
        if n == count:
            return f"{n} {what}"
        return f"{n} {what} (need exactly {count})"

    return Condition(name, f"Exactly {count} {what}",
                     lambda ctx: counter(ctx.hand) == count, describe,
                     category=HAND, inference=inference)


def _count_any_condition(name, what, counter, counts):
    options = "/".join(str(c) for c in counts)

    def describe(ctx):
        n = counter(ctx.hand)
        if n in counts:
            return f"{n} {what}"
        return f"{n} {what} (need {options})"

    return Condition(name, f"{options} {what}",
                     lambda ctx: counter(ctx.hand) in counts, describe,
                     category=HAND)


def ace_count(count):
    return _count_condition("ace-count", "aces", count_aces, count,
                            ConditionInference.ace_count(count))


def ace_count_any(counts):
    return _count_any_condition("ace-count-any", "aces", count_aces,
                                tuple(counts))


def king_count(count):
    return _count_condition("king-count", "kings", count_kings, count,
                            ConditionInference.king_count(count))


def king_count_any(counts):
    return _count_any_condition("king-count-any", "kings", count_kings,
                                tuple(counts))


def no_void():
    def test(ctx):
        return min(ctx.evaluation.shape) > 0

    def describe(ctx):
        shape = ctx.evaluation.shape
        if test(ctx):
            return f"No void ({_shape_text(shape)})"
        return f"Has a void ({_shape_text(shape)})"

    return Condition("no-void", "No void", test, describe, category=HAND)


def is_balanced():
    """4-3-3-3, 4-4-3-2 or 5-3-3-2."""
    def describe(ctx):
        shape = ctx.evaluation.shape
        text = _shape_text(shape)
        if is_balanced_shape(shape):
            return f"Balanced hand ({text})"
        if 0 in shape:
            return f"Unbalanced, has void ({text})"
        if 1 in shape:
            return f"Unbalanced, has singleton ({text})"
        return f"Unbalanced, {list(shape).count(2)} doubletons ({text})"

    return Condition("balanced", "Balanced hand",
                     lambda ctx: is_balanced_shape(ctx.evaluation.shape),
                     describe, category=HAND,
                     inference=ConditionInference.balanced())


def has_shortage():
    """A singleton or void somewhere."""
    def describe(ctx):
        shape = ctx.evaluation.shape
        shorts = [f"{n} {suit_names[i]}" for i, n in enumerate(shape) if n <= 1]
        if shorts:
            return f"Has shortage: {', '.join(shorts)} ({_shape_text(shape)})"
        return f"No shortage ({_shape_text(shape)})"

    return Condition("has-shortage", "Has singleton or void",
                     lambda ctx: min(ctx.evaluation.shape) <= 1, describe,
                     category=HAND,
                     inference=ConditionInference.not_balanced())


def no_five_card_major():
    def describe(ctx):
        spades, hearts = ctx.evaluation.shape[SPADES], ctx.evaluation.shape[HEARTS]
        if spades < 5 and hearts < 5:
            return f"No 5-card major ({spades} spades, {hearts} hearts)"
        if spades >= 5:
            return f"Has 5+ spades ({spades})"
        return f"Has 5+ hearts ({hearts})"

    return Condition("no-5-card-major", "No 5-card major",
                     lambda ctx: max(ctx.evaluation.shape[:2]) < 5, describe,
                     category=HAND)


def has_four_card_major():
    def describe(ctx):
        spades, hearts = ctx.evaluation.shape[SPADES], ctx.evaluation.shape[HEARTS]
        if spades >= 4 or hearts >= 4:
            return f"Has 4+ card major ({spades} spades, {hearts} hearts)"
        return f"No 4-card major ({spades} spades, {hearts} hearts)"

    return Condition("has-4-card-major", "Has 4+ card major",
                     lambda ctx: max(ctx.evaluation.shape[:2]) >= 4, describe,
                     category=HAND)


def longer_major(suit_index):
    """5+ cards in this major, at least as many as in the other major."""
    name = suit_names[suit_index]
    other = HEARTS if suit_index == SPADES else SPADES

    def test(ctx):
        n = ctx.evaluation.shape[suit_index]
        return n >= 5 and n >= ctx.evaluation.shape[other]

    def describe(ctx):
        n = ctx.evaluation.shape[suit_index]
        m = ctx.evaluation.shape[other]
        if test(ctx):
            return f"{n} {name} (longer/equal major vs {m} {suit_names[other]})"
        if n < 5:
            return f"Only {n} {name} (need 5+)"
        return f"{n} {name} shorter than {m} {suit_names[other]}"

    return Condition(f"longer-major-{name}", f"5+ {name} (longer/equal major)",
                     test, describe, category=HAND,
                     inference=ConditionInference.suit_min(suit_index, 5))


def is_two_suited(min_long, min_short):
    def test(ctx):
        ordered = sorted(ctx.evaluation.shape, reverse=True)
        return ordered[0] >= min_long and ordered[1] >= min_short

    def describe(ctx):
        shape = ctx.evaluation.shape
        ordered = sorted(range(4), key=lambda i: -shape[i])
        a, b = ordered[0], ordered[1]
        if test(ctx):
            return (f"{shape[a]} {suit_names[a]} + {shape[b]} {suit_names[b]} "
                    f"({min_long}-{min_short}+ two-suited)")
        return (f"Not {min_long}-{min_short}+ two-suited "
                f"(longest: {shape[a]}, second: {shape[b]})")

    return Condition("two-suited", f"Two-suited ({min_long}-{min_short}+)",
                     test, describe, category=HAND,
                     inference=ConditionInference.two_suited(min_long,
                                                             min_short))


def both_majors():
    """5-4 either way in the majors."""
    return or_(
        and_(suit_min(HEARTS, "hearts", 5), suit_min(SPADES, "spades", 4)),
        and_(suit_min(SPADES, "spades", 5), suit_min(HEARTS, "hearts", 4)))
