"""Conditions that read only the auction and the evaluating seat."""
from bidlogic.bridge import calls
from bidlogic.conventions.conditions import AUCTION, Condition


def _pattern_label(pattern):
    return "-".join(pattern)


def auction_matches(pattern):
    """The auction so far is exactly `pattern`, e.g. ["1NT", "P"]."""
    label = _pattern_label(pattern)

    def test(ctx):
        return calls.auction_matches_exact(ctx.auction, pattern)

    def describe(ctx):
        if test(ctx):
            return f"After {label}"
        return f"Auction does not match {label}"

    return Condition("auction", f"After {label}", test, describe,
                     category=AUCTION)


def auction_matches_any(patterns):
    label = " or ".join(_pattern_label(p) for p in patterns)

    def matched(ctx):
        for p in patterns:
            if calls.auction_matches_exact(ctx.auction, p):
                return p
        return None

    def describe(ctx):
        p = matched(ctx)
        if p is not None:
            return f"After {_pattern_label(p)}"
        return f"Auction does not match {label}"

    return Condition("auction", f"After {label}",
                     lambda ctx: matched(ctx) is not None, describe,
                     category=AUCTION)


def is_opener():
    """This seat made the first contract bid, or nobody has bid yet."""
    def test(ctx):
        first = calls.first_contract_bid(ctx.auction)
        return first is None or first.seat == ctx.seat

    def describe(ctx):
        first = calls.first_contract_bid(ctx.auction)
        if first is None:
            return "No bids yet, opening position"
        if first.seat == ctx.seat:
            return "This seat opened the bidding"
        return "This seat did not open the bidding"

    return Condition("is-opener", "Opening bidder", test, describe,
                     category=AUCTION)


def is_responder():
    def test(ctx):
        first = calls.first_contract_bid(ctx.auction)
        return first is not None and first.seat == calls.partner_seat(ctx.seat)

    def describe(ctx):
        first = calls.first_contract_bid(ctx.auction)
        if first is None:
            return "No bids yet, not in responding position"
        if test(ctx):
            return "Partner opened, responding position"
        return "Partner did not open"

    return Condition("is-responder", "Responding to partner's opening",
                     test, describe, category=AUCTION)


def partner_opened(strain=None):
    """Partner made the first contract bid, in `strain` if given."""
    def test(ctx):
        first = calls.first_contract_bid(ctx.auction)
        if first is None or first.seat != calls.partner_seat(ctx.seat):
            return False
        return strain is None or first.call.strain == strain

    def describe(ctx):
        first = calls.first_contract_bid(ctx.auction)
        if first is None:
            return "No opening bid found"
        if first.seat != calls.partner_seat(ctx.seat):
            return f"Partner did not open ({first.seat} opened)"
        if strain is not None and first.call.strain != strain:
            return f"Partner opened {first.call.strain}, not {strain}"
        return f"Partner opened {first.call.strain}"

    name = f"partner-opened-{strain}" if strain else "partner-opened"
    label = f"Partner opened {strain}" if strain else "Partner opened"
    return Condition(name, label, test, describe, category=AUCTION)


def partner_opened_at(level, strain):
    def test(ctx):
        first = calls.first_contract_bid(ctx.auction)
        return (first is not None
                and first.seat == calls.partner_seat(ctx.seat)
                and first.call.level == level
                and first.call.strain == strain)

    def describe(ctx):
        first = calls.first_contract_bid(ctx.auction)
        if first is None:
            return "No opening bid found"
        if first.seat != calls.partner_seat(ctx.seat):
            return "Partner did not open"
        if not test(ctx):
            return f"Partner opened {first.call}, not {level}{strain}"
        return f"Partner opened {level}{strain}"

    return Condition(f"partner-opened-{level}{strain}",
                     f"Partner opened {level}{strain}", test, describe,
                     category=AUCTION)


def _opponent_entry(ctx, pred):
    for e in ctx.auction:
        if not calls.same_side(e.seat, ctx.seat) and pred(e.call):
            return e
    return None


def opponent_bid():
    def describe(ctx):
        e = _opponent_entry(ctx, lambda c: c.is_bid())
        return f"Opponent ({e.seat}) bid" if e else "No opponent bids"

    return Condition("opponent-bid", "Opponent has bid",
                     lambda ctx: _opponent_entry(ctx, lambda c: c.is_bid()) is not None,
                     describe, category=AUCTION)


def opponent_acted():
    """An opponent bid, doubled or redoubled."""
    def describe(ctx):
        e = _opponent_entry(ctx, lambda c: not c.is_pass())
        return f"Opponent ({e.seat}) acted" if e else "No opponent action"

    return Condition("opponent-acted", "Opponent acted (bid/double/redouble)",
                     lambda ctx: _opponent_entry(ctx, lambda c: not c.is_pass()) is not None,
                     describe, category=AUCTION)


def no_prior_bid():
    def test(ctx):
        return calls.first_contract_bid(ctx.auction) is None

    def describe(ctx):
        return "No prior contract bids" if test(ctx) else "Prior contract bid exists"

    return Condition("no-prior-bid", "No prior contract bids", test, describe,
                     category=AUCTION)


def bidding_round(n):
    """This seat is about to make its contract bid number n (0 = first)."""
    def count(ctx):
        return sum(1 for e in ctx.auction
                   if e.seat == ctx.seat and e.call.is_bid())

    def describe(ctx):
        c = count(ctx)
        plural = "" if c == 1 else "s"
        if c == n:
            return f"Seat has made {c} prior bid{plural} (round {n})"
        return f"Seat has made {c} prior bid{plural} (need round {n})"

    return Condition("bidding-round", f"Bidding round {n}",
                     lambda ctx: count(ctx) == n, describe, category=AUCTION)


def partner_bid_at(level, strain):
    target = calls.Call.bid(level, strain)

    def test(ctx):
        partner = calls.partner_seat(ctx.seat)
        return any(e.seat == partner and calls.calls_match(e.call, target)
                   for e in ctx.auction)

    def describe(ctx):
        if test(ctx):
            return f"Partner bid {target}"
        return f"Partner has not bid {target}"

    return Condition(f"partner-bid-{target}", f"Partner bid {target}",
                     test, describe, category=AUCTION)


def seat_has_bid():
    def test(ctx):
        return any(e.seat == ctx.seat and e.call.is_bid() for e in ctx.auction)

    def describe(ctx):
        if test(ctx):
            return "This seat has previously bid"
        return "This seat has not bid yet"

    return Condition("seat-has-bid", "Has previously bid", test, describe,
                     category=AUCTION)
