"""Gerber: 4C over a notrump opening asks for aces, then 5C asks for kings.

Every auction decision sits above the hand decisions it leads to: the
position (ace ask, ace response, king ask, king response, signoff) is
settled by the auction first, and only then does the hand choose a bid.
"""
from bidlogic.bridge import calls
from bidlogic.bridge.calls import Call
from bidlogic.bridge.hand import count_aces, count_kings
from bidlogic.conventions.auction_conditions import auction_matches_any
from bidlogic.conventions.conditions import HAND, Condition, and_
from bidlogic.conventions.hand_conditions import (
    ace_count, ace_count_any, hcp_min, king_count, king_count_any, no_void)
from bidlogic.conventions.registry import Convention
from bidlogic.conventions.rule_tree import bid, decision, fallback


nt_openings = ("1NT", "2NT")
ace_responses = ("4D", "4H", "4S", "4NT")
king_responses = ("5D", "5H", "5S", "5NT")

# positions of the step responses in {NT}-P-4C-P-{ace}-P-5C-P-{king}
ACE_RESPONSE_INDEX = 4
KING_RESPONSE_INDEX = 8


def ace_ask_patterns():
    return [[o, "P", "4C", "P"] for o in nt_openings]


def ace_response_patterns():
    return [[o, "P", "4C", "P", a, "P"]
            for o in nt_openings for a in ace_responses]


def king_ask_patterns():
    return [p + ["5C", "P"] for p in ace_response_patterns()]


def king_response_patterns():
    return [p + [k, "P"] for p in king_ask_patterns() for k in king_responses]


def _shown_count(auction, index, level, responder_count):
    """Count shown by a step response: D = 0 or 4, H = 1, S = 2, NT = 3."""
    if len(auction) <= index:
        return 0
    response = auction[index].call
    if not response.is_bid() or response.level != level:
        return 0
    if response.strain == calls.DIAMONDS:
        # 4 only when the asker holds none; reading 4 whenever the asker
        # lacks all four would credit opener with aces the asker has
        return 4 if responder_count == 0 else 0
    return {calls.HEARTS: 1, calls.SPADES: 2, calls.NOTRUMP: 3}.get(
        response.strain, 0)


def opener_aces(auction, responder_aces):
    return _shown_count(auction, ACE_RESPONSE_INDEX, 4, responder_aces)


def opener_kings(auction, responder_kings):
    return _shown_count(auction, KING_RESPONSE_INDEX, 5, responder_kings)


def total_aces(ctx):
    mine = count_aces(ctx.hand)
    return mine + opener_aces(ctx.auction, mine)


def total_kings(ctx):
    mine = count_kings(ctx.hand)
    return mine + opener_kings(ctx.auction, mine)


def total_aces_min(n):
    """Partnership holds n+ aces, counting those opener showed."""
    def describe(ctx):
        total = total_aces(ctx)
        if total >= n:
            return f"{total} total aces ({n}+ needed), ask for kings"
        return f"Only {total} total aces (need {n}+ to ask for kings)"

    return Condition("total-aces-min", f"{n}+ total aces",
                     lambda ctx: total_aces(ctx) >= n, describe,
                     category=HAND)


def _nt(level):
    return Call.bid(level, calls.NOTRUMP)


def signoff_call(ctx):
    """Notrump signoff from the partnership's ace (and king) total."""
    aces = total_aces(ctx)
    if len(ctx.auction) > KING_RESPONSE_INDEX:
        kings = total_kings(ctx)
        if aces >= 4 and kings >= 3:
            return _nt(7)
        if aces >= 3:
            return _nt(6)
        return _nt(5)
    if aces == 4:
        return _nt(7)
    if aces >= 3:
        return _nt(6)
    response = ctx.auction[ACE_RESPONSE_INDEX].call
    if response.is_bid() and response.strain == calls.SPADES:
        return _nt(5)
    return _nt(4)


def _ace_responses():
    return decision(
        "ace-3", ace_count(3),
        bid("gerber-response-three", "Shows 3 aces", "4NT"),
        decision(
            "ace-2", ace_count(2),
            bid("gerber-response-two", "Shows 2 aces", "4S"),
            decision(
                "ace-1", ace_count(1),
                bid("gerber-response-one", "Shows 1 ace", "4H"),
                decision(
                    "ace-0-or-4", ace_count_any([0, 4]),
                    bid("gerber-response-zero-four", "Shows 0 or 4 aces", "4D"),
                    fallback("no-ace-step")))))


def _king_responses():
    return decision(
        "king-3", king_count(3),
        bid("gerber-king-response-three", "Shows 3 kings", "5NT"),
        decision(
            "king-2", king_count(2),
            bid("gerber-king-response-two", "Shows 2 kings", "5S"),
            decision(
                "king-1", king_count(1),
                bid("gerber-king-response-one", "Shows 1 king", "5H"),
                decision(
                    "king-0-or-4", king_count_any([0, 4]),
                    bid("gerber-king-response-zero-four", "Shows 0 or 4 kings",
                        "5D"),
                    fallback("no-king-step")))))


def build_tree():
    return decision(
        "after-nt-opening", auction_matches_any([["1NT", "P"], ["2NT", "P"]]),
        decision(
            "hcp-and-no-void", and_(hcp_min(16), no_void()),
            bid("gerber-ask", "Asks partner for aces", "4C"),
            fallback("not-slam-interest")),
        decision(
            "after-ace-ask", auction_matches_any(ace_ask_patterns()),
            _ace_responses(),
            decision(
                "after-ace-response",
                auction_matches_any(ace_response_patterns()),
                decision(
                    "king-ask-check", total_aces_min(3),
                    bid("gerber-king-ask", "Asks partner for kings", "5C"),
                    bid("gerber-signoff", "Signs off in notrump",
                        signoff_call)),
                decision(
                    "after-king-ask", auction_matches_any(king_ask_patterns()),
                    _king_responses(),
                    decision(
                        "after-king-response",
                        auction_matches_any(king_response_patterns()),
                        bid("gerber-signoff", "Signs off in notrump",
                            signoff_call),
                        fallback("not-gerber-auction"))))))


def convention():
    return Convention(
        id="gerber",
        name="Gerber",
        description=("4C response to a notrump opening asking for aces, "
                     "then 5C for kings"),
        tree=build_tree())
