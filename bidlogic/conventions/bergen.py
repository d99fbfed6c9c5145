"""Bergen raises: responder's jumps over partner's 1H/1S with 4+ support.

3C shows a constructive raise, 3D a limit raise, 3M is preemptive and 4M
is to play. Only the first response in an uncontested auction applies.
"""
from bidlogic.bridge import calls
from bidlogic.conventions.auction_conditions import (
    bidding_round, is_responder, opponent_acted, partner_opened_at)
from bidlogic.conventions.conditions import not_
from bidlogic.conventions.hand_conditions import (
    HEARTS, SPADES, hcp_max, hcp_min, hcp_range, suit_min)
from bidlogic.conventions.registry import Convention
from bidlogic.conventions.rule_tree import bid, decision, fallback


def _raises(suit_index, suit_name, strain):
    return decision(
        f"{suit_name}-support", suit_min(suit_index, suit_name, 4),
        decision(
            f"game-values-{strain}", hcp_min(13),
            bid("bergen-game-raise", f"Game raise in {suit_name}",
                f"4{strain}"),
            decision(
                f"limit-values-{strain}", hcp_range(10, 12),
                bid("bergen-limit-raise", "Limit raise, 10-12 with 4+ support",
                    "3D"),
                decision(
                    f"constructive-values-{strain}", hcp_range(7, 9),
                    bid("bergen-constructive-raise",
                        "Constructive raise, 7-9 with 4+ support", "3C"),
                    decision(
                        f"preemptive-values-{strain}", hcp_max(6),
                        bid("bergen-preemptive-raise",
                            "Preemptive raise, 0-6 with 4+ support",
                            f"3{strain}"),
                        fallback("no-bergen-range"))))),
        fallback("no-4-card-support"))


def build_tree():
    return decision(
        "responding", is_responder(),
        decision(
            "first-response", bidding_round(0),
            decision(
                "uncontested", not_(opponent_acted()),
                decision(
                    "partner-1h", partner_opened_at(1, calls.HEARTS),
                    _raises(HEARTS, "hearts", calls.HEARTS),
                    decision(
                        "partner-1s", partner_opened_at(1, calls.SPADES),
                        _raises(SPADES, "spades", calls.SPADES),
                        fallback("not-a-major-opening"))),
                fallback("contested")),
            fallback("not-first-response")),
        fallback("not-responding"))


def convention():
    return Convention(
        id="bergen",
        name="Bergen Raises",
        description=("3C/3D/3M/4M responses to a 1H or 1S opening showing "
                     "4+ support by strength"),
        tree=build_tree())
