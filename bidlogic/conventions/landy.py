"""Landy: a 2C overcall of an opposing 1NT showing both majors (5-4 or better)."""
from bidlogic.conventions.auction_conditions import auction_matches
from bidlogic.conventions.conditions import and_
from bidlogic.conventions.hand_conditions import (
    CLUBS, HEARTS, SPADES, both_majors, hcp_min, hcp_range, suit_min)
from bidlogic.conventions.registry import Convention
from bidlogic.conventions.rule_tree import bid, decision, fallback


def _overcaller_after_2nt():
    return decision(
        "5-5-majors",
        and_(suit_min(SPADES, "spades", 5), suit_min(HEARTS, "hearts", 5)),
        decision(
            "max-12+", hcp_min(12),
            bid("landy-rebid-3nt", "Maximum with 5-5 majors", "3NT"),
            bid("landy-rebid-3s", "Medium with 5-5 majors", "3S")),
        decision(
            "max-12+-54", hcp_min(12),
            bid("landy-rebid-3d", "Maximum with 5-4 majors", "3D"),
            bid("landy-rebid-3c", "Medium with 5-4 majors", "3C")))


def _responder():
    return decision(
        "has-12-plus", hcp_min(12),
        bid("landy-response-2nt", "Asks overcaller for strength and shape",
            "2NT"),
        decision(
            "invite-3h", and_(hcp_range(10, 12), suit_min(HEARTS, "hearts", 4)),
            bid("landy-response-3h", "Invitational with heart support", "3H"),
            decision(
                "invite-3s",
                and_(hcp_range(10, 12), suit_min(SPADES, "spades", 4)),
                bid("landy-response-3s", "Invitational with spade support",
                    "3S"),
                decision(
                    "has-5-clubs", suit_min(CLUBS, "clubs", 5),
                    bid("landy-response-pass", "Plays in clubs", "P"),
                    decision(
                        "has-4-hearts", suit_min(HEARTS, "hearts", 4),
                        bid("landy-response-2h", "Prefers hearts", "2H"),
                        decision(
                            "has-4-spades", suit_min(SPADES, "spades", 4),
                            bid("landy-response-2s", "Prefers spades", "2S"),
                            bid("landy-response-2d",
                                "Asks overcaller for the longer major",
                                "2D")))))))


def build_tree():
    return decision(
        "after-1nt", auction_matches(["1NT"]),
        decision(
            "both-majors", both_majors(),
            bid("landy-2c", "Shows both majors", "2C"),
            fallback("not-suited")),
        decision(
            "after-1nt-2c-p-2nt-p",
            auction_matches(["1NT", "2C", "P", "2NT", "P"]),
            _overcaller_after_2nt(),
            decision(
                "after-1nt-2c-p", auction_matches(["1NT", "2C", "P"]),
                _responder(),
                fallback("not-landy-auction"))))


def convention():
    return Convention(
        id="landy",
        name="Landy",
        description="2C overcall over opponent's 1NT showing both majors (5-4+)",
        tree=build_tree())
