"""Stayman: a 2C (3C over 2NT) response to notrump asking for a 4-card major."""
from bidlogic.conventions.auction_conditions import auction_matches
from bidlogic.conventions.conditions import and_
from bidlogic.conventions.hand_conditions import (
    HEARTS, SPADES, any_suit_min, hcp_min, suit_min)
from bidlogic.conventions.registry import Convention
from bidlogic.conventions.rule_tree import bid, decision, fallback


def _ask(suffix, call):
    return decision(
        f"hcp-8-plus{suffix}", hcp_min(8),
        decision(
            f"has-4-card-major{suffix}", any_suit_min([SPADES, HEARTS], 4),
            bid("stayman-ask", "Asks opener for a 4-card major", call),
            fallback(f"no-major{suffix}")),
        fallback(f"too-weak{suffix}"))


def _response(suffix, level):
    return decision(
        f"has-4-hearts{suffix}", suit_min(HEARTS, "hearts", 4),
        bid("stayman-response-hearts", "Shows 4+ hearts", f"{level}H"),
        decision(
            f"has-4-spades{suffix}", suit_min(SPADES, "spades", 4),
            bid("stayman-response-spades", "Shows 4+ spades, denies 4 hearts",
                f"{level}S"),
            bid("stayman-response-denial", "Denies a 4-card major",
                f"{level}D")))


def _no_fit(suffix):
    return decision(
        f"game-hcp-{suffix}", hcp_min(10),
        bid("stayman-rebid-no-fit", "No major fit, game values", "3NT"),
        bid("stayman-rebid-no-fit-invite", "No major fit, invitational",
            "2NT"))


def _rebid_after_major(suit_index, suit_name, strain):
    s = strain.lower()
    return decision(
        f"fit-{suit_name}", suit_min(suit_index, suit_name, 4),
        decision(
            f"game-hcp-fit-{s}", hcp_min(10),
            bid("stayman-rebid-major-fit", f"Game in the {suit_name} fit",
                f"4{strain}"),
            bid("stayman-rebid-major-fit-invite",
                f"Invites game in the {suit_name} fit", f"3{strain}")),
        _no_fit(f"nofit-{s}"))


def _rebid_after_denial():
    return decision(
        "smolen-hearts",
        and_(hcp_min(10), suit_min(SPADES, "spades", 4),
             suit_min(HEARTS, "hearts", 5)),
        bid("stayman-rebid-smolen-hearts", "Smolen: 4 spades and 5+ hearts",
            "3H"),
        decision(
            "smolen-spades",
            and_(hcp_min(10), suit_min(SPADES, "spades", 5),
                 suit_min(HEARTS, "hearts", 4)),
            bid("stayman-rebid-smolen-spades",
                "Smolen: 5+ spades and 4 hearts", "3S"),
            _no_fit("denial")))


def build_tree():
    return decision(
        "after-1nt-p", auction_matches(["1NT", "P"]),
        _ask("", "2C"),
        decision(
            "after-2nt-p", auction_matches(["2NT", "P"]),
            _ask("-2nt", "3C"),
            decision(
                "after-1nt-p-2c-p", auction_matches(["1NT", "P", "2C", "P"]),
                _response("", 2),
                decision(
                    "after-2nt-p-3c-p",
                    auction_matches(["2NT", "P", "3C", "P"]),
                    _response("-2nt", 3),
                    decision(
                        "after-2h-response",
                        auction_matches(["1NT", "P", "2C", "P", "2H", "P"]),
                        _rebid_after_major(HEARTS, "hearts", "H"),
                        decision(
                            "after-2s-response",
                            auction_matches(["1NT", "P", "2C", "P", "2S", "P"]),
                            _rebid_after_major(SPADES, "spades", "S"),
                            decision(
                                "after-2d-denial",
                                auction_matches(
                                    ["1NT", "P", "2C", "P", "2D", "P"]),
                                _rebid_after_denial(),
                                fallback("not-stayman-auction"))))))))


def convention():
    return Convention(
        id="stayman",
        name="Stayman",
        description="2C response to 1NT asking for 4-card majors",
        tree=build_tree())
