"""A compact Standard American Yellow Card: openings, first responses, opener's
rebid after a one-level response or a single raise, and direct overcalls.

Notrump openings, raises and the takeout double test and_() conditions, which
carry no inference descriptor: the convention provider reads nothing from
those bids and the natural provider covers them.
"""
from bidlogic.bridge import calls
from bidlogic.bridge.calls import Call
from bidlogic.conventions.auction_conditions import (
    auction_matches_any, bidding_round, is_opener, is_responder,
    no_prior_bid, opponent_bid, partner_bid_at, partner_opened,
    partner_opened_at, seat_has_bid)
from bidlogic.conventions.conditions import and_, not_
from bidlogic.conventions.hand_conditions import (
    CLUBS, DIAMONDS, HEARTS, SPADES, any_suit_min, has_four_card_major,
    has_shortage, hcp_max, hcp_min, hcp_range, is_balanced, longer_major,
    no_five_card_major, suit_min)
from bidlogic.conventions.registry import Convention
from bidlogic.conventions.rule_tree import bid, decision, fallback


one_level_responses = (("1C", "1D"), ("1C", "1H"), ("1C", "1S"),
                       ("1D", "1H"), ("1D", "1S"), ("1H", "1S"))


def _after_passes(patterns):
    """Each pattern, also preceded by up to three passes."""
    return [["P"] * n + list(p) for p in patterns for n in range(4)]


def _opened_strain(ctx):
    return calls.first_contract_bid(ctx.auction).call.strain


def _in_opened_strain(level):
    def call(ctx):
        return Call.bid(level, _opened_strain(ctx))
    return call


def _cheapest(strain):
    def call(ctx):
        return calls.cheapest_bid(ctx.auction, strain)
    return call


def overcall_call(ctx):
    """Cheapest bid in the longest suit, the higher-ranking of equal ones."""
    shape = ctx.evaluation.shape
    longest = max(range(len(calls.suits)), key=lambda i: (shape[i], -i))
    return calls.cheapest_bid(ctx.auction, calls.suits[longest])


def _suit_openings():
    return decision(
        "longer-spades", longer_major(SPADES),
        bid("sayc-open-1s", "Five+ spades, 12+", "1S"),
        decision(
            "five-hearts", suit_min(HEARTS, "hearts", 5),
            bid("sayc-open-1h", "Five+ hearts, 12+", "1H"),
            decision(
                "four-diamonds", suit_min(DIAMONDS, "diamonds", 4),
                bid("sayc-open-1d", "Four+ diamonds, 12+", "1D"),
                decision(
                    "three-clubs", suit_min(CLUBS, "clubs", 3),
                    bid("sayc-open-1c", "Three+ clubs, 12+", "1C"),
                    bid("sayc-open-1d", "Three diamonds, 12+", "1D")))))


def _weak_twos():
    return decision(
        "six-card-suit", any_suit_min([HEARTS, SPADES, DIAMONDS], 6),
        decision(
            "weak-two-values", hcp_range(5, 11),
            decision(
                "six-hearts", suit_min(HEARTS, "hearts", 6),
                bid("sayc-open-weak-2h", "Weak two in hearts", "2H"),
                decision(
                    "six-spades", suit_min(SPADES, "spades", 6),
                    bid("sayc-open-weak-2s", "Weak two in spades", "2S"),
                    decision(
                        "six-diamonds", suit_min(DIAMONDS, "diamonds", 6),
                        bid("sayc-open-weak-2d", "Weak two in diamonds", "2D"),
                        fallback("no-weak-two")))),
            bid("sayc-pass", "No opening bid", "P")),
        bid("sayc-pass", "No opening bid", "P"))


def _openings():
    return decision(
        "strong-values", hcp_min(22),
        bid("sayc-open-2c", "Strong and artificial, 22+", "2C"),
        decision(
            "2nt-opening", and_(hcp_range(20, 21), is_balanced()),
            bid("sayc-open-2nt", "20-21 balanced", "2NT"),
            decision(
                "1nt-opening",
                and_(hcp_range(15, 17), is_balanced(), no_five_card_major()),
                bid("sayc-open-1nt", "15-17 balanced", "1NT"),
                decision(
                    "opening-values", hcp_min(12),
                    _suit_openings(),
                    _weak_twos()))))


def _nt_responses(level):
    game = bid("sayc-respond-3nt", "Game in notrump", "3NT")
    if level == 1:
        game = decision(
            "game-values-1nt", hcp_min(10), game,
            bid("sayc-respond-2nt", "Invites game", "2NT"))
    return decision(
        f"too-weak-{level}nt", hcp_max(7 if level == 1 else 3),
        bid("sayc-respond-pass", "Too weak for game", "P"),
        decision(
            f"major-{level}nt", has_four_card_major(),
            bid("sayc-respond-stayman", "Stayman, asks for a major",
                f"{level + 1}C"),
            game))


def _new_suit_or_nt():
    return decision(
        "nt-response-values", hcp_range(6, 10),
        bid("sayc-respond-1nt", "6-10, no fit", "1NT"),
        decision(
            "two-level-values", hcp_min(11),
            decision(
                "four-clubs", suit_min(CLUBS, "clubs", 4),
                bid("sayc-respond-2c", "Four+ clubs, 11+", "2C"),
                decision(
                    "four-diamonds-response", suit_min(DIAMONDS, "diamonds", 4),
                    bid("sayc-respond-2d", "Four+ diamonds, 11+", "2D"),
                    fallback("no-two-level-suit"))),
            bid("sayc-respond-pass", "Fewer than 6 HCP", "P")))


def _major_responses(suit_index, suit_name, strain):
    others = _new_suit_or_nt()
    if strain == calls.HEARTS:
        others = decision(
            "one-spade", and_(hcp_min(6), suit_min(SPADES, "spades", 4)),
            bid("sayc-respond-1s", "Four+ spades, 6+", "1S"),
            others)
    return decision(
        f"game-raise-{strain}",
        and_(hcp_min(13), suit_min(suit_index, suit_name, 4)),
        bid("sayc-respond-game-raise", f"Game in {suit_name}", f"4{strain}"),
        decision(
            f"limit-raise-{strain}",
            and_(hcp_range(11, 12), suit_min(suit_index, suit_name, 4)),
            bid("sayc-respond-limit-raise", f"Invites game in {suit_name}",
                f"3{strain}"),
            decision(
                f"simple-raise-{strain}",
                and_(hcp_range(6, 10), suit_min(suit_index, suit_name, 3)),
                bid("sayc-respond-raise", f"Raises {suit_name}", f"2{strain}"),
                others)))


def _minor_responses(minor):
    return decision(
        f"response-values-{minor}", hcp_min(6),
        decision(
            f"four-hearts-over-{minor}", suit_min(HEARTS, "hearts", 4),
            bid("sayc-respond-1h", "Four+ hearts, 6+", "1H"),
            decision(
                f"four-spades-over-{minor}", suit_min(SPADES, "spades", 4),
                bid("sayc-respond-1s", "Four+ spades, 6+", "1S"),
                decision(
                    f"nt-over-{minor}", hcp_range(6, 10),
                    bid("sayc-respond-1nt", "6-10, no major", "1NT"),
                    fallback("minor-raise")))),
        bid("sayc-respond-pass", "Fewer than 6 HCP", "P"))


def _responses():
    return decision(
        "partner-notrump", partner_opened(calls.NOTRUMP),
        decision(
            "partner-1nt", partner_opened_at(1, calls.NOTRUMP),
            _nt_responses(1),
            decision(
                "partner-2nt", partner_opened_at(2, calls.NOTRUMP),
                _nt_responses(2),
                bid("sayc-respond-pass", "Partner bid game", "P"))),
        decision(
            "partner-1h", partner_opened_at(1, calls.HEARTS),
            _major_responses(HEARTS, "hearts", calls.HEARTS),
            decision(
                "partner-1s", partner_opened_at(1, calls.SPADES),
                _major_responses(SPADES, "spades", calls.SPADES),
                decision(
                    "partner-1d", partner_bid_at(1, calls.DIAMONDS),
                    _minor_responses("diamonds"),
                    decision(
                        "partner-1c", partner_bid_at(1, calls.CLUBS),
                        _minor_responses("clubs"),
                        fallback("no-sayc-response"))))))


def _opener_rebids():
    raised = [(o, "P", "2" + o[1], "P") for o in ("1H", "1S")]
    responded = [(o, "P", r, "P") for o, r in one_level_responses]
    return decision(
        "partner-raised", auction_matches_any(_after_passes(raised)),
        decision(
            "game-rebid", hcp_min(19),
            bid("sayc-rebid-game", "Accepts the raise", _in_opened_strain(4)),
            decision(
                "invite-rebid", hcp_range(17, 18),
                bid("sayc-rebid-invite", "Invites game", _in_opened_strain(3)),
                bid("sayc-rebid-pass", "Minimum, content with the raise",
                    "P"))),
        decision(
            "partner-responded-one",
            auction_matches_any(_after_passes(responded)),
            decision(
                "balanced-rebid", is_balanced(),
                decision(
                    "minimum-balanced", hcp_range(12, 14),
                    bid("sayc-rebid-1nt", "12-14 balanced", "1NT"),
                    decision(
                        "strong-balanced", hcp_range(18, 19),
                        bid("sayc-rebid-2nt", "18-19 balanced", "2NT"),
                        fallback("no-balanced-rebid"))),
                fallback("unbalanced-rebid")),
            fallback("no-sayc-rebid")))


def _takeout():
    return decision(
        "takeout-double", and_(hcp_min(12), has_shortage()),
        bid("sayc-takeout-double", "Opening values with shortage", "X"),
        bid("sayc-pass", "Nothing to show", "P"))


def _overcalls():
    return decision(
        "nt-overcall", and_(hcp_range(15, 18), is_balanced()),
        bid("sayc-overcall-nt", "15-18 balanced", _cheapest(calls.NOTRUMP)),
        decision(
            "five-card-suit", any_suit_min([SPADES, HEARTS, DIAMONDS, CLUBS], 5),
            decision(
                "overcall-values", hcp_range(8, 16),
                bid("sayc-overcall-suit", "Five+ card suit", overcall_call),
                _takeout()),
            _takeout()))


def build_tree():
    return decision(
        "opening-position", no_prior_bid(),
        _openings(),
        decision(
            "responding", is_responder(),
            decision(
                "first-response", bidding_round(0),
                _responses(),
                fallback("later-response")),
            decision(
                "opened", is_opener(),
                _opener_rebids(),
                decision(
                    "opponents-opened", opponent_bid(),
                    decision(
                        "first-call", not_(seat_has_bid()),
                        _overcalls(),
                        fallback("competitive-rebid")),
                    fallback("no-sayc-position")))))


def convention():
    return Convention(
        id="sayc",
        name="Standard American Yellow Card",
        description="Natural openings, responses, rebids and overcalls",
        tree=build_tree())
