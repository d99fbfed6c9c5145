"""DONT (Disturb Opponents' Notrump): overcalls of an opposing 1NT.

  X   one long suit other than spades (advancer relays 2C)
  2C  clubs and a higher suit
  2D  diamonds and a major
  2H  both majors
  2S  long spades

Advancer passes with tolerance for the suit shown, else bids the next step.
"""
from bidlogic.conventions.auction_conditions import auction_matches
from bidlogic.conventions.hand_conditions import (
    CLUBS, DIAMONDS, HEARTS, SPADES, any_suit_min, both_majors,
    has_four_card_major, hcp_range, is_two_suited, suit_below, suit_min)
from bidlogic.conventions.registry import Convention
from bidlogic.conventions.rule_tree import bid, decision, fallback


def _two_suited():
    # 5+ clubs with 5+ diamonds never holds a 4-card major
    return decision(
        "five-clubs", suit_min(CLUBS, "clubs", 5),
        bid("dont-2c", "Clubs and a higher suit", "2C"),
        decision(
            "five-diamonds", suit_min(DIAMONDS, "diamonds", 5),
            decision(
                "diamonds-and-major", has_four_card_major(),
                bid("dont-2d", "Diamonds and a major", "2D"),
                fallback("diamonds-and-clubs")),
            decision(
                "long-spades-two-suited", suit_min(SPADES, "spades", 6),
                bid("dont-2s", "Long spades", "2S"),
                fallback("major-and-minor"))))


def _single_suited():
    return decision(
        "long-spades", suit_min(SPADES, "spades", 6),
        bid("dont-2s", "Long spades", "2S"),
        decision(
            "one-long-suit", any_suit_min([HEARTS, DIAMONDS, CLUBS], 6),
            bid("dont-double", "One long suit, not spades", "X"),
            fallback("no-long-suit")))


def _overcall():
    return decision(
        "dont-values", hcp_range(8, 15),
        decision(
            "both-majors", both_majors(),
            bid("dont-2h", "Both majors", "2H"),
            decision(
                "two-suited", is_two_suited(5, 4),
                _two_suited(),
                _single_suited())),
        fallback("outside-dont-range"))


def _pass_or_step(name, tolerance, step, step_meaning):
    """Advancer: bid the next step when short in the suit shown, else pass."""
    return decision(
        name, tolerance,
        bid("dont-advance-next-step", step_meaning, step),
        bid("dont-advance-pass", "Plays in partner's suit", "P"))


def build_tree():
    return decision(
        "after-1nt", auction_matches(["1NT"]),
        _overcall(),
        decision(
            "after-2h", auction_matches(["1NT", "2H", "P"]),
            _pass_or_step("short-hearts", suit_below(HEARTS, "hearts", 3),
                          "2S", "Prefers spades"),
            decision(
                "after-2s", auction_matches(["1NT", "2S", "P"]),
                decision(
                    "spade-tolerance", suit_min(SPADES, "spades", 2),
                    bid("dont-advance-pass", "Plays in spades", "P"),
                    fallback("no-spade-tolerance")),
                decision(
                    "after-2d", auction_matches(["1NT", "2D", "P"]),
                    _pass_or_step("short-diamonds",
                                  suit_below(DIAMONDS, "diamonds", 3),
                                  "2H", "Asks for the major"),
                    decision(
                        "after-2c", auction_matches(["1NT", "2C", "P"]),
                        _pass_or_step("short-clubs",
                                      suit_below(CLUBS, "clubs", 3),
                                      "2D", "Asks for the higher suit"),
                        decision(
                            "after-double", auction_matches(["1NT", "X", "P"]),
                            bid("dont-advance-next-step",
                                "Relays to find the long suit", "2C"),
                            fallback("not-dont-auction")))))))


def convention():
    return Convention(
        id="dont",
        name="DONT",
        description="Overcalls of an opposing 1NT showing one or two suits",
        tree=build_tree())
