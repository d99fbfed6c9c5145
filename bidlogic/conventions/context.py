from dataclasses import dataclass

from bidlogic.bridge.hand import Hand, HandEvaluation, evaluate_hand


@dataclass(frozen=True)
class BiddingContext:
    hand: Hand
    auction: tuple
    seat: str
    evaluation: HandEvaluation


def make_context(hand, auction, seat, evaluation=None):
    """Builds a BiddingContext, evaluating the hand unless given."""
    if evaluation is None:
        evaluation = evaluate_hand(hand)
    return BiddingContext(hand=hand, auction=tuple(auction), seat=seat,
                          evaluation=evaluation)


def auction_context(auction, seat):
    """Context carrying only auction knowledge: an empty hand."""
    return make_context(Hand.empty(), auction, seat)
