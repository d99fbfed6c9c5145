"""Standard American (SAYC) bidding theory as a fixed lookup table."""
from bidlogic.bridge import calls
from bidlogic.inference.types import HandInference, InferenceProvider, SuitInference


# (level, strain) -> (min_hcp, max_hcp, balanced, (suit, min_length), tag)
openings = {
    (1, "C"): (12, None, None, ("C", 3), "1C-opening"),
    (1, "D"): (12, None, None, ("D", 4), "1D-opening"),
    (1, "H"): (12, None, None, ("H", 5), "1H-opening"),
    (1, "S"): (12, None, None, ("S", 5), "1S-opening"),
    (1, "NT"): (15, 17, True, None, "1NT-opening"),
    (2, "C"): (22, None, None, None, "2C-opening"),
    (2, "D"): (5, 11, None, ("D", 6), "weak-2D-opening"),
    (2, "H"): (5, 11, None, ("H", 6), "2H-opening"),
    (2, "S"): (5, 11, None, ("S", 6), "2S-opening"),
    (2, "NT"): (20, 21, True, None, "2NT-opening"),
}

PASS_MAX_HCP = 11


def _inference(seat, min_hcp, max_hcp, balanced, suit, tag):
    suits = {}
    if suit is not None:
        suits[suit[0]] = SuitInference(min_length=suit[1])
    return HandInference(seat, min_hcp=min_hcp, max_hcp=max_hcp,
                         is_balanced=balanced, suits=suits,
                         source=f"natural:{tag}")


def _partner_last_bid(auction, seat):
    partner = calls.partner_seat(seat)
    for e in reversed(auction):
        if e.seat == partner and e.call.is_bid():
            return e.call
    return None


class NaturalInferenceProvider(InferenceProvider):
    id = "natural"
    name = "Natural Bidding Theory"

    def infer_from_bid(self, entry, auction_before, seat):
        call = entry.call
        if call.is_pass():
            return self.infer_from_pass(auction_before, seat)
        if not call.is_bid():
            return None
        if calls.first_contract_bid(auction_before) is None:
            row = openings.get((call.level, call.strain))
            return _inference(seat, *row) if row else None
        return self.infer_from_response(call, auction_before, seat)

    def infer_from_pass(self, auction_before, seat):
        if calls.first_contract_bid(auction_before) is not None:
            return _inference(seat, None, PASS_MAX_HCP, None, None,
                              "pass-over-bid")
        # third and fourth hand may pass a light opener
        passes = sum(1 for e in auction_before if e.call.is_pass())
        if passes < 2:
            return _inference(seat, None, PASS_MAX_HCP, None, None,
                              "pass-no-opening")
        return None

    def infer_from_response(self, call, auction_before, seat):
        if call.level == 1 and call.strain == calls.NOTRUMP:
            return _inference(seat, 6, 10, None, None, "1NT-response")
        if call.level == 1:
            return _inference(seat, 6, None, None, (call.strain, 4),
                              "1-level-new-suit")
        if call.level == 2 and call.strain != calls.NOTRUMP:
            partner_bid = _partner_last_bid(auction_before, seat)
            if partner_bid is not None and partner_bid.strain == call.strain:
                return _inference(seat, 6, 10, None, (call.strain, 3),
                                  "simple-raise")
        return None
