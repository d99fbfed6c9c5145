"""Seats, calls and auctions."""
from collections import namedtuple
from dataclasses import dataclass
import re


seats = ("N", "E", "S", "W")
strains = ("C", "D", "H", "S", "NT")
suits = ("S", "H", "D", "C")  # hand row order, matches HandEvaluation.shape
levels = tuple(range(1, 8))
call_letters = ("P", "X", "XX")
call_kinds = ("pass", "double", "redouble")

PASS = "pass"
DOUBLE = "double"
REDOUBLE = "redouble"
BID = "bid"

CLUBS, DIAMONDS, HEARTS, SPADES, NOTRUMP = strains


class ParseError(ValueError):
    pass


@dataclass(frozen=True)
class Call:
    kind: str
    level: int = None
    strain: str = None

    @classmethod
    def bid(cls, level, strain):
        if level not in levels:
            raise ParseError(f"invalid level {level}")
        if strain not in strains:
            raise ParseError(f"invalid strain {strain}")
        return cls(BID, level, strain)

    @classmethod
    def pass_(cls):
        return cls(PASS)

    @classmethod
    def double(cls):
        return cls(DOUBLE)

    @classmethod
    def redouble(cls):
        return cls(REDOUBLE)

    def is_bid(self):
        return self.kind == BID

    def is_pass(self):
        return self.kind == PASS

    def __str__(self):
        if self.kind == BID:
            return f"{self.level}{self.strain}"
        return call_letters[call_kinds.index(self.kind)]


AuctionEntry = namedtuple("AuctionEntry", ["seat", "call"])


_bid_re = re.compile(r"^([1-7])(C|D|H|S|NT|N)$")


def parse_call(data):
    """Parses "1NT", "2C", "P", "X", "XX" (or "pass"/"double"/"redouble")."""
    if isinstance(data, Call):
        return data
    token = data.strip().upper()
    if token in call_letters:
        return Call(call_kinds[call_letters.index(token)])
    if token.lower() in call_kinds:
        return Call(token.lower())
    m = _bid_re.match(token)
    if not m:
        raise ParseError(f"invalid call {data!r}")
    strain = "NT" if m.group(2) == "N" else m.group(2)
    return Call.bid(int(m.group(1)), strain)


def partner_seat(seat):
    return seats[(seats.index(seat) + 2) % 4]


def next_seat(seat):
    return seats[(seats.index(seat) + 1) % 4]


def same_side(a, b):
    return a == b or a == partner_seat(b)


def build_auction(dealer, tokens):
    """Returns a tuple of AuctionEntry, seats rotating from the dealer."""
    if isinstance(tokens, str):
        tokens = tokens.replace("-", " ").split()
    auction = []
    seat = dealer
    for t in tokens:
        auction.append(AuctionEntry(seat, parse_call(t)))
        seat = next_seat(seat)
    return tuple(auction)


def calls_match(a, b):
    if a.kind != b.kind:
        return False
    if a.kind == BID:
        return a.level == b.level and a.strain == b.strain
    return True


def auction_matches_exact(auction, pattern):
    """True if the auction's calls are exactly the pattern tokens."""
    if len(auction) != len(pattern):
        return False
    return all(calls_match(e.call, parse_call(p))
               for e, p in zip(auction, pattern))


def last_contract_bid(auction):
    for e in reversed(auction):
        if e.call.is_bid():
            return e.call
    return None


def first_contract_bid(auction):
    for e in auction:
        if e.call.is_bid():
            return e
    return None


def bid_is_higher(level, strain, existing):
    if level != existing.level:
        return level > existing.level
    return strains.index(strain) > strains.index(existing.strain)


def format_auction(auction):
    return " ".join(str(e.call) for e in auction)


def cheapest_bid(auction, strain):
    """Lowest bid in `strain` that outranks the auction, or None above 7."""
    last = last_contract_bid(auction)
    if last is None:
        return Call.bid(1, strain)
    for level in levels:
        if bid_is_higher(level, strain, last):
            return Call.bid(level, strain)
    return None


def is_legal_call(auction, call, seat):
    """Whether `seat` may make `call` next: sufficiency and X/XX targets."""
    if call.is_pass():
        return True
    if call.is_bid():
        last = last_contract_bid(auction)
        return last is None or bid_is_higher(call.level, call.strain, last)
    action = next((e for e in reversed(auction) if not e.call.is_pass()), None)
    if action is None or same_side(action.seat, seat):
        return False
    if call.kind == DOUBLE:
        return action.call.is_bid()
    return action.call.kind == DOUBLE
