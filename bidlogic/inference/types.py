"""Value types shared by inference providers, merging and the engine."""
from collections import namedtuple
from dataclasses import dataclass, field
from typing import Dict, Optional

from bidlogic.bridge.calls import suits


MIN_HCP, MAX_HCP = 0, 40
MIN_LENGTH, MAX_LENGTH = 0, 13


SuitInference = namedtuple("SuitInference", ["min_length", "max_length"],
                           defaults=[None, None])

Range = namedtuple("Range", ["min", "max"])


@dataclass(frozen=True)
class HandInference:
    """One partial constraint on a seat's hand, from a single observed call.

    Absent bounds are None. `suits` maps a suit letter to a SuitInference.
    """
    seat: str
    min_hcp: Optional[int] = None
    max_hcp: Optional[int] = None
    is_balanced: Optional[bool] = None
    suits: Dict[str, SuitInference] = field(default_factory=dict)
    source: str = ""


@dataclass(frozen=True)
class InferredHoldings:
    seat: str
    hcp_range: Range
    suit_lengths: Dict[str, Range]
    is_balanced: Optional[bool]
    inferences: tuple


InferenceSnapshot = namedtuple("InferenceSnapshot",
                               ["entry", "new_inference", "cumulative"])


class InferenceProvider:
    """Maps one observed call to a HandInference, or None."""
    id = None
    name = None

    def infer_from_bid(self, entry, auction_before, seat):
        raise NotImplementedError


InferenceConfig = namedtuple("InferenceConfig",
                             ["own_partnership", "opponent_partnership"])


def suit_for_index(suit_index):
    """Hand row index (0 = spades) to suit letter."""
    if not 0 <= suit_index < len(suits):
        return None
    return suits[suit_index]
