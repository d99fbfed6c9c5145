from absl.testing import absltest

from bidlogic import replay
from bidlogic.bridge.calls import build_auction
from bidlogic.conventions.registry import default_registry
from bidlogic.inference.merge import merge_inferences
from bidlogic.inference.types import HandInference, Range, SuitInference


class FakeConfig:
    def __init__(self, auction, observer, convention_id="stayman",
                 opponent_bidding=False, opponent_convention_id=None):
        self.auction = build_auction("N", auction)
        self.observer = observer
        self.convention_id = convention_id
        self.opponent_bidding = opponent_bidding
        self.opponent_convention_id = opponent_convention_id


class ReplayTest(absltest.TestCase):
    def test_south_view(self):
        engine = replay.replay(FakeConfig("1NT P 2C P", "S"), default_registry())
        self.assertLen(engine.get_timeline(), 4)
        self.assertEqual(engine.get_inferences()["S"].hcp_range.min, 8)

    def test_west_view_uses_east_west_config(self):
        engine = replay.replay(FakeConfig("1NT P 2C P", "W"), default_registry())
        self.assertEqual(engine.config.own_partnership.id, "natural")
        self.assertEqual(engine.get_inferences()["S"].hcp_range.min, 0)

    def test_opponents_play_dont(self):
        config = FakeConfig("1NT 2D P", "W", opponent_bidding=True,
                            opponent_convention_id="dont")
        engine = replay.replay(config, default_registry())
        east = engine.get_inferences()["E"]
        self.assertEqual(east.hcp_range, Range(8, 15))
        self.assertEqual(east.suit_lengths["D"], Range(5, 13))

    def test_format_holdings(self):
        holdings = merge_inferences("N", [HandInference(
            "N", min_hcp=15, max_hcp=17, is_balanced=True,
            suits={"H": SuitInference(min_length=4)})])
        self.assertEqual(replay.format_holdings(holdings),
                         "N: 15-17 HCP S:0-13 H:4-13 D:0-13 C:0-13 balanced")


if __name__ == "__main__":
    absltest.main()
