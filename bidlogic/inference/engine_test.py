from absl.testing import absltest

from bidlogic.bridge.calls import build_auction
from bidlogic.conventions.registry import default_registry
from bidlogic.inference import engine as engine_lib
from bidlogic.inference.config_factory import drill_inference_configs
from bidlogic.inference.natural import NaturalInferenceProvider
from bidlogic.inference.types import (
    HandInference, InferenceConfig, InferenceProvider, Range)


STAYMAN_AUCTION = build_auction("N", "1NT P 2C P")


class BrokenProvider(InferenceProvider):
    id = "broken"

    def infer_from_bid(self, entry, auction_before, seat):
        raise RuntimeError("no inference today")


class FixedProvider(InferenceProvider):
    id = "fixed"

    def __init__(self, min_hcp):
        self.min_hcp = min_hcp

    def infer_from_bid(self, entry, auction_before, seat):
        return HandInference(seat, min_hcp=self.min_hcp, source=self.id)


def stayman_engines():
    ns_config, ew_config = drill_inference_configs("stayman", default_registry())
    return (engine_lib.InferenceEngine(ns_config, "S"),
            engine_lib.InferenceEngine(ew_config, "E"))


class EngineTest(absltest.TestCase):
    def test_partnerships_read_the_same_call_differently(self):
        south_view, east_view = stayman_engines()
        engine_lib.replay_auction(south_view, STAYMAN_AUCTION)
        engine_lib.replay_auction(east_view, STAYMAN_AUCTION)
        # South's 2C is Stayman to N/S, and says nothing to natural readers
        self.assertEqual(south_view.get_inferences()["S"].hcp_range.min, 8)
        self.assertLess(east_view.get_inferences()["S"].hcp_range.min, 8)
        self.assertEqual(east_view.get_inferences()["N"].hcp_range,
                         Range(15, 17))
        self.assertTrue(east_view.get_inferences()["N"].is_balanced)

    def test_opponent_passes_read_naturally(self):
        south_view, _ = stayman_engines()
        inferences = engine_lib.replay_auction(south_view, STAYMAN_AUCTION)
        self.assertEqual(inferences["E"].hcp_range, Range(0, 11))
        self.assertEqual(inferences["W"].hcp_range, Range(0, 11))

    def test_deterministic(self):
        first, _ = stayman_engines()
        second, _ = stayman_engines()
        self.assertEqual(engine_lib.replay_auction(first, STAYMAN_AUCTION),
                         engine_lib.replay_auction(second, STAYMAN_AUCTION))

    def test_timeline(self):
        south_view, _ = stayman_engines()
        engine_lib.replay_auction(south_view, STAYMAN_AUCTION)
        timeline = south_view.get_timeline()
        self.assertLen(timeline, 4)
        self.assertEqual([s.entry for s in timeline], list(STAYMAN_AUCTION))
        self.assertEqual(timeline[2].new_inference.source, "stayman-ask")
        self.assertEqual(timeline[1].cumulative["S"].hcp_range, Range(0, 40))
        self.assertEqual(timeline[2].cumulative["S"].hcp_range, Range(8, 40))

    def test_timeline_is_a_copy(self):
        south_view, _ = stayman_engines()
        engine_lib.replay_auction(south_view, STAYMAN_AUCTION)
        south_view.get_timeline().clear()
        self.assertLen(south_view.get_timeline(), 4)

    def test_failing_provider_is_recorded(self):
        config = InferenceConfig(own_partnership=BrokenProvider(),
                                 opponent_partnership=NaturalInferenceProvider())
        engine = engine_lib.InferenceEngine(config, "N")
        with self.assertLogs(level="WARNING"):
            outcome = engine.process_bid(STAYMAN_AUCTION[0], ())
        self.assertIsNone(outcome.inference)
        self.assertIsInstance(outcome.error, RuntimeError)
        (snapshot,) = engine.get_timeline()
        self.assertIsNone(snapshot.new_inference)
        self.assertEqual(snapshot.cumulative["N"].hcp_range, Range(0, 40))
        # later calls still go through
        outcome = engine.process_bid(STAYMAN_AUCTION[1], STAYMAN_AUCTION[:1])
        self.assertIsNone(outcome.error)
        self.assertEqual(engine.get_inferences()["E"].hcp_range.max, 11)

    def test_routing(self):
        config = InferenceConfig(own_partnership=FixedProvider(10),
                                 opponent_partnership=FixedProvider(3))
        engine = engine_lib.InferenceEngine(config, "N")
        self.assertIs(engine.provider_for("N"), config.own_partnership)
        self.assertIs(engine.provider_for("S"), config.own_partnership)
        self.assertIs(engine.provider_for("E"), config.opponent_partnership)
        inferences = engine_lib.replay_auction(engine, STAYMAN_AUCTION)
        self.assertEqual(inferences["S"].hcp_range.min, 10)
        self.assertEqual(inferences["W"].hcp_range.min, 3)

    def test_contributions_accumulate(self):
        config = InferenceConfig(own_partnership=NaturalInferenceProvider(),
                                 opponent_partnership=NaturalInferenceProvider())
        engine = engine_lib.InferenceEngine(config, "N")
        inferences = engine_lib.replay_auction(
            engine, build_auction("N", "1H P 1S P 2C P"))
        self.assertLen(inferences["E"].inferences, 2)
        self.assertEqual(inferences["E"].hcp_range, Range(0, 11))
        self.assertEqual(inferences["N"].suit_lengths["H"], Range(5, 13))
        self.assertEqual(inferences["S"].suit_lengths["S"], Range(4, 13))

    def test_reset(self):
        south_view, _ = stayman_engines()
        engine_lib.replay_auction(south_view, STAYMAN_AUCTION)
        south_view.reset()
        self.assertEqual(south_view.get_timeline(), [])
        for holdings in south_view.get_inferences().values():
            self.assertEqual(holdings.hcp_range, Range(0, 40))
            self.assertEqual(holdings.inferences, ())


if __name__ == "__main__":
    absltest.main()
