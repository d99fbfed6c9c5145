from absl.testing import absltest

from bidlogic.inference import merge
from bidlogic.inference.types import HandInference, Range, SuitInference


def hi(**kwargs):
    return HandInference("N", **kwargs)


class MergeInferencesTest(absltest.TestCase):
    def test_empty(self):
        m = merge.merge_inferences("N", [])
        self.assertEqual(m.hcp_range, Range(0, 40))
        self.assertEqual(m.suit_lengths, {s: Range(0, 13) for s in "SHDC"})
        self.assertIsNone(m.is_balanced)
        self.assertEqual(m.inferences, ())

    def test_tightens(self):
        m = merge.merge_inferences("N", [
            hi(min_hcp=12, suits={"H": SuitInference(min_length=5)}),
            hi(max_hcp=14, suits={"H": SuitInference(max_length=6)}),
        ])
        self.assertEqual(m.hcp_range, Range(12, 14))
        self.assertEqual(m.suit_lengths["H"], Range(5, 6))
        self.assertEqual(m.suit_lengths["S"], Range(0, 13))

    def test_hcp_contradiction_clamps_to_last(self):
        m = merge.merge_inferences("N", [hi(min_hcp=15, max_hcp=17),
                                         hi(min_hcp=20, max_hcp=21)])
        self.assertEqual(m.hcp_range, Range(20, 21))

    def test_hcp_contradiction_with_one_sided_last(self):
        m = merge.merge_inferences("N", [hi(max_hcp=11), hi(min_hcp=13)])
        self.assertEqual(m.hcp_range, Range(13, 40))

    def test_suit_contradiction_clamps_min_to_max(self):
        m = merge.merge_inferences("N", [
            hi(suits={"S": SuitInference(min_length=6)}),
            hi(suits={"S": SuitInference(max_length=4)}),
        ])
        self.assertEqual(m.suit_lengths["S"], Range(4, 4))

    def test_balanced_last_wins(self):
        m = merge.merge_inferences("N", [hi(is_balanced=True),
                                         hi(is_balanced=False), hi(min_hcp=3)])
        self.assertFalse(m.is_balanced)

    def test_never_widens(self):
        sequence = [hi(min_hcp=6), hi(max_hcp=18), hi(min_hcp=8, max_hcp=20),
                    hi(suits={"D": SuitInference(3, 7)}),
                    hi(suits={"D": SuitInference(4, None)})]
        previous = merge.merge_inferences("N", [])
        for i in range(1, len(sequence) + 1):
            current = merge.merge_inferences("N", sequence[:i])
            self.assertGreaterEqual(current.hcp_range.min, previous.hcp_range.min)
            self.assertLessEqual(current.hcp_range.max, previous.hcp_range.max)
            for suit, r in current.suit_lengths.items():
                self.assertGreaterEqual(r.min, previous.suit_lengths[suit].min)
                self.assertLessEqual(r.max, previous.suit_lengths[suit].max)
            previous = current
        self.assertEqual(previous.hcp_range, Range(8, 18))
        self.assertEqual(previous.suit_lengths["D"], Range(4, 7))

    def test_ranges_are_python_ints(self):
        m = merge.merge_inferences("N", [hi(suits={"C": SuitInference(2, 5)})])
        self.assertIs(type(m.suit_lengths["C"].min), int)


class MergeHandInferencesTest(absltest.TestCase):
    def test_absent_bounds_stay_absent(self):
        m = merge.merge_hand_inferences(
            [hi(min_hcp=8), hi(suits={"H": SuitInference(min_length=4)})],
            "S", "stayman-ask")
        self.assertEqual(m.seat, "S")
        self.assertEqual(m.min_hcp, 8)
        self.assertIsNone(m.max_hcp)
        self.assertIsNone(m.is_balanced)
        self.assertEqual(m.suits, {"H": SuitInference(4, None)})
        self.assertEqual(m.source, "stayman-ask")

    def test_combines(self):
        m = merge.merge_hand_inferences(
            [hi(min_hcp=10), hi(min_hcp=12, max_hcp=14), hi(is_balanced=True)],
            "N", "x")
        self.assertEqual((m.min_hcp, m.max_hcp), (12, 14))
        self.assertIs(type(m.min_hcp), int)
        self.assertTrue(m.is_balanced)

    def test_contradiction(self):
        m = merge.merge_hand_inferences(
            [hi(min_hcp=15, max_hcp=17), hi(max_hcp=11),
             hi(suits={"S": SuitInference(6, None)}),
             hi(suits={"S": SuitInference(None, 4)})],
            "N", "x")
        self.assertEqual((m.min_hcp, m.max_hcp), (0, 11))
        self.assertEqual(m.suits["S"], SuitInference(4, 4))


if __name__ == "__main__":
    absltest.main()
