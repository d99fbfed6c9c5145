from absl.testing import absltest

from bidlogic.bridge.calls import Call, build_auction
from bidlogic.bridge.hand import Hand
from bidlogic.conventions import evaluator
from bidlogic.conventions import rule_tree
from bidlogic.conventions.auction_conditions import auction_matches
from bidlogic.conventions.conditions import Condition
from bidlogic.conventions.context import make_context
from bidlogic.conventions.hand_conditions import hcp_min, suit_min
from bidlogic.conventions.rule_tree import bid, decision, fallback


def ctx(hand="AKQ2.KJ3.Q54.932", auction="1NT P", seat="S"):
    return make_context(Hand.parse(hand), build_auction("N", auction), seat)


def three_decisions():
    # 15 HCP, 4 spades: decisions 1 and 3 pass, decision 2 fails
    return decision(
        "d1", hcp_min(12),
        decision(
            "d2", suit_min(1, "hearts", 5),
            bid("hearts", None, "2H"),
            decision(
                "d3", suit_min(0, "spades", 4),
                bid("spades", "Shows spades", "2S"),
                fallback("none"))),
        fallback("weak"))


def raising(message):
    def test(ctx):
        raise RuntimeError(message)
    return Condition("boom", "boom", test, lambda ctx: "boom")


class EvaluateTreeTest(absltest.TestCase):
    def test_three_decisions(self):
        result = evaluator.evaluate_tree(three_decisions(), ctx())
        self.assertEqual(result.matched.name, "spades")
        self.assertLen(result.visited, 3)
        self.assertLen(result.path, 2)
        self.assertLen(result.rejected_decisions, 1)
        rejected = result.rejected_decisions[0]
        self.assertEqual(rejected.node.name, "d2")
        self.assertFalse(rejected.passed)
        self.assertEqual(rejected.description,
                         rejected.node.condition.describe(ctx()))
        self.assertEqual([e.node.name for e in result.visited],
                         ["d1", "d2", "d3"])

    def test_fallback(self):
        result = evaluator.evaluate_tree(three_decisions(),
                                         ctx("5432.5432.432.32"))
        self.assertIsNone(result.matched)
        self.assertLen(result.visited, 1)
        self.assertLen(result.rejected_decisions, 1)

    def test_deterministic(self):
        tree = three_decisions()
        a = evaluator.evaluate_tree(tree, ctx())
        b = evaluator.evaluate_tree(tree, ctx())
        self.assertIs(a.matched, b.matched)
        self.assertEqual([(e.node.name, e.passed, e.description) for e in a.visited],
                         [(e.node.name, e.passed, e.description) for e in b.visited])

    def test_condition_errors_propagate(self):
        tree = decision("d", raising("bad"), fallback(), fallback())
        with self.assertRaisesRegex(RuntimeError, "bad"):
            evaluator.evaluate_tree(tree, ctx())
        with self.assertRaisesRegex(RuntimeError, "bad"):
            evaluator.evaluate_tree_fast(tree, ctx())

    def test_unrecognized_node(self):
        tree = decision("d", hcp_min(0), "not a node", fallback())
        with self.assertRaises(rule_tree.TreeInvariantError):
            evaluator.evaluate_tree(tree, ctx())

    def test_deep_tree_is_stack_safe(self):
        tree = bid("bottom", None, "P")
        for i in range(5000):
            tree = decision(f"d{i}", hcp_min(0), tree, fallback())
        result = evaluator.evaluate_tree(tree, ctx())
        self.assertEqual(result.matched.name, "bottom")
        self.assertLen(result.visited, 5000)

    def test_fast(self):
        self.assertEqual(
            evaluator.evaluate_tree_fast(three_decisions(), ctx()).name,
            "spades")
        self.assertIsNone(evaluator.evaluate_tree_fast(
            three_decisions(), ctx("5432.5432.432.32")))


class RuleResultTest(absltest.TestCase):
    def test_rule_result(self):
        result = evaluator.evaluate_tree(three_decisions(), ctx())
        rr = evaluator.tree_result_to_rule_result(result, ctx())
        self.assertEqual(rr.call, Call.bid(2, "S"))
        self.assertEqual(rr.rule, "spades")
        self.assertEqual(rr.meaning, "Shows spades")
        self.assertLen(rr.condition_results, 3)
        self.assertEqual(
            rr.explanation,
            "✓ 15 HCP (12+ required); ✗ Only 3 hearts (need 5+); "
            "✓ 4 spades (4+ required)")

    def test_no_match(self):
        result = evaluator.evaluate_tree(three_decisions(),
                                         ctx("5432.5432.432.32"))
        self.assertIsNone(evaluator.tree_result_to_rule_result(result, ctx()))


class BuilderTest(absltest.TestCase):
    def test_bid_accepts_tokens_and_functions(self):
        fixed = bid("b", None, "3NT")
        self.assertEqual(fixed.call(None), Call.bid(3, "NT"))
        dynamic = bid("d", None, lambda c: Call.pass_())
        self.assertEqual(dynamic.call(None), Call.pass_())

    def test_nodes_compare_by_identity(self):
        self.assertNotEqual(fallback("x"), fallback("x"))

    def test_check_tree_shape(self):
        shared = bid("shared", None, "2C")
        tree = decision("d", auction_matches(["1NT", "P"]), shared, shared)
        with self.assertRaises(rule_tree.TreeInvariantError):
            rule_tree.check_tree_shape(tree)
        rule_tree.check_tree_shape(three_decisions())

    def test_bids(self):
        self.assertEqual([b.name for b in rule_tree.bids(three_decisions())],
                         ["hearts", "spades"])


if __name__ == "__main__":
    absltest.main()
