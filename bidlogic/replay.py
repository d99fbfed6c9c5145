"""Replays an auction through an inference engine and logs each seat's belief."""
import absl.app
import absl.flags as flags
import absl.logging as logging

from bidlogic.bridge import calls
from bidlogic.conventions.registry import default_registry
from bidlogic.inference.config_factory import drill_inference_configs
from bidlogic.inference.engine import InferenceEngine


FLAGS = flags.FLAGS

flags.DEFINE_bool("debug", False, "show debug logs")

flags.DEFINE_string("auction", "1NT P 2C P",
                    "Calls separated by spaces or dashes, e.g. 1NT-P-2C-P.")

flags.DEFINE_enum("dealer", "N", calls.seats, "Seat that made the first call.")

flags.DEFINE_enum("observer", "S", calls.seats,
                  "Seat whose view of the table is replayed.")

flags.DEFINE_string("convention", "stayman",
                    "Convention the North/South partnership plays.")

flags.DEFINE_string("opponent_convention", None,
                    "Convention East/West play when --opponent_bidding is set. "
                    "Defaults to --convention.")

flags.DEFINE_bool("opponent_bidding", False,
                  "Read East/West calls through their own convention.")


class ReplayConfig:
    def __init__(self):
        self.auction = calls.build_auction(FLAGS.dealer, FLAGS.auction)
        self.observer = FLAGS.observer
        self.convention_id = FLAGS.convention
        self.opponent_bidding = FLAGS.opponent_bidding
        self.opponent_convention_id = FLAGS.opponent_convention


def format_holdings(holdings):
    lengths = " ".join(f"{suit}:{r.min}-{r.max}"
                       for suit, r in holdings.suit_lengths.items())
    balanced = {None: "", True: " balanced", False: " unbalanced"}[
        holdings.is_balanced]
    return (f"{holdings.seat}: {holdings.hcp_range.min}-"
            f"{holdings.hcp_range.max} HCP {lengths}{balanced}")


def replay(config, registry):
    ns_config, ew_config = drill_inference_configs(
        config.convention_id, registry,
        opponent_bidding=config.opponent_bidding,
        opponent_convention_id=config.opponent_convention_id)
    north_south = calls.same_side(config.observer, "N")
    engine = InferenceEngine(ns_config if north_south else ew_config,
                             config.observer)
    logging.info("replaying %s from %s's seat",
                 calls.format_auction(config.auction), config.observer)
    for i, entry in enumerate(config.auction):
        engine.process_bid(entry, config.auction[:i])
        snapshot = engine.get_timeline()[-1]
        source = snapshot.new_inference.source if snapshot.new_inference else "-"
        logging.info("%s %s (%s)", entry.seat, entry.call, source)
    return engine


def main(_):
    if FLAGS.debug:
        logging.set_verbosity(logging.DEBUG)
    config = ReplayConfig()
    engine = replay(config, default_registry())
    for holdings in engine.get_inferences().values():
        logging.info("%s", format_holdings(holdings))


def run():
    absl.app.run(main)


if __name__ == "__main__":
    run()
