"""Inference configurations for a practice table.

The user's side (North/South) reads its own calls through the drilled
convention and the opponents' through natural theory. East/West read their
own calls naturally unless they are bidding a convention of their own.
"""
from absl import logging

from bidlogic.inference.convention import ConventionInferenceProvider
from bidlogic.inference.natural import NaturalInferenceProvider
from bidlogic.inference.types import InferenceConfig


def drill_inference_configs(convention_id, registry, opponent_bidding=False,
                            opponent_convention_id=None):
    """Returns (ns_config, ew_config)."""
    ns_config = InferenceConfig(
        own_partnership=ConventionInferenceProvider(convention_id, registry),
        opponent_partnership=NaturalInferenceProvider())

    ew_own = NaturalInferenceProvider()
    if opponent_bidding:
        opponent_id = opponent_convention_id or convention_id
        if registry.find(opponent_id) is not None:
            ew_own = ConventionInferenceProvider(opponent_id, registry)
        else:
            logging.info("opponent convention %s not registered, "
                         "reading E/W naturally", opponent_id)
    ew_config = InferenceConfig(
        own_partnership=ew_own,
        opponent_partnership=NaturalInferenceProvider())
    return ns_config, ew_config
