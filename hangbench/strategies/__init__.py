from __future__ import annotations
from typing import List
from .base import BaseStrategy, REGISTRY, register

# Importing a strategy module registers it by side-effect.
from .random_order import RandomStrategy
from .frequency_table import FrequencyTableStrategy
from .adaptive import AdaptiveFilteringStrategy
from .letters import LETTER_ORDER, letter_order

# Order in which a full sweep runs the strategies (cheapest first).
STRATEGY_ORDER = ("random", "frequency", "adaptive")


def create_strategy(strategy_id: str, **kwargs) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_strategy_ids() -> List[str]:
    """
    Return registered strategy ids in sweep order, then any others sorted.
    """
    known = [s for s in STRATEGY_ORDER if s in REGISTRY]
    return known + sorted(s for s in REGISTRY if s not in STRATEGY_ORDER)
