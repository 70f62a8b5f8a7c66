"""Search strategies for budgeted best-arm identification.

Each variant is selected by name through the registry:
    - static: round-robin baseline
    - simple_bandit: explore, eliminate, exploit
    - exp3: exponential weights
    - lil_ucb: law-of-the-iterated-logarithm confidence bounds
    - lucb: paired lower/upper confidence bound pulls
    - successive_halving: halve the field every round
"""

from typing import Dict, Optional, Type

from ..telemetry import EpisodeLog
from .base import BaseSearchStrategy
from .static import StaticSearch
from .simple_bandit import SimpleBanditSearch
from .exp3 import ExponentialWeightsSearch
from .lil_ucb import LILUCBSearch, lil_radius
from .lucb import LUCBSearch, lucb_initial_radius, lucb_radius
from .successive_halving import SuccessiveHalvingSearch

# Registry of available strategies
STRATEGY_REGISTRY: Dict[str, Type[BaseSearchStrategy]] = {
    "static": StaticSearch,
    "simple_bandit": SimpleBanditSearch,
    "exp3": ExponentialWeightsSearch,
    "lil_ucb": LILUCBSearch,
    "lucb": LUCBSearch,
    "successive_halving": SuccessiveHalvingSearch,
}


def create_search_strategy(
    strategy_type: str,
    config=None,
    episode_log: Optional[EpisodeLog] = None,
    **kwargs
) -> BaseSearchStrategy:
    """Factory function to create search strategy instances.

    Args:
        strategy_type: Name of the strategy, a key of STRATEGY_REGISTRY.
        config: Optional SearchConfig for default parameters.
        episode_log: Optional caller-owned log shared with the strategy.
        **kwargs: Override parameters.
            For simple_bandit: alpha (float), default 0.3
            For exp3: seed (int), default 42
            For lil_ucb: delta (float), default 0.1
            For lucb: delta (float), k1 (float), defaults 0.1 and 1.25

    Returns:
        Configured strategy instance.

    Raises:
        ValueError: If strategy_type is not recognized.
    """
    if strategy_type not in STRATEGY_REGISTRY:
        available = list(STRATEGY_REGISTRY.keys())
        raise ValueError(
            f"Unknown strategy type: {strategy_type}. "
            f"Available: {available}"
        )

    strategy_class = STRATEGY_REGISTRY[strategy_type]
    params = {}

    if config is not None:
        if strategy_type == "simple_bandit":
            params["alpha"] = config.alpha
        elif strategy_type == "exp3":
            params["seed"] = config.random_seed
        elif strategy_type == "lil_ucb":
            params["delta"] = config.delta
        elif strategy_type == "lucb":
            params["delta"] = config.delta
            params["k1"] = config.k1

    params.update(kwargs)
    return strategy_class(episode_log=episode_log, **params)


__all__ = [
    "BaseSearchStrategy",
    "StaticSearch",
    "SimpleBanditSearch",
    "ExponentialWeightsSearch",
    "LILUCBSearch",
    "LUCBSearch",
    "SuccessiveHalvingSearch",
    "STRATEGY_REGISTRY",
    "create_search_strategy",
    "lil_radius",
    "lucb_initial_radius",
    "lucb_radius",
]
