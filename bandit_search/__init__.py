"""Budgeted best-arm search with multi-armed bandit strategies.

This package provides:
- arms: Arm interface, scripted arms and the arm allocator
- strategies: Search strategies and their registry
- telemetry: Append-only episode log
- utils: Numeric vector helpers

Example usage:
    from bandit_search import ArmsAllocator, ArmInfo, create_search_strategy, run_episode

    allocator = ArmsAllocator(all_arms)
    strategy = create_search_strategy("lil_ucb")
    best = run_episode(strategy, allocator, ArmInfo("msd", 20, 10, 0))
"""

from .types import ArmKey, ArmInfo, ArmRecord, EpisodeResult
from .arms import (
    BaseArm,
    ScriptedArm,
    ArmsAllocator,
    TRAINING,
    VALIDATION,
)
from .strategies import (
    BaseSearchStrategy,
    StaticSearch,
    SimpleBanditSearch,
    ExponentialWeightsSearch,
    LILUCBSearch,
    LUCBSearch,
    SuccessiveHalvingSearch,
    STRATEGY_REGISTRY,
    create_search_strategy,
)
from .telemetry import EpisodeLog
from .config import SearchConfig
from .episode import run_episode

__all__ = [
    # Types
    "ArmKey",
    "ArmInfo",
    "ArmRecord",
    "EpisodeResult",
    # Arms
    "BaseArm",
    "ScriptedArm",
    "ArmsAllocator",
    "TRAINING",
    "VALIDATION",
    # Strategies
    "BaseSearchStrategy",
    "StaticSearch",
    "SimpleBanditSearch",
    "ExponentialWeightsSearch",
    "LILUCBSearch",
    "LUCBSearch",
    "SuccessiveHalvingSearch",
    "STRATEGY_REGISTRY",
    "create_search_strategy",
    # Bookkeeping
    "EpisodeLog",
    # Config
    "SearchConfig",
    "run_episode",
]
