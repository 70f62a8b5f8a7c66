"""
Base class for Search Strategies (The Logic).
"""

import logging
from abc import ABC, abstractmethod
from numbers import Integral
from typing import List, Mapping, Optional

import numpy as np

from ..arms.base import BaseArm, VALIDATION
from ..telemetry import EpisodeLog
from ..types import ArmInfo, ArmKey, ArmRecord, EpisodeResult

logger = logging.getLogger(__name__)


class BaseSearchStrategy(ABC):
    """Base class for budgeted best-arm search.

    Every variant runs the same three phases over a fixed arm order:
    1. Init: a deterministic, budget-bounded warm-up.
    2. Adaptive loop: rank/select -> pull -> update statistics.
    3. Terminal selection: pick the best arm by a variant-specific metric.

    Supports optional episode log injection. If no log is provided, the
    strategy keeps a private one.

    Subclasses must implement:
    - _search(): run the phases and return the index of the chosen arm
    """

    name = "base"
    # Smallest arm count the variant's statistics are defined for
    min_arms = 1

    def __init__(self, episode_log: Optional[EpisodeLog] = None):
        """Initialize strategy.

        Args:
            episode_log: Optional caller-owned log for recorded episodes.
        """
        self._episode_log = episode_log if episode_log is not None else EpisodeLog()

    @property
    def results(self) -> EpisodeLog:
        """Episodes recorded through this strategy."""
        return self._episode_log

    def min_budget(self, num_arms: int) -> int:
        """Smallest budget for which the variant spends exactly its budget."""
        return 1

    def search(self, total_budget: int, arms: Mapping[ArmKey, BaseArm]) -> ArmKey:
        """Spend total_budget pulls over arms and return the best key.

        Args:
            total_budget: Number of pulls available (positive integer).
            arms: ArmKey -> arm. Iteration order fixes the arm indices
                for the whole episode.

        Returns:
            Key of the arm judged best.

        Raises:
            ValueError: On an empty arm set, a non-positive budget, or a
                budget/arm count the variant cannot work with. Raised
                before any pull is issued.
        """
        if not arms:
            raise ValueError("No arms to search over")
        if isinstance(total_budget, bool) or not isinstance(total_budget, Integral):
            raise ValueError(f"total_budget must be an integer, got {total_budget!r}")
        if total_budget < 1:
            raise ValueError(f"total_budget must be >= 1, got {total_budget}")

        keys = list(arms.keys())
        arm_values = [arms[key] for key in keys]
        num_arms = len(keys)

        if num_arms < self.min_arms:
            raise ValueError(f"{self.name} needs at least {self.min_arms} arms, got {num_arms}")
        minimum = self.min_budget(num_arms)
        if total_budget < minimum:
            raise ValueError(
                f"{self.name} needs a budget of at least {minimum} for {num_arms} arms, "
                f"got {total_budget}"
            )

        pulls_before = sum(arm.num_pulls for arm in arm_values)
        best_idx = self._search(int(total_budget), arm_values)
        pulls = sum(arm.num_pulls for arm in arm_values) - pulls_before

        logger.info(
            "%s: %d arms, budget %d, %d pulls, best %s",
            self.name, num_arms, total_budget, pulls, keys[best_idx],
        )
        return keys[best_idx]

    @abstractmethod
    def _search(self, total_budget: int, arm_values: List[BaseArm]) -> int:
        """Run the episode.

        Args:
            total_budget: Validated budget.
            arm_values: Arms in the fixed episode order.

        Returns:
            Index into arm_values of the chosen arm.
        """
        pass

    def record_episode(
        self,
        arm_info: ArmInfo,
        arms: Mapping[ArmKey, BaseArm],
        best: Optional[ArmKey] = None,
    ) -> EpisodeResult:
        """Snapshot the arms of a finished episode into the log.

        Args:
            arm_info: Episode identity.
            arms: The arms the episode searched over.
            best: Key returned by search(), if known.

        Returns:
            The stored EpisodeResult.
        """
        result = EpisodeResult(
            arm_info=arm_info,
            strategy=self.name,
            best=best,
            arms=tuple(ArmRecord.from_arm(key, arm) for key, arm in arms.items()),
        )
        return self._episode_log.append(result)

    @staticmethod
    def _metric_vector(
        arm_values: List[BaseArm],
        channel: str = VALIDATION,
        latest: bool = True,
    ) -> np.ndarray:
        """Current metric of every arm as a float vector."""
        return np.array(
            [arm.current_metric(channel, latest=latest) for arm in arm_values],
            dtype=float,
        )

    @classmethod
    def _best_index(
        cls,
        arm_values: List[BaseArm],
        channel: str = VALIDATION,
        latest: bool = True,
    ) -> int:
        """Index of the arm with the largest metric (first one on ties)."""
        return int(np.argmax(cls._metric_vector(arm_values, channel, latest)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(episodes={len(self._episode_log)})"
