"""Simple bandit search: explore uniformly, drop the weak arms, exploit the rest."""

import logging

from ..utils.vector import argsort
from .base import BaseSearchStrategy

logger = logging.getLogger(__name__)


class SimpleBanditSearch(BaseSearchStrategy):
    """Successive-elimination style search in three phases.

    1. Exploration: every arm gets `initial_rounds = max(1, floor(alpha * B / K))`
       pulls, swept in arm order.
    2. Selection: rank arms by latest validation metric (descending, stable)
       and keep the top `max(1, floor(alpha * K))`.
    3. Exploitation: round-robin the remaining budget over the kept arms.

    Attributes:
        alpha: Share of the budget spent exploring, and share of arms kept.
    """

    name = "simple bandit search"

    def __init__(self, alpha: float = 0.3, episode_log=None):
        super().__init__(episode_log=episode_log)
        if not 0 < alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha

    def min_budget(self, num_arms):
        # One exploration sweep must fit in the budget
        return num_arms

    def initial_rounds(self, total_budget: int, num_arms: int) -> int:
        return max(1, int(self.alpha * total_budget / num_arms))

    def num_good_arms(self, num_arms: int) -> int:
        return max(1, int(self.alpha * num_arms))

    def _search(self, total_budget, arm_values):
        num_arms = len(arm_values)
        initial_rounds = self.initial_rounds(total_budget, num_arms)

        for _ in range(initial_rounds):
            for arm in arm_values:
                arm.pull()
        spent = initial_rounds * num_arms

        num_good = self.num_good_arms(num_arms)
        ranking = argsort(self._metric_vector(arm_values), descending=True)
        preselected = [int(i) for i in ranking[:num_good]]
        logger.debug(
            "Exploration used %d/%d pulls; keeping arms %s",
            spent, total_budget, preselected,
        )

        while spent < total_budget:
            arm_values[preselected[spent % num_good]].pull()
            spent += 1

        best = self._best_index([arm_values[i] for i in preselected])
        return preselected[best]
