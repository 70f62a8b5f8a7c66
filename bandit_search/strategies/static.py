"""
Static baseline strategy for comparison.

Round-robins the whole budget over every arm with no adaptivity, to
compare against the bandit strategies.
"""

from .base import BaseSearchStrategy


class StaticSearch(BaseSearchStrategy):
    """Pull arm[i mod K] for i in 0..budget, then take the best validation.

    With a budget below the arm count only the first `budget` arms are
    pulled, and only those are candidates for the final pick.
    """

    name = "static search"

    def _search(self, total_budget, arm_values):
        num_arms = len(arm_values)
        for i in range(total_budget):
            arm_values[i % num_arms].pull()

        candidates = arm_values[:min(total_budget, num_arms)]
        return self._best_index(candidates)
