"""
LIL-UCB Strategy (law of the iterated logarithm confidence bounds).

Based on "lil' UCB: An Optimal Exploration Algorithm for Multi-Armed
Bandits" -- Jamieson, Malloy, Nowak & Bubeck (2014).
"""

import numpy as np

from ..utils.vector import argmin, divide, log, sqrt, subtract
from .base import BaseSearchStrategy


def lil_radius(pulls, delta: float):
    """Confidence radius 1.5 * sqrt(0.5 * ln(5 ln(3 n) / delta) / n).

    Accepts a scalar or a vector of pull counts, all of which must be >= 1.
    """
    n = np.atleast_1d(np.asarray(pulls, dtype=float))
    if np.any(n < 1):
        raise ValueError(f"Confidence radius needs at least one pull per arm, got {n.tolist()}")
    inner = log(5.0 * log(3.0 * n) / delta)
    radius = 1.5 * sqrt(divide(0.5 * inner, n))
    return radius if np.ndim(pulls) else float(radius[0])


class LILUCBSearch(BaseSearchStrategy):
    """LIL-UCB search.

    Per-arm state: pull count n, reward sum s, radius c and bound
    ucb = s / n - c. After one pull of every arm, each round pulls
    argmin(ucb) and refreshes only that arm's n, s, c and ucb.

    The final pick reads a different signal from the per-round one: the
    best validation value each arm reached over the whole episode, not its
    latest value.

    Attributes:
        delta: Confidence parameter.
    """

    name = "law of iterated logarithm upper confidence bound search"

    def __init__(self, delta: float = 0.1, episode_log=None):
        super().__init__(episode_log=episode_log)
        if not 0 < delta < 1:
            raise ValueError(f"delta must be in (0, 1), got {delta}")
        self.delta = delta

    def min_budget(self, num_arms):
        return num_arms

    def _search(self, total_budget, arm_values):
        num_arms = len(arm_values)

        counts = np.zeros(num_arms)
        sums = np.zeros(num_arms)
        for i, arm in enumerate(arm_values):
            arm.pull()
            sums[i] += arm.current_metric()
            counts[i] += 1

        radii = lil_radius(counts, self.delta)
        ucb = subtract(divide(sums, counts), radii)

        t = num_arms
        while t < total_budget:
            it = argmin(ucb)
            arm = arm_values[it]
            arm.pull()
            sums[it] += arm.current_metric()
            counts[it] += 1
            radii[it] = lil_radius(counts[it], self.delta)
            ucb[it] = sums[it] / counts[it] - radii[it]
            t += 1

        return self._best_index(arm_values, latest=False)
