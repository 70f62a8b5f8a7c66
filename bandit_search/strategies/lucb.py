"""
LUCB Strategy (paired lower and upper confidence bound pulls).

Based on "PAC Subset Selection in Stochastic Multi-armed Bandits"
-- Kalyanakrishnan, Tewari, Auer & Stone (2012).
"""

import numpy as np

from ..utils.vector import argsort, divide, log, sqrt, subtract
from .base import BaseSearchStrategy


def lucb_initial_radius(pulls, delta: float) -> np.ndarray:
    """Radius after the first sweep: 1.5 * sqrt(0.5 * ln(ln(3 n) / delta) / n)."""
    n = np.atleast_1d(np.asarray(pulls, dtype=float))
    # No factor 5 inside the outer log, unlike lil_radius
    return 1.5 * sqrt(divide(0.5 * log(log(3.0 * n) / delta), n))


def lucb_radius(pulls: float, t: int, num_arms: int, k1: float, delta: float) -> float:
    """Confidence radius sqrt(0.5 * ln(k1 * K * t4 / delta) / n).

    t4 = max(t^2 / 4, 1)^2, evaluated at the round's first pull.
    """
    t2nd = max(t * t / 4.0, 1.0)
    t4th = t2nd * t2nd
    inner = log([k1 * num_arms * t4th / delta])
    return float(sqrt(divide(0.5 * inner, [pulls]))[0])


class LUCBSearch(BaseSearchStrategy):
    """LUCB search: two pulls per round, one exploit and one explore.

    After one pull of every arm, each round ranks the arms twice, once by
    empirical mean (descending) and once by confidence-adjusted bound
    ucb = mean - c (ascending). It then pulls:
    (a) the top arm by mean;
    (b) the top arm by bound, or the second one if the top arm by bound
        is the arm picked in (a).

    Only the two arms just pulled get a new radius. The loop stops when
    fewer than two budget units remain, so an odd remainder is left
    unspent. The final pick is the best validation value each arm reached.

    Attributes:
        delta: Confidence parameter.
        k1: Extra constant in the per-round radius.
    """

    name = "LUCB search"
    # The explore pick must differ from the exploit pick
    min_arms = 2

    def __init__(self, delta: float = 0.1, k1: float = 1.25, episode_log=None):
        super().__init__(episode_log=episode_log)
        if not 0 < delta < 1:
            raise ValueError(f"delta must be in (0, 1), got {delta}")
        if k1 <= 0:
            raise ValueError(f"k1 must be > 0, got {k1}")
        self.delta = delta
        self.k1 = k1

    def min_budget(self, num_arms):
        return num_arms

    def _pull(self, arm_values, counts, sums, it):
        arm = arm_values[it]
        arm.pull()
        sums[it] += arm.current_metric()
        counts[it] += 1

    def _search(self, total_budget, arm_values):
        num_arms = len(arm_values)

        counts = np.zeros(num_arms)
        sums = np.zeros(num_arms)
        for i in range(num_arms):
            self._pull(arm_values, counts, sums, i)

        radii = lucb_initial_radius(counts, self.delta)
        ucb = subtract(divide(sums, counts), radii)

        t = num_arms
        while t + 2 <= total_budget:
            by_mean = argsort(divide(sums, counts), descending=True)
            by_bound = argsort(ucb)

            first = int(by_mean[0])
            self._pull(arm_values, counts, sums, first)
            t += 1
            round_t = t
            ucb[first] = sums[first] / counts[first] - lucb_radius(
                counts[first], round_t, num_arms, self.k1, self.delta
            )

            second = int(by_bound[1]) if by_bound[0] == first else int(by_bound[0])
            self._pull(arm_values, counts, sums, second)
            t += 1
            ucb[second] = sums[second] / counts[second] - lucb_radius(
                counts[second], round_t, num_arms, self.k1, self.delta
            )

        return self._best_index(arm_values, latest=False)
