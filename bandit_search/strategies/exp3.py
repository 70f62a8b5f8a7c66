"""
Exponential-weights search (EXP3 style).

Samples arms in proportion to exponentially decaying weights of their
accumulated metric, after one forced sweep over all arms.
"""

import math
from typing import Optional

import numpy as np

from ..utils.vector import choose_one, normalize_log
from .base import BaseSearchStrategy


class ExponentialWeightsSearch(BaseSearchStrategy):
    """EXP3-style search.

    State per arm: weight w (starts at 1) and cumulative loss l (starts
    at 0). Learning rate eta = sqrt(2 ln K / (K B)).

    Each round t:
        p_t = w / sum(w)                    (recomputed, w never rescaled)
        i_t = t if t < K else sample(p_t)
        pull i_t; l[i_t] += latest validation; w[i_t] = exp(-eta * l[i_t])

    The final pick is the arm with the best latest validation metric, not
    the arm the weights favor.

    Args:
        seed: Seed for the sampling generator.
    """

    name = "exponential weight search"
    # ln(1) = 0 leaves eta degenerate
    min_arms = 2

    def __init__(self, seed: Optional[int] = 42, episode_log=None):
        super().__init__(episode_log=episode_log)
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    @staticmethod
    def learning_rate(num_arms: int, total_budget: int) -> float:
        return math.sqrt(2 * math.log(num_arms) / (num_arms * total_budget))

    def _search(self, total_budget, arm_values):
        num_arms = len(arm_values)
        eta = self.learning_rate(num_arms, total_budget)

        losses = np.zeros(num_arms)
        # w = exp(log_weights); kept in log space so any metric scale is safe
        log_weights = np.zeros(num_arms)

        for t in range(total_budget):
            probabilities = normalize_log(log_weights)
            it = t if t < num_arms else choose_one(probabilities, self.rng)
            arm = arm_values[it]
            arm.pull()
            losses[it] += arm.current_metric()
            log_weights[it] = -eta * losses[it]

        candidates = arm_values[:min(total_budget, num_arms)]
        return self._best_index(candidates)
