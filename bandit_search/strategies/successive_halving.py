"""Successive halving: split the budget into rounds and halve the field after each."""

import logging
import math

from ..utils.vector import argsort
from .base import BaseSearchStrategy

logger = logging.getLogger(__name__)


class SuccessiveHalvingSearch(BaseSearchStrategy):
    """Successive halving search.

    With R = ceil(log2 K) rounds, each round gives every surviving arm
    floor(B / (|S| * R)) pulls and then keeps the top ceil(|S| / 2) by
    latest validation metric. Budget left after the last round goes to
    the single survivor, which is returned.
    """

    name = "successive halving search"

    @staticmethod
    def num_rounds(num_arms: int) -> int:
        return math.ceil(math.log2(num_arms)) if num_arms > 1 else 0

    def min_budget(self, num_arms):
        # Every round must give every survivor at least one pull
        return num_arms * max(1, self.num_rounds(num_arms))

    def _search(self, total_budget, arm_values):
        rounds = self.num_rounds(len(arm_values))
        survivors = list(range(len(arm_values)))
        spent = 0

        for r in range(rounds):
            pulls_each = total_budget // (len(survivors) * rounds)
            for _ in range(pulls_each):
                for i in survivors:
                    arm_values[i].pull()
            spent += pulls_each * len(survivors)

            ranking = argsort(
                self._metric_vector([arm_values[i] for i in survivors]),
                descending=True,
            )
            keep = math.ceil(len(survivors) / 2)
            survivors = [survivors[int(j)] for j in ranking[:keep]]
            logger.debug("Round %d: %d pulls each, survivors %s", r + 1, pulls_each, survivors)

        best = survivors[0]
        while spent < total_budget:
            arm_values[best].pull()
            spent += 1
        return best
