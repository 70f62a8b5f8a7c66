"""Single search episode: allocate, search, record."""

import logging
from typing import Optional

from .arms.allocator import ArmsAllocator
from .strategies.base import BaseSearchStrategy
from .types import ArmInfo, ArmKey

logger = logging.getLogger(__name__)


def run_episode(
    strategy: BaseSearchStrategy,
    allocator: ArmsAllocator,
    arm_info: ArmInfo,
    total_budget: Optional[int] = None,
) -> ArmKey:
    """Run one strategy over freshly allocated arms and record the result.

    Args:
        strategy: Strategy to run; its episode log receives the result.
        allocator: Pool to draw arm_info.num_arms arms from.
        arm_info: Episode identity.
        total_budget: Pull budget. Defaults to arm_info.total_budget
            (num_arms * max_iter).

    Returns:
        Key of the chosen arm.
    """
    budget = arm_info.total_budget if total_budget is None else total_budget
    arms = allocator.allocate(arm_info.num_arms)
    logger.debug("Episode %s: running %s with budget %d", arm_info, strategy.name, budget)

    best = strategy.search(budget, arms)
    strategy.record_episode(arm_info, arms, best)
    return best
