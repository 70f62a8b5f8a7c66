"""Hands out arms from a pre-built universe for one search episode."""

import logging
from typing import Dict, List, Mapping, Tuple

from ..types import ArmKey
from .base import BaseArm

logger = logging.getLogger(__name__)


class ArmsAllocator:
    """Allocate pre-generated arms to search episodes.

    Arms that were handed out before ("used") are preferred over arms
    that never were ("unused"), so expensive construction is shared
    across episodes. Every allocated arm is reset, so an episode never
    inherits results from a previous one.

    Not thread-safe: do not allocate overlapping keys while an earlier
    episode that holds them is still running.
    """

    def __init__(self, all_arms: Mapping[ArmKey, BaseArm]):
        """Initialize the allocator.

        Args:
            all_arms: The full universe of arms keyed by ArmKey. Insertion
                order defines the order in which unused arms are drawn.
        """
        self.all_arms: Dict[ArmKey, BaseArm] = dict(all_arms)
        self._used: List[ArmKey] = []
        self._unused: List[ArmKey] = list(self.all_arms.keys())

    @property
    def used_keys(self) -> Tuple[ArmKey, ...]:
        """Keys allocated at least once, in order of first use."""
        return tuple(self._used)

    @property
    def unused_keys(self) -> Tuple[ArmKey, ...]:
        """Keys never allocated, in draw order."""
        return tuple(self._unused)

    def __len__(self) -> int:
        return len(self.all_arms)

    def allocate(self, num_arms: int) -> Dict[ArmKey, BaseArm]:
        """Allocate a number of freshly reset arms.

        Args:
            num_arms: How many arms the episode needs (1..universe size).

        Returns:
            Dict of ArmKey -> reset arm, exactly num_arms entries.

        Raises:
            ValueError: If num_arms is outside 1..universe size.
        """
        if num_arms < 1:
            raise ValueError(f"num_arms must be >= 1, got {num_arms}")
        if num_arms > len(self.all_arms):
            raise ValueError(
                f"Required {num_arms} arms exceed the total amount {len(self.all_arms)}."
            )

        reused = self._used[:num_arms]
        keys = list(reused)
        while len(keys) < num_arms:
            key = self._unused.pop(0)
            self._used.append(key)
            keys.append(key)

        logger.debug(
            "Allocated %d arms (%d reused, %d new)",
            num_arms, len(reused), num_arms - len(reused),
        )
        return {key: self.all_arms[key].reset() for key in keys}
