"""Shared data types used across the codebase.

This module contains the small immutable records passed between packages:
- ArmKey: Identity of one arm inside a pool
- ArmInfo: Identity of one search episode
- ArmRecord: Snapshot of one arm's history at the end of an episode
- EpisodeResult: Everything one strategy run produced for one ArmInfo
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple


class ArmKey(NamedTuple):
    """Identifies an arm within a pool: (family name, instance id)."""
    family: str
    instance_id: str


@dataclass(frozen=True)
class ArmInfo:
    """Identity of a search episode.

    Attributes:
        data_name: Dataset the arms are evaluated on.
        num_arms: Number of arms allocated to the episode.
        max_iter: Pull budget per arm.
        trial: Trial index for repeated episodes.
    """
    data_name: str
    num_arms: int
    max_iter: int
    trial: int

    @property
    def total_budget(self) -> int:
        """Episode budget: every arm gets max_iter pulls on average."""
        return self.num_arms * self.max_iter


@dataclass(frozen=True)
class ArmRecord:
    """Per-pull history of one arm, copied out when the episode ends.

    Arms are reset and reused by later episodes, so records never hold
    a reference to the live arm.
    """
    key: ArmKey
    num_pulls: int
    training: Tuple[float, ...] = ()
    validation: Tuple[float, ...] = ()

    @classmethod
    def from_arm(cls, key: ArmKey, arm) -> "ArmRecord":
        return cls(
            key=key,
            num_pulls=arm.num_pulls,
            training=tuple(arm.metric_history("training")),
            validation=tuple(arm.metric_history("validation")),
        )


@dataclass(frozen=True)
class EpisodeResult:
    """Result of one strategy run for one ArmInfo.

    Attributes:
        arm_info: Episode identity.
        strategy: Name of the strategy that produced the result.
        best: Key of the arm the strategy returned (None if not recorded).
        arms: Arm snapshots in the episode's arm order.
    """
    arm_info: ArmInfo
    strategy: str
    best: Optional[ArmKey] = None
    arms: Tuple[ArmRecord, ...] = field(default_factory=tuple)

    @property
    def total_pulls(self) -> int:
        return sum(record.num_pulls for record in self.arms)

    def __repr__(self) -> str:
        """Concise representation for debugging (avoids printing histories)."""
        return (
            f"EpisodeResult(arm_info={self.arm_info!r}, "
            f"strategy={self.strategy!r}, best={self.best!r}, "
            f"num_arms={len(self.arms)}, total_pulls={self.total_pulls})"
        )
