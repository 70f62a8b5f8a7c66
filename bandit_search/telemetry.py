"""Episode Log (Telemetry).

Records what every search episode produced, keyed by the episode's
identity, so runs can be inspected after the fact. The log is owned by
the caller and injected into strategies; it is append-only.
"""

import logging
from typing import Dict, Iterator, List

import pandas as pd

from .types import ArmInfo, EpisodeResult

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "data_name",
    "num_arms",
    "max_iter",
    "trial",
    "strategy",
    "family",
    "instance_id",
    "pull",
    "training",
    "validation",
    "is_best",
]


class EpisodeLog:
    """Append-only mapping of ArmInfo -> EpisodeResult.

    Not synchronized: if one log is shared by episodes running at the
    same time, the caller must serialize `append`.
    """

    def __init__(self):
        self._results: Dict[ArmInfo, EpisodeResult] = {}

    def append(self, result: EpisodeResult) -> EpisodeResult:
        """Store the result of a finished episode.

        Raises:
            ValueError: If a result for the same ArmInfo is already stored.
        """
        if result.arm_info in self._results:
            raise ValueError(f"Episode {result.arm_info} is already recorded")
        self._results[result.arm_info] = result
        logger.info(
            "Recorded episode %s (%s): best=%s, pulls=%d",
            result.arm_info, result.strategy, result.best, result.total_pulls,
        )
        return result

    def __getitem__(self, arm_info: ArmInfo) -> EpisodeResult:
        return self._results[arm_info]

    def __contains__(self, arm_info) -> bool:
        return arm_info in self._results

    def __iter__(self) -> Iterator[ArmInfo]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def keys(self):
        return self._results.keys()

    def values(self):
        return self._results.values()

    def items(self):
        return self._results.items()

    def to_frame(self) -> pd.DataFrame:
        """Flatten every recorded pull into one long-format DataFrame.

        Returns:
            One row per (episode, arm, pull) with columns FRAME_COLUMNS.
            `pull` is 1-based.
        """
        rows: List[dict] = []
        for info, result in self._results.items():
            for record in result.arms:
                for pull, (training, validation) in enumerate(
                    zip(record.training, record.validation), start=1
                ):
                    rows.append({
                        "data_name": info.data_name,
                        "num_arms": info.num_arms,
                        "max_iter": info.max_iter,
                        "trial": info.trial,
                        "strategy": result.strategy,
                        "family": record.key.family,
                        "instance_id": record.key.instance_id,
                        "pull": pull,
                        "training": training,
                        "validation": validation,
                        "is_best": record.key == result.best,
                    })
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)
