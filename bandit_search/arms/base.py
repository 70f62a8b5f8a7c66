"""Base class for search arms.

An arm is one candidate configuration that improves with every pull.
Strategies only see this interface, never the concrete configuration type.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

TRAINING = "training"
VALIDATION = "validation"
CHANNELS = (TRAINING, VALIDATION)


class BaseArm(ABC):
    """Abstract base class for pull-once-at-a-time arms.

    Subclasses implement `_step()` to do one unit of work and report the
    resulting training and validation metrics. This class keeps the
    per-pull history of both channels and the pull counter.

    Larger metric values are better on both channels.
    """

    def __init__(self, name: str):
        """Initialize arm with a name.

        Args:
            name: Human-readable identifier for this arm.
        """
        self.name = name
        self._num_pulls = 0
        self._history: Dict[str, List[float]] = {channel: [] for channel in CHANNELS}

    @property
    def num_pulls(self) -> int:
        """Number of completed pulls since construction or the last reset."""
        return self._num_pulls

    @abstractmethod
    def _step(self) -> Tuple[float, float]:
        """Advance the arm by one unit of work.

        Returns:
            (training_metric, validation_metric) observed after the step.
        """
        pass

    def _reset_state(self) -> None:
        """Rewind subclass work state (optional).

        Arms without internal state beyond the metric history can leave
        this as a no-op.
        """
        pass

    def pull(self) -> None:
        """Spend one unit of budget on this arm."""
        training, validation = self._step()
        self._history[TRAINING].append(float(training))
        self._history[VALIDATION].append(float(validation))
        self._num_pulls += 1

    def _channel(self, channel: str) -> List[float]:
        try:
            return self._history[channel]
        except KeyError:
            raise ValueError(f"Unknown metric channel '{channel}'. Available: {list(CHANNELS)}")

    def current_metric(self, channel: str = VALIDATION, latest: bool = True) -> float:
        """Current value of a metric channel.

        Args:
            channel: "training" or "validation".
            latest: If True, the most recent observation; otherwise the
                best (largest) value observed so far.

        Raises:
            ValueError: If the channel is unknown or the arm was never pulled.
        """
        history = self._channel(channel)
        if not history:
            raise ValueError(f"Arm '{self.name}' has no {channel} observations yet")
        return history[-1] if latest else max(history)

    def metric_history(self, channel: str = VALIDATION) -> Tuple[float, ...]:
        """All observed values of a channel, in pull order."""
        return tuple(self._channel(channel))

    def reset(self) -> "BaseArm":
        """Clear all statistics but keep the configuration.

        Returns:
            self, so allocators can reset and hand out in one step.
        """
        self._num_pulls = 0
        for history in self._history.values():
            history.clear()
        self._reset_state()
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, num_pulls={self._num_pulls})"
