"""Deterministic arms driven by a fixed metric schedule."""

from typing import Callable, Optional, Sequence, Union

from .base import BaseArm

Schedule = Union[Callable[[int], float], Sequence[float]]


def _as_callable(schedule: Schedule) -> Callable[[int], float]:
    if callable(schedule):
        return schedule
    values = [float(v) for v in schedule]
    if not values:
        raise ValueError("A metric schedule needs at least one value")
    # Past the end of the sequence the last value repeats
    return lambda k: values[min(k, len(values)) - 1]


class ScriptedArm(BaseArm):
    """Deterministic arm whose k-th pull (1-based) reads a fixed schedule.

    Stands in for a trained model when exercising strategies: the metric
    curve is known in advance, so search outcomes are reproducible.
    """

    def __init__(
        self,
        name: str,
        validation: Schedule,
        training: Optional[Schedule] = None,
    ):
        super().__init__(name)
        self._validation = _as_callable(validation)
        self._training = _as_callable(training) if training is not None else self._validation

    def _step(self):
        k = self.num_pulls + 1
        return self._training(k), self._validation(k)
