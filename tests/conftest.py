"""Shared fixtures: deterministic arms with known metric curves."""

import math
from typing import Dict, List

import pytest

from bandit_search import ArmKey, ScriptedArm


class RecordingArm(ScriptedArm):
    """Scripted arm that writes its name to a shared journal on every pull."""

    def __init__(self, name, validation, journal: List[str], training=None):
        super().__init__(name, validation, training=training)
        self.journal = journal

    def pull(self):
        super().pull()
        self.journal.append(self.name)


def make_arms(schedules: Dict[str, object], journal=None, family="scripted") -> Dict[ArmKey, ScriptedArm]:
    """Build an ordered ArmKey -> arm mapping from name -> schedule."""
    arms = {}
    for name, schedule in schedules.items():
        if journal is None:
            arm = ScriptedArm(name, schedule)
        else:
            arm = RecordingArm(name, schedule, journal)
        arms[ArmKey(family, name)] = arm
    return arms


# Scenario curves indexed by 1-based pull count
SCENARIO = {
    "A": lambda k: 0.1 + 0.02 * k,       # improves linearly
    "B": lambda k: 0.5,                  # constant
    "C": lambda k: 0.9 - 0.05 * k,       # decays
    "D": lambda k: 0.05 * math.sin(k),   # noise around 0
}


@pytest.fixture
def journal():
    return []


@pytest.fixture
def scenario_arms():
    return make_arms(SCENARIO)


@pytest.fixture
def recorded_scenario_arms(journal):
    return make_arms(SCENARIO, journal=journal)


@pytest.fixture
def constant_arms(journal):
    """Four stationary arms, best validation first."""
    return make_arms({"a": [0.9], "b": [0.5], "c": [0.4], "d": [0.1]}, journal=journal)
