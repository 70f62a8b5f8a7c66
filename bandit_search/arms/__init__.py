"""Arm implementations and the arm pool.

- BaseArm: capability interface every strategy depends on
- ScriptedArm: deterministic arm driven by a fixed metric schedule
- ArmsAllocator: hands out reset arms per episode, reusing used ones first
"""

from .base import BaseArm, CHANNELS, TRAINING, VALIDATION
from .scripted import ScriptedArm
from .allocator import ArmsAllocator

__all__ = [
    "BaseArm",
    "CHANNELS",
    "TRAINING",
    "VALIDATION",
    "ScriptedArm",
    "ArmsAllocator",
]
