"""Simulation engine.

Architecture Note:
    world/ is the stateful service layer. It owns the registry and the
    simulated clock, and is the only place robots are mutated.
"""

from robotsim.world.world import DestructionSink, World

__all__ = [
    "World",
    "DestructionSink",
]
