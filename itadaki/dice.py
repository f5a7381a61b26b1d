"""
Randomness providers for dice rolls and Chance draws.

The session never touches the global ``random`` module. Pass a
``SeededRandomSource`` for normal play or a ``ScriptedRandomSource`` to
replay a fixed sequence in tests.
"""

import random
from collections import deque
from typing import Iterable, Optional, Protocol, runtime_checkable

from itadaki.exceptions import RandomSourceExhausted


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can roll a die and draw a Chance delta."""

    def roll_die(self, faces: int) -> int:
        """Uniform integer in ``[1, faces]``."""
        ...

    def draw_chance_delta(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""
        ...


class SeededRandomSource:
    """Default source backed by its own ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def roll_die(self, faces: int) -> int:
        return self.rng.randint(1, faces)

    def draw_chance_delta(self, low: int, high: int) -> int:
        return self.rng.randint(low, high)


class ScriptedRandomSource:
    """
    Replays pre-chosen values in order.

    Values are returned as given; no range check is applied so tests can
    force edge cases such as very large rolls.
    """

    def __init__(self, rolls: Iterable[int] = (), chance_deltas: Iterable[int] = ()):
        self.rolls = deque(rolls)
        self.chance_deltas = deque(chance_deltas)

    def roll_die(self, faces: int) -> int:
        if not self.rolls:
            raise RandomSourceExhausted("No scripted dice rolls left")
        return self.rolls.popleft()

    def draw_chance_delta(self, low: int, high: int) -> int:
        if not self.chance_deltas:
            raise RandomSourceExhausted("No scripted chance deltas left")
        return self.chance_deltas.popleft()
