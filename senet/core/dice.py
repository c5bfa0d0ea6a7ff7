"""Four-stick throw used in place of a die.

Each stick lands flat side up or down with equal odds. The number of flat
sides counts the steps, except that no flat side at all is worth five.
"""

import random
from typing import Optional

# (steps, probability): 0 flat sides -> 5, otherwise the count itself
ROLL_PROBABILITIES = (
    (5, 1 / 16),
    (1, 4 / 16),
    (2, 6 / 16),
    (3, 4 / 16),
    (4, 1 / 16),
)

ROLL_VALUES = tuple(steps for steps, _ in ROLL_PROBABILITIES)


class StickDice:
    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def seed(self, seed: Optional[int]):
        self.rng.seed(seed)

    def roll(self) -> int:
        """Sample a throw, returning 1..5 steps."""
        r = self.rng.random()
        cumulative = 0.0
        for steps, prob in ROLL_PROBABILITIES:
            cumulative += prob
            if r <= cumulative:
                return steps
        return 1
