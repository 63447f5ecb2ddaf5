"""
Labels for clarity.
"""

from typing import List, Literal, Protocol

Digit = int  # 1 -> digit_max_value
Code = List[Digit]  # one secret or one guess
GameStatus = Literal["in_progress", "won", "lost"]
SeedSource = Literal["local", "random_org"]


class RandomSource(Protocol):
    """Anything that can hand out integers like random.Random.randint (both ends inclusive)."""

    def randint(self, a: int, b: int) -> int: ...
