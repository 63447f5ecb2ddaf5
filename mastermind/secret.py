"""
Secret generation.
Draws the hidden code once per session. Digits are picked independently,
so repeats are allowed (it is not a shuffle of distinct digits).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .engine import count_digits
from .types import RandomSource


@dataclass(frozen=True)
class Secret:
    digits: Tuple[int, ...]
    # frequencies[v] = how many times v appears in digits (read-only view)
    frequencies: Mapping[int, int]


def generate_secret(digit_count: int, digit_max_value: int, rng: RandomSource) -> Secret:
    """
    Example (digit_count=4, digit_max_value=6):
      digits      = (3, 1, 3, 6)
      frequencies = {3: 2, 1: 1, 6: 1}
    Same rng state -> same secret.
    """
    digits = []
    for _ in range(digit_count):
        digits.append(rng.randint(1, digit_max_value))

    return Secret(
        digits=tuple(digits),
        frequencies=MappingProxyType(dict(count_digits(digits))),
    )
