"""
Pure game logic (no I/O, no session state).
We compute two feedback numbers for each guess:
- exact_matches: how many indices are exactly correct (right digit, right place)
- partial_matches: digits that appear elsewhere in the secret, NOT counting
  the exact ones, and never more times than the secret still has them.

We allow duplicates in both the secret and the guess.
Counts are kept per digit value that actually occurs, so the work per guess
depends on the code length only, never on the size of the digit range.
"""

from collections import Counter
from typing import Mapping, Sequence, Tuple


def count_digits(digits: Sequence[int]) -> Counter:
    """Frequency table: digit value -> how many times it occurs."""
    return Counter(digits)


def score_guess(secret: Sequence[int], frequencies: Mapping[int, int], guess: Sequence[int]) -> Tuple[int, int]:
    """
    Example:
      secret = [1, 1, 2, 2]
      guess  = [1, 2, 1, 2]
      exact_matches   = 2  (positions 0 and 3)
      partial_matches = 2  (the 2 at index 1 and the 1 at index 2 each use up
                            the one remaining unmatched copy in the secret)
      Returns a tuple: (exact_matches, partial_matches)

    `frequencies` is the secret's table from count_digits(). The caller has
    already checked that guess has the secret's length and valid digits.
    """
    n = len(secret)
    if len(guess) != n:
        raise ValueError("Secret and guess must be the same length.")

    # How many copies of each digit value have been matched so far
    consumed: Counter = Counter()

    # 1. Exact matches use up their copy first
    exact_matches = 0
    for i in range(n):
        if guess[i] == secret[i]:
            exact_matches += 1
            consumed[guess[i]] += 1

    # 2. Partial matches only take copies nobody has used yet
    partial_matches = 0
    for i in range(n):
        digit = guess[i]
        if digit == secret[i]:
            continue
        if consumed[digit] < frequencies.get(digit, 0):
            partial_matches += 1
            consumed[digit] += 1

    return (exact_matches, partial_matches)


def is_win(exact_matches: int, digit_count: int) -> bool:
    """Win = every position matched."""
    return exact_matches == digit_count
