"""
Errors raised by the game session.

Every error here is a caller mistake, never a transient failure:
- InvalidConfiguration -> session settings below their minimums
- InvalidLength        -> guess is missing or has the wrong number of digits
- InvalidDigit         -> a guess digit is outside 1..digit_max_value
- SessionEnded         -> a guess arrived after the game was won or lost

The session never retries or recovers; whoever drives it (the console loop)
catches these and asks again.
"""

from typing import Any, Optional


class MastermindError(Exception):
    """Base class for every error the game raises."""


class InvalidConfiguration(MastermindError, ValueError):
    pass


class InvalidLength(MastermindError, ValueError):
    def __init__(self, expected: int, actual: Optional[int]):
        self.expected = expected
        self.actual = actual
        if actual is None:
            msg = f"Guess must have exactly {expected} digits, got nothing."
        else:
            msg = f"Guess must have exactly {expected} digits, got {actual}."
        super().__init__(msg)


class InvalidDigit(MastermindError, ValueError):
    def __init__(self, digit: Any, max_value: int):
        self.digit = digit
        self.max_value = max_value
        super().__init__(f"Guess digit {digit!r} is not between 1 and {max_value}.")


class SessionEnded(MastermindError, RuntimeError):
    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Game {status}. No more guesses allowed.")
