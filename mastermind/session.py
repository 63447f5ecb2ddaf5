"""
Game session
Holds one play-through in memory: the secret, the guess counter and a
fixed-size history with one slot per allowed guess.

A Session is not thread-safe. Only one caller should use a given
session at a time.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import (
    DEFAULT_DIGIT_COUNT,
    DEFAULT_DIGIT_MAX_VALUE,
    DEFAULT_MAX_GUESSES,
    SessionConfig,
    build_session_config,
)
from .engine import is_win, score_guess
from .errors import InvalidDigit, InvalidLength, SessionEnded
from .schemas import GuessEntryOut, SessionState
from .secret import Secret, generate_secret
from .types import GameStatus, RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessResult:
    guess: Tuple[int, ...]
    exact_matches: int
    partial_matches: int
    digit_count: int
    guesses_remaining: int

    @property
    def is_win(self) -> bool:
        return is_win(self.exact_matches, self.digit_count)

    def to_out(self) -> GuessEntryOut:
        return GuessEntryOut(
            guess=list(self.guess),
            exact_matches=self.exact_matches,
            partial_matches=self.partial_matches,
            guesses_remaining=self.guesses_remaining,
            is_win=self.is_win,
        )


class Session:
    def __init__(self, config: SessionConfig, rng: Optional[RandomSource] = None) -> None:
        self._config = config
        if rng is None:
            rng = random.Random(config.seed)
        self._secret: Secret = generate_secret(config.digit_count, config.digit_max_value, rng)
        self._history: List[Optional[GuessResult]] = [None] * config.max_guesses
        self._guess_count = 0
        logger.debug(
            "Session created: %d digits in 1..%d, %d guesses, seeded=%s",
            config.digit_count,
            config.digit_max_value,
            config.max_guesses,
            config.seed is not None,
        )

    # --- Configuration ---

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def digit_count(self) -> int:
        return self._config.digit_count

    @property
    def digit_max_value(self) -> int:
        return self._config.digit_max_value

    @property
    def max_guesses(self) -> int:
        return self._config.max_guesses

    # --- Progress ---

    @property
    def guess_count(self) -> int:
        return self._guess_count

    @property
    def guesses_remaining(self) -> int:
        return self.max_guesses - self._guess_count

    @property
    def last_result(self) -> Optional[GuessResult]:
        if self._guess_count == 0:
            return None
        return self._history[self._guess_count - 1]

    @property
    def is_won(self) -> bool:
        last = self.last_result
        return last is not None and last.is_win

    @property
    def is_over(self) -> bool:
        return self.guesses_remaining <= 0 or self.is_won

    @property
    def status(self) -> GameStatus:
        if self.is_won:
            return "won"
        if self.guesses_remaining <= 0:
            return "lost"
        return "in_progress"

    # --- Play ---

    def guess(self, candidate: Optional[Sequence[int]]) -> GuessResult:
        """
        Score one guess and record it.

        Checks, in order, before anything changes:
          1. candidate has exactly digit_count digits -> else InvalidLength
          2. the game is still in progress            -> else SessionEnded
          3. every digit is within 1..digit_max_value -> else InvalidDigit
        A rejected guess leaves the counter and history untouched.
        """
        if candidate is None:
            logger.debug("Rejected guess: nothing submitted")
            raise InvalidLength(self.digit_count, None)
        try:
            attempt = tuple(candidate)
        except TypeError:
            logger.debug("Rejected guess: %r is not a sequence of digits", candidate)
            raise InvalidLength(self.digit_count, None) from None
        if len(attempt) != self.digit_count:
            logger.debug("Rejected guess: %d digits, expected %d", len(attempt), self.digit_count)
            raise InvalidLength(self.digit_count, len(attempt))

        if self.is_over:
            logger.debug("Rejected guess: game already %s", self.status)
            raise SessionEnded(self.status)

        for digit in attempt:
            # bool is an int subclass but never a digit
            if isinstance(digit, bool) or not isinstance(digit, int) or digit < 1 or digit > self.digit_max_value:
                logger.debug("Rejected guess: digit %r out of range", digit)
                raise InvalidDigit(digit, self.digit_max_value)

        exact_matches, partial_matches = score_guess(self._secret.digits, self._secret.frequencies, attempt)

        result = GuessResult(
            guess=attempt,
            exact_matches=exact_matches,
            partial_matches=partial_matches,
            digit_count=self.digit_count,
            guesses_remaining=self.max_guesses - (self._guess_count + 1),
        )
        self._history[self._guess_count] = result
        self._guess_count += 1

        logger.debug(
            "Guess %d/%d scored: %d exact, %d partial",
            self._guess_count,
            self.max_guesses,
            exact_matches,
            partial_matches,
        )
        if self.is_over:
            logger.info("Game %s after %d guess(es)", self.status, self._guess_count)

        return result

    # --- Snapshots ---

    def history(self) -> List[Optional[GuessResult]]:
        """
        Copy of the history, always max_guesses long.
        Slot i holds the i-th guess, or None if it has not been made yet.
        """
        return list(self._history)

    def reveal_secret(self) -> List[int]:
        # Meant for the end of the game; not enforced here.
        return list(self._secret.digits)

    def state(self) -> SessionState:
        history_out: List[Optional[GuessEntryOut]] = []
        for entry in self._history:
            history_out.append(entry.to_out() if entry is not None else None)

        return SessionState(
            status=self.status,
            digit_count=self.digit_count,
            digit_max_value=self.digit_max_value,
            max_guesses=self.max_guesses,
            guess_count=self._guess_count,
            guesses_remaining=self.guesses_remaining,
            history=history_out,
            secret=self.reveal_secret() if self.is_over else None,
        )


def create_session(
    digit_count: int = DEFAULT_DIGIT_COUNT,
    digit_max_value: int = DEFAULT_DIGIT_MAX_VALUE,
    max_guesses: int = DEFAULT_MAX_GUESSES,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Session:
    """
    Build a new session. Raises InvalidConfiguration if any of
    digit_count, digit_max_value or max_guesses is below 1.
    An injected rng wins over seed.
    """
    config = build_session_config(
        digit_count=digit_count,
        digit_max_value=digit_max_value,
        max_guesses=max_guesses,
        seed=seed,
    )
    return Session(config, rng=rng)
