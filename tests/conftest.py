"""
- Keep tests independent of the developer's shell: drop MASTERMIND_* env vars
  and stop python-dotenv from reading a local .env.
- Provide a scripted random source so a test can pick the secret it wants.
- Provide a make_session factory built on top of it.
"""

import os
from typing import Iterable, List, Optional

import pytest

import mastermind.config as config_module
from mastermind.session import Session, create_session


class ScriptedRandom:
    """Stands in for random.Random: randint() hands out pre-chosen values in order."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self._values.pop(0)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("MASTERMIND_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    yield


@pytest.fixture
def make_session():
    """
    make_session([1, 2, 3, 4])                    -> 4 digits, 1..6, 10 guesses
    make_session([1, 2], max_guesses=1)           -> custom limits
    """
    def _make(secret: List[int], digit_max_value: int = 6, max_guesses: int = 10, seed: Optional[int] = None) -> Session:
        return create_session(
            digit_count=len(secret),
            digit_max_value=digit_max_value,
            max_guesses=max_guesses,
            seed=seed,
            rng=ScriptedRandom(secret),
        )
    return _make
