"""
- HTTP call with clear fallback
Get one random seed from random.org. If anything goes wrong (no internet,
timeout, bad response), we fall back to a local secure random generator so
the game still starts.

The session itself never does I/O; only the console entry point calls this,
and only when asked to (MASTERMIND_SEED_SOURCE=random_org or --random-org).
"""

import logging
from secrets import randbelow

import requests

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"
SEED_MIN = 1
SEED_MAX = 1_000_000_000
TIMEOUT_SECONDS = 3.0


def fetch_seed() -> int:
    # Parameters to send to random.org
    params = {
        "num": 1,           # one number is enough to seed the local generator
        "min": SEED_MIN,    # smallest allowed number
        "max": SEED_MAX,    # largest allowed number (random.org limit)
        "col": 1,           # one number per line
        "base": 10,         # normal decimal numbers
        "format": "plain",  # plain text response
        "rnd": "new",       # always generate new numbers
    }

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=TIMEOUT_SECONDS)
        response.raise_for_status()

        # The body looks like:
        #   482913\n
        lines = [line.strip() for line in response.text.splitlines() if line.strip()]
        if len(lines) != 1:
            raise ValueError(f"random.org returned {len(lines)} values, expected 1.")

        seed = int(lines[0])
        if seed < SEED_MIN or seed > SEED_MAX:
            raise ValueError(f"random.org number {seed} out of range {SEED_MIN}..{SEED_MAX}.")

        logger.debug("Seed fetched from random.org")
        return seed

    except (requests.RequestException, ValueError) as exc:
        # Fallback: Python's secure random, same range as random.org
        logger.warning("random.org unavailable (%s); using a local seed", exc)
        return SEED_MIN + randbelow(SEED_MAX - SEED_MIN + 1)
