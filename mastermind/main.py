"""
Console Mastermind

Usage:
  mastermind [--digits N] [--max-digit M] [--guesses G] [--seed S] [--random-org] [--log-level LEVEL]

Settings come from env / .env first (see config.py); flags override them.
Seed resolution: --seed / MASTERMIND_SEED, else random.org when asked,
else a fresh local random secret.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, build_session_config, load_config
from .console import ConsoleGame
from .errors import InvalidConfiguration
from .random_client import fetch_seed
from .session import Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mastermind", description="Guess the hidden digit code.")
    parser.add_argument("--digits", type=int, default=None, help="digits per code")
    parser.add_argument("--max-digit", type=int, default=None, help="highest digit value (lowest is 1)")
    parser.add_argument("--guesses", type=int, default=None, help="attempt limit")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible secret")
    parser.add_argument("--random-org", action="store_true", help="seed the secret from random.org")
    parser.add_argument("--log-level", default=None, help="logging level (default WARNING)")
    return parser


def resolve_session(app_config: AppConfig, args: argparse.Namespace) -> Session:
    base = app_config.session
    seed = args.seed if args.seed is not None else base.seed
    if seed is None and (args.random_org or app_config.seed_source == "random_org"):
        seed = fetch_seed()

    config = build_session_config(
        digit_count=args.digits if args.digits is not None else base.digit_count,
        digit_max_value=args.max_digit if args.max_digit is not None else base.digit_max_value,
        max_guesses=args.guesses if args.guesses is not None else base.max_guesses,
        seed=seed,
    )
    return Session(config)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        app_config = load_config()
        if args.log_level is not None:
            app_config = app_config.with_overrides(log_level=args.log_level)
    except InvalidConfiguration as exc:
        print(exc, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.getLevelName(app_config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        session = resolve_session(app_config, args)
    except InvalidConfiguration as exc:
        print(exc, file=sys.stderr)
        return 2

    status = ConsoleGame(session).play()
    logger.debug("Console game finished with status %s", status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
