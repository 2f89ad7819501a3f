"""Command-line interface for the Rock-Paper-Scissors game."""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional

from .game import InvalidMove, make_rng, parse_move, play_round
from .settings import load_settings

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _seed(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rps", description="A basic command line rock paper scissors game.")
    p.add_argument("move", help="Your move: rock, paper or scissors (any case)")
    p.add_argument("seed", type=_seed, nargs="?", default=None, help="Seed for a reproducible opponent move")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return p


def setup_logging(level_name: str, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        parser.error(f"RPS_SEED must be an integer ({exc})")
    setup_logging(settings.log_level, args.verbose)

    try:
        player = parse_move(args.move)
    except InvalidMove as exc:
        print(f"Invalid move: {exc.value!r}", file=sys.stderr)
        return 1

    seed = args.seed
    if seed is not None:
        logger.debug("using seed %d from command line", seed)
    elif settings.seed is not None:
        if settings.seed < 0:
            parser.error("RPS_SEED must be non-negative")
        seed = settings.seed
        logger.debug("using seed %d from RPS_SEED", seed)
    else:
        logger.debug("no seed given, drawing from OS entropy")

    outcome = play_round(player, rng=make_rng(seed))
    print(f"Opponent's move: {outcome.opponent.label}. {outcome.result.phrase}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
