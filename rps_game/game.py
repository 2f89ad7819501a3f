"""Core game logic for Rock-Paper-Scissors."""
from __future__ import annotations
import enum
import logging
import random
from dataclasses import dataclass
from typing import Optional, Union

logger = logging.getLogger(__name__)


class RpsError(Exception):
    """Base class for rps_game errors."""


class InvalidMove(RpsError, ValueError):
    def __init__(self, value: str):
        super().__init__(f"invalid move: {value!r}. valid moves: {VALID_MOVES}")
        self.value = value


class Move(enum.Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def beats(self, other: "Move") -> bool:
        return BEATS[self] is other


class GameResult(enum.Enum):
    USER_WIN = "You win!"
    TIE = "Tie"
    OPPONENT_WIN = "You lose!"

    @property
    def phrase(self) -> str:
        return self.value

    def inverse(self) -> "GameResult":
        """Result of the same round seen from the opponent's side."""
        if self is GameResult.USER_WIN:
            return GameResult.OPPONENT_WIN
        if self is GameResult.OPPONENT_WIN:
            return GameResult.USER_WIN
        return self


VALID_MOVES = tuple(m.value for m in Move)

# move -> the move it beats
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}

# order of rng.randrange(3) draws; must stay fixed for seeded runs
DRAW_ORDER = (Move.ROCK, Move.PAPER, Move.SCISSORS)


@dataclass(frozen=True)
class RoundResult:
    player: Move
    opponent: Move
    result: GameResult


def parse_move(text: str) -> Move:
    """Parse a case-insensitive move name.

    Only "rock", "paper" and "scissors" are accepted; surrounding
    whitespace is not stripped.
    """
    try:
        return Move(text.lower())
    except (ValueError, AttributeError):
        raise InvalidMove(text) from None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Seeded generator when `seed` is given, OS entropy otherwise."""
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)


def random_move(rng: Optional[random.Random] = None) -> Move:
    """Return a uniformly drawn move for the computer."""
    if rng is None:
        rng = make_rng()
    return DRAW_ORDER[rng.randrange(3)]


def decide_winner(player: Move, opponent: Move) -> GameResult:
    """Decide the winner for a single round.

    Returns:
      USER_WIN if player beats opponent,
      OPPONENT_WIN if opponent beats player,
      TIE if same move.
    """
    if player is opponent:
        return GameResult.TIE
    if player.beats(opponent):
        return GameResult.USER_WIN
    return GameResult.OPPONENT_WIN


def play_round(
    player_move: Union[Move, str],
    opponent_move: Union[Move, str, None] = None,
    rng: Optional[random.Random] = None,
) -> RoundResult:
    """Play a single round.

    Args:
      player_move: player's move, a Move or case-insensitive text
      opponent_move: if None, the computer draws one from `rng`.
      rng: generator used for the draw; OS entropy when omitted.
    """
    pm = player_move if isinstance(player_move, Move) else parse_move(player_move)
    if opponent_move is None:
        om = random_move(rng)
        logger.debug("opponent drew %s", om.label)
    elif isinstance(opponent_move, Move):
        om = opponent_move
    else:
        om = parse_move(opponent_move)

    result = decide_winner(pm, om)
    logger.debug("%s vs %s -> %s", pm.label, om.label, result.name)
    return RoundResult(pm, om, result)
