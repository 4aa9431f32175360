"""
Replay runner: reconstruct every board and score vector from a turn log.

The build is pure and eager. One working board is mutated in log order and
a snapshot is taken after each turn, so entry k of the result is the state
after turn k-1 (entry 0 is the start).
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..core.applicator import TurnApplicator
from ..core.board import Board, BoardSnapshot
from ..core.cells import MAX_PLAYERS
from ..core.errors import (
    InvalidPlayerCountError,
    ReplayCancelledError,
    ReplayError,
    UnrecognizedTurnError,
)
from ..core.scores import Scores, initial_scores, next_scores, scorer_known
from ..core.turns import UNKNOWN_PLAYER, Turn, Unrecognized, coerce_turn

logger = logging.getLogger(__name__)

StartBoard = Union[Board, BoardSnapshot, Sequence[Sequence[int]]]
TurnInput = Union[Turn, Mapping[str, Any]]


@dataclass(frozen=True)
class SkippedTurn:
    """
    Turn, or the score pair of a turn, that was ignored.

    Fields:
        index: Position in the turn log
        declared_type: The record's "type" value
        reason: "unknown-kind", "missing-fields" or "unknown-player"
    """
    index: int
    declared_type: Optional[str]
    reason: str


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of a replay build.

    Fields:
        states: Board snapshot per turn boundary (len(turns) + 1 entries)
        scores: Score vector per turn boundary (len(turns) + 1 entries)
        turns: Parsed turns in log order
        skipped: Turns that were tolerated as no-ops
        player_count: Length of every score vector
    """
    states: Tuple[BoardSnapshot, ...]
    scores: Tuple[Scores, ...]
    turns: Tuple[Turn, ...]
    skipped: Tuple[SkippedTurn, ...]
    player_count: int

    def __len__(self) -> int:
        return len(self.states)

    @property
    def last_index(self) -> int:
        return len(self.states) - 1

    def state_at(self, index: int) -> BoardSnapshot:
        return self.states[index]

    def scores_at(self, index: int) -> Scores:
        return self.scores[index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_count": self.player_count,
            "states": [s.to_list() for s in self.states],
            "scores": [list(s) for s in self.scores],
            "turns": [t.to_record() for t in self.turns],
            "skipped": [
                {"index": s.index, "type": s.declared_type, "reason": s.reason}
                for s in self.skipped
            ],
        }


def _declared_type(turn: Turn) -> Optional[str]:
    if isinstance(turn, Unrecognized):
        return turn.declared_type
    return turn.kind


def _check_player_count(player_count: int) -> None:
    if isinstance(player_count, bool) or not isinstance(player_count, int):
        raise InvalidPlayerCountError(f"player count must be an integer, got {player_count!r}")
    if not 1 <= player_count <= MAX_PLAYERS:
        raise InvalidPlayerCountError(f"player count must be between 1 and {MAX_PLAYERS}, got {player_count}")


def build(
    start_board: StartBoard,
    turns: Sequence[TurnInput],
    player_count: int,
    *,
    strict: bool = False,
    should_cancel: Optional[Callable[[], bool]] = None,
    applicator: Optional[TurnApplicator] = None,
) -> ReplayResult:
    """
    Replay turns over start_board.

    Same inputs always produce the same result. Nothing is returned unless
    every turn was processed.

    Args:
        start_board: Initial grid (copied, never mutated)
        turns: Turn variants or raw turn records, in log order
        player_count: Number of players (1..26)
        strict: Fail on the first unrecognized or incomplete turn, or unknown scorer
        should_cancel: Polled before each turn; returning True aborts the build
        applicator: Turn applicator (default handler set if None)

    Returns:
        ReplayResult with len(turns) + 1 states and score vectors

    Raises:
        InvalidPlayerCountError: If player_count is outside 1..26
        OutOfBoundsError / InvalidCellValueError: On a bad turn
        UnrecognizedTurnError: In strict mode, on a turn without board semantics
        UnknownPlayerError: In strict mode, on a score pair for an unknown player
        ReplayCancelledError: If should_cancel returned True
    """
    _check_player_count(player_count)
    applicator = applicator or TurnApplicator()

    current = Board(start_board, player_count=player_count)
    states = [current.snapshot()]
    scores = [initial_scores(player_count)]
    parsed = []
    skipped = []

    for index, raw in enumerate(turns):
        if should_cancel is not None and should_cancel():
            logger.info("Replay cancelled before turn %d", index)
            raise ReplayCancelledError(f"cancelled after {index} of {len(turns)} turns").at_turn(index)

        turn = coerce_turn(raw)
        if isinstance(turn, Unrecognized):
            if strict:
                raise UnrecognizedTurnError(
                    f"{turn.reason} for turn type {turn.declared_type!r}"
                ).at_turn(index)
            logger.warning(
                "Skipping turn %d: %s (type=%r)", index, turn.reason, turn.declared_type
            )
            skipped.append(SkippedTurn(index, turn.declared_type, turn.reason))

        if not strict and not scorer_known(turn, player_count):
            logger.warning("Ignoring score of turn %d: unknown player %r", index, turn.player)
            skipped.append(SkippedTurn(index, _declared_type(turn), UNKNOWN_PLAYER))

        try:
            new_scores = next_scores(scores[-1], turn, player_count, strict=strict)
            applicator.apply(turn, current)
        except ReplayError as exc:
            exc.at_turn(index)
            raise

        parsed.append(turn)
        states.append(current.snapshot())
        scores.append(new_scores)

    logger.info(
        "Replay built: %d turns, %d skipped, %d players",
        len(parsed), len(skipped), player_count,
    )
    return ReplayResult(
        states=tuple(states),
        scores=tuple(scores),
        turns=tuple(parsed),
        skipped=tuple(skipped),
        player_count=player_count,
    )


def replay_game(game_log, strict: bool = False, should_cancel: Optional[Callable[[], bool]] = None) -> ReplayResult:
    """Build the replay for a parsed GameLog."""
    return build(
        game_log.start,
        game_log.turns,
        game_log.info.players,
        strict=strict,
        should_cancel=should_cancel,
    )
