"""
Score tracker: cumulative score vector per turn boundary.

Turns report the mover's new total, not a delta, so tracking is a
replacement at one index. Every turn kind is eligible, pass included.
"""

from typing import Optional, Sequence, Tuple

from .cells import player_index
from .errors import UnknownPlayerError
from .turns import Turn

Scores = Tuple[int, ...]


def initial_scores(player_count: int) -> Scores:
    return (0,) * player_count


def score_update(turn: Turn) -> Optional[Tuple[int, int]]:
    """(player_index, score) carried by turn, or None if it carries no pair."""
    if turn.player is None or turn.score is None:
        return None
    return player_index(turn.player), turn.score


def scorer_known(turn: Turn, player_count: int) -> bool:
    """False only when turn carries a score pair for a player outside the game."""
    update = score_update(turn)
    return update is None or 0 <= update[0] < player_count


def next_scores(
    prev: Sequence[int],
    turn: Turn,
    player_count: Optional[int] = None,
    strict: bool = False,
) -> Scores:
    """
    Derive the score vector after turn. Never mutates prev.

    A pair naming a player outside the score vector changes nothing.

    Raises:
        UnknownPlayerError: In strict mode, if the turn's player is outside the score vector
    """
    scores = tuple(prev)
    update = score_update(turn)
    if update is None:
        return scores

    index, score = update
    count = len(scores) if player_count is None else player_count
    if not 0 <= index < count:
        if strict:
            raise UnknownPlayerError(f"player token {turn.player} does not belong to a {count}-player game")
        return scores
    return scores[:index] + (score,) + scores[index + 1:]
