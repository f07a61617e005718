"""
Outcome rules for Rock-Paper-Scissors-Lizard-Spock.
"""
from enum import Enum
from typing import List

from rpsls.utils.constants import Choice, WINS_AGAINST
from rpsls.game.errors import RuleViolationError


class DuelResult(Enum):
    """Outcome of one choice against another, from the first choice's side."""
    A_WINS = "a_wins"
    B_WINS = "b_wins"
    DRAW = "draw"


def beats(winner: Choice, loser: Choice) -> bool:
    """Return True if `winner` beats `loser`."""
    return loser in WINS_AGAINST[winner]


def compare(choice_a: Choice, choice_b: Choice) -> DuelResult:
    """
    Compare two choices.

    Equal choices draw. For distinct choices exactly one direction is listed
    in the win table, so the result is never ambiguous.

    Args:
        choice_a: First choice
        choice_b: Second choice

    Returns:
        DuelResult from choice_a's perspective
    """
    if choice_a == choice_b:
        return DuelResult.DRAW
    if beats(choice_a, choice_b):
        return DuelResult.A_WINS
    return DuelResult.B_WINS


def justification(winner: Choice, loser: Choice) -> str:
    """
    Return the phrase explaining why `winner` beats `loser`.

    Raises:
        RuleViolationError: If the pair is a draw or the reversed direction
    """
    try:
        return WINS_AGAINST[winner][loser]
    except KeyError:
        raise RuleViolationError(
            f"{winner.name} does not beat {loser.name}"
        ) from None


def counters_of(target: Choice) -> List[Choice]:
    """Return the choices that beat `target`, in enumeration order."""
    return [c for c in Choice if beats(c, target)]
