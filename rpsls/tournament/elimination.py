"""
Elimination policy: who leaves the tournament after an attempt.
"""
from dataclasses import dataclass, field
from typing import List, Mapping

from rpsls.game.participant import Participant
from rpsls.game.errors import InsufficientParticipantsError
from rpsls.tournament.scoring import ParticipantScore
from rpsls.utils.constants import MIN_PARTICIPANTS


@dataclass
class EliminationOutcome:
    """
    Decision for one attempt.

    Either a replay (everyone tied, nobody leaves) or a non-empty list of
    participants sharing the worst balance.
    """
    replay: bool
    eliminated: List[Participant] = field(default_factory=list)

    @property
    def eliminated_names(self) -> List[str]:
        return [p.name for p in self.eliminated]


def determine_losers(scores: Mapping[str, ParticipantScore]) -> EliminationOutcome:
    """
    Decide the outcome of an attempt from its scores.

    If every balance is equal the attempt is void and must be replayed.
    Otherwise everyone whose balance equals the minimum is eliminated
    together; ties at the bottom are never broken.

    Args:
        scores: Dict mapping participant name -> ParticipantScore

    Returns:
        EliminationOutcome

    Raises:
        InsufficientParticipantsError: If fewer than 2 scores are given
    """
    if len(scores) < MIN_PARTICIPANTS:
        raise InsufficientParticipantsError(
            f"Need at least {MIN_PARTICIPANTS} scores to decide losers, got {len(scores)}"
        )

    balances = [s.balance for s in scores.values()]
    lowest, highest = min(balances), max(balances)

    if lowest == highest:
        return EliminationOutcome(replay=True)

    losers = [s.participant for s in scores.values() if s.balance == lowest]
    return EliminationOutcome(replay=False, eliminated=losers)
