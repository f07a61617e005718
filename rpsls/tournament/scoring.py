"""
Round scoring: pairwise comparisons and per-participant win/loss balance.
"""
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from rpsls.game.participant import Participant
from rpsls.game.rules import DuelResult, compare, justification
from rpsls.game.errors import InsufficientParticipantsError
from rpsls.utils.constants import Choice, MIN_PARTICIPANTS


@dataclass(frozen=True)
class RoundEntry:
    """A participant's choice for one attempt of a round."""
    participant: Participant
    choice: Choice


@dataclass
class ParticipantScore:
    """Wins and losses for one participant within a single attempt."""
    participant: Participant
    choice: Choice
    wins: int = 0
    losses: int = 0

    @property
    def balance(self) -> int:
        return self.wins - self.losses


@dataclass(frozen=True)
class Comparison:
    """Result of one pairwise comparison between two entries."""
    first: RoundEntry
    second: RoundEntry
    result: DuelResult

    @property
    def is_draw(self) -> bool:
        return self.result == DuelResult.DRAW

    @property
    def winner(self) -> Optional[RoundEntry]:
        if self.result == DuelResult.A_WINS:
            return self.first
        if self.result == DuelResult.B_WINS:
            return self.second
        return None

    @property
    def loser(self) -> Optional[RoundEntry]:
        if self.result == DuelResult.A_WINS:
            return self.second
        if self.result == DuelResult.B_WINS:
            return self.first
        return None

    @property
    def justification(self) -> Optional[str]:
        """The rule phrase for the winning pair, or None on a draw."""
        if self.is_draw:
            return None
        return justification(self.winner.choice, self.loser.choice)


def _require_entries(entries: Sequence[RoundEntry]):
    if len(entries) < MIN_PARTICIPANTS:
        raise InsufficientParticipantsError(
            f"Need at least {MIN_PARTICIPANTS} entries to score a round, got {len(entries)}"
        )


def compare_all(entries: Sequence[RoundEntry]) -> List[Comparison]:
    """
    Compare every unordered pair of entries exactly once.

    Pairs are produced in entry order: (0, 1), (0, 2), ..., (1, 2), ...

    Raises:
        InsufficientParticipantsError: If fewer than 2 entries are given
    """
    _require_entries(entries)
    return [
        Comparison(first=a, second=b, result=compare(a.choice, b.choice))
        for a, b in combinations(entries, 2)
    ]


def tally(entries: Sequence[RoundEntry], comparisons: Sequence[Comparison]) -> Dict[str, ParticipantScore]:
    """Aggregate comparisons into a score per participant name."""
    scores = {
        e.participant.name: ParticipantScore(participant=e.participant, choice=e.choice)
        for e in entries
    }
    for comparison in comparisons:
        if comparison.is_draw:
            continue
        scores[comparison.winner.participant.name].wins += 1
        scores[comparison.loser.participant.name].losses += 1
    return scores


def score_round(entries: Sequence[RoundEntry]) -> Dict[str, ParticipantScore]:
    """
    Score one attempt of a round.

    Every unordered pair of entries is compared once; the winner gains a
    win and the loser a loss, draws count for neither. Participant state is
    not touched.

    Args:
        entries: The entries for this attempt, one per participant

    Returns:
        Dict mapping participant name -> ParticipantScore, in entry order

    Raises:
        InsufficientParticipantsError: If fewer than 2 entries are given
    """
    return tally(entries, compare_all(entries))


def sort_scores(scores: Sequence[ParticipantScore]) -> List[ParticipantScore]:
    """Order scores for display: best balance first, then most wins."""
    return sorted(scores, key=lambda s: (s.balance, s.wins), reverse=True)
