"""
Structured records of what happened during a tournament.

The runner fills these in as it plays; the display layer and the JSON
output read from them.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rpsls.game.choice import choice_name
from rpsls.tournament.scoring import RoundEntry, Comparison, ParticipantScore
from rpsls.tournament.elimination import EliminationOutcome


@dataclass
class AttemptRecord:
    """One collect-score-decide pass over a round or group."""
    group_label: str
    attempt: int
    entries: List[RoundEntry]
    comparisons: List[Comparison]
    scores: List[ParticipantScore]  # sorted for display
    outcome: EliminationOutcome

    @property
    def replay(self) -> bool:
        return self.outcome.replay

    def to_dict(self) -> Dict[str, Any]:
        return {
            'group': self.group_label,
            'attempt': self.attempt,
            'choices': [
                {'participant': e.participant.name, 'choice': choice_name(e.choice)}
                for e in self.entries
            ],
            'comparisons': [
                {
                    'first': c.first.participant.name,
                    'second': c.second.participant.name,
                    'winner': c.winner.participant.name if c.winner else None,
                    'justification': c.justification,
                }
                for c in self.comparisons
            ],
            'scores': [
                {
                    'participant': s.participant.name,
                    'wins': s.wins,
                    'losses': s.losses,
                    'balance': s.balance,
                }
                for s in self.scores
            ],
            'replay': self.outcome.replay,
            'eliminated': self.outcome.eliminated_names,
        }


@dataclass
class RoundRecord:
    """Everything that happened in one tournament round."""
    round_number: int
    active_count: int
    groups: List[List[str]] = field(default_factory=list)
    attempts: List[AttemptRecord] = field(default_factory=list)

    @property
    def eliminated(self) -> List[str]:
        names = []
        for attempt in self.attempts:
            names.extend(attempt.outcome.eliminated_names)
        return names

    @property
    def replays(self) -> int:
        return sum(1 for a in self.attempts if a.replay)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'round': self.round_number,
            'active_count': self.active_count,
            'groups': self.groups,
            'attempts': [a.to_dict() for a in self.attempts],
            'eliminated': self.eliminated,
        }


@dataclass
class TournamentResult:
    """Complete results of a tournament."""
    participants: List[str]
    winner: Optional[str] = None
    mutual_elimination: bool = False
    rounds: List[RoundRecord] = field(default_factory=list)

    @property
    def elimination_order(self) -> List[List[str]]:
        """Names eliminated in each round, first round first."""
        return [r.eliminated for r in self.rounds]

    @property
    def total_replays(self) -> int:
        return sum(r.replays for r in self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'participants': self.participants,
            'winner': self.winner,
            'mutual_elimination': self.mutual_elimination,
            'rounds': [r.to_dict() for r in self.rounds],
        }
