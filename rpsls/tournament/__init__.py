"""
Tournament module for running elimination tournaments.

Provides:
- score_round / determine_losers: scoring and elimination for one attempt
- partition_into_groups: splitting large rounds into groups of 2-4
- TournamentRunner: orchestrates rounds until one participant remains
"""

from rpsls.tournament.scoring import (
    RoundEntry, ParticipantScore, Comparison, score_round, compare_all, sort_scores
)
from rpsls.tournament.elimination import EliminationOutcome, determine_losers
from rpsls.tournament.grouping import group_sizes, partition_into_groups
from rpsls.tournament.records import AttemptRecord, RoundRecord, TournamentResult
from rpsls.tournament.runner import TournamentConfig, TournamentRunner

__all__ = [
    'RoundEntry',
    'ParticipantScore',
    'Comparison',
    'score_round',
    'compare_all',
    'sort_scores',
    'EliminationOutcome',
    'determine_losers',
    'group_sizes',
    'partition_into_groups',
    'AttemptRecord',
    'RoundRecord',
    'TournamentResult',
    'TournamentConfig',
    'TournamentRunner',
]
