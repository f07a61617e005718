"""
Game rules and participant model for the RPSLS tournament.
"""
from rpsls.game.choice import all_choices, choice_name, parse_choice
from rpsls.game.rules import DuelResult, beats, compare, justification, counters_of
from rpsls.game.participant import Participant
from rpsls.game.errors import (
    RPSLSError,
    InvalidChoiceError,
    InsufficientParticipantsError,
    RuleViolationError,
    DuplicateParticipantError,
    ReplayLimitError,
)

__all__ = [
    'all_choices', 'choice_name', 'parse_choice',
    'DuelResult', 'beats', 'compare', 'justification', 'counters_of',
    'Participant',
    'RPSLSError', 'InvalidChoiceError', 'InsufficientParticipantsError',
    'RuleViolationError', 'DuplicateParticipantError', 'ReplayLimitError',
]
