"""
Utilities module for the RPSLS tournament.
"""
from rpsls.utils.constants import (
    Choice, CHOICE_NAMES, INPUT_KEYS, WINS_AGAINST,
    NO_SPLIT_THRESHOLD, MIN_GROUP_SIZE, MAX_GROUP_SIZE, MIN_PARTICIPANTS,
    CHOICE_WEIGHTS, ADAPTIVE_MIN_HISTORY
)

__all__ = [
    'Choice', 'CHOICE_NAMES', 'INPUT_KEYS', 'WINS_AGAINST',
    'NO_SPLIT_THRESHOLD', 'MIN_GROUP_SIZE', 'MAX_GROUP_SIZE', 'MIN_PARTICIPANTS',
    'CHOICE_WEIGHTS', 'ADAPTIVE_MIN_HISTORY',
]
