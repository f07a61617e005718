"""
Constants for the Rock-Paper-Scissors-Lizard-Spock tournament.
"""
from enum import Enum


class Choice(Enum):
    """The five moves a participant can throw."""
    ROCK = "rock"
    SCISSORS = "scissors"
    PAPER = "paper"
    LIZARD = "lizard"
    SPOCK = "spock"


# Display names, in enumeration order
CHOICE_NAMES = {
    Choice.ROCK: "Rock",
    Choice.SCISSORS: "Scissors",
    Choice.PAPER: "Paper",
    Choice.LIZARD: "Lizard",
    Choice.SPOCK: "Spock",
}

# Keys accepted from an interactive player
INPUT_KEYS = {
    "1": Choice.ROCK,
    "2": Choice.SCISSORS,
    "3": Choice.PAPER,
    "4": Choice.LIZARD,
    "5": Choice.SPOCK,
}

# Win table: winner -> {loser: justification}
#
# Each choice beats exactly two others and loses to the remaining two, so the
# ten entries cover every unordered pair of distinct choices exactly once.
WINS_AGAINST = {
    Choice.SCISSORS: {
        Choice.PAPER: "Scissors cuts Paper",
        Choice.LIZARD: "Scissors decapitates Lizard",
    },
    Choice.PAPER: {
        Choice.ROCK: "Paper covers Rock",
        Choice.SPOCK: "Paper disproves Spock",
    },
    Choice.ROCK: {
        Choice.LIZARD: "Rock crushes Lizard",
        Choice.SCISSORS: "Rock crushes Scissors",
    },
    Choice.LIZARD: {
        Choice.SPOCK: "Lizard poisons Spock",
        Choice.PAPER: "Lizard eats Paper",
    },
    Choice.SPOCK: {
        Choice.SCISSORS: "Spock smashes Scissors",
        Choice.ROCK: "Spock vaporizes Rock",
    },
}

# Tournament structure
NO_SPLIT_THRESHOLD = 5  # More active players than this are split into groups
MIN_GROUP_SIZE = 2
MAX_GROUP_SIZE = 4
MIN_PARTICIPANTS = 2

# Weights used by the weighted bot
CHOICE_WEIGHTS = {
    Choice.ROCK: 2,
    Choice.PAPER: 2,
    Choice.SCISSORS: 2,
    Choice.LIZARD: 1,
    Choice.SPOCK: 1,
}

# The adaptive bot only counters once it has seen this many of its own moves
ADAPTIVE_MIN_HISTORY = 3
