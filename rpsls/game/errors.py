"""
Exceptions raised by the RPSLS tournament.
"""


class RPSLSError(Exception):
    """Base exception for all tournament errors."""
    pass


class InvalidChoiceError(RPSLSError, ValueError):
    """Raised when a value is not one of the five choices."""
    pass


class InsufficientParticipantsError(RPSLSError, ValueError):
    """Raised when scoring, partitioning or a tournament gets fewer than 2 participants."""
    pass


class RuleViolationError(RPSLSError, ValueError):
    """Raised when a justification is requested for a pair that is not a win."""
    pass


class DuplicateParticipantError(RPSLSError, ValueError):
    """Raised when two participants share a name."""
    pass


class ReplayLimitError(RPSLSError, RuntimeError):
    """Raised when a round keeps ending in a draw past the configured limit."""

    def __init__(self, group_label: str, attempts: int):
        where = f" in {group_label}" if group_label else ""
        super().__init__(f"Round{where} still tied after {attempts} attempts")
        self.group_label = group_label
        self.attempts = attempts
