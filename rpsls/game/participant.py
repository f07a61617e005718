"""
Participant record for the RPSLS tournament.
"""
from typing import List, TYPE_CHECKING

from rpsls.utils.constants import Choice

if TYPE_CHECKING:
    from rpsls.agents.agent import Agent


class Participant:
    """
    A named tournament entrant backed by a choice source.

    The choice history only grows, one entry per attempt played (replayed
    attempts included). The active flag is cleared by the tournament runner
    when the participant is eliminated and is never set again.
    """

    def __init__(self, name: str, agent: 'Agent'):
        """
        Initialize a participant.

        Args:
            name: Display name, unique within a tournament
            agent: The choice source that decides this participant's moves
        """
        self.name = name
        self.agent = agent
        self.choice_history: List[Choice] = []
        self.active = True

    @property
    def is_human(self) -> bool:
        return self.agent.is_human

    @property
    def type_label(self) -> str:
        """Human-readable description of who is playing."""
        if self.is_human:
            return "Human"
        return f"Computer ({self.agent.name})"

    def make_choice(self) -> Choice:
        """Ask the agent for a choice and record it in the history."""
        choice = self.agent.select_choice(list(self.choice_history))
        self.record_choice(choice)
        return choice

    def record_choice(self, choice: Choice):
        self.choice_history.append(choice)

    def eliminate(self):
        self.active = False

    def __str__(self) -> str:
        return f"Participant({self.name})"

    def __repr__(self) -> str:
        return self.__str__()
