"""
Base Agent class for RPSLS choice sources.
"""
import random
from abc import ABC, abstractmethod
from typing import List, Optional

from rpsls.utils.constants import Choice


class Agent(ABC):
    """
    Abstract base class for RPSLS agents.

    An agent is the choice source behind a participant. All agents must
    implement select_choice, which receives the participant's own past
    choices and returns one of the five choices.
    """

    name = "Agent"
    is_human = False

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize an agent.

        Args:
            rng: Random source for the agent's decisions (a fresh one if None)
        """
        self.rng = rng or random.Random()

    @abstractmethod
    def select_choice(self, history: List[Choice]) -> Choice:
        """
        Select a choice for the current round.

        Args:
            history: The participant's previous choices, oldest first

        Returns:
            The selected Choice
        """
        pass
