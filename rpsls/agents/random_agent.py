"""
Random Agent for RPSLS.
"""
from typing import List

from rpsls.agents.agent import Agent
from rpsls.game.choice import all_choices
from rpsls.utils.constants import Choice


class RandomAgent(Agent):
    """
    Agent that picks uniformly among the five choices.

    This serves as a baseline agent and can be used for testing.
    """

    name = "Random"

    def select_choice(self, history: List[Choice]) -> Choice:
        return self.rng.choice(all_choices())
