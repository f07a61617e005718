"""
Cyclic Agent for RPSLS.
"""
from typing import List, Optional
import random

from rpsls.agents.agent import Agent
from rpsls.game.choice import all_choices
from rpsls.utils.constants import Choice


class CyclicAgent(Agent):
    """Agent that walks through the five choices in a fixed order."""

    name = "Cyclic"

    def __init__(self, rng: Optional[random.Random] = None, start: int = 0):
        super().__init__(rng)
        self.cycle = all_choices()
        self.index = start

    def select_choice(self, history: List[Choice]) -> Choice:
        choice = self.cycle[self.index % len(self.cycle)]
        self.index += 1
        return choice
