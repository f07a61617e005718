"""
Weighted Agent for RPSLS.
"""
from typing import Dict, List, Optional
import random

from rpsls.agents.agent import Agent
from rpsls.utils.constants import Choice, CHOICE_WEIGHTS


class WeightedAgent(Agent):
    """
    Agent that favours the classic three moves.

    Rock, Paper and Scissors are twice as likely as Lizard and Spock
    with the default weights.
    """

    name = "Weighted"

    def __init__(self, rng: Optional[random.Random] = None,
                 weights: Optional[Dict[Choice, int]] = None):
        """
        Initialize a weighted agent.

        Args:
            rng: Random source for the agent's decisions
            weights: Relative weight per choice (defaults to CHOICE_WEIGHTS)
        """
        super().__init__(rng)
        self.weights = dict(weights or CHOICE_WEIGHTS)
        if any(w < 0 for w in self.weights.values()) or sum(self.weights.values()) <= 0:
            raise ValueError("Weights must be non-negative with a positive total")

    def select_choice(self, history: List[Choice]) -> Choice:
        choices = [c for c in Choice if c in self.weights]
        return self.rng.choices(choices, weights=[self.weights[c] for c in choices])[0]
