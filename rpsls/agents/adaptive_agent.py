"""
Adaptive Agent for RPSLS.
"""
from collections import Counter
from typing import List

from rpsls.agents.agent import Agent
from rpsls.game.choice import all_choices
from rpsls.game.rules import counters_of
from rpsls.utils.constants import Choice, ADAPTIVE_MIN_HISTORY


class AdaptiveAgent(Agent):
    """
    Agent that counters the move it has thrown most often.

    With fewer than ADAPTIVE_MIN_HISTORY past choices it plays randomly.
    After that it finds its most common past choice (ties go to the earlier
    choice in enumeration order) and plays one of the two choices that beat
    it, picked at random.
    """

    name = "Adaptive"

    def select_choice(self, history: List[Choice]) -> Choice:
        if len(history) < ADAPTIVE_MIN_HISTORY:
            return self.rng.choice(all_choices())

        counts = Counter(history)
        most_common = max(Choice, key=lambda c: (counts[c], -list(Choice).index(c)))
        return self.rng.choice(counters_of(most_common))
