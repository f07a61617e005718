"""
Interactive agent that asks a person at the console.
"""
from typing import Callable, List, Optional
import random

from rpsls.agents.agent import Agent
from rpsls.game.choice import parse_choice, choice_name
from rpsls.game.errors import InvalidChoiceError
from rpsls.utils.constants import Choice, INPUT_KEYS


class HumanAgent(Agent):
    """
    Agent backed by console input.

    The player is shown a numbered menu and re-prompted until they enter
    a menu key or a choice name. Input and output functions are injectable so the
    agent can be driven from tests.
    """

    name = "Human"
    is_human = True

    def __init__(
        self,
        player_name: str = "Player",
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        rng: Optional[random.Random] = None
    ):
        super().__init__(rng)
        self.player_name = player_name
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_choice(self, history: List[Choice]) -> Choice:
        self.output_fn(f"\n  {self.player_name}, make your choice:")
        for key, choice in INPUT_KEYS.items():
            self.output_fn(f"    {key}. {choice_name(choice)}")

        while True:
            raw = self.input_fn("  Your choice (1-5): ")
            try:
                return parse_choice(raw)
            except InvalidChoiceError:
                self.output_fn("  Invalid input. Try again.")
