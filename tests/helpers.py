"""
Shared helpers for the tournament tests.
"""
from typing import Iterable, List

from rpsls.agents.agent import Agent
from rpsls.game.participant import Participant
from rpsls.tournament.scoring import RoundEntry
from rpsls.utils.constants import Choice


class ScriptedAgent(Agent):
    """Agent that plays a fixed sequence of choices, repeating the last one."""

    name = "Scripted"

    def __init__(self, choices: Iterable[Choice], is_human: bool = False):
        super().__init__()
        self.script = list(choices)
        self.is_human = is_human
        self.calls = 0

    def select_choice(self, history: List[Choice]) -> Choice:
        choice = self.script[min(self.calls, len(self.script) - 1)]
        self.calls += 1
        return choice


def scripted(name: str, *choices: Choice, is_human: bool = False) -> Participant:
    return Participant(name, ScriptedAgent(choices, is_human=is_human))


def entries(**choices: Choice) -> List[RoundEntry]:
    """Build round entries from keyword name=Choice pairs."""
    return [RoundEntry(Participant(name, ScriptedAgent([c])), c) for name, c in choices.items()]


