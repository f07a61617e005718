"""
Agent and participant creation from specification strings.

Formats:
    'random'          -> Random bot with a default name
    'weighted:Ada'    -> Weighted bot named Ada
    'human:Alice'     -> Interactive player named Alice
    'bot'             -> One of the automated strategies, picked at random
"""
import random
from typing import Callable, List, Optional, Sequence, Tuple

from rpsls.agents.agent import Agent
from rpsls.agents.random_agent import RandomAgent
from rpsls.agents.weighted_agent import WeightedAgent
from rpsls.agents.adaptive_agent import AdaptiveAgent
from rpsls.agents.cyclic_agent import CyclicAgent
from rpsls.agents.human_agent import HumanAgent
from rpsls.game.participant import Participant

# Automated strategies
BOT_TYPES = {
    'random': RandomAgent,
    'weighted': WeightedAgent,
    'adaptive': AdaptiveAgent,
    'cyclic': CyclicAgent,
}

AGENT_TYPES = dict(BOT_TYPES, human=HumanAgent)

RANDOM_BOT = 'bot'


def parse_agent_spec(spec: str) -> Tuple[str, Optional[str]]:
    """
    Parse an agent specification string.

    Returns:
        Tuple of (agent_type, name or None)

    Raises:
        ValueError: If the agent type is unknown
    """
    if ':' in spec:
        agent_type, name = spec.split(':', 1)
        name = name.strip() or None
    else:
        agent_type, name = spec, None
    agent_type = agent_type.strip().lower()

    if agent_type not in AGENT_TYPES and agent_type != RANDOM_BOT:
        raise ValueError(f"Unknown agent type: {agent_type}. "
                         f"Available: {list(AGENT_TYPES.keys()) + [RANDOM_BOT]}")
    return agent_type, name


def create_agent(
    agent_type: str,
    rng: Optional[random.Random] = None,
    player_name: str = "Player",
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print
) -> Agent:
    """
    Create an agent of the given type.

    Args:
        agent_type: A key of AGENT_TYPES, or 'bot' for a random strategy
        rng: Random source; the agent gets its own generator seeded from it
        player_name: Name shown in the human prompt
        input_fn: Input function for human agents
        output_fn: Output function for human agents

    Returns:
        Agent instance
    """
    rng = rng or random.Random()
    if agent_type == RANDOM_BOT:
        agent_type = rng.choice(sorted(BOT_TYPES))

    if agent_type not in AGENT_TYPES:
        raise ValueError(f"Unknown agent type: {agent_type}. "
                         f"Available: {list(AGENT_TYPES.keys())}")

    agent_rng = random.Random(rng.getrandbits(64))
    if agent_type == 'human':
        return HumanAgent(player_name, input_fn=input_fn, output_fn=output_fn, rng=agent_rng)
    return AGENT_TYPES[agent_type](rng=agent_rng)


def create_participants(
    specs: Sequence[str],
    rng: Optional[random.Random] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print
) -> List[Participant]:
    """
    Build participants from agent specs.

    Unnamed humans are called 'Player N' and unnamed bots 'Bot N', counted
    separately in spec order.
    """
    rng = rng or random.Random()
    participants = []
    human_count = 0
    bot_count = 0

    for spec in specs:
        agent_type, name = parse_agent_spec(spec)
        if agent_type == 'human':
            human_count += 1
            name = name or f"Player {human_count}"
        else:
            bot_count += 1
            name = name or f"Bot {bot_count}"

        agent = create_agent(agent_type, rng, name, input_fn=input_fn, output_fn=output_fn)
        participants.append(Participant(name, agent))

    return participants
