"""
Agents module for the RPSLS tournament.
"""
from rpsls.agents.agent import Agent
from rpsls.agents.random_agent import RandomAgent
from rpsls.agents.weighted_agent import WeightedAgent
from rpsls.agents.adaptive_agent import AdaptiveAgent
from rpsls.agents.cyclic_agent import CyclicAgent
from rpsls.agents.human_agent import HumanAgent
from rpsls.agents.factory import (
    AGENT_TYPES, BOT_TYPES, parse_agent_spec, create_agent, create_participants
)

__all__ = [
    'Agent', 'RandomAgent', 'WeightedAgent', 'AdaptiveAgent', 'CyclicAgent', 'HumanAgent',
    'AGENT_TYPES', 'BOT_TYPES', 'parse_agent_spec', 'create_agent', 'create_participants',
]
