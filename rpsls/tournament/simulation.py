"""
Batch simulation of all-bot tournaments.

Runs many quiet tournaments with the same roster and summarizes which
strategies win and how long tournaments last.
"""
import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from rpsls.agents.factory import create_participants
from rpsls.game.errors import ReplayLimitError
from rpsls.tournament.runner import TournamentConfig, TournamentRunner

logger = logging.getLogger(__name__)

DEFAULT_MAX_REPLAYS = 100


@dataclass
class SimulationSummary:
    """Aggregate results of a batch of tournaments."""
    tournaments: int
    wins_by_strategy: Dict[str, int] = field(default_factory=dict)
    wins_by_name: Dict[str, int] = field(default_factory=dict)
    mutual_eliminations: int = 0
    stalled: int = 0
    mean_rounds: float = 0.0
    std_rounds: float = 0.0
    mean_replays: float = 0.0
    std_replays: float = 0.0

    @property
    def completed(self) -> int:
        return self.tournaments - self.stalled

    def win_rate(self, strategy: str) -> float:
        if self.completed == 0:
            return 0.0
        return self.wins_by_strategy.get(strategy, 0) / self.completed


def simulate_tournaments(
    specs: Sequence[str],
    games: int,
    seed: Optional[int] = None,
    max_replays: int = DEFAULT_MAX_REPLAYS,
    show_progress: bool = True
) -> SimulationSummary:
    """
    Run `games` independent tournaments between automated agents.

    Tournaments that keep tying past `max_replays` are counted as stalled
    and left out of the round statistics.

    Args:
        specs: Agent specs for the roster (no humans)
        games: Number of tournaments to run
        seed: Seed for the whole batch
        max_replays: Replay limit per round or group
        show_progress: Show a tqdm progress bar

    Returns:
        SimulationSummary

    Raises:
        ValueError: If a spec names a human agent or games < 1
    """
    if games < 1:
        raise ValueError("Need at least 1 tournament to simulate")
    if any(s.split(':', 1)[0].strip().lower() == 'human' for s in specs):
        raise ValueError("Simulations can only use automated agents")

    rng = random.Random(seed)
    strategy_wins = Counter()
    name_wins = Counter()
    rounds: List[int] = []
    replays: List[int] = []
    summary = SimulationSummary(tournaments=games)

    for _ in tqdm(range(games), disable=not show_progress, desc="Tournaments"):
        participants = create_participants(specs, rng)
        config = TournamentConfig(max_replays=max_replays, verbose=False)
        runner = TournamentRunner(participants, config, rng=random.Random(rng.getrandbits(64)))

        try:
            result = runner.run()
        except ReplayLimitError as e:
            logger.debug("Tournament stalled: %s", e)
            summary.stalled += 1
            continue

        rounds.append(len(result.rounds))
        replays.append(result.total_replays)
        if result.winner is None:
            summary.mutual_eliminations += 1
            continue

        winner = next(p for p in participants if p.name == result.winner)
        strategy_wins[winner.agent.name] += 1
        name_wins[winner.name] += 1

    summary.wins_by_strategy = dict(strategy_wins)
    summary.wins_by_name = dict(name_wins)
    if rounds:
        summary.mean_rounds = float(np.mean(rounds))
        summary.std_rounds = float(np.std(rounds))
        summary.mean_replays = float(np.mean(replays))
        summary.std_replays = float(np.std(replays))

    return summary


def format_summary(summary: SimulationSummary) -> str:
    """Format a simulation summary for terminal display."""
    lines = ["", "===== Simulation Results ====="]
    lines.append(f"Tournaments: {summary.tournaments} "
                 f"(completed: {summary.completed}, stalled: {summary.stalled})")
    lines.append(f"Rounds per tournament: {summary.mean_rounds:.2f} +/- {summary.std_rounds:.2f}")
    lines.append(f"Replays per tournament: {summary.mean_replays:.2f} +/- {summary.std_replays:.2f}")
    if summary.mutual_eliminations:
        lines.append(f"Mutual eliminations: {summary.mutual_eliminations}")

    lines.append("")
    lines.append(f"{'Strategy':<14}{'Wins':<8}{'Win%':<8}")
    lines.append("-" * 30)
    for strategy, wins in sorted(summary.wins_by_strategy.items(), key=lambda kv: kv[1], reverse=True):
        lines.append(f"{strategy:<14}{wins:<8}{summary.win_rate(strategy):.1%}")

    return "\n".join(lines)
