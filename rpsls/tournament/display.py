"""
Display formatting for tournament progress and results.

Turns the structured records into text for terminal output.
"""
from typing import List, Sequence

from rpsls.game.choice import choice_name
from rpsls.game.participant import Participant
from rpsls.tournament.records import AttemptRecord, TournamentResult
from rpsls.utils.constants import WINS_AGAINST

RULE = "=" * 60


def _prefix(group_label: str) -> str:
    return f"[{group_label}] " if group_label else ""


def format_rules() -> str:
    """Format the title banner, win table and tournament mechanics."""
    lines = [RULE, "  ROCK-PAPER-SCISSORS-LIZARD-SPOCK", "  Mode: everyone against everyone", RULE, ""]
    lines.append("  Rules:")
    for beaten in WINS_AGAINST.values():
        for phrase in beaten.values():
            lines.append(f"  - {phrase}")
    lines.append("")
    lines.append("  Mechanics:")
    lines.append("  - Everyone chooses at the same time each round")
    lines.append("  - The player(s) with the worst win/loss balance are eliminated")
    lines.append("  - If everyone is tied, the round is replayed")
    lines.append("  - With more than 5 players, they are split into groups of 2-4")
    lines.append("  - The last one standing wins!")
    return "\n".join(lines)


def format_roster(participants: Sequence[Participant]) -> str:
    lines = ["", "  Tournament participants:"]
    for i, p in enumerate(participants, 1):
        lines.append(f"    {i}. {p.name} ({p.type_label})")
    return "\n".join(lines)


def format_round_header(round_number: int, active_count: int) -> str:
    return "\n".join([
        "",
        RULE,
        f"  ROUND {round_number}",
        f"  Players remaining: {active_count}",
        RULE,
    ])


def format_groups(groups: List[List[str]], active_count: int) -> str:
    lines = ["", f"  Many players ({active_count}), splitting into {len(groups)} groups:"]
    for i, names in enumerate(groups, 1):
        lines.append(f"    Group {i}: {', '.join(names)}")
    return "\n".join(lines)


def format_balance(balance: int) -> str:
    return f"+{balance}" if balance > 0 else str(balance)


def format_attempt(record: AttemptRecord) -> str:
    """
    Format one attempt: the choices, every comparison, the score table and
    the elimination or replay announcement.

    Args:
        record: The attempt to format

    Returns:
        Formatted string for terminal display
    """
    prefix = _prefix(record.group_label)
    lines = ["", f"  {prefix}Choices:"]
    for entry in record.entries:
        lines.append(f"    {entry.participant.name}: {choice_name(entry.choice)}")

    lines.append("")
    lines.append(f"  {prefix}Comparisons:")
    for c in record.comparisons:
        if c.is_draw:
            lines.append(f"    {c.first.participant.name} = {c.second.participant.name} (draw)")
        else:
            lines.append(f"    {c.winner.participant.name} > {c.loser.participant.name} -- {c.justification}")

    lines.append("")
    lines.append(f"  {prefix}Results:" if prefix else "  Round results:")
    for s in record.scores:
        lines.append(f"    {s.participant.name} -- {s.wins}W/{s.losses}L (balance: {format_balance(s.balance)})")

    if record.outcome.replay:
        lines.append("")
        lines.append(f"  {prefix}Draw! Replaying...")
    else:
        by_name = {s.participant.name: s for s in record.scores}
        for name in record.outcome.eliminated_names:
            s = by_name[name]
            lines.append("")
            lines.append(f"  {prefix}{name} is eliminated! ({s.wins}W/{s.losses}L)")

    return "\n".join(lines)


def format_group_separator() -> str:
    return "\n" + "-" * 40


def format_final_result(result: TournamentResult) -> str:
    if result.winner is not None:
        return "\n".join(["", RULE, f"  WINNER: {result.winner}", RULE])
    return "\n  All remaining players were eliminated at once, it's a draw"
