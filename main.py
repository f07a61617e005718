"""
Main script to run a Rock-Paper-Scissors-Lizard-Spock elimination tournament.
"""
import argparse
import json
import logging
import random
import sys
from typing import Callable, List, Optional, Tuple

from rpsls.agents.factory import AGENT_TYPES, parse_agent_spec, create_participants
from rpsls.game.errors import RPSLSError
from rpsls.tournament.display import format_rules, format_roster
from rpsls.tournament.runner import TournamentConfig, TournamentRunner
from rpsls.tournament.simulation import simulate_tournaments, format_summary, DEFAULT_MAX_REPLAYS
from rpsls.utils.constants import MIN_PARTICIPANTS


def read_int(prompt: str, input_fn: Callable[[str], str] = input,
             output_fn: Callable[[str], None] = print) -> int:
    """Prompt until the user enters an integer."""
    while True:
        raw = input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            output_fn("  Please enter a whole number!")


def stderr_input(prompt: str) -> str:
    """Like input(), but writes the prompt to stderr so stdout stays clean."""
    sys.stderr.write(prompt)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip('\n')


def stderr_print(text: str = "") -> None:
    print(text, file=sys.stderr)


def validate_counts(num_humans: int, num_bots: int) -> Optional[str]:
    """
    Check player counts before a tournament is created.

    Returns:
        An error message, or None if the counts are playable
    """
    if num_humans < 0 or num_bots < 0:
        return "Counts cannot be negative!"
    if num_humans == 1 and num_bots == 0:
        return "One player cannot play against themselves, add at least one computer."
    if num_humans + num_bots < MIN_PARTICIPANTS:
        return f"At least {MIN_PARTICIPANTS} participants are needed!"
    return None


def prompt_counts(input_fn: Callable[[str], str] = input,
                  output_fn: Callable[[str], None] = print,
                  num_humans: Optional[int] = None,
                  num_bots: Optional[int] = None) -> Tuple[int, int]:
    """
    Ask for whichever player counts are missing until the roster is playable.

    Counts passed in are kept as given and never asked for again.

    Raises:
        ValueError: If both counts are given and they are not playable
    """
    bots_given = num_bots is not None

    while num_humans is None:
        value = read_int("\n  Number of human players: ", input_fn, output_fn)
        if value < 0:
            error = "Counts cannot be negative!"
        elif bots_given:
            error = validate_counts(value, num_bots)
        else:
            error = None
        if error:
            output_fn(f"  {error}")
        else:
            num_humans = value

    while True:
        if not bots_given:
            num_bots = read_int("  Number of computer players: ", input_fn, output_fn)
        error = validate_counts(num_humans, num_bots)
        if error is None:
            return num_humans, num_bots
        if bots_given:
            raise ValueError(error)
        output_fn(f"  {error}")


def build_specs(num_humans: int, num_bots: int,
                input_fn: Callable[[str], str] = input) -> List[str]:
    """
    Build agent specs for a roster, asking each human for a name.

    A blank name keeps the default 'Player N'.
    """
    specs = []
    for i in range(num_humans):
        name = input_fn(f"  Enter the name of player {i + 1}: ").strip()
        specs.append(f"human:{name}" if name else "human")
    specs.extend(["bot"] * num_bots)
    return specs


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Run a Rock-Paper-Scissors-Lizard-Spock elimination tournament.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Agent specification formats:
  human               Interactive player at the console
  human:NAME          Interactive player with a name
  random              Uniformly random choices
  weighted            Favours Rock, Paper and Scissors
  adaptive            Counters its own most common choice
  cyclic              Cycles through the five choices
  bot                 One of the automated strategies, picked at random
  TYPE:NAME           Any of the above with a custom name

Examples:
  python main.py
  python main.py --humans 1 --bots 7
  python main.py --participants random weighted adaptive cyclic --seed 42 --quiet --json
  python main.py --participants random weighted adaptive cyclic bot bot --simulate 1000
'''
    )
    parser.add_argument('--participants', '-p', type=str, nargs='+',
                        help='Agent specs for the roster (skips interactive setup)')
    parser.add_argument('--humans', type=int,
                        help='Number of human players (asked interactively if omitted)')
    parser.add_argument('--bots', type=int,
                        help='Number of computer players (asked interactively if omitted)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible tournaments')
    parser.add_argument('--max-replays', type=int, default=None,
                        help='Give up on a round after this many replays (default: never)')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final result')
    parser.add_argument('--json', action='store_true',
                        help='Print the full tournament record as JSON')
    parser.add_argument('--simulate', type=int, metavar='N', default=None,
                        help='Run N quiet all-bot tournaments and print statistics')
    parser.add_argument('--no-progress', action='store_true',
                        help='Hide the progress bar in simulation mode')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Diagnostic logging level (default: WARNING)')
    return parser.parse_args(argv)


def run_simulation(args: argparse.Namespace) -> int:
    if not args.participants:
        print("Error: --simulate needs --participants")
        return 1
    try:
        summary = simulate_tournaments(
            args.participants,
            args.simulate,
            seed=args.seed,
            max_replays=args.max_replays if args.max_replays is not None else DEFAULT_MAX_REPLAYS,
            show_progress=not args.no_progress
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(format_summary(summary))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to parse arguments and run the tournament."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(levelname)s %(name)s: %(message)s')

    # Validate agent specs early
    for spec in args.participants or []:
        try:
            parse_agent_spec(spec)
        except ValueError as e:
            print(f"Error: {e}")
            print(f"Available types: {list(AGENT_TYPES.keys()) + ['bot']}")
            return 1

    try:
        if args.simulate is not None:
            return run_simulation(args)

        # Keep stdout for the JSON document; prompts and menus go to stderr
        if args.json:
            input_fn, output_fn = stderr_input, stderr_print
        else:
            input_fn, output_fn = input, print

        verbose = not args.quiet and not args.json
        if verbose:
            print(format_rules())

        if args.participants:
            specs = args.participants
        else:
            for count in (args.humans, args.bots):
                if count is not None and count < 0:
                    print("Error: Counts cannot be negative!")
                    return 1
            if args.humans is not None and args.bots is not None:
                error = validate_counts(args.humans, args.bots)
                if error:
                    print(f"Error: {error}")
                    return 1
                num_humans, num_bots = args.humans, args.bots
            else:
                num_humans, num_bots = prompt_counts(input_fn, output_fn, args.humans, args.bots)
            output_fn()
            specs = build_specs(num_humans, num_bots, input_fn)

        participants = create_participants(
            specs, random.Random(args.seed), input_fn=input_fn, output_fn=output_fn
        )
        has_humans = any(p.is_human for p in participants)
        if verbose:
            print(format_roster(participants))

        config = TournamentConfig(
            seed=args.seed,
            max_replays=args.max_replays,
            pause_between_rounds=verbose and has_humans,
            verbose=verbose
        )
        result = TournamentRunner(participants, config).run()

    except RPSLSError as e:
        print(f"\n  Error: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\n  Interrupted.", file=sys.stderr)
        return 130

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif args.quiet:
        print(result.winner if result.winner else "mutual elimination")
    else:
        print("\n  That's enough playing, wrapping up.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
