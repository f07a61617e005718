"""
Tournament runner that orchestrates an elimination tournament.

Each round every active participant picks a choice, all pairs are compared,
and the participant(s) with the worst balance are eliminated. All-tied
attempts are replayed. With more than five active participants the round is
played in independent groups of 2-4.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from rpsls.game.participant import Participant
from rpsls.game.errors import (
    InsufficientParticipantsError,
    DuplicateParticipantError,
    ReplayLimitError,
)
from rpsls.tournament.scoring import (
    RoundEntry,
    ParticipantScore,
    compare_all,
    tally,
    sort_scores,
)
from rpsls.tournament.elimination import EliminationOutcome, determine_losers
from rpsls.tournament.grouping import partition_into_groups
from rpsls.tournament.records import AttemptRecord, RoundRecord, TournamentResult
from rpsls.tournament.display import (
    format_round_header,
    format_groups,
    format_group_separator,
    format_attempt,
    format_final_result,
)
from rpsls.utils.constants import NO_SPLIT_THRESHOLD, MIN_PARTICIPANTS

logger = logging.getLogger(__name__)

EliminationPolicy = Callable[[Mapping[str, ParticipantScore]], EliminationOutcome]


@dataclass
class TournamentConfig:
    """Configuration for a tournament run."""
    no_split_threshold: int = NO_SPLIT_THRESHOLD
    seed: Optional[int] = None
    max_replays: Optional[int] = None  # None replays forever
    pause_between_rounds: bool = False
    verbose: bool = True


class TournamentRunner:
    """
    Orchestrates an elimination tournament between participants.

    Usage:
        runner = TournamentRunner(participants, TournamentConfig(seed=7))
        result = runner.run()
    """

    def __init__(
        self,
        participants: Sequence[Participant],
        config: Optional[TournamentConfig] = None,
        elimination_policy: EliminationPolicy = determine_losers,
        rng: Optional[random.Random] = None,
        output_fn: Callable[[str], None] = print,
        input_fn: Callable[[str], str] = input
    ):
        """
        Initialize the tournament runner.

        Args:
            participants: Entrants, in roster order
            config: Tournament configuration (defaults if None)
            elimination_policy: Decides replay or losers for each attempt
            rng: Random source for group shuffles (seeded from config if None)
            output_fn: Where verbose text goes
            input_fn: Used to wait between rounds when pausing is enabled

        Raises:
            InsufficientParticipantsError: If fewer than 2 participants
            DuplicateParticipantError: If two participants share a name
        """
        self.participants = list(participants)
        self.config = config or TournamentConfig()
        self.elimination_policy = elimination_policy
        self.rng = rng or random.Random(self.config.seed)
        self.output_fn = output_fn
        self.input_fn = input_fn
        self.round_number = 0

        self._validate_participants()

    def _validate_participants(self):
        if len(self.participants) < MIN_PARTICIPANTS:
            raise InsufficientParticipantsError(
                f"Need at least {MIN_PARTICIPANTS} participants for a tournament"
            )
        seen = set()
        for p in self.participants:
            if p.name in seen:
                raise DuplicateParticipantError(f"Duplicate participant name: {p.name}")
            seen.add(p.name)

    def _emit(self, text: str):
        if self.config.verbose:
            self.output_fn(text)

    def active_participants(self) -> List[Participant]:
        return [p for p in self.participants if p.active]

    def run(self) -> TournamentResult:
        """
        Play rounds until at most one participant is left.

        Returns:
            TournamentResult with the winner, or mutual_elimination set if
            the last round removed everyone
        """
        result = TournamentResult(participants=[p.name for p in self.participants])
        logger.info("Tournament started with %d participants", len(self.participants))

        while len(self.active_participants()) > 1:
            result.rounds.append(self.play_round())

            if self.config.pause_between_rounds and len(self.active_participants()) > 1:
                self.input_fn("\n  Press Enter to continue...")

        remaining = self.active_participants()
        if remaining:
            result.winner = remaining[0].name
            logger.info("Tournament won by %s after %d rounds", result.winner, len(result.rounds))
        else:
            result.mutual_elimination = True
            logger.warning("All remaining participants were eliminated in round %d", self.round_number)

        self._emit(format_final_result(result))
        return result

    def play_round(self) -> RoundRecord:
        """Play one round, splitting into groups when there are many players."""
        self.round_number += 1
        active = self.active_participants()
        record = RoundRecord(round_number=self.round_number, active_count=len(active))

        self._emit(format_round_header(self.round_number, len(active)))
        logger.debug("Round %d with %d active", self.round_number, len(active))

        if len(active) > self.config.no_split_threshold:
            groups = partition_into_groups(active, self.rng)
            record.groups = [[p.name for p in g] for g in groups]
            self._emit(format_groups(record.groups, len(active)))
            logger.debug("Round %d groups: %s", self.round_number, record.groups)

            for i, group in enumerate(groups, 1):
                self._emit(format_group_separator())
                self.play_until_resolved(group, f"Group {i}", record)
        else:
            self.play_until_resolved(active, "", record)

        return record

    def play_until_resolved(
        self,
        group: Sequence[Participant],
        group_label: str,
        record: RoundRecord
    ) -> List[Participant]:
        """
        Replay attempts over a group until someone is eliminated.

        Losers are deactivated once the attempt that names them is over.

        Returns:
            The participants eliminated from this group

        Raises:
            ReplayLimitError: If max_replays is set and the group keeps tying
        """
        attempt = 0
        while True:
            attempt += 1
            attempt_record = self.run_attempt(group, group_label, attempt)
            record.attempts.append(attempt_record)

            losers = attempt_record.outcome.eliminated
            if not attempt_record.outcome.replay and losers:
                break

            logger.debug("%s attempt %d tied, replaying", group_label or "Round", attempt)
            if self.config.max_replays is not None and attempt > self.config.max_replays:
                raise ReplayLimitError(group_label, attempt)

        for loser in losers:
            loser.eliminate()
        logger.info("Round %d%s: eliminated %s", self.round_number,
                    f" ({group_label})" if group_label else "",
                    ", ".join(p.name for p in losers))
        return losers

    def run_attempt(self, group: Sequence[Participant], group_label: str, attempt: int) -> AttemptRecord:
        """Collect fresh choices from the group, score them and apply the policy."""
        entries = self.collect_choices(group)
        comparisons = compare_all(entries)
        scores = tally(entries, comparisons)
        outcome = self.elimination_policy(scores)

        attempt_record = AttemptRecord(
            group_label=group_label,
            attempt=attempt,
            entries=entries,
            comparisons=comparisons,
            scores=sort_scores(list(scores.values())),
            outcome=outcome,
        )
        self._emit(format_attempt(attempt_record))
        return attempt_record

    def collect_choices(self, group: Sequence[Participant]) -> List[RoundEntry]:
        """
        Ask every participant in the group for a choice.

        Humans are prompted first; the returned entries list the computer
        players first and the humans after them. All choices are collected
        before anything is scored.
        """
        humans = [RoundEntry(p, p.make_choice()) for p in group if p.is_human]
        computers = [RoundEntry(p, p.make_choice()) for p in group if not p.is_human]
        return computers + humans
