"""
Integration tests for the tournament runner.
"""
import random

import pytest

from rpsls.agents.random_agent import RandomAgent
from rpsls.game.participant import Participant
from rpsls.game.errors import (
    InsufficientParticipantsError,
    DuplicateParticipantError,
    ReplayLimitError,
)
from rpsls.tournament.elimination import EliminationOutcome
from rpsls.tournament.runner import TournamentRunner, TournamentConfig
from rpsls.tournament.grouping import group_sizes
from rpsls.utils.constants import Choice
from tests.helpers import scripted


def quiet(**kwargs) -> TournamentConfig:
    return TournamentConfig(verbose=False, **kwargs)


class TestSmallTournaments:
    """Tournaments that never split into groups."""

    def test_draw_then_win(self):
        """Both throw Rock, then Paper beats Rock."""
        a = scripted('A', Choice.ROCK, Choice.PAPER)
        b = scripted('B', Choice.ROCK)

        result = TournamentRunner([a, b], quiet()).run()

        assert result.winner == 'A'
        assert len(result.rounds) == 1
        attempts = result.rounds[0].attempts
        assert len(attempts) == 2
        assert attempts[0].replay
        assert attempts[1].outcome.eliminated_names == ['B']
        assert not b.active

    def test_replayed_choices_stay_in_history(self):
        """Test that choices from a replayed attempt are kept."""
        a = scripted('A', Choice.ROCK, Choice.PAPER)
        b = scripted('B', Choice.ROCK)

        TournamentRunner([a, b], quiet()).run()

        assert a.choice_history == [Choice.ROCK, Choice.PAPER]
        assert b.choice_history == [Choice.ROCK, Choice.ROCK]

    def test_three_players_two_rounds(self):
        """Test a three-player tournament over two rounds."""
        a = scripted('A', Choice.ROCK)
        b = scripted('B', Choice.SCISSORS)
        c = scripted('C', Choice.SPOCK)

        result = TournamentRunner([a, b, c], quiet()).run()

        assert result.elimination_order == [['B'], ['A']]
        assert result.winner == 'C'
        assert len(b.choice_history) == 1
        assert len(c.choice_history) == 2

    def test_joint_elimination(self):
        """Test that players tied at the bottom leave together."""
        a = scripted('A', Choice.PAPER)
        b = scripted('B', Choice.ROCK)
        c = scripted('C', Choice.ROCK)

        result = TournamentRunner([a, b, c], quiet()).run()

        assert result.elimination_order == [['B', 'C']]
        assert result.winner == 'A'

    def test_five_players_are_not_split(self):
        """Test that five players play without groups."""
        players = [Participant(f"P{i}", RandomAgent(random.Random(i))) for i in range(5)]

        result = TournamentRunner(players, quiet(seed=1)).run()

        assert result.rounds[0].groups == []
        assert result.winner is not None


class TestGroupRounds:
    """Tournaments large enough to be split into groups."""

    @pytest.fixture
    def players(self):
        rng = random.Random(99)
        return [Participant(f"P{i}", RandomAgent(random.Random(rng.getrandbits(32)))) for i in range(11)]

    def test_groups_cover_active_players(self, players):
        """Test that groups cover all active players each split round."""
        result = TournamentRunner(players, quiet(seed=7)).run()

        first = result.rounds[0]
        assert [len(g) for g in first.groups] == [4, 4, 3]
        assert sorted(n for g in first.groups for n in g) == sorted(p.name for p in players)

        for record in result.rounds:
            if record.active_count > 5:
                assert [len(g) for g in record.groups] == group_sizes(record.active_count)
            else:
                assert record.groups == []

    def test_every_group_loses_someone(self, players):
        """Test that each group is resolved exactly once."""
        result = TournamentRunner(players, quiet(seed=7)).run()

        first = result.rounds[0]
        for label in ('Group 1', 'Group 2', 'Group 3'):
            decided = [a for a in first.attempts if a.group_label == label and not a.replay]
            assert len(decided) == 1
            assert decided[0].outcome.eliminated

    def test_eliminated_players_do_not_return(self, players):
        """Test that eliminated players never play again."""
        result = TournamentRunner(players, quiet(seed=3)).run()

        gone = set()
        for record in result.rounds:
            for attempt in record.attempts:
                playing = {e.participant.name for e in attempt.entries}
                assert not playing & gone
            gone.update(record.eliminated)

        assert result.winner not in gone
        assert len(gone) == len(players) - 1

    def test_history_grows_per_attempt(self, players):
        """Test that histories grow by one per attempt played."""
        result = TournamentRunner(players, quiet(seed=5)).run()

        played = {p.name: 0 for p in players}
        for record in result.rounds:
            for attempt in record.attempts:
                for e in attempt.entries:
                    played[e.participant.name] += 1
        for p in players:
            assert len(p.choice_history) == played[p.name]

    def test_seed_makes_groups_reproducible(self):
        """Test that a seed reproduces the whole tournament."""
        def run(seed):
            roster = [Participant(f"P{i}", RandomAgent(random.Random(i))) for i in range(9)]
            return TournamentRunner(roster, quiet(seed=seed)).run()

        assert run(12).to_dict() == run(12).to_dict()


class TestControllerContracts:
    """Edge cases and failure modes."""

    def test_needs_two_participants(self):
        """Test that a single participant is rejected."""
        with pytest.raises(InsufficientParticipantsError):
            TournamentRunner([scripted('A', Choice.ROCK)], quiet())

    def test_duplicate_names(self):
        """Test that duplicate names are rejected."""
        with pytest.raises(DuplicateParticipantError):
            TournamentRunner([scripted('A', Choice.ROCK), scripted('A', Choice.PAPER)], quiet())

    def test_mutual_elimination_is_reported(self):
        """Test that removing everyone is reported, not raised."""
        def eliminate_everyone(scores):
            return EliminationOutcome(replay=False, eliminated=[s.participant for s in scores.values()])

        a = scripted('A', Choice.ROCK)
        b = scripted('B', Choice.PAPER)
        result = TournamentRunner([a, b], quiet(), elimination_policy=eliminate_everyone).run()

        assert result.winner is None
        assert result.mutual_elimination
        assert result.to_dict()['mutual_elimination'] is True

    def test_empty_elimination_counts_as_replay(self):
        """Test that an empty elimination is treated as a replay."""
        def never_decides(scores):
            return EliminationOutcome(replay=False)

        runner = TournamentRunner(
            [scripted('A', Choice.ROCK), scripted('B', Choice.PAPER)],
            quiet(max_replays=2),
            elimination_policy=never_decides
        )
        with pytest.raises(ReplayLimitError) as exc:
            runner.run()
        assert exc.value.attempts == 3

    def test_replay_limit(self):
        """Test that max_replays stops an endless tie."""
        runner = TournamentRunner([scripted('A', Choice.SPOCK), scripted('B', Choice.SPOCK)], quiet(max_replays=0))
        with pytest.raises(ReplayLimitError):
            runner.run()

    def test_humans_prompted_first_and_listed_last(self):
        """Test collection and presentation order of humans."""
        calls = []

        class Recorder:
            def __init__(self, participant):
                self.participant = participant
                self.inner = participant.agent
                self.is_human = participant.agent.is_human
                self.name = participant.agent.name

            def select_choice(self, history):
                calls.append(self.participant.name)
                return self.inner.select_choice(history)

        players = [
            scripted('Bot', Choice.ROCK),
            scripted('Human', Choice.PAPER, is_human=True),
            scripted('Bot2', Choice.ROCK),
        ]
        for p in players:
            p.agent = Recorder(p)

        result = TournamentRunner(players, quiet()).run()

        assert calls[0] == 'Human'
        first = result.rounds[0].attempts[0]
        assert [e.participant.name for e in first.entries] == ['Bot', 'Bot2', 'Human']

    def test_pause_between_rounds(self):
        """Test the pause between rounds."""
        prompts = []
        players = [scripted('A', Choice.ROCK), scripted('B', Choice.SCISSORS), scripted('C', Choice.SPOCK)]
        runner = TournamentRunner(players, quiet(pause_between_rounds=True), input_fn=prompts.append)

        runner.run()

        # Two rounds, only the first is followed by a pause
        assert len(prompts) == 1

    def test_verbose_output(self):
        """Test the verbose round output."""
        lines = []
        players = [scripted('A', Choice.ROCK), scripted('B', Choice.SCISSORS)]
        TournamentRunner(players, TournamentConfig(verbose=True), output_fn=lines.append).run()

        text = "\n".join(lines)
        assert "ROUND 1" in text
        assert "A > B -- Rock crushes Scissors" in text
        assert "B is eliminated! (0W/1L)" in text
        assert "WINNER: A" in text

    def test_quiet_output(self):
        """Test that quiet mode prints nothing."""
        lines = []
        players = [scripted('A', Choice.ROCK), scripted('B', Choice.SCISSORS)]
        TournamentRunner(players, quiet(), output_fn=lines.append).run()
        assert lines == []
