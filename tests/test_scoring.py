"""
Unit tests for round scoring and the elimination policy.
"""
import random

import pytest

from rpsls.tournament.scoring import RoundEntry, score_round, compare_all, sort_scores
from rpsls.tournament.elimination import determine_losers
from rpsls.game.errors import InsufficientParticipantsError
from rpsls.utils.constants import Choice
from tests.helpers import entries


class TestScoreRound:
    """Tests for score_round()."""

    def test_three_way_scenario(self):
        """Rock, Scissors, Spock: Scissors loses twice."""
        scores = score_round(entries(A=Choice.ROCK, B=Choice.SCISSORS, C=Choice.SPOCK))

        assert (scores['A'].wins, scores['A'].losses) == (1, 1)
        assert scores['A'].balance == 0
        assert scores['B'].balance == -2
        assert scores['C'].balance == 2

    def test_draw_counts_nothing(self):
        """Test that a draw adds no wins or losses."""
        scores = score_round(entries(A=Choice.ROCK, B=Choice.ROCK))
        for s in scores.values():
            assert s.wins == 0
            assert s.losses == 0

    def test_one_comparison_per_pair(self):
        """Test that each pair is compared once."""
        round_entries = entries(A=Choice.ROCK, B=Choice.PAPER, C=Choice.SPOCK, D=Choice.LIZARD)
        comparisons = compare_all(round_entries)
        assert len(comparisons) == 6
        pairs = {frozenset((c.first.participant.name, c.second.participant.name)) for c in comparisons}
        assert len(pairs) == 6

    def test_wins_equal_losses(self):
        """Test that total wins equal total losses."""
        rng = random.Random(3)
        for size in range(2, 9):
            names = {f"P{i}": rng.choice(list(Choice)) for i in range(size)}
            scores = score_round(entries(**names))
            assert sum(s.wins for s in scores.values()) == sum(s.losses for s in scores.values())

    def test_order_does_not_matter(self):
        """Test that entry order does not change the tallies."""
        round_entries = entries(A=Choice.ROCK, B=Choice.LIZARD, C=Choice.PAPER, D=Choice.SPOCK)
        forward = score_round(round_entries)
        backward = score_round(list(reversed(round_entries)))
        for name in forward:
            assert forward[name].wins == backward[name].wins
            assert forward[name].losses == backward[name].losses

    def test_does_not_touch_participants(self):
        """Test that scoring leaves participants unchanged."""
        round_entries = entries(A=Choice.ROCK, B=Choice.PAPER)
        score_round(round_entries)
        for e in round_entries:
            assert e.participant.active
            assert e.participant.choice_history == []

    def test_single_entry_rejected(self):
        """Test that one entry cannot be scored."""
        with pytest.raises(InsufficientParticipantsError):
            score_round(entries(A=Choice.ROCK))

    def test_comparison_justification(self):
        """Test winner, loser and phrase of a comparison."""
        comparison = compare_all(entries(A=Choice.SCISSORS, B=Choice.SPOCK))[0]
        assert comparison.winner.participant.name == 'B'
        assert comparison.loser.participant.name == 'A'
        assert comparison.justification == "Spock smashes Scissors"

    def test_draw_comparison_has_no_justification(self):
        """Test that a draw has no winner or phrase."""
        comparison = compare_all(entries(A=Choice.PAPER, B=Choice.PAPER))[0]
        assert comparison.is_draw
        assert comparison.winner is None
        assert comparison.justification is None

    def test_sort_scores(self):
        """Test display order of scores."""
        scores = score_round(entries(A=Choice.ROCK, B=Choice.SCISSORS, C=Choice.SPOCK))
        ordered = [s.participant.name for s in sort_scores(list(scores.values()))]
        assert ordered == ['C', 'A', 'B']


class TestDetermineLosers:
    """Tests for determine_losers()."""

    def test_single_loser(self):
        """Test the Rock, Scissors, Spock scenario."""
        outcome = determine_losers(score_round(entries(A=Choice.ROCK, B=Choice.SCISSORS, C=Choice.SPOCK)))
        assert not outcome.replay
        assert outcome.eliminated_names == ['B']

    def test_all_tied_replays(self):
        """Test that two equal choices replay."""
        outcome = determine_losers(score_round(entries(A=Choice.ROCK, B=Choice.ROCK)))
        assert outcome.replay
        assert outcome.eliminated == []

    def test_cycle_of_five_replays(self):
        """All five different choices: everyone is 2W/2L."""
        outcome = determine_losers(score_round(entries(
            A=Choice.ROCK, B=Choice.SCISSORS, C=Choice.PAPER, D=Choice.LIZARD, E=Choice.SPOCK
        )))
        assert outcome.replay

    def test_ties_at_bottom_all_eliminated(self):
        """Paper beats both Rocks, Rocks draw with each other."""
        outcome = determine_losers(score_round(entries(A=Choice.PAPER, B=Choice.ROCK, C=Choice.ROCK)))
        assert not outcome.replay
        assert sorted(outcome.eliminated_names) == ['B', 'C']

    def test_eliminated_set_is_exactly_minimum(self):
        """Test that exactly the minimum-balance players leave."""
        rng = random.Random(11)
        for _ in range(50):
            names = {f"P{i}": rng.choice(list(Choice)) for i in range(rng.randint(2, 6))}
            scores = score_round(entries(**names))
            outcome = determine_losers(scores)
            balances = [s.balance for s in scores.values()]
            if min(balances) == max(balances):
                assert outcome.replay
            else:
                expected = {n for n, s in scores.items() if s.balance == min(balances)}
                assert set(outcome.eliminated_names) == expected

    def test_requires_two_scores(self):
        """Test that fewer than two scores are rejected."""
        with pytest.raises(InsufficientParticipantsError):
            determine_losers({})
