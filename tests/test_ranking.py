"""Tests for weekly ranking, tie-breaks and league points."""

from golfleague.ranking import compute_week_league_points, points_multiplier
from golfleague.schemas import LeagueConfig


def by_team(results):
    return {r.team_id: r for r in results}


class TestPrimaryOrdering:
    """Tests for ordering on counting totals."""

    def test_stableford_higher_total_first(self, make_league):
        league = make_league({1: {'a': [30], 'b': [36], 'c': [33]}}, best_scores_count=1)
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['b', 'c', 'a']
        assert [r.rank for r in results] == [1, 2, 3]
        assert [r.league_points for r in results] == [4, 2, 1]

    def test_strokeplay_lower_total_first(self, make_league):
        """A stroke play total of 72 outranks 75."""
        league = make_league(
            {1: {'a': [75], 'b': [72]}}, scoring_format='strokeplay', best_scores_count=1
        )
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['b', 'a']
        assert results[0].score_total == 72
        assert results[1].score_total == 75

    def test_scoreless_team_excluded(self, make_league):
        """Teams with no entered score get no rank and the schedule shrinks."""
        league = make_league(
            {1: {'a': [30, 32], 'b': [None, None], 'c': [28, 20]}}, best_scores_count=2
        )
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['a', 'c']
        assert [r.league_points for r in results] == [2, 1]

    def test_empty_week(self, make_league):
        """A week where nobody has scored yields no ranking."""
        league = make_league({1: {'a': [None], 'b': [None]}})
        assert compute_week_league_points(league, 1) == []

    def test_missing_or_invalid_week(self, make_league):
        league = make_league({1: {'a': [30], 'b': [31]}})
        assert compute_week_league_points(league, 2) == []
        assert compute_week_league_points(league, 99) == []
        assert compute_week_league_points(league, 0) == []


class TestTieBreak:
    """Tests for splitting equal totals on individual cards."""

    def test_stableford_worst_card_decides(self, make_league):
        """66 vs 66: the team whose worst counting card is higher wins."""
        league = make_league({1: {'a': [36, 30], 'b': [34, 32]}}, best_scores_count=2)
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['b', 'a']
        assert [r.rank for r in results] == [1, 2]
        assert [r.league_points for r in results] == [2, 1]

    def test_strokeplay_worst_card_decides(self, make_league):
        """150 vs 150: the team whose worst counting card is lower wins."""
        league = make_league(
            {1: {'a': [70, 80], 'b': [74, 76]}}, scoring_format='strokeplay', best_scores_count=2
        )
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['b', 'a']

    def test_moves_up_to_better_cards(self, make_league):
        """When the worst cards match, the next card up decides."""
        league = make_league(
            {1: {'a': [40, 30, 30], 'b': [38, 32, 30]}}, best_scores_count=3
        )
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['b', 'a']

    def test_fewer_counting_cards_loses_stableford(self, make_league):
        """A team short of counting cards loses the tie-break."""
        league = make_league(
            {1: {'a': [40, 30, None], 'b': [30, 20, 20]}}, best_scores_count=3
        )
        results = compute_week_league_points(league, 1)

        assert results[0].score_total == results[1].score_total == 70
        assert [r.team_id for r in results] == ['b', 'a']
        assert [r.rank for r in results] == [1, 2]

    def test_fewer_counting_cards_loses_strokeplay(self, make_league):
        league = make_league(
            {1: {'a': [70, 70, None], 'b': [50, 45, 45]}},
            scoring_format='strokeplay',
            best_scores_count=3,
        )
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['b', 'a']

    def test_tie_break_ignores_non_counting_cards(self, make_league):
        """Only counting cards are compared."""
        league = make_league(
            {1: {'a': [36, 30, 10], 'b': [36, 30, 29]}}, best_scores_count=2
        )
        results = compute_week_league_points(league, 1)

        assert results[0].rank == results[1].rank == 1
        assert results[0].league_points == results[1].league_points == 1.5

    def test_identical_cards_symmetric(self, make_league):
        """Fully tied teams get the same outcome whatever the team order."""
        forward = make_league(
            {1: {'a': [36, 30], 'b': [30, 36], 'c': [20, 20]}}, best_scores_count=2
        )
        backward = make_league(
            {1: {'c': [20, 20], 'b': [30, 36], 'a': [36, 30]}}, best_scores_count=2
        )

        first = by_team(compute_week_league_points(forward, 1))
        second = by_team(compute_week_league_points(backward, 1))

        for team_id in ('a', 'b', 'c'):
            assert first[team_id].rank == second[team_id].rank
            assert first[team_id].league_points == second[team_id].league_points
        assert first['a'].rank == first['b'].rank == 1
        assert first['a'].league_points == 3.0  # (4 + 2) / 2


class TestTieAveraging:
    """Tests for sharing league points among fully tied teams."""

    def test_three_way_tie_for_second(self, make_league):
        """Three teams tied for 2nd of 5 each receive (6 + 4 + 2) / 3."""
        league = make_league(
            {1: {'a': [40], 'b': [35], 'c': [35], 'd': [35], 'e': [20]}}, best_scores_count=1
        )
        results = by_team(compute_week_league_points(league, 1))

        assert results['a'].rank == 1
        assert results['a'].league_points == 8
        for team_id in ('b', 'c', 'd'):
            assert results[team_id].rank == 2
            assert results[team_id].league_points == 4
        assert results['e'].rank == 5
        assert results['e'].league_points == 1

    def test_tied_teams_keep_team_order(self, make_league):
        league = make_league({1: {'c': [30], 'a': [30], 'b': [30]}}, best_scores_count=1)
        results = compute_week_league_points(league, 1)

        assert [r.team_id for r in results] == ['c', 'a', 'b']
        assert {r.rank for r in results} == {1}

    def test_tie_with_override_schedule(self, make_league):
        league = make_league(
            {1: {'a': [30], 'b': [30], 'c': [20]}},
            best_scores_count=1,
            league_points=[10, 6, 3],
        )
        results = by_team(compute_week_league_points(league, 1))

        assert results['a'].league_points == results['b'].league_points == 8
        assert results['c'].league_points == 3
        assert results['c'].rank == 3


class TestLeaguePointSchedules:
    """Tests for which schedule a week uses."""

    def test_override_used(self, make_league):
        league = make_league(
            {1: {'a': [30], 'b': [20], 'c': [10]}}, best_scores_count=1, league_points=[10, 5, 3]
        )
        results = compute_week_league_points(league, 1)

        assert [r.league_points for r in results] == [10, 5, 3]

    def test_short_override_falls_back(self, make_league):
        league = make_league(
            {1: {'a': [30], 'b': [20], 'c': [10]}}, best_scores_count=1, league_points=[10]
        )
        results = compute_week_league_points(league, 1)

        assert [r.league_points for r in results] == [4, 2, 1]

    def test_override_sized_for_scoring_teams(self, make_league):
        """Only teams that scored are counted against the override length."""
        league = make_league(
            {1: {'a': [30], 'b': [20], 'c': [None]}}, best_scores_count=1, league_points=[10, 5]
        )
        results = compute_week_league_points(league, 1)

        assert [r.league_points for r in results] == [10, 5]


class TestDoublePoints:
    """Tests for the final-week multiplier."""

    def _league(self, make_league, double):
        scores = {'a': [40], 'b': [30], 'c': [20], 'd': [10]}
        return make_league(
            {2: scores, 4: scores},
            best_scores_count=1,
            number_of_weeks=4,
            double_points_last_week=double,
        )

    def test_last_week_doubled(self, make_league):
        """6 raw league points in the final week become 12."""
        results = compute_week_league_points(self._league(make_league, True), 4)

        assert results[0].league_points == 6
        assert results[0].adjusted_league_points == 12

    def test_earlier_week_not_doubled(self, make_league):
        results = compute_week_league_points(self._league(make_league, True), 2)

        assert results[0].league_points == 6
        assert results[0].adjusted_league_points == 6

    def test_disabled(self, make_league):
        results = compute_week_league_points(self._league(make_league, False), 4)

        assert results[0].adjusted_league_points == 6

    def test_multiplier(self):
        config = LeagueConfig(number_of_weeks=4, double_points_last_week=True)
        assert points_multiplier(config, 4) == 2
        assert points_multiplier(config, 3) == 1
        assert points_multiplier(config, 5) == 1


def test_ranking_is_repeatable(sample_league):
    """Ranking the same snapshot twice gives identical output."""
    assert compute_week_league_points(sample_league, 1) == compute_week_league_points(
        sample_league, 1
    )
