"""
Tests for the Split model and matchup signatures.
"""

from domain.models.player import Player
from domain.models.split import Split, signature_for_ids, signature_for_teams
from domain.models.team import Team


def team_of(*ids, skill=50):
    return Team(Player(id=i, skill=skill) for i in ids)


class TestSignature:
    def test_format(self):
        assert signature_for_ids([3, 1], [2, 4]) == "1-3|2-4"

    def test_swapping_teams_is_a_noop(self):
        assert signature_for_ids([2, 4], [3, 1]) == signature_for_ids([3, 1], [2, 4])

    def test_internal_order_is_ignored(self):
        assert signature_for_ids([5, 1, 3], [6, 2, 4]) == signature_for_ids([1, 3, 5], [4, 6, 2])

    def test_sides_ordered_as_strings(self):
        # "2-10" sorts before "3" as a string even though 10 > 3
        assert signature_for_ids([3], [10, 2]) == "2-10|3"

    def test_ids_sorted_numerically_within_a_side(self):
        assert signature_for_ids([10, 9], [1]) == "1|9-10"

    def test_teams_helper_matches_ids_helper(self):
        assert signature_for_teams(team_of(4, 2), team_of(1, 3)) == signature_for_ids([4, 2], [1, 3])

    def test_different_groupings_differ(self):
        assert signature_for_ids([1, 2], [3, 4]) != signature_for_ids([1, 3], [2, 4])


class TestSplit:
    def test_derived_stats(self):
        team_a = Team([Player(id=1, skill=90), Player(id=2, skill=70)])
        team_b = Team([Player(id=3, skill=85), Player(id=4, skill=65), Player(id=5, skill=60)])
        split = Split(team_a, team_b, score=5.0)

        assert split.total_a == 160
        assert split.total_b == 210
        assert split.avg_a == 80
        assert split.avg_b == 70
        assert split.total_diff == 50
        assert split.avg_diff == 10

    def test_signature_is_symmetric(self):
        team_a = team_of(1, 5, 7)
        team_b = team_of(2, 3, 4)
        assert Split(team_a, team_b).signature == Split(team_b, team_a).signature

    def test_swapped_keeps_membership_and_score(self):
        split = Split(team_of(1, 2), team_of(3), score=42.0)
        swapped = split.swapped()
        assert swapped.team_a.ids == [3]
        assert swapped.team_b.ids == [1, 2]
        assert swapped.score == 42.0
        assert swapped.signature == split.signature

    def test_to_dict(self):
        team_a = Team([Player(id=1, skill=60), Player(id=2, skill=90)])
        team_b = Team([Player(id=3, skill=75), Player(id=4, skill=75)])
        data = Split(team_a, team_b).to_dict()
        assert data == {
            "team_a": [2, 1],
            "team_b": [3, 4],
            "total_a": 150,
            "total_b": 150,
            "avg_a": 75,
            "avg_b": 75,
            "signature": "1-2|3-4",
        }
