"""
Tests for team display formatting.
"""

from domain.models.player import Player
from domain.models.split import Split
from domain.models.team import Team
from utils.formatting import format_skill, format_split_summary, format_team_header, format_team_lines


def test_format_skill():
    assert format_skill(95) == "95"
    assert format_skill(95.0) == "95"
    assert format_skill(77.5) == "77.5"


def test_team_lines_strongest_first():
    team = Team(
        [
            Player(id=1, skill=60, name="Carl", position="Def"),
            Player(id=2, skill=95, name="Cesc", position="Mid"),
            Player(id=3, skill=70),
        ]
    )
    assert format_team_lines(team) == ["Cesc (95) - Mid", "#3 (70)", "Carl (60) - Def"]


def test_team_header():
    team = Team([Player(id=1, skill=80), Player(id=2, skill=75)])
    assert format_team_header("A", team) == "Team A  Avg 77.5  Tot 155"


def test_split_summary():
    team_a = Team([Player(id=1, skill=90, name="Ann"), Player(id=2, skill=60, name="Bo")])
    team_b = Team([Player(id=3, skill=80, name="Cy"), Player(id=4, skill=65, name="Di")])
    summary = format_split_summary(Split(team_a, team_b))
    assert "Team A  Avg 75.0  Tot 150" in summary
    assert "Team B  Avg 72.5  Tot 145" in summary
    assert "  Ann (90)" in summary
    assert summary.endswith("Total Dif: 5\nAvg. Dif: 2.5")
