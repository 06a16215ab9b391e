"""
Shared formatting helpers for displaying teams.
"""

from domain.models.split import Split
from domain.models.team import Team

TEAM_LABELS = ("A", "B")


def format_skill(value: float) -> str:
    """Render a skill or total without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_team_lines(team: Team) -> list[str]:
    """One line per player, strongest first (e.g., 'Cesc (95) - Mid')."""
    lines = []
    for player in team.sorted_by_skill():
        label = player.name or f"#{player.id}"
        line = f"{label} ({format_skill(player.skill)})"
        if player.position:
            line += f" - {player.position}"
        lines.append(line)
    return lines


def format_team_header(label: str, team: Team) -> str:
    """Return e.g. 'Team A  Avg 78.8  Tot 315'."""
    return f"Team {label}  Avg {team.average:.1f}  Tot {format_skill(team.total)}"


def format_split_summary(split: Split) -> str:
    """Multi-line summary of both teams and how far apart they are."""
    lines: list[str] = []
    for label, team in zip(TEAM_LABELS, (split.team_a, split.team_b)):
        lines.append(format_team_header(label, team))
        lines.extend(f"  {line}" for line in format_team_lines(team))
        lines.append("")
    lines.append(f"Total Dif: {format_skill(split.total_diff)}")
    lines.append(f"Avg. Dif: {split.avg_diff:.1f}")
    return "\n".join(lines)
