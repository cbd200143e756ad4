"""
Shared formatting helpers for division results.
"""

from domain.models.division import Division, DivisionTable
from domain.models.lane import LANE_ORDER
from domain.models.team import Team

BLUE_TEAM_NAME = "Blue Team"
RED_TEAM_NAME = "Red Team"


def format_tab_label(mismatch_count: int) -> str:
    """Return the label of a mismatch-count tab (e.g. '2 mismatches')."""
    noun = "mismatch" if mismatch_count == 1 else "mismatches"
    return f"{mismatch_count} {noun}"


def format_team_lines(team: Team, with_rating: bool = False) -> list[str]:
    """Return one 'LANE: name' line per lane."""
    lines = []
    for lane, player in zip(LANE_ORDER, team.players):
        line = f"{lane.label}: {player.name or 'N/A'}"
        if with_rating:
            line += f" ({player.rating})"
        lines.append(line)
    return lines


def format_division_for_clipboard(division: Division) -> str:
    """
    Render a division as the plain text shared with players.

    Returns an empty string for an unavailable division.
    """
    if not division.is_available:
        return ""
    blue = "\n".join(format_team_lines(division.blue_team))
    red = "\n".join(format_team_lines(division.red_team))
    return f"{BLUE_TEAM_NAME}\n{blue}\n\n{RED_TEAM_NAME}\n{red}"


def format_division_table_summary(table: DivisionTable) -> str:
    """One line per mismatch count with its score, or '-' when unavailable."""
    lines = []
    for mismatch_count, division in table.items():
        score = f"{division.evaluation_score:.1f}" if division.is_available else "-"
        lines.append(f"{format_tab_label(mismatch_count)}: {score}")
    return "\n".join(lines)
