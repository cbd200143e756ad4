"""
Team domain model.
"""

from collections.abc import Sequence

from domain.models.lane import LANE_ORDER, Lane
from domain.models.player import Player


class Team:
    """
    Represents a team of 5 players seated in lane order.

    This is a pure domain model with no infrastructure dependencies.
    """

    TEAM_SIZE = 5

    def __init__(self, players: Sequence[Player]):
        """
        Initialize a team.

        Args:
            players: 5 players, the i-th plays lane i (TOP, JUNGLE, MID, ADC, SUPPORT)
        """
        if len(players) != self.TEAM_SIZE:
            raise ValueError(f"Team must have exactly {self.TEAM_SIZE} players")
        self.players = list(players)

    def get_total_rating(self) -> int:
        return sum(p.rating for p in self.players)

    def get_player_by_lane(self, lane: Lane | int) -> Player:
        """Get the player seated on a lane."""
        return self.players[int(lane)]

    def get_off_role_count(self) -> int:
        """Count how many players sit on a lane they did not ask for."""
        return sum(
            1 for player, lane in zip(self.players, LANE_ORDER) if not player.desires_lane(lane)
        )

    def get_lane_pairs(self) -> list[tuple[Lane, Player]]:
        return list(zip(LANE_ORDER, self.players))

    def __str__(self) -> str:
        player_names = ", ".join(f"{lane.label}: {p.name}" for lane, p in self.get_lane_pairs())
        return f"Team: {player_names}"
