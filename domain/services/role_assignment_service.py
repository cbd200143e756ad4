"""
Role assignment domain service.

Checks candidate lane assignments against player lane preferences.
"""

from collections.abc import Sequence

from domain.models.lane import LANE_ORDER, Lane
from domain.models.player import Player


class RoleAssignmentService:
    """
    Pure domain service for lane preference logic.

    Responsibilities:
    - Map candidate slots to lanes
    - Count lane mismatches and detect role-lock violations
    - Report which players can cover each lane
    """

    SLOT_COUNT = len(LANE_ORDER) * 2

    @staticmethod
    def lane_for_slot(slot: int) -> Lane:
        """Lane played by a candidate slot: slot i plays lane i % 5."""
        return Lane.for_slot(slot)

    def count_mismatches(self, players: Sequence[Player]) -> int | None:
        """
        Count players seated outside their desired lanes.

        Args:
            players: Ordered candidate of 10 players

        Returns:
            Number of mismatched players (0-10), or None if a role-locked
            player sits on a lane they did not ask for
        """
        mismatch_count = 0
        for slot, player in enumerate(players):
            if self.is_player_on_role(player, slot):
                continue
            if player.is_role_fixed:
                return None
            mismatch_count += 1
        return mismatch_count

    def is_player_on_role(self, player: Player, slot: int) -> bool:
        """Check if a player seated on a slot plays a desired lane."""
        return player.desires_lane(self.lane_for_slot(slot))

    def get_lane_coverage(self, players: Sequence[Player]) -> dict[Lane, list[Player]]:
        """
        Get which players want to play each lane.

        Args:
            players: List of players

        Returns:
            Dictionary mapping lanes to the players who desire them
        """
        coverage: dict[Lane, list[Player]] = {lane: [] for lane in LANE_ORDER}
        for player in players:
            for lane in player.get_desired_lanes():
                coverage[lane].append(player)
        return coverage

    def has_feasible_lock_assignment(self, players: Sequence[Player]) -> bool:
        """
        Check if every role-locked player can be seated on a desired lane.

        Each lane has two seats (one per team). Solved as a bipartite
        matching between locked players and the 10 slots.
        """
        locked = [p for p in players if p.is_role_fixed]
        if len(locked) > self.SLOT_COUNT:
            return False

        slot_owner: list[int | None] = [None] * self.SLOT_COUNT

        def _try_seat(player_idx: int, visited: set[int]) -> bool:
            player = locked[player_idx]
            for slot in range(self.SLOT_COUNT):
                if slot in visited or not player.desires_lane(self.lane_for_slot(slot)):
                    continue
                visited.add(slot)
                owner = slot_owner[slot]
                if owner is None or _try_seat(owner, visited):
                    slot_owner[slot] = player_idx
                    return True
            return False

        return all(_try_seat(idx, set()) for idx in range(len(locked)))
