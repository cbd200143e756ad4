"""
Division domain models: the best candidate kept per mismatch count.
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Any

from domain.models.player import Player
from domain.models.team import Team


def _snapshot(player: Player) -> Player:
    return replace(player, desired_roles=list(player.desired_roles))


@dataclass(frozen=True)
class Division:
    """
    Best-known assignment for one mismatch count.

    Positions 0-4 are the blue team and 5-9 the red team, each in lane order.
    The default value is the "unavailable" sentinel.
    """

    players: tuple[Player, ...] = ()
    evaluation_score: float = math.inf

    @property
    def is_available(self) -> bool:
        return len(self.players) == Team.TEAM_SIZE * 2

    @property
    def blue_team(self) -> Team:
        if not self.is_available:
            raise ValueError("Division is unavailable")
        return Team(self.players[: Team.TEAM_SIZE])

    @property
    def red_team(self) -> Team:
        if not self.is_available:
            raise ValueError("Division is unavailable")
        return Team(self.players[Team.TEAM_SIZE :])

    def to_dict(self) -> dict[str, Any]:
        return {
            "players": [p.name for p in self.players],
            "evaluationScore": self.evaluation_score,
        }


class DivisionTable:
    """
    Fixed table of 11 divisions keyed by mismatch count (0..10).

    Each slot only ever improves: offer() replaces a division when the
    candidate score is strictly lower than the stored one.
    """

    MAX_MISMATCH = Team.TEAM_SIZE * 2

    def __init__(self):
        self._divisions: list[Division] = []
        self.reset()

    def reset(self) -> None:
        """Put every slot back to the unavailable sentinel."""
        self._divisions = [Division() for _ in range(self.MAX_MISMATCH + 1)]

    def _check_index(self, mismatch_count: int) -> None:
        if not 0 <= mismatch_count <= self.MAX_MISMATCH:
            raise ValueError(
                f"mismatch_count must be in [0, {self.MAX_MISMATCH}], got {mismatch_count}"
            )

    def offer(self, mismatch_count: int, players: Sequence[Player], score: float) -> bool:
        """
        Store a candidate if it beats the current division for its mismatch count.

        Stored players are copies, so later roster edits leave the table as it was.

        Returns:
            True if the division was replaced
        """
        self._check_index(mismatch_count)
        if score < self._divisions[mismatch_count].evaluation_score:
            self._divisions[mismatch_count] = Division(tuple(_snapshot(p) for p in players), score)
            return True
        return False

    def merge(self, other: "DivisionTable") -> "DivisionTable":
        """
        Combine two tables, keeping the lower-scored division per slot.

        Ties keep this table's division, so merging is order independent
        with respect to scores.
        """
        merged = DivisionTable()
        for k, (mine, theirs) in enumerate(zip(self._divisions, other._divisions)):
            merged._divisions[k] = theirs if theirs.evaluation_score < mine.evaluation_score else mine
        return merged

    def get(self, mismatch_count: int) -> Division:
        self._check_index(mismatch_count)
        return self._divisions[mismatch_count]

    def __getitem__(self, mismatch_count: int) -> Division:
        return self.get(mismatch_count)

    def __iter__(self) -> Iterator[Division]:
        return iter(self._divisions)

    def __len__(self) -> int:
        return len(self._divisions)

    def items(self) -> list[tuple[int, Division]]:
        return list(enumerate(self._divisions))

    def available_counts(self) -> list[int]:
        """Mismatch counts that hold a real assignment."""
        return [k for k, division in enumerate(self._divisions) if division.is_available]

    def best(self) -> tuple[int, Division] | None:
        """Available division with the fewest mismatches, or None if the table is empty."""
        for k, division in enumerate(self._divisions):
            if division.is_available:
                return k, division
        return None

    def to_dict(self) -> dict[int, dict[str, Any]]:
        return {k: division.to_dict() for k, division in enumerate(self._divisions)}
