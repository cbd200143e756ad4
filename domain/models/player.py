"""
Player domain model.
"""

from dataclasses import dataclass, field
from typing import Any

from domain.models.lane import LANE_ORDER, Lane


def _all_lanes() -> list[bool]:
    return [True] * len(LANE_ORDER)


@dataclass
class Player:
    """
    Represents a roster entry in the lane divider.

    This is a pure domain model with no infrastructure dependencies. The search
    never mutates players; roster edits happen through RosterService.
    """

    name: str
    rating: int = 0
    desired_roles: list[bool] = field(default_factory=_all_lanes)  # indexed by Lane
    is_role_fixed: bool = False
    is_participating: bool = True
    # Persisted labels, rating is derived from tier/rank by the rating source
    tag_line: str = ""
    tier: str = ""
    rank: str = ""
    display_rank: str = ""

    def __post_init__(self):
        if len(self.desired_roles) != len(LANE_ORDER):
            raise ValueError(
                f"desired_roles must have {len(LANE_ORDER)} entries, got {len(self.desired_roles)}"
            )
        if self.rating < 0:
            raise ValueError(f"rating must be non-negative, got {self.rating}")
        self.desired_roles = [bool(flag) for flag in self.desired_roles]

    def desires_lane(self, lane: Lane | int) -> bool:
        """Check if the player wants to play the given lane."""
        return self.desired_roles[int(lane)]

    def get_desired_lanes(self) -> list[Lane]:
        return [lane for lane in LANE_ORDER if self.desired_roles[lane]]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted players-info entry shape."""
        return {
            "name": self.name,
            "tagLine": self.tag_line,
            "desiredRoles": list(self.desired_roles),
            "isRoleFixed": self.is_role_fixed,
            "tier": self.tier,
            "rank": self.rank,
            "displayRank": self.display_rank,
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        """
        Build a player from a persisted players-info entry.

        Participation is not persisted, loaded players start participating.
        """
        return cls(
            name=data["name"],
            rating=int(data.get("rating", 0)),
            desired_roles=list(data.get("desiredRoles") or _all_lanes()),
            is_role_fixed=bool(data.get("isRoleFixed", False)),
            tag_line=data.get("tagLine") or "",
            tier=data.get("tier") or "",
            rank=data.get("rank") or "",
            display_rank=data.get("displayRank") or "",
        )

    def __str__(self) -> str:
        rank_str = self.display_rank or "Unranked"
        return f"{self.name} ({rank_str}, Rating: {self.rating})"
