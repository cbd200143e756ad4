"""
Tier/rank to rating conversion for roster entries.
"""

from config import DEFAULT_RANK, DEFAULT_TIER


class TierRatingSystem:
    """
    Converts ladder tier and division labels into a numeric rating.

    Handles:
    - Rating lookup for a tier/division pair
    - Display labels ("Gold II", "Master")
    - Label validation
    """

    TIERS = [
        "IRON",
        "BRONZE",
        "SILVER",
        "GOLD",
        "PLATINUM",
        "EMERALD",
        "DIAMOND",
        "MASTER",
        "GRANDMASTER",
        "CHALLENGER",
    ]
    # Apex tiers have no divisions
    APEX_TIERS = {"MASTER", "GRANDMASTER", "CHALLENGER"}
    RANKS = ["IV", "III", "II", "I"]

    TIER_STEP = 400  # Rating gap between the bottom of consecutive tiers
    RANK_STEP = 100  # Rating gap between divisions within a tier

    def __init__(self, default_tier: str = DEFAULT_TIER, default_rank: str = DEFAULT_RANK):
        self.default_tier = self.normalize_tier(default_tier)
        self.default_rank = self.normalize_rank(default_rank)

    @classmethod
    def normalize_tier(cls, tier: str) -> str:
        normalized = (tier or "").strip().upper()
        if normalized not in cls.TIERS:
            raise ValueError(f"Unknown tier: {tier!r}")
        return normalized

    @classmethod
    def normalize_rank(cls, rank: str) -> str:
        normalized = (rank or "").strip().upper()
        if normalized not in cls.RANKS:
            raise ValueError(f"Unknown rank: {rank!r}")
        return normalized

    def is_apex(self, tier: str) -> bool:
        return self.normalize_tier(tier) in self.APEX_TIERS

    def to_rating(self, tier: str, rank: str | None = None) -> int:
        """
        Convert a tier and division into a rating.

        Args:
            tier: Tier label (case-insensitive), e.g. "gold"
            rank: Division label IV-I; ignored for apex tiers

        Returns:
            Non-negative integer rating (IRON IV = 0)
        """
        tier = self.normalize_tier(tier)
        base = self.TIERS.index(tier) * self.TIER_STEP
        if tier in self.APEX_TIERS:
            return base
        return base + self.RANKS.index(self.normalize_rank(rank or "")) * self.RANK_STEP

    def display_rank(self, tier: str, rank: str | None = None) -> str:
        """Human readable rank, e.g. "Gold II" or "Challenger"."""
        tier = self.normalize_tier(tier)
        if tier in self.APEX_TIERS:
            return tier.capitalize()
        return f"{tier.capitalize()} {self.normalize_rank(rank or '')}"
