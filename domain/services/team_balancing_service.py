"""
Team balancing domain service.

Scores a ten-player candidate: lower is more balanced.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from domain.models.player import Player


@dataclass(frozen=True)
class ScoreWeights:
    """
    Weights of the three balance metrics.

    Lane balance is weighted highest by default. Weights need not sum to 1.
    """

    total: float = 0.3
    lane: float = 0.5
    pair: float = 0.2

    def __post_init__(self):
        if min(self.total, self.lane, self.pair) < 0:
            raise ValueError(f"Score weights must be non-negative, got {self}")

    @classmethod
    def from_settings(cls, settings: dict[str, float]) -> "ScoreWeights":
        return cls(
            total=settings.get("total", cls.total),
            lane=settings.get("lane", cls.lane),
            pair=settings.get("pair", cls.pair),
        )


class TeamBalancingService:
    """
    Pure domain service for team balance scoring.

    Positions 0-4 of a candidate are one team and 5-9 the other, both in lane
    order. Every metric is a non-negative difference between the two teams.
    """

    TEAM_SIZE = 5
    ADC_SLOT = 3
    SUPPORT_SLOT = 4

    def __init__(self, weights: ScoreWeights | None = None):
        """
        Initialize team balancing service.

        Args:
            weights: Metric weights (defaults to total=0.3, lane=0.5, pair=0.2)
        """
        self.weights = weights or ScoreWeights()

    def _split(self, players: Sequence[Player]) -> tuple[Sequence[Player], Sequence[Player]]:
        if len(players) != self.TEAM_SIZE * 2:
            raise ValueError(f"Need exactly {self.TEAM_SIZE * 2} players, got {len(players)}")
        return players[: self.TEAM_SIZE], players[self.TEAM_SIZE :]

    def calculate_total_rating_diff(self, players: Sequence[Player]) -> float:
        """Difference between the two teams' rating sums."""
        blue, red = self._split(players)
        return abs(sum(p.rating for p in blue) - sum(p.rating for p in red))

    def calculate_lane_rating_diff(self, players: Sequence[Player]) -> float:
        """Sum of rating differences between lane opponents."""
        blue, red = self._split(players)
        return sum(abs(b.rating - r.rating) for b, r in zip(blue, red))

    def calculate_adc_sup_pair_diff(self, players: Sequence[Player]) -> float:
        """
        Difference between the ADC+SUPPORT duos of both teams.

        The bot lane duo is scored as a unit since the two lanes play together.
        """
        blue, red = self._split(players)
        blue_pair = blue[self.ADC_SLOT].rating + blue[self.SUPPORT_SLOT].rating
        red_pair = red[self.ADC_SLOT].rating + red[self.SUPPORT_SLOT].rating
        return abs(blue_pair - red_pair)

    def evaluate(self, players: Sequence[Player]) -> float:
        """
        Calculate the weighted balance score for a candidate (lower is better).

        Args:
            players: Ordered candidate of 10 players

        Returns:
            Weighted sum of total, per-lane and ADC/SUP pair rating differences
        """
        return (
            self.weights.total * self.calculate_total_rating_diff(players)
            + self.weights.lane * self.calculate_lane_rating_diff(players)
            + self.weights.pair * self.calculate_adc_sup_pair_diff(players)
        )

    def get_score_breakdown(self, players: Sequence[Player]) -> dict[str, float]:
        """
        Get each metric alongside the weighted score.

        Args:
            players: Ordered candidate of 10 players

        Returns:
            Dictionary with the three metrics and the final score
        """
        total = self.calculate_total_rating_diff(players)
        lane = self.calculate_lane_rating_diff(players)
        pair = self.calculate_adc_sup_pair_diff(players)
        return {
            "total_rating_diff": total,
            "lane_rating_diff": lane,
            "adc_sup_pair_diff": pair,
            "score": self.weights.total * total + self.weights.lane * lane + self.weights.pair * pair,
        }
