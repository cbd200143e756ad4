"""
Domain models - pure data structures representing business entities.
"""

from domain.models.division import Division, DivisionTable
from domain.models.lane import LANE_ORDER, Lane
from domain.models.player import Player
from domain.models.team import Team
from domain.models.trial import REJECTED, AcceptedTrial, RejectedTrial

__all__ = [
    "AcceptedTrial",
    "Division",
    "DivisionTable",
    "LANE_ORDER",
    "Lane",
    "Player",
    "REJECTED",
    "RejectedTrial",
    "Team",
]
