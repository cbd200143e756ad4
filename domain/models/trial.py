"""
Outcome of a single search trial.
"""

from dataclasses import dataclass

from domain.models.player import Player


@dataclass(frozen=True)
class AcceptedTrial:
    """A candidate that kept every role-locked player on a desired lane."""

    players: tuple[Player, ...]
    mismatch_count: int
    score: float


@dataclass(frozen=True)
class RejectedTrial:
    """A candidate that put a role-locked player on an undesired lane."""


REJECTED = RejectedTrial()

TrialOutcome = AcceptedTrial | RejectedTrial
