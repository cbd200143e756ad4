"""
Application services layer.

Services orchestrate business operations using repositories and domain services.
"""

from services.result import Result
from services.roster_service import RosterService

__all__ = [
    "Result",
    "RosterService",
]
