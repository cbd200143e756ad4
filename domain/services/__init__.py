"""
Domain services containing pure business logic.
"""

from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.team_balancing_service import ScoreWeights, TeamBalancingService

__all__ = ["RoleAssignmentService", "ScoreWeights", "TeamBalancingService"]
