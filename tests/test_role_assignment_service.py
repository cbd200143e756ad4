"""
Tests for lane preference checks on candidates.
"""

from domain.models.lane import Lane
from domain.models.player import Player
from domain.services.role_assignment_service import RoleAssignmentService


def only(*lanes: Lane) -> list[bool]:
    return [lane in lanes for lane in Lane]


def test_lane_for_slot_wraps_every_five():
    service = RoleAssignmentService()
    assert [service.lane_for_slot(slot) for slot in range(10)] == list(Lane) * 2


def test_no_mismatch_when_everyone_is_flexible():
    service = RoleAssignmentService()
    players = [Player(name=f"P{i}") for i in range(10)]
    assert service.count_mismatches(players) == 0


def test_counts_each_player_off_lane():
    service = RoleAssignmentService()
    players = [Player(name=f"P{i}", desired_roles=only(Lane.TOP)) for i in range(10)]
    # Only slots 0 and 5 play TOP
    assert service.count_mismatches(players) == 8


def test_locked_player_off_lane_rejects_candidate():
    service = RoleAssignmentService()
    players = [Player(name=f"P{i}") for i in range(10)]
    players[1] = Player(name="Locked", desired_roles=only(Lane.TOP), is_role_fixed=True)
    assert service.count_mismatches(players) is None


def test_locked_player_on_lane_is_not_a_mismatch():
    service = RoleAssignmentService()
    players = [Player(name=f"P{i}") for i in range(10)]
    players[5] = Player(name="Locked", desired_roles=only(Lane.TOP), is_role_fixed=True)
    assert service.count_mismatches(players) == 0


def test_is_player_on_role_uses_slot_lane():
    service = RoleAssignmentService()
    support = Player(name="Sup", desired_roles=only(Lane.SUPPORT))

    assert service.is_player_on_role(support, 4)
    assert service.is_player_on_role(support, 9)
    assert not service.is_player_on_role(support, 3)


def test_lane_coverage():
    service = RoleAssignmentService()
    mid_player = Player(name="Mid", desired_roles=only(Lane.MID))
    bot_player = Player(name="Bot", desired_roles=only(Lane.ADC, Lane.SUPPORT))

    coverage = service.get_lane_coverage([mid_player, bot_player])

    assert coverage[Lane.MID] == [mid_player]
    assert coverage[Lane.ADC] == [bot_player]
    assert coverage[Lane.SUPPORT] == [bot_player]
    assert coverage[Lane.TOP] == []


class TestFeasibleLockAssignment:
    def test_no_locked_players(self):
        service = RoleAssignmentService()
        assert service.has_feasible_lock_assignment([Player(name=f"P{i}") for i in range(10)])

    def test_two_locked_on_same_lane_fit(self):
        service = RoleAssignmentService()
        players = [
            Player(name=f"Top{i}", desired_roles=only(Lane.TOP), is_role_fixed=True) for i in range(2)
        ]
        assert service.has_feasible_lock_assignment(players)

    def test_three_locked_on_same_lane_do_not_fit(self):
        service = RoleAssignmentService()
        players = [
            Player(name=f"Top{i}", desired_roles=only(Lane.TOP), is_role_fixed=True) for i in range(3)
        ]
        assert not service.has_feasible_lock_assignment(players)

    def test_flexible_locked_player_is_moved_aside(self):
        """A locked TOP/MID player gives way to two TOP-only players."""
        service = RoleAssignmentService()
        players = [
            Player(name="Flex", desired_roles=only(Lane.TOP, Lane.MID), is_role_fixed=True),
            Player(name="Top1", desired_roles=only(Lane.TOP), is_role_fixed=True),
            Player(name="Top2", desired_roles=only(Lane.TOP), is_role_fixed=True),
        ]
        assert service.has_feasible_lock_assignment(players)

    def test_locked_player_without_any_lane(self):
        service = RoleAssignmentService()
        players = [Player(name="Nobody", desired_roles=[False] * 5, is_role_fixed=True)]
        assert not service.has_feasible_lock_assignment(players)
