"""
Tests for RosterService: roster editing, division and persistence.
"""

import pytest

from domain.models.lane import Lane
from repositories.roster_repository import RosterRepository
from services import error_codes
from services.roster_service import RosterService
from shuffler import LaneShuffler
from tests.conftest import TEST_SERVER_ID


@pytest.fixture
def roster(roster_repository):
    return RosterService(
        roster_repo=roster_repository,
        shuffler=LaneShuffler(trial_budget=500),
    )


def add_players(roster: RosterService, count: int) -> None:
    tiers = ["IRON", "BRONZE", "SILVER", "GOLD", "PLATINUM", "EMERALD", "DIAMOND"]
    for i in range(count):
        result = roster.add_player(f"Player{i}", tiers[i % len(tiers)], "II")
        assert result.success


class TestAddPlayer:
    def test_rates_from_tier_and_rank(self, roster):
        result = roster.add_player("Alice", "gold", "ii", tag_line="JP1")

        assert result.success
        player = result.value
        assert player.rating == 1400
        assert player.display_rank == "Gold II"
        assert player.tier == "GOLD"
        assert player.rank == "II"
        assert player.tag_line == "JP1"
        assert player.is_participating is True

    def test_defaults_to_gold_two(self, roster):
        player = roster.add_player("Alice").value
        assert player.display_rank == "Gold II"

    def test_duplicate_name_is_noop(self, roster):
        first = roster.add_player("Alice", "GOLD", "II").value
        second = roster.add_player("Alice", "DIAMOND", "I")

        assert second.success
        assert second.value is first
        assert len(roster.players) == 1
        assert first.display_rank == "Gold II"

    def test_blank_name_rejected(self, roster):
        result = roster.add_player("   ")
        assert not result.success
        assert result.error_code == error_codes.VALIDATION_ERROR

    def test_invalid_rank_rejected(self, roster):
        result = roster.add_player("Alice", "WOOD", "I")
        assert not result.success
        assert result.error_code == error_codes.INVALID_RANK
        assert roster.players == []

    def test_roster_limit(self, roster_repository):
        roster = RosterService(roster_repo=roster_repository, max_players=50)
        add_players(roster, 50)

        result = roster.add_player("OneTooMany")

        assert not result.success
        assert result.error_code == error_codes.ROSTER_FULL
        assert len(roster.players) == 50


class TestEditing:
    def test_remove_player_by_index(self, roster):
        add_players(roster, 3)
        removed = roster.remove_player_by_index(1)
        assert removed.value.name == "Player1"
        assert [p.name for p in roster.players] == ["Player0", "Player2"]

    def test_remove_invalid_index(self, roster):
        result = roster.remove_player_by_index(0)
        assert result.error_code == error_codes.NOT_FOUND

    def test_toggle_desired_role(self, roster):
        add_players(roster, 1)
        roster.toggle_desired_role(0, Lane.MID)
        assert roster.players[0].desired_roles == [True, True, False, True, True]
        roster.toggle_desired_role(0, Lane.MID)
        assert roster.players[0].desired_roles == [True] * 5

    def test_toggle_invalid_lane(self, roster):
        add_players(roster, 1)
        result = roster.toggle_desired_role(0, 7)
        assert result.error_code == error_codes.VALIDATION_ERROR

    def test_set_role_fixed_and_participation(self, roster):
        add_players(roster, 1)
        roster.set_role_fixed(0, True)
        roster.set_participation(0, False)
        assert roster.players[0].is_role_fixed is True
        assert roster.players[0].is_participating is False

    def test_update_player_rank(self, roster):
        add_players(roster, 1)
        result = roster.update_player_rank(0, "MASTER")
        assert result.success
        assert roster.players[0].rating == 2800
        assert roster.players[0].display_rank == "Master"

    def test_apex_rank_clears_division(self, roster):
        roster.add_player("Alice", "GOLD", "IV")
        roster.update_player_rank(0, "MASTER")
        assert roster.players[0].tier == "MASTER"
        assert roster.players[0].rank == ""
        assert roster.players[0].display_rank == "Master"

        roster.add_player("Bob", "GRANDMASTER", "I")
        assert roster.players[1].rank == ""

        roster.update_player_rank(0, "PLATINUM", "iii")
        assert roster.players[0].rank == "III"

    def test_update_player_rank_invalid_keeps_rating(self, roster):
        roster.add_player("Alice", "GOLD", "II")
        result = roster.update_player_rank(0, "GOLD", "IX")
        assert result.error_code == error_codes.INVALID_RANK
        assert roster.players[0].rating == 1400


class TestDivideTeams:
    def test_not_dividable_until_ten_participants(self, roster):
        add_players(roster, 9)
        assert not roster.is_dividable()
        roster.add_player("Tenth")
        assert roster.is_dividable()

    def test_divide_fails_with_nine_participants(self, roster):
        add_players(roster, 10)
        roster.set_participation(0, False)

        result = roster.divide_teams(seed=1)

        assert not result.success
        assert result.error_code == error_codes.INSUFFICIENT_PLAYERS
        assert roster.divisions.available_counts() == []

    def test_divide_uses_participants_only(self, roster):
        add_players(roster, 12)
        roster.set_participation(10, False)
        roster.set_participation(11, False)

        result = roster.divide_teams(seed=1)

        assert result.success
        assert roster.divisions is result.value
        _, best = result.value.best()
        assert {p.name for p in best.players} == {f"Player{i}" for i in range(10)}

    def test_roster_edits_leave_stored_divisions_unchanged(self, roster):
        for i in range(10):
            roster.add_player(f"Player{i}", "GOLD", "II")
        table = roster.divide_teams(seed=1).value
        seated = table[0].players[0]
        index = next(i for i, p in enumerate(roster.players) if p.name == seated.name)

        roster.update_player_rank(index, "CHALLENGER")
        roster.toggle_desired_role(index, Lane.TOP)
        roster.set_role_fixed(index, True)

        stored = roster.divisions[0].players[0]
        assert stored.rating == 1400
        assert stored.desired_roles == [True] * 5
        assert stored.is_role_fixed is False
        assert roster.divisions[0].evaluation_score == 0
        assert roster.divisions[0].blue_team.get_total_rating() == 5 * 1400


class TestSerialization:
    def test_players_info_document(self, roster):
        roster.add_player("Alice", "GOLD", "II")
        info = roster.players_info

        assert info["version"] == "1.0"
        assert info["players"][0]["name"] == "Alice"
        assert info["players"][0]["displayRank"] == "Gold II"

    def test_set_players_from_invalid_document(self, roster):
        result = roster.set_players_from_players_json(
            {"version": "1.0", "players": [{"name": "Bad", "desiredRoles": [True]}]}
        )
        assert result.error_code == error_codes.VALIDATION_ERROR

    def test_set_players_from_oversized_document(self, roster):
        doc = {"version": "1.0", "players": [{"name": f"P{i}"} for i in range(51)]}
        result = roster.set_players_from_players_json(doc)
        assert result.error_code == error_codes.ROSTER_FULL


class TestPersistence:
    def test_save_and_load(self, roster, roster_repository):
        roster.add_player("Alice", "GOLD", "II")
        roster.add_player("Bob", "SILVER", "I")
        roster.toggle_desired_role(1, Lane.TOP)
        roster.set_role_fixed(1, True)
        assert roster.save(TEST_SERVER_ID).success

        other = RosterService(roster_repo=roster_repository)
        result = other.load(TEST_SERVER_ID)

        assert result.success
        assert [p.name for p in other.players] == ["Alice", "Bob"]
        bob = other.players[1]
        assert bob.is_role_fixed is True
        assert bob.desired_roles == [False, True, True, True, True]
        assert bob.rating == roster.players[1].rating

    def test_load_unknown_server(self, roster):
        result = roster.load("nowhere")
        assert result.error_code == error_codes.ROSTER_NOT_FOUND

    def test_blank_server_id(self, roster):
        assert roster.save(" ").error_code == error_codes.VALIDATION_ERROR
        assert roster.load("").error_code == error_codes.VALIDATION_ERROR

    def test_persistence_requires_repository(self):
        roster = RosterService(roster_repo=None)
        with pytest.raises(RuntimeError):
            roster.save(TEST_SERVER_ID)

    def test_saved_roster_round_trips_through_new_repository(self, roster, repo_db_path):
        roster.add_player("Alice")
        roster.save(TEST_SERVER_ID)

        fresh = RosterService(roster_repo=RosterRepository(repo_db_path))
        assert fresh.load(TEST_SERVER_ID).success
        assert fresh.players[0].name == "Alice"
