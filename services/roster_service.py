"""
Roster management and team division for one server/session.
"""

import logging
from typing import Any

from config import NEW_PLAYER_PARTICIPATING, PLAYERS_JSON_VERSION, ROSTER_MAX_PLAYERS
from domain.models.division import DivisionTable
from domain.models.lane import Lane
from domain.models.player import Player
from rating_system import TierRatingSystem
from repositories.interfaces import IRosterRepository
from services import error_codes
from services.result import Result
from shuffler import LaneShuffler, PreconditionViolation

logger = logging.getLogger("lane_divider.roster")


class RosterService:
    """
    Holds a roster of up to 50 players and divides its participants into teams.

    Provides methods for:
    - Adding, editing and removing players
    - Toggling lane preferences, role locks and participation
    - Running the lane search and keeping the last division table
    - Loading and saving the roster by server id
    """

    def __init__(
        self,
        roster_repo: IRosterRepository | None = None,
        shuffler: LaneShuffler | None = None,
        rating_system: TierRatingSystem | None = None,
        max_players: int = ROSTER_MAX_PLAYERS,
    ):
        self.roster_repo = roster_repo
        self.shuffler = shuffler or LaneShuffler()
        self.rating_system = rating_system or TierRatingSystem()
        self.max_players = max_players
        self.players: list[Player] = []
        self.divisions = DivisionTable()

    # --- Roster editing ---

    def get_player(self, index: int) -> Player | None:
        if 0 <= index < len(self.players):
            return self.players[index]
        return None

    def find_player(self, name: str) -> Player | None:
        return next((p for p in self.players if p.name == name), None)

    def add_player(
        self,
        name: str,
        tier: str | None = None,
        rank: str | None = None,
        tag_line: str = "",
    ) -> Result[Player]:
        """
        Add a player rated from a tier/rank label.

        Adding a name already on the roster is a no-op that returns the
        existing player.
        """
        name = (name or "").strip()
        if not name:
            return Result.fail("Player name is required", code=error_codes.VALIDATION_ERROR)

        existing = self.find_player(name)
        if existing is not None:
            return Result.ok(existing)

        if len(self.players) >= self.max_players:
            return Result.fail(
                f"Cannot add more players. Maximum of {self.max_players} reached.",
                code=error_codes.ROSTER_FULL,
            )

        tier = tier or self.rating_system.default_tier
        rank = rank or self.rating_system.default_rank
        try:
            rating = self.rating_system.to_rating(tier, rank)
            display_rank = self.rating_system.display_rank(tier, rank)
        except ValueError as exc:
            return Result.fail(str(exc), code=error_codes.INVALID_RANK)

        player = Player(
            name=name,
            rating=rating,
            is_participating=NEW_PLAYER_PARTICIPATING,
            tag_line=tag_line,
            tier=self.rating_system.normalize_tier(tier),
            rank="" if self.rating_system.is_apex(tier) else self.rating_system.normalize_rank(rank),
            display_rank=display_rank,
        )
        self.players.append(player)
        logger.debug(f"Added player {player}")
        return Result.ok(player)

    def update_player_rank(self, index: int, tier: str, rank: str | None = None) -> Result[Player]:
        """Re-rate a player from a new tier/rank label."""
        player = self.get_player(index)
        if player is None:
            return Result.fail(f"Invalid player index: {index}", code=error_codes.NOT_FOUND)
        try:
            rating = self.rating_system.to_rating(tier, rank)
            display_rank = self.rating_system.display_rank(tier, rank)
        except ValueError as exc:
            return Result.fail(str(exc), code=error_codes.INVALID_RANK)
        player.rating = rating
        player.display_rank = display_rank
        player.tier = self.rating_system.normalize_tier(tier)
        if self.rating_system.is_apex(tier):
            player.rank = ""
        elif rank:
            player.rank = self.rating_system.normalize_rank(rank)
        return Result.ok(player)

    def remove_player_by_index(self, index: int) -> Result[Player]:
        if self.get_player(index) is None:
            return Result.fail(f"Invalid player index: {index}", code=error_codes.NOT_FOUND)
        return Result.ok(self.players.pop(index))

    def toggle_desired_role(self, index: int, lane: Lane | int) -> Result[Player]:
        player = self.get_player(index)
        if player is None:
            return Result.fail(f"Invalid player index: {index}", code=error_codes.NOT_FOUND)
        try:
            lane = Lane(lane)
        except ValueError:
            return Result.fail(f"Invalid lane: {lane}", code=error_codes.VALIDATION_ERROR)
        player.desired_roles[lane] = not player.desired_roles[lane]
        return Result.ok(player)

    def set_role_fixed(self, index: int, is_role_fixed: bool) -> Result[Player]:
        player = self.get_player(index)
        if player is None:
            return Result.fail(f"Invalid player index: {index}", code=error_codes.NOT_FOUND)
        player.is_role_fixed = is_role_fixed
        return Result.ok(player)

    def set_participation(self, index: int, is_participating: bool) -> Result[Player]:
        player = self.get_player(index)
        if player is None:
            return Result.fail(f"Invalid player index: {index}", code=error_codes.NOT_FOUND)
        player.is_participating = is_participating
        return Result.ok(player)

    # --- Division ---

    def get_participants(self) -> list[Player]:
        return self.shuffler.get_participants(self.players)

    def is_dividable(self) -> bool:
        """Check whether the roster has exactly ten participants."""
        return self.shuffler.is_dividable(self.players)

    def divide_teams(self, seed: int | None = None) -> Result[DivisionTable]:
        """
        Run the lane search over the current participants.

        On success the table is also kept as self.divisions. On failure the
        previous table is left as it was.
        """
        try:
            table = self.shuffler.search(self.players, seed=seed)
        except PreconditionViolation as exc:
            logger.info(f"Division refused: {exc}")
            return Result.fail(str(exc), code=error_codes.INSUFFICIENT_PLAYERS)
        self.divisions = table
        return Result.ok(table)

    # --- Serialization and persistence ---

    @property
    def players_info(self) -> dict[str, Any]:
        """The roster as a players-info JSON document."""
        return {
            "version": PLAYERS_JSON_VERSION,
            "players": [p.to_dict() for p in self.players],
        }

    def set_players_from_players_json(self, players_json: dict[str, Any]) -> Result[list[Player]]:
        """Replace the roster with the players of a players-info document."""
        entries = players_json.get("players") or []
        if len(entries) > self.max_players:
            return Result.fail(
                f"Roster has {len(entries)} players, maximum is {self.max_players}",
                code=error_codes.ROSTER_FULL,
            )
        try:
            players = [Player.from_dict(entry) for entry in entries]
        except (KeyError, TypeError, ValueError) as exc:
            return Result.fail(f"Invalid roster document: {exc}", code=error_codes.VALIDATION_ERROR)
        self.players = players
        return Result.ok(self.players)

    def load(self, server_id: str) -> Result[list[Player]]:
        """Replace the roster with the one saved under a server id."""
        if self.roster_repo is None:
            raise RuntimeError("RosterService has no roster repository")
        if not (server_id or "").strip():
            return Result.fail("Server id is required", code=error_codes.VALIDATION_ERROR)

        players_json = self.roster_repo.get_players_json(server_id)
        if players_json is None:
            return Result.fail(f"No roster saved for {server_id}", code=error_codes.ROSTER_NOT_FOUND)
        result = self.set_players_from_players_json(players_json)
        if result:
            logger.info(f"Loaded roster for server {server_id} ({len(self.players)} players)")
        return result

    def save(self, server_id: str) -> Result[None]:
        """Save the roster under a server id."""
        if self.roster_repo is None:
            raise RuntimeError("RosterService has no roster repository")
        if not (server_id or "").strip():
            return Result.fail("Server id is required", code=error_codes.VALIDATION_ERROR)

        self.roster_repo.set_players_json(server_id, self.players_info)
        return Result.ok()
