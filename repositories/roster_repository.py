"""
Repository for roster persistence.
"""

import json
import logging
from typing import Any

from repositories.base_repository import BaseRepository
from repositories.interfaces import IRosterRepository

logger = logging.getLogger("lane_divider.repositories.roster")


class RosterRepository(BaseRepository, IRosterRepository):
    """
    Stores full rosters as players-info JSON documents keyed by server id.

    Responsibilities:
    - Load a roster document for a server
    - Save (insert or replace) a roster document
    - Remove and list saved rosters
    """

    def get_players_json(self, server_id: str) -> dict[str, Any] | None:
        """
        Load the roster document saved under a server id.

        Returns:
            The players-info document, or None if nothing is saved
        """
        server_id = self.normalize_server_id(server_id)
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT players_json FROM rosters WHERE server_id = ?",
                (server_id,),
            )
            row = cursor.fetchone()
        if not row:
            return None
        return json.loads(row["players_json"])

    def set_players_json(self, server_id: str, players_json: dict[str, Any]) -> None:
        """Save a roster document, replacing any previous one for the server."""
        server_id = self.normalize_server_id(server_id)
        payload = json.dumps(players_json, ensure_ascii=False)
        version = players_json.get("version")
        player_count = len(players_json.get("players") or [])
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO rosters (server_id, players_json, version, player_count)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(server_id) DO UPDATE SET
                    players_json = excluded.players_json,
                    version = excluded.version,
                    player_count = excluded.player_count,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (server_id, payload, version, player_count),
            )
        logger.info(f"Saved roster for server {server_id} ({player_count} players)")

    def delete(self, server_id: str) -> bool:
        """Delete a saved roster. Returns True if a row was removed."""
        server_id = self.normalize_server_id(server_id)
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM rosters WHERE server_id = ?", (server_id,))
            return cursor.rowcount > 0

    def list_server_ids(self) -> list[str]:
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT server_id FROM rosters ORDER BY server_id")
            return [row["server_id"] for row in cursor.fetchall()]
