"""
Abstract repository interfaces for data access.

These interfaces define the contracts implemented by concrete repositories.
"""

from abc import ABC, abstractmethod
from typing import Any


class IRosterRepository(ABC):
    @abstractmethod
    def get_players_json(self, server_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    def set_players_json(self, server_id: str, players_json: dict[str, Any]) -> None: ...

    @abstractmethod
    def delete(self, server_id: str) -> bool: ...

    @abstractmethod
    def list_server_ids(self) -> list[str]: ...
