"""
Service for browsing a roster and picking the players for a game.
"""

from collections.abc import Iterable

from domain.models.player import Player
from services.error_codes import VALIDATION_ERROR
from services.result import Result

UNKNOWN_POSITION = "Unknown"


class RosterService:
    """
    Read-only view over the full list of known players.

    Players are always presented strongest first; equal skills keep roster order.
    """

    def __init__(self, players: Iterable[Player]):
        self._players = list(players)
        self._by_id = {p.id: p for p in self._players}

    def get_sorted_players(self) -> list[Player]:
        """All players, skill descending."""
        return sorted(self._players, key=lambda p: p.skill, reverse=True)

    def get_player(self, player_id: int) -> Player | None:
        return self._by_id.get(player_id)

    def group_by_position(self) -> dict[str, list[Player]]:
        """
        Group players by position, each group sorted by skill descending.

        Players without a position are grouped under "Unknown".
        """
        groups: dict[str, list[Player]] = {}
        for player in self.get_sorted_players():
            groups.setdefault(player.position or UNKNOWN_POSITION, []).append(player)
        return groups

    def get_players_by_ids(self, player_ids: Iterable[int]) -> list[Player]:
        """Selected players in display order; unknown IDs are ignored."""
        wanted = set(player_ids)
        return [p for p in self.get_sorted_players() if p.id in wanted]

    def select(self, player_ids: Iterable[int]) -> Result[list[Player]]:
        """
        Resolve a selection of IDs, failing if any ID is not on the roster.

        Returns:
            Result with the selected players (skill descending)
        """
        player_ids = list(player_ids)
        unknown = sorted({pid for pid in player_ids if pid not in self._by_id})
        if unknown:
            return Result.fail(
                f"Unknown player id(s): {', '.join(str(pid) for pid in unknown)}",
                code=VALIDATION_ERROR,
            )
        return Result.ok(self.get_players_by_ids(player_ids))
