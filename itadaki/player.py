"""
Player state and management.
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict

from itadaki.spaces import ALL_SUITS, PropertyTile, Suit

if TYPE_CHECKING:
    from itadaki.board import Board


class PlayerKind(Enum):
    """Who drives a player's turns."""

    HUMAN = "human"
    BOT = "bot"


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, player_id: int, name: str, starting_cash: int, kind: PlayerKind = PlayerKind.HUMAN):
        self.player_id = player_id
        self.name = name
        self.kind = kind
        self.cash = starting_cash
        self.position = 0
        self.level = 0
        # district -> invested amount; no rule populates this yet
        self.stock_holdings: Dict[str, int] = {}
        self.owned_properties: set[int] = set()
        self.collected_suits: set[Suit] = set()

    @property
    def has_full_suit_set(self) -> bool:
        return len(self.collected_suits) == len(ALL_SUITS)

    def property_value(self, board: "Board") -> int:
        """Face value of every owned property."""
        total = 0
        for index in self.owned_properties:
            tile = board.get_tile(index)
            if isinstance(tile, PropertyTile):
                total += tile.price
        return total

    def net_worth(self, board: "Board") -> int:
        """Cash plus owned property prices plus stock holdings. Never cached."""
        return self.cash + self.property_value(board) + sum(self.stock_holdings.values())

    def __repr__(self) -> str:
        return (
            f"PlayerState(id={self.player_id}, name='{self.name}', kind={self.kind.value}, "
            f"cash={self.cash}, position={self.position}, level={self.level})"
        )


class Player:
    """
    Convenience wrapper for player information.
    This is primarily for the external API.
    """

    def __init__(self, name: str, kind: PlayerKind = PlayerKind.BOT):
        self.name = name
        self.kind = kind

    def __repr__(self) -> str:
        return f"Player(name='{self.name}', kind={self.kind.value})"
