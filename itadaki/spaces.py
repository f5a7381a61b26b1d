"""
Board tile definitions and kinds.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Tuple


class Suit(Enum):
    """The four collectible suits."""

    SPADE = "spade"
    HEART = "heart"
    DIAMOND = "diamond"
    CLUB = "club"

    @property
    def icon(self) -> str:
        return _SUIT_ICONS[self]


_SUIT_ICONS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}

# Display and cycling order
ALL_SUITS: Tuple[Suit, ...] = (Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB)


class TileKind(Enum):
    """Closed set of tile kinds on the board."""

    BANK = "bank"
    PROPERTY = "property"
    SUIT = "suit"
    CHANCE = "chance"


@dataclass(frozen=True)
class Tile:
    """Base class for a board tile."""

    index: int
    # Display coordinate only, never read by rule logic
    position: Tuple[float, float] = field(default=(0.0, 0.0), kw_only=True, compare=False)

    kind: ClassVar[TileKind]

    @property
    def label(self) -> str:
        return self.kind.value.title()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(index={self.index}, label='{self.label}')"


@dataclass(frozen=True, repr=False)
class BankTile(Tile):
    """The Bank: cash out a full suit set for a level and salary."""

    kind: ClassVar[TileKind] = TileKind.BANK


@dataclass(frozen=True, repr=False)
class PropertyTile(Tile):
    """A shop that can be bought and charges a fee to other players."""

    district: str
    price: int
    base_fee: int

    kind: ClassVar[TileKind] = TileKind.PROPERTY

    def __post_init__(self) -> None:
        if self.price <= 0 or self.base_fee <= 0:
            raise ValueError(
                f"Property at {self.index} needs positive price and fee "
                f"(got price={self.price}, base_fee={self.base_fee})"
            )

    @property
    def label(self) -> str:
        return self.district


@dataclass(frozen=True, repr=False)
class SuitTile(Tile):
    """Grants one suit to whoever lands here."""

    suit: Suit

    kind: ClassVar[TileKind] = TileKind.SUIT

    @property
    def label(self) -> str:
        return f"{self.suit.icon} Suit"


@dataclass(frozen=True, repr=False)
class ChanceTile(Tile):
    """Random cash gain or loss."""

    kind: ClassVar[TileKind] = TileKind.CHANCE
