"""
Board generation and read-only tile queries.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from itadaki.exceptions import InvalidBoardError, InvalidTileError
from itadaki.spaces import (
    ALL_SUITS,
    BankTile,
    ChanceTile,
    PropertyTile,
    SuitTile,
    Tile,
)

TILE_SIZE = 48.0


@dataclass(frozen=True)
class District:
    """A named district and its (price, base_fee) shops, in board order."""

    name: str
    shops: Tuple[Tuple[int, int], ...]


DEFAULT_DISTRICTS: Tuple[District, ...] = (
    District("Downtown", ((300, 80), (320, 90))),
    District("Plaza", ((280, 75), (260, 70))),
    District("Harbor", ((350, 95), (360, 105))),
    District("Grove", ((240, 60), (260, 65))),
)


def _track_positions(count: int, tile_size: float = TILE_SIZE) -> List[Tuple[float, float]]:
    """Spread ``count`` points evenly around a square track centred on the origin."""
    side_tiles = max(1, -(-count // 4))
    side = side_tiles * tile_size
    perimeter = 4 * side
    half = side / 2

    positions = []
    for i in range(count):
        d = perimeter * i / count
        if d < side:
            x, y = d, 0.0
        elif d < 2 * side:
            x, y = side, d - side
        elif d < 3 * side:
            x, y = side - (d - 2 * side), side
        else:
            x, y = 0.0, side - (d - 3 * side)
        positions.append((x - half, y - half))
    return positions


def generate_board(districts: Sequence[District] = DEFAULT_DISTRICTS) -> List[Tile]:
    """
    Build the loop of tiles.

    Bank first, then one group per district laid out as
    Property, Suit, Property, Chance. Suits cycle spade, heart, diamond,
    club from group to group. Deterministic.

    Args:
        districts: Districts in board order, each with exactly two shops.

    Returns:
        Tiles indexed 0..N-1.
    """
    layout = [("bank", None)]
    for group, district in enumerate(districts):
        if len(district.shops) != 2:
            raise InvalidBoardError(
                f"District '{district.name}' needs exactly 2 shops, got {len(district.shops)}"
            )
        first, second = district.shops
        layout.append(("property", (district.name, first)))
        layout.append(("suit", ALL_SUITS[group % len(ALL_SUITS)]))
        layout.append(("property", (district.name, second)))
        layout.append(("chance", None))

    positions = _track_positions(len(layout))
    tiles: List[Tile] = []
    for index, ((kind, payload), position) in enumerate(zip(layout, positions)):
        if kind == "bank":
            tiles.append(BankTile(index, position=position))
        elif kind == "property":
            name, (price, fee) = payload
            tiles.append(PropertyTile(index, name, price, fee, position=position))
        elif kind == "suit":
            tiles.append(SuitTile(index, payload, position=position))
        else:
            tiles.append(ChanceTile(index, position=position))
    return tiles


class Board:
    """The closed loop of tiles. Immutable once built."""

    def __init__(self, tiles: Optional[Sequence[Tile]] = None):
        tiles = list(tiles) if tiles is not None else generate_board()
        if not tiles:
            raise InvalidBoardError("Board needs at least one tile")
        for expected, tile in enumerate(tiles):
            if tile.index != expected:
                raise InvalidBoardError(
                    f"Tile indices must be contiguous from 0; found {tile.index} at slot {expected}"
                )
        self._tiles: Tuple[Tile, ...] = tuple(tiles)
        self.districts: Dict[str, List[int]] = self._build_districts()

    def _build_districts(self) -> Dict[str, List[int]]:
        """Build a mapping of district name to property indices."""
        groups: Dict[str, List[int]] = {}
        for tile in self._tiles:
            if isinstance(tile, PropertyTile):
                groups.setdefault(tile.district, []).append(tile.index)
        return groups

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def get_tile(self, index: int) -> Tile:
        """Get the tile at the given index. Does not wrap."""
        if not 0 <= index < len(self._tiles):
            raise InvalidTileError(f"Tile index {index} outside board of {len(self._tiles)} tiles")
        return self._tiles[index]

    def get_property_tile(self, index: int) -> Optional[PropertyTile]:
        """Get a property tile, or None if the tile is not a property."""
        tile = self.get_tile(index)
        return tile if isinstance(tile, PropertyTile) else None

    def get_district(self, name: str) -> List[int]:
        """Get all property indices in a district."""
        return self.districts.get(name, [])

    def wrap(self, position: int, steps: int) -> int:
        """Position reached after moving ``steps`` tiles forward."""
        return (position + steps) % len(self._tiles)
