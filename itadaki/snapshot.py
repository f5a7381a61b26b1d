"""
Public snapshot serialization of GameSession.

Produces a read-only, UI-friendly view of the session. Nothing here
mutates state.
"""

from __future__ import annotations

from typing import Any, Dict, List

from itadaki.game import GameSession
from itadaki.spaces import ALL_SUITS, PropertyTile, SuitTile, Tile


def _serialize_tile(tile: Tile, owner_id: Any) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "index": tile.index,
        "kind": tile.kind.value,
        "label": tile.label,
        "position": list(tile.position),
    }
    if isinstance(tile, PropertyTile):
        entry.update(district=tile.district, price=tile.price, base_fee=tile.base_fee, owner_id=owner_id)
    elif isinstance(tile, SuitTile):
        entry["suit"] = tile.suit.value
    return entry


def serialize_snapshot(game: GameSession) -> Dict[str, Any]:
    """Serialize a GameSession into a plain, JSON-ready dict.

    The snapshot includes:
    - turn_number, active_turn_index and the current player's name
    - players with cash, net worth, level, suits, properties and stocks
    - district purchase counts
    - the board with owners of each property
    """
    players: List[Dict[str, Any]] = []
    for pstate in game.players:
        players.append(
            {
                "player_id": pstate.player_id,
                "name": pstate.name,
                "kind": pstate.kind.value,
                "cash": pstate.cash,
                "net_worth": pstate.net_worth(game.board),
                "level": pstate.level,
                "suits": [s.value for s in ALL_SUITS if s in pstate.collected_suits],
                "properties_owned": len(pstate.owned_properties),
                "properties": sorted(pstate.owned_properties),
                "stock_holdings": dict(pstate.stock_holdings),
                "position": pstate.position,
            }
        )

    owners = {index: p.player_id for p in game.players for index in p.owned_properties}

    return {
        "turn_number": game.turn_number,
        "active_turn_index": game.active_turn_index,
        "current_player": game.players[game.active_turn_index].name if game.players else None,
        "players": players,
        "district_shop_count": dict(game.district_shop_count),
        "board": [_serialize_tile(tile, owners.get(tile.index)) for tile in game.board],
    }
