"""
Tile resolution rules.

One function per tile kind. ``resolve_landing`` dispatches on the closed
``TileKind`` enum and is called once per landing; tiles passed over are
skipped.
"""

import logging
from typing import TYPE_CHECKING, Optional

from itadaki.events import EventType
from itadaki.exceptions import ContractViolation
from itadaki.spaces import PropertyTile, SuitTile, TileKind

if TYPE_CHECKING:
    from itadaki.game import GameSession

logger = logging.getLogger(__name__)


def resolve_landing(game: "GameSession", player_id: int, tile_index: int) -> None:
    """
    Resolve the effects of landing on a tile.

    Args:
        game: Session to mutate.
        player_id: Index of the landing player.
        tile_index: Index of the tile landed on.

    Raises:
        InvalidPlayerError: player_id is not in the roster.
        InvalidTileError: tile_index is outside the board.
    """
    player = game.get_player(player_id)
    tile = game.board.get_tile(tile_index)

    game.log_event(EventType.LAND, player_id, position=tile_index, tile=tile.label, kind=tile.kind.value)

    if tile.kind == TileKind.BANK:
        resolve_bank(game, player_id)
    elif tile.kind == TileKind.PROPERTY:
        resolve_property(game, player_id, tile)
    elif tile.kind == TileKind.SUIT:
        resolve_suit(game, player_id, tile)
    elif tile.kind == TileKind.CHANCE:
        resolve_chance(game, player_id)
    else:
        raise ContractViolation(f"Unhandled tile kind {tile.kind!r} at {tile_index} for {player.name}")


def resolve_bank(game: "GameSession", player_id: int) -> None:
    """Cash in a full suit set: level up, collect salary, clear suits."""
    player = game.get_player(player_id)
    if not player.has_full_suit_set:
        game.log_event(EventType.BANK_VISIT, player_id, suits=len(player.collected_suits), leveled=False)
        return

    # Salary is based on net worth before anything changes
    net_worth = player.net_worth(game.board)
    salary = game.config.salary_for(net_worth)

    player.level += 1
    player.cash += salary
    player.collected_suits.clear()

    logger.debug("%s levelled to %d, salary %d (net worth %d)", player.name, player.level, salary, net_worth)
    game.log_event(
        EventType.LEVEL_UP,
        player_id,
        level=player.level,
        salary=salary,
        net_worth=net_worth,
        new_balance=player.cash,
    )


def resolve_property(game: "GameSession", player_id: int, tile: PropertyTile) -> None:
    """Pay the owner's fee, or buy the shop if it is free and affordable."""
    player = game.get_player(player_id)
    owner_id: Optional[int] = game.owner_of(tile.index)

    if owner_id is None:
        if player.cash < tile.price:
            game.log_event(
                EventType.PURCHASE_DECLINED,
                player_id,
                position=tile.index,
                price=tile.price,
                cash=player.cash,
            )
            return

        player.cash -= tile.price
        player.owned_properties.add(tile.index)
        game.district_shop_count[tile.district] = game.district_shop_count.get(tile.district, 0) + 1

        logger.debug("%s bought %s #%d for %d", player.name, tile.district, tile.index, tile.price)
        game.log_event(
            EventType.PURCHASE,
            player_id,
            position=tile.index,
            district=tile.district,
            price=tile.price,
            new_balance=player.cash,
        )
        return

    if owner_id == player_id:
        return

    # Direct transfer, no floor on cash
    owner = game.get_player(owner_id)
    fee = tile.base_fee
    player.cash -= fee
    owner.cash += fee

    logger.debug("%s paid %d to %s at #%d", player.name, fee, owner.name, tile.index)
    game.log_event(
        EventType.FEE_PAYMENT,
        player_id,
        owner=owner_id,
        position=tile.index,
        amount=fee,
        payer_balance=player.cash,
        owner_balance=owner.cash,
    )


def resolve_suit(game: "GameSession", player_id: int, tile: SuitTile) -> None:
    """Add the tile's suit to the player's set."""
    player = game.get_player(player_id)
    already_held = tile.suit in player.collected_suits
    player.collected_suits.add(tile.suit)

    game.log_event(
        EventType.SUIT_COLLECTED,
        player_id,
        suit=tile.suit.value,
        duplicate=already_held,
        suits=len(player.collected_suits),
    )


def resolve_chance(game: "GameSession", player_id: int) -> None:
    """Apply a random cash delta drawn from the session's random source."""
    player = game.get_player(player_id)
    delta = game.rng.draw_chance_delta(game.config.chance_min, game.config.chance_max)
    player.cash += delta

    logger.debug("%s drew chance %+d", player.name, delta)
    game.log_event(EventType.CHANCE, player_id, amount=delta, new_balance=player.cash)
