"""
Main game engine and session state.
"""

import logging
from typing import Any, Dict, List, Optional

from itadaki.board import Board
from itadaki.config import GameConfig
from itadaki.dice import RandomSource, SeededRandomSource
from itadaki.events import EventLog, EventType, GameEvent
from itadaki.exceptions import EmptyRosterError, InvalidPlayerError, InvalidRollError
from itadaki.player import Player, PlayerKind, PlayerState
from itadaki.rules import resolve_landing

logger = logging.getLogger(__name__)


def _check_roll(roll: int) -> None:
    if isinstance(roll, bool) or not isinstance(roll, int) or roll < 1:
        raise InvalidRollError(f"Roll must be a positive integer, got {roll!r}")


class GameSession:
    """
    Represents the complete state of an Itadaki game.
    This is the main interface for the game engine.

    Callers must serialize access: a turn runs to completion before the
    next may start.
    """

    def __init__(
        self,
        config: GameConfig,
        players: List[Player],
        board: Optional[Board] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.config = config
        self.board = board if board is not None else Board()
        self.rng: RandomSource = rng if rng is not None else SeededRandomSource(config.seed)
        self.event_log = EventLog()

        self.players: List[PlayerState] = [
            PlayerState(player_id, player.name, config.starting_cash, player.kind)
            for player_id, player in enumerate(players)
        ]

        self.active_turn_index = 0
        self.turn_number = 0
        # district -> shops bought there this session; only ever grows
        self.district_shop_count: Dict[str, int] = {}

        self.log_event(
            EventType.GAME_START,
            players=[p.name for p in self.players],
            starting_cash=config.starting_cash,
            board_size=len(self.board),
            seed=config.seed,
        )

    def log_event(self, event_type: EventType, player_id: Optional[int] = None, **details: Any) -> GameEvent:
        """Record an event stamped with the current turn number."""
        return self.event_log.log(event_type, player_id, self.turn_number, **details)

    def get_player(self, player_id: int) -> PlayerState:
        """Get a player by roster index."""
        if not 0 <= player_id < len(self.players):
            raise InvalidPlayerError(f"Player index {player_id} outside roster of {len(self.players)}")
        return self.players[player_id]

    def get_current_player(self) -> PlayerState:
        """Get the player whose turn it is."""
        if not self.players:
            raise EmptyRosterError("Session has no players")
        return self.players[self.active_turn_index]

    def owner_of(self, tile_index: int) -> Optional[int]:
        """Index of the player owning a tile, or None."""
        for player in self.players:
            if tile_index in player.owned_properties:
                return player.player_id
        return None

    def net_worth(self, player_id: int) -> int:
        return self.get_player(player_id).net_worth(self.board)

    def roll_dice(self) -> int:
        """Roll one die from the session's random source."""
        roll = self.rng.roll_die(self.config.die_faces)
        current = self.get_current_player()
        self.log_event(EventType.DICE_ROLL, current.player_id, total=roll, faces=self.config.die_faces)
        return roll

    def advance_player(self, player_id: int, roll: int) -> int:
        """
        Move a player forward by ``roll`` tiles and resolve the landing tile.

        Args:
            player_id: Index of the player to move.
            roll: Positive number of tiles to move. Any size is accepted.

        Returns:
            The new position.

        Raises:
            InvalidPlayerError: player_id is not in the roster.
            InvalidRollError: roll is not a positive integer.
        """
        player = self.get_player(player_id)
        _check_roll(roll)

        old_position = player.position
        player.position = self.board.wrap(old_position, roll)

        logger.debug("%s moved %d -> %d (roll %d)", player.name, old_position, player.position, roll)
        self.log_event(
            EventType.MOVE,
            player_id,
            from_position=old_position,
            to_position=player.position,
            spaces=roll,
        )

        resolve_landing(self, player_id, player.position)
        return player.position

    def take_turn(self, roll: int) -> None:
        """
        Resolve the active player's move, then pass the turn on.

        A session with no players is left untouched.
        """
        if not self.players:
            logger.warning("take_turn called on a session with no players; ignoring")
            return

        _check_roll(roll)
        current = self.active_turn_index
        self.log_event(EventType.TURN_START, current, turn=self.turn_number)
        self.advance_player(current, roll)

        self.active_turn_index = (self.active_turn_index + 1) % len(self.players)
        self.turn_number += 1

    def step(self) -> Optional[int]:
        """Roll for the active player and take the turn. Returns the roll."""
        if not self.players:
            logger.warning("step called on a session with no players; ignoring")
            return None
        roll = self.roll_dice()
        self.take_turn(roll)
        return roll

    def standings(self) -> List[PlayerState]:
        """Players ordered by net worth, richest first."""
        return sorted(self.players, key=lambda p: p.net_worth(self.board), reverse=True)


def default_players() -> List[Player]:
    """One human and two bots."""
    return [
        Player("Hero", PlayerKind.HUMAN),
        Player("Bot A", PlayerKind.BOT),
        Player("Bot B", PlayerKind.BOT),
    ]


def create_game(
    config: Optional[GameConfig] = None,
    players: Optional[List[Player]] = None,
    board: Optional[Board] = None,
    rng: Optional[RandomSource] = None,
) -> GameSession:
    """
    Create a new game session.

    Args:
        config: Game configuration (defaults to ``GameConfig()``)
        players: Roster in turn order (defaults to ``default_players()``)
        board: Board to play on (defaults to the generated board)
        rng: Random source (defaults to a source seeded from ``config.seed``)

    Returns:
        Initialized GameSession
    """
    config = config if config is not None else GameConfig()
    players = players if players is not None else default_players()
    return GameSession(config, players, board=board, rng=rng)
