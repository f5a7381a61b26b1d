#!/usr/bin/env python3
"""
Minimal CLI for simulating Itadaki games.

Every player rolls and resolves in turn. With ``--interactive`` human
players are asked to press Enter before their roll.
"""

import argparse
import logging
from typing import Callable, List, Optional

from itadaki.config import GameConfig
from itadaki.game import GameSession, create_game, default_players
from itadaki.game_logger import GameLogger
from itadaki.player import Player, PlayerKind
from itadaki.settings import get_engine_settings
from itadaki.spaces import ALL_SUITS


def _suit_row(player) -> str:
    return "".join(s.icon if s in player.collected_suits else "_" for s in ALL_SUITS)


def print_game_state(game: GameSession) -> None:
    """Print current game state."""
    print("\n" + "=" * 60)
    print(f"TURN {game.turn_number}")
    print("=" * 60)

    for player in game.players:
        tile = game.board.get_tile(player.position)
        marker = " <- next" if player.player_id == game.active_turn_index else ""
        print(
            f"{player.name} [{player.kind.value}]: ${player.cash} | net ${player.net_worth(game.board)} | "
            f"level {player.level} | suits {_suit_row(player)} | "
            f"{len(player.owned_properties)} properties | at {tile.label}{marker}"
        )


def print_game_summary(game: GameSession) -> None:
    """Print final standings by net worth."""
    print("\n" + "=" * 60)
    print("FINAL STANDINGS")
    print("=" * 60)

    for rank, player in enumerate(game.standings(), start=1):
        print(
            f"  {rank}. {player.name}: net ${player.net_worth(game.board)} "
            f"(cash ${player.cash}, level {player.level}, {len(player.owned_properties)} properties)"
        )

    if game.district_shop_count:
        print("\nShops bought per district:")
        for district, count in sorted(game.district_shop_count.items()):
            print(f"  {district}: {count}")

    print(f"\nTotal Turns: {game.turn_number}")


def build_players(names: Optional[List[str]], humans: int) -> List[Player]:
    """Roster from names; the first ``humans`` players are human."""
    if not names:
        return default_players()
    return [
        Player(name, PlayerKind.HUMAN if i < humans else PlayerKind.BOT)
        for i, name in enumerate(names)
    ]


def simulate_game(
    turns: int = 30,
    players: Optional[List[Player]] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = True,
    log_file: Optional[str] = None,
    interactive: bool = False,
    prompt: Callable[[str], str] = input,
) -> GameSession:
    """
    Simulate a game for a fixed number of turns.

    Args:
        turns: Number of turns to play (one turn = one player's move)
        players: Roster in turn order (default roster if None)
        config: Game configuration (defaults from environment settings)
        verbose: Whether to print state and summary
        log_file: Path to JSONL log file (None = no file log)
        interactive: Ask human players to press Enter before rolling
        prompt: Input function used in interactive mode
    """
    config = config if config is not None else get_engine_settings().to_game_config()
    game = create_game(config, players)
    logger = GameLogger(log_file) if log_file is not None else None

    if verbose:
        print(f"Starting game with {len(game.players)} players on {len(game.board)} tiles")
        print(f"Seed: {config.seed}")
        if logger is not None:
            print(f"Logging to: {logger.log_file}")

    for _ in range(turns):
        if not game.players:
            break
        current = game.get_current_player()

        if logger is not None:
            logger.flush_engine_events(game)
            logger.log_turn_snapshot(game)

        if interactive and current.kind == PlayerKind.HUMAN:
            prompt(f"{current.name}, press Enter to roll...")

        roll = game.step()

        if verbose:
            tile = game.board.get_tile(current.position)
            print(f"  {current.name} rolled {roll} -> {tile.label} (${current.cash})")
            if game.turn_number % 10 == 0:
                print_game_state(game)

    if logger is not None:
        logger.flush_engine_events(game)

    if verbose:
        print_game_summary(game)
        if logger is not None:
            print(f"\nGame logged to: {logger.log_file}")

    return game


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    settings = get_engine_settings()

    parser = argparse.ArgumentParser(description="Simulate an Itadaki board game")
    parser.add_argument("--turns", type=int, default=30, help="Number of turns to play")
    parser.add_argument(
        "--players",
        nargs="+",
        default=None,
        help="Player names in turn order (default: Hero, Bot A, Bot B)",
    )
    parser.add_argument(
        "--humans",
        type=int,
        default=1,
        help="How many of --players are human (counted from the first)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument("--interactive", action="store_true", help="Prompt human players before rolling")
    parser.add_argument("--log-file", type=str, default=None, help="Path to JSONL event log")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Python logging level")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    simulate_game(
        turns=args.turns,
        players=build_players(args.players, args.humans),
        config=settings.to_game_config(seed=args.seed),
        verbose=not args.quiet,
        log_file=args.log_file,
        interactive=args.interactive,
    )


if __name__ == "__main__":
    main()
