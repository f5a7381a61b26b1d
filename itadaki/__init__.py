"""
Itadaki Rules Engine

A deterministic turn-resolution and economy engine for a Fortune Street
style board game.
"""

from .board import Board, District, generate_board
from .config import GameConfig
from .dice import RandomSource, ScriptedRandomSource, SeededRandomSource
from .game import GameSession, create_game, default_players
from .player import Player, PlayerKind, PlayerState
from .spaces import Suit, TileKind

__all__ = [
    "Board",
    "District",
    "generate_board",
    "GameConfig",
    "RandomSource",
    "ScriptedRandomSource",
    "SeededRandomSource",
    "GameSession",
    "create_game",
    "default_players",
    "Player",
    "PlayerKind",
    "PlayerState",
    "Suit",
    "TileKind",
]
