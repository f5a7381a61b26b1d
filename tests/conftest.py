"""Shared test fixtures for the Itadaki engine tests."""

import pytest
from itadaki import (
    Board,
    GameConfig,
    Player,
    PlayerKind,
    ScriptedRandomSource,
    create_game,
)
from itadaki.spaces import BankTile, ChanceTile, PropertyTile, Suit, SuitTile


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def two_players():
    """Two test players."""
    return [Player("Alice", PlayerKind.HUMAN), Player("Bob", PlayerKind.BOT)]


@pytest.fixture
def three_players():
    """Three test players."""
    return [Player("Alice"), Player("Bob"), Player("Charlie")]


@pytest.fixture
def scripted_rng():
    """Random source with no values; tests append what they need."""
    return ScriptedRandomSource()


@pytest.fixture
def basic_game(game_config, two_players, scripted_rng):
    """Two players on the default board with a scripted random source."""
    return create_game(game_config, two_players, rng=scripted_rng)


@pytest.fixture
def single_property_board():
    """A one-tile loop holding a single Downtown shop."""
    return Board([PropertyTile(0, "Downtown", 300, 80)])


@pytest.fixture
def small_board():
    """Bank, a shop, one tile of every suit and a chance tile."""
    return Board(
        [
            BankTile(0),
            PropertyTile(1, "Downtown", 300, 80),
            SuitTile(2, Suit.SPADE),
            SuitTile(3, Suit.HEART),
            SuitTile(4, Suit.DIAMOND),
            SuitTile(5, Suit.CLUB),
            ChanceTile(6),
        ]
    )
