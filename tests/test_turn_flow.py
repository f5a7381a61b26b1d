"""
Tests for movement, turn rotation and the dice seam.
"""

import pytest
from itadaki import (
    Board,
    GameConfig,
    Player,
    PlayerKind,
    ScriptedRandomSource,
    create_game,
)
from itadaki.events import EventType
from itadaki.exceptions import (
    EmptyRosterError,
    InvalidPlayerError,
    InvalidRollError,
    RandomSourceExhausted,
)
from itadaki.spaces import ChanceTile, Suit


def test_basic_turn_flow(basic_game):
    """Test basic turn progression."""
    assert basic_game.get_current_player().name == "Alice"
    assert basic_game.turn_number == 0

    basic_game.take_turn(2)

    assert basic_game.players[0].position == 2
    assert basic_game.get_current_player().name == "Bob"
    assert basic_game.turn_number == 1


def test_landing_resolves_tile(basic_game):
    basic_game.take_turn(2)
    assert basic_game.players[0].collected_suits == {Suit.SPADE}


@pytest.mark.parametrize("start,roll", [(0, 1), (5, 6), (16, 1), (16, 17), (3, 100), (0, 10**12)])
def test_position_wraps(basic_game, scripted_rng, start, roll):
    """New position is (old + roll) mod board length, whatever the tile."""
    scripted_rng.chance_deltas.append(0)
    player = basic_game.players[1]
    player.position = start

    basic_game.advance_player(1, roll)

    assert player.position == (start + roll) % len(basic_game.board)


def test_passing_over_tiles_has_no_effect(basic_game):
    """Only the landing tile resolves."""
    alice = basic_game.players[0]

    basic_game.advance_player(0, 3)  # passes Downtown and the spade tile

    assert alice.position == 3
    assert alice.collected_suits == set()
    assert alice.owned_properties == {3}


def test_landing_on_bank_after_full_lap(basic_game):
    alice = basic_game.players[0]
    alice.collected_suits = {Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB}
    alice.cash = 1000

    basic_game.advance_player(0, len(basic_game.board))

    assert alice.position == 0
    assert alice.level == 1
    assert alice.cash == 1600


def test_advance_returns_new_position(basic_game):
    assert basic_game.advance_player(1, 5) == 5


@pytest.mark.parametrize("roll", [0, -1, 2.5, "3", True, None])
def test_invalid_roll_is_rejected(basic_game, roll):
    with pytest.raises(InvalidRollError):
        basic_game.advance_player(0, roll)
    assert basic_game.players[0].position == 0


def test_invalid_roll_does_not_rotate(basic_game):
    with pytest.raises(InvalidRollError):
        basic_game.take_turn(0)
    assert basic_game.active_turn_index == 0
    assert basic_game.turn_number == 0


def test_advance_unknown_player(basic_game):
    with pytest.raises(InvalidPlayerError):
        basic_game.advance_player(2, 1)


def test_rotation_is_closed_cycle(three_players):
    game = create_game(GameConfig(), three_players, rng=ScriptedRandomSource(chance_deltas=[0] * 10))
    start = game.active_turn_index

    seen = []
    for _ in range(len(game.players)):
        seen.append(game.active_turn_index)
        game.take_turn(1)

    assert seen == [0, 1, 2]
    assert game.active_turn_index == start


def test_single_player_rotation(game_config):
    game = create_game(game_config, [Player("Solo")], rng=ScriptedRandomSource())

    game.take_turn(1)
    game.take_turn(1)

    assert game.active_turn_index == 0
    assert game.players[0].position == 2


def test_empty_roster_take_turn_is_no_op(game_config):
    game = create_game(game_config, [], rng=ScriptedRandomSource())

    game.take_turn(3)
    assert game.step() is None

    assert game.active_turn_index == 0
    assert game.turn_number == 0


def test_empty_roster_has_no_current_player(game_config):
    game = create_game(game_config, [], rng=ScriptedRandomSource())

    with pytest.raises(EmptyRosterError):
        game.get_current_player()


def test_bots_and_humans_both_take_turns(basic_game):
    assert basic_game.players[0].kind == PlayerKind.HUMAN
    assert basic_game.players[1].kind == PlayerKind.BOT

    basic_game.take_turn(1)
    basic_game.take_turn(5)

    assert basic_game.players[0].owned_properties == {1}
    assert basic_game.players[1].owned_properties == {5}


def test_step_rolls_from_injected_source(basic_game, scripted_rng):
    scripted_rng.rolls.extend([2, 6])

    assert basic_game.step() == 2
    assert basic_game.step() == 6

    assert basic_game.players[0].position == 2
    assert basic_game.players[1].position == 6
    assert basic_game.active_turn_index == 0


def test_step_with_exhausted_source_fails(basic_game):
    with pytest.raises(RandomSourceExhausted):
        basic_game.step()
    assert basic_game.active_turn_index == 0


def test_seeded_games_replay_identically(two_players):
    def play(seed):
        game = create_game(GameConfig(seed=seed), two_players)
        for _ in range(60):
            game.step()
        return [(p.cash, p.position, sorted(p.owned_properties), p.level) for p in game.players]

    assert play(123) == play(123)


def test_seeded_rolls_are_single_die(two_players):
    game = create_game(GameConfig(seed=3), two_players)
    for _ in range(100):
        assert 1 <= game.roll_dice() <= 6


def test_turn_events_are_logged(basic_game):
    basic_game.take_turn(1)

    types = [e.event_type for e in basic_game.event_log.get_events()]
    assert types == [
        EventType.GAME_START,
        EventType.TURN_START,
        EventType.MOVE,
        EventType.LAND,
        EventType.PURCHASE,
    ]
    move = basic_game.event_log.of_type(EventType.MOVE)[0]
    assert move.details == {"from_position": 0, "to_position": 1, "spaces": 1}
    assert move.turn_number == 0


def test_chance_board_uses_turn_draw(game_config, two_players):
    board = Board([ChanceTile(0), ChanceTile(1)])
    rng = ScriptedRandomSource(rolls=[1], chance_deltas=[-150])
    game = create_game(game_config, two_players, board=board, rng=rng)

    game.step()

    assert game.players[0].cash == 2350
    assert game.players[0].position == 1
