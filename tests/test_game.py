import logging

import pytest

from crossy.config import GameConfig
from crossy.game import Game, GameState, GameStatus, get_score, queue_move, restart, tick
from crossy.moves import GridPosition
from crossy.rows import CarLaneRow

from conftest import car, clear_all_rows, place_row


def test_new_game_starts_at_origin(config):
    state = GameState.new(config)
    assert state.position == GridPosition(0, 0)
    assert get_score(state) == 0
    assert len(state.timeline) == 20
    assert state.status is GameStatus.RUNNING


def test_four_forwards_scores_four(open_state):
    for _ in range(4):
        assert queue_move(open_state, "forward")
    for _ in range(4):
        result = tick(open_state, 0.2)
    assert result.status is GameStatus.RUNNING
    assert result.score == 4
    assert get_score(open_state) == 4
    assert open_state.position.lane == 0


def test_score_is_stable_without_moves(open_state):
    queue_move(open_state, "forward")
    tick(open_state, 0.2)
    assert [get_score(open_state) for _ in range(3)] == [1, 1, 1]
    tick(open_state, 0.2)
    assert get_score(open_state) == 1


def test_backward_steps_reduce_score(open_state):
    queue_move(open_state, "forward")
    queue_move(open_state, "forward")
    queue_move(open_state, "backward")
    for _ in range(3):
        tick(open_state, 0.2)
    assert get_score(open_state) == 1


def test_tick_reports_every_vehicle(config):
    state = GameState.new(config)
    result = tick(state, 0.016)
    expected = sum(len(row.vehicles) for _, row in state.timeline.road_rows())
    assert len(result.vehicles) == expected


def test_collision_is_terminal(open_state, caplog):
    vehicle = car(0.0)
    place_row(open_state.timeline, 1, CarLaneRow(direction=True, speed=100, vehicles=(vehicle,)))
    open_state.tracker.position = GridPosition(1, 0)

    with caplog.at_level(logging.INFO, logger="crossy.game"):
        result = tick(open_state, 0.01)
    assert result.status is GameStatus.TERMINATED
    assert result.score == 1
    assert "final score 1" in caplog.text

    offset = vehicle.offset
    frozen = tick(open_state, 1.0)
    assert frozen.status is GameStatus.TERMINATED
    assert vehicle.offset == offset
    assert frozen.player == result.player
    assert not queue_move(open_state, "forward")
    assert len(open_state.tracker) == 0


def test_restart_builds_a_fresh_state(open_state):
    queue_move(open_state, "forward")
    tick(open_state, 0.2)
    open_state.status = GameStatus.TERMINATED

    fresh = restart(open_state)
    assert fresh is not open_state
    assert fresh.timeline is not open_state.timeline
    assert fresh.status is GameStatus.RUNNING
    assert fresh.position == GridPosition(0, 0)
    assert len(fresh.tracker) == 0
    assert len(fresh.timeline) == 20
    assert get_score(open_state) == 1


def test_history_window_drops_old_rows():
    state = GameState.new(GameConfig(seed=3, retain_behind=2))
    clear_all_rows(state.timeline)
    for _ in range(5):
        queue_move(state, "forward")
        tick(state, 0.2)
    stored = [row for row, _ in state.timeline.stored_rows()]
    assert stored[0] == 3
    assert len(state.timeline) == 20


def test_game_wrapper_notifies_score_listeners():
    game = Game(GameConfig(seed=11))
    clear_all_rows(game.state.timeline)
    scores = []
    game.add_score_listener(scores.append)

    assert game.queue_move("forward")
    game.tick(0.2)
    assert game.get_score() == 1

    game.restart()
    assert game.get_score() == 0
    assert scores == [1, 0]

    clear_all_rows(game.state.timeline)
    game.queue_move("forward")
    game.tick(0.2)
    assert scores == [1, 0, 1]


def test_fixed_seed_restarts_into_the_same_world():
    game = Game(GameConfig(seed=21))
    first = list(game.state.timeline.stored_rows())
    game.restart()
    assert list(game.state.timeline.stored_rows()) == first


@pytest.mark.parametrize("direction", ["left", "right", "forward"])
def test_moves_from_the_start_are_admitted_on_open_ground(open_state, direction):
    assert queue_move(open_state, direction)
