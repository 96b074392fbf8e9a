import pytest

from crossy.config import GameConfig
from crossy.game import GameState
from crossy.rows import CarLaneRow, ForestRow, Tree, TreeHeight, Vehicle
from crossy.world import WorldTimeline, to_storage_index


def place_row(timeline, row, data):
    """Overwrite one generated row with a hand-built layout."""
    timeline._rows[to_storage_index(row)] = data


def empty_road(direction=True, speed=100):
    return CarLaneRow(direction=direction, speed=speed, vehicles=())


def forest(*lanes):
    return ForestRow(trees=tuple(Tree(lane=lane, height=TreeHeight.MEDIUM) for lane in lanes))


def car(offset, lane=0):
    return Vehicle(initial_lane=lane, color=0xA52523, half_width=1, offset=offset)


def clear_all_rows(timeline):
    for row in range(1, len(timeline) + 1):
        place_row(timeline, row, empty_road())


@pytest.fixture
def config():
    return GameConfig(seed=1234)


@pytest.fixture
def timeline(config):
    world = WorldTimeline(config)
    world.ensure_ahead(0)
    return world


@pytest.fixture
def open_timeline(timeline):
    clear_all_rows(timeline)
    return timeline


@pytest.fixture
def open_state(config):
    state = GameState.new(config)
    clear_all_rows(state.timeline)
    return state
