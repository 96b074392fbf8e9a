"""Moves every vehicle along its row and wraps it around off-screen."""

from typing import Optional, Tuple

from crossy.config import GameConfig
from crossy.errors import MissingVehicleError
from crossy.rows import RoadRow
from crossy.world import WorldTimeline


def wrap_bounds(config: GameConfig) -> Tuple[float, float]:
    """(start, end) offsets of a row; vehicles leave past one and re-enter at the other."""
    margin = config.wrap_margin
    return ((config.min_lane - margin) * config.tile_size,
            (config.max_lane + margin) * config.tile_size)


class TrafficSimulator:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.begin, self.end = wrap_bounds(self.config)

    def advance(self, timeline: WorldTimeline, dt: float):
        # Every stored road row moves, near the player or not.
        for _, row in timeline.road_rows():
            self.advance_row(row, dt)

    def advance_row(self, row: RoadRow, dt: float):
        step = row.speed * dt
        for vehicle in row.vehicles:
            if vehicle.offset is None:
                raise MissingVehicleError(
                    f"vehicle starting in lane {vehicle.initial_lane} has no position"
                )
            if row.direction:
                moved = vehicle.offset + step
                vehicle.offset = self.begin if moved > self.end else moved
            else:
                moved = vehicle.offset - step
                vehicle.offset = self.end if moved < self.begin else moved
