"""
Player/vehicle hit testing.

Hitboxes are axis-aligned pygame.Rects on the ground plane: x runs along
the row (the lane axis) and y runs across rows. Only vehicles in the row
the player has committed to are tested.
"""

from typing import Optional, Tuple

import pygame

from crossy.config import GameConfig
from crossy.errors import MissingVehicleError
from crossy.rows import TruckLaneRow, Vehicle, is_road
from crossy.world import WorldTimeline


def _centered_rect(cx: float, cy: float, size: Tuple[int, int]) -> pygame.Rect:
    w, h = size
    rect = pygame.Rect(0, 0, w, h)
    rect.center = (round(cx), round(cy))
    return rect


def player_hitbox(x: float, y: float, config: GameConfig) -> pygame.Rect:
    return _centered_rect(x, y, config.player_hitbox)


def vehicle_hitbox(vehicle: Vehicle, row: int, truck: bool, config: GameConfig) -> pygame.Rect:
    if vehicle.offset is None:
        raise MissingVehicleError(
            f"vehicle starting in lane {vehicle.initial_lane} of row {row} has no position"
        )
    size = config.truck_hitbox if truck else config.car_hitbox
    return _centered_rect(vehicle.offset, row * config.tile_size, size)


class CollisionDetector:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def check(self, timeline: WorldTimeline, row: int, x: float, y: float) -> Optional[Vehicle]:
        """Return the vehicle in ``row`` that the player at (x, y) touches, if any."""
        data = timeline.row_at(row)
        if not is_road(data):
            return None
        player = player_hitbox(x, y, self.config)
        truck = isinstance(data, TruckLaneRow)
        for vehicle in data.vehicles:
            if player.colliderect(vehicle_hitbox(vehicle, row, truck, self.config)):
                return vehicle
        return None
