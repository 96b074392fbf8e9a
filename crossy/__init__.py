"""Lane-crossing runner core: world generation, moves, traffic and collisions."""

from crossy.config import GameConfig
from crossy.errors import ConfigError, CrossyError, GenerationExhaustedError, MissingVehicleError
from crossy.game import Game, GameState, GameStatus, TickResult, get_score, queue_move, restart, tick
from crossy.moves import Direction, GridPosition
from crossy.rows import CarLaneRow, ForestRow, Tree, TreeHeight, TruckLaneRow, Vehicle
from crossy.world import WorldTimeline

__all__ = [
    "CarLaneRow",
    "ConfigError",
    "CrossyError",
    "Direction",
    "ForestRow",
    "Game",
    "GameConfig",
    "GameState",
    "GameStatus",
    "GenerationExhaustedError",
    "GridPosition",
    "MissingVehicleError",
    "TickResult",
    "Tree",
    "TreeHeight",
    "TruckLaneRow",
    "Vehicle",
    "WorldTimeline",
    "get_score",
    "queue_move",
    "restart",
    "tick",
]
