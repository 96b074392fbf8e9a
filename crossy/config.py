"""
Tunable constants for the lane-crossing core.

Everything lives at module level and is gathered into a frozen GameConfig
so each component can be handed its own copy.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from crossy.errors import ConfigError


# ----------------------------- Grid -----------------------------

# Lanes run from MIN_LANE to MAX_LANE inclusive; 17 lanes, centred on 0.
MIN_LANE = -8
MAX_LANE = 8
TILE_SIZE = 42  # world units per tile

# ----------------------------- World generation -----------------------------

BATCH_SIZE = 20
LOOKAHEAD = 10
SAFE_STRIP_ROWS = 10  # rows 0, -1, ... -9 are plain grass

TREES_PER_FOREST = 4
CARS_PER_LANE = 3
TRUCKS_PER_LANE = 2
CAR_HALF_WIDTH = 1  # car covers initial_lane-1 .. initial_lane+1
TRUCK_HALF_WIDTH = 2

LANE_SPEEDS = (100, 125, 150)  # world units/sec
VEHICLE_COLORS = (0xA52523, 0xBDB638, 0x78B14B)

# Rejection sampling gives up after this many draws for one occupant.
MAX_PLACEMENT_ATTEMPTS = 1000

# ----------------------------- Motion -----------------------------

STEP_DURATION = 0.2  # seconds per hop
HOP_HEIGHT = 8
WRAP_MARGIN = 2  # lanes past the edge before a vehicle wraps

# ----------------------------- Hitboxes -----------------------------

# (along the lane, across the lane) in world units
PLAYER_HITBOX = (15, 15)
CAR_HITBOX = (60, 30)
TRUCK_HITBOX = (100, 35)


@dataclass(frozen=True)
class GameConfig:
    min_lane: int = MIN_LANE
    max_lane: int = MAX_LANE
    tile_size: int = TILE_SIZE

    batch_size: int = BATCH_SIZE
    lookahead: int = LOOKAHEAD
    safe_strip_rows: int = SAFE_STRIP_ROWS

    trees_per_forest: int = TREES_PER_FOREST
    cars_per_lane: int = CARS_PER_LANE
    trucks_per_lane: int = TRUCKS_PER_LANE
    car_half_width: int = CAR_HALF_WIDTH
    truck_half_width: int = TRUCK_HALF_WIDTH
    lane_speeds: Tuple[float, ...] = LANE_SPEEDS
    vehicle_colors: Tuple[int, ...] = VEHICLE_COLORS
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS

    step_duration: float = STEP_DURATION
    hop_height: float = HOP_HEIGHT
    wrap_margin: int = WRAP_MARGIN

    player_hitbox: Tuple[int, int] = PLAYER_HITBOX
    car_hitbox: Tuple[int, int] = CAR_HITBOX
    truck_hitbox: Tuple[int, int] = TRUCK_HITBOX

    # None keeps every generated row forever.
    retain_behind: Optional[int] = None
    # None draws a fresh world seed on every restart.
    seed: Optional[int] = None

    def __post_init__(self):
        if not self.min_lane <= 0 <= self.max_lane:
            raise ConfigError(
                f"lane range [{self.min_lane}, {self.max_lane}] must contain lane 0"
            )
        if self.step_duration <= 0:
            raise ConfigError(f"step_duration must be positive, got {self.step_duration}")
        if self.batch_size <= 0:
            raise ConfigError(f"batch_size must be positive, got {self.batch_size}")
        if self.lookahead < 0:
            raise ConfigError(f"lookahead must not be negative, got {self.lookahead}")
        if self.retain_behind is not None and self.retain_behind < 0:
            raise ConfigError(f"retain_behind must not be negative, got {self.retain_behind}")

    @property
    def lane_count(self) -> int:
        return self.max_lane - self.min_lane + 1
