"""
Row layouts and the procedural row generator.

A row is one of three things:
- ForestRow: grass with a handful of trees; a tree blocks its lane
- CarLaneRow: a road with cars that all drive the same way at one speed
- TruckLaneRow: the same, with fewer and longer trucks

Rows are immutable once generated. The only thing that changes afterwards
is each Vehicle's offset, which belongs to the traffic simulator.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Set, Tuple, Union

from crossy.config import GameConfig
from crossy.errors import GenerationExhaustedError

logger = logging.getLogger(__name__)


# ----------------------------- Row kinds -----------------------------

ROW_FOREST = "forest"
ROW_CAR = "car"
ROW_TRUCK = "truck"

ROW_KINDS = (ROW_CAR, ROW_TRUCK, ROW_FOREST)


class TreeHeight(Enum):
    SHORT = "short"
    MEDIUM = "medium"
    TALL = "tall"

    @property
    def units(self) -> int:
        # Crown height in world units.
        return {"short": 20, "medium": 45, "tall": 60}[self.value]


# ----------------------------- Occupants -----------------------------

@dataclass(frozen=True)
class Tree:
    lane: int
    height: TreeHeight


@dataclass
class Vehicle:
    initial_lane: int
    color: int
    half_width: int  # footprint covers initial_lane +/- half_width
    # World units along the row. None means nobody placed the vehicle yet.
    offset: Optional[float] = None

    def footprint(self) -> range:
        return range(self.initial_lane - self.half_width, self.initial_lane + self.half_width + 1)


# ----------------------------- Rows -----------------------------

@dataclass(frozen=True)
class ForestRow:
    trees: Tuple[Tree, ...]

    kind = ROW_FOREST

    def has_tree_at(self, lane: int) -> bool:
        return any(tree.lane == lane for tree in self.trees)


@dataclass(frozen=True)
class CarLaneRow:
    direction: bool  # True: offsets increase over time
    speed: float  # world units/sec
    vehicles: Tuple[Vehicle, ...]

    kind = ROW_CAR


@dataclass(frozen=True)
class TruckLaneRow:
    direction: bool
    speed: float
    vehicles: Tuple[Vehicle, ...]

    kind = ROW_TRUCK


Row = Union[ForestRow, CarLaneRow, TruckLaneRow]
RoadRow = Union[CarLaneRow, TruckLaneRow]


def is_road(row: Optional[Row]) -> bool:
    return isinstance(row, (CarLaneRow, TruckLaneRow))


# ----------------------------- Generator -----------------------------

class RowGenerator:
    """Builds random rows whose occupants never overlap.

    Occupant lanes are found by rejection sampling: draw a lane uniformly
    from [min_lane, max_lane], throw it away if its footprint touches an
    occupied lane, otherwise keep it and mark the footprint occupied.
    Every occupant gets at most ``config.max_placement_attempts`` draws;
    running out raises GenerationExhaustedError instead of looping forever.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

    def generate_row(self) -> Row:
        kind = self.rng.choice(ROW_KINDS)
        if kind == ROW_CAR:
            return self.generate_car_lane()
        if kind == ROW_TRUCK:
            return self.generate_truck_lane()
        return self.generate_forest()

    def generate_forest(self) -> ForestRow:
        occupied: Set[int] = set()
        trees: List[Tree] = []
        for _ in range(self.config.trees_per_forest):
            lane = self._place(occupied, 0, ROW_FOREST)
            trees.append(Tree(lane=lane, height=self.rng.choice(list(TreeHeight))))
        return ForestRow(trees=tuple(trees))

    def generate_car_lane(self) -> CarLaneRow:
        direction, speed = self._traffic_flow()
        vehicles = self._vehicles(self.config.cars_per_lane, self.config.car_half_width, ROW_CAR)
        return CarLaneRow(direction=direction, speed=speed, vehicles=vehicles)

    def generate_truck_lane(self) -> TruckLaneRow:
        direction, speed = self._traffic_flow()
        vehicles = self._vehicles(self.config.trucks_per_lane, self.config.truck_half_width, ROW_TRUCK)
        return TruckLaneRow(direction=direction, speed=speed, vehicles=vehicles)

    def _traffic_flow(self) -> Tuple[bool, float]:
        return self.rng.choice([True, False]), self.rng.choice(self.config.lane_speeds)

    def _vehicles(self, count: int, half_width: int, kind: str) -> Tuple[Vehicle, ...]:
        occupied: Set[int] = set()
        vehicles = []
        for _ in range(count):
            lane = self._place(occupied, half_width, kind)
            vehicles.append(Vehicle(
                initial_lane=lane,
                color=self.rng.choice(self.config.vehicle_colors),
                half_width=half_width,
                offset=float(lane * self.config.tile_size),
            ))
        return tuple(vehicles)

    def _place(self, occupied: Set[int], half_width: int, kind: str) -> int:
        """Pick a free lane for one occupant and mark its footprint occupied."""
        cfg = self.config
        for _ in range(cfg.max_placement_attempts):
            lane = self.rng.randint(cfg.min_lane, cfg.max_lane)
            footprint = _footprint(lane, half_width)
            if occupied.isdisjoint(footprint):
                occupied.update(footprint)
                return lane
        logger.debug("gave up placing a %s occupant; occupied=%s", kind, sorted(occupied))
        raise GenerationExhaustedError(kind, cfg.max_placement_attempts)


def _footprint(lane: int, half_width: int) -> FrozenSet[int]:
    return frozenset(range(lane - half_width, lane + half_width + 1))
