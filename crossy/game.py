"""
The game as a single state aggregate plus the per-frame loop.

A host drives it with two calls:
- queue_move(state, direction) whenever input arrives
- tick(state, dt) once per rendered frame

Each tick runs, in order: traffic, the in-flight hop, collision. A hit
puts the game in its terminal state and every later tick is a no-op
until restart() hands back a fresh state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from crossy.animator import StepAnimator, StepFrame
from crossy.collision import CollisionDetector
from crossy.config import GameConfig
from crossy.moves import Direction, GridPosition, PositionTracker
from crossy.traffic import TrafficSimulator
from crossy.world import WorldTimeline

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class VehiclePosition:
    row: int
    index: int  # position within the row's vehicle tuple
    x: float  # world units along the row
    y: float


@dataclass(frozen=True)
class TickResult:
    status: GameStatus
    player: StepFrame
    vehicles: Tuple[VehiclePosition, ...]
    score: int


@dataclass
class GameState:
    config: GameConfig
    timeline: WorldTimeline
    tracker: PositionTracker
    animator: StepAnimator
    traffic: TrafficSimulator
    collisions: CollisionDetector
    status: GameStatus = GameStatus.RUNNING
    last_frame: Optional[StepFrame] = None

    @classmethod
    def new(cls, config: Optional[GameConfig] = None) -> "GameState":
        config = config or GameConfig()
        timeline = WorldTimeline(config)
        tracker = PositionTracker(timeline, config)
        timeline.ensure_ahead(tracker.position.row)
        return cls(
            config=config,
            timeline=timeline,
            tracker=tracker,
            animator=StepAnimator(tracker, config),
            traffic=TrafficSimulator(config),
            collisions=CollisionDetector(config),
        )

    @property
    def position(self) -> GridPosition:
        return self.tracker.position

    @property
    def terminated(self) -> bool:
        return self.status is GameStatus.TERMINATED


def queue_move(state: GameState, direction: Union[Direction, str]) -> bool:
    if state.terminated:
        return False
    return state.tracker.propose_move(direction)


def get_score(state: GameState) -> int:
    return state.tracker.position.row


def tick(state: GameState, dt: float) -> TickResult:
    if state.terminated:
        return _result(state, state.last_frame)

    state.traffic.advance(state.timeline, dt)

    frame = state.animator.advance(dt)
    if frame.completed:
        state.timeline.trim_behind(state.tracker.position.row)
    state.last_frame = frame

    position = state.tracker.position
    hit = state.collisions.check(state.timeline, position.row, frame.x, frame.y)
    if hit is not None:
        state.status = GameStatus.TERMINATED
        logger.info("hit by a vehicle at row %d, lane %d; final score %d",
                    position.row, position.lane, get_score(state))
    return _result(state, frame)


def restart(state: GameState) -> GameState:
    """Build a fresh state with the same config; the old one is left untouched."""
    fresh = GameState.new(state.config)
    logger.info("restarted with world seed %d", fresh.timeline.seed)
    return fresh


def _result(state: GameState, frame: StepFrame) -> TickResult:
    tile = state.config.tile_size
    vehicles = tuple(
        VehiclePosition(row=row, index=i, x=vehicle.offset, y=row * tile)
        for row, data in state.timeline.road_rows()
        for i, vehicle in enumerate(data.vehicles)
    )
    return TickResult(status=state.status, player=frame, vehicles=vehicles, score=get_score(state))


ScoreListener = Callable[[int], None]


class Game:
    """Holds the current GameState for a host loop and reports score changes."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.score_listeners: List[ScoreListener] = []
        self.state = self._attach(GameState.new(self.config))

    def add_score_listener(self, callback: ScoreListener):
        self.score_listeners.append(callback)

    def queue_move(self, direction: Union[Direction, str]) -> bool:
        return queue_move(self.state, direction)

    def tick(self, dt: float) -> TickResult:
        return tick(self.state, dt)

    def get_score(self) -> int:
        return get_score(self.state)

    def restart(self):
        self.state = self._attach(restart(self.state))
        self._notify(GridPosition())

    def _attach(self, state: GameState) -> GameState:
        state.tracker.listeners.append(self._notify)
        return state

    def _notify(self, position: GridPosition):
        for callback in self.score_listeners:
            callback(position.row)
