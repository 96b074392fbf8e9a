"""
Turns queued grid moves into continuous hops.

One move animates at a time over ``step_duration`` seconds. When a hop
lands the move is committed to the PositionTracker and, if more moves are
waiting, the next hop starts on the following tick with no idle gap.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pygame.math import Vector2

from crossy.config import GameConfig
from crossy.moves import Direction, GridPosition, PositionTracker


class AnimState(Enum):
    IDLE = "idle"
    STEPPING = "stepping"


@dataclass(frozen=True)
class StepFrame:
    """What a renderer needs to draw the player this frame."""
    x: float  # world units along the row (lane axis)
    y: float  # world units across rows (row axis)
    progress: float  # 0..1 through the current hop, 0 when idle
    hop: float  # height above ground, sin(progress * pi) * hop_height
    direction: Optional[Direction]
    heading: Optional[float]
    completed: bool  # a hop landed during this tick


def grid_to_world(position: GridPosition, tile_size: float) -> Vector2:
    return Vector2(position.lane * tile_size, position.row * tile_size)


class StepAnimator:
    def __init__(self, tracker: PositionTracker, config: Optional[GameConfig] = None):
        self.tracker = tracker
        self.config = config or tracker.config
        self.state = AnimState.IDLE
        self.elapsed = 0.0
        self._start: Optional[Vector2] = None

    @property
    def progress(self) -> float:
        if self.state is AnimState.IDLE:
            return 0.0
        return min(1.0, self.elapsed / self.config.step_duration)

    def advance(self, dt: float) -> StepFrame:
        if self.state is AnimState.IDLE:
            if not self.tracker.queue:
                return self._frame(self.tracker.position, 0.0, None, completed=False)
            self._begin()

        direction = self.tracker.head
        self.elapsed += dt
        progress = self.progress
        start = self._start
        end = grid_to_world(self.tracker.position.moved(direction), self.config.tile_size)

        if progress < 1.0:
            here = start.lerp(end, progress)
            return StepFrame(
                x=here.x,
                y=here.y,
                progress=progress,
                hop=math.sin(progress * math.pi) * self.config.hop_height,
                direction=direction,
                heading=direction.heading,
                completed=False,
            )

        landed = self.tracker.complete_head_move()
        self.elapsed = 0.0
        if self.tracker.queue:
            self._begin()
        else:
            self.state = AnimState.IDLE
            self._start = None
        return self._frame(landed, 1.0, direction, completed=True)

    def reset(self):
        self.state = AnimState.IDLE
        self.elapsed = 0.0
        self._start = None

    def _begin(self):
        self.state = AnimState.STEPPING
        self.elapsed = 0.0
        self._start = grid_to_world(self.tracker.position, self.config.tile_size)

    def _frame(self, position: GridPosition, progress: float,
               direction: Optional[Direction], completed: bool) -> StepFrame:
        here = grid_to_world(position, self.config.tile_size)
        return StepFrame(
            x=here.x,
            y=here.y,
            progress=progress,
            hop=0.0,
            direction=direction,
            heading=direction.heading if direction else None,
            completed=completed,
        )
