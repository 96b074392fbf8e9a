"""
Grid position, move validation and the pending-move queue.

Moves are admitted one at a time. Each new move is checked against the
position the player will have after every move already queued, so fast
input can be chained without waiting for the hops to finish.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Iterable, List, Optional, Union

from crossy.config import GameConfig
from crossy.rows import ForestRow
from crossy.world import WorldTimeline

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self):
        """(row, lane) change for one step."""
        return _DELTAS[self]

    @property
    def heading(self) -> float:
        """Yaw (radians) the player turns to while hopping this way."""
        return _HEADINGS[self]


_DELTAS = {
    Direction.FORWARD: (1, 0),
    Direction.BACKWARD: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_HEADINGS = {
    Direction.FORWARD: math.pi / 2,
    Direction.BACKWARD: -math.pi / 2,
    Direction.LEFT: math.pi,
    Direction.RIGHT: 0.0,
}


@dataclass(frozen=True)
class GridPosition:
    row: int = 0
    lane: int = 0

    def moved(self, direction: Direction) -> "GridPosition":
        d_row, d_lane = direction.delta
        return GridPosition(self.row + d_row, self.lane + d_lane)


def final_position(start: GridPosition, moves: Iterable[Direction]) -> GridPosition:
    position = start
    for direction in moves:
        position = position.moved(direction)
    return position


def rejection_reason(position: GridPosition, timeline: WorldTimeline) -> Optional[str]:
    """Why ``position`` is not a legal place to stand, or None if it is.

    Only trees block. Road lanes are always enterable; whether a car gets
    you is decided later by collision detection.
    """
    cfg = timeline.config
    if position.lane < cfg.min_lane or position.lane > cfg.max_lane:
        return "off the edge"
    if position.row < 0:
        return "behind the start"
    row = timeline.row_at(position.row)
    if isinstance(row, ForestRow) and row.has_tree_at(position.lane):
        return "tree"
    return None


def is_valid_position(position: GridPosition, timeline: WorldTimeline) -> bool:
    return rejection_reason(position, timeline) is None


StepListener = Callable[[GridPosition], None]


class PositionTracker:
    """Committed grid position plus the FIFO of admitted, not yet finished moves."""

    def __init__(self, timeline: WorldTimeline, config: Optional[GameConfig] = None,
                 start: GridPosition = GridPosition()):
        self.timeline = timeline
        self.config = config or timeline.config
        self.position = start
        self.queue: Deque[Direction] = deque()
        self.listeners: List[StepListener] = []

    def __len__(self) -> int:
        return len(self.queue)

    @property
    def head(self) -> Optional[Direction]:
        return self.queue[0] if self.queue else None

    def projected_position(self) -> GridPosition:
        """Where the player ends up once every queued move has played out."""
        return final_position(self.position, self.queue)

    def propose_move(self, direction: Union[Direction, str]) -> bool:
        direction = Direction(direction)
        target = self.projected_position().moved(direction)
        reason = rejection_reason(target, self.timeline)
        if reason is not None:
            logger.debug("rejected %s to (%d, %d): %s",
                         direction.value, target.row, target.lane, reason)
            return False
        self.queue.append(direction)
        return True

    def complete_head_move(self) -> GridPosition:
        direction = self.queue.popleft()
        self.position = self.position.moved(direction)
        self.timeline.ensure_ahead(self.position.row)
        logger.debug("stepped %s to (%d, %d)",
                     direction.value, self.position.row, self.position.lane)
        for listener in self.listeners:
            listener(self.position)
        return self.position
