"""
Robot state management for the toy robot simulator.
Tracks position, facing, placement and the trail of visited cells.
"""
from collections import deque
from dataclasses import dataclass
from typing import Dict, Any, Deque, Optional
from enum import Enum


# The grid is fixed at 6x6 cells
GRID_SIZE = 6


class Direction(Enum):
    """Cardinal facing, ordered clockwise so rotation is modulo 4."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def label(self) -> str:
        """Name as shown in reports, e.g. 'North'."""
        return self.name.capitalize()

    def rotate(self, steps: int) -> 'Direction':
        """Rotate clockwise by steps (negative for counter-clockwise)."""
        return Direction((self.value + steps) % 4)

    @staticmethod
    def from_token(token: str) -> Optional['Direction']:
        """Match an uppercased direction token, None if unknown."""
        return DIRECTION_TOKENS.get(token)


DIRECTION_TOKENS = {
    "NORTH": Direction.NORTH,
    "EAST": Direction.EAST,
    "SOUTH": Direction.SOUTH,
    "WEST": Direction.WEST,
}

# Unit step per facing as (dx, dy)
STEP_OFFSETS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


@dataclass
class Position:
    """Represents a cell on the grid."""
    x: int = -1
    y: int = -1

    def is_on_grid(self) -> bool:
        """Check if this position lies inside the grid."""
        return 0 <= self.x < GRID_SIZE and 0 <= self.y < GRID_SIZE

    def step(self, direction: Direction) -> 'Position':
        """Return the neighbouring position one cell along direction."""
        dx, dy = STEP_OFFSETS[direction]
        return Position(self.x + dx, self.y + dy)

    def copy(self) -> 'Position':
        """Create a copy of this position."""
        return Position(x=self.x, y=self.y)

    def to_tuple(self) -> tuple:
        return (self.x, self.y)


NOT_PLACED_MESSAGE = "No robot placed."

# Oldest cells are dropped once the trail is this long
TRAIL_LIMIT = 1000


class RobotState:
    """Manages the complete state of the robot on the grid."""

    def __init__(self, trail_limit: int = TRAIL_LIMIT):
        # Sentinel position until the first valid PLACE
        self.position = Position()
        self.facing: Optional[Direction] = None
        self.placed: bool = False

        # Most recent cells occupied since the first placement
        self.trail: Deque[Position] = deque(maxlen=trail_limit)

    def place(self, position: Position, facing: Optional[Direction]):
        """Commit a placement. Callers validate position and facing first."""
        self.position = position.copy()
        if facing is not None:
            self.facing = facing
        self.placed = True
        self.trail.append(self.position.copy())

    def update_position(self, new_position: Position):
        """Move to a new cell and record it in the trail."""
        self.position = new_position.copy()
        self.trail.append(self.position.copy())

    def rotate(self, steps: int):
        self.facing = self.facing.rotate(steps)

    def report(self) -> str:
        """Render the current status line."""
        if not self.placed:
            return NOT_PLACED_MESSAGE
        return f"Robot is at {self.position.x}, {self.position.y}, facing {self.facing.label}"

    def get_state_summary(self) -> Dict[str, Any]:
        """Get a summary of the current robot state for display."""
        return {
            'placed': self.placed,
            'position': list(self.position.to_tuple()) if self.placed else None,
            'facing': self.facing.label if self.placed else None,
            'grid_size': GRID_SIZE,
            'trail_length': len(self.trail),
        }
