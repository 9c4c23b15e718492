"""
Gesture handling for the ring diagram.

The controller turns canvas-local pointer, keyboard and resize events into
SailingState operations. It keeps no copy of ring angles or radii: all reads
and writes go through the state it was given.

    Idle --pointer_down on ring--> Dragging(ring) --pointer_up--> Idle with selection
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .ring_params import HIT_TOLERANCE
from .state import SailingState, WIND, BOAT
from .wind import Vector2D, distance

logger = logging.getLogger(__name__)

DIRECTION_KEYS = ("left", "right", "up", "down")


@dataclass(frozen=True)
class PointerEvent:
    type: str                # "down", "move", "up" or "cancel"
    point: Optional[Vector2D] = None  # canvas-local px; required for down and move
    buttons_down: bool = True


@dataclass(frozen=True)
class KeyEvent:
    key: str                 # "left", "right", "up", "down", "escape"
    type: str = "keydown"


@dataclass(frozen=True)
class ResizeEvent:
    width: float
    height: float


Event = Union[PointerEvent, KeyEvent, ResizeEvent]


class InteractionController:
    def __init__(self, state: SailingState, tolerance: float = HIT_TOLERANCE):
        self.state = state
        self.tolerance = tolerance

    def hit_test(self, point: Vector2D) -> Optional[str]:
        """
        Ring under the pointer, or None.

        A ring is hit when the pointer lies within `tolerance` of its circle.
        When both rings qualify the one whose radius is closer to the pointer
        distance wins; an exact tie goes to the wind ring.
        """
        d = distance(self.state.canvas.center, point)
        best_id, best_gap = None, self.tolerance
        for ring_id in (WIND, BOAT):
            gap = abs(d - self.state.ring(ring_id).radius)
            if gap < best_gap:
                best_id, best_gap = ring_id, gap
        return best_id

    def pointer_down(self, point: Vector2D) -> Optional[str]:
        ring_id = self.hit_test(point)
        if ring_id is None:
            self.state.select_ring(None)
        else:
            self.state.start_drag(ring_id, point)
        return ring_id

    def pointer_move(self, point: Vector2D, buttons_down: bool = True) -> None:
        if not self.state.is_dragging:
            return
        if not buttons_down:
            # the release happened somewhere we never heard about
            logger.debug("Pointer moved with no button held, ending drag")
            self.state.end_drag()
            return
        self.state.update_drag(point)

    def pointer_up(self) -> None:
        # release position is ignored
        self.state.end_drag()

    def pointer_cancel(self) -> None:
        """Pointer left the surface or focus was lost."""
        self.state.end_drag()

    def key_down(self, key: str) -> None:
        if self.state.selected_ring is None:
            return
        key = key.lower()
        if key in DIRECTION_KEYS:
            self.state.move_selected(key)
        elif key == "escape":
            self.state.select_ring(None)

    def resize(self, width: float, height: float) -> None:
        self.state.update_canvas_dimensions(width, height)

    def handle(self, event: Event) -> None:
        if isinstance(event, PointerEvent):
            if event.type in ("down", "move") and event.point is None:
                logger.debug("Ignoring %s event without a point", event.type)
            elif event.type == "down":
                self.pointer_down(event.point)
            elif event.type == "move":
                self.pointer_move(event.point, event.buttons_down)
            elif event.type == "up":
                self.pointer_up()
            elif event.type == "cancel":
                self.pointer_cancel()
        elif isinstance(event, KeyEvent):
            if event.type == "keydown":
                self.key_down(event.key)
        elif isinstance(event, ResizeEvent):
            self.resize(event.width, event.height)
