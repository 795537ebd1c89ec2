"""
input_state.py: Merges keyboard and pointer/touch input into one intent per tick.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import SWIPE_DUCK_THRESHOLD
from .data_models import InputIntent

JUMP = "jump"
DUCK = "duck"


@dataclass
class InputState:
    """
    Collects raw input between ticks.

    Jump is edge-triggered: one press asks for one jump. Duck is held: it stays
    on while the key is down or a pointer is held in the lower half of the
    surface (or has been swiped down). A press that should start or restart
    the game is flagged in `start_requested`; the caller routes it to
    GameEngine.start() no matter which device produced it.
    """
    jump_pressed: bool = False
    key_duck: bool = False
    pointer_duck: bool = False
    pointer_start_y: Optional[float] = None
    start_requested: bool = False

    # -------- Keyboard --------

    def key_down(self, action: str):
        if action == JUMP:
            self.jump_pressed = True
            self.start_requested = True
        elif action == DUCK:
            self.key_duck = True

    def key_up(self, action: str):
        if action == DUCK:
            self.key_duck = False

    # -------- Pointer / touch --------

    def pointer_down(self, y: float, surface_height: float):
        """Top half taps jump, bottom half holds duck."""
        self.pointer_start_y = y
        self.start_requested = True
        if y < surface_height / 2:
            self.jump_pressed = True
            self.pointer_duck = False
        else:
            self.pointer_duck = True

    def pointer_move(self, y: float):
        if self.pointer_start_y is None:
            return
        if y - self.pointer_start_y > SWIPE_DUCK_THRESHOLD:
            self.pointer_duck = True

    def pointer_up(self):
        self.pointer_start_y = None
        self.pointer_duck = False

    # -------- Per-tick --------

    def consume(self) -> InputIntent:
        """Returns this tick's intent and clears the one-shot jump."""
        intent = InputIntent(jump=self.jump_pressed, duck=self.key_duck or self.pointer_duck)
        self.jump_pressed = False
        return intent

    def consume_start(self) -> bool:
        requested = self.start_requested
        self.start_requested = False
        return requested

    def reset(self):
        self.jump_pressed = False
        self.key_duck = False
        self.pointer_duck = False
        self.pointer_start_y = None
        self.start_requested = False
