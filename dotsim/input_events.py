#!/usr/bin/env python3
"""
Host-independent input vocabulary.

The host decodes its own keyboard/mouse events and hands the core one of the
events below. Key bindings are expressed as lowercase key names (as returned by
pygame.key.name) so this module stays free of any windowing library.
"""
import enum
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from .vector_utils import Vec2


class InputEvent(enum.Enum):
    INCREASE_CONNECT_FORCE = "increase_connect_force"
    DECREASE_CONNECT_FORCE = "decrease_connect_force"
    INCREASE_SPEED = "increase_speed"
    DECREASE_SPEED = "decrease_speed"
    TOGGLE_PAUSE = "toggle_pause"
    REVERSE_DIRECTION = "reverse_direction"
    CLEAR_ALL = "clear_all"
    QUIT = "quit"


@dataclass(frozen=True)
class PointerClick:
    """Primary-button click (or drag sample) at a canvas position."""
    position: Vec2


KEY_BINDINGS: Dict[str, InputEvent] = {
    "i": InputEvent.INCREASE_CONNECT_FORCE,
    "k": InputEvent.DECREASE_CONNECT_FORCE,
    "u": InputEvent.INCREASE_SPEED,
    "j": InputEvent.DECREASE_SPEED,
    "p": InputEvent.TOGGLE_PAUSE,
    "r": InputEvent.REVERSE_DIRECTION,
    "space": InputEvent.CLEAR_ALL,
    "escape": InputEvent.QUIT,
}

# Fired every frame while the key is held; the rest fire once per press.
REPEATING_EVENTS: FrozenSet[InputEvent] = frozenset({
    InputEvent.INCREASE_CONNECT_FORCE,
    InputEvent.DECREASE_CONNECT_FORCE,
    InputEvent.INCREASE_SPEED,
    InputEvent.DECREASE_SPEED,
})


def event_for_key(key_name: str) -> Optional[InputEvent]:
    return KEY_BINDINGS.get(str(key_name).lower())


class SpawnThrottle:
    """
    Rate limiter for spawning while the pointer button is held.

    The first sample after a press always spawns; later samples spawn once per
    interval.
    """

    def __init__(self, interval_ms: float):
        self.interval = max(0.0, float(interval_ms)) / 1000.0
        self._since_last: Optional[float] = None

    def press(self) -> None:
        self._since_last = None

    def release(self) -> None:
        self._since_last = None

    def ready(self, dt: float) -> bool:
        """Advance by dt seconds; True when a spawn is due now."""
        if self._since_last is None:
            self._since_last = 0.0
            return True
        self._since_last += max(0.0, dt)
        if self._since_last >= self.interval:
            self._since_last -= self.interval
            return True
        return False
