"""
Input Module
=============
The input snapshot read by the simulation, and the terminal adapter that
feeds it from blessed keystrokes.
"""

from typing import Dict, Set, Tuple

from .config import (
    KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_SWITCH_WEAPON, KEY_RESTART,
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT,
)


class InputSnapshot:
    """
    Current key-down set and pointer state.

    Written by the host between ticks with plain assignments; the
    simulation only reads it, except for releasing the weapon-switch key
    after handling it.
    """

    def __init__(self):
        self._keys_down: Set[str] = set()
        self.pointer_x: float = 0.0
        self.pointer_y: float = 0.0
        self.pointer_down: bool = False

    def is_key_down(self, name: str) -> bool:
        return name in self._keys_down

    def pointer_position(self) -> Tuple[float, float]:
        return self.pointer_x, self.pointer_y

    def is_pointer_down(self) -> bool:
        return self.pointer_down

    def press_key(self, name: str) -> None:
        self._keys_down.add(name)

    def release_key(self, name: str) -> None:
        self._keys_down.discard(name)

    def move_pointer(self, x: float, y: float) -> None:
        self.pointer_x = x
        self.pointer_y = y

    def set_pointer_down(self, down: bool) -> None:
        self.pointer_down = down


class TerminalInput:
    """
    Translates blessed keystrokes into an InputSnapshot.

    Terminals don't report key-up events, so held keys are simulated with
    frame-based timers that key auto-repeat keeps refreshing. The pointer
    is a reticle steered with the arrow keys or IJKL.
    """

    MOVE_KEYS = (KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT)
    FIRE_KEY = ' '
    AIM_KEYS = {
        'i': (0, -1), 'k': (0, 1), 'j': (-1, 0), 'l': (1, 0),
        'KEY_UP': (0, -1), 'KEY_DOWN': (0, 1),
        'KEY_LEFT': (-1, 0), 'KEY_RIGHT': (1, 0),
    }

    def __init__(self, snapshot: InputSnapshot,
                 width: float = PLAYFIELD_WIDTH,
                 height: float = PLAYFIELD_HEIGHT,
                 hold_duration: int = 18,
                 pointer_step: float = 25.0):
        self.snapshot = snapshot
        self.width = width
        self.height = height
        self.hold_duration = hold_duration
        self.pointer_step = pointer_step
        self.keys_held: Dict[str, int] = {}  # key -> frames remaining

        # Actions triggered this frame (consumed on read)
        self._any_key = False
        self._restart_triggered = False
        self._quit_triggered = False
        self._toggle_fps = False

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return

        self._any_key = True
        key_str = key.lower() if not key.is_sequence else ''

        if key.name == 'KEY_ESCAPE':
            self._quit_triggered = True
            return

        # Movement and fire - refresh hold timer
        if key_str and key_str in self.MOVE_KEYS:
            self.keys_held[key_str] = self.hold_duration
        elif key_str == self.FIRE_KEY:
            self.keys_held[self.FIRE_KEY] = self.hold_duration

        # Aim reticle
        elif key_str in self.AIM_KEYS or key.name in self.AIM_KEYS:
            dx, dy = self.AIM_KEYS.get(key_str) or self.AIM_KEYS[key.name]
            self._nudge_pointer(dx, dy)

        # Weapon switch is edge-triggered: the simulation releases it
        elif key_str == KEY_SWITCH_WEAPON:
            self.snapshot.press_key(KEY_SWITCH_WEAPON)

        elif key_str == KEY_RESTART:
            self._restart_triggered = True

        elif key_str == 'f' or key.name == 'KEY_F1':
            self._toggle_fps = True

    def _nudge_pointer(self, dx: int, dy: int) -> None:
        x, y = self.snapshot.pointer_position()
        x = max(0.0, min(self.width, x + dx * self.pointer_step))
        y = max(0.0, min(self.height, y + dy * self.pointer_step))
        self.snapshot.move_pointer(x, y)

    def update(self) -> None:
        """Decay hold timers and publish held keys (call once per frame)."""
        expired = []
        for key, frames in self.keys_held.items():
            self.keys_held[key] = frames - 1
            if self.keys_held[key] <= 0:
                expired.append(key)
        for key in expired:
            del self.keys_held[key]

        for key in self.MOVE_KEYS:
            if key in self.keys_held:
                self.snapshot.press_key(key)
            else:
                self.snapshot.release_key(key)
        self.snapshot.set_pointer_down(self.FIRE_KEY in self.keys_held)

    def consume_any_key(self) -> bool:
        """Check and consume the 'any key pressed' trigger."""
        triggered = self._any_key
        self._any_key = False
        return triggered

    def consume_restart(self) -> bool:
        """Check and consume restart trigger."""
        triggered = self._restart_triggered
        self._restart_triggered = False
        return triggered

    def consume_quit(self) -> bool:
        """Check and consume quit trigger."""
        triggered = self._quit_triggered
        self._quit_triggered = False
        return triggered

    def consume_toggle_fps(self) -> bool:
        """Check and consume FPS toggle trigger."""
        triggered = self._toggle_fps
        self._toggle_fps = False
        return triggered
