#!/usr/bin/env python3
"""
WAVEBREAK - Terminal Arena Shooter
===================================
Survive endless waves. Every cleared wave brings five more enemies.

Controls:
    WASD          - Move
    Arrows / IJKL - Aim reticle
    SPACE         - Attack (hold)
    Q             - Switch weapon
    R             - Restart (after game over)
    F             - Toggle FPS display
    ESC           - Quit
"""

import logging
import sys
import time
from typing import Optional, Sequence

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .components import Health, WeaponInventory
from .config import GameConfig, MIN_WIDTH, MIN_HEIGHT, parse_config
from .engine import (
    TerminalSurface, GRAY_DARK, GRAY_DARKER, GRAY_MED,
    NEON_CYAN, NEON_MAGENTA, NEON_YELLOW, NEON_GREEN, NEON_RED
)
from .input import InputSnapshot, TerminalInput
from .log import configure_logging
from .simulation import Simulation, PHASE_NOT_STARTED, PHASE_PLAYING
from .wave_spawner import enemies_remaining
from .weapons import WEAPONS

logger = logging.getLogger(__name__)

TITLE_ART = [
    "+---------------------------------------+",
    "|   W   A   V   E   B   R   E   A   K   |",
    "+---------------------------------------+",
]


# =============================================================================
# UI RENDERING
# =============================================================================

def render_ui(sim: Simulation, surface: TerminalSurface):
    """Render the HUD in the bottom rows."""
    ui_y = surface.game_height
    width = surface.width

    surface.put_string(0, ui_y, '=' * width, GRAY_DARK)
    surface.put_string(2, ui_y, ' WAVEBREAK ', NEON_MAGENTA)

    status_text = (f' LEVEL:{sim.level}  '
                   f'CLEARED:{sim.waves.waves_cleared}  '
                   f'ENEMIES:{enemies_remaining(sim.world, sim.waves)} ')
    surface.put_string(width - len(status_text) - 1, ui_y, status_text, NEON_YELLOW)

    if sim.player_id is None:
        return

    health = sim.world.get_component(sim.player_id, Health)
    if health:
        hearts = '♥' * health.current + '.' * (health.maximum - health.current)
        color = NEON_CYAN if health.current > 1 else NEON_RED
        surface.put_string(2, ui_y + 1, 'HEALTH:', GRAY_MED)
        surface.put_string(10, ui_y + 1, f'[{hearts}]', color)

    inv = sim.world.get_component(sim.player_id, WeaponInventory)
    if inv and inv.weapons:
        wx = 2
        for i, weapon in enumerate(inv.weapons):
            wdata = WEAPONS[weapon.weapon_type]
            is_active = (i == inv.active_index)
            color = wdata['color'] if is_active else GRAY_DARK
            marker = '←' if is_active else ' '
            text = f'[{i + 1}] {wdata["name"]}{marker}'
            surface.put_string(wx, ui_y + 2, text, color)
            wx += len(text) + 2
        surface.put_string(wx, ui_y + 2,
                           'WASD:Move  IJKL:Aim  SPACE:Attack  Q:Switch  ESC:Quit',
                           GRAY_DARKER)

    if surface.show_fps:
        fps_text = f'FPS:{surface.current_fps:.0f}'
        surface.put_string(width - len(fps_text) - 2, 0, fps_text, GRAY_MED)


def render_reticle(sim: Simulation, surface: TerminalSurface):
    """Mark the pointer position the player aims at."""
    cx, cy = surface.world_to_cell(*sim.snapshot.pointer_position())
    if 0 <= cy < surface.game_height:
        surface.put_string(cx, cy, '+', NEON_GREEN)


def render_title_screen(surface: TerminalSurface, frame: int):
    """Render the title screen."""
    width = surface.width
    height = surface.game_height

    art_y = max(1, height // 2 - 5)
    for i, line in enumerate(TITLE_ART):
        x = width // 2 - len(line) // 2
        color = NEON_MAGENTA if i % 2 == 0 else NEON_CYAN
        surface.put_string(max(0, x), art_y + i, line, color)

    sub = 'TERMINAL ARENA SHOOTER'
    surface.put_string(width // 2 - len(sub) // 2, art_y + len(TITLE_ART) + 1,
                       sub, GRAY_MED)

    # Blinking prompt
    if (frame // 30) % 2 == 0:
        prompt = '[ PRESS ANY KEY TO START ]'
        surface.put_string(width // 2 - len(prompt) // 2,
                           art_y + len(TITLE_ART) + 3, prompt, NEON_GREEN)

    controls = [
        'WASD - Move        IJKL/Arrows - Aim',
        'SPACE - Attack     Q - Switch weapon',
        'ESC - Quit         F - Toggle FPS',
    ]
    cy = art_y + len(TITLE_ART) + 5
    for i, line in enumerate(controls):
        surface.put_string(width // 2 - len(line) // 2, cy + i, line, GRAY_DARK)

    surface.draw_box(0, 0, width, height, GRAY_DARKER, '.')


# =============================================================================
# TERMINAL HOST
# =============================================================================

class TerminalGame:
    """Binds the simulation to a blessed terminal: input, HUD and output."""

    def __init__(self, term: Terminal, config: GameConfig):
        self.term = term
        self.config = config
        self.surface = TerminalSurface(term, config.width, config.height)
        self.snapshot = InputSnapshot()
        self.snapshot.move_pointer(config.width / 2 + 100, config.height / 2)
        self.input = TerminalInput(self.snapshot, config.width, config.height)
        self.sim = Simulation(config, self.snapshot)
        self.running = True
        self.frame = 0

    def handle_input(self):
        """Drain all pending input from the terminal."""
        key = self.term.inkey(timeout=0)
        while key:
            self.input.process_key(key)
            key = self.term.inkey(timeout=0)

        if self.input.consume_quit():
            self.running = False
            return

        if self.input.consume_toggle_fps():
            self.surface.show_fps = not self.surface.show_fps

        if self.sim.phase == PHASE_NOT_STARTED:
            if self.input.consume_any_key():
                self.sim.start()
            return
        self.input.consume_any_key()

        # Only honored on the game-over screen
        if self.input.consume_restart():
            self.sim.restart()

    def tick(self):
        """Update then draw one frame."""
        self.frame += 1
        self.input.update()
        self.sim.update()
        self.render()

    def check_resize(self):
        """Rebuild the surface when the terminal size changes."""
        size = (self.term.width, self.term.height)
        if size == (self.surface.width, self.surface.height):
            return
        logger.debug('terminal resized to %dx%d', *size)
        self.surface.resize(*size)
        print(self.term.home + self.term.clear, end='', flush=True)

    def render(self):
        self.check_resize()
        if self.sim.phase == PHASE_NOT_STARTED:
            self.surface.clear(self.config.width, self.config.height)
            render_title_screen(self.surface, self.frame)
        else:
            self.sim.draw(self.surface)
            self.surface.draw_playfield_border()
            if self.sim.phase == PHASE_PLAYING:
                render_reticle(self.sim, self.surface)
            render_ui(self.sim, self.surface)

        output = self.surface.present()
        if output:
            print(output, end='', flush=True)


# =============================================================================
# MAIN LOOP
# =============================================================================

def main(argv: Optional[Sequence[str]] = None):
    """Entry point. Sets up terminal and runs the fixed-rate game loop."""
    config = parse_config(argv)
    configure_logging(config)
    term = Terminal()

    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        sys.exit(1)

    logger.info('terminal %dx%d, playfield %gx%g',
                term.width, term.height, config.width, config.height)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        game = TerminalGame(term, config)
        frame_time = config.frame_time
        fps_timer = 0.0
        fps_frame_count = 0

        # Initial clear (only time we clear the whole screen)
        print(term.home + term.clear, end='', flush=True)

        try:
            while game.running:
                start = time.perf_counter()

                game.handle_input()
                game.tick()
                fps_frame_count += 1

                elapsed = time.perf_counter() - start
                sleep_time = frame_time - elapsed
                if sleep_time > 0.001:
                    time.sleep(sleep_time)

                fps_timer += time.perf_counter() - start
                if fps_timer >= 0.5:
                    game.surface.current_fps = fps_frame_count / fps_timer
                    fps_frame_count = 0
                    fps_timer = 0.0
        except KeyboardInterrupt:
            logger.info('interrupted')

        # Restore terminal
        print(term.normal, end='', flush=True)


if __name__ == '__main__':
    main()
