"""
Simulation Loop
================
Owns all game state and runs the per-tick update and draw passes.

Phases:
    not_started -> playing -> over -> playing (restart)
"""

import logging
import random
from typing import Optional

from .ecs import World
from .components import Health, Position
from .config import GameConfig, KEY_RESTART, KEY_SWITCH_WEAPON
from .enemies import enemy_system, draw_enemies
from .engine import WHITE
from .input import InputSnapshot
from .player import create_player, player_update_system, draw_player
from .surface import DrawingSurface, TextStyle
from .wave_spawner import WaveState, spawn_enemies, update_wave_system

logger = logging.getLogger(__name__)

PHASE_NOT_STARTED = 'not_started'
PHASE_PLAYING = 'playing'
PHASE_OVER = 'over'

GAME_OVER_TEXT = 'Game Over!'
RESTART_TEXT = f'Press {KEY_RESTART.upper()} to restart'


class Simulation:
    """Central game state container; the host calls tick() once per frame."""

    def __init__(self, config: Optional[GameConfig] = None,
                 snapshot: Optional[InputSnapshot] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.snapshot = snapshot or InputSnapshot()
        self.rng = rng or random.Random(self.config.seed)
        self.width = self.config.width
        self.height = self.config.height

        self.phase = PHASE_NOT_STARTED
        self.world = World()
        self.waves = WaveState(level=self.config.start_level)
        self.player_id: Optional[int] = None
        self.frame = 0

    # -------------------------------------------------------------------------
    # Lifecycle signals
    # -------------------------------------------------------------------------

    def start(self) -> bool:
        """Leave the title state. Ignored once the game has started."""
        if self.phase != PHASE_NOT_STARTED:
            return False
        logger.info('game started at level %d', self.waves.level)
        self._reset()
        return True

    def restart(self) -> bool:
        """Start a new run from the game-over screen. Ignored in other phases."""
        if self.phase != PHASE_OVER:
            return False
        # The level counter carries over; only the over flag is cleared
        logger.info('restart at level %d', self.waves.level)
        self._reset()
        return True

    def _reset(self):
        """Fresh world, player at centre, wave for the current level."""
        # A switch pressed outside play must not carry into the new game
        self.snapshot.release_key(KEY_SWITCH_WEAPON)
        self.world = World()
        self.player_id = create_player(self.world, self.width / 2, self.height / 2)
        pos = self.world.get_component(self.player_id, Position)
        self.waves.enemy_ids = []
        spawn_enemies(self.world, self.waves, self.waves.level,
                      pos.x, pos.y, self.width, self.height, self.rng)
        self.phase = PHASE_PLAYING

    @property
    def level(self) -> int:
        return self.waves.level

    @property
    def is_over(self) -> bool:
        return self.phase == PHASE_OVER

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def tick(self, surface: DrawingSurface) -> None:
        """One full frame: update runs to completion, then draw."""
        self.update()
        self.draw(surface)

    def update(self) -> None:
        """Run one frame of game logic. Suspended outside the playing phase."""
        if self.phase != PHASE_PLAYING:
            return
        self.frame += 1

        player_update_system(self.world, self.player_id, self.snapshot,
                             self.width, self.height)
        enemy_system(self.world, self.player_id)

        pos = self.world.get_component(self.player_id, Position)
        update_wave_system(self.world, self.waves, pos.x, pos.y,
                           self.width, self.height, self.rng)

        # Check player death
        health = self.world.get_component(self.player_id, Health)
        if health.dead:
            self.phase = PHASE_OVER
            logger.info('game over at level %d', self.waves.level)

    def draw(self, surface: DrawingSurface) -> None:
        """Read-only projection of the world. Nothing before the game starts."""
        if self.phase == PHASE_NOT_STARTED:
            return

        surface.clear(self.width, self.height)
        draw_player(surface, self.world, self.player_id)
        draw_enemies(surface, self.world)

        if self.phase == PHASE_OVER:
            cx = self.width / 2
            cy = self.height / 2
            surface.draw_text(GAME_OVER_TEXT, (cx, cy), TextStyle(WHITE, 'large'))
            surface.draw_text(RESTART_TEXT, (cx, cy + 40), TextStyle(WHITE))
