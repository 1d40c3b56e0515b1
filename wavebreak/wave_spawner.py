"""
Wave Spawning System
=====================
One wave per level: `level * 5` enemies scattered away from the player.
When the whole wave is dead the next level starts on the same frame.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Tuple

from .ecs import World
from .components import Health
from .combat import get_distance
from .config import ENEMIES_PER_LEVEL, SPAWN_MIN_DISTANCE, MAX_SPAWN_ATTEMPTS
from .enemies import create_grunt

logger = logging.getLogger(__name__)


@dataclass
class WaveState:
    """Current level and the enemies of its wave, in spawn order."""
    level: int = 1
    enemy_ids: List[int] = field(default_factory=list)
    waves_cleared: int = 0


def wave_size(level: int) -> int:
    return level * ENEMIES_PER_LEVEL


def pick_spawn_position(
    rng: random.Random,
    width: float, height: float,
    player_x: float, player_y: float,
    min_distance: float = SPAWN_MIN_DISTANCE,
    max_attempts: int = MAX_SPAWN_ATTEMPTS,
) -> Tuple[float, float]:
    """
    Uniform random point at least `min_distance` from the player.

    Rejection sampling is bounded; if no sample qualifies (arena too small
    for the exclusion radius) the farthest sample is used.
    """
    best = (0.0, 0.0)
    best_dist = -1.0
    for _ in range(max_attempts):
        x = rng.random() * width
        y = rng.random() * height
        dist = get_distance(x, y, player_x, player_y)
        if dist >= min_distance:
            return x, y
        if dist > best_dist:
            best, best_dist = (x, y), dist

    logger.warning(
        'no spawn point %.0f units from player in %gx%g arena after %d tries',
        min_distance, width, height, max_attempts,
    )
    return best


def spawn_enemies(world: World, waves: WaveState, level: int,
                  player_x: float, player_y: float,
                  width: float, height: float,
                  rng: random.Random) -> None:
    """Replace the current wave with a fresh one for `level`."""
    for enemy_id in waves.enemy_ids:
        world.destroy_entity(enemy_id)
    world.process_dead_entities()

    waves.level = level
    waves.enemy_ids = []
    for _ in range(wave_size(level)):
        x, y = pick_spawn_position(rng, width, height, player_x, player_y)
        waves.enemy_ids.append(create_grunt(world, x, y))

    logger.info('level %d: spawned %d enemies, %d entities alive',
                level, len(waves.enemy_ids), world.entity_count())


def is_wave_cleared(world: World, waves: WaveState) -> bool:
    """True when every enemy of the current wave is dead."""
    for enemy_id in waves.enemy_ids:
        health = world.get_component(enemy_id, Health)
        if health is not None and not health.dead:
            return False
    return True


def enemies_remaining(world: World, waves: WaveState) -> int:
    count = 0
    for enemy_id in waves.enemy_ids:
        health = world.get_component(enemy_id, Health)
        if health is not None and not health.dead:
            count += 1
    return count


def update_wave_system(world: World, waves: WaveState,
                       player_x: float, player_y: float,
                       width: float, height: float,
                       rng: random.Random) -> bool:
    """
    Advance to the next level if the wave is cleared.

    Returns True when a new wave was spawned this frame.
    """
    if not is_wave_cleared(world, waves):
        return False

    waves.waves_cleared += 1
    logger.info('level %d cleared', waves.level)
    spawn_enemies(world, waves, waves.level + 1,
                  player_x, player_y, width, height, rng)
    return True
