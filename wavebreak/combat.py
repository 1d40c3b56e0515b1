"""
Combat Helpers
===============
Damage application and collision queries shared by weapons, projectiles
and enemies.
"""

import logging
import math
from typing import Iterator, Tuple

from .ecs import World
from .components import Position, Body, Health, EnemyTag

logger = logging.getLogger(__name__)


def get_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def live_enemies(world: World) -> Iterator[Tuple[int, Position, Body, Health]]:
    """Yield (id, position, body, health) for every enemy not yet dead, in spawn order."""
    for entity_id, pos, body, health, _tag in world.query(Position, Body, Health, EnemyTag):
        if not health.dead:
            yield entity_id, pos, body, health


def damage_enemy(world: World, enemy_id: int, amount: int) -> bool:
    """
    Apply damage to an enemy. Marks it dead at <= 0 health.

    Returns True if this hit killed the enemy.
    """
    health = world.get_component(enemy_id, Health)
    if health is None or health.dead:
        return False
    health.current -= amount
    if health.current <= 0:
        health.current = 0
        health.dead = True
        return True
    return False


def kill_enemy(world: World, enemy_id: int) -> None:
    """Mark an enemy dead without touching its health (consumed on contact)."""
    health = world.get_component(enemy_id, Health)
    if health is not None:
        health.dead = True


def damage_player(world: World, player_id: int) -> bool:
    """
    Take one point of health from the player.

    Health is clamped at zero; once dead, further hits are ignored.
    Returns True only for the hit that killed the player.
    """
    health = world.get_component(player_id, Health)
    if health is None or health.dead:
        return False
    health.current = max(0, health.current - 1)
    logger.debug('player hit, health=%d', health.current)
    if health.current <= 0:
        health.dead = True
        logger.info('player died')
        return True
    return False
