"""
Enemy Archetypes
=================
Enemy entity creation, chase behavior and drawing.

Enemies have no weapon: they walk straight at the player and are
consumed when they touch it.
"""

from .ecs import World
from .components import Position, Body, Health, Renderable, EnemyTag
from .combat import damage_player, get_distance, kill_enemy
from .config import ENEMY_RADIUS, ENEMY_SPEED, ENEMY_HEALTH
from .engine import NEON_RED
from .surface import DrawingSurface


def create_grunt(world: World, x: float, y: float) -> int:
    """
    Create a grunt enemy.

    Visual: red disc
    Behavior: beeline to the player, dies on contact
    """
    entity_id = world.create_entity()

    world.add_component(entity_id, Position(x, y))
    world.add_component(entity_id, Body(radius=ENEMY_RADIUS, speed=ENEMY_SPEED))
    world.add_component(entity_id, Health(ENEMY_HEALTH, ENEMY_HEALTH))
    world.add_component(entity_id, Renderable(color=NEON_RED))
    world.add_component(entity_id, EnemyTag('grunt'))

    return entity_id


def enemy_update(world: World, enemy_id: int, player_id: int) -> None:
    """
    Chase and contact check for one enemy.

    The contact test uses the distance measured before this frame's step.
    Movement is skipped when the enemy sits exactly on the player.
    """
    health = world.get_component(enemy_id, Health)
    if health.dead:
        return

    pos = world.get_component(enemy_id, Position)
    body = world.get_component(enemy_id, Body)
    p_pos = world.get_component(player_id, Position)
    p_body = world.get_component(player_id, Body)

    dx = p_pos.x - pos.x
    dy = p_pos.y - pos.y
    dist = get_distance(pos.x, pos.y, p_pos.x, p_pos.y)

    if dist > 0:
        pos.x += (dx / dist) * body.speed
        pos.y += (dy / dist) * body.speed

    if dist < body.radius + p_body.radius:
        damage_player(world, player_id)
        kill_enemy(world, enemy_id)


def enemy_system(world: World, player_id: int) -> None:
    """Update every enemy in spawn order."""
    for enemy_id, _tag in world.query(EnemyTag):
        enemy_update(world, enemy_id, player_id)


def draw_enemies(surface: DrawingSurface, world: World) -> None:
    for _eid, pos, body, health, rend, _tag in world.query(
        Position, Body, Health, Renderable, EnemyTag
    ):
        if health.dead or not rend.visible:
            continue
        surface.draw_circle((pos.x, pos.y), body.radius, rend.color)
