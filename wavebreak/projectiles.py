"""
Projectile System
==================
Projectile lifecycle: spawn, move, collide, die. Dead projectiles are
reclaimed by the owning weapon's update.
"""

import math

from .ecs import World
from .components import Projectile
from .combat import live_enemies, damage_enemy, get_distance
from .engine import NEON_YELLOW
from .surface import DrawingSurface

BULLET_RADIUS = 5.0


def spawn_projectile(x: float, y: float, angle: float, speed: float,
                     damage: int, radius: float = BULLET_RADIUS,
                     color: int = NEON_YELLOW) -> Projectile:
    """Create a projectile record. The caller stores it."""
    return Projectile(x=x, y=y, angle=angle, speed=speed, damage=damage,
                      radius=radius, color=color)


def is_out_of_bounds(proj: Projectile, width: float, height: float) -> bool:
    return proj.x < 0 or proj.x > width or proj.y < 0 or proj.y > height


def update_projectile(world: World, proj: Projectile,
                      width: float, height: float) -> None:
    """
    Advance one frame, then resolve bounds and enemy collision.

    Leaving the playfield is checked first so an off-screen projectile can't
    also hit. The first live enemy in spawn order that overlaps takes the
    damage; a projectile never hits more than one enemy.
    """
    if proj.dead:
        return

    proj.x += math.cos(proj.angle) * proj.speed
    proj.y += math.sin(proj.angle) * proj.speed

    if is_out_of_bounds(proj, width, height):
        proj.dead = True
        return

    for enemy_id, e_pos, e_body, _health in live_enemies(world):
        if get_distance(proj.x, proj.y, e_pos.x, e_pos.y) < e_body.radius + proj.radius:
            damage_enemy(world, enemy_id, proj.damage)
            proj.dead = True
            break


def draw_projectile(surface: DrawingSurface, proj: Projectile) -> None:
    if proj.dead:
        return
    surface.draw_circle((proj.x, proj.y), proj.radius, proj.color)
