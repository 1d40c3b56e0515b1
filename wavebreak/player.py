"""
Player Module
==============
Player entity creation, per-frame input handling and drawing.
"""

import math

from .ecs import World
from .components import (
    Position, Body, Facing, Health, Renderable,
    WeaponInventory, PlayerTag
)
from .config import (
    PLAYER_RADIUS, PLAYER_SPEED, PLAYER_HEALTH,
    KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_SWITCH_WEAPON,
)
from .engine import NEON_CYAN, NEON_YELLOW, NEON_RED
from .input import InputSnapshot
from .surface import DrawingSurface
from .weapons import (
    STARTING_LOADOUT, create_weapon, get_active_weapon,
    switch_weapon, weapon_attack, weapon_update, draw_weapon
)

# Health pips (top-left)
PIP_SIZE = 20.0
PIP_SPACING = 30.0
PIP_MARGIN = 10.0


def create_player(world: World, x: float, y: float) -> int:
    """Create the player entity with all required components."""
    entity_id = world.create_entity()

    world.add_component(entity_id, Position(x, y))
    world.add_component(entity_id, Body(radius=PLAYER_RADIUS, speed=PLAYER_SPEED))
    world.add_component(entity_id, Facing(0.0))
    world.add_component(entity_id, Health(PLAYER_HEALTH, PLAYER_HEALTH))
    world.add_component(entity_id, Renderable(color=NEON_CYAN))
    world.add_component(entity_id, PlayerTag())

    weapons = [create_weapon(weapon_type, entity_id) for weapon_type in STARTING_LOADOUT]
    world.add_component(entity_id, WeaponInventory(weapons=weapons, active_index=0))

    return entity_id


def player_update_system(world: World, player_id: int, snapshot: InputSnapshot,
                         width: float, height: float) -> None:
    """
    Apply one frame of input to the player.

    Order: move, clamp, aim, attack, weapon switch, active weapon update.
    Axes are checked independently and not normalized, so diagonals
    cover more ground per frame.
    """
    pos = world.get_component(player_id, Position)
    body = world.get_component(player_id, Body)
    facing = world.get_component(player_id, Facing)

    if snapshot.is_key_down(KEY_UP):
        pos.y -= body.speed
    if snapshot.is_key_down(KEY_DOWN):
        pos.y += body.speed
    if snapshot.is_key_down(KEY_LEFT):
        pos.x -= body.speed
    if snapshot.is_key_down(KEY_RIGHT):
        pos.x += body.speed

    pos.x = max(body.radius, min(width - body.radius, pos.x))
    pos.y = max(body.radius, min(height - body.radius, pos.y))

    px, py = snapshot.pointer_position()
    facing.angle = math.atan2(py - pos.y, px - pos.x)

    # Fires every frame the button is held; the cooldown does the gating
    if snapshot.is_pointer_down():
        weapon = get_active_weapon(world, player_id)
        if weapon is not None:
            weapon_attack(world, weapon)

    if snapshot.is_key_down(KEY_SWITCH_WEAPON):
        switch_weapon(world, player_id)
        # Force the key up so a held key switches only once
        snapshot.release_key(KEY_SWITCH_WEAPON)

    weapon = get_active_weapon(world, player_id)
    if weapon is not None:
        weapon_update(world, weapon, width, height)


def draw_player(surface: DrawingSurface, world: World, player_id: int) -> None:
    """Body and weapon glyph in the facing frame, weapon visual, health pips."""
    pos = world.get_component(player_id, Position)
    body = world.get_component(player_id, Body)
    facing = world.get_component(player_id, Facing)
    health = world.get_component(player_id, Health)
    rend = world.get_component(player_id, Renderable)

    if rend is None or rend.visible:
        with surface.transformed(pos.x, pos.y, facing.angle):
            surface.draw_circle((0.0, 0.0), body.radius,
                                rend.color if rend else NEON_CYAN)
            surface.draw_rect((0.0, -5.0), (25.0, 10.0), NEON_YELLOW)

    weapon = get_active_weapon(world, player_id)
    if weapon is not None:
        draw_weapon(surface, world, weapon)

    for i in range(health.current):
        surface.draw_rect((PIP_MARGIN + i * PIP_SPACING, PIP_MARGIN),
                          (PIP_SIZE, PIP_SIZE), NEON_RED)
