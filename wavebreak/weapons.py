"""
Weapon System
==============
Weapon definitions, attack dispatch by weapon kind, and weapon utilities.
"""

import logging
import math
from typing import Callable, Dict, Optional

from .ecs import World
from .components import Position, Facing, WeaponComponent, WeaponInventory
from .combat import live_enemies, damage_enemy, get_distance
from .engine import NEON_RED, NEON_YELLOW
from .projectiles import spawn_projectile, update_projectile, draw_projectile
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


# =============================================================================
# WEAPON DEFINITIONS
# =============================================================================
# kind selects the behavior: 'melee' (instant area check at the attack
# point) or 'ranged' (spawns projectiles owned by the weapon).

WEAPONS = {
    'machete': {
        'name': 'Machete',
        'kind': 'melee',
        'color': NEON_RED,
        'cooldown_frames': 20,
        'range': 40.0,
        'damage': 1,
    },
    'pistol': {
        'name': 'Pistol',
        'kind': 'ranged',
        'color': NEON_YELLOW,
        'cooldown_frames': 15,
        'bullet_speed': 7.0,
        'muzzle_offset': 20.0,
        'damage': 1,
    },
}

STARTING_LOADOUT = ('machete', 'pistol')


# =============================================================================
# WEAPON UTILITIES
# =============================================================================

def create_weapon(weapon_type: str, owner_id: int) -> WeaponComponent:
    """Create a WeaponComponent for the given weapon type."""
    data = WEAPONS[weapon_type]
    return WeaponComponent(
        weapon_type=weapon_type,
        kind=data['kind'],
        owner_id=owner_id,
    )


def get_weapon_data(weapon: WeaponComponent) -> dict:
    """Get the static data dict for a weapon component."""
    return WEAPONS[weapon.weapon_type]


def get_active_weapon(world: World, player_id: int) -> Optional[WeaponComponent]:
    """Get the player's active weapon component. Returns None if missing."""
    inv = world.get_component(player_id, WeaponInventory)
    if inv is None or not inv.weapons:
        return None
    return inv.weapons[inv.active_index]


def switch_weapon(world: World, player_id: int) -> None:
    """Cycle to the next weapon slot, wrapping to the first."""
    inv = world.get_component(player_id, WeaponInventory)
    if inv is None or not inv.weapons:
        return
    inv.active_index = (inv.active_index + 1) % len(inv.weapons)
    logger.debug('switched to %s', inv.weapons[inv.active_index].weapon_type)


def _owner_aim(world: World, weapon: WeaponComponent):
    """Read the owner's position and facing angle through its entity id."""
    pos = world.get_component(weapon.owner_id, Position)
    facing = world.get_component(weapon.owner_id, Facing)
    if pos is None or facing is None:
        return None
    return pos.x, pos.y, facing.angle


def melee_attack_point(world: World, weapon: WeaponComponent):
    """Point `range` units ahead of the owner along its facing angle."""
    aim = _owner_aim(world, weapon)
    if aim is None:
        return None
    x, y, angle = aim
    reach = get_weapon_data(weapon)['range']
    return x + math.cos(angle) * reach, y + math.sin(angle) * reach


# =============================================================================
# ATTACK PATTERNS
# =============================================================================

def _melee_attack(world: World, weapon: WeaponComponent) -> None:
    """Single instantaneous area check around the attack point."""
    data = get_weapon_data(weapon)
    point = melee_attack_point(world, weapon)
    if point is None:
        return
    ax, ay = point

    for enemy_id, e_pos, _body, _health in live_enemies(world):
        if get_distance(e_pos.x, e_pos.y, ax, ay) < data['range']:
            damage_enemy(world, enemy_id, data['damage'])

    weapon.cooldown_remaining = data['cooldown_frames']


def _ranged_attack(world: World, weapon: WeaponComponent) -> None:
    """Fire one projectile from the muzzle along the owner's facing."""
    data = get_weapon_data(weapon)
    aim = _owner_aim(world, weapon)
    if aim is None:
        return
    x, y, angle = aim
    offset = data['muzzle_offset']
    weapon.projectiles.append(spawn_projectile(
        x + math.cos(angle) * offset,
        y + math.sin(angle) * offset,
        angle,
        data['bullet_speed'],
        data['damage'],
        color=data['color'],
    ))
    weapon.cooldown_remaining = data['cooldown_frames']


ATTACKS: Dict[str, Callable[[World, WeaponComponent], None]] = {
    'melee': _melee_attack,
    'ranged': _ranged_attack,
}


def weapon_attack(world: World, weapon: WeaponComponent) -> bool:
    """
    Attack with the weapon if it is off cooldown.

    Returns True if the attack went off.
    """
    if weapon.cooldown_remaining > 0:
        return False
    ATTACKS[weapon.kind](world, weapon)
    return True


# =============================================================================
# PER-FRAME UPDATE
# =============================================================================

def weapon_update(world: World, weapon: WeaponComponent,
                  width: float, height: float) -> None:
    """
    Tick the cooldown and, for ranged weapons, advance projectiles.

    Dead projectiles are compacted out of the weapon's list in place.
    """
    if weapon.cooldown_remaining > 0:
        weapon.cooldown_remaining -= 1

    if weapon.kind != 'ranged':
        return

    for proj in weapon.projectiles:
        update_projectile(world, proj, width, height)
    weapon.projectiles[:] = [p for p in weapon.projectiles if not p.dead]


# =============================================================================
# RENDERING
# =============================================================================

def _draw_melee(surface: DrawingSurface, world: World, weapon: WeaponComponent) -> None:
    point = melee_attack_point(world, weapon)
    if point is None:
        return
    data = get_weapon_data(weapon)
    surface.draw_circle(point, data['range'], data['color'], filled=False)


def _draw_ranged(surface: DrawingSurface, world: World, weapon: WeaponComponent) -> None:
    for proj in weapon.projectiles:
        draw_projectile(surface, proj)


WEAPON_VISUALS: Dict[str, Callable[[DrawingSurface, World, WeaponComponent], None]] = {
    'melee': _draw_melee,
    'ranged': _draw_ranged,
}


def draw_weapon(surface: DrawingSurface, world: World, weapon: WeaponComponent) -> None:
    """Draw the weapon's own visual, if its kind defines one."""
    draw = WEAPON_VISUALS.get(weapon.kind)
    if draw is not None:
        draw(surface, world, weapon)
