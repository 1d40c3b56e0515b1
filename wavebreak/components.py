"""
Component Definitions
======================
All components are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import List


# =============================================================================
# PHYSICS COMPONENTS
# =============================================================================

@dataclass
class Position:
    """World position in playfield units."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class Body:
    """Circular collision extent and movement speed (units per frame)."""
    radius: float = 15.0
    speed: float = 1.0


@dataclass
class Facing:
    """Facing angle in radians (0 = +x, clockwise with y pointing down)."""
    angle: float = 0.0


# =============================================================================
# RENDERING COMPONENTS
# =============================================================================

@dataclass
class Renderable:
    """Visual representation of an entity."""
    color: int = 7  # ANSI 256 color
    visible: bool = True


# =============================================================================
# COMBAT COMPONENTS
# =============================================================================

@dataclass
class Health:
    """Entity health pool. `dead` is terminal once set."""
    current: int = 1
    maximum: int = 1
    dead: bool = False


@dataclass
class Projectile:
    """A moving point hazard owned by a ranged weapon (not an entity)."""
    x: float
    y: float
    angle: float
    speed: float
    damage: int
    radius: float = 5.0
    color: int = 226
    dead: bool = False


@dataclass
class WeaponComponent:
    """
    Runtime state of one weapon.

    Static stats live in the WEAPONS table keyed by `weapon_type`; `kind`
    selects the attack behavior ('melee' or 'ranged'). The owner is
    referenced by entity id only.
    """
    weapon_type: str = 'machete'
    kind: str = 'melee'
    owner_id: int = -1
    cooldown_remaining: int = 0
    projectiles: List[Projectile] = field(default_factory=list)


@dataclass
class WeaponInventory:
    """Ordered, fixed set of weapons and the active slot."""
    weapons: List[WeaponComponent] = field(default_factory=list)
    active_index: int = 0


# =============================================================================
# TAG COMPONENTS
# =============================================================================

@dataclass
class PlayerTag:
    """Marks the player entity."""
    pass


@dataclass
class EnemyTag:
    """Marks an enemy entity."""
    enemy_type: str = 'grunt'
