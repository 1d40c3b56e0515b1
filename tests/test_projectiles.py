import math

import pytest

from wavebreak.components import Health
from wavebreak.enemies import create_grunt
from wavebreak.projectiles import spawn_projectile, update_projectile, draw_projectile

W, H = 800.0, 600.0


def test_moves_along_angle(world):
    bullet = spawn_projectile(100.0, 100.0, math.pi / 2, 7.0, 1)
    update_projectile(world, bullet, W, H)

    assert (bullet.x, bullet.y) == pytest.approx((100.0, 107.0))
    assert not bullet.dead


@pytest.mark.parametrize('x, y, angle', [
    (797.0, 300.0, 0.0),
    (3.0, 300.0, math.pi),
    (400.0, 3.0, -math.pi / 2),
    (400.0, 597.0, math.pi / 2),
])
def test_dies_when_leaving_playfield(world, x, y, angle):
    bullet = spawn_projectile(x, y, angle, 7.0, 1)
    update_projectile(world, bullet, W, H)

    assert bullet.dead


def test_bounds_checked_before_collision(world):
    enemy = create_grunt(world, 804.0, 300.0)
    bullet = spawn_projectile(797.0, 300.0, 0.0, 7.0, 1)

    update_projectile(world, bullet, W, H)

    assert bullet.dead
    assert world.get_component(enemy, Health).current == 2


def test_first_enemy_in_spawn_order_wins(world):
    first = create_grunt(world, 430.0, 300.0)
    closer = create_grunt(world, 418.0, 300.0)
    bullet = spawn_projectile(410.0, 300.0, 0.0, 7.0, 1)

    update_projectile(world, bullet, W, H)

    assert bullet.dead
    assert world.get_component(first, Health).current == 1
    assert world.get_component(closer, Health).current == 2


def test_dead_enemies_are_ignored(world):
    corpse = create_grunt(world, 420.0, 300.0)
    world.get_component(corpse, Health).dead = True
    target = create_grunt(world, 425.0, 300.0)
    bullet = spawn_projectile(410.0, 300.0, 0.0, 7.0, 1)

    update_projectile(world, bullet, W, H)

    assert world.get_component(corpse, Health).current == 2
    assert world.get_component(target, Health).current == 1


def test_hits_at_most_one_enemy_per_lifetime(world):
    enemy = create_grunt(world, 420.0, 300.0)
    bullet = spawn_projectile(410.0, 300.0, 0.0, 1.0, 1)

    for _ in range(5):
        update_projectile(world, bullet, W, H)

    assert world.get_component(enemy, Health).current == 1


def test_touching_radius_sum_is_a_miss(world):
    enemy = create_grunt(world, 427.0, 320.0)
    bullet = spawn_projectile(420.0, 300.0, 0.0, 7.0, 1)

    update_projectile(world, bullet, W, H)

    # Distance is exactly 20 == 15 + 5
    assert not bullet.dead
    assert world.get_component(enemy, Health).current == 2


def test_draw(surface):
    bullet = spawn_projectile(10.0, 20.0, 0.0, 7.0, 1)
    draw_projectile(surface, bullet)
    bullet.dead = True
    draw_projectile(surface, bullet)

    circles = surface.of('circle')
    assert len(circles) == 1
    assert circles[0][1] == (10.0, 20.0)
    assert circles[0][2] == 5.0
