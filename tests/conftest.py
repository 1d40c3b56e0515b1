"""Shared fixtures: a recording drawing surface and small arenas."""

import random

import pytest

from wavebreak.components import Health
from wavebreak.config import GameConfig
from wavebreak.ecs import World
from wavebreak.input import InputSnapshot
from wavebreak.player import create_player
from wavebreak.simulation import Simulation
from wavebreak.surface import DrawingSurface, TextStyle


class RecordingSurface(DrawingSurface):
    """Records every primitive with coordinates resolved to world space."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def clear(self, width, height):
        self.calls.append(('clear', width, height))

    def draw_circle(self, center, radius, color, filled=True):
        self.calls.append(('circle', self.to_world(*center), radius, color, filled))

    def draw_rect(self, origin, size, color):
        self.calls.append(('rect', self.to_world(*origin), size, color,
                           self.transform.angle))

    def draw_text(self, text, position, style=TextStyle()):
        self.calls.append(('text', text, self.to_world(*position), style))

    def of(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def world():
    return World()


@pytest.fixture
def snapshot():
    return InputSnapshot()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def player_id(world):
    """Player in the middle of an 800x600 arena, facing +x."""
    return create_player(world, 400.0, 300.0)


@pytest.fixture
def sim(snapshot):
    return Simulation(GameConfig(seed=1234), snapshot, random.Random(1234))


@pytest.fixture
def kill_wave():
    """Mark every enemy of the current wave dead."""
    def _kill(sim):
        for enemy_id in sim.waves.enemy_ids:
            sim.world.get_component(enemy_id, Health).dead = True
    return _kill
