import logging
from types import SimpleNamespace

from wavebreak.engine import TerminalSurface
from wavebreak.main import render_ui


def stub_term(width=120, height=24):
    return SimpleNamespace(
        width=width, height=height, normal='',
        move_xy=lambda x, y: '', color=lambda c: '', on_color=lambda c: '',
    )


def hud_line(surface, row):
    return ''.join(char for char, _ in surface.buffer.back[row])


def test_hud_shows_level_and_cleared_waves(sim, kill_wave):
    surface = TerminalSurface(stub_term(), 800.0, 600.0)
    sim.start()
    kill_wave(sim)
    sim.update()

    surface.clear(800, 600)
    render_ui(sim, surface)

    status = hud_line(surface, surface.game_height)
    assert 'LEVEL:2' in status
    assert 'CLEARED:1' in status
    assert 'ENEMIES:10' in status
    assert '[♥♥♥]' in hud_line(surface, surface.game_height + 1)


def test_spawn_is_logged_with_entity_count(sim, caplog):
    with caplog.at_level(logging.INFO, logger='wavebreak'):
        sim.start()

    assert 'level 1: spawned 5 enemies, 6 entities alive' in caplog.text
