import math
from types import SimpleNamespace

import pytest

from wavebreak.engine import BrailleCanvas, TerminalSurface, NEON_RED, WHITE
from wavebreak.surface import TextStyle


def stub_term(width=80, height=24):
    return SimpleNamespace(
        width=width, height=height, normal='',
        move_xy=lambda x, y: '', color=lambda c: '', on_color=lambda c: '',
    )


@pytest.fixture
def term_surface():
    return TerminalSurface(stub_term(), 800.0, 600.0)


def is_braille(char):
    return 0x2800 < ord(char) <= 0x28FF


def test_playfield_fits_and_centres(term_surface):
    assert term_surface.scale == pytest.approx(0.14)
    assert term_surface.offset_x == pytest.approx(24.0)
    assert term_surface.offset_y == pytest.approx(0.0)
    assert term_surface.game_height == 21


def test_world_to_cell(term_surface):
    assert term_surface.world_to_cell(400.0, 300.0) == (40, 10)
    assert term_surface.world_to_cell(0.0, 0.0) == (12, 0)


def test_filled_circle_sets_dots(term_surface):
    term_surface.clear(800, 600)
    term_surface.draw_circle((400.0, 300.0), 15.0, NEON_RED)

    char, color = term_surface.braille.get_char(40, 10)
    assert is_braille(char)
    assert color == NEON_RED


def test_text_centred_on_cell(term_surface):
    term_surface.clear(800, 600)
    term_surface.draw_text('abc', (400.0, 300.0))

    row = term_surface.buffer.back[10]
    assert ''.join(char for char, _ in row[39:42]) == 'abc'


def test_large_text_is_spaced(term_surface):
    term_surface.clear(800, 600)
    term_surface.draw_text('ok', (400.0, 300.0), TextStyle(WHITE, 'large'))

    row = term_surface.buffer.back[10]
    assert ''.join(char for char, _ in row[39:42]) == 'O K'


def test_text_wins_over_dots(term_surface):
    term_surface.clear(800, 600)
    term_surface.draw_circle((400.0, 300.0), 15.0, NEON_RED)
    term_surface.draw_text('X', (400.0, 300.0))

    term_surface.present()

    front = term_surface.buffer.front[10]
    assert front[40][0] == 'X'
    assert is_braille(front[39][0])


def test_present_emits_only_changes(term_surface):
    term_surface.clear(800, 600)
    term_surface.draw_text('X', (400.0, 300.0))
    term_surface.present()
    term_surface.clear(800, 600)
    term_surface.draw_text('X', (400.0, 300.0))

    # Nothing differs between the two frames
    assert term_surface.present() == ''


def test_transform_rotates_then_translates(term_surface):
    with term_surface.transformed(400.0, 300.0, math.pi / 2):
        x, y = term_surface.to_world(10.0, 0.0)

    assert x == pytest.approx(400.0)
    assert y == pytest.approx(310.0)
    assert term_surface.to_world(10.0, 0.0) == (10.0, 0.0)


def test_nested_transforms(term_surface):
    with term_surface.transformed(100.0, 0.0, math.pi / 2):
        with term_surface.transformed(10.0, 0.0):
            x, y = term_surface.to_world(0.0, 0.0)

    assert x == pytest.approx(100.0)
    assert y == pytest.approx(10.0)


def test_braille_ignores_out_of_range():
    canvas = BrailleCanvas(2, 2)
    canvas.set_pixel(-1, 0)
    canvas.set_pixel(4, 0)
    canvas.set_pixel(0, 8)

    assert all(v == 0 for v in canvas.dots)


def test_buffer_clips_strings():
    surface = TerminalSurface(stub_term(10, 6), 100.0, 100.0)
    surface.put_string(-2, 0, 'abcdef')
    surface.put_string(8, 1, 'xyz')

    back = surface.buffer.back
    assert ''.join(char for char, _ in back[0][:4]) == 'cdef'
    assert ''.join(char for char, _ in back[1][8:]) == 'xy'


def test_resize_refits_playfield(term_surface):
    term_surface.resize(160, 48)

    assert (term_surface.width, term_surface.height) == (160, 48)
    assert term_surface.game_height == 45
    assert term_surface.world_to_cell(400.0, 300.0) == (80, 22)
