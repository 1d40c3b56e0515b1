import pytest
from blessed.keyboard import Keystroke

from wavebreak.input import InputSnapshot, TerminalInput


def key(ch):
    return Keystroke(ch)


ESCAPE = Keystroke('\x1b', code=361, name='KEY_ESCAPE')
ARROW_RIGHT = Keystroke('\x1b[C', code=261, name='KEY_RIGHT')


@pytest.fixture
def term_input(snapshot):
    snapshot.move_pointer(400.0, 300.0)
    return TerminalInput(snapshot, 800.0, 600.0, hold_duration=3)


def test_snapshot_defaults():
    snap = InputSnapshot()

    assert not snap.is_key_down('w')
    assert not snap.is_pointer_down()
    assert snap.pointer_position() == (0.0, 0.0)


def test_snapshot_press_release():
    snap = InputSnapshot()
    snap.press_key('q')
    assert snap.is_key_down('q')

    snap.release_key('q')
    snap.release_key('q')
    assert not snap.is_key_down('q')


def test_move_key_held_until_timer_expires(term_input, snapshot):
    term_input.process_key(key('w'))

    term_input.update()
    assert snapshot.is_key_down('w')
    term_input.update()
    assert snapshot.is_key_down('w')
    term_input.update()
    assert not snapshot.is_key_down('w')


def test_repeat_refreshes_hold(term_input, snapshot):
    term_input.process_key(key('d'))
    term_input.update()
    term_input.update()
    term_input.process_key(key('d'))
    term_input.update()
    term_input.update()

    assert snapshot.is_key_down('d')


def test_uppercase_movement(term_input, snapshot):
    term_input.process_key(key('A'))
    term_input.update()

    assert snapshot.is_key_down('a')


def test_space_holds_pointer_down(term_input, snapshot):
    term_input.process_key(key(' '))
    term_input.update()
    assert snapshot.is_pointer_down()

    for _ in range(3):
        term_input.update()
    assert not snapshot.is_pointer_down()


def test_aim_keys_nudge_pointer(term_input, snapshot):
    term_input.process_key(key('l'))
    assert snapshot.pointer_position() == (425.0, 300.0)

    term_input.process_key(key('i'))
    assert snapshot.pointer_position() == (425.0, 275.0)

    term_input.process_key(ARROW_RIGHT)
    assert snapshot.pointer_position() == (450.0, 275.0)


def test_pointer_clamped_to_playfield(term_input, snapshot):
    snapshot.move_pointer(790.0, 10.0)

    term_input.process_key(key('l'))
    term_input.process_key(key('i'))

    assert snapshot.pointer_position() == (800.0, 0.0)


def test_switch_key_pressed_until_released(term_input, snapshot):
    term_input.process_key(key('q'))

    for _ in range(5):
        term_input.update()
    assert snapshot.is_key_down('q')

    snapshot.release_key('q')
    assert not snapshot.is_key_down('q')


def test_escape_quits(term_input):
    term_input.process_key(ESCAPE)

    assert term_input.consume_quit()
    assert not term_input.consume_quit()


def test_restart_trigger_consumed_once(term_input):
    term_input.process_key(key('r'))

    assert term_input.consume_restart()
    assert not term_input.consume_restart()


def test_any_key_and_fps_toggle(term_input):
    assert not term_input.consume_any_key()

    term_input.process_key(key('f'))

    assert term_input.consume_any_key()
    assert term_input.consume_toggle_fps()
    assert not term_input.consume_toggle_fps()


def test_empty_keystroke_ignored(term_input):
    term_input.process_key(Keystroke(''))

    assert not term_input.consume_any_key()
