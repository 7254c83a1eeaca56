import pytest

from my_defender.button import (
    HIDDEN_POSITION,
    HIDDEN_RECT,
    Button,
    dispatch_click,
    hide_buttons,
    reset_buttons,
)
from my_defender.sprite import IntRect, Vector


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, target):
        self.calls.append(target)


def make_button(x=100.0, y=100.0, action=None):
    return Button(Vector(x, y), IntRect(16, 16, 16, 16), Vector(5.0, 5.0), action)


def test_button_sprite_starts_at_position_with_scale():
    button = make_button()
    assert button.sprite.position == Vector(100.0, 100.0)
    assert button.sprite.scale == Vector(5.0, 5.0)
    assert button.sprite.rect == IntRect(16, 16, 16, 16)


def test_hit_inside_and_outside():
    button = make_button()
    assert button.hit(Vector(100.0, 100.0))
    assert not button.hit(Vector(400.0, 400.0))


def test_hide_moves_off_screen():
    button = make_button()
    button.hide()
    assert button.sprite.position == HIDDEN_POSITION
    assert button.sprite.rect == HIDDEN_RECT
    assert not button.hit(Vector(100.0, 100.0))


def test_change_then_reset_restores_everything():
    original = Recorder()
    other = Recorder()
    button = make_button(action=original)
    button.change(Vector(10.0, 20.0), IntRect(0, 0, 16, 16))
    button.action = other
    assert button.sprite.position == Vector(10.0, 20.0)
    button.reset()
    assert button.sprite.position == Vector(100.0, 100.0)
    assert button.sprite.rect == IntRect(16, 16, 16, 16)
    assert button.action is original


def test_reset_buttons_after_hide_buttons():
    buttons = [make_button(100.0, 100.0), make_button(300.0, 300.0)]
    hide_buttons(buttons)
    assert all(b.sprite.position == HIDDEN_POSITION for b in buttons)
    reset_buttons(buttons)
    assert [b.sprite.position for b in buttons] == [b.position for b in buttons]


def test_dispatch_click_runs_action_on_target():
    recorder = Recorder()
    buttons = [make_button(action=recorder), make_button(300.0, 300.0, Recorder())]
    target = object()
    assert dispatch_click(buttons, Vector(100.0, 100.0), target) == 1
    assert recorder.calls == [target]


def test_dispatch_click_miss_and_no_action():
    recorder = Recorder()
    buttons = [make_button(action=None), make_button(300.0, 300.0, recorder)]
    assert dispatch_click(buttons, Vector(100.0, 100.0), "app") == 0
    assert dispatch_click(buttons, Vector(900.0, 900.0), "app") == 0
    assert recorder.calls == []


@pytest.mark.parametrize("count", [1, 2, 3])
def test_dispatch_click_fires_all_overlapping(count):
    recorders = [Recorder() for _ in range(count)]
    buttons = [make_button(action=r) for r in recorders]
    assert dispatch_click(buttons, Vector(100.0, 100.0), "app") == count
    assert all(r.calls == ["app"] for r in recorders)