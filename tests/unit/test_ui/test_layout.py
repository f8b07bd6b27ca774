"""Tests for window layout and hit testing."""

from __future__ import annotations

import pytest

from pcremote.control.repeat import Direction
from pcremote.domain.models import View
from pcremote.ui.layout import build_layout, hit_test


@pytest.fixture
def layout():
    return build_layout(480, 800)


class TestBuildLayout:
    def test_button_sets(self, layout) -> None:
        assert [b.label for b in layout.menu] == ["Control Remoto", "Información del Sistema"]
        assert [b.label for b in layout.actions] == ["Apagar", "Reiniciar", "Suspender"]
        assert len(layout.controls) == 7

    def test_directional_buttons_hold(self, layout) -> None:
        holds = {b.key: b.direction for b in layout.controls if b.kind == "hold"}
        assert holds == {
            "move_right": Direction.RIGHT,
            "move_left": Direction.LEFT,
            "move_up": Direction.UP,
            "move_down": Direction.DOWN,
        }

    def test_buttons_fit_in_window(self, layout) -> None:
        for button in [*layout.menu, *layout.controls, *layout.actions]:
            assert button.rect.left >= 0 and button.rect.right <= 480
            assert button.rect.top >= 0 and button.rect.bottom <= 800

    def test_buttons_do_not_overlap(self, layout) -> None:
        buttons = [*layout.menu, *layout.controls, *layout.actions]
        for i, a in enumerate(buttons):
            for b in buttons[i + 1:]:
                assert not a.rect.colliderect(b.rect), (a.key, b.key)

    def test_action_panel_visible_in_both_views(self, layout) -> None:
        for view in View:
            keys = {b.key for b in layout.visible_buttons(view)}
            assert {"turn_off", "restart", "suspend"} <= keys

    def test_controls_hidden_in_system_info_view(self, layout) -> None:
        keys = {b.key for b in layout.visible_buttons(View.SYSTEM_INFO)}
        assert "move_right" not in keys
        assert "click" not in keys


class TestHitTest:
    def test_hit_returns_button(self, layout) -> None:
        target = layout.controls[0]
        assert hit_test(layout.controls, target.rect.center) is target

    def test_miss_returns_none(self, layout) -> None:
        assert hit_test(layout.controls, (0, 0)) is None
