"""Button geometry for the remote-control window.

The window is a single column: the navigation menu on top, the active
view's content in the middle and the power action panel at the bottom.
"""

from __future__ import annotations

from typing import Literal

import pygame
from pydantic import BaseModel, ConfigDict, Field

from pcremote.control.repeat import Direction
from pcremote.domain.models import View

MARGIN = 20
GAP = 10
MENU_ITEM_HEIGHT = 50
CONTROL_BUTTON_SIZE = 130
ACTION_BUTTON_HEIGHT = 60


class Button(BaseModel):
    """A clickable area of the window."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(description="Stable identifier used to bind the button to an action")
    label: str
    kind: Literal["nav", "hold", "press"] = Field(
        description="nav switches views, hold repeats while pressed, press fires once"
    )
    rect: pygame.Rect
    direction: Direction | None = None
    view: View | None = None


class Layout(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    menu: list[Button]
    controls: list[Button]
    actions: list[Button]
    content: pygame.Rect

    def visible_buttons(self, view: View) -> list[Button]:
        """Buttons that can be clicked while ``view`` is active."""
        if view == View.CONTROL:
            return [*self.menu, *self.controls, *self.actions]
        return [*self.menu, *self.actions]


# (key, label, kind, direction)
CONTROL_BUTTONS: list[tuple[str, str, str, Direction | None]] = [
    ("move_right", "Mover Derecha", "hold", Direction.RIGHT),
    ("move_left", "Mover Izquierda", "hold", Direction.LEFT),
    ("move_up", "Mover Arriba", "hold", Direction.UP),
    ("move_down", "Mover Abajo", "hold", Direction.DOWN),
    ("volume_up", "Subir Volumen", "press", None),
    ("volume_down", "Bajar Volumen", "press", None),
    ("click", "Hacer Clic", "press", None),
]

ACTION_BUTTONS: list[tuple[str, str]] = [
    ("turn_off", "Apagar"),
    ("restart", "Reiniciar"),
    ("suspend", "Suspender"),
]


def build_layout(width: int, height: int) -> Layout:
    """Compute button rectangles for a ``width`` x ``height`` window."""
    inner_w = width - 2 * MARGIN

    menu = [
        Button(
            key="nav_control",
            label="Control Remoto",
            kind="nav",
            view=View.CONTROL,
            rect=pygame.Rect(MARGIN, MARGIN, inner_w, MENU_ITEM_HEIGHT),
        ),
        Button(
            key="nav_system_info",
            label="Información del Sistema",
            kind="nav",
            view=View.SYSTEM_INFO,
            rect=pygame.Rect(MARGIN, MARGIN + MENU_ITEM_HEIGHT + GAP, inner_w, MENU_ITEM_HEIGHT),
        ),
    ]

    content_top = MARGIN + 2 * (MENU_ITEM_HEIGHT + GAP) + GAP
    actions_top = height - MARGIN - ACTION_BUTTON_HEIGHT
    content = pygame.Rect(MARGIN, content_top, inner_w, max(0, actions_top - GAP - content_top))

    columns = max(1, (inner_w + GAP) // (CONTROL_BUTTON_SIZE + GAP))
    grid_w = columns * CONTROL_BUTTON_SIZE + (columns - 1) * GAP
    grid_left = MARGIN + (inner_w - grid_w) // 2
    controls = []
    for i, (key, label, kind, direction) in enumerate(CONTROL_BUTTONS):
        row, col = divmod(i, columns)
        controls.append(
            Button(
                key=key,
                label=label,
                kind=kind,
                direction=direction,
                rect=pygame.Rect(
                    grid_left + col * (CONTROL_BUTTON_SIZE + GAP),
                    content_top + row * (CONTROL_BUTTON_SIZE + GAP),
                    CONTROL_BUTTON_SIZE,
                    CONTROL_BUTTON_SIZE,
                ),
            )
        )

    action_w = (inner_w - (len(ACTION_BUTTONS) - 1) * GAP) // len(ACTION_BUTTONS)
    actions = [
        Button(
            key=key,
            label=label,
            kind="press",
            rect=pygame.Rect(MARGIN + i * (action_w + GAP), actions_top, action_w, ACTION_BUTTON_HEIGHT),
        )
        for i, (key, label) in enumerate(ACTION_BUTTONS)
    ]

    return Layout(menu=menu, controls=controls, actions=actions, content=content)


def hit_test(buttons: list[Button], pos: tuple[int, int]) -> Button | None:
    """The button under ``pos``, if any."""
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button
    return None
