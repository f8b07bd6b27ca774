"""pygame window for the remote control.

The window is driven from the asyncio event loop: each frame drains the
pygame event queue, redraws, then sleeps until the next frame, so HTTP
requests and the repeat timer progress between frames on the same thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Coroutine

import pygame

from pcremote.config.settings import DisplayConfig
from pcremote.control.repeat import Direction
from pcremote.domain.models import Command, CommandResult, View
from pcremote.ui.layout import Button, Layout, build_layout, hit_test
from pcremote.ui.state import AppState, row_window, system_info_lines

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}

# Events after which a held control can no longer receive its release.
CANCEL_EVENTS = {pygame.WINDOWLEAVE, pygame.WINDOWFOCUSLOST}

# Source of a hold started with the pointer; keyboard holds use the key code.
POINTER = "pointer"


class RemoteApp:
    """The remote-control window.

    Pointer presses on the directional buttons (or the arrow keys) start
    the repeat controller; releasing stops it. Every other button fires a
    single request in the background.
    """

    def __init__(self, state: AppState, display: DisplayConfig | None = None) -> None:
        self._state = state
        self._display = display or DisplayConfig()
        self._layout: Layout = build_layout(self._display.width, self._display.height)
        self._tasks: set[asyncio.Task] = set()
        self._held: str | None = None
        self._held_by: int | str | None = None
        self._scroll = 0
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def held(self) -> str | None:
        """Key of the button (or arrow) currently held down."""
        return self._held

    @property
    def scroll(self) -> int:
        """Rows the system info view is scrolled down by."""
        return self._scroll

    async def run(self) -> None:
        """Open the window and process frames until it is closed."""
        pygame.init()
        screen = pygame.display.set_mode((self._display.width, self._display.height))
        pygame.display.set_caption(self._display.window_title)
        font = pygame.font.SysFont("dejavusans,liberationsans,arial", self._display.font_size)
        frame_delay = 1.0 / self._display.fps

        self._running = True
        self._spawn(self._state.mount())
        logger.info("Remote control window opened (%dx%d)", self._display.width, self._display.height)

        try:
            while self._running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self._draw(screen, font)
                pygame.display.flip()
                await asyncio.sleep(frame_delay)
        finally:
            await self.aclose()
            pygame.quit()
            logger.info("Remote control window closed")

    def stop(self) -> None:
        self._running = False

    async def aclose(self) -> None:
        """Release any held control and wait for background requests."""
        self._held = None
        self._held_by = None
        await self._state.controller.aclose()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event to the view state and controllers."""
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.stop()
            elif event.key in ARROW_KEYS and self._state.view == View.CONTROL:
                self._hold(ARROW_KEYS[event.key], ARROW_KEYS[event.key].value, event.key)
        elif event.type == pygame.KEYUP:
            if event.key == self._held_by:
                self._release()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            button = hit_test(self._layout.visible_buttons(self._state.view), event.pos)
            if button is not None:
                self._activate(button)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self._held_by == POINTER:
                self._release()
        elif event.type == pygame.MOUSEWHEEL:
            if self._state.view == View.SYSTEM_INFO:
                self._scroll = max(0, self._scroll - event.y)
        elif event.type in CANCEL_EVENTS:
            self._release()

    def _activate(self, button: Button) -> None:
        if button.kind == "hold" and button.direction is not None:
            self._hold(button.direction, button.key, POINTER)
        elif button.kind == "nav":
            if button.view == View.SYSTEM_INFO:
                self._scroll = 0
                self._spawn(self._state.show_system_info())
            else:
                self._state.show_control()
        else:
            action = self._press_actions().get(button.key)
            if action is None:
                logger.warning("No action bound to button %s", button.key)
                return
            self._spawn(self._fire(button.key, action))

    def _hold(self, direction: Direction, key: str, source: int | str) -> None:
        if self._state.controller.press(direction):
            self._held = key
            self._held_by = source

    def _release(self) -> None:
        self._state.controller.release()
        self._held = None
        self._held_by = None

    def _press_actions(self) -> dict[str, Callable[[], Awaitable[CommandResult]]]:
        dispatcher = self._state.dispatcher
        return {
            "volume_up": lambda: dispatcher.send_volume_command(Command.VOLUME_UP),
            "volume_down": lambda: dispatcher.send_volume_command(Command.VOLUME_DOWN),
            "click": dispatcher.click,
            "turn_off": dispatcher.turn_off,
            # "Reiniciar" is wired to the turn-on handler, which posts /restart.
            "restart": dispatcher.turn_on,
            "suspend": dispatcher.suspend,
        }

    async def _fire(self, key: str, action: Callable[[], Awaitable[CommandResult]]) -> None:
        result = await action()
        if not result.ok:
            # Already logged by the dispatcher; the UI shows no feedback.
            logger.debug("Ignoring failed %s: %s", key, result.error)

    def _spawn(self, coro: Coroutine) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        screen.fill(self._display.bg_color)
        view = self._state.view

        for button in self._layout.menu:
            self._draw_button(screen, font, button, active=button.view == view)

        if view == View.CONTROL:
            for button in self._layout.controls:
                self._draw_button(screen, font, button, active=button.key == self._held)
        else:
            info = self._state.system_info
            if info is not None:
                self._draw_system_info(screen, font, info)

        for button in self._layout.actions:
            self._draw_button(screen, font, button)

    def _draw_button(
        self, screen: pygame.Surface, font: pygame.font.Font, button: Button, active: bool = False
    ) -> None:
        color = self._display.accent_color if active else self._display.button_color
        pygame.draw.rect(screen, color, button.rect, border_radius=10)
        lines = _wrap(font, button.label, button.rect.width - 2 * 8)
        line_h = font.get_linesize()
        top = button.rect.centery - len(lines) * line_h // 2
        for i, line in enumerate(lines):
            surface = font.render(line, True, self._display.fg_color)
            screen.blit(surface, surface.get_rect(centerx=button.rect.centerx, top=top + i * line_h))

    def _draw_system_info(self, screen: pygame.Surface, font: pygame.font.Font, info) -> None:
        area = self._layout.content
        line_h = font.get_linesize() + 6
        lines = system_info_lines(info)
        start, stop = row_window(len(lines), self._scroll, area.height // line_h)
        self._scroll = start

        screen.set_clip(area)
        y = area.top
        for label, value in lines[start:stop]:
            font.set_bold(value is None)
            screen.blit(font.render(label, True, self._display.fg_color), (area.left, y))
            font.set_bold(False)
            if value is not None:
                value_surface = font.render(value, True, self._display.fg_color)
                screen.blit(value_surface, value_surface.get_rect(right=area.right, top=y))
            y += line_h
        screen.set_clip(None)


def _wrap(font: pygame.font.Font, text: str, width: int) -> list[str]:
    """Greedy word wrap of ``text`` to ``width`` pixels."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and font.size(candidate)[0] > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
