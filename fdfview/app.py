"""Command-line entry point and interactive window for viewing FdF maps."""

from __future__ import annotations

import sys
from typing import Sequence

from .check import GridError, describe_errors, load_checked_grid
from .raster import TEXT_COLOR, Image, overlay_lines, render
from .scene import Key, Scene

__all__ = ["USAGE", "WINDOW_WIDTH", "WINDOW_HEIGHT", "run_window", "main"]

WINDOW_WIDTH = 2300
WINDOW_HEIGHT = 1300
TITLE = "FdF"
USAGE = "Usage : fdfview file.fdf"
_FONT_SIZE = 24


def _key_table() -> dict[int, Key]:
    import pygame

    return {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_KP1: Key.NUMPAD_1,
        pygame.K_KP2: Key.NUMPAD_2,
        pygame.K_KP3: Key.NUMPAD_3,
        pygame.K_KP4: Key.NUMPAD_4,
        pygame.K_KP6: Key.NUMPAD_6,
        pygame.K_KP7: Key.NUMPAD_7,
        pygame.K_KP8: Key.NUMPAD_8,
        pygame.K_KP9: Key.NUMPAD_9,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_UP: Key.UP,
    }


def _translate_key(pygame_key: int) -> Key | None:
    """Map a pygame key code to a scene key, or ``None`` if it has no role."""
    return _key_table().get(pygame_key)


def _rgba_bytes(image: Image) -> bytes:
    """Convert the image's BGRA buffer, whose alpha means transparency, to RGBA."""
    data = image.data
    out = bytearray(data)
    out[0::4] = data[2::4]
    out[2::4] = data[0::4]
    out[3::4] = bytes(255 - alpha for alpha in data[3::4])
    return bytes(out)


def _draw(screen, font, scene: Scene) -> None:
    import pygame

    image = render(scene)
    surface = pygame.image.frombuffer(
        _rgba_bytes(image), (image.width, image.height), "RGBA"
    )
    text_rgb = ((TEXT_COLOR >> 16) & 0xFF, (TEXT_COLOR >> 8) & 0xFF, TEXT_COLOR & 0xFF)
    screen.fill((0, 0, 0))
    screen.blit(surface, (0, 0))
    for x, y, text in overlay_lines(scene):
        screen.blit(font.render(text, True, text_rgb), (x, y))
    pygame.display.flip()


def run_window(scene: Scene) -> None:
    """Show ``scene`` in a window and react to keys and the mouse wheel.

    Returns when the window is closed; Escape raises :class:`SystemExit`.
    """
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((scene.width, scene.height))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, _FONT_SIZE)
        _draw(screen, font, scene)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            changed = False
            if event.type == pygame.KEYDOWN:
                key = _translate_key(event.key)
                if key is not None:
                    changed = scene.handle_key(key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                changed = scene.handle_mouse(event.button, x, y)
            if changed:
                _draw(screen, font, scene)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and display it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        grid = load_checked_grid(args[0])
    except GridError as error:
        print(describe_errors(error.flags), end="")
        return 0
    scene = Scene(grid, WINDOW_WIDTH, WINDOW_HEIGHT)
    scene.center()
    scene.project(0)
    run_window(scene)
    return 0