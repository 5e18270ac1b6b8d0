"""Simple ``pygame`` window for showing a grid and its paths."""

from __future__ import annotations

import pygame

from ..config import CONFIG


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int] | None = None, *, resizable: bool = False) -> None:
        if size is None:
            size = CONFIG.gui.window_size
        self.size = size
        flags = pygame.RESIZABLE if resizable else 0

        if not pygame.get_init(): pygame.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size, flags)
        pygame.display.set_caption("A* Grid Search")

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def refresh(self) -> None:
        pygame.display.flip()

    def wait(self, delay_ms: int) -> None:
        """Pump events and pause for ``delay_ms`` milliseconds."""

        pygame.event.pump()
        pygame.time.wait(max(0, int(delay_ms)))

    def wait_for_close(self) -> None:
        """Block until the window is closed or Escape is pressed."""

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            pygame.time.wait(20)

    def close(self) -> None:
        pygame.display.quit()


__all__ = ["Window"]
