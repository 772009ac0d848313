from __future__ import annotations
import logging
import pygame
from typing import Optional

from .camera import Camera
from .config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, STRIP_COUNT, FOV_SAMPLING
from .frame import render_frame
from .input_handler import InputHandler
from .level import load_level
from .minimap import minimap_contains, minimap_to_grid
from .surface import PygameSurface

logger = logging.getLogger(__name__)


class App:
    """Application shell: window, event loop and redraw-on-change coordination."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        level_path: Optional[str] = None,
    ) -> None:
        pygame.init()
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("Grid Raycaster")
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        level = load_level(level_path)
        self.grid = level.grid
        self.camera = Camera(position=level.position, heading=level.heading)
        self.surface = PygameSurface(self.screen)
        self.input = InputHandler()
        self.strip_count = STRIP_COUNT
        self.sampling = FOV_SAMPLING
        self.show_trace = False
        # Set whenever camera state or overlays change; cleared after a render
        self.dirty = True
        self.running = True

    def handle_events(self) -> None:
        """Process one batch of input and apply it to the camera."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
            return
        if self.input.toggle_trace_pressed():
            self.show_trace = not self.show_trace
            self.dirty = True
        before = (self.camera.position, self.camera.heading)
        rotate = self.input.rotate_direction()
        if rotate:
            self.camera.rotate(rotate)
        move = self.input.move_direction()
        if move:
            self.camera.move(move, self.grid)
        strafe = self.input.strafe_direction()
        if strafe:
            self.camera.strafe(strafe, self.grid)
        pointer = self.input.pointer()
        if pointer is not None and minimap_contains(pointer, self.grid):
            self.camera.place(minimap_to_grid(pointer))
        if (self.camera.position, self.camera.heading) != before:
            self.dirty = True

    def render(self) -> None:
        """Render one frame and present it."""
        render_frame(
            self.surface,
            self.grid,
            self.camera,
            strip_count=self.strip_count,
            sampling=self.sampling,
            show_trace=self.show_trace,
        )
        pygame.display.flip()
        self.dirty = False

    def run(self) -> None:
        """Main loop: handle events and redraw only when something changed."""
        logger.info("Starting at %r", self.camera)
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            if self.running and self.dirty:
                self.render()
        logger.info("Stopping at %r", self.camera)
        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    App().run()
