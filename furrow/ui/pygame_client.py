"""Pygame 2D view of a farming session.

Draws each farm cell as a coloured tile with the item's glyph and an
info panel on the right.  Mouse and keyboard actions are turned into
session commands, so the window behaves exactly like the text loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from furrow.items.animals import Animal
from furrow.items.plants import Plant

if TYPE_CHECKING:
    from furrow.items.item import FarmItem
    from furrow.simulation.session import FarmingSession

# Colour palette
_BG = (30, 20, 10)
_GROUND = (96, 72, 48)
_GRID_LINE = (40, 30, 20)
_TEXT = (220, 220, 220)

# Plant colour range (seedling -> ripe)
_PLANT_LO = np.array([60, 110, 40], dtype=np.float64)
_PLANT_HI = np.array([230, 200, 60], dtype=np.float64)

# Animal colours by (fed, collected)
_ANIMAL_COLOURS: dict[tuple[bool, bool], tuple[int, int, int]] = {
    (False, False): (150, 80, 80),
    (True, False): (90, 150, 220),
    (True, True): (150, 150, 150),
    (False, True): (150, 150, 150),
}

# Number keys that place an item on the hovered cell
PLACE_KEYS: dict[int, str] = {
    pygame.K_1: "berry",
    pygame.K_2: "coffee",
    pygame.K_3: "wheat",
    pygame.K_4: "chicken",
    pygame.K_5: "cow",
    pygame.K_6: "sheep",
}


def tile_colour(item: FarmItem | None) -> tuple[int, int, int]:
    """Return the fill colour for a cell holding ``item``."""
    if isinstance(item, Plant):
        span = item.kind.max_stage - 1
        t = 1.0 if span == 0 else (item.stage - 1) / span
        colour = _PLANT_LO + t * (_PLANT_HI - _PLANT_LO)
        return tuple(colour.astype(int).tolist())
    if isinstance(item, Animal):
        return _ANIMAL_COLOURS[(item.fed, item.produced)]
    return _GROUND


class PygameRenderer:
    """Renders a FarmingSession into a Pygame window.

    Attributes:
        session: The farming session to display and drive.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    def __init__(self, session: FarmingSession, cell_size: int = 48) -> None:
        """Initialise the renderer.

        Args:
            session: The farming session to render.
            cell_size: Pixel width/height per grid cell.
        """
        self.session = session
        self.cell_size = cell_size

        grid = session.grid
        self._panel_width = 260
        self._win_w = grid.columns * cell_size + self._panel_width
        self._win_h = max(grid.rows * cell_size, 380)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Furrow")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.glyph_font = pygame.font.SysFont(None, int(cell_size * 0.8))
        self.running = True

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, render.

        Args:
            fps: Target frames per second.
        """
        while self.running and self.session.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def cell_under(self, px: int, py: int) -> tuple[int, int] | None:
        """Return the ``(row, column)`` under a pixel, or None off-grid."""
        row, column = py // self.cell_size, px // self.cell_size
        if self.session.grid.in_bounds(row, column):
            return row, column
        return None

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.session.handle("end-day")
                elif event.key == pygame.K_d:
                    target = self.cell_under(*pygame.mouse.get_pos())
                    if target is not None:
                        self.session.handle("remove {} {}".format(*target))
                elif event.key in PLACE_KEYS:
                    target = self.cell_under(*pygame.mouse.get_pos())
                    if target is not None:
                        name = PLACE_KEYS[event.key]
                        self.session.handle("place {} {} {}".format(name, *target))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                target = self.cell_under(*event.pos)
                if target is None:
                    continue
                if event.button == 1:
                    self.session.handle("harvest {} {}".format(*target))
                elif event.button == 3:
                    self.session.handle("feed {} {}".format(*target))

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_cells(self) -> None:
        """Draw every cell as a tile with its glyph centred on it."""
        cs = self.cell_size
        for row, cells in enumerate(self.session.grid.cells):
            for column, cell in enumerate(cells):
                rect = pygame.Rect(column * cs, row * cs, cs, cs)
                pygame.draw.rect(self.screen, tile_colour(cell.item), rect)
                pygame.draw.rect(self.screen, _GRID_LINE, rect, 1)
                if not cell.is_empty:
                    glyph = self.glyph_font.render(cell.symbol, True, _TEXT)
                    self.screen.blit(glyph, glyph.get_rect(center=rect.center))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        session = self.session
        panel_x = session.grid.columns * self.cell_size + 10
        y = 10

        lines = [
            f"Day: {session.day}",
            f"Farm: {session.grid.farm_type.value}",
            f"Harvested: {len(session.harvested)}",
            "",
            "--- Last ---",
            *(session.last_message.splitlines() or [""]),
            "",
            "--- Controls ---",
            "LMB: harvest",
            "RMB: feed",
            "D: remove (hover)",
            "1-6: place (hover)",
            "  berry coffee wheat",
            "  chicken cow sheep",
            "SPACE: end day",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
