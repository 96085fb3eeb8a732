"""FarmGrid — the fixed-size grid of cells that makes up a farm.

The grid owns a 2D list of cells addressed as ``cells[row][column]`` and
orchestrates placement, harvesting, interaction commands, and end-of-day
advancement.  Per-cell work is delegated to the cell, and domain logic to
the farm item it holds.

Every entry point validates ``(row, column)`` through ``in_bounds``
before touching a cell, so a rejected request never mutates state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from furrow.errors import (
    EmptyCellError,
    OccupiedCellError,
    OutOfBoundsError,
    UnknownCommandError,
    WrongFarmTypeError,
)
from furrow.items.animals import Animal
from furrow.items.item import FarmItem, ItemFamily
from furrow.items.registry import item_from_symbol
from furrow.produce.product import Product, ProductFactory
from furrow.produce.quality import QualityGenerator
from furrow.world.cell import Cell

logger = logging.getLogger(__name__)


class FarmType(Enum):
    """Which item family a farm grid accepts."""

    PLANT = "plant"
    ANIMAL = "animal"

    @property
    def family(self) -> ItemFamily:
        return ItemFamily(self.value)


@dataclass
class FarmGrid:
    """A rows x columns farm of plants or animals.

    Attributes:
        rows: Number of grid rows (> 0).
        columns: Number of grid columns (> 0).
        farm_type: Item family this farm accepts; fixed for its lifetime.
        qualities: Service drawing the quality of harvested products.
        make_product: Callback that builds harvested products.
        cells: 2D list of cells indexed as ``cells[row][column]``.
    """

    rows: int
    columns: int
    farm_type: FarmType = FarmType.PLANT
    qualities: QualityGenerator = field(default_factory=QualityGenerator)
    make_product: ProductFactory = Product
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the dimensions and fill the grid with empty cells."""
        if self.rows <= 0 or self.columns <= 0:
            msg = f"grid must be at least 1x1, got {self.rows}x{self.columns}"
            raise ValueError(msg)
        self.farm_type = FarmType(self.farm_type)
        self.cells = [[Cell() for _ in range(self.columns)] for _ in range(self.rows)]

    # -- Addressing ----------------------------------------------------------

    def in_bounds(self, row: int, column: int) -> bool:
        """Return True if ``(row, column)`` lies inside the grid."""
        return 0 <= row < self.rows and 0 <= column < self.columns

    def index(self, row: int, column: int) -> int:
        """Return the row-major position of a cell in ``get_stats()``."""
        return row * self.columns + column

    def cell_at(self, row: int, column: int) -> Cell:
        """Return the cell at ``(row, column)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(row, column):
            msg = f"({row}, {column}) out of bounds for {self.rows}x{self.columns}"
            raise IndexError(msg)
        return self.cells[row][column]

    def occupied(self) -> Iterator[tuple[int, int, FarmItem]]:
        """Yield ``(row, column, item)`` for every occupied cell, row-major."""
        for row, cells in enumerate(self.cells):
            for column, cell in enumerate(cells):
                if cell.item is not None:
                    yield row, column, cell.item

    def _item_for(self, row: int, column: int, action: str) -> FarmItem:
        """Return the item an ``action`` targets, or raise why it can't."""
        if not self.in_bounds(row, column):
            raise OutOfBoundsError(f"You can't {action} this location")
        item = self.cells[row][column].item
        if item is None:
            raise EmptyCellError(f"You can't {action} an empty spot!")
        return item

    # -- Mutations -----------------------------------------------------------

    def place(self, row: int, column: int, symbol: str) -> bool:
        """Place a fresh item identified by its placement glyph.

        Args:
            row: Row index.
            column: Column index.
            symbol: Placement glyph (``.``, ``:``, wheat, chicken, cow, sheep).

        Returns:
            True if the item was placed; False if the coordinate is out of
            bounds or the symbol is not recognised.

        Raises:
            OccupiedCellError: If the cell already holds an item.
            WrongFarmTypeError: If the item does not belong on this farm.
        """
        if not self.in_bounds(row, column):
            return False
        cell = self.cells[row][column]
        if not cell.is_empty:
            raise OccupiedCellError("Something is already there!")
        item = item_from_symbol(symbol)
        if item is None:
            return False
        self._check_family(item)
        cell.place(item)
        logger.debug("placed %s at (%d, %d)", item.name, row, column)
        return True

    def restore_item(self, row: int, column: int, item: FarmItem) -> None:
        """Put an already-configured item into a cell, replacing its content.

        Used when rehydrating a saved farm, where the item's state is set
        before it is stored.

        Raises:
            IndexError: If coordinates are out of bounds.
            WrongFarmTypeError: If the item does not belong on this farm.
        """
        cell = self.cell_at(row, column)
        self._check_family(item)
        cell.place(item)

    def _check_family(self, item: FarmItem) -> None:
        if item.family is not self.farm_type.family:
            msg = f"You can't place a {item.name} on a {self.farm_type.value} farm!"
            raise WrongFarmTypeError(msg)

    def remove(self, row: int, column: int) -> None:
        """Clear a cell; out-of-bounds coordinates are ignored."""
        if not self.in_bounds(row, column):
            return
        self.cells[row][column].remove_item()
        logger.debug("cleared (%d, %d)", row, column)

    def harvest(self, row: int, column: int) -> Product:
        """Harvest the item at ``(row, column)``.

        Plants restart their growth cycle and animals are marked as having
        produced today; the item stays in its cell either way.

        Returns:
            The harvested product, for the caller to stock.

        Raises:
            OutOfBoundsError: If coordinates are out of bounds.
            EmptyCellError: If the cell is empty.
            NotReadyError: If a plant is not fully grown.
            NotFedError: If an animal has not been fed today.
            AlreadyProducedError: If an animal already produced today.
        """
        item = self._item_for(row, column, "harvest")
        product = item.harvest(self.qualities, self.make_product)
        logger.debug(
            "harvested %s from %s at (%d, %d)",
            product,
            item.name,
            row,
            column,
        )
        return product

    def interact(self, command: str, row: int, column: int) -> bool:
        """Run an interaction command against the grid.

        Supported commands (case-insensitive):

        - ``feed``: feed the animal at ``(row, column)``.
        - ``end-day``: advance every occupied cell by one day.
        - ``remove``: clear the cell at ``(row, column)``.

        Returns:
            True once the command has been applied.

        Raises:
            WrongFarmTypeError: If ``feed`` is used on a plant farm.
            OutOfBoundsError: If ``feed`` targets a cell outside the grid.
            EmptyCellError: If ``feed`` targets an empty cell.
            UnknownCommandError: For any other command.
        """
        action = command.lower()
        if action == "feed":
            if self.farm_type is not FarmType.ANIMAL:
                raise WrongFarmTypeError("You can only feed animals!")
            item = self._item_for(row, column, "feed")
            if not isinstance(item, Animal):
                raise WrongFarmTypeError("You can only feed animals!")
            item.feed()
            logger.debug("fed %s at (%d, %d)", item.name, row, column)
        elif action == "end-day":
            self.end_day()
        elif action == "remove":
            self.remove(row, column)
        else:
            raise UnknownCommandError(f"Unknown command: {command}")
        return True

    def end_day(self) -> None:
        """Advance every plant and animal on the farm by one day."""
        count = 0
        for _, _, item in self.occupied():
            item.end_day()
            count += 1
        logger.debug("day ended for %d items", count)

    # -- Views ---------------------------------------------------------------

    def get_stats(self) -> list[list[str]]:
        """Return one fresh stats record per cell in row-major order.

        Records are ``["ground", " "]`` for empty cells,
        ``[name, symbol, "Stage: N"]`` for plants, and
        ``[name, symbol, "Fed: bool", "Collected: bool"]`` for animals.
        The returned lists are new objects owned by the caller.
        """
        return [cell.stats() for cells in self.cells for cell in cells]

    def stats_at(self, row: int, column: int) -> list[str]:
        """Return the stats record for a single cell.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        return self.cell_at(row, column).stats()

    def farm_display(self) -> str:
        """Render the grid as text surrounded by a fence."""
        fence = "-" * (self.columns * 2 + 3)
        lines = [fence]
        for cells in self.cells:
            lines.append("| " + "".join(f"{cell.symbol} " for cell in cells) + "|")
        lines.append(fence)
        return "\n".join(lines) + "\n"
