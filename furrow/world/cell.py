"""Cell — a single position in the farm grid.

A cell owns at most one farm item.  It does no validation of its own:
the farm grid decides whether a placement is allowed before calling
``place``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from furrow.items.item import FarmItem

EMPTY_SYMBOL = " "


@dataclass
class Cell:
    """A single grid position.

    Attributes:
        item: The plant or animal occupying this cell, if any.
    """

    item: FarmItem | None = None

    @property
    def is_empty(self) -> bool:
        return self.item is None

    @property
    def symbol(self) -> str:
        """Return the item's glyph, or a space when the cell is empty."""
        return EMPTY_SYMBOL if self.item is None else self.item.symbol

    def place(self, item: FarmItem) -> None:
        """Store ``item``, replacing whatever was here."""
        self.item = item

    def remove_item(self) -> None:
        self.item = None

    def stats(self) -> list[str]:
        """Return a fresh stats record for this cell."""
        if self.item is None:
            return ["ground", EMPTY_SYMBOL]
        return self.item.stats()
