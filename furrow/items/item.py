"""FarmItem — the common contract for anything that occupies a grid cell.

Two capability families implement it: plants (growth stages) and
animals (daily fed/produced flags).  Variant data lives in immutable
kind tables; the mutable per-item state is an owned value object.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from furrow.produce.product import Product

if TYPE_CHECKING:
    from furrow.produce.product import ProductFactory
    from furrow.produce.quality import QualityGenerator


class ItemFamily(Enum):
    """Capability family of a farm item."""

    PLANT = "plant"
    ANIMAL = "animal"


class FarmItem(ABC):
    """A plant or animal owned by exactly one cell."""

    family: ClassVar[ItemFamily]

    @property
    @abstractmethod
    def name(self) -> str:
        """Lower-case variant name used in stats records and save files."""

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Single-character glyph for the farm display."""

    @abstractmethod
    def harvest(
        self,
        qualities: QualityGenerator,
        make_product: ProductFactory = Product,
    ) -> Product:
        """Collect this item's product, mutating its state.

        Args:
            qualities: Service that draws the product's quality.
            make_product: Callback that builds the product value.

        Raises:
            UnableToInteractError: If the item cannot be harvested now.
        """

    @abstractmethod
    def interact(self, command: str) -> None:
        """Apply a variant-specific command such as ``feed``.

        Raises:
            UnknownCommandError: If the item does not support ``command``.
        """

    @abstractmethod
    def end_day(self) -> None:
        """Advance this item's state by one day."""

    @abstractmethod
    def stats(self) -> list[str]:
        """Return a fresh stats record ``[name, symbol, extra...]``."""


def format_flag(value: bool) -> str:
    """Render a boolean the way stats records and save files spell it."""
    return "true" if value else "false"
