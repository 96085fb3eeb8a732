"""Products — the goods a farm grid yields on harvest.

A product is an immutable pairing of a ``Barcode`` (what it is, what it
sells for) and the ``Quality`` drawn when it was harvested.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from furrow.produce.quality import Quality


class Barcode(Enum):
    """Product types, each with a display name and base price in cents."""

    EGG = ("egg", 50)
    MILK = ("milk", 440)
    JAM = ("jam", 670)
    WOOL = ("wool", 2000)
    BREAD = ("bread", 240)
    COFFEE = ("coffee", 330)

    def __init__(self, display_name: str, base_price: int) -> None:
        self.display_name = display_name
        self.base_price = base_price


@dataclass(frozen=True)
class Product:
    """A single harvested item.

    Attributes:
        barcode: Product type.
        quality: Grade assigned at harvest time.
    """

    barcode: Barcode
    quality: Quality = Quality.REGULAR

    @property
    def display_name(self) -> str:
        return self.barcode.display_name

    @property
    def base_price(self) -> int:
        """Sale price in cents."""
        return self.barcode.base_price

    def __str__(self) -> str:
        return f"{self.display_name}: {self.base_price}c *{self.quality.name}*"


ProductFactory = Callable[[Barcode, Quality], Product]
