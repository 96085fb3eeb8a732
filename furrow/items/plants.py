"""Plants — crops that advance one growth stage per day.

A plant is ripe once it reaches its kind's final stage.  It stays ripe
until harvested; harvesting starts the next growth cycle at stage 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from furrow.errors import NotReadyError, UnknownCommandError
from furrow.items.item import FarmItem, ItemFamily
from furrow.produce.product import Barcode, Product

if TYPE_CHECKING:
    from furrow.produce.product import ProductFactory
    from furrow.produce.quality import QualityGenerator


@dataclass(frozen=True)
class PlantKind:
    """Immutable description of a plant variant.

    Attributes:
        name: Variant name (``berry``, ``coffee``, ``wheat``).
        symbols: Display glyph per growth stage; index 0 is stage 1.
        product: What a ripe harvest yields.
    """

    name: str
    symbols: tuple[str, ...]
    product: Barcode

    @property
    def max_stage(self) -> int:
        return len(self.symbols)


BERRY = PlantKind(name="berry", symbols=(".", "o", "@"), product=Barcode.JAM)
COFFEE = PlantKind(
    name="coffee",
    symbols=(":", ";", "*", "%"),
    product=Barcode.COFFEE,
)
# Stage 1 wheat is U+1F34, GREEK SMALL LETTER IOTA WITH PSILI AND OXIA.
WHEAT = PlantKind(name="wheat", symbols=("\u1f34", "#"), product=Barcode.BREAD)

PLANT_KINDS: tuple[PlantKind, ...] = (BERRY, COFFEE, WHEAT)


@dataclass
class Growth:
    """Mutable growth state owned by a plant.

    Attributes:
        stage: Current growth stage, starting at 1.
    """

    stage: int = 1


@dataclass
class Plant(FarmItem):
    """A crop occupying one cell.

    Attributes:
        kind: Variant table entry.
        growth: Current growth state.
    """

    family: ClassVar[ItemFamily] = ItemFamily.PLANT

    kind: PlantKind
    growth: Growth = field(default_factory=Growth)

    @classmethod
    def at_stage(cls, kind: PlantKind, stage: int) -> Plant:
        """Create a plant already grown to ``stage``.

        Raises:
            ValueError: If ``stage`` is outside ``1..kind.max_stage``.
        """
        if not 1 <= stage <= kind.max_stage:
            msg = f"{kind.name} stage must be 1-{kind.max_stage}, got {stage}"
            raise ValueError(msg)
        return cls(kind=kind, growth=Growth(stage=stage))

    @property
    def name(self) -> str:
        return self.kind.name

    @property
    def stage(self) -> int:
        return self.growth.stage

    @property
    def is_ripe(self) -> bool:
        """Return True once the plant has reached its final stage."""
        return self.growth.stage >= self.kind.max_stage

    @property
    def symbol(self) -> str:
        return self.kind.symbols[self.growth.stage - 1]

    def grow(self) -> None:
        """Advance one stage; ripe plants do not grow further."""
        if self.growth.stage < self.kind.max_stage:
            self.growth.stage += 1

    def end_day(self) -> None:
        self.grow()

    def harvest(
        self,
        qualities: QualityGenerator,
        make_product: ProductFactory = Product,
    ) -> Product:
        """Harvest a ripe crop and restart its growth cycle.

        Raises:
            NotReadyError: If the plant has not reached its final stage.
        """
        if not self.is_ripe:
            raise NotReadyError("The crop is not fully grown!")
        quality = qualities.draw()
        self.growth.stage = 1
        return make_product(self.kind.product, quality)

    def interact(self, command: str) -> None:
        raise UnknownCommandError(f"Unknown command: {command}")

    def stats(self) -> list[str]:
        return [self.name, self.symbol, f"Stage: {self.growth.stage}"]
