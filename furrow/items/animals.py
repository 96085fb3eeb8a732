"""Animals — livestock that produce once per day after being fed.

Both daily flags reset at end of day.  ``produced`` only becomes true
through a successful harvest, and ``fed`` stays set until the day ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from furrow.errors import AlreadyProducedError, NotFedError, UnknownCommandError
from furrow.items.item import FarmItem, ItemFamily, format_flag
from furrow.produce.product import Barcode, Product

if TYPE_CHECKING:
    from furrow.produce.product import ProductFactory
    from furrow.produce.quality import QualityGenerator


@dataclass(frozen=True)
class AnimalKind:
    """Immutable description of an animal variant.

    Attributes:
        name: Variant name (``chicken``, ``cow``, ``sheep``).
        symbol: Fixed display glyph.
        product: What a successful harvest yields.
    """

    name: str
    symbol: str
    product: Barcode


CHICKEN = AnimalKind(name="chicken", symbol="৬", product=Barcode.EGG)
COW = AnimalKind(name="cow", symbol="४", product=Barcode.MILK)
SHEEP = AnimalKind(name="sheep", symbol="ඔ", product=Barcode.WOOL)

ANIMAL_KINDS: tuple[AnimalKind, ...] = (CHICKEN, COW, SHEEP)


@dataclass
class Husbandry:
    """Per-day care state owned by an animal.

    Attributes:
        fed: Whether the animal has been fed today.
        produced: Whether today's product has been collected.
    """

    fed: bool = False
    produced: bool = False

    def reset(self) -> None:
        self.fed = False
        self.produced = False


@dataclass
class Animal(FarmItem):
    """An animal occupying one cell.

    Attributes:
        kind: Variant table entry.
        husbandry: Today's fed/produced flags.
    """

    family: ClassVar[ItemFamily] = ItemFamily.ANIMAL

    kind: AnimalKind
    husbandry: Husbandry = field(default_factory=Husbandry)

    @property
    def name(self) -> str:
        return self.kind.name

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    @property
    def fed(self) -> bool:
        return self.husbandry.fed

    @property
    def produced(self) -> bool:
        return self.husbandry.produced

    def feed(self) -> None:
        self.husbandry.fed = True

    def end_day(self) -> None:
        self.husbandry.reset()

    def harvest(
        self,
        qualities: QualityGenerator,
        make_product: ProductFactory = Product,
    ) -> Product:
        """Collect today's product from a fed animal.

        Raises:
            NotFedError: If the animal has not been fed today.
            AlreadyProducedError: If today's product was already collected.
        """
        if not self.husbandry.fed:
            raise NotFedError("You have not fed this animal today!")
        if self.husbandry.produced:
            raise AlreadyProducedError(
                "This animal has produced an item already today!",
            )
        quality = qualities.draw()
        self.husbandry.produced = True
        return make_product(self.kind.product, quality)

    def interact(self, command: str) -> None:
        if command.lower() == "feed":
            self.feed()
            return
        raise UnknownCommandError(f"Unknown command: {command}")

    def stats(self) -> list[str]:
        return [
            self.name,
            self.symbol,
            f"Fed: {format_flag(self.husbandry.fed)}",
            f"Collected: {format_flag(self.husbandry.produced)}",
        ]
