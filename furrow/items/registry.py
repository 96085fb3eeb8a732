"""Registry — lookup tables from placement glyphs and names to items.

Every lookup builds a fresh item in its initial state, or returns None
for an unrecognised key so callers can decide how to report it.
"""

from __future__ import annotations

from furrow.items.animals import ANIMAL_KINDS, Animal, AnimalKind
from furrow.items.item import FarmItem
from furrow.items.plants import PLANT_KINDS, Plant, PlantKind

Kind = PlantKind | AnimalKind

KINDS_BY_NAME: dict[str, Kind] = {
    kind.name: kind for kind in (*PLANT_KINDS, *ANIMAL_KINDS)
}


def placement_symbol(kind: Kind) -> str:
    """Return the glyph used to place ``kind`` (a plant's stage-1 glyph)."""
    if isinstance(kind, PlantKind):
        return kind.symbols[0]
    return kind.symbol


SYMBOLS_BY_NAME: dict[str, str] = {
    name: placement_symbol(kind) for name, kind in KINDS_BY_NAME.items()
}

KINDS_BY_SYMBOL: dict[str, Kind] = {
    placement_symbol(kind): kind for kind in KINDS_BY_NAME.values()
}


def new_item(kind: Kind) -> FarmItem:
    """Construct a fresh item of ``kind`` in its initial state."""
    if isinstance(kind, PlantKind):
        return Plant(kind=kind)
    return Animal(kind=kind)


def item_from_symbol(symbol: str) -> FarmItem | None:
    """Return a new item for a placement glyph, or None if unrecognised."""
    kind = KINDS_BY_SYMBOL.get(symbol)
    return None if kind is None else new_item(kind)


def item_from_name(name: str) -> FarmItem | None:
    """Return a new item for a variant name, or None if unrecognised."""
    kind = KINDS_BY_NAME.get(name)
    return None if kind is None else new_item(kind)
