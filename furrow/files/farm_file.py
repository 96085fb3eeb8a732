"""Farm files — save and load a farm grid as flat comma-separated lines.

Format:

- Line 1: ``rows,columns``.
- One line per cell in row-major order, the cell's stats record joined
  by commas: ``ground, `` for empty cells, ``name,symbol,Stage: N`` for
  plants, and ``name,symbol,Fed: bool,Collected: bool`` for animals.

Symbols in a file are informational only; on load they are re-derived
from the restored state.  The farm type is not stored and is inferred
from the items present.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

from furrow.errors import LoadFormatError
from furrow.items.animals import Animal, AnimalKind, Husbandry
from furrow.items.item import ItemFamily
from furrow.items.plants import Plant
from furrow.items.registry import KINDS_BY_NAME
from furrow.produce.quality import QualityGenerator
from furrow.world.farm import FarmGrid, FarmType

logger = logging.getLogger(__name__)

_FIELD_COUNTS = {"ground": 2, ItemFamily.PLANT: 3, ItemFamily.ANIMAL: 4}


def serialise_grid(grid: FarmGrid) -> str:
    """Return the save-file text for ``grid``."""
    lines = [f"{grid.rows},{grid.columns}"]
    lines.extend(",".join(record) for record in grid.get_stats())
    return "\n".join(lines) + "\n"


def save_grid(path: str | Path, grid: FarmGrid) -> None:
    """Write ``grid`` to ``path`` in the save-file format.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(serialise_grid(grid))
    logger.info("saved %dx%d farm to %s", grid.rows, grid.columns, path)


def load_grid(
    path: str | Path,
    qualities: QualityGenerator | None = None,
    farm_type: FarmType | str | None = None,
) -> FarmGrid:
    """Read a farm grid back from ``path``.

    Args:
        path: Save file to read.
        qualities: Quality service for the restored grid (a fresh one if
            omitted).
        farm_type: Farm type to use when the file holds no items.

    Raises:
        OSError: If the file cannot be read.
        LoadFormatError: If the file content is malformed.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8", newline="") as f:
        text = f.read()
    grid = parse_grid(text, qualities=qualities, farm_type=farm_type)
    logger.info(
        "loaded %dx%d %s farm from %s",
        grid.rows,
        grid.columns,
        grid.farm_type.value,
        path,
    )
    return grid


def parse_grid(
    text: str,
    qualities: QualityGenerator | None = None,
    farm_type: FarmType | str | None = None,
) -> FarmGrid:
    """Rebuild a farm grid from save-file text.

    Raises:
        LoadFormatError: If the dimensions or any cell record are malformed,
            the record count does not match the dimensions, or the records
            mix plants and animals.
    """
    lines = [line for line in text.splitlines() if line]
    if not lines:
        _reject("Empty farm file")
    rows, columns = _parse_dimensions(lines[0])

    records = [line.split(",") for line in lines[1:]]
    if len(records) != rows * columns:
        _reject(
            f"Expected {rows * columns} cell records for a {rows}x{columns} "
            f"farm, found {len(records)}",
        )

    items = [_parse_record(number, record) for number, record in enumerate(records, 2)]
    families = {item.family for item in items if item is not None}
    if len(families) > 1:
        _reject("A farm cannot hold both plants and animals")

    resolved = _resolve_farm_type(families, farm_type)
    grid = FarmGrid(
        rows=rows,
        columns=columns,
        farm_type=resolved,
        qualities=qualities if qualities is not None else QualityGenerator(),
    )
    for position, item in enumerate(items):
        if item is not None:
            row, column = divmod(position, columns)
            grid.restore_item(row, column, item)
    return grid


def _reject(message: str) -> NoReturn:
    logger.warning("rejected farm file: %s", message)
    raise LoadFormatError(message)


def _parse_dimensions(line: str) -> tuple[int, int]:
    parts = line.strip().split(",")
    if len(parts) != 2:
        _reject("Invalid grid dimensions in file")
    try:
        rows, columns = int(parts[0]), int(parts[1])
    except ValueError:
        _reject("Invalid grid dimensions in file")
    if rows <= 0 or columns <= 0:
        _reject("Invalid grid dimensions in file")
    return rows, columns


def _parse_record(number: int, record: list[str]) -> Plant | Animal | None:
    """Turn one cell record into a restored item, or None for ground."""
    name = record[0]
    if name == "ground":
        if len(record) != _FIELD_COUNTS["ground"]:
            _reject(f"Invalid cell data on line {number}")
        return None

    kind = KINDS_BY_NAME.get(name)
    if kind is None:
        _reject(f"Unknown farm item {name!r} on line {number}")
    family = ItemFamily.ANIMAL if isinstance(kind, AnimalKind) else ItemFamily.PLANT
    if len(record) != _FIELD_COUNTS[family]:
        _reject(f"Invalid cell data on line {number}")

    if isinstance(kind, AnimalKind):
        fed = _parse_flag(number, record[2], "Fed")
        produced = _parse_flag(number, record[3], "Collected")
        return Animal(kind=kind, husbandry=Husbandry(fed=fed, produced=produced))

    stage_text = _field_value(number, record[2], "Stage")
    try:
        return Plant.at_stage(kind, int(stage_text))
    except ValueError:
        _reject(f"Invalid growth stage {stage_text!r} on line {number}")


def _field_value(number: int, text: str, label: str) -> str:
    prefix = f"{label}: "
    if not text.startswith(prefix):
        _reject(f"Expected '{label}: ...' on line {number}, found {text!r}")
    return text[len(prefix):].strip()


def _parse_flag(number: int, text: str, label: str) -> bool:
    value = _field_value(number, text, label).lower()
    if value not in ("true", "false"):
        _reject(f"Invalid {label} value {value!r} on line {number}")
    return value == "true"


def _resolve_farm_type(
    families: set[ItemFamily],
    requested: FarmType | str | None,
) -> FarmType:
    requested_type = None if requested is None else FarmType(requested)
    if not families:
        return requested_type or FarmType.PLANT
    inferred = FarmType(families.pop().value)
    if requested_type is not None and requested_type is not inferred:
        _reject(
            f"File holds a {inferred.value} farm but a "
            f"{requested_type.value} farm was requested",
        )
    return inferred
