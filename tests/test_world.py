"""Tests for furrow.world.farm and furrow.world.cell."""

import pytest

from furrow.errors import (
    AlreadyProducedError,
    EmptyCellError,
    NotFedError,
    NotReadyError,
    OccupiedCellError,
    OutOfBoundsError,
    UnknownCommandError,
    WrongFarmTypeError,
)
from furrow.items.plants import BERRY as BERRY_KIND
from furrow.items.plants import Plant
from furrow.produce.product import Barcode, Product
from furrow.produce.quality import Quality, QualityGenerator
from furrow.world.cell import Cell
from furrow.world.farm import FarmGrid, FarmType

ROWS = 5
COLUMNS = 10

BERRY = "."
COFFEE = ":"
WHEAT = "ἴ"
CHICKEN = "৬"
COW = "४"
SHEEP = "ඔ"

GROUND = ["ground", " "]


def expected_stats(
    grid: FarmGrid,
    placed: dict[tuple[int, int], list[str]],
) -> list[list[str]]:
    """Build the stats snapshot for a grid that only holds ``placed``."""
    return [
        placed.get((row, column), GROUND)
        for row in range(grid.rows)
        for column in range(grid.columns)
    ]


class TestCell:
    """Tests for the Cell container."""

    def test_starts_empty(self) -> None:
        cell = Cell()
        assert cell.is_empty
        assert cell.symbol == " "
        assert cell.stats() == ["ground", " "]

    def test_place_overwrites(self) -> None:
        cell = Cell()
        cell.place(Plant(kind=BERRY_KIND))
        replacement = Plant.at_stage(BERRY_KIND, 3)
        cell.place(replacement)
        assert cell.item is replacement
        assert cell.symbol == "@"

    def test_remove_item_is_idempotent(self) -> None:
        cell = Cell(item=Plant(kind=BERRY_KIND))
        cell.remove_item()
        cell.remove_item()
        assert cell.is_empty


class TestFarmGridConstruction:
    """Tests for grid dimensions and the empty snapshot."""

    def test_dimensions(self, plant_grid: FarmGrid) -> None:
        assert plant_grid.rows == ROWS
        assert plant_grid.columns == COLUMNS
        assert len(plant_grid.cells) == ROWS
        assert all(len(row) == COLUMNS for row in plant_grid.cells)

    @pytest.mark.parametrize(("rows", "columns"), [(0, 5), (5, 0), (-1, 3)])
    def test_rejects_empty_dimensions(self, rows: int, columns: int) -> None:
        with pytest.raises(ValueError):
            FarmGrid(rows=rows, columns=columns)

    def test_farm_type_from_string(self) -> None:
        assert FarmGrid(rows=1, columns=1, farm_type="animal").farm_type is FarmType.ANIMAL

    def test_default_farm_type_is_plant(self) -> None:
        assert FarmGrid(rows=1, columns=1).farm_type is FarmType.PLANT

    def test_empty_stats(self, plant_grid: FarmGrid, animal_grid: FarmGrid) -> None:
        assert plant_grid.get_stats() == [GROUND] * (ROWS * COLUMNS)
        assert animal_grid.get_stats() == [GROUND] * (ROWS * COLUMNS)

    def test_cell_at_out_of_bounds(self, plant_grid: FarmGrid) -> None:
        with pytest.raises(IndexError):
            plant_grid.cell_at(ROWS, 0)


class TestFarmGridPlace:
    """Tests for placing items."""

    def test_place_plant(self, plant_grid: FarmGrid) -> None:
        assert plant_grid.place(ROWS // 2, COLUMNS // 2, BERRY)
        expected = expected_stats(
            plant_grid,
            {(ROWS // 2, COLUMNS // 2): ["berry", ".", "Stage: 1"]},
        )
        assert plant_grid.get_stats() == expected

    def test_place_animal(self, animal_grid: FarmGrid) -> None:
        assert animal_grid.place(ROWS // 2, COLUMNS // 2, SHEEP)
        expected = expected_stats(
            animal_grid,
            {(ROWS // 2, COLUMNS // 2): ["sheep", SHEEP, "Fed: false", "Collected: false"]},
        )
        assert animal_grid.get_stats() == expected

    @pytest.mark.parametrize(
        ("row", "column"),
        [(-5, -5), (-5, 5), (5, -5), (ROWS, COLUMNS), (ROWS, 0), (0, COLUMNS)],
    )
    def test_out_of_bounds_returns_false(
        self,
        plant_grid: FarmGrid,
        row: int,
        column: int,
    ) -> None:
        assert not plant_grid.place(row, column, BERRY)
        assert plant_grid.get_stats() == [GROUND] * (ROWS * COLUMNS)

    def test_unknown_symbol_returns_false(self, plant_grid: FarmGrid) -> None:
        assert not plant_grid.place(0, 0, "F")
        assert not plant_grid.place(-5, 0, "F")
        assert plant_grid.cells[0][0].is_empty

    def test_occupied_cell_is_left_unchanged(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(1, 1, COFFEE)
        plant_grid.end_day()
        before = plant_grid.get_stats()
        with pytest.raises(OccupiedCellError, match="Something is already there!"):
            plant_grid.place(1, 1, BERRY)
        assert plant_grid.get_stats() == before

    def test_occupied_cell_checked_before_symbol(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(0, 0, BERRY)
        with pytest.raises(OccupiedCellError, match="Something is already there!"):
            plant_grid.place(0, 0, "?")
        assert plant_grid.stats_at(0, 0) == ["berry", ".", "Stage: 1"]

    def test_animal_on_plant_farm(self, plant_grid: FarmGrid) -> None:
        with pytest.raises(WrongFarmTypeError):
            plant_grid.place(0, 0, COW)
        assert plant_grid.cells[0][0].is_empty

    def test_plant_on_animal_farm(self, animal_grid: FarmGrid) -> None:
        with pytest.raises(WrongFarmTypeError):
            animal_grid.place(0, 0, WHEAT)
        assert animal_grid.cells[0][0].is_empty


class TestFarmGridRemove:
    """Tests for clearing cells."""

    def test_remove(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(2, 5, BERRY)
        plant_grid.remove(2, 5)
        assert plant_grid.get_stats() == [GROUND] * (ROWS * COLUMNS)

    def test_remove_out_of_bounds_is_silent(self, plant_grid: FarmGrid) -> None:
        plant_grid.remove(-1, 0)
        plant_grid.remove(ROWS, COLUMNS)

    def test_remove_command(self, animal_grid: FarmGrid) -> None:
        animal_grid.place(0, 0, COW)
        assert animal_grid.interact("remove", 0, 0)
        assert animal_grid.cells[0][0].is_empty


class TestFarmGridHarvest:
    """Tests for harvesting through the grid."""

    @pytest.mark.parametrize(("row", "column"), [(-1, -1), (ROWS, COLUMNS), (0, -1)])
    def test_out_of_bounds(self, animal_grid: FarmGrid, row: int, column: int) -> None:
        animal_grid.place(0, 0, CHICKEN)
        before = animal_grid.get_stats()
        with pytest.raises(OutOfBoundsError, match="You can't harvest this location"):
            animal_grid.harvest(row, column)
        assert animal_grid.get_stats() == before

    def test_empty_cell(self, plant_grid: FarmGrid) -> None:
        with pytest.raises(EmptyCellError, match="You can't harvest an empty spot!"):
            plant_grid.harvest(0, 0)

    def test_unripe(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(0, 0, WHEAT)
        with pytest.raises(NotReadyError):
            plant_grid.harvest(0, 0)
        assert plant_grid.stats_at(0, 0) == ["wheat", WHEAT, "Stage: 1"]

    def test_ripe_wheat(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(ROWS // 2, COLUMNS // 2, WHEAT)
        plant_grid.interact("end-day", 0, 0)
        assert plant_grid.stats_at(ROWS // 2, COLUMNS // 2) == ["wheat", "#", "Stage: 2"]
        product = plant_grid.harvest(ROWS // 2, COLUMNS // 2)
        assert product.barcode is Barcode.BREAD
        assert plant_grid.stats_at(ROWS // 2, COLUMNS // 2) == ["wheat", WHEAT, "Stage: 1"]

    def test_uses_injected_services(self, gold_only: QualityGenerator) -> None:
        made: list[Product] = []

        def factory(barcode: Barcode, quality: Quality) -> Product:
            product = Product(barcode, quality)
            made.append(product)
            return product

        grid = FarmGrid(rows=2, columns=2, qualities=gold_only, make_product=factory)
        grid.place(1, 1, BERRY)
        grid.end_day()
        grid.end_day()
        product = grid.harvest(1, 1)
        assert product == Product(Barcode.JAM, Quality.GOLD)
        assert made == [product]

    def test_cow_cycle(self, animal_grid: FarmGrid) -> None:
        animal_grid.place(1, 1, COW)
        with pytest.raises(NotFedError):
            animal_grid.harvest(1, 1)
        animal_grid.interact("feed", 1, 1)
        assert animal_grid.harvest(1, 1).barcode is Barcode.MILK
        assert animal_grid.stats_at(1, 1) == ["cow", COW, "Fed: true", "Collected: true"]
        with pytest.raises(AlreadyProducedError):
            animal_grid.harvest(1, 1)
        animal_grid.interact("end-day", 0, 0)
        assert animal_grid.stats_at(1, 1) == ["cow", COW, "Fed: false", "Collected: false"]
        animal_grid.interact("feed", 1, 1)
        assert animal_grid.harvest(1, 1).barcode is Barcode.MILK

    def test_three_animals_scenario(self, animal_grid: FarmGrid) -> None:
        positions = {(0, 0): CHICKEN, (2, 5): COW, (4, 9): SHEEP}
        for (row, column), symbol in positions.items():
            animal_grid.place(row, column, symbol)
        for row, column in positions:
            animal_grid.interact("feed", row, column)

        products = [animal_grid.harvest(row, column) for row, column in positions]

        assert [p.barcode for p in products] == [Barcode.EGG, Barcode.MILK, Barcode.WOOL]
        assert all(isinstance(p.quality, Quality) for p in products)
        for row, column in positions:
            assert animal_grid.stats_at(row, column)[3] == "Collected: true"

    def test_seeded_harvests_are_reproducible(self) -> None:
        def harvest_all(seed: int) -> list[Product]:
            grid = FarmGrid(
                rows=1,
                columns=3,
                farm_type=FarmType.ANIMAL,
                qualities=QualityGenerator.from_seed(seed),
            )
            for column, symbol in enumerate((CHICKEN, COW, SHEEP)):
                grid.place(0, column, symbol)
                grid.interact("feed", 0, column)
            return [grid.harvest(0, column) for column in range(3)]

        assert harvest_all(99) == harvest_all(99)


class TestFarmGridInteract:
    """Tests for interaction commands."""

    def test_feed_on_plant_farm(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(0, 0, BERRY)
        with pytest.raises(WrongFarmTypeError):
            plant_grid.interact("feed", 0, 0)

    def test_feed_out_of_bounds(self, animal_grid: FarmGrid) -> None:
        with pytest.raises(OutOfBoundsError):
            animal_grid.interact("feed", ROWS, 0)

    def test_feed_empty_cell(self, animal_grid: FarmGrid) -> None:
        with pytest.raises(EmptyCellError):
            animal_grid.interact("feed", 0, 0)

    def test_feed_ignores_case(self, animal_grid: FarmGrid) -> None:
        animal_grid.place(0, 0, SHEEP)
        assert animal_grid.interact("Feed", 0, 0)
        assert animal_grid.stats_at(0, 0)[2] == "Fed: true"

    def test_unknown_command(self, plant_grid: FarmGrid) -> None:
        with pytest.raises(UnknownCommandError, match="Unknown command: water"):
            plant_grid.interact("water", 0, 0)

    def test_end_day_grows_plants(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(0, 0, COFFEE)
        plant_grid.place(ROWS // 2, COLUMNS // 2, WHEAT)
        plant_grid.place(ROWS - 1, COLUMNS - 1, BERRY)
        for _ in range(3):
            plant_grid.interact("end-day", 0, 0)
        expected = expected_stats(
            plant_grid,
            {
                (0, 0): ["coffee", "%", "Stage: 4"],
                (ROWS // 2, COLUMNS // 2): ["wheat", "#", "Stage: 2"],
                (ROWS - 1, COLUMNS - 1): ["berry", "@", "Stage: 3"],
            },
        )
        assert plant_grid.get_stats() == expected

    def test_coffee_growth_is_monotonic(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(0, 0, COFFEE)
        stages = []
        for _ in range(5):
            plant_grid.end_day()
            stages.append(plant_grid.stats_at(0, 0)[2])
        assert stages == ["Stage: 2", "Stage: 3", "Stage: 4", "Stage: 4", "Stage: 4"]


class TestFarmGridViews:
    """Tests for stats snapshots and the text display."""

    def test_stats_are_defensive_copies(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(0, 0, BERRY)
        stats = plant_grid.get_stats()
        stats[0][2] = "Stage: 3"
        stats[1].append("junk")
        stats.clear()
        assert plant_grid.stats_at(0, 0) == ["berry", ".", "Stage: 1"]
        assert plant_grid.get_stats()[1] == GROUND

    def test_index_is_row_major(self, plant_grid: FarmGrid) -> None:
        plant_grid.place(3, 7, BERRY)
        assert plant_grid.index(3, 7) == 37
        assert plant_grid.get_stats()[37][0] == "berry"

    def test_display(self) -> None:
        grid = FarmGrid(rows=2, columns=3)
        grid.place(0, 0, BERRY)
        grid.place(1, 2, COFFEE)
        assert grid.farm_display() == (
            "---------\n"
            "| .     |\n"
            "|     : |\n"
            "---------\n"
        )

    def test_display_tracks_growth(self) -> None:
        grid = FarmGrid(rows=1, columns=1)
        grid.place(0, 0, BERRY)
        grid.end_day()
        assert grid.farm_display().splitlines()[1] == "| o |"

    def test_occupied(self, animal_grid: FarmGrid) -> None:
        animal_grid.place(4, 9, SHEEP)
        animal_grid.place(0, 1, CHICKEN)
        assert [(r, c, item.name) for r, c, item in animal_grid.occupied()] == [
            (0, 1, "chicken"),
            (4, 9, "sheep"),
        ]
