"""Config — load farm parameters from YAML files.

Grid size, farm type, the quality-weighting table, and the RNG seed live
in YAML and are parsed into a typed dataclass here.  This keeps harvest
odds and farm layout data-driven and easy to experiment with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from furrow.produce.quality import DEFAULT_WEIGHTS, QualityGenerator
from furrow.world.farm import FarmGrid, FarmType


@dataclass
class FarmConfig:
    """Top-level farm configuration.

    Attributes:
        seed: RNG seed for reproducible harvest qualities (None for
            fresh entropy).
        rows: Number of grid rows.
        columns: Number of grid columns.
        farm_type: ``plant`` or ``animal``.
        quality_weights: Relative odds of regular, silver, gold, and
            iridium products.
        save_path: Default file used by the ``save`` command.
    """

    seed: int | None = None
    rows: int = 5
    columns: int = 10
    farm_type: str = FarmType.PLANT.value
    quality_weights: list[float] = field(
        default_factory=lambda: list(DEFAULT_WEIGHTS),
    )
    save_path: str = "farm.txt"

    @classmethod
    def from_yaml(cls, path: str | Path) -> FarmConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated FarmConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            rows=data.get("rows", cls.rows),
            columns=data.get("columns", cls.columns),
            farm_type=data.get("farm_type", cls.farm_type),
            quality_weights=data.get("quality_weights", list(DEFAULT_WEIGHTS)),
            save_path=data.get("save_path", cls.save_path),
        )

    def build_qualities(self) -> QualityGenerator:
        """Create the seeded quality service described by this config."""
        return QualityGenerator.from_seed(self.seed, self.quality_weights)

    def build_grid(self) -> FarmGrid:
        """Create an empty farm grid described by this config."""
        return FarmGrid(
            rows=self.rows,
            columns=self.columns,
            farm_type=FarmType(self.farm_type),
            qualities=self.build_qualities(),
        )
