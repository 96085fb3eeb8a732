"""Quality — product grades and the weighted generator that assigns them.

The generator is a service injected into the farm grid so that a seeded
``numpy.random.Generator`` makes harvest outcomes reproducible.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering

import numpy as np
from numpy.random import Generator

# Relative odds out of ten: 0-3 regular, 4-6 silver, 7-8 gold, 9 iridium.
DEFAULT_WEIGHTS: tuple[float, ...] = (4.0, 3.0, 2.0, 1.0)


@total_ordering
class Quality(Enum):
    """Grade of a harvested product, ordered by rank."""

    REGULAR = 0
    SILVER = 1
    GOLD = 2
    IRIDIUM = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return self.value < other.value


@dataclass
class QualityGenerator:
    """Draws randomly-weighted qualities for harvested products.

    Attributes:
        rng: Random generator the draws come from.
        weights: Relative odds for each grade, in ``Quality`` rank order.
    """

    rng: Generator = field(default_factory=np.random.default_rng)
    weights: Sequence[float] = DEFAULT_WEIGHTS
    _probabilities: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the weights and normalise them into probabilities."""
        weights = np.asarray(self.weights, dtype=np.float64)
        if weights.shape != (len(Quality),):
            msg = f"expected {len(Quality)} quality weights, got {len(weights)}"
            raise ValueError(msg)
        if np.any(weights < 0) or weights.sum() <= 0:
            msg = "quality weights must be non-negative with a positive sum"
            raise ValueError(msg)
        self._probabilities = weights / weights.sum()

    @classmethod
    def from_seed(
        cls,
        seed: int | None,
        weights: Sequence[float] = DEFAULT_WEIGHTS,
    ) -> QualityGenerator:
        """Build a generator backed by ``numpy.random.default_rng(seed)``."""
        return cls(rng=np.random.default_rng(seed), weights=weights)

    def draw(self) -> Quality:
        """Return the next randomly-weighted quality."""
        rank = int(self.rng.choice(len(Quality), p=self._probabilities))
        return Quality(rank)
