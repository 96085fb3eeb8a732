"""Tests for furrow.produce — qualities, the quality service, products."""

from collections import Counter
from dataclasses import FrozenInstanceError

import pytest

from furrow.produce.product import Barcode, Product
from furrow.produce.quality import Quality, QualityGenerator


class TestQuality:
    """Tests for the ordered Quality enum."""

    def test_rank_order(self) -> None:
        assert Quality.REGULAR < Quality.SILVER < Quality.GOLD < Quality.IRIDIUM

    def test_max_is_iridium(self) -> None:
        assert max(Quality) is Quality.IRIDIUM
        assert Quality.GOLD >= Quality.SILVER


class TestQualityGenerator:
    """Tests for weighted quality draws."""

    def test_same_seed_same_draws(self) -> None:
        a = QualityGenerator.from_seed(7)
        b = QualityGenerator.from_seed(7)
        assert [a.draw() for _ in range(50)] == [b.draw() for _ in range(50)]

    def test_single_weight_always_wins(self, gold_only: QualityGenerator) -> None:
        assert {gold_only.draw() for _ in range(20)} == {Quality.GOLD}

    def test_default_weighting_favours_regular(
        self,
        qualities: QualityGenerator,
    ) -> None:
        counts = Counter(qualities.draw() for _ in range(4000))
        assert counts[Quality.REGULAR] > counts[Quality.SILVER]
        assert counts[Quality.SILVER] > counts[Quality.GOLD]
        assert counts[Quality.GOLD] > counts[Quality.IRIDIUM]
        assert counts[Quality.IRIDIUM] > 0

    def test_wrong_weight_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            QualityGenerator.from_seed(0, weights=(1, 1, 1))

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValueError):
            QualityGenerator.from_seed(0, weights=(1, -1, 1, 1))

    def test_zero_weights_rejected(self) -> None:
        with pytest.raises(ValueError):
            QualityGenerator.from_seed(0, weights=(0, 0, 0, 0))


class TestProduct:
    """Tests for the Product value type."""

    def test_default_quality_is_regular(self) -> None:
        assert Product(Barcode.EGG).quality is Quality.REGULAR

    def test_display_name_and_price(self) -> None:
        milk = Product(Barcode.MILK, Quality.SILVER)
        assert milk.display_name == "milk"
        assert milk.base_price == 440

    def test_str_format(self) -> None:
        assert str(Product(Barcode.BREAD, Quality.IRIDIUM)) == "bread: 240c *IRIDIUM*"

    def test_equality_by_barcode_and_quality(self) -> None:
        assert Product(Barcode.JAM, Quality.GOLD) == Product(Barcode.JAM, Quality.GOLD)
        assert Product(Barcode.JAM, Quality.GOLD) != Product(Barcode.JAM)
        assert Product(Barcode.JAM) != Product(Barcode.WOOL)

    def test_immutable(self) -> None:
        product = Product(Barcode.COFFEE)
        with pytest.raises(FrozenInstanceError):
            product.quality = Quality.GOLD  # type: ignore[misc]
