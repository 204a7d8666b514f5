"""
Unit tests for the server-side pricing function and rate seeding.
"""

from decimal import Decimal

import pytest

from app.models.scrap_rate import ScrapRate
from app.services.pricing_service import (
    DEFAULT_SCRAP_RATES,
    MIN_CONFIDENCE,
    PricingError,
    calculate_scrap_price,
    confidence_for,
    seed_scrap_rates,
    unique_categories,
)


class TestCalculateScrapPrice:

    @pytest.mark.parametrize("category, expected", [
        ("paper", Decimal("150.00")),
        ("plastic", Decimal("120.00")),
        ("metal", Decimal("350.00")),
        ("ewaste", Decimal("1200.00")),
    ])
    def test_single_category_uses_its_rate(self, db_session, category, expected) -> None:
        quote = calculate_scrap_price(db_session, [category], 10)

        assert quote.estimated_price == expected
        assert quote.confidence_score == 95

    def test_weight_is_split_across_categories(self, db_session) -> None:
        quote = calculate_scrap_price(db_session, ["paper", "plastic", "metal", "ewaste"], 20)

        # 5 kg each: 75 + 60 + 175 + 600
        assert quote.estimated_price == Decimal("910.00")
        assert quote.confidence_score == 80

    def test_rounds_half_up_to_paise(self, db_session) -> None:
        quote = calculate_scrap_price(db_session, ["paper", "plastic", "metal"], 7)

        # 62 * 7 / 3 = 144.666...
        assert quote.estimated_price == Decimal("144.67")

    def test_fractional_weight(self, db_session) -> None:
        quote = calculate_scrap_price(db_session, ["metal"], 2.5)

        assert quote.estimated_price == Decimal("87.50")

    def test_duplicate_categories_are_collapsed(self, db_session) -> None:
        duplicated = calculate_scrap_price(db_session, ["metal", "metal"], 4)
        single = calculate_scrap_price(db_session, ["metal"], 4)

        assert duplicated == single

    def test_missing_rate_raises(self, db_session) -> None:
        db_session.query(ScrapRate).filter(ScrapRate.category == "ewaste").delete()
        db_session.commit()

        with pytest.raises(PricingError, match="ewaste"):
            calculate_scrap_price(db_session, ["paper", "ewaste"], 5)

    def test_empty_categories_raise(self, db_session) -> None:
        with pytest.raises(PricingError):
            calculate_scrap_price(db_session, [], 5)


class TestConfidence:

    def test_decreases_per_extra_category(self) -> None:
        assert [confidence_for(n) for n in range(1, 5)] == [95, 90, 85, 80]

    def test_never_below_floor(self) -> None:
        assert confidence_for(20) == MIN_CONFIDENCE

    def test_unique_categories_keeps_order(self) -> None:
        assert unique_categories(["metal", "paper", "metal"]) == ["metal", "paper"]


class TestSeedScrapRates:

    def test_seed_is_idempotent(self, db_session) -> None:
        # conftest already seeded
        assert seed_scrap_rates(db_session) == 0
        assert db_session.query(ScrapRate).count() == len(DEFAULT_SCRAP_RATES)

    def test_seed_fills_missing_rates_only(self, db_session) -> None:
        db_session.query(ScrapRate).filter(ScrapRate.category == "paper").delete()
        metal = db_session.query(ScrapRate).filter(ScrapRate.category == "metal").one()
        metal.price_per_kg = Decimal("41.50")
        db_session.commit()

        assert seed_scrap_rates(db_session) == 1

        rates = {row.category: Decimal(str(row.price_per_kg)) for row in db_session.query(ScrapRate).all()}
        assert rates["paper"] == Decimal("15.00")
        assert rates["metal"] == Decimal("41.50")
