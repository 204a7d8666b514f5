# services/pricing_service.py
"""
Server-side scrap pricing.

The quote is computed from the ``scrap_rates`` table so clients cannot
influence the price they are offered. The selected weight is split evenly
across the selected categories and each share is priced at its category rate.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from app.models.scrap_rate import ScrapRate

logger = logging.getLogger(__name__)

# INR per kg
DEFAULT_SCRAP_RATES: Dict[str, Decimal] = {
    "paper": Decimal("15.00"),
    "plastic": Decimal("12.00"),
    "metal": Decimal("35.00"),
    "ewaste": Decimal("120.00"),
}

MAX_CONFIDENCE = 95
MIN_CONFIDENCE = 75
CONFIDENCE_STEP = 5  # lost per extra category in a mixed load

class PricingError(Exception):
    """Raised when a quote cannot be produced for the requested categories."""

@dataclass(frozen=True)
class PriceQuote:
    estimated_price: Decimal
    confidence_score: int

def unique_categories(categories: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(categories))

def confidence_for(category_count: int) -> int:
    """Mixed loads are harder to grade, so confidence drops with each extra category."""
    score = MAX_CONFIDENCE - CONFIDENCE_STEP * (category_count - 1)
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, score))

def get_rates(db: Session, categories: Sequence[str]) -> Dict[str, Decimal]:
    rows = db.query(ScrapRate).filter(ScrapRate.category.in_(list(categories))).all()
    return {row.category: Decimal(str(row.price_per_kg)) for row in rows}

def calculate_scrap_price(db: Session, categories: Sequence[str], weight_kg: float) -> PriceQuote:
    selected = unique_categories(categories)
    if not selected:
        raise PricingError("No categories to price")

    rates = get_rates(db, selected)
    missing = [category for category in selected if category not in rates]
    if missing:
        raise PricingError(f"No rate configured for: {', '.join(missing)}")

    share = Decimal(str(weight_kg)) / len(selected)
    total = sum((rates[category] * share for category in selected), Decimal("0"))
    estimated_price = total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    quote = PriceQuote(estimated_price=estimated_price, confidence_score=confidence_for(len(selected)))
    logger.info(f"Priced {weight_kg} kg of {selected}: {quote.estimated_price} (confidence {quote.confidence_score})")
    return quote

def seed_scrap_rates(db: Session) -> int:
    """Insert default rates for any category that has none. Returns the number inserted."""
    existing = {row.category for row in db.query(ScrapRate).all()}
    added = 0
    for category, price in DEFAULT_SCRAP_RATES.items():
        if category not in existing:
            db.add(ScrapRate(category=category, price_per_kg=price))
            added += 1
    if added:
        db.commit()
        logger.info(f"Seeded {added} default scrap rates")
    return added
