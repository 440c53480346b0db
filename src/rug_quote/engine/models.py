"""
Data models for the quote calculator.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class DesignTier:
    """A design complexity level with its price per cm²."""
    id: str
    name: str
    unit_price: float
    image_ref: Optional[str] = None

    def with_price(self, unit_price: float) -> 'DesignTier':
        """Copy of this tier with a different unit price."""
        return replace(self, unit_price=unit_price)


@dataclass
class QuoteState:
    """Current selections on the page."""
    width_cm: int
    height_cm: int
    selected_tier_id: str


@dataclass
class BreakdownStep:
    """A single line of the calculation detail."""
    step: str
    description: str


@dataclass
class Quote:
    """Computed price for the chosen area and tier."""
    width_cm: int
    height_cm: int
    area: int
    tier_id: str
    tier_name: Optional[str]
    unit_price: float
    total_price: float
    breakdown: list[BreakdownStep] = field(default_factory=list)

    def add_step(self, step: str, description: str):
        """Add a line to the calculation detail."""
        self.breakdown.append(BreakdownStep(step=step, description=description))

    def get_breakdown_text(self) -> str:
        """Get the calculation detail as formatted text."""
        return "\n".join(f"{b.step}: {b.description}" for b in self.breakdown)

    def to_dict(self) -> dict:
        return {
            "width_cm": self.width_cm,
            "height_cm": self.height_cm,
            "area": self.area,
            "tier_id": self.tier_id,
            "tier_name": self.tier_name,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
        }
