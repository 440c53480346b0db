"""
Price Model - quote state, tier table and price derivation.

Owns the design tiers, the selected dimensions and the selected tier.
Quotes are derived on demand:

1. area = width × height (cm²)
2. unit price = price of the selected tier, or 0 when the id is unknown
3. total = area × unit price

Price overrides from the local store are merged into the default tier
table once, in initialize().
"""
import logging
from typing import Callable, Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from ..storage.local_store import KeyValueStore, MemoryStore
from ..storage.overrides import load_overrides, apply_overrides
from .formatting import format_currency, format_number
from .models import DesignTier, QuoteState, Quote


logger = logging.getLogger(__name__)


def default_tiers(settings: Optional[Settings] = None) -> list[DesignTier]:
    """Build the default tier table from settings."""
    settings = settings or get_settings()
    return [
        DesignTier(id=tier_id, name=name, unit_price=price, image_ref=image)
        for tier_id, name, price, image in settings.default_tiers
    ]


def compute_quote_for(width_cm: int, height_cm: int, tier: Optional[DesignTier],
                      tier_id: Optional[str] = None) -> Quote:
    """
    Compute a quote for explicit inputs.

    A missing tier prices at zero. ``tier_id`` names the requested tier
    when ``tier`` could not be resolved.
    """
    area = width_cm * height_cm
    unit_price = tier.unit_price if tier else 0
    total_price = area * unit_price

    return Quote(
        width_cm=width_cm,
        height_cm=height_cm,
        area=area,
        tier_id=tier.id if tier else (tier_id or ''),
        tier_name=tier.name if tier else None,
        unit_price=unit_price,
        total_price=total_price,
    )


class PriceModel:
    """
    Single owner of the quote state.

    The rendering layer reads tiers and quotes from here, feeds selection
    events back through the setters and may subscribe to receive the fresh
    quote after every change.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._tiers: list[DesignTier] = default_tiers(self.settings)
        self.state = QuoteState(
            width_cm=self.settings.default_width,
            height_cm=self.settings.default_height,
            selected_tier_id=self.settings.default_tier_id,
        )
        self._listeners: list[Callable[[Quote], None]] = []

    def initialize(self, store: Optional[KeyValueStore] = None) -> 'PriceModel':
        """
        Reset the tier table to defaults and merge stored price overrides.

        Missing or malformed stored data leaves the defaults in place. With
        no store, an empty MemoryStore is used.
        """
        if store is None:
            store = MemoryStore()
        overrides = load_overrides(store, self.settings.storage_key)
        self._tiers = apply_overrides(default_tiers(self.settings), overrides)
        if overrides:
            logger.info("Loaded price overrides for %d tier(s)", len(overrides))
        self._notify()
        return self

    # ------------------------------------------------------------------
    # Tier access
    # ------------------------------------------------------------------
    @property
    def tiers(self) -> list[DesignTier]:
        return list(self._tiers)

    def get_tier(self, tier_id: str) -> Optional[DesignTier]:
        """Look up a tier by id; None if there is no such tier."""
        for tier in self._tiers:
            if tier.id == tier_id:
                return tier
        return None

    @property
    def selected_tier(self) -> Optional[DesignTier]:
        return self.get_tier(self.state.selected_tier_id)

    # ------------------------------------------------------------------
    # Selection events
    # ------------------------------------------------------------------
    def _check_dimension(self, value: int) -> int:
        if value not in self.settings.dimension_options:
            raise ValueError(
                f"{value} cm is not an offered size; choose one of "
                f"{', '.join(str(d) for d in self.settings.dimension_options)}"
            )
        return int(value)

    def set_width(self, value: int):
        self.state.width_cm = self._check_dimension(value)
        self._notify()

    def set_height(self, value: int):
        self.state.height_cm = self._check_dimension(value)
        self._notify()

    def select_tier(self, tier_id: str):
        """Select a tier. Unknown ids are accepted and quote at zero."""
        if self.get_tier(tier_id) is None:
            logger.debug("Selected unknown tier %r, quoting at zero", tier_id)
        self.state.selected_tier_id = tier_id
        self._notify()

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------
    def compute_quote(self) -> Quote:
        """Quote for the current state, with the calculation detail lines."""
        quote = compute_quote_for(
            self.state.width_cm,
            self.state.height_cm,
            self.selected_tier,
            tier_id=self.state.selected_tier_id,
        )
        area_text = f"{self.format_number(quote.area)} cm²"
        quote.add_step("Dimensiones", f"{quote.width_cm} × {quote.height_cm} cm")
        quote.add_step("Área total", area_text)
        quote.add_step(f"Nivel {quote.tier_name or ''}".strip(), f"${quote.unit_price} × {area_text}")
        return quote

    def price_grid(self, tier_id: Optional[str] = None) -> pd.DataFrame:
        """
        Total price for every offered width × height pair.

        Rows are heights, columns are widths. Defaults to the selected tier.
        """
        tier_id = tier_id or self.state.selected_tier_id
        tier = self.get_tier(tier_id)
        options = list(self.settings.dimension_options)

        grid = pd.DataFrame(
            [[compute_quote_for(w, h, tier).total_price for w in options] for h in options],
            index=pd.Index(options, name='height_cm'),
            columns=pd.Index(options, name='width_cm'),
        )
        return grid

    def format_currency(self, amount: float) -> str:
        return format_currency(amount, self.settings.locale, self.settings.currency)

    def format_number(self, amount: float) -> str:
        return format_number(amount, self.settings.locale)

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------
    def subscribe(self, callback: Callable[[Quote], None]) -> Callable[[], None]:
        """Register a listener for quote changes. Returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self):
        if not self._listeners:
            return
        quote = self.compute_quote()
        for callback in list(self._listeners):
            callback(quote)
