"""Engine subpackage - quote state, tier table and price derivation."""
from .models import DesignTier, QuoteState, Quote
from .price_model import PriceModel, compute_quote_for, default_tiers
from .formatting import format_currency, format_number

__all__ = [
    'PriceModel', 'DesignTier', 'QuoteState', 'Quote',
    'compute_quote_for', 'default_tiers', 'format_currency', 'format_number',
]
