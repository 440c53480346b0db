"""
Locale-aware display formatting for prices and areas.
"""
from copy import copy
from decimal import Decimal, ROUND_HALF_UP

from babel import Locale
from babel.numbers import format_decimal


def format_currency(amount: float, locale: str = 'es_AR', currency: str = 'ARS') -> str:
    """
    Format an amount in the locale's currency pattern with no decimal digits.

    Halves round away from zero (2.5 -> 3), not to even.
    """
    loc = Locale.parse(locale)
    pattern = copy(loc.currency_formats['standard'])
    pattern.frac_prec = (0, 0)
    whole = Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return pattern.apply(whole, loc, currency=currency, currency_digits=False)


def format_number(amount: float, locale: str = 'es_AR') -> str:
    """Format a plain number with the locale's grouping and decimal marks."""
    return format_decimal(amount, locale=locale)
