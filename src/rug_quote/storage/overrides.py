"""
Price override map - per-tier unit prices kept in the local store.

The stored value is a JSON object string such as ``{"intermedio": 18}``.
It is read once at startup and merged over the default tier table.
Anything malformed is treated as "no overrides".
"""
import json
import logging
import math
from typing import Iterable, Optional

from ..engine.models import DesignTier
from .local_store import KeyValueStore


logger = logging.getLogger(__name__)


def _valid_price(value) -> bool:
    # bool is an int subclass, but true/false are not prices
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def parse_overrides(raw: Optional[str]) -> dict[str, float]:
    """
    Parse a stored override map.

    Returns an empty dict for missing data, invalid JSON or a top level
    that is not an object. Entries whose value is not a non-negative
    number are dropped one by one.
    """
    if raw is None:
        return {}
    if not isinstance(raw, (str, bytes, bytearray)):
        logger.warning("Ignoring price overrides of type %s", type(raw).__name__)
        return {}

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning("Ignoring malformed price overrides: %s", e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring price overrides: expected an object, got %s", type(data).__name__)
        return {}

    overrides = {}
    for tier_id, value in data.items():
        if _valid_price(value):
            overrides[str(tier_id)] = value
        else:
            logger.warning("Ignoring price override for %r: %r is not a valid price", tier_id, value)
    return overrides


def apply_overrides(tiers: Iterable[DesignTier], overrides: dict[str, float]) -> list[DesignTier]:
    """
    Merge an override map into a tier list.

    A tier takes the override only when its id is present and the value is
    non-zero; a zero keeps the default price. Ids with no matching tier are
    ignored.
    """
    merged = []
    for tier in tiers:
        price = overrides.get(tier.id)
        if price:
            logger.debug("Overriding %s unit price %s -> %s", tier.id, tier.unit_price, price)
            merged.append(tier.with_price(price))
        else:
            merged.append(tier)

    unknown = set(overrides) - {t.id for t in merged}
    if unknown:
        logger.debug("Price overrides for unknown tiers ignored: %s", ", ".join(sorted(unknown)))
    return merged


def load_overrides(store: Optional[KeyValueStore], key: str) -> dict[str, float]:
    """Read and parse the override map; store failures count as no overrides."""
    if store is None:
        return {}
    try:
        raw = store.get_item(key)
    except (OSError, ValueError, RecursionError) as e:
        logger.warning("Could not read price overrides from store: %s", e)
        return {}
    return parse_overrides(raw)


def save_overrides(store: KeyValueStore, key: str, overrides: dict[str, float]):
    """Write an override map in the format load_overrides() reads."""
    store.set_item(key, json.dumps(overrides))
