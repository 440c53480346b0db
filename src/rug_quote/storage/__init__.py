"""Storage subpackage - local key-value store and the price override map."""
from .local_store import KeyValueStore, MemoryStore, JsonFileStore
from .overrides import parse_overrides, apply_overrides, load_overrides, save_overrides

__all__ = [
    'KeyValueStore', 'MemoryStore', 'JsonFileStore',
    'parse_overrides', 'apply_overrides', 'load_overrides', 'save_overrides',
]
