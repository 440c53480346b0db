"""
Centralized settings and path configuration for the rug quote calculator.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


# Allowed width/height values offered by the page, in centimetres
DIMENSION_OPTIONS = (60, 70, 80, 90, 100, 120, 150, 180, 200, 250, 300)

# id, display name, price per cm², image reference
DEFAULT_TIERS = (
    ('intermedio', 'Intermedio', 15, 'img/nike.jpg'),
    ('dificil', 'Dificil', 20, 'img/gengar.jpg'),
)

STORE_PATH_ENV = 'RUG_QUOTE_STORE_PATH'


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Local key-value store holding the price overrides
    store_path: Path
    storage_key: str = 'carpetPrices'

    # Display formatting
    locale: str = 'es_AR'
    currency: str = 'ARS'

    # Selection defaults
    dimension_options: tuple = DIMENSION_OPTIONS
    default_width: int = 90
    default_height: int = 90
    default_tier_id: str = 'intermedio'

    default_tiers: tuple = DEFAULT_TIERS

    # Contact link shown under the disclaimer
    instagram_url: str = 'https://www.instagram.com/homespun.rugs/'
    instagram_handle: str = '@homespun.rugs'

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        store_path = os.environ.get(STORE_PATH_ENV)

        return cls(
            project_root=root,
            store_path=Path(store_path) if store_path else root / 'data' / 'local_storage.json',
        )

    @property
    def assets_dir(self) -> Path:
        """Directory that tier image references are resolved against."""
        return self.project_root / 'assets'


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
