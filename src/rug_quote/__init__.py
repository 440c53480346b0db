"""
Rug Quote Package

Price calculator for custom rugs.
Resolves a quote from width × height and a design tier, with per-tier
price overrides read from a local key-value store.
"""

__version__ = "1.0.0"
