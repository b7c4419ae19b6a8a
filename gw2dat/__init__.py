"""Record layouts, categorization, hex dumps and channel masking for Guild Wars 2 .dat contents."""

__version__ = "1.0.9"
__all__ = ["bits", "categorize", "channels", "formats", "hexview"]