"""
Data models for data entities.

Raw input structures consumed by the entity constructors and by the
remap hooks in the config registry.
"""

from .asset import AssetInfo
from .candle import CandleInfo

__all__ = [
    "AssetInfo",
    "CandleInfo",
]
