"""
Value entities: Asset, AssetPair, Money, OrderPrice and Candle.
"""

from .asset import Asset
from .asset_pair import AssetPair
from .candle import Candle
from .money import Money
from .order_price import MATCHER_SCALE, OrderPrice

__all__ = [
    "Asset",
    "AssetPair",
    "Candle",
    "Money",
    "OrderPrice",
    "MATCHER_SCALE",
]
