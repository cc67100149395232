"""
AssetPair entity.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .asset import Asset


@dataclass(frozen=True)
class AssetPair:
    """
    Trading pair of an amount asset and a price asset.

    Both assets are held by reference. precision_difference is
    price_asset.precision - amount_asset.precision and may be negative.
    """
    amount_asset: Asset
    price_asset: Asset
    precision_difference: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "precision_difference",
            self.price_asset.precision - self.amount_asset.precision,
        )

    def to_json(self) -> Dict[str, Any]:
        """Serialize to asset ids."""
        return {
            "amountAsset": self.amount_asset.id,
            "priceAsset": self.price_asset.id,
        }

    def __str__(self) -> str:
        return f"{self.amount_asset}/{self.price_asset}"

    @staticmethod
    def is_asset_pair(obj: Any) -> bool:
        """Check whether obj is an AssetPair."""
        return isinstance(obj, AssetPair)
