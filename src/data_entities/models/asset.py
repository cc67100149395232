"""
Asset-related input models for data entities.

Raw, unvalidated asset data as it arrives from a node API or caller code.
Remap hooks receive and return these structures; Asset validates them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from ..utils import convert_timestamp, safe_get

NumericValue = Union[Decimal, str, int, float]


@dataclass(frozen=True)
class AssetInfo:
    """
    Raw asset information used to construct an Asset.

    Attributes:
        id: Asset id
        name: Asset name
        precision: Number of decimal places of one token
        description: Free-form description
        height: Block height of the issue transaction
        timestamp: Issue time
        sender: Issuer address
        quantity: Total quantity in coins
        reissuable: Whether more tokens may be issued
        ticker: Optional short ticker
        has_script: Whether the asset carries a script (None means False)
        min_sponsored_fee: Optional sponsored fee in coins
    """
    id: str
    name: str
    precision: int
    description: str
    height: int
    timestamp: Optional[datetime]
    sender: str
    quantity: NumericValue
    reissuable: bool
    ticker: Optional[str] = None
    has_script: Optional[bool] = None
    min_sponsored_fee: Optional[NumericValue] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetInfo":
        """
        Create AssetInfo from a dictionary.

        Accepts both the field names of this class and the camelCase names
        used by node asset-details responses (assetId, decimals, issuer,
        issueHeight, issueTimestamp, minSponsoredAssetFee).
        """
        return cls(
            id=safe_get(data, "id", "assetId"),
            name=data.get("name"),
            precision=safe_get(data, "precision", "decimals"),
            description=data.get("description", ""),
            height=safe_get(data, "height", "issueHeight"),
            timestamp=convert_timestamp(safe_get(data, "timestamp", "issueTimestamp")),
            sender=safe_get(data, "sender", "issuer"),
            quantity=data.get("quantity"),
            reissuable=bool(data.get("reissuable", False)),
            ticker=data.get("ticker"),
            has_script=safe_get(data, "has_script", "hasScript", "scripted"),
            min_sponsored_fee=safe_get(
                data, "min_sponsored_fee", "minSponsoredFee", "minSponsoredAssetFee"
            ),
        )
