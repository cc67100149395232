"""
Asset entity.

An immutable descriptor of a tradable token and its total quantity,
expressed in the token's own coin unit.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import InvalidAssetField
from ..models.asset import AssetInfo
from ..registry import ConfigKey, EntityConfig, config as default_config
from ..utils import to_decimal


def _check_text(value: Any, field_name: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidAssetField(f"Invalid asset {field_name}: must be a non-empty string")


def _check_non_negative_int(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidAssetField(
            f"Invalid {field_name}: {value!r} - must be a non-negative integer"
        )


@dataclass(frozen=True, init=False)
class Asset:
    """
    Blockchain asset with metadata and quantity information.

    Built from AssetInfo (or a dict accepted by AssetInfo.from_dict), which is
    first passed through the ``remapAsset`` hook of the config registry and
    then validated. Optional inputs are resolved once here: a missing ticker
    stays None, a missing has_script becomes False and display_name is the
    ticker when there is one, else the name.

    Example:
        asset = Asset(AssetInfo(id="WAVES", name="Waves", precision=8, ...))
        str(asset)  # "WAVES"
    """
    ticker: Optional[str]
    id: str
    name: str
    precision: int
    description: str
    height: int
    timestamp: Optional[datetime]
    sender: str
    quantity: Decimal
    reissuable: bool
    has_script: bool
    min_sponsored_fee: Optional[Decimal]
    display_name: str

    def __init__(
        self,
        info: Union[AssetInfo, Mapping[str, Any]],
        *,
        config: Optional[EntityConfig] = None,
    ):
        """
        Create an Asset.

        Args:
            info: Raw asset data
            config: Registry to read the remap hook from; the process-wide
                registry when omitted

        Raises:
            InvalidAssetField: If id, name or sender is empty, or precision
                or height is not a non-negative integer
            InvalidNumericValue: If quantity or min_sponsored_fee is not numeric
            NonFiniteValue: If quantity or min_sponsored_fee is infinite
        """
        registry = config if config is not None else default_config
        if isinstance(info, Mapping):
            info = AssetInfo.from_dict(dict(info))
        remapped = registry.get(ConfigKey.REMAP_ASSET)(info)

        _check_text(remapped.id, "id")
        _check_text(remapped.name, "name")
        _check_text(remapped.sender, "sender")
        _check_non_negative_int(remapped.precision, "precision")
        _check_non_negative_int(remapped.height, "height")

        quantity = to_decimal(remapped.quantity)
        min_sponsored_fee = (
            to_decimal(remapped.min_sponsored_fee)
            if remapped.min_sponsored_fee is not None
            else None
        )

        values = {
            "ticker": remapped.ticker,
            "id": remapped.id,
            "name": remapped.name,
            "precision": remapped.precision,
            "description": remapped.description,
            "height": remapped.height,
            "timestamp": remapped.timestamp,
            "sender": remapped.sender,
            "quantity": quantity,
            "reissuable": remapped.reissuable,
            "has_script": bool(remapped.has_script) if remapped.has_script is not None else False,
            "min_sponsored_fee": min_sponsored_fee,
            "display_name": remapped.ticker if remapped.ticker is not None else remapped.name,
        }
        for field_name, value in values.items():
            object.__setattr__(self, field_name, value)

    def to_json(self) -> Dict[str, Any]:
        """Return a plain snapshot of every field (camelCase keys, Decimals kept)."""
        return {
            "ticker": self.ticker,
            "id": self.id,
            "name": self.name,
            "precision": self.precision,
            "description": self.description,
            "height": self.height,
            "timestamp": self.timestamp,
            "sender": self.sender,
            "quantity": self.quantity,
            "reissuable": self.reissuable,
            "hasScript": self.has_script,
            "minSponsoredFee": self.min_sponsored_fee,
        }

    def __str__(self) -> str:
        return self.id

    @staticmethod
    def is_asset(obj: Any) -> bool:
        """Check whether obj is an Asset."""
        return isinstance(obj, Asset)
