"""
Candle entity.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

from ..constants import CANDLE_STRING
from ..models.candle import CandleInfo
from ..registry import ConfigKey, EntityConfig, config as default_config
from ..utils import to_decimal

DECIMAL_FIELDS = (
    "open",
    "close",
    "high",
    "low",
    "volume",
    "quote_volume",
    "weighted_average_price",
)


@dataclass(frozen=True, init=False)
class Candle:
    """
    OHLCV snapshot.

    Raw CandleInfo passes through the ``remapCandle`` hook; the price and
    volume fields are then converted to Decimal while time, max_height and
    txs_count are kept as given.
    """
    time: datetime
    open: Decimal
    close: Decimal
    high: Decimal
    low: Decimal
    volume: Decimal
    quote_volume: Decimal
    weighted_average_price: Decimal
    max_height: int
    txs_count: int

    def __init__(
        self,
        info: Union[CandleInfo, Mapping[str, Any]],
        *,
        config: Optional[EntityConfig] = None,
    ):
        registry = config if config is not None else default_config
        if isinstance(info, Mapping):
            info = CandleInfo.from_dict(dict(info))
        remapped = registry.get(ConfigKey.REMAP_CANDLE)(info)

        values = {name: to_decimal(getattr(remapped, name)) for name in DECIMAL_FIELDS}
        values["time"] = remapped.time
        values["max_height"] = remapped.max_height
        values["txs_count"] = remapped.txs_count
        for field_name, value in values.items():
            object.__setattr__(self, field_name, value)

    def to_json(self) -> Dict[str, Any]:
        """Return every field; Decimal fields stay Decimal."""
        return {
            "time": self.time,
            "open": self.open,
            "close": self.close,
            "high": self.high,
            "low": self.low,
            "volume": self.volume,
            "quoteVolume": self.quote_volume,
            "weightedAveragePrice": self.weighted_average_price,
            "maxHeight": self.max_height,
            "txsCount": self.txs_count,
        }

    def __str__(self) -> str:
        return CANDLE_STRING

    @staticmethod
    def is_candle(obj: Any) -> bool:
        """Check whether obj is a Candle."""
        return isinstance(obj, Candle)
