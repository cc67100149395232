"""
Candle input models for data entities.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Union

from ..utils import convert_timestamp, safe_get

NumericValue = Union[Decimal, str, int, float]


@dataclass(frozen=True)
class CandleInfo:
    """Raw OHLCV data used to construct a Candle."""
    time: datetime
    open: NumericValue
    close: NumericValue
    high: NumericValue
    low: NumericValue
    volume: NumericValue
    quote_volume: NumericValue
    weighted_average_price: NumericValue
    max_height: int
    txs_count: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CandleInfo":
        """
        Create CandleInfo from a dictionary with snake_case or camelCase keys.

        Node payloads carry time as unix milliseconds or an ISO string, so it
        is converted to a datetime here. Candle itself keeps time as given.

        Raises:
            InvalidTimestamp: If time is a string that is not ISO 8601
        """
        return cls(
            time=convert_timestamp(data.get("time")),
            open=data.get("open"),
            close=data.get("close"),
            high=data.get("high"),
            low=data.get("low"),
            volume=data.get("volume"),
            quote_volume=safe_get(data, "quote_volume", "quoteVolume"),
            weighted_average_price=safe_get(
                data, "weighted_average_price", "weightedAveragePrice"
            ),
            max_height=safe_get(data, "max_height", "maxHeight"),
            txs_count=safe_get(data, "txs_count", "txsCount"),
        )
