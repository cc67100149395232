"""
Data Entities - precision-safe value objects for blockchain trading data.

This package models assets, trading pairs, money amounts, order prices and
candles on top of Decimal arithmetic, so conversions between coins and
tokens are exact and reproducible.
"""

from .entities import (
    Asset,
    AssetPair,
    Candle,
    Money,
    OrderPrice,
    MATCHER_SCALE,
)
from .exceptions import (
    DataEntitiesError,
    InvalidNumericValue,
    NonFiniteValue,
    InvalidAssetField,
    AssetMismatch,
    DivisionByZero,
    UnknownConfigKey,
    InvalidInputType,
    EmptyArguments,
    ConfigLoadError,
    InvalidTimestamp,
)
from .models import AssetInfo, CandleInfo
from .registry import (
    ConfigKey,
    EntityConfig,
    config,
    load_config_file,
    load_config_from_env,
)
from .utils import to_decimal

__all__ = [
    # Entities
    "Asset",
    "AssetPair",
    "Candle",
    "Money",
    "OrderPrice",
    "MATCHER_SCALE",
    # Raw inputs
    "AssetInfo",
    "CandleInfo",
    # Configuration
    "ConfigKey",
    "EntityConfig",
    "config",
    "load_config_file",
    "load_config_from_env",
    # Decimal boundary
    "to_decimal",
    # Exceptions
    "DataEntitiesError",
    "InvalidNumericValue",
    "NonFiniteValue",
    "InvalidAssetField",
    "AssetMismatch",
    "DivisionByZero",
    "UnknownConfigKey",
    "InvalidInputType",
    "EmptyArguments",
    "ConfigLoadError",
    "InvalidTimestamp",
]
