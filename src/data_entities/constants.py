"""
Constants for data entities.
"""

# Matcher pricing: OrderPrice values carry 10^8 extra fixed-point digits
MATCHER_SCALE_EXPONENT = 8

# Config keys
REMAP_ASSET_KEY = "remapAsset"
REMAP_CANDLE_KEY = "remapCandle"

# Environment variables read by load_config_from_env()
ENV_REMAP_ASSET = "DATA_ENTITIES_REMAP_ASSET"
ENV_REMAP_CANDLE = "DATA_ENTITIES_REMAP_CANDLE"

# Candle.__str__ placeholder
CANDLE_STRING = "[object Candle]"
