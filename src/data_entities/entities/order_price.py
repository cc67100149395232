"""
OrderPrice entity.

A price in a trading pair, stored in matcher coins: tokens scaled by
10^precision_difference and by a fixed matcher factor of 10^8.
"""

from decimal import Decimal
from typing import Any, Dict

from ..constants import MATCHER_SCALE_EXPONENT
from ..exceptions import InvalidInputType
from ..utils import (
    NumericInput,
    is_numeric_input,
    pow10,
    shift,
    to_decimal,
    to_fixed,
    to_format,
)
from .asset_pair import AssetPair

MATCHER_SCALE = pow10(MATCHER_SCALE_EXPONENT)


def _matcher_exponent(precision_difference: int) -> int:
    return precision_difference + MATCHER_SCALE_EXPONENT


def _check_amount(amount: Any) -> None:
    if not is_numeric_input(amount):
        raise InvalidInputType(
            "Please use strings, numbers, or Decimal to create instances of OrderPrice, "
            f"got {type(amount).__name__}"
        )


class OrderPrice:
    """Order price tied to an AssetPair."""

    __slots__ = ("_pair", "_matcher_coins", "_tokens")

    def __init__(self, matcher_coins: NumericInput, pair: AssetPair):
        """
        Create an OrderPrice from matcher coins.

        Args:
            matcher_coins: Price in matcher coins
            pair: Trading pair the price belongs to
        """
        coins = to_decimal(matcher_coins)
        self._pair = pair
        self._matcher_coins = coins
        self._tokens = shift(coins, -_matcher_exponent(pair.precision_difference))

    @property
    def pair(self) -> AssetPair:
        return self._pair

    def get_matcher_coins(self) -> Decimal:
        """Matcher coin amount (immutable Decimal)."""
        return self._matcher_coins

    def get_tokens(self) -> Decimal:
        """Token price (immutable Decimal)."""
        return self._tokens

    def to_matcher_coins(self) -> str:
        """Matcher coins as an integer string."""
        return to_fixed(self._matcher_coins, 0)

    def to_tokens(self) -> str:
        """Token price as a fixed-point string at price-asset precision."""
        return to_fixed(self._tokens, self._pair.price_asset.precision)

    def to_format(self) -> str:
        """Token price with thousands grouping at price-asset precision."""
        return to_format(self._tokens, self._pair.price_asset.precision)

    def to_json(self) -> Dict[str, Any]:
        return {
            "amountAssetId": self._pair.amount_asset.id,
            "priceAssetId": self._pair.price_asset.id,
            "priceTokens": self.to_tokens(),
        }

    def __str__(self) -> str:
        return f"{self.to_tokens()} {self._pair.amount_asset.id}/{self._pair.price_asset.id}"

    def __repr__(self) -> str:
        return f"OrderPrice(matcher_coins={self.to_matcher_coins()}, pair={str(self._pair)!r})"

    @staticmethod
    def from_matcher_coins(coins: NumericInput, pair: AssetPair) -> "OrderPrice":
        """
        Create an OrderPrice from matcher coins.

        Raises:
            InvalidInputType: If coins is not a str, int, float or Decimal
            InvalidNumericValue: If coins is not numeric
        """
        _check_amount(coins)
        return OrderPrice(to_decimal(coins), pair)

    @staticmethod
    def from_tokens(tokens: NumericInput, pair: AssetPair) -> "OrderPrice":
        """
        Create an OrderPrice from a token price.

        The price is rounded to price-asset precision before scaling.

        Raises:
            InvalidInputType: If tokens is not a str, int, float or Decimal
            InvalidNumericValue: If tokens is not numeric
        """
        _check_amount(tokens)
        fixed = Decimal(to_fixed(to_decimal(tokens), pair.price_asset.precision))
        coins = shift(fixed, _matcher_exponent(pair.precision_difference))
        return OrderPrice(coins, pair)

    @staticmethod
    def is_order_price(obj: Any) -> bool:
        """Check whether obj is an OrderPrice."""
        return isinstance(obj, OrderPrice)
