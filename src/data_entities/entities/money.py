"""
Money entity.

An amount denominated in one asset. Internally the amount is kept in
coins, the smallest indivisible unit of the asset, and is always an
integer: construction floors the input (toward negative infinity).
Tokens are the human-readable amount, coins / 10^precision.

All arithmetic returns new Money instances. Two Money values may only be
combined or compared when their assets share the same id.

Example usage:
    money = Money.from_tokens("1.5", asset)
    total = money.add(Money.from_tokens("0.5", asset))
    total.to_tokens()  # "2.00000000"
"""

from decimal import Decimal, ROUND_DOWN, ROUND_FLOOR
from functools import reduce
from typing import Any, Dict, Optional

from ..exceptions import AssetMismatch, DivisionByZero, EmptyArguments
from ..utils import (
    DECIMAL_CONTEXT,
    NumericInput,
    round_to_integer,
    shift,
    to_decimal,
    to_fixed,
    to_format,
)
from .asset import Asset


class Money:
    """Monetary amount tied to a specific Asset."""

    __slots__ = ("_asset", "_coins", "_tokens")

    def __init__(self, coins: NumericInput, asset: Asset):
        """
        Create Money from a coin amount.

        Args:
            coins: Amount in coins; fractional coins are floored
            asset: Asset the amount is denominated in

        Raises:
            InvalidNumericValue: If coins is not numeric
            NonFiniteValue: If coins is infinite
        """
        floored = round_to_integer(to_decimal(coins), ROUND_FLOOR)
        self._asset = asset
        self._coins = floored
        self._tokens = shift(floored, -asset.precision)

    @property
    def asset(self) -> Asset:
        return self._asset

    # Accessors

    def get_coins(self) -> Decimal:
        """Coin amount. Decimal is immutable, so callers cannot alter this instance."""
        return self._coins

    def get_tokens(self) -> Decimal:
        """Token amount."""
        return self._tokens

    def to_coins(self) -> str:
        """Coin amount as an integer string."""
        return to_fixed(self._coins, 0)

    def to_tokens(self) -> str:
        """Token amount as a fixed-point string at asset precision."""
        return to_fixed(self._tokens, self._asset.precision)

    def to_format(self, places: Optional[int] = None) -> str:
        """Token amount with thousands grouping, rounded to places when given."""
        return to_format(self._tokens, places)

    # Arithmetic

    def add(self, money: "Money") -> "Money":
        """Return the sum of both amounts."""
        self._match_assets(money)
        return Money(DECIMAL_CONTEXT.add(self._coins, money.get_coins()), self._asset)

    def plus(self, money: "Money") -> "Money":
        """Alias for add()."""
        return self.add(money)

    def sub(self, money: "Money") -> "Money":
        """Return this amount minus money."""
        self._match_assets(money)
        return Money(DECIMAL_CONTEXT.subtract(self._coins, money.get_coins()), self._asset)

    def minus(self, money: "Money") -> "Money":
        """Alias for sub()."""
        return self.sub(money)

    def times(self, money: "Money") -> "Money":
        """
        Multiply the coin amounts.

        Works on coins, not tokens: for an asset with precision 8,
        2 tokens times 5 tokens is 200000000 * 500000000 coins.
        """
        self._match_assets(money)
        return Money(DECIMAL_CONTEXT.multiply(self._coins, money.get_coins()), self._asset)

    def div(self, money: "Money") -> "Money":
        """
        Divide the coin amounts; the quotient is floored like any other coin input.

        Coins are integral, so the floored quotient is computed exactly with
        integer division.

        Raises:
            AssetMismatch: If the assets differ
            DivisionByZero: If money holds zero coins
        """
        self._match_assets(money)
        if money.get_coins().is_zero():
            raise DivisionByZero("Division by zero: cannot divide Money by a zero amount")
        return Money(int(self._coins) // int(money.get_coins()), self._asset)

    # Comparison

    def eq(self, money: "Money") -> bool:
        self._match_assets(money)
        return self._coins == money.get_coins()

    def lt(self, money: "Money") -> bool:
        self._match_assets(money)
        return self._coins < money.get_coins()

    def lte(self, money: "Money") -> bool:
        self._match_assets(money)
        return self._coins <= money.get_coins()

    def gt(self, money: "Money") -> bool:
        self._match_assets(money)
        return self._coins > money.get_coins()

    def gte(self, money: "Money") -> bool:
        self._match_assets(money)
        return self._coins >= money.get_coins()

    # Derived values

    def safe_sub(self, money: "Money") -> "Money":
        """Subtract money if the assets match, otherwise return self unchanged."""
        if self._asset.id == money.asset.id:
            return self.sub(money)
        return self

    def to_non_negative(self) -> "Money":
        """Clamp negative amounts to zero; non-negative amounts return self."""
        if self._tokens < 0:
            return self.clone_with_tokens(0)
        return self

    def clone_with_coins(self, coins: NumericInput) -> "Money":
        """New Money of the same asset from a coin amount."""
        return Money(coins, self._asset)

    def clone_with_tokens(self, tokens: NumericInput) -> "Money":
        """New Money of the same asset from a token amount rounded to asset precision."""
        return Money(self._tokens_to_coins(tokens, self._asset.precision), self._asset)

    def convert_to(self, asset: Asset, exchange_rate: NumericInput) -> "Money":
        """Convert to another asset; see Money.convert()."""
        return Money.convert(self, asset, exchange_rate)

    # Serialization

    def to_json(self) -> Dict[str, Any]:
        return {
            "assetId": self._asset.id,
            "tokens": self.to_tokens(),
        }

    def __str__(self) -> str:
        return f"{self.to_tokens()} {self._asset.id}"

    def __repr__(self) -> str:
        return f"Money(coins={self.to_coins()}, asset={self._asset.id!r})"

    # Operators

    def __add__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.times(other)

    def __truediv__(self, other: Any) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.div(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.gte(other)

    def __eq__(self, other: Any) -> bool:
        # Equality never raises: different assets are simply unequal
        if not isinstance(other, Money):
            return NotImplemented
        return self._asset.id == other.asset.id and self._coins == other.get_coins()

    def __hash__(self) -> int:
        return hash((self._asset.id, self._coins))

    def _match_assets(self, money: "Money") -> None:
        if self._asset.id != money.asset.id:
            raise AssetMismatch(
                "You cannot apply arithmetic operations to Money created with different assets "
                f"({self._asset.id} and {money.asset.id})"
            )

    # Constructors and helpers

    @staticmethod
    def max(*money_list: "Money") -> "Money":
        """
        Return the largest amount.

        Raises:
            EmptyArguments: If called without arguments
            AssetMismatch: If the amounts have different assets
        """
        if not money_list:
            raise EmptyArguments("Money.max() requires at least one argument")
        return reduce(lambda best, money: best if best.gte(money) else money, money_list)

    @staticmethod
    def min(*money_list: "Money") -> "Money":
        """
        Return the smallest amount.

        Raises:
            EmptyArguments: If called without arguments
            AssetMismatch: If the amounts have different assets
        """
        if not money_list:
            raise EmptyArguments("Money.min() requires at least one argument")
        return reduce(lambda best, money: best if best.lte(money) else money, money_list)

    @staticmethod
    def is_money(obj: Any) -> bool:
        """Check whether obj is Money."""
        return isinstance(obj, Money)

    @staticmethod
    def convert(money: "Money", asset: Asset, exchange_rate: NumericInput) -> "Money":
        """
        Convert money to another asset using an exchange rate.

        Returns money itself when both assets share an id. Otherwise
        coins * rate / 10^(source precision - target precision), rounded
        toward zero.

        Args:
            money: Source amount
            asset: Target asset
            exchange_rate: Target tokens per source token
        """
        if money.asset.id == asset.id:
            return money

        rate = to_decimal(exchange_rate)
        scaled = shift(
            DECIMAL_CONTEXT.multiply(money.get_coins(), rate),
            asset.precision - money.asset.precision,
        )
        return Money(round_to_integer(scaled, ROUND_DOWN), asset)

    @staticmethod
    def from_tokens(tokens: NumericInput, asset: Asset) -> "Money":
        """Create Money from a token amount, e.g. "1.5"."""
        coins = shift(to_decimal(tokens), asset.precision)
        return Money(coins, asset)

    @staticmethod
    def from_coins(coins: NumericInput, asset: Asset) -> "Money":
        """Create Money from a coin amount."""
        return Money(coins, asset)

    @staticmethod
    def _tokens_to_coins(tokens: NumericInput, precision: int) -> Decimal:
        fixed = Decimal(to_fixed(to_decimal(tokens), precision))
        return shift(fixed, precision)
