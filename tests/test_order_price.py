# -*- coding: utf-8 -*-
"""
Tests for OrderPrice.
"""

import pytest
from decimal import Decimal

from data_entities import AssetPair, OrderPrice, MATCHER_SCALE
from data_entities.exceptions import InvalidInputType, InvalidNumericValue


class TestOrderPriceCreation:
    """Test building OrderPrice instances."""

    def test_is_order_price(self, pair_one):
        """Constructed prices pass the identity check."""
        assert OrderPrice.is_order_price(OrderPrice(Decimal(10), pair_one))

    def test_rejects_lookalikes(self, pair_one):
        """Plain objects are not order prices."""
        assert not OrderPrice.is_order_price({})
        assert not OrderPrice.is_order_price({"pair": pair_one})

    def test_keeps_pair_reference(self, pair_one):
        assert OrderPrice(Decimal(10), pair_one).pair is pair_one

    def test_from_matcher_coins(self, pair_two):
        price = OrderPrice.from_matcher_coins("100000000", pair_two)
        assert OrderPrice.is_order_price(price)
        assert price.to_matcher_coins() == "100000000"

    def test_from_tokens(self, pair_two):
        price = OrderPrice.from_tokens("5.0000", pair_two)
        assert OrderPrice.is_order_price(price)
        assert price.to_tokens() == "5.0000"

    def test_from_tokens_rounds_to_price_precision(self, pair_two):
        """Token input is rounded to price-asset precision before scaling."""
        price = OrderPrice.from_tokens("1.23456", pair_two)
        assert price.to_tokens() == "1.2346"
        assert price.to_matcher_coins() == "1234600000000"

    def test_matcher_scale(self):
        assert MATCHER_SCALE == Decimal(100000000)


class TestOrderPriceScaling:
    """Test matcher-coin scaling."""

    def test_tokens_from_matcher_coins(self, pair_two):
        """tokens = coins / (10^precision_difference * 10^8)."""
        price = OrderPrice.from_matcher_coins("1000000000000", pair_two)
        assert price.get_tokens() == Decimal(1)
        assert price.to_tokens() == "1.0000"

    def test_negative_precision_difference(self, pair_one):
        """A pair with difference -8 cancels the matcher scale."""
        price = OrderPrice.from_tokens(7, pair_one)
        assert price.to_matcher_coins() == "7"
        assert price.to_tokens() == "7"

    def test_large_matcher_coins(self, pair_two):
        """Scaling is exact for prices with more than 64 digits."""
        coins = "7" * 70 + "1234" + "0" * 8
        price = OrderPrice.from_matcher_coins(coins, pair_two)
        assert price.to_tokens() == "7" * 70 + ".1234"
        assert price.to_matcher_coins() == coins
        assert OrderPrice.from_tokens(price.to_tokens(), pair_two).to_matcher_coins() == coins

    def test_accessors(self, pair_one):
        price = OrderPrice(Decimal(500), pair_one)
        assert price.get_matcher_coins() == Decimal(500)
        assert format(price.get_matcher_coins(), "f") == "500"
        assert isinstance(price.get_tokens(), Decimal)

    @pytest.mark.parametrize("tokens", ["0.0001", "1.0000", "999.9999", "0.5000", "1.5000"])
    def test_round_trip(self, pair_two, tokens):
        """tokens -> matcher coins -> tokens is exact."""
        price = OrderPrice.from_tokens(tokens, pair_two)
        restored = OrderPrice.from_matcher_coins(price.to_matcher_coins(), pair_two)
        assert restored.to_tokens() == tokens


class TestOrderPriceValidation:
    """Test rejected input."""

    @pytest.mark.parametrize("bad", [{}, [], None, True, object()])
    def test_invalid_type(self, pair_two, bad):
        with pytest.raises(InvalidInputType, match="Please use strings, numbers, or Decimal"):
            OrderPrice.from_matcher_coins(bad, pair_two)
        with pytest.raises(InvalidInputType):
            OrderPrice.from_tokens(bad, pair_two)

    def test_invalid_type_is_type_error(self, pair_two):
        with pytest.raises(TypeError):
            OrderPrice.from_tokens({}, pair_two)

    def test_invalid_number(self, pair_two):
        with pytest.raises(InvalidNumericValue, match="Invalid numeric value"):
            OrderPrice.from_matcher_coins("bad", pair_two)
        with pytest.raises(InvalidNumericValue, match="Invalid numeric value"):
            OrderPrice.from_tokens("bad", pair_two)


class TestOrderPriceSerialization:
    """Test string and JSON forms."""

    def test_to_json(self, pair_one):
        json_data = OrderPrice(Decimal(10), pair_one).to_json()
        assert json_data["amountAssetId"] == "EIGHT"
        assert json_data["priceAssetId"] == "ZERO"
        assert json_data["priceTokens"] == "10"

    def test_to_string(self, pair_two):
        price = OrderPrice.from_tokens("1.5", pair_two)
        assert str(price) == "1.5000 ZERO/FOUR"

    def test_to_format(self, fake_zero, fake_four):
        pair = AssetPair(fake_zero, fake_four)
        price = OrderPrice.from_tokens("12345.5", pair)
        assert price.to_format() == "12,345.5000"
