# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing data entities.
"""

import pytest
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from data_entities import Asset, AssetPair, config
from data_entities.models import AssetInfo, CandleInfo


DEFAULT_ASSET_INFO = AssetInfo(
    id="default-id",
    name="Default Name",
    precision=8,
    description="Default description",
    height=10,
    timestamp=datetime(2016, 4, 12, tzinfo=timezone.utc),
    sender="3Pxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx",
    quantity=1000,
    reissuable=False,
    has_script=True,
    min_sponsored_fee=100000,
)

DEFAULT_CANDLE_INFO = CandleInfo(
    time=datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    open="100.5",
    close="105.2",
    high="110.0",
    low="95.3",
    volume="50000",
    quote_volume="5250000",
    weighted_average_price="102.8",
    max_height=1000,
    txs_count=42,
)


def get_asset_data(**overrides: Any) -> AssetInfo:
    """Default asset info with field overrides."""
    return replace(DEFAULT_ASSET_INFO, **overrides)


def get_candle_data(**overrides: Any) -> CandleInfo:
    """Default candle info with field overrides."""
    return replace(DEFAULT_CANDLE_INFO, **overrides)


@pytest.fixture(autouse=True)
def restore_config():
    """Restore the process-wide config registry after every test."""
    yield
    config.reset()


@pytest.fixture
def asset_data() -> Callable[..., AssetInfo]:
    """Factory for asset info."""
    return get_asset_data


@pytest.fixture
def candle_data() -> Callable[..., CandleInfo]:
    """Factory for candle info."""
    return get_candle_data


@pytest.fixture
def fake_eight() -> Asset:
    """Asset with precision 8."""
    return Asset(get_asset_data(id="EIGHT", name="Eight Precision Token", precision=8))


@pytest.fixture
def fake_four() -> Asset:
    """Asset with precision 4."""
    return Asset(get_asset_data(id="FOUR", name="Four Precision Token", precision=4))


@pytest.fixture
def fake_zero() -> Asset:
    """Asset with precision 0."""
    return Asset(get_asset_data(id="ZERO", name="Zero Precision Token", precision=0))


@pytest.fixture
def pair_one(fake_eight, fake_zero) -> AssetPair:
    """Pair with precision difference -8."""
    return AssetPair(fake_eight, fake_zero)


@pytest.fixture
def pair_two(fake_zero, fake_four) -> AssetPair:
    """Pair with precision difference 4."""
    return AssetPair(fake_zero, fake_four)


@pytest.fixture
def node_asset_response() -> Dict[str, Any]:
    """Mock node asset-details response."""
    return {
        "assetId": "8LQW8f7P5d5PZM7GtZEBgaqRPGSzS3DfPuiXrURJ4AJS",
        "issueHeight": 1010,
        "issueTimestamp": 1460678400000,
        "issuer": "3PC4roN512iugc6xGVTTM2XkoWKEdSiiscd",
        "name": "WBTC",
        "description": "Bitcoin Token",
        "decimals": 8,
        "reissuable": False,
        "quantity": 2099999999999999,
        "scripted": False,
        "minSponsoredAssetFee": None,
    }
