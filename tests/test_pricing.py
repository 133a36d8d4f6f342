import pytest

from lowprice.models import Listing
from lowprice.pricing import in_price_range, lowest_by_brand
from lowprice.rules import PRICE_TIERS, get_tier


def listing(brand, price, title="item"):
    return Listing(brand=brand, api_brand=brand, title=title, price=price)


@pytest.mark.parametrize(
    "level,price,expected",
    [
        ("entry", 1, True),
        ("entry", 299_999, True),
        ("entry", 300_000, False),
        ("mid", 300_000, True),
        ("mid", 999_999, True),
        ("mid", 1_000_000, False),
        ("high", 1_000_000, True),
        ("high", 25_000_000, True),
        ("high", 999_999, False),
    ],
)
def test_tier_bounds_are_half_open(level, price, expected):
    assert in_price_range(listing("소니", price), get_tier(level)) is expected


def test_zero_price_never_in_range():
    for tier in PRICE_TIERS.values():
        assert not in_price_range(listing("소니", 0), tier)


def test_tiers_partition_prices():
    for price in (0, 1, 150_000, 299_999, 300_000, 650_000, 999_999, 1_000_000, 10**9):
        hits = [t.level for t in PRICE_TIERS.values() if t.contains(price)]
        assert len(hits) == 1, (price, hits)


def test_lowest_by_brand_keeps_cheapest():
    result = lowest_by_brand([listing("슈어", 280_000), listing("슈어", 150_000)])
    assert [it.price for it in result] == [150_000]


def test_lowest_by_brand_sorts_across_brands():
    result = lowest_by_brand([
        listing("소니", 250_000),
        listing("보스", 90_000),
        listing("소니", 120_000),
        listing("슈어", 99_000),
    ])
    assert [(it.brand, it.price) for it in result] == [("보스", 90_000), ("슈어", 99_000), ("소니", 120_000)]


def test_lowest_by_brand_tie_keeps_first_seen():
    first = listing("젠하이저", 200_000, title="first")
    second = listing("젠하이저", 200_000, title="second")
    assert lowest_by_brand([first, second]) == [first]


def test_lowest_by_brand_empty():
    assert lowest_by_brand([]) == []
