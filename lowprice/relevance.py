# lowprice/relevance.py
"""
Relevance checks applied to every normalized listing, in order:

1. brand identity  - the upstream brand label names one of our brands
2. keyword         - category or title matches, exclusion pattern does not
3. series          - title matches a known product line, when one is configured

A listing that fails any stage is dropped silently.
"""
from .models import Listing
from .rules import KNOWN_BRAND_NAMES, keyword_rule, series_patterns


def matches_brand(api_brand: str) -> bool:
    value = (api_brand or "").lower()
    return any(name in value for name in KNOWN_BRAND_NAMES)


def matches_keyword(listing: Listing, keyword: str) -> bool:
    rule = keyword_rule(keyword)
    title = listing.title or ""

    # Exclusion always wins, check it first
    if rule.exclude is not None and rule.exclude.search(title):
        return False

    in_category = any(
        cat in listing.category3 or cat in listing.category2
        for cat in rule.categories
    )
    in_title = keyword.lower() in title.lower()
    return in_category or in_title


def matches_series(brand: str, keyword: str, title: str) -> bool:
    patterns = series_patterns(brand, keyword)
    if not patterns:
        return True
    return any(p.search(title or "") for p in patterns)


def is_relevant(listing: Listing, keyword: str) -> bool:
    return (
        matches_brand(listing.api_brand)
        and matches_keyword(listing, keyword)
        and matches_series(listing.brand, keyword, listing.title)
    )
