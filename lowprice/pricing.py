# lowprice/pricing.py
from typing import Dict, Iterable, List

from .models import Listing, PriceTier


def in_price_range(listing: Listing, tier: PriceTier) -> bool:
    """
    Keep a listing only when its price sits inside the tier.
    A price of 0 means the upstream value could not be parsed; it is never
    allowed to fall into the entry tier.
    """
    return listing.price > 0 and tier.contains(listing.price)


def lowest_by_brand(listings: Iterable[Listing]) -> List[Listing]:
    """
    Cheapest listing per canonical brand, ordered by ascending price.
    On equal prices the listing seen first is kept.
    """
    best: Dict[str, Listing] = {}
    for it in listings:
        current = best.get(it.brand)
        if current is None or it.price < current.price:
            best[it.brand] = it
    return sorted(best.values(), key=lambda it: it.price)
