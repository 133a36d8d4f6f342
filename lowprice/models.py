# lowprice/models.py
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class BrandSpec:
    """A canonical brand plus the alias strings used to query for it, in order."""
    name: str
    aliases: Tuple[str, ...]

    def __post_init__(self):
        if not self.aliases:
            raise ValueError(f"brand {self.name!r} needs at least one alias")


@dataclass(frozen=True)
class PriceTier:
    """
    Half-open price interval [low, high) in KRW.
    high=None means the tier has no upper bound.
    """
    level: str
    low: int
    high: Optional[int] = None

    def contains(self, price: int) -> bool:
        if price < self.low:
            return False
        return self.high is None or price < self.high


@dataclass(frozen=True)
class SearchStrategy:
    sort: str
    display: int


@dataclass(frozen=True)
class KeywordRule:
    categories: Tuple[str, ...] = ()
    exclude: Optional[re.Pattern] = None


@dataclass(frozen=True)
class Listing:
    """
    Normalized representation of one shopping search result.
    brand is the canonical brand the query was issued for; api_brand is
    whatever the upstream labelled the item with.
    """
    brand: str
    api_brand: str
    title: str
    price: int = 0
    image: str = ""
    link: str = ""
    category1: str = ""
    category2: str = ""
    category3: str = ""
    category4: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand": self.brand,
            "apiBrand": self.api_brand,
            "title": self.title,
            "price": self.price,
            "image": self.image,
            "link": self.link,
            "category1": self.category1,
            "category2": self.category2,
            "category3": self.category3,
            "category4": self.category4,
        }
