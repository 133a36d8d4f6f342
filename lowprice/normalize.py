# lowprice/normalize.py
import re
from typing import Any, Dict

from bs4 import BeautifulSoup

from .models import Listing

_NON_DIGIT = re.compile(r"[^0-9]")
_ANGLE_SPAN = re.compile(r"<[^>]*>")


def strip_markup(text: str | None) -> str:
    """
    Drop markup from an upstream title ("<b>Sony</b> WH-1000XM5" -> "Sony WH-1000XM5").
    Entities are decoded first, then every remaining <...> span is removed
    whether or not it is a real tag.
    """
    if not text:
        return ""
    decoded = BeautifulSoup(str(text), "html.parser").get_text()
    return _ANGLE_SPAN.sub("", decoded)


def parse_price(value: Any) -> int:
    if value is None:
        return 0
    digits = _NON_DIGIT.sub("", str(value))
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        return 0


def _field(item: Dict[str, Any], key: str) -> str:
    value = item.get(key)
    return str(value) if value else ""


def to_listing(brand: str, item: Dict[str, Any]) -> Listing:
    """
    Map one raw shop.json item to a Listing tagged with the canonical brand
    it was searched under. Missing fields become "".
    """
    return Listing(
        brand=brand,
        api_brand=_field(item, "brand"),
        title=strip_markup(item.get("title")),
        price=parse_price(item.get("lprice") or item.get("price") or 0),
        image=_field(item, "image"),
        link=_field(item, "link"),
        category1=_field(item, "category1"),
        category2=_field(item, "category2"),
        category3=_field(item, "category3"),
        category4=_field(item, "category4"),
    )
