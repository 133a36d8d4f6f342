# lowprice/report.py
from typing import List

from jinja2 import Environment, PackageLoader

from .models import Listing
from .rules import get_tier

# Templates ship inside the package (lowprice/templates)
env = Environment(loader=PackageLoader("lowprice", "templates"), keep_trailing_newline=True)


def _won(price: int) -> str:
    return f"{price:,}원"


def _range_str(level: str) -> str:
    tier = get_tier(level)
    if tier.high is None:
        return f"{_won(tier.low)} 이상"
    return f"{_won(tier.low)} ~ {_won(tier.high)} 미만"


def build_plaintext_report(keyword: str, level: str, listings: List[Listing]) -> str:
    template = env.get_template("results_text.txt")

    rows = [
        {
            "rank": idx,
            "brand": it.brand,
            "title": it.title,
            "price_str": _won(it.price),
            "link": it.link,
        }
        for idx, it in enumerate(listings, start=1)
    ]

    ctx = {
        "keyword": keyword,
        "level": level,
        "range_str": _range_str(level),
        "summary_text": f"{len(listings)} brands with a matching listing",
        "rows": rows,
    }
    return template.render(**ctx)
