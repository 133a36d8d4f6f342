# lowprice/pipeline.py
from typing import List, Optional

from fetchers import FETCHERS

from .config import SEARCH_WORKERS, Credentials, load_credentials
from .logger import get_logger
from .models import Listing
from .normalize import to_listing
from .planner import SearchFn, collect
from .pricing import in_price_range, lowest_by_brand
from .relevance import is_relevant
from .rules import BRANDS, get_strategy, get_tier

logger = get_logger(__name__)


def find_lowest(
    keyword: str,
    level: str,
    search: Optional[SearchFn] = None,
    credentials: Optional[Credentials] = None,
    workers: Optional[int] = None,
) -> List[Listing]:
    """
    Cheapest relevant listing per brand for keyword within the price tier.

    The tier is validated before anything else, then credentials (unless a
    search callable is supplied), so bad input never reaches the upstream.
    """
    tier = get_tier(level)
    strategy = get_strategy(level)

    if search is None:
        if credentials is None:
            credentials = load_credentials()
        search = FETCHERS["naver"](credentials)

    collected = collect(
        keyword,
        strategy,
        search,
        brands=BRANDS,
        workers=workers if workers is not None else SEARCH_WORKERS,
    )
    listings = [to_listing(brand, item) for brand, item in collected]

    relevant = [it for it in listings if is_relevant(it, keyword)]
    priced = [it for it in relevant if in_price_range(it, tier)]
    result = lowest_by_brand(priced)

    logger.info(
        "'%s' [%s]: %d collected, %d relevant, %d in range, %d brands returned",
        keyword, level, len(listings), len(relevant), len(priced), len(result),
    )
    return result
