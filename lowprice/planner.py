# lowprice/planner.py
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Tuple

from .errors import UpstreamError
from .logger import get_logger
from .models import BrandSpec, SearchStrategy
from .rules import BRANDS

logger = get_logger(__name__)

RawItem = Dict[str, Any]
SearchFn = Callable[[str, SearchStrategy], List[RawItem]]


def build_query(alias: str, keyword: str) -> str:
    return f"{alias} {keyword}"


def _try_alias(
    alias: str, keyword: str, strategy: SearchStrategy, search: SearchFn
) -> List[RawItem]:
    query = build_query(alias, keyword)
    logger.debug("Searching %r (sort=%s, display=%d)", query, strategy.sort, strategy.display)
    try:
        return search(query, strategy) or []
    except UpstreamError as e:
        logger.warning("Search for %r failed, trying next alias: %s", query, e)
        return []


def search_brand(
    brand: BrandSpec, keyword: str, strategy: SearchStrategy, search: SearchFn
) -> List[RawItem]:
    """
    Try the brand's aliases in order and return the first non-empty batch.
    Later aliases are not queried once one has produced results.
    """
    batches = (_try_alias(alias, keyword, strategy, search) for alias in brand.aliases)
    items = next((b for b in batches if b), [])
    if items:
        logger.info("Brand %s: %d raw items for '%s'", brand.name, len(items), keyword)
    else:
        logger.info("Brand %s: no results for '%s' under any alias", brand.name, keyword)
    return items


def collect(
    keyword: str,
    strategy: SearchStrategy,
    search: SearchFn,
    brands: Iterable[BrandSpec] = BRANDS,
    workers: int = 1,
) -> List[Tuple[str, RawItem]]:
    """
    Run search_brand for every brand and return (canonical brand, raw item)
    pairs in brand declaration order, whatever order the searches finish in.
    """
    brands = list(brands)

    def run(brand: BrandSpec) -> List[RawItem]:
        return search_brand(brand, keyword, strategy, search)

    if workers > 1 and len(brands) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(brands))) as pool:
            batches = list(pool.map(run, brands))
    else:
        batches = [run(b) for b in brands]

    return [
        (brand.name, item)
        for brand, batch in zip(brands, batches)
        for item in batch
    ]
