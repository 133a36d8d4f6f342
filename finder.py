import argparse
import json
import sys
from typing import List, Optional

from lowprice.config import DEFAULT_KEYWORD, DEFAULT_LEVEL, SEARCH_WORKERS
from lowprice.errors import InvalidLevelError, MissingCredentialsError
from lowprice.logger import get_logger
from lowprice.pipeline import find_lowest
from lowprice.report import build_plaintext_report
from lowprice.rules import PRICE_TIERS

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_LEVEL = 2
EXIT_NO_CREDENTIALS = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the cheapest matching listing per brand on Naver Shopping."
    )
    parser.add_argument("keyword", nargs="?", default=DEFAULT_KEYWORD)
    parser.add_argument(
        "--level",
        default=DEFAULT_LEVEL,
        help=f"price tier ({', '.join(PRICE_TIERS)})",
    )
    parser.add_argument("--format", choices=("json", "text"), default="text")
    parser.add_argument("--workers", type=int, default=SEARCH_WORKERS)
    return parser.parse_args(argv)


def run_once(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger.info("Searching '%s' at level %s", args.keyword, args.level)

    try:
        items = find_lowest(args.keyword, args.level, workers=max(1, args.workers))
    except InvalidLevelError as e:
        logger.error("%s (expected one of: %s)", e, ", ".join(PRICE_TIERS))
        return EXIT_INVALID_LEVEL
    except MissingCredentialsError as e:
        logger.error("%s; set NAVER_CLIENT_ID and NAVER_CLIENT_SECRET.", e)
        return EXIT_NO_CREDENTIALS

    if args.format == "json":
        out = json.dumps({"items": [it.to_dict() for it in items]}, ensure_ascii=False, indent=2)
    else:
        out = build_plaintext_report(args.keyword, args.level, items)
    sys.stdout.write(out.rstrip("\n") + "\n")
    return EXIT_OK


if __name__ == "__main__":
    try:
        raise SystemExit(run_once())
    except Exception as e:
        logger.exception("Fatal search error: %s", e)
        raise SystemExit(1)
