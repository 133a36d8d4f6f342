# lowprice/rules.py
"""
Static matching rules: which brands to query and how, price tiers, and the
title/category patterns that decide whether a search hit is the product we
asked for. Everything here is built once at import and never mutated.
"""
import re
from typing import Dict, List, Mapping

from .errors import InvalidLevelError
from .models import BrandSpec, KeywordRule, PriceTier, SearchStrategy

BRANDS: tuple[BrandSpec, ...] = (
    BrandSpec("슈어", ("Shure", "슈어")),
    BrandSpec("젠하이저", ("Sennheiser", "젠하이저")),
    BrandSpec("오디오테크니카", ("Audio-Technica", "Audio Technica", "오디오테크니카")),
    BrandSpec("소니", ("Sony", "소니")),
    BrandSpec("보스", ("Bose", "보스")),
)

# Lowercased; matched as substrings of the upstream "brand" field
KNOWN_BRAND_NAMES: tuple[str, ...] = (
    "shure", "슈어",
    "sennheiser", "젠하이저",
    "audio-technica", "audio technica", "오디오테크니카",
    "sony", "소니",
    "bose", "보스",
)

PRICE_TIERS: Mapping[str, PriceTier] = {
    "entry": PriceTier("entry", 0, 300_000),
    "mid": PriceTier("mid", 300_000, 1_000_000),
    "high": PriceTier("high", 1_000_000, None),
}

SEARCH_STRATEGIES: Mapping[str, SearchStrategy] = {
    "entry": SearchStrategy(sort="asc", display=15),
    "mid": SearchStrategy(sort="sim", display=60),
    "high": SearchStrategy(sort="dsc", display=60),
}

_CAMERA_GEAR = r"카메라|렌즈|미러리스|바디|ILCE|ZV-|SEL|알파"

KEYWORD_RULES: Mapping[str, KeywordRule] = {
    "헤드폰": KeywordRule(("헤드폰",), re.compile(f"({_CAMERA_GEAR})", re.I)),
    "이어폰": KeywordRule(("이어폰",), re.compile(f"({_CAMERA_GEAR})", re.I)),
    "마이크": KeywordRule(
        ("마이크",),
        re.compile(f"({_CAMERA_GEAR}|EOS|RF|Z\\s*mount|캠코더|짐벌)", re.I),
    ),
}

EMPTY_RULE = KeywordRule()


def _series(*patterns: str) -> List[re.Pattern]:
    # ASCII word boundaries: "소니WH-1000XM5" must still match \bwh
    return [re.compile(p, re.I | re.A) for p in patterns]


SERIES_WHITELIST: Mapping[str, Dict[str, List[re.Pattern]]] = {
    "젠하이저": {
        # 모멘텀 sits outside \b...\b: Hangul has no ASCII word boundary
        "헤드폰": _series(r"\bmomentum\b|모멘텀", r"\bhd\s?\d{2,3}\b"),
        "이어폰": _series(r"\bie\s?\d{2,3}\b"),
        "마이크": [],
    },
    "슈어": {
        "헤드폰": _series(r"\bsrh\s?\d{2,3}\b"),
        "이어폰": _series(r"\bse\s?\d{2,3}\b"),
        "마이크": _series(r"\bsm\s?\d{2,3}\b", r"\bmv\d{1,3}\b"),
    },
    "오디오테크니카": {
        "헤드폰": _series(r"\bath[-\s]?m", r"\bath[-\s]?ad"),
        "이어폰": _series(r"\bath[-\s]?ck"),
        "마이크": _series(r"\bat2?0\d{2}\b", r"\bat4?0\d{2}\b"),
    },
    "소니": {
        "헤드폰": _series(r"\bwh[-\s]?\w+", r"\bmdr[-\s]?\w+"),
        "이어폰": _series(r"\bwf[-\s]?\w+"),
        "마이크": _series(r"\becm[-\s]?\w+"),
    },
    "보스": {
        "헤드폰": _series(r"\b(qc|quiet\s?comfort|nc700)\b"),
        "이어폰": _series(r"\b(qc|quiet\s?comfort)\b"),
        "마이크": [],
    },
}


def get_tier(level: str) -> PriceTier:
    tier = PRICE_TIERS.get(level)
    if tier is None:
        raise InvalidLevelError(level)
    return tier


def get_strategy(level: str) -> SearchStrategy:
    get_tier(level)
    return SEARCH_STRATEGIES[level]


def keyword_rule(keyword: str) -> KeywordRule:
    return KEYWORD_RULES.get(keyword, EMPTY_RULE)


def series_patterns(brand: str, keyword: str) -> List[re.Pattern]:
    return SERIES_WHITELIST.get(brand, {}).get(keyword) or []
