# lowprice/config.py
import os
from dataclasses import dataclass

from .errors import MissingCredentialsError

NAVER_SHOP_URL = os.getenv(
    "NAVER_SHOP_URL", "https://openapi.naver.com/v1/search/shop.json"
).strip()
SEARCH_TIMEOUT = float(os.getenv("SEARCH_TIMEOUT", "8"))
SEARCH_WORKERS = max(1, int(os.getenv("SEARCH_WORKERS", "1")))

DEFAULT_KEYWORD = os.getenv("DEFAULT_KEYWORD", "헤드폰").strip() or "헤드폰"
DEFAULT_LEVEL = os.getenv("DEFAULT_LEVEL", "entry").strip().lower() or "entry"


@dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str

    def headers(self) -> dict[str, str]:
        return {
            "X-Naver-Client-Id": self.client_id,
            "X-Naver-Client-Secret": self.client_secret,
            "Accept": "application/json",
        }


def load_credentials() -> Credentials:
    """
    Read the Naver API key pair from the environment.
    Read on every call so a rotated secret is picked up without a restart.
    """
    client_id = os.getenv("NAVER_CLIENT_ID", "").strip()
    client_secret = os.getenv("NAVER_CLIENT_SECRET", "").strip()
    if not client_id or not client_secret:
        raise MissingCredentialsError("NAVER keys missing")
    return Credentials(client_id=client_id, client_secret=client_secret)
