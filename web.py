"""
HTTP surface for the low-price finder.

handle_search() is transport-agnostic: it takes the request method and query
parameters and returns (status, headers, body). The FastAPI app below is a
thin wrapper around it; serverless adapters can call it directly.

    uvicorn web:app --host 0.0.0.0 --port 8000
"""
import json
import os
from typing import Any, Dict, Mapping, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.responses import Response

from lowprice.config import DEFAULT_KEYWORD, DEFAULT_LEVEL
from lowprice.errors import InvalidLevelError, MissingCredentialsError
from lowprice.logger import get_logger
from lowprice.pipeline import find_lowest

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
}

HandlerResult = Tuple[int, Dict[str, str], str]


def _json(status: int, payload: Dict[str, Any]) -> HandlerResult:
    headers = {"Content-Type": "application/json; charset=utf-8", **CORS_HEADERS}
    return status, headers, json.dumps(payload, ensure_ascii=False)


def _error(status: int, code: str, message: str) -> HandlerResult:
    return _json(status, {"error": code, "message": message})


def handle_search(
    method: str, params: Optional[Mapping[str, str]] = None, search=None
) -> HandlerResult:
    if method.upper() == "OPTIONS":
        return 204, dict(CORS_HEADERS), ""

    params = params or {}
    keyword = (params.get("keyword") or "").strip() or DEFAULT_KEYWORD
    level = (params.get("level") or "").strip() or DEFAULT_LEVEL

    try:
        items = find_lowest(keyword, level, search=search)
    except InvalidLevelError as e:
        logger.info("Rejected search for '%s': %s", keyword, e)
        return _error(400, "invalid_level", str(e))
    except MissingCredentialsError as e:
        logger.error("Search unavailable: %s", e)
        return _error(500, "config", str(e))
    except Exception as e:
        logger.exception("Unhandled error searching '%s' [%s]: %s", keyword, level, e)
        return _error(500, "internal", str(e))

    return _json(200, {"items": [it.to_dict() for it in items]})


app = FastAPI(title="lowprice", version="1.0.0")


def _to_response(result: HandlerResult) -> Response:
    status, headers, body = result
    return Response(content=body, status_code=status, headers=headers)


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.api_route("/api/search", methods=["GET", "OPTIONS"])
def search(request: Request):
    return _to_response(handle_search(request.method, dict(request.query_params)))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "web:app",
        host=os.getenv("APP_HOST", "0.0.0.0"),
        port=int(os.getenv("APP_PORT", "8000")),
    )
