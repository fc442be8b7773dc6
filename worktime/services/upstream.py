from __future__ import annotations

import json
import logging
from typing import Any
from urllib import error as urllib_error
from urllib import request as urllib_request

from worktime.errors import MissingTokenError, UpstreamError
from worktime.settings import get_settings

logger = logging.getLogger("worktime.upstream")


def _build_request(token: str) -> urllib_request.Request:
    settings = get_settings()
    return urllib_request.Request(
        url=settings.upstream_url,
        method="GET",
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": settings.upstream_user_agent,
        },
    )


def require_token(token: str | None) -> str:
    if not isinstance(token, str) or not token.strip():
        raise MissingTokenError()
    return token


def fetch_day_records(token: str | None) -> list[dict[str, Any]]:
    """Read the attendance summary for the token's owner.

    Returns the ``data`` list of the upstream body. Raises
    ``MissingTokenError`` before any network call when the token is blank and
    ``UpstreamError`` on a non-2xx answer. There is no timeout and no retry.
    """
    request = _build_request(require_token(token))
    try:
        with urllib_request.urlopen(request) as response:
            status_code = int(getattr(response, "status", 200) or 200)
            body = response.read().decode("utf-8", errors="replace")
    except urllib_error.HTTPError as exc:
        error_body = exc.read().decode("utf-8", errors="replace")
        logger.warning(
            "upstream_fetch_failed",
            extra={"status_code": int(exc.code), "url": request.full_url},
        )
        raise UpstreamError(int(exc.code), error_body) from exc

    if not 200 <= status_code < 300:
        logger.warning(
            "upstream_fetch_failed",
            extra={"status_code": status_code, "url": request.full_url},
        )
        raise UpstreamError(status_code, body)

    result = json.loads(body)
    records = result.get("data") if isinstance(result, dict) else None
    if records is None:
        records = []

    logger.info(
        "upstream_fetch_ok",
        extra={"status_code": status_code, "record_count": len(records)},
    )
    return records
