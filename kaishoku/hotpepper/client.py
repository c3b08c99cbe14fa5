from __future__ import annotations

import logging
from typing import Any

import httpx

from ..shops.models import SearchCriteria
from .config import HotPepperConfig

logger = logging.getLogger(__name__)


class DirectorySearchError(Exception):
    """Raised when the shop search cannot be completed."""


def build_search_params(criteria: SearchCriteria, config: HotPepperConfig) -> dict[str, Any]:
    """Translate search criteria into Hot Pepper query parameters."""
    params: dict[str, Any] = {
        "key": config.api_key,
        "keyword": criteria.keyword,
        "budget": criteria.budget or "",
        "format": config.response_format,
        "count": criteria.count,
        "start": criteria.start,
    }
    # Omitted rather than sent empty when there is no smoking preference.
    if criteria.smoking:
        params["no_smoking"] = criteria.smoking
    return params


def search_shops(
    criteria: SearchCriteria,
    config: HotPepperConfig,
    client: httpx.Client,
) -> list[dict[str, Any]]:
    """
    Query the shop search endpoint and return its shop records unchanged.

    Raises ``DirectorySearchError`` for transport errors, non-2xx responses,
    undecodable or malformed bodies, and error payloads reported by the API.
    """
    params = build_search_params(criteria, config)

    try:
        response = client.get(config.url, params=params, timeout=config.timeout)
    except httpx.HTTPError as exc:
        raise DirectorySearchError(f"Hot Pepper API request failed: {exc}") from exc

    if not response.is_success:
        raise DirectorySearchError(
            f"Hot Pepper API error: {response.status_code} {response.reason_phrase}"
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise DirectorySearchError("Hot Pepper API returned a non-JSON body") from exc

    results = (data.get("results") if isinstance(data, dict) else None) or {}
    if not isinstance(results, dict):
        raise DirectorySearchError("Hot Pepper API returned malformed results")
    errors = results.get("error")
    if errors:
        messages = "; ".join(
            str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
        )
        raise DirectorySearchError(f"Hot Pepper API error: {messages}")

    shops = results.get("shop") or []
    if not isinstance(shops, list) or not all(isinstance(shop, dict) for shop in shops):
        raise DirectorySearchError("Hot Pepper API returned a malformed shop list")
    logger.info(
        "Hot Pepper search keyword=%r start=%d count=%d returned %d shops",
        criteria.keyword, criteria.start, criteria.count, len(shops),
    )
    return shops
