from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

import aiohttp
from loguru import logger

from relaystatus.config.settings import settings


_SIMPLE_PRICE_PATH = "/simple/price"


class PriceLookupError(Exception):
    """The batched price request failed as a whole."""


@dataclass
class PriceLookup:
    prices: dict[str, float] = field(default_factory=dict)
    error: str | None = None


def _build_url() -> str:
    base_url = settings.price_feed.coingecko_base_url.rstrip("/")
    return f"{base_url}{_SIMPLE_PRICE_PATH}"


def _usd_quote(entry) -> float | None:
    if not isinstance(entry, dict):
        return None
    value = entry.get("usd")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


async def fetch_usd_prices(
    session: aiohttp.ClientSession, ids: Iterable[str], api_key: str | None = None
) -> dict[str, float]:
    price_ids = sorted(set(ids))
    if not price_ids:
        return {}

    headers = {"accept": "application/json"}
    if api_key:
        headers[settings.price_feed.coingecko_api_key_header] = api_key
    params = {"ids": ",".join(price_ids), "vs_currencies": "usd"}

    try:
        async with session.get(_build_url(), params=params, headers=headers) as response:
            if not 200 <= response.status < 300:
                raise PriceLookupError(f"HTTP {response.status}")
            payload = await response.json(content_type=None)
    except PriceLookupError:
        raise
    except Exception as exc:
        raise PriceLookupError(str(exc) or exc.__class__.__name__) from exc

    if not isinstance(payload, dict):
        return {}

    prices: dict[str, float] = {}
    for price_id in price_ids:
        quote = _usd_quote(payload.get(price_id))
        if quote is not None:
            prices[price_id] = quote
    return prices


async def lookup_prices(
    session: aiohttp.ClientSession, ids: Iterable[str], api_key: str | None = None
) -> PriceLookup:
    try:
        prices = await fetch_usd_prices(session, ids, api_key)
    except PriceLookupError as exc:
        logger.warning("Price lookup failed, continuing without USD values: {}", exc)
        return PriceLookup(error=str(exc))
    return PriceLookup(prices=prices)
