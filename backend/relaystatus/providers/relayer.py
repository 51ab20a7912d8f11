from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import aiohttp
from loguru import logger

from relaystatus.config.settings import settings
from relaystatus.schemas.status import Network


@dataclass
class ProbeResult:
    url: str
    ok: bool
    status: int
    payload: dict[str, Any] | None = None
    error: str | None = None


def status_url(network: Network) -> str:
    return settings.relayer_url_template.format(name=network.name)


async def probe_status(session: aiohttp.ClientSession, network: Network) -> ProbeResult:
    """Request one relayer's /status endpoint. Never raises and never retries."""
    url = status_url(network)
    try:
        async with session.get(url, headers={"accept": "application/json"}) as response:
            if not 200 <= response.status < 300:
                logger.warning("Relayer {} replied HTTP {}", network.name, response.status)
                return ProbeResult(
                    url=url,
                    ok=False,
                    status=response.status,
                    error=f"HTTP {response.status}",
                )
            status = response.status
            payload = await response.json(content_type=None)
    except Exception as exc:
        message = str(exc) or exc.__class__.__name__
        logger.warning("Relayer {} unreachable: {}", network.name, message)
        return ProbeResult(url=url, ok=False, status=0, error=message)

    if not isinstance(payload, dict):
        logger.warning("Relayer {} returned a non-object status body", network.name)
        payload = {}
    return ProbeResult(url=url, ok=True, status=status, payload=payload)
