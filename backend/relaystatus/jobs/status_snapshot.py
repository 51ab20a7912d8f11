from __future__ import annotations

import datetime
from collections.abc import Sequence

import aiohttp
from loguru import logger

from relaystatus.config.settings import settings
from relaystatus.enrichment.senders import enrich_status
from relaystatus.jobs.fanout import run_bounded
from relaystatus.pricing.identity import requested_price_ids, resolve_price_ids
from relaystatus.providers.coingecko import lookup_prices
from relaystatus.providers.relayer import probe_status
from relaystatus.registry.networks import NETWORKS
from relaystatus.schemas.status import Network, NetworkOutcome, PricingInfo, StatusSnapshot


def _session_options() -> dict:
    if settings.request_timeout_seconds is None:
        return {}
    return {"timeout": aiohttp.ClientTimeout(total=settings.request_timeout_seconds)}


async def _collect(
    session: aiohttp.ClientSession, networks: Sequence[Network], concurrency: int
) -> StatusSnapshot:
    # 1. Resolve price ids once and price them in a single batch
    price_ids = resolve_price_ids(networks)
    ids_requested = requested_price_ids(price_ids)
    api_key = settings.price_feed.coingecko_api_key
    lookup = await lookup_prices(session, ids_requested, api_key)

    # 2. Probe every relayer, enriching successful responses inline
    async def probe_network(network: Network) -> NetworkOutcome:
        price_id = price_ids.get(network.name)
        usd_price = lookup.prices.get(price_id) if price_id else None
        probe = await probe_status(session, network)
        if not probe.ok:
            return NetworkOutcome(
                network=network,
                url=probe.url,
                ok=False,
                status=probe.status,
                price_id=price_id,
                usd_price=usd_price,
                error=probe.error,
            )
        try:
            enriched = enrich_status(probe.payload or {}, usd_price)
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("Status from {} could not be enriched: {}", network.name, message)
            return NetworkOutcome(
                network=network,
                url=probe.url,
                ok=False,
                status=probe.status,
                price_id=price_id,
                usd_price=usd_price,
                error=message,
            )
        return NetworkOutcome(
            network=network,
            url=probe.url,
            ok=True,
            status=probe.status,
            price_id=price_id,
            usd_price=usd_price,
            data=enriched.data,
            enriched_senders=enriched.senders,
            summary=enriched.summary,
        )

    results = await run_bounded(networks, probe_network, concurrency)

    # 3. Assemble
    up = sum(1 for outcome in results if outcome.ok)
    logger.info("Status snapshot: {} up, {} down", up, len(results) - up)
    return StatusSnapshot(
        generated_at=datetime.datetime.now(datetime.UTC).isoformat(),
        count=len(results),
        pricing=PricingInfo(
            has_api_key=bool(api_key),
            ids_requested=ids_requested,
            ids_priced=sorted(lookup.prices),
            error=lookup.error,
        ),
        results=results,
    )


async def build_snapshot(
    networks: Sequence[Network] | None = None,
    session: aiohttp.ClientSession | None = None,
    concurrency: int | None = None,
) -> StatusSnapshot:
    networks = list(NETWORKS if networks is None else networks)
    if concurrency is None:
        concurrency = settings.fanout_concurrency
    if session is not None:
        return await _collect(session, networks, concurrency)

    async with aiohttp.ClientSession(**_session_options()) as owned_session:
        return await _collect(owned_session, networks, concurrency)
