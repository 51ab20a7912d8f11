from __future__ import annotations

from collections.abc import Iterable

from relaystatus.schemas.status import Network


# Native-currency symbol -> CoinGecko coin id. Testnet currencies use their
# own symbols and are intentionally missing.
_PRICE_IDS = {
    "ETH": "ethereum",
    "POL": "polygon-ecosystem-token",
    "MATIC": "matic-network",
    "BNB": "binancecoin",
    "AVAX": "avalanche-2",
    "XDAI": "xdai",
    "APE": "apecoin",
    "XAI": "xai-blockchain",
    "IMX": "immutable-x",
    "XTZ": "tezos",
    "OAS": "oasys",
    "GLMR": "moonbeam",
}


def price_id_for_symbol(symbol: str | None) -> str | None:
    if not symbol:
        return None
    return _PRICE_IDS.get(symbol.strip().upper())


def resolve_price_ids(networks: Iterable[Network]) -> dict[str, str | None]:
    """Map each network name to the price-feed id of its native currency."""
    return {
        network.name: price_id_for_symbol(network.native_currency.symbol)
        for network in networks
    }


def requested_price_ids(price_ids: dict[str, str | None]) -> list[str]:
    return sorted({price_id for price_id in price_ids.values() if price_id})
