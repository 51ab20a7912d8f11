from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from relaystatus.schemas.status import NetworkSummary, Sender


_SENDER_KEYS = frozenset(
    {"index", "address", "etherBalance", "ether_balance", "enabled", "active", "usdValue", "usd_value"}
)


@dataclass
class EnrichedStatus:
    data: dict[str, Any]
    senders: list[Sender]
    summary: NetworkSummary


def _as_float(value) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _as_flag(value) -> bool | None:
    return value if isinstance(value, bool) else None


def sender_usd_value(balance: float, usd_price: float | None) -> float | None:
    if usd_price is None:
        return None
    return balance * usd_price


def parse_senders(raw_senders) -> list[tuple[dict[str, Any], Sender]]:
    """Pair each raw sender object with its parsed model.

    Anything other than a list yields no senders, non-object entries are
    skipped, and unreadable balances count as zero.
    """
    if not isinstance(raw_senders, list):
        return []

    parsed: list[tuple[dict[str, Any], Sender]] = []
    for position, raw in enumerate(raw_senders):
        if not isinstance(raw, dict):
            continue
        index = raw.get("index")
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            index = position
        extra = {key: value for key, value in raw.items() if key not in _SENDER_KEYS}
        sender = Sender(
            index=index,
            address=str(raw.get("address") or ""),
            ether_balance=_as_float(raw.get("etherBalance")),
            enabled=_as_flag(raw.get("enabled")),
            active=_as_flag(raw.get("active")),
            **extra,
        )
        parsed.append((raw, sender))
    return parsed


def summarize_senders(senders: list[Sender], usd_price: float | None) -> NetworkSummary:
    balances = [sender.ether_balance for sender in senders]
    total_native = sum(balances)
    min_native = min(balances) if balances else None
    return NetworkSummary(
        sender_count=len(senders),
        zero_balance_count=sum(1 for balance in balances if balance <= 0),
        total_native=total_native,
        total_usd=sender_usd_value(total_native, usd_price),
        min_native=min_native,
        min_usd=sender_usd_value(min_native, usd_price) if min_native is not None else None,
    )


def enrich_status(payload: dict[str, Any], usd_price: float | None) -> EnrichedStatus:
    senders: list[Sender] = []
    embedded: list[dict[str, Any]] = []
    for raw, sender in parse_senders(payload.get("senders")):
        sender.usd_value = sender_usd_value(sender.ether_balance, usd_price)
        senders.append(sender)
        embedded.append({**raw, "usdValue": sender.usd_value})

    data = dict(payload)
    data["senders"] = embedded
    return EnrichedStatus(
        data=data,
        senders=senders,
        summary=summarize_senders(senders, usd_price),
    )
