from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NativeCurrency(CamelModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    decimals: int


class Network(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int
    title: str
    type: Literal["mainnet", "testnet"]
    native_currency: NativeCurrency


class Sender(CamelModel):
    model_config = ConfigDict(extra="allow")

    index: int
    address: str
    ether_balance: float = 0.0
    enabled: Optional[bool] = None
    active: Optional[bool] = None
    usd_value: Optional[float] = None

    @property
    def is_enabled(self) -> bool:
        return self.enabled is not False

    @property
    def is_active(self) -> bool:
        return self.active is not False


class NetworkSummary(CamelModel):
    sender_count: int
    zero_balance_count: int
    total_native: float
    total_usd: Optional[float] = None
    min_native: Optional[float] = None
    min_usd: Optional[float] = None


class NetworkOutcome(CamelModel):
    network: Network
    url: str
    ok: bool
    status: int
    price_id: Optional[str] = None
    usd_price: Optional[float] = None
    error: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    enriched_senders: Optional[list[Sender]] = None
    summary: Optional[NetworkSummary] = None

    @model_validator(mode="after")
    def _check_state(self) -> "NetworkOutcome":
        success_fields = (self.data, self.enriched_senders, self.summary)
        if self.ok:
            if any(value is None for value in success_fields) or self.error is not None:
                raise ValueError("successful outcome needs data, enriched senders and summary only")
        elif self.error is None or any(value is not None for value in success_fields):
            raise ValueError("failed outcome needs an error and no status data")
        return self

    @model_serializer(mode="wrap")
    def _drop_inapplicable(self, handler):
        dumped = handler(self)
        if self.ok:
            keys = ("error",)
        else:
            keys = ("data", "enriched_senders", "enrichedSenders", "summary")
        for key in keys:
            dumped.pop(key, None)
        return dumped


class PricingInfo(CamelModel):
    has_api_key: bool
    ids_requested: list[str] = Field(default_factory=list)
    ids_priced: list[str] = Field(default_factory=list)
    error: Optional[str] = None


class StatusSnapshot(CamelModel):
    generated_at: str
    count: int
    pricing: PricingInfo
    results: list[NetworkOutcome] = Field(default_factory=list)
