from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, StrictStr, model_validator,
)

API_VERSION = "2023-10-16"


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


# Read-only all the way down once validated; dumped as plain dicts and lists.
FrozenPayload = Annotated[Mapping[str, Any], AfterValidator(_freeze), PlainSerializer(_thaw)]
FrozenHeaders = Annotated[Mapping[str, str], AfterValidator(_freeze), PlainSerializer(_thaw)]


class EventRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictStr
    idempotency_key: StrictStr


class EventData(BaseModel):
    model_config = ConfigDict(frozen=True)

    object: FrozenPayload


class EventEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictStr
    object: Literal["event"] = "event"
    api_version: StrictStr = API_VERSION
    created: int = Field(..., ge=0)
    type: StrictStr
    data: EventData
    livemode: Literal[False] = False
    pending_webhooks: int = Field(default=1, ge=0)
    request: EventRequest


class DeliveryRecord(BaseModel):
    """One simulated inbound webhook HTTP request, as stored for inspection."""

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    pathname: StrictStr
    ip: StrictStr
    status_code: int = Field(default=200, ge=100, le=599)
    content_type: StrictStr = "application/json"
    content_length: int = Field(..., ge=0)
    headers: FrozenHeaders
    body: StrictStr

    @model_validator(mode="after")
    def content_length_matches_body(self) -> "DeliveryRecord":
        actual = len(self.body.encode("utf-8"))
        if self.content_length != actual:
            raise ValueError(
                f"content_length {self.content_length} does not match body size {actual}"
            )
        return self


class DeliverySummary(BaseModel):
    id: str
    method: str
    pathname: str
    ip: str
    status_code: int
    event_type: str | None
    created_at: datetime | None = None


class DeliveryDetail(DeliverySummary):
    content_type: str
    content_length: int
    headers: dict[str, str]
    body: str


class EventCount(BaseModel):
    event_type: str
    count: int


class SeedResult(BaseModel):
    inserted: int
    distribution: list[EventCount]
