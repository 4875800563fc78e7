"""Customer attributes understood by the multipass login endpoint.

The codec accepts any mapping; these models only give callers a typed way to
build one. Declared fields come first, in declaration order, and are dropped
when ``None``. Unknown fields follow in the order given and are always kept,
``None`` included.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _declared_fields(model: BaseModel, *, exclude: set[str] | None = None) -> dict[str, Any]:
    extras = model.model_extra or {}
    declared = model.model_dump(exclude_none=True, exclude=exclude)
    return {key: value for key, value in declared.items() if key not in extras}


class CustomerAddress(BaseModel):
    model_config = ConfigDict(extra="allow")

    address1: str | None = None
    city: str | None = None
    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    province: str | None = None
    zip: str | None = None
    province_code: str | None = None
    country_code: str | None = None
    default: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload = _declared_fields(self)
        payload.update(self.model_extra or {})
        return payload


class CustomerData(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)
    created_at: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    tag_string: str | None = None
    identifier: str | None = None
    remote_ip: str | None = None
    return_to: str | None = None
    addresses: list[CustomerAddress] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = _declared_fields(self, exclude={"addresses"})
        if self.addresses is not None:
            payload["addresses"] = [address.to_payload() for address in self.addresses]
        payload.update(self.model_extra or {})
        return payload
