"""Pydantic models describing JSON-RPC response envelopes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class RpcBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RpcErrorPayload(RpcBaseModel):
    code: int
    message: str
    data: object | None = None


class RpcResponse(RpcBaseModel):
    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: str | None = None
    error: RpcErrorPayload | None = None

    @field_validator("result", mode="before")
    @classmethod
    def _normalize_hex(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value
