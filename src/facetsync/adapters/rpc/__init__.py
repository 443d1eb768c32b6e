"""Public interface for the JSON-RPC routing-table observer."""

from __future__ import annotations

from .abi import AbiDecodingError, decode_address_array, decode_bytes4_array, encode_address_call
from .client import LoupeObserver, ObservationError, RpcError
from .schema import RpcErrorPayload, RpcResponse

__all__ = [
    "AbiDecodingError",
    "LoupeObserver",
    "ObservationError",
    "RpcError",
    "RpcErrorPayload",
    "RpcResponse",
    "decode_address_array",
    "decode_bytes4_array",
    "encode_address_call",
]
