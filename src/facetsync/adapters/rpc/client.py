"""JSON-RPC observer for the live routing table of a proxy."""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from facetsync.adapters.fingerprint import fingerprint_bytecode
from facetsync.adapters.http_resilience import ResilienceConfig, ResilientClient
from facetsync.config.reconcile import FingerprintScheme
from facetsync.config.rpc import RpcConfig, get_rpc_config
from facetsync.domain.ports.observation import ObservationSource
from facetsync.domain.types import ObservedModuleRecord

from .abi import (
    FACET_ADDRESSES_SELECTOR,
    FACET_FUNCTION_SELECTORS_SELECTOR,
    decode_address_array,
    decode_bytes4_array,
    encode_address_call,
)
from .schema import RpcResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from facetsync.domain.types import Address

log = getLogger(__name__)

_EMPTY_CODE = frozenset({"", "0x"})


class RpcError(RuntimeError):
    """Raised when the node answers with a JSON-RPC error object."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class ObservationError(RuntimeError):
    """Raised when the observed chain state is inconsistent."""


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class LoupeObserver:
    """Read a proxy's routing table through its loupe functions.

    Each module's selectors are returned sorted and its fingerprint is computed
    from the code currently deployed at the module address.
    """

    config: RpcConfig = field(default_factory=get_rpc_config)
    scheme: FingerprintScheme = FingerprintScheme.ZKSYNC
    block: str = "latest"
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _ids: itertools.count[int] = field(default_factory=lambda: itertools.count(1), repr=False)

    def __call__(self, proxy: Address) -> tuple[ObservedModuleRecord, ...]:
        return asyncio.run(self._observe_async(proxy))

    async def _observe_async(self, proxy: Address) -> tuple[ObservedModuleRecord, ...]:
        async with self.client_factory(self.config.resilience) as client:
            addresses = decode_address_array(
                await self._eth_call(client, proxy, FACET_ADDRESSES_SELECTOR)
            )
            log.info("Proxy %s routes to %s modules", proxy, len(addresses))

            records: list[ObservedModuleRecord] = []
            for address in addresses:
                selectors = decode_bytes4_array(
                    await self._eth_call(
                        client,
                        proxy,
                        encode_address_call(FACET_FUNCTION_SELECTORS_SELECTOR, address),
                    )
                )
                code = await self._request(client, "eth_getCode", [address, self.block])
                if code in _EMPTY_CODE:
                    raise ObservationError(f"Routed module {address} has no deployed code")
                records.append(
                    ObservedModuleRecord(
                        address=address,
                        selectors=tuple(sorted(selectors)),
                        fingerprint=fingerprint_bytecode(code, self.scheme),
                    )
                )
                log.debug("Module %s serves %s selectors", address, len(selectors))
        return tuple(records)

    async def _eth_call(self, client: ResilientClient, to: Address, data: str) -> str:
        return await self._request(client, "eth_call", [{"to": to, "data": data}, self.block])

    async def _request(self, client: ResilientClient, method: str, params: list[object]) -> str:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        response = await client.post(self.config.url, json=payload)
        response.raise_for_status()

        envelope = RpcResponse.model_validate(response.json())
        if envelope.error is not None:
            log.error(f"RPC error {envelope.error.code} on {method}: {envelope.error.message}")
            raise RpcError(envelope.error.message, code=envelope.error.code)
        if envelope.result is None:
            raise RpcError(f"Missing result for {method}")
        return envelope.result


if TYPE_CHECKING:
    _observer_check: ObservationSource = LoupeObserver()
