"""JSON-RPC endpoint configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

RPC_URL_VAR = "FACETSYNC_RPC_URL"
RPC_TIMEOUT_VAR = "FACETSYNC_RPC_TIMEOUT"
RPC_MAX_CALLS_PER_SECOND_VAR = "FACETSYNC_RPC_MAX_CALLS_PER_SECOND"

DEFAULT_RPC_TIMEOUT_SECONDS = 30.0
DEFAULT_RPC_MAX_CALLS_PER_SECOND = 10


@dataclass(frozen=True, slots=True)
class RpcConfig:
    """Holds the node endpoint used to observe a proxy's routing table."""

    url: str
    resilience: ResilienceConfig


def get_rpc_config(*, resilience: ResilienceConfig | None = None) -> RpcConfig:
    values = require_env_vars((RPC_URL_VAR,))
    url = values[RPC_URL_VAR]
    if resilience is None:
        try:
            timeout = float(optional_env_var(RPC_TIMEOUT_VAR, str(DEFAULT_RPC_TIMEOUT_SECONDS)))
            max_calls = int(
                optional_env_var(
                    RPC_MAX_CALLS_PER_SECOND_VAR, str(DEFAULT_RPC_MAX_CALLS_PER_SECOND)
                )
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid RPC client setting: {exc}") from exc
        resilience = ResilienceConfig(
            name="rpc",
            base_url=url,
            timeout_seconds=timeout,
            retry=RetryPolicy(total=4),
            ratelimit=RateLimit(max_calls=max_calls) if max_calls > 0 else None,
        )
    return RpcConfig(url=url, resilience=resilience)
