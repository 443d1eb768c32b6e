"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, parse_log_level
from .reconcile import FingerprintScheme, ReconcileConfig, get_reconcile_config
from .rpc import RpcConfig, get_rpc_config

__all__ = [
    "ConfigurationError",
    "FingerprintScheme",
    "MissingConfigurationError",
    "RateLimit",
    "ReconcileConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "RpcConfig",
    "configure_logging",
    "get_reconcile_config",
    "get_rpc_config",
    "optional_env_var",
    "parse_log_level",
    "require_env_var",
    "require_env_vars",
]
