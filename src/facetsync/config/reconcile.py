"""Reconciliation defaults shared by producers and the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import parse_log_level

FINGERPRINT_SCHEME_VAR = "FACETSYNC_FINGERPRINT_SCHEME"
LOG_LEVEL_VAR = "FACETSYNC_LOG_LEVEL"


class FingerprintScheme(StrEnum):
    """How module bytecode is hashed into a content fingerprint."""

    ZKSYNC = "zksync"
    SHA256 = "sha256"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    fingerprint_scheme: FingerprintScheme = FingerprintScheme.ZKSYNC
    log_level: int = logging.INFO


def get_reconcile_config() -> ReconcileConfig:
    scheme_value = optional_env_var(FINGERPRINT_SCHEME_VAR, FingerprintScheme.ZKSYNC.value)
    level_value = optional_env_var(LOG_LEVEL_VAR, "INFO")
    try:
        scheme = FingerprintScheme(scheme_value.lower())
    except ValueError as exc:
        raise ConfigurationError(f"Unsupported fingerprint scheme: {scheme_value}") from exc
    try:
        level = parse_log_level(level_value)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    return ReconcileConfig(fingerprint_scheme=scheme, log_level=level)
