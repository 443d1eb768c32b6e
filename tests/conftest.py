from __future__ import annotations

import pytest

_ENV_VARS = (
    "FACETSYNC_RPC_URL",
    "FACETSYNC_RPC_TIMEOUT",
    "FACETSYNC_RPC_MAX_CALLS_PER_SECOND",
    "FACETSYNC_FINGERPRINT_SCHEME",
    "FACETSYNC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
