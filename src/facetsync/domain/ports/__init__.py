"""Ports implemented by adapters that produce routing snapshots."""

from __future__ import annotations

from .desired import DesiredStateSource
from .observation import ObservationSource

__all__ = ["DesiredStateSource", "ObservationSource"]
