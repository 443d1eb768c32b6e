"""Canonical value types shared by producers, reconciliation and executors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# Basic aliases (PEP 695) so we can upgrade to value objects later.
type Selector = str
type ContentFingerprint = str
type Address = str
type ModuleName = str

_HEX_DIGITS = frozenset("0123456789abcdef")

ZERO_ADDRESS: Address = "0x0000000000000000000000000000000000000000"


def normalize_selector(value: str) -> Selector:
    """Return the canonical ``0x``-prefixed lowercase form of ``value``.

    A missing prefix is tolerated because compiler output (``methodIdentifiers``)
    omits it.
    """

    text = value.strip().lower()
    digits = text.removeprefix("0x")
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"Invalid selector: {value!r}")
    return f"0x{digits}"


def normalize_selectors(values: Iterable[str]) -> tuple[Selector, ...]:
    return tuple(normalize_selector(value) for value in values)


@dataclass(slots=True, frozen=True, kw_only=True)
class ObservedModuleRecord:
    """One module currently served by the live routing table."""

    address: Address
    selectors: tuple[Selector, ...] = field(default_factory=tuple)
    fingerprint: ContentFingerprint

    def __post_init__(self) -> None:
        object.__setattr__(self, "selectors", normalize_selectors(self.selectors))


@dataclass(slots=True, frozen=True, kw_only=True)
class DesiredModuleRecord:
    """One module of the source-of-truth set the proxy should converge to."""

    name: ModuleName
    selectors: tuple[Selector, ...] = field(default_factory=tuple)
    fingerprint: ContentFingerprint

    def __post_init__(self) -> None:
        object.__setattr__(self, "selectors", normalize_selectors(self.selectors))
