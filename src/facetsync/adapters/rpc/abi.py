"""Just enough ABI encoding to query a proxy's loupe functions."""

from __future__ import annotations

from facetsync.adapters.fingerprint import WORD_SIZE, decode_hex
from facetsync.domain.types import Address, Selector

FACET_ADDRESSES_SELECTOR: Selector = "0x52ef6b2c"
FACET_FUNCTION_SELECTORS_SELECTOR: Selector = "0xadfca15e"

_ADDRESS_SIZE = 20
_SELECTOR_SIZE = 4


class AbiDecodingError(ValueError):
    """Raised when return data does not match the expected ABI layout."""


def encode_address_call(selector: Selector, address: Address) -> str:
    """Calldata for a function taking a single ``address`` argument."""

    raw = decode_hex(address)
    if len(raw) != _ADDRESS_SIZE:
        raise ValueError(f"Invalid address: {address}")
    return selector + raw.rjust(WORD_SIZE, b"\x00").hex()


def _words(data: bytes) -> list[bytes]:
    if len(data) % WORD_SIZE != 0:
        raise AbiDecodingError("Return data is not word aligned")
    return [data[offset : offset + WORD_SIZE] for offset in range(0, len(data), WORD_SIZE)]


def _dynamic_array_words(data: bytes) -> list[bytes]:
    words = _words(data)
    if not words:
        raise AbiDecodingError("Empty return data")
    offset = int.from_bytes(words[0], "big")
    if offset % WORD_SIZE != 0 or offset // WORD_SIZE >= len(words):
        raise AbiDecodingError("Array offset out of bounds")
    start = offset // WORD_SIZE
    length = int.from_bytes(words[start], "big")
    elements = words[start + 1 : start + 1 + length]
    if len(elements) != length:
        raise AbiDecodingError("Array shorter than its declared length")
    return elements


def decode_address_array(data: str) -> tuple[Address, ...]:
    return tuple(
        "0x" + word[-_ADDRESS_SIZE:].hex() for word in _dynamic_array_words(decode_hex(data))
    )


def decode_bytes4_array(data: str) -> tuple[Selector, ...]:
    return tuple(
        "0x" + word[:_SELECTOR_SIZE].hex() for word in _dynamic_array_words(decode_hex(data))
    )
