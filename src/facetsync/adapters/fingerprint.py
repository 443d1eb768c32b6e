"""Content fingerprints for compiled module bytecode."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from facetsync.config.reconcile import FingerprintScheme

if TYPE_CHECKING:
    from facetsync.domain.types import ContentFingerprint

WORD_SIZE = 32
_ZKSYNC_HASH_VERSION = bytes((1, 0))
_ZKSYNC_MAX_WORDS = 2**16


class BytecodeError(ValueError):
    """Raised when bytecode cannot be fingerprinted."""


def decode_hex(value: str) -> bytes:
    text = value.strip()
    digits = text[2:] if text[:2].lower() == "0x" else text
    try:
        return bytes.fromhex(digits)
    except ValueError as exc:
        raise ValueError(f"Invalid hex data: {exc}") from exc


def zksync_bytecode_hash(bytecode: bytes) -> bytes:
    """Versioned bytecode hash as computed by the zkSync code oracle.

    Layout: ``01 00 || length in words (2 bytes, big-endian) || sha256[4:]``.
    """

    if len(bytecode) % WORD_SIZE != 0:
        raise BytecodeError(f"Bytecode length must be divisible by {WORD_SIZE}")
    words = len(bytecode) // WORD_SIZE
    if words >= _ZKSYNC_MAX_WORDS:
        raise BytecodeError("Bytecode length in words must be less than 2^16")
    if words % 2 == 0:
        raise BytecodeError("Bytecode length in words must be odd")
    digest = hashlib.sha256(bytecode).digest()
    return _ZKSYNC_HASH_VERSION + words.to_bytes(2, "big") + digest[4:]


def fingerprint_bytecode(
    bytecode: str | bytes,
    scheme: FingerprintScheme = FingerprintScheme.ZKSYNC,
) -> ContentFingerprint:
    """Return the ``0x``-prefixed lowercase fingerprint of ``bytecode``."""

    if isinstance(bytecode, str):
        try:
            raw = decode_hex(bytecode)
        except ValueError as exc:
            raise BytecodeError(str(exc)) from exc
    else:
        raw = bytes(bytecode)
    if scheme is FingerprintScheme.ZKSYNC:
        digest = zksync_bytecode_hash(raw)
    else:
        digest = hashlib.sha256(raw).digest()
    return "0x" + digest.hex()
