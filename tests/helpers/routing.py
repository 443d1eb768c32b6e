"""Routing snapshots shared across reconciliation tests."""

from __future__ import annotations

from facetsync.domain.types import DesiredModuleRecord, ObservedModuleRecord

CUT_SELECTORS = ("0x1f931c1c",)
LOUPE_SELECTORS = ("0x52ef6b2c", "0x7a0ed627", "0xadfca15e", "0xcdffacc6")
GETTER_SELECTORS = (
    "0x0ac28438", "0x0fc9f0cd", "0x116332ec", "0x188ec356", "0x21bb315a",
    "0x21bc043e", "0x23e7a641", "0x2c2b1c31", "0x41c639ae", "0x4419c99d",
    "0x53d1b5d2", "0x59acd516", "0x59c232e0", "0x65cd6aa9", "0x6d177b54",
    "0x710640b5", "0x7698aa33", "0x8179e95c", "0x83588780", "0x8ca75886",
    "0x8e4ba7cc", "0x8fbb2d13", "0x900470b6", "0x956adad7", "0xa7dc49fe",
    "0xb2f0d1b7", "0xc7706605", "0xcc68ef8a", "0xcc91498b", "0xd62e66f8",
    "0xd75dcea3", "0xdc8b18de", "0xdecf78ce", "0xe07cb08b", "0xefe0d798",
    "0xf1e291df", "0xf9750cb3",
)  # fmt: skip
VAULT_SELECTORS = (
    "0x276f2de0", "0x318ac2b6", "0x53b783e2", "0x5abe995f",
    "0xcdff6d2f", "0xe22e437c", "0xe79d0f57", "0xfcd9535d",
)  # fmt: skip
RECOVERY_SELECTORS = ("0x6d9a8418", "0xe71d4797", "0xff6cae07")

CUT_HASH = "0x0100016f662ce9f7ee4e6051fb9095d84d86b0776c3235538edf8c6e7bf0d3d5"
LOUPE_HASH = "0x010000cb31a043124d925f9d78b74baa7b23461fab5a7596fe0615ea33537c1a"
GETTER_HASH = "0x01001863b223fdfeff7266c29b2c880c2060bf21e0f2f6ca3e545c5cd7ec49c5"
VAULT_HASH = "0x010032cba189efa3145aa4b6332062d8e546ed7a749a65599b6516fb2547d7e8"
RECOVERY_HASH = "0x0100038b6ab19e69868b079823ae309537161cff6ed7e42d5aeada9150549716"

_MODULES = (
    ("DiamondCutFacet", "0x85ac3adf8dff8a4c964f70df1a594767195efea9", CUT_SELECTORS, CUT_HASH),
    (
        "DiamondLoupeFacet",
        "0x0e4bf43dd1f2bcc6c1153ff1e87d82c1e23e7c90",
        LOUPE_SELECTORS,
        LOUPE_HASH,
    ),
    ("GetterFacet", "0x150d36bb644a0c1f922e8bf7e2d7a5d0971bfdd0", GETTER_SELECTORS, GETTER_HASH),
    ("VaultFacet", "0xedcb3482fcb66b8d68c93a3174239d1d0c8a4902", VAULT_SELECTORS, VAULT_HASH),
    (
        "WalletRecoveryFacet",
        "0x8e3de3b7f3017d05ebb72c054c7e96b1ad0a0018",
        RECOVERY_SELECTORS,
        RECOVERY_HASH,
    ),
)

VAULT_ADDRESS = _MODULES[3][1]


def make_observed() -> list[ObservedModuleRecord]:
    return [
        ObservedModuleRecord(address=address, selectors=selectors, fingerprint=fingerprint)
        for _name, address, selectors, fingerprint in _MODULES
    ]


def make_desired() -> list[DesiredModuleRecord]:
    return [
        DesiredModuleRecord(name=name, selectors=selectors, fingerprint=fingerprint)
        for name, _address, selectors, fingerprint in _MODULES
    ]


def observed(address: str, selectors: tuple[str, ...], fingerprint: str) -> ObservedModuleRecord:
    return ObservedModuleRecord(address=address, selectors=selectors, fingerprint=fingerprint)


def desired(name: str, selectors: tuple[str, ...], fingerprint: str) -> DesiredModuleRecord:
    return DesiredModuleRecord(name=name, selectors=selectors, fingerprint=fingerprint)
