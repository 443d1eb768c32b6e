"""Desired-state producer backed by compiler build-info files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from facetsync.adapters.fingerprint import fingerprint_bytecode
from facetsync.config.reconcile import FingerprintScheme
from facetsync.domain.ports.desired import DesiredStateSource
from facetsync.domain.types import DesiredModuleRecord, normalize_selector

from .schema import BuildInfo, ContractPayload, ModuleManifest

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from facetsync.domain.types import Selector

log = getLogger(__name__)


class ArtifactError(RuntimeError):
    """Raised when compiler output is missing or malformed."""


def _read_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ArtifactError(f"Cannot read {path}: {exc}") from exc


def load_module_manifest(path: Path) -> ModuleManifest:
    try:
        return ModuleManifest.model_validate(_read_json(path))
    except ValidationError as exc:
        raise ArtifactError(f"Invalid module manifest {path}: {exc}") from exc


def load_build_info(path: Path) -> BuildInfo:
    try:
        return BuildInfo.model_validate(_read_json(path))
    except ValidationError as exc:
        raise ArtifactError(f"Invalid build info {path}: {exc}") from exc


@dataclass(slots=True)
class ContractCatalog:
    """Compiled contracts merged from one or more build-info files."""

    contracts: dict[tuple[str, str], ContractPayload] = field(
        default_factory=dict["tuple[str, str]", "ContractPayload"]
    )

    @classmethod
    def from_build_infos(cls, build_infos: Sequence[BuildInfo]) -> ContractCatalog:
        catalog = cls()
        for build_info in build_infos:
            for source, contracts in build_info.output.contracts.items():
                for name, contract in contracts.items():
                    catalog.contracts[source, name] = contract
        return catalog

    def find(self, name: str, source: str | None = None) -> ContractPayload:
        if source is not None:
            contract = self.contracts.get((source, name))
            if contract is None:
                raise ArtifactError(f"Contract {source}:{name} not found in build info")
            return contract

        matches = [key for key in self.contracts if key[1] == name]
        if not matches:
            raise ArtifactError(f"Contract {name} not found in build info")
        if len(matches) > 1:
            sources = ", ".join(sorted(key[0] for key in matches))
            raise ArtifactError(f"Contract {name} is ambiguous; found in {sources}")
        return self.contracts[matches[0]]


def _selectors_of(contract: ContractPayload) -> dict[Selector, str]:
    return {
        normalize_selector(selector): signature
        for signature, selector in contract.evm.method_identifiers.items()
    }


@dataclass(slots=True)
class BuildInfoDesiredState:
    """Build desired module records from a manifest and compiled contracts.

    Selectors come from each module's interface contract. The fingerprint hashes
    the module contract's code with ``scheme``: ``evm.bytecode`` for zkSync, where
    the compiler emits deployed code there, and ``evm.deployedBytecode`` for sha256.
    """

    manifest: ModuleManifest
    catalog: ContractCatalog
    scheme: FingerprintScheme = FingerprintScheme.ZKSYNC

    @classmethod
    def from_paths(
        cls,
        *,
        manifest_path: Path,
        build_info_paths: Sequence[Path],
        scheme: FingerprintScheme = FingerprintScheme.ZKSYNC,
    ) -> BuildInfoDesiredState:
        manifest = load_module_manifest(manifest_path)
        catalog = ContractCatalog.from_build_infos(
            [load_build_info(path) for path in build_info_paths]
        )
        return cls(manifest=manifest, catalog=catalog, scheme=scheme)

    def __call__(self) -> tuple[DesiredModuleRecord, ...]:
        records: list[DesiredModuleRecord] = []
        for module in self.manifest.modules:
            implementation = self.catalog.find(module.name, module.source)
            interface = self.catalog.find(module.interface, module.interface_source)
            bytecode = self._module_bytecode(implementation)
            if not bytecode:
                raise ArtifactError(f"Contract {module.name} has no bytecode")
            selectors = tuple(sorted(_selectors_of(interface)))
            log.debug("Module %s declares %s selectors", module.name, len(selectors))
            records.append(
                DesiredModuleRecord(
                    name=module.name,
                    selectors=selectors,
                    fingerprint=fingerprint_bytecode(bytecode, self.scheme),
                )
            )
        return tuple(records)

    def _module_bytecode(self, contract: ContractPayload) -> str:
        # eth_getCode returns runtime code; zksolc emits it as `bytecode` already
        if self.scheme is FingerprintScheme.SHA256:
            return contract.evm.deployed_bytecode.object
        return contract.evm.bytecode.object

    def signatures(self) -> dict[Selector, str]:
        signatures: dict[Selector, str] = {}
        for module in self.manifest.modules:
            interface = self.catalog.find(module.interface, module.interface_source)
            signatures.update(_selectors_of(interface))
        return signatures

    def reserved_selectors(self) -> tuple[Selector, ...]:
        proxy = self.manifest.proxy
        if proxy is None:
            return ()
        return tuple(sorted(_selectors_of(self.catalog.find(proxy.name, proxy.source))))


if TYPE_CHECKING:
    _source_check: DesiredStateSource = BuildInfoDesiredState(
        manifest=ModuleManifest(modules=[]), catalog=ContractCatalog()
    )
