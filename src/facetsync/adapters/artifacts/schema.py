"""Pydantic models describing compiler build-info files and module manifests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ArtifactBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BytecodePayload(ArtifactBaseModel):
    object: str = ""


class EvmPayload(ArtifactBaseModel):
    bytecode: BytecodePayload = Field(default_factory=BytecodePayload)
    deployed_bytecode: BytecodePayload = Field(
        default_factory=BytecodePayload, alias="deployedBytecode"
    )
    method_identifiers: dict[str, str] = Field(default_factory=dict, alias="methodIdentifiers")


class ContractPayload(ArtifactBaseModel):
    evm: EvmPayload = Field(default_factory=EvmPayload)


class CompilerOutput(ArtifactBaseModel):
    contracts: dict[str, dict[str, ContractPayload]] = Field(default_factory=dict)


class BuildInfo(ArtifactBaseModel):
    """Hardhat-style build info; a bare standard-JSON output is accepted too."""

    output: CompilerOutput

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_output(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            if "output" not in mapping_value and "contracts" in mapping_value:
                return {"output": mapping_value}
        return value


class ManifestModule(ArtifactBaseModel):
    name: str
    source: str
    interface: str
    interface_source: str | None = None


class ManifestProxy(ArtifactBaseModel):
    name: str
    source: str | None = None


class ModuleManifest(ArtifactBaseModel):
    modules: list[ManifestModule]
    proxy: ManifestProxy | None = None
