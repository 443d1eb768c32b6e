"""Public interface for the compiler-artifact desired-state producer."""

from __future__ import annotations

from .loader import (
    ArtifactError,
    BuildInfoDesiredState,
    ContractCatalog,
    load_build_info,
    load_module_manifest,
)
from .schema import BuildInfo, ManifestModule, ManifestProxy, ModuleManifest

__all__ = [
    "ArtifactError",
    "BuildInfo",
    "BuildInfoDesiredState",
    "ContractCatalog",
    "ManifestModule",
    "ManifestProxy",
    "ModuleManifest",
    "load_build_info",
    "load_module_manifest",
]
