"""n00format package root exposing the setup executor and helpers."""

from .core import (  # isort: skip
    FormatSetupExecutor,
    OverwriteDecision,
    PackageManager,
    SetupConfig,
    TemplateCopier,
)

__all__ = [
    "FormatSetupExecutor",
    "OverwriteDecision",
    "PackageManager",
    "SetupConfig",
    "TemplateCopier",
]
