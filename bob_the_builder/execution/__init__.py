"""Execution management for bob_the_builder.

This module runs the external toolchain for contract packages.

Contract:
- Inputs: Package directories, builder settings
- Outputs: Built artifact paths
- Side Effects: Spawns toolchain processes, renames artifacts
"""

from .invoker import BuildInvoker
from .invoker import BuildStep
from .invoker import PackagePlan
from .invoker import artifact_name
from .runner import ProcessRunner
from .runner import SubprocessRunner

__all__ = [
    "BuildInvoker",
    "BuildStep",
    "PackagePlan",
    "ProcessRunner",
    "SubprocessRunner",
    "artifact_name",
]
