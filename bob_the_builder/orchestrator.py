"""Top-level build orchestration.

Reads the root manifest and builds either the single package it
describes or every contract package of its workspace, one at a time in
sorted order. The first failure aborts the run.
"""

import logging
from pathlib import Path

from .config.settings import BuilderSettings
from .execution.invoker import BuildInvoker
from .execution.invoker import PackagePlan
from .execution.runner import ProcessRunner
from .manifests.models import NotAWorkspace
from .manifests.models import Workspace
from .manifests.models import WorkspaceNoMembers
from .manifests.reader import read_root
from .workspace.resolver import resolve_members
from .workspace.selector import select_contracts

logger = logging.getLogger(__name__)


class Orchestrator:
    """Drives contract builds for a project directory.

    Example:
        >>> orchestrator = Orchestrator(BuilderSettings(), project_dir=".")
        >>> artifacts = orchestrator.build()
    """

    def __init__(
        self,
        settings: BuilderSettings,
        project_dir: Path | str = ".",
        runner: ProcessRunner | None = None,
    ) -> None:
        """Initialize orchestrator.

        Args:
            settings: Builder configuration
            project_dir: Directory holding the root manifest
            runner: Process runner handed to the build invoker
        """
        self.settings = settings
        self.project_dir = Path(project_dir)
        self.invoker = BuildInvoker(settings, runner=runner)

    def package_dirs(self) -> list[Path]:
        """Directories to build, in build order.

        Returns:
            The project directory for a single package, the sorted contract
            members for a workspace, and nothing for a workspace without
            members
        """
        manifest = read_root(self.project_dir / self.settings.manifest_name)

        match manifest.membership:
            case Workspace(patterns=patterns):
                logger.info(f"Found workspace member entries: {list(patterns)}")
                members = resolve_members(patterns, self.project_dir)
                contracts = select_contracts(members, self.settings.contract_prefix)
                return [self.project_dir / contract for contract in contracts]
            case WorkspaceNoMembers():
                logger.warning(
                    f"{self.settings.manifest_name} contains a workspace key but has no workspace members"
                )
                return []
            case NotAWorkspace():
                return [self.project_dir]

        raise AssertionError(f"Unhandled workspace membership: {manifest.membership!r}")

    def build(self) -> list[Path]:
        """Build all selected packages.

        Returns:
            Paths of every artifact produced, in build order
        """
        artifacts: list[Path] = []
        for package_dir in self.package_dirs():
            logger.info(f"Building {package_dir} ...")
            artifacts.extend(self.invoker.build_package(package_dir))
        return artifacts

    def plan(self) -> list[PackagePlan]:
        """Compute the build steps of all selected packages without running them."""
        return [self.invoker.plan(package_dir) for package_dir in self.package_dirs()]


def build(
    project_dir: Path | str = ".",
    settings: BuilderSettings | None = None,
    runner: ProcessRunner | None = None,
) -> list[Path]:
    """Build the project in project_dir with default or given settings."""
    if settings is None:
        settings = BuilderSettings()
    return Orchestrator(settings, project_dir=project_dir, runner=runner).build()
