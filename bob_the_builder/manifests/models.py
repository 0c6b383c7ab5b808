"""Manifest models for Cargo.toml documents.

Only the fields the orchestrator needs are modelled; every other key in
a manifest is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel
from pydantic import Field


class WorkspaceSection(BaseModel):
    """The [workspace] table of a root manifest."""

    members: list[str] = Field(
        default_factory=list,
        description="Glob patterns locating member packages, relative to the root",
    )


class PackageMetadata(BaseModel):
    """The [package.metadata] table."""

    build_variants: list[str] = Field(
        default_factory=list,
        description="Feature names, each built into its own artifact",
    )


class PackageSection(BaseModel):
    """The [package] table."""

    name: str = Field(description="Cargo package name")
    metadata: PackageMetadata = Field(default_factory=PackageMetadata)


class CargoManifest(BaseModel):
    """A parsed Cargo.toml document."""

    package: PackageSection | None = None
    workspace: WorkspaceSection | None = None

    @property
    def membership(self) -> WorkspaceMembership:
        """Classify the manifest as workspace, empty workspace, or single project."""
        if self.workspace is None:
            return NotAWorkspace()
        if not self.workspace.members:
            return WorkspaceNoMembers()
        return Workspace(patterns=tuple(self.workspace.members))


class PackageManifest(BaseModel):
    """Name and build variants of a single contract package."""

    name: str
    build_variants: list[str] = Field(default_factory=list)

    @property
    def artifact_stem(self) -> str:
        """File stem cargo uses for the library artifact."""
        return self.name.replace("-", "_")


@dataclass(frozen=True)
class Workspace:
    """Root manifest declares a workspace with member patterns."""

    patterns: tuple[str, ...]


@dataclass(frozen=True)
class WorkspaceNoMembers:
    """Root manifest has a [workspace] table but no members."""


@dataclass(frozen=True)
class NotAWorkspace:
    """Root manifest describes a single package."""


WorkspaceMembership = Workspace | WorkspaceNoMembers | NotAWorkspace
