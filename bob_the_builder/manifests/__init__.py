"""Manifest module for bob_the_builder.

Public Interface:
    - read_root: Load a root manifest
    - read_package: Load a package manifest
    - CargoManifest, PackageManifest: Parsed documents
    - Workspace, WorkspaceNoMembers, NotAWorkspace: Workspace classification
"""

from .models import CargoManifest
from .models import NotAWorkspace
from .models import PackageManifest
from .models import Workspace
from .models import WorkspaceMembership
from .models import WorkspaceNoMembers
from .reader import read_package
from .reader import read_root

__all__ = [
    "CargoManifest",
    "PackageManifest",
    "Workspace",
    "WorkspaceNoMembers",
    "NotAWorkspace",
    "WorkspaceMembership",
    "read_root",
    "read_package",
]
