"""bob_the_builder - wasm contract builds for cargo workspaces.

Public Interface:
    - build: Build the project in a directory
    - Orchestrator: Build driver for a project directory
    - BuilderSettings: Build configuration
    - BuildError: Base class of all build failures
"""

from .config.settings import BuilderSettings
from .errors import BuildError
from .orchestrator import Orchestrator
from .orchestrator import build

__all__ = [
    "build",
    "Orchestrator",
    "BuilderSettings",
    "BuildError",
]
