"""Error types for bob_the_builder.

Every error aborts the whole run. Nothing in the library catches one of
these and continues with the next package or variant.
"""

from pathlib import Path


class BuildError(Exception):
    """Base class for all build orchestration failures."""


class ConfigNotFound(BuildError):
    """An explicitly requested configuration file does not exist."""


class ManifestNotFound(BuildError):
    """A root or package manifest file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Manifest not found: {path}")


class ManifestParseError(BuildError):
    """A manifest is not valid TOML or does not have the expected shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse manifest {path}: {reason}")


class MissingPackageSection(BuildError):
    """A package manifest has no [package] table."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"package is required in {path}")


class GlobExpansionError(BuildError):
    """A workspace member pattern is malformed or could not be expanded."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid workspace member pattern {pattern!r}: {reason}")


class ToolchainInvocationError(BuildError):
    """The external build process could not be started."""


class ToolchainBuildFailed(BuildError):
    """The external build process exited with a failure status."""

    def __init__(self, package_dir: Path, returncode: int, variant: str | None = None) -> None:
        self.package_dir = package_dir
        self.returncode = returncode
        self.variant = variant
        target = f"variant {variant!r} of {package_dir}" if variant else str(package_dir)
        super().__init__(f"Build of {target} failed with exit status {returncode}")


class ArtifactRenameFailed(BuildError):
    """A variant artifact could not be moved to its suffixed name."""

    def __init__(self, source: Path, destination: Path, reason: str) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Failed to rename {source} to {destination}: {reason}")
