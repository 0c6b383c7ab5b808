"""Reading root and package manifests from disk.

Contract:
- Inputs: Manifest file paths
- Outputs: CargoManifest (root) and PackageManifest (per package)
- Side Effects: None (read-only)
"""

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ..errors import ManifestNotFound
from ..errors import ManifestParseError
from ..errors import MissingPackageSection
from .models import CargoManifest
from .models import PackageManifest

logger = logging.getLogger(__name__)


def _load_manifest(path: Path) -> CargoManifest:
    if not path.is_file():
        raise ManifestNotFound(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(path, str(e)) from e
    except OSError as e:
        raise ManifestParseError(path, f"could not read file: {e}") from e

    try:
        return CargoManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(path, str(e)) from e


def read_root(path: Path | str) -> CargoManifest:
    """Load the root manifest of a project.

    A root manifest without a [workspace] table is valid and describes a
    single package.

    Args:
        path: Path to the root Cargo.toml

    Returns:
        Parsed manifest

    Raises:
        ManifestNotFound: If the file does not exist
        ManifestParseError: If the file is not valid TOML or is malformed
    """
    path = Path(path)
    manifest = _load_manifest(path)
    logger.debug(f"Loaded root manifest {path}: {manifest.membership}")
    return manifest


def read_package(path: Path | str) -> PackageManifest:
    """Load the package name and build variants from a package manifest.

    Args:
        path: Path to the package Cargo.toml

    Returns:
        Package name and declared build variants (empty when
        [package.metadata] or build_variants is absent)

    Raises:
        ManifestNotFound: If the file does not exist
        ManifestParseError: If the file is not valid TOML or is malformed
        MissingPackageSection: If the manifest has no [package] table
    """
    path = Path(path)
    manifest = _load_manifest(path)

    if manifest.package is None:
        raise MissingPackageSection(path)

    return PackageManifest(
        name=manifest.package.name,
        build_variants=list(manifest.package.metadata.build_variants),
    )
