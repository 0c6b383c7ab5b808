"""Per-package build invocation.

Builds one contract package: once per declared build variant, then once
without a variant. The toolchain always writes `<stem>.wasm`, so each
variant artifact is renamed to `<stem>_<variant>.wasm` before the next
build overwrites it.

Contract:
- Inputs: Package directory, builder settings
- Outputs: Paths of the artifacts produced, in build order
- Side Effects: Runs the toolchain, renames files in the build directory
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config.settings import BuilderSettings
from ..errors import ArtifactRenameFailed
from ..errors import ToolchainBuildFailed
from ..manifests.reader import read_package
from .runner import ProcessRunner
from .runner import SubprocessRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildStep:
    """One toolchain invocation and the artifact it must leave behind.

    Attributes:
        variant: Feature to enable, None for the default build
        output: File the toolchain writes
        artifact: Final name of the artifact after the step completes
    """

    variant: str | None
    output: Path
    artifact: Path


@dataclass(frozen=True)
class PackagePlan:
    """All build steps for one package directory."""

    package_dir: Path
    name: str
    steps: list[BuildStep]


def artifact_name(stem: str, variant: str | None = None, extension: str = "wasm") -> str:
    """File name of a build artifact.

    Example:
        >>> artifact_name("my_contract", "no_std")
        'my_contract_no_std.wasm'
    """
    if variant is None:
        return f"{stem}.{extension}"
    return f"{stem}_{variant}.{extension}"


class BuildInvoker:
    """Runs the toolchain for contract packages.

    Example:
        >>> invoker = BuildInvoker(BuilderSettings())
        >>> invoker.build_package(Path("contracts/escrow"))
    """

    def __init__(self, settings: BuilderSettings, runner: ProcessRunner | None = None) -> None:
        """Initialize build invoker.

        Args:
            settings: Toolchain and output configuration
            runner: Process runner (default: SubprocessRunner)
        """
        self.settings = settings
        self.runner = runner if runner is not None else SubprocessRunner()

    def build_args(self, variant: str | None = None) -> list[str]:
        """Toolchain command line for one build."""
        args = [
            self.settings.cargo_path,
            "build",
            f"--target-dir={self.settings.target_dir}",
            "--release",
        ]
        if variant is not None:
            args.extend(["--features", variant])
        args.extend(
            [
                "--lib",
                f"--target={self.settings.wasm_target}",
                "--locked",
            ]
        )
        return args

    def build_env(self) -> dict[str, str]:
        """Environment overrides for every toolchain call."""
        return {"RUSTFLAGS": self.settings.rustflags}

    def plan(self, package_dir: Path | str) -> PackagePlan:
        """Compute the build steps of a package without running anything.

        Args:
            package_dir: Package directory containing a manifest

        Returns:
            Variant steps in declaration order, then the default step

        Raises:
            ManifestNotFound, ManifestParseError, MissingPackageSection:
                If the package manifest cannot be used
        """
        package_dir = Path(package_dir).resolve()
        manifest = read_package(package_dir / self.settings.manifest_name)

        build_dir = self.settings.build_dir
        ext = self.settings.artifact_extension
        output = build_dir / artifact_name(manifest.artifact_stem, extension=ext)

        steps = [
            BuildStep(
                variant=variant,
                output=output,
                artifact=build_dir / artifact_name(manifest.artifact_stem, variant, ext),
            )
            for variant in manifest.build_variants
        ]
        steps.append(BuildStep(variant=None, output=output, artifact=output))

        return PackagePlan(package_dir=package_dir, name=manifest.name, steps=steps)

    def build_package(self, package_dir: Path | str) -> list[Path]:
        """Build every variant of a package, then its default artifact.

        Args:
            package_dir: Package directory containing a manifest

        Returns:
            Artifact paths in build order; the default artifact is last

        Raises:
            ToolchainInvocationError: If the toolchain cannot be started
            ToolchainBuildFailed: If a build exits with a failure status
            ArtifactRenameFailed: If a variant artifact cannot be renamed
        """
        plan = self.plan(package_dir)
        artifacts: list[Path] = []

        for step in plan.steps:
            self._run_build(plan.package_dir, step.variant)

            if step.variant is not None:
                logger.info(f"Built variant: {step.variant}")
                self._rename_artifact(step.output, step.artifact)

            artifacts.append(step.artifact)

        return artifacts

    def _run_build(self, package_dir: Path, variant: str | None) -> None:
        returncode = self.runner.run(self.build_args(variant), cwd=package_dir, env=self.build_env())
        if returncode != 0:
            raise ToolchainBuildFailed(package_dir, returncode, variant)

    def _rename_artifact(self, source: Path, destination: Path) -> None:
        try:
            source.replace(destination)
        except OSError as e:
            raise ArtifactRenameFailed(source, destination, str(e)) from e

        logger.info(f"Renamed {source.name} -> {destination.name}")
