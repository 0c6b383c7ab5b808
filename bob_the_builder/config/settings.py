"""Settings model for bob_the_builder.

Contract:
- Inputs: Environment variables (BOB_*), values loaded from bob.yaml
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class BuilderSettings(BaseSettings):
    """Configuration for contract builds.

    Attributes:
        cargo_path: Toolchain executable (default: cargo)
        target_dir: Shared cargo target directory (default: /target)
        wasm_target: WebAssembly target triple
        contract_prefix: Workspace path prefix of contract packages
        manifest_name: Manifest file name inside every project directory
        rustflags: Value of RUSTFLAGS for every toolchain call
        artifact_extension: File extension of produced artifacts
        log_level: Logging level (default: info)

    Example:
        >>> settings = BuilderSettings()
        >>> assert settings.build_dir == Path("/target/wasm32-unknown-unknown/release")
    """

    model_config = SettingsConfigDict(
        env_prefix="BOB_",
        case_sensitive=False,
        extra="ignore",
    )

    cargo_path: str = "cargo"
    target_dir: str = "/target"
    wasm_target: str = "wasm32-unknown-unknown"
    contract_prefix: str = "contracts/"
    manifest_name: str = "Cargo.toml"

    # Linker flag "-s" strips symbols from the produced wasm.
    rustflags: str = "-C link-arg=-s"
    artifact_extension: str = "wasm"

    log_level: str = "info"

    @field_validator("target_dir")
    @classmethod
    def expand_and_resolve_path(cls, v: str) -> str:
        """Expand ~ and resolve to absolute path.

        The toolchain runs inside each package directory, so a relative
        target directory would land in a different place per package.
        """
        return str(Path(v).expanduser().resolve())

    @property
    def build_dir(self) -> Path:
        """Directory the toolchain writes release wasm artifacts into."""
        return Path(self.target_dir) / self.wasm_target / "release"
