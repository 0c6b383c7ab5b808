"""
Unit tests for configuration loading.

Tests loading from YAML, environment variable overrides and defaults.
"""

from pathlib import Path

import pytest

from bob_the_builder.config import loader
from bob_the_builder.config.settings import BuilderSettings
from bob_the_builder.errors import ConfigNotFound


@pytest.mark.unit
class TestConfigLoader:
    """Test configuration loading functions."""

    def test_get_config_path_returns_bob_yaml(self, project_dir: Path) -> None:
        """Test get_config_path returns bob.yaml in the project dir."""
        config_path = loader.get_config_path(project_dir)

        assert config_path == project_dir / "bob.yaml"

    def test_load_config_without_file_uses_defaults(self, project_dir: Path) -> None:
        """Test a missing default config file is not an error."""
        settings = loader.load_config(project_dir=project_dir)

        assert isinstance(settings, BuilderSettings)
        assert settings.cargo_path == "cargo"
        assert not (project_dir / "bob.yaml").exists()

    def test_load_config_parses_yaml_settings(self, project_dir: Path, tmp_path: Path) -> None:
        """Test load_config parses settings from YAML file."""
        (project_dir / "bob.yaml").write_text(
            f"""
cargo_path: /opt/rust/bin/cargo
target_dir: {tmp_path / "out"}
contract_prefix: "crates/"
log_level: debug
"""
        )

        settings = loader.load_config(project_dir=project_dir)

        assert settings.cargo_path == "/opt/rust/bin/cargo"
        assert settings.target_dir == str((tmp_path / "out").resolve())
        assert settings.contract_prefix == "crates/"
        assert settings.log_level == "debug"

    def test_load_config_env_overrides_yaml(self, project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override YAML settings."""
        (project_dir / "bob.yaml").write_text("cargo_path: yaml-cargo\nwasm_target: wasm32-wasi\n")

        monkeypatch.setenv("BOB_CARGO_PATH", "env-cargo")

        settings = loader.load_config(project_dir=project_dir)

        # Environment should win, YAML still applies elsewhere
        assert settings.cargo_path == "env-cargo"
        assert settings.wasm_target == "wasm32-wasi"

    def test_load_config_handles_invalid_yaml(self, project_dir: Path, caplog) -> None:
        """Test load_config falls back to defaults on corrupted YAML."""
        (project_dir / "bob.yaml").write_text("{{invalid yaml content\n")

        settings = loader.load_config(project_dir=project_dir)

        assert settings.cargo_path == "cargo"
        assert "Failed to load config" in caplog.text

    def test_load_config_handles_non_mapping_yaml(self, project_dir: Path, caplog) -> None:
        """Test a YAML list at top level is treated like an invalid file."""
        (project_dir / "bob.yaml").write_text("- cargo\n- build\n")

        settings = loader.load_config(project_dir=project_dir)

        assert settings.cargo_path == "cargo"
        assert "Failed to load config" in caplog.text

    def test_load_config_with_custom_path(self, tmp_path: Path) -> None:
        """Test load_config accepts custom config path."""
        custom_path = tmp_path / "custom-config.yaml"
        custom_path.write_text("rustflags: '-C opt-level=z'\n")

        settings = loader.load_config(config_path=custom_path)

        assert settings.rustflags == "-C opt-level=z"

    def test_load_config_missing_custom_path_raises(self, tmp_path: Path) -> None:
        """Test an explicitly requested config file must exist."""
        with pytest.raises(ConfigNotFound, match="Configuration file not found"):
            loader.load_config(config_path=tmp_path / "missing.yaml")


@pytest.mark.unit
class TestBuilderSettings:
    """Test BuilderSettings model."""

    def test_builder_settings_default_values(self) -> None:
        """Test BuilderSettings matches the stock toolchain layout."""
        settings = BuilderSettings()

        assert settings.cargo_path == "cargo"
        assert settings.target_dir == str(Path("/target").resolve())
        assert settings.wasm_target == "wasm32-unknown-unknown"
        assert settings.contract_prefix == "contracts/"
        assert settings.manifest_name == "Cargo.toml"
        assert settings.rustflags == "-C link-arg=-s"
        assert settings.artifact_extension == "wasm"

    def test_build_dir_is_release_dir_of_target(self, tmp_path: Path) -> None:
        """Test build_dir nests target triple and release profile."""
        settings = BuilderSettings(target_dir=str(tmp_path))

        assert settings.build_dir == tmp_path.resolve() / "wasm32-unknown-unknown" / "release"

    def test_relative_target_dir_is_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a relative target_dir resolves against the current directory."""
        monkeypatch.chdir(tmp_path)

        settings = BuilderSettings(target_dir="out/target")

        assert Path(settings.target_dir).is_absolute()
        assert settings.target_dir == str(tmp_path.resolve() / "out" / "target")

    def test_settings_read_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test BOB_ prefixed variables populate settings."""
        monkeypatch.setenv("BOB_CONTRACT_PREFIX", "wasm/")

        settings = BuilderSettings()

        assert settings.contract_prefix == "wasm/"
