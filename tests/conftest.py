"""
Shared pytest fixtures for bob_the_builder test suite.

Provides fixtures for:
- Isolated settings writing into a temporary target directory
- A fake toolchain runner that records calls and writes artifacts
- Helpers creating workspace and package manifests on disk
"""

import os
import tomllib
from collections.abc import Callable
from collections.abc import Mapping
from collections.abc import Sequence
from pathlib import Path

import pytest

from bob_the_builder.config.settings import BuilderSettings


class FakeCargo:
    """Stand-in for the cargo toolchain.

    Every call is recorded. A successful call writes `<stem>.wasm` into
    the build directory with content naming the package and variant, so
    tests can tell which build produced a file.
    """

    def __init__(self, build_dir: Path) -> None:
        self.build_dir = build_dir
        self.calls: list[dict] = []
        self.failures: dict[str | None, int] = {}

    def fail_on(self, variant: str | None, returncode: int = 101) -> None:
        """Make builds of a variant (None for default) exit with returncode."""
        self.failures[variant] = returncode

    def run(self, args: Sequence[str], cwd: Path, env: Mapping[str, str]) -> int:
        variant = args[args.index("--features") + 1] if "--features" in args else None
        self.calls.append({"args": list(args), "cwd": cwd, "env": dict(env), "variant": variant})

        if variant in self.failures:
            return self.failures[variant]

        with open(cwd / "Cargo.toml", "rb") as f:
            name = tomllib.load(f)["package"]["name"]

        self.build_dir.mkdir(parents=True, exist_ok=True)
        stem = name.replace("-", "_")
        (self.build_dir / f"{stem}.wasm").write_text(f"{name}:{variant or 'default'}")
        return 0

    @property
    def variants(self) -> list[str | None]:
        return [call["variant"] for call in self.calls]


@pytest.fixture(autouse=True)
def clean_bob_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove BOB_* variables so the host environment cannot leak into settings."""
    for key in list(os.environ):
        if key.startswith("BOB_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create an empty project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def settings(tmp_path: Path) -> BuilderSettings:
    """Create settings with an isolated target directory."""
    return BuilderSettings(target_dir=str(tmp_path / "target"))


@pytest.fixture
def fake_cargo(settings: BuilderSettings) -> FakeCargo:
    """Create a recording fake toolchain for the isolated build directory."""
    return FakeCargo(settings.build_dir)


@pytest.fixture
def make_package() -> Callable[..., Path]:
    """Factory writing a package manifest.

    Example:
        >>> def test_package(make_package, project_dir):
        ...     pkg = make_package(project_dir / "contracts" / "escrow", "escrow", ["std"])
        ...     assert (pkg / "Cargo.toml").exists()
    """

    def _make(path: Path, name: str, variants: list[str] | None = None) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        content = f'[package]\nname = "{name}"\nversion = "0.1.0"\n'
        if variants is not None:
            quoted = ", ".join(f'"{v}"' for v in variants)
            content += f"\n[package.metadata]\nbuild_variants = [{quoted}]\n"
        (path / "Cargo.toml").write_text(content)
        return path

    return _make


@pytest.fixture
def make_workspace() -> Callable[..., Path]:
    """Factory writing a root workspace manifest with the given member patterns."""

    def _make(root: Path, members: list[str] | None) -> Path:
        if members is None:
            content = "[workspace]\n"
        else:
            quoted = ", ".join(f'"{m}"' for m in members)
            content = f"[workspace]\nmembers = [{quoted}]\n"
        (root / "Cargo.toml").write_text(content)
        return root

    return _make
