"""Tests for setup configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from n00format.core.config import (
    DEFAULT_PACKAGE,
    DEFAULT_TEMPLATES_DIR,
    load_config,
)
from n00format.core.errors import ConfigError
from n00format.core.package_manager import PackageManager


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_config(tmp_path, environ={})

    assert config.target_dir == tmp_path
    assert config.templates_dir == DEFAULT_TEMPLATES_DIR
    assert config.package == DEFAULT_PACKAGE
    assert config.package_manager is None
    assert config.overwrite_all is False
    assert config.install is True


def test_packaged_templates_exist() -> None:
    assert (DEFAULT_TEMPLATES_DIR / ".prettierrc").is_file()
    assert (DEFAULT_TEMPLATES_DIR / ".prettierignore").is_file()


def test_reads_default_config_file(tmp_path: Path) -> None:
    (tmp_path / "shared").mkdir()
    (tmp_path / ".n00format.yml").write_text(
        "templates_dir: shared\n"
        "package: prettier-plugin-organize-imports\n"
        "package_manager: yarn\n"
        "overwrite: all\n"
        "install: false\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path, environ={})

    assert config.templates_dir == (tmp_path / "shared").resolve()
    assert config.package == "prettier-plugin-organize-imports"
    assert config.package_manager is PackageManager.YARN
    assert config.overwrite_all is True
    assert config.install is False


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".n00format.yml").write_text("", encoding="utf-8")

    config = load_config(tmp_path, environ={})

    assert config.package == DEFAULT_PACKAGE


def test_environment_overrides_config_file(tmp_path: Path) -> None:
    (tmp_path / ".n00format.yml").write_text("package: from-file\n", encoding="utf-8")

    config = load_config(
        tmp_path,
        environ={
            "N00FORMAT_PACKAGE": "from-env",
            "N00FORMAT_PACKAGE_MANAGER": "pnpm",
            "N00FORMAT_TEMPLATES_DIR": str(tmp_path),
        },
    )

    assert config.package == "from-env"
    assert config.package_manager is PackageManager.PNPM
    assert config.templates_dir == tmp_path


def test_overrides_ignore_unset_values(tmp_path: Path) -> None:
    config = load_config(tmp_path, environ={}).with_overrides(
        package=None, overwrite_all=True, install=None
    )

    assert config.package == DEFAULT_PACKAGE
    assert config.overwrite_all is True
    assert config.install is True


def test_explicit_config_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, config_path=tmp_path / "missing.yml", environ={})


def test_schema_violations_are_reported(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yml"
    config_path.write_text(
        "package_manager: bun\noverwrite: sometimes\nextra: 1\n", encoding="utf-8"
    )

    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path, config_path=config_path, environ={})

    message = str(excinfo.value)
    assert "package_manager" in message
    assert "overwrite" in message
    assert "extra" in message


def test_invalid_yaml_is_a_config_error(tmp_path: Path) -> None:
    (tmp_path / ".n00format.yml").write_text("package: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(tmp_path, environ={})


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".n00format.yml").write_text("- npm\n- yarn\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path, environ={})


def test_unknown_package_manager_in_environment(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unknown package manager 'bun'"):
        load_config(tmp_path, environ={"N00FORMAT_PACKAGE_MANAGER": "bun"})
