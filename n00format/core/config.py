"""Load setup configuration from YAML, the environment, and CLI overrides."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml  # type: ignore[import-not-found]
from jsonschema import Draft202012Validator  # type: ignore[import-not-found]

from .errors import ConfigError
from .package_manager import PackageManager

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"
DEFAULT_SCHEMA = PACKAGE_ROOT / "schemas" / "config.schema.json"
DEFAULT_PACKAGE = "prettier-plugin-tailwindcss"
CONFIG_FILENAME = ".n00format.yml"

ENV_OVERRIDES = {
    "N00FORMAT_TEMPLATES_DIR": "templates_dir",
    "N00FORMAT_PACKAGE": "package",
    "N00FORMAT_PACKAGE_MANAGER": "package_manager",
}


@dataclass(frozen=True)
class SetupConfig:
    """Resolved settings for one setup run."""

    target_dir: Path
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    package: str = DEFAULT_PACKAGE
    package_manager: PackageManager | None = None
    overwrite_all: bool = False
    install: bool = True

    def with_overrides(self, **overrides: Any) -> "SetupConfig":
        values = {key: value for key, value in overrides.items() if value is not None}
        if "package_manager" in values:
            values["package_manager"] = _as_package_manager(values["package_manager"])
        if "templates_dir" in values:
            values["templates_dir"] = Path(values["templates_dir"])
        return replace(self, **values)


def _as_package_manager(value: str | PackageManager) -> PackageManager:
    try:
        return PackageManager(value)
    except ValueError as exc:
        known = ", ".join(kind.value for kind in PackageManager)
        raise ConfigError(
            f"Unknown package manager '{value}' (expected one of: {known})"
        ) from exc


def _build_validator(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _iter_error_messages(
    validator: Draft202012Validator, payload: Mapping[str, Any]
) -> Iterable[str]:
    for error in validator.iter_errors(payload):
        path = ".".join(str(idx) for idx in error.path) or "config"
        yield f"{path}: {error.message}"


def read_config_file(
    path: Path, schema_path: Path = DEFAULT_SCHEMA
) -> dict[str, Any]:
    """Parse and validate a YAML config file."""

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    errors = list(_iter_error_messages(_build_validator(schema_path), data))
    if errors:
        raise ConfigError(f"Invalid config {path}:\n" + "\n".join(errors))

    templates_dir = data.get("templates_dir")
    if templates_dir:
        data["templates_dir"] = (path.parent / templates_dir).resolve()
    return data


def load_config(
    target_dir: Path,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SetupConfig:
    """Merge the config file and environment on top of built-in defaults.

    An explicit ``config_path`` must exist; the default ``.n00format.yml`` in
    ``target_dir`` is optional.
    """

    environ = os.environ if environ is None else environ
    target_dir = Path(target_dir)
    config = SetupConfig(target_dir=target_dir)

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        file_values = read_config_file(config_path)
    elif (target_dir / CONFIG_FILENAME).exists():
        file_values = read_config_file(target_dir / CONFIG_FILENAME)
    else:
        file_values = {}

    overwrite = file_values.pop("overwrite", None)
    config = config.with_overrides(
        overwrite_all=None if overwrite is None else overwrite == "all",
        **file_values,
    )

    env_values = {
        field: environ[name] for name, field in ENV_OVERRIDES.items() if environ.get(name)
    }
    return config.with_overrides(**env_values)
