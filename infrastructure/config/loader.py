"""Configuration loading from YAML files and environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from domain.errors import MissingFileError
from infrastructure.config.models import CatalogConfig, DiscoveryConfig, ReportConfig
from infrastructure.constants import (
    CATEGORIES_FILE,
    DOCS_DIR,
    ENV_CATEGORIES_FILE,
    ENV_DOCS_DIR,
    ENV_REPORT_FILE,
    ENV_THEMES_FILE,
    REPORT_FILE,
    THEME_PAGES_DIR,
    THEMES_FILE,
)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict (an empty file yields {})."""
    if not path.exists():
        raise MissingFileError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _resolve(root: Path, value: str | Path) -> Path:
    p = Path(value)
    return p if p.is_absolute() else root / p


def _section(exp: dict[str, Any], key: str) -> dict[str, Any]:
    block = exp.get(key) or {}
    if not isinstance(block, dict):
        raise ValueError(f"catalog config '{key}' must be a mapping, got {type(block).__name__}")
    return dict(block)


def load_catalog_config(
    config_path: Path,
    *,
    allow_missing: bool = False,
    environ: Mapping[str, str] | None = None,
) -> CatalogConfig:
    """
    Load catalog.yaml and construct a fully-resolved CatalogConfig.

    Precedence for each path: environment variable, then YAML value, then the
    repository default from infrastructure.constants. Relative paths resolve
    against `root_dir` (itself relative to the working directory).

    Args:
        config_path: Path to catalog.yaml
        allow_missing: Use defaults instead of failing when the file is absent
        environ: Environment mapping (defaults to os.environ)

    Raises:
        MissingFileError: If the config file is absent and allow_missing is False
        ValueError: If the YAML is not a mapping or has invalid values
    """
    env = os.environ if environ is None else environ
    exp = {} if (allow_missing and not config_path.exists()) else _load_yaml(config_path)

    root = Path(exp.get("root_dir") or ".")

    def pick(env_key: str | None, yaml_key: str, default: Path) -> Path:
        raw = (env.get(env_key) if env_key else None) or exp.get(yaml_key) or default
        return _resolve(root, raw)

    report_raw = _section(exp, "report")
    report_raw["output_file"] = _resolve(
        root, env.get(ENV_REPORT_FILE) or report_raw.get("output_file") or REPORT_FILE
    )

    return CatalogConfig(
        root_dir=root,
        docs_dir=pick(ENV_DOCS_DIR, "docs_dir", DOCS_DIR),
        themes_file=pick(ENV_THEMES_FILE, "themes_file", THEMES_FILE),
        categories_file=pick(ENV_CATEGORIES_FILE, "categories_file", CATEGORIES_FILE),
        theme_pages_dir=pick(None, "theme_pages_dir", THEME_PAGES_DIR),
        discovery=DiscoveryConfig(**_section(exp, "discovery")),
        report=ReportConfig(**report_raw),
    )
