"""実行設定の読み込み（YAML + 環境変数）.

YAML例:
    database:
      path: data/pos_catalog.db
    osm:
      base_url: https://api.openstreetmap.org/api/0.6
    logging:
      level: INFO

環境変数（YAMLより優先）:
    POS_CATALOG_DB_PATH / POS_CATALOG_OSM_BASE_URL / POS_CATALOG_LOG_LEVEL
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from loguru import logger

from pos_catalog.adapters.osm_adapter import DEFAULT_OSM_BASE_URL

DEFAULT_DB_PATH = Path("pos_catalog.db")
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class CatalogSettings:
    db_path: Path = DEFAULT_DB_PATH
    osm_base_url: str = DEFAULT_OSM_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL


def _section(config: dict, key: str) -> dict:
    value = config.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def load_settings(config_path: Path | str | None = None) -> CatalogSettings:
    """設定を読み込む.

    Args:
        config_path: YAMLファイル（None の場合はデフォルト + 環境変数のみ）

    Raises:
        FileNotFoundError: 指定されたYAMLが存在しない場合
        ValueError: YAMLの構造が不正な場合
    """
    config: dict = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        config = loaded or {}
        logger.debug(f"Loaded config from {config_path}")

    database = _section(config, "database")
    osm = _section(config, "osm")
    logging_cfg = _section(config, "logging")

    db_path = os.environ.get("POS_CATALOG_DB_PATH") or database.get("path") or DEFAULT_DB_PATH
    base_url = os.environ.get("POS_CATALOG_OSM_BASE_URL") or osm.get("base_url") or DEFAULT_OSM_BASE_URL
    log_level = os.environ.get("POS_CATALOG_LOG_LEVEL") or logging_cfg.get("level") or DEFAULT_LOG_LEVEL

    return CatalogSettings(
        db_path=Path(db_path),
        osm_base_url=str(base_url),
        log_level=str(log_level).upper(),
    )
