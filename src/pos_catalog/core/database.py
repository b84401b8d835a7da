"""SQLiteデータベース作成ユーティリティ.

POSカタログ用の SQLite 作成とスキーマ・インデックス作成を提供します。

注意:
    POS.name の一意性は UNIQUE 制約で担保する（アプリ側で事前チェックはしない）。
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

from loguru import logger

# DB作成時にのみ有効な PRAGMA
CREATION_PRAGMAS = [
    "PRAGMA page_size = 4096;",
    "PRAGMA auto_vacuum = INCREMENTAL;",
]

REQUIRED_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_pos_campus ON POS(campus);",
    "CREATE INDEX IF NOT EXISTS idx_pos_type ON POS(type);",
]

SCHEMA_SQL = [
    """
    CREATE TABLE IF NOT EXISTS POS (
        pos_id INTEGER NOT NULL PRIMARY KEY,
        name TEXT NOT NULL,
        description TEXT NOT NULL,
        type TEXT NOT NULL,
        campus TEXT NOT NULL,
        street TEXT NOT NULL,
        house_number TEXT NOT NULL,
        city TEXT NOT NULL,
        postal_code INTEGER NOT NULL,
        created_at DATETIME NOT NULL,
        updated_at DATETIME NOT NULL,
        UNIQUE(name)
    );
    """,
]


def create_schema(db_path: Path | str) -> None:
    """DBスキーマ（テーブル・インデックス）を作成する."""
    db_path = Path(db_path)
    if not db_path.exists():
        msg = f"Database does not exist: {db_path}"
        raise FileNotFoundError(msg)

    conn = sqlite3.connect(db_path)
    try:
        for stmt in SCHEMA_SQL:
            conn.executescript(stmt)
        for index_sql in REQUIRED_INDEXES:
            conn.execute(index_sql)
        conn.commit()
    finally:
        conn.close()


def create_database(db_path: Path | str) -> None:
    """データベースファイルを新規作成する（page_size / auto_vacuum 設定込み）.

    Args:
        db_path: 作成するデータベースファイルパス

    Note:
        既に存在する場合は警告のみで何もしない。
    """
    db_path = Path(db_path)

    if db_path.exists():
        logger.warning(f"Database already exists: {db_path}")
        return

    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Creating database: {db_path}")

    conn = sqlite3.connect(db_path)
    try:
        for pragma in CREATION_PRAGMAS:
            conn.execute(pragma)
            logger.debug(f"Applied: {pragma}")

        for stmt in SCHEMA_SQL:
            conn.executescript(stmt)
        for index_sql in REQUIRED_INDEXES:
            conn.execute(index_sql)

        conn.commit()
        logger.info("Database created successfully")

    except Exception as e:
        logger.error(f"Failed to create database: {e}")
        raise
    finally:
        conn.close()
