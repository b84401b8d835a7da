"""POSデータサービス（ストレージ層）.

カタログのコアが必要とするストレージ契約 `PosDataService` と、
その SQLite 実装 `SqlitePosDataService` を提供します。
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from loguru import logger

from .exceptions import DuplicatePosNameError, PosNotFoundError
from .models import CampusType, Pos, PosType

_SELECT_COLUMNS = (
    "pos_id, name, description, type, campus, street, house_number, city, "
    "postal_code, created_at, updated_at"
)

_INSERT_SQL = """
    INSERT INTO POS (
        name, description, type, campus, street, house_number, city,
        postal_code, created_at, updated_at
    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

# 全フィールド上書き（部分更新はしない）。created_at は維持する。
_UPDATE_SQL = """
    UPDATE POS SET
        name = ?, description = ?, type = ?, campus = ?, street = ?,
        house_number = ?, city = ?, postal_code = ?, updated_at = ?
    WHERE pos_id = ?
"""


class PosDataService(Protocol):
    """POSストレージの契約."""

    def get_all(self) -> list[Pos]: ...

    def get_by_id(self, pos_id: int) -> Pos: ...

    def upsert(self, pos: Pos) -> Pos: ...

    def clear(self) -> None: ...


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_name_conflict(exc: sqlite3.IntegrityError) -> bool:
    return "UNIQUE" in str(exc) and "POS.name" in str(exc)


def _row_to_pos(row: tuple) -> Pos:
    return Pos(
        id=row[0],
        name=row[1],
        description=row[2],
        type=PosType(row[3]),
        campus=CampusType(row[4]),
        street=row[5],
        house_number=row[6],
        city=row[7],
        postal_code=row[8],
        created_at=row[9],
        updated_at=row[10],
    )


class SqlitePosDataService:
    """SQLite を使った PosDataService 実装.

    操作ごとに接続を開き、必ず閉じる。

    Args:
        db_path: create_database() で作成済みのDBファイル
    """

    def __init__(self, db_path: Path | str) -> None:
        """初期化.

        Raises:
            FileNotFoundError: DBファイルが存在しない場合
        """
        self.db_path = Path(db_path)
        if not self.db_path.exists():
            raise FileNotFoundError(f"Database not found: {self.db_path}")

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def get_all(self) -> list[Pos]:
        conn = self._connect()
        try:
            rows = conn.execute(f"SELECT {_SELECT_COLUMNS} FROM POS ORDER BY pos_id").fetchall()
        finally:
            conn.close()
        return [_row_to_pos(row) for row in rows]

    def get_by_id(self, pos_id: int) -> Pos:
        conn = self._connect()
        try:
            row = conn.execute(f"SELECT {_SELECT_COLUMNS} FROM POS WHERE pos_id = ?", (pos_id,)).fetchone()
        finally:
            conn.close()
        if row is None:
            raise PosNotFoundError(pos_id)
        return _row_to_pos(row)

    def upsert(self, pos: Pos) -> Pos:
        """POSを作成または全上書き更新する.

        Returns:
            永続化後の Pos（id / タイムスタンプ付き）

        Raises:
            DuplicatePosNameError: 別レコードが同名を保持している場合
            PosNotFoundError: 更新対象の id が存在しない場合
        """
        now = _utc_now()
        values = (
            pos.name,
            pos.description,
            pos.type.value,
            pos.campus.value,
            pos.street,
            pos.house_number,
            pos.city,
            pos.postal_code,
        )

        conn = self._connect()
        try:
            if pos.id is None:
                cursor = conn.execute(_INSERT_SQL, (*values, now, now))
                pos_id = cursor.lastrowid
            else:
                cursor = conn.execute(_UPDATE_SQL, (*values, now, pos.id))
                if cursor.rowcount == 0:
                    raise PosNotFoundError(pos.id)
                pos_id = pos.id
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if _is_name_conflict(e):
                raise DuplicatePosNameError(pos.name) from e
            raise
        finally:
            conn.close()

        logger.debug(f"Stored POS row: pos_id={pos_id}")
        return self.get_by_id(pos_id)

    def clear(self) -> None:
        conn = self._connect()
        try:
            deleted = conn.execute("DELETE FROM POS").rowcount
            conn.commit()
        finally:
            conn.close()
        logger.debug(f"Deleted {deleted} POS rows")

