"""カタログのファイル出力（CSV / Parquet）."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import polars as pl

from .models import Pos

EXPORT_SCHEMA = {
    "id": pl.Int64,
    "name": pl.String,
    "description": pl.String,
    "type": pl.String,
    "campus": pl.String,
    "street": pl.String,
    "house_number": pl.String,
    "city": pl.String,
    "postal_code": pl.Int64,
    "created_at": pl.String,
    "updated_at": pl.String,
}

EXPORT_FORMATS = ("csv", "parquet")


def catalog_to_frame(pos_list: Iterable[Pos]) -> pl.DataFrame:
    """POS一覧を固定スキーマの DataFrame に変換する（空でも列は揃える）."""
    return pl.DataFrame([pos.as_dict() for pos in pos_list], schema=EXPORT_SCHEMA)


def export_catalog(pos_list: Iterable[Pos], output_path: Path | str, fmt: str = "csv") -> Path:
    """POS一覧をファイルに出力する.

    Args:
        pos_list: 出力対象
        output_path: 出力ファイルパス（親ディレクトリは自動作成）
        fmt: "csv" または "parquet"

    Returns:
        出力したファイルのパス

    Raises:
        ValueError: 未対応のフォーマットの場合
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format: {fmt!r} (expected one of {EXPORT_FORMATS})")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = catalog_to_frame(pos_list)
    if fmt == "parquet":
        df.write_parquet(output_path, compression="zstd")
    else:
        df.write_csv(output_path)
    return output_path
