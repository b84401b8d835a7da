"""POSカタログのコア処理群.

- 正規化（OSM tags → Pos）
- ストレージ（SQLite、名前の一意性はDB制約）
- 出力（CSV / Parquet）
"""

from .exceptions import (
    DuplicatePosNameError,
    ExternalNodeMissingFieldsError,
    ExternalNodeNotFoundError,
    PosCatalogError,
    PosNotFoundError,
)
from .models import CampusType, Pos, PosType
from .normalize import classify_campus, classify_pos_type, normalize_node_tags

__all__ = [
    "Pos",
    "PosType",
    "CampusType",
    "PosCatalogError",
    "ExternalNodeNotFoundError",
    "ExternalNodeMissingFieldsError",
    "PosNotFoundError",
    "DuplicatePosNameError",
    "classify_pos_type",
    "classify_campus",
    "normalize_node_tags",
]
