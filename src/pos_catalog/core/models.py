"""POSカタログのドメインモデル."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PosType(str, Enum):
    """POSの種別."""

    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    UNKNOWN = "UNKNOWN"


class CampusType(str, Enum):
    """郵便番号から推定するキャンパス."""

    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Pos:
    """カタログ上のPOS1件.

    id が None の場合は未永続化（新規作成扱い）。
    created_at / updated_at はストレージ側で付与される。
    """

    name: str
    description: str = "N/A"
    type: PosType = PosType.UNKNOWN
    campus: CampusType = CampusType.UNKNOWN
    street: str = "Unknown"
    house_number: str = "0"
    city: str = "Unknown"
    postal_code: int = 0
    id: int | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def as_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "campus": self.campus.value,
            "street": self.street,
            "house_number": self.house_number,
            "city": self.city,
            "postal_code": self.postal_code,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
