"""OSMタグ正規化（node tags → Pos）.

OSMノードの自由形式タグを、カタログで扱う Pos に変換するための関数群です。

設計方針:
    - 欠損タグは決定的なデフォルト値で埋める（未設定のフィールドを残さない）
    - 種別・キャンパスの判定は完全一致の参照表のみで行う（部分一致・あいまい一致はしない）
    - 郵便番号の数値化に失敗しても致命的にしない（0 にフォールバックして警告のみ）
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping

from loguru import logger

from .exceptions import ExternalNodeMissingFieldsError
from .models import CampusType, Pos, PosType

# タグ未設定時のデフォルト値
DESCRIPTION_DEFAULT = "N/A"
STREET_DEFAULT = "Unknown"
HOUSE_NUMBER_DEFAULT = "N/A"
CITY_DEFAULT = "Unknown"
POSTCODE_DEFAULT = "0"
TYPE_TAG_DEFAULT = "Unknown"

POS_TYPE_BY_TAG: dict[str, PosType] = {
    "cafe": PosType.CAFE,
    "vending_machine": PosType.VENDING_MACHINE,
    "bakery": PosType.BAKERY,
}

CAMPUS_BY_POSTCODE: dict[str, CampusType] = {
    "69117": CampusType.ALTSTADT,
    "69115": CampusType.BERGHEIM,
    "69120": CampusType.INF,
}

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_DECIMAL_INT = re.compile(r"[+-]?\d+")


def _opt_str(tags: Mapping[str, object], key: str, default: str | None) -> str | None:
    """タグ値を文字列で取得する（未設定・null はデフォルト）."""
    value = tags.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def classify_pos_type(amenity: str, shop: str) -> PosType:
    """amenity / shop タグから POS 種別を判定する.

    amenity が "Unknown"（未設定）の場合のみ shop を参照する。

    Examples:
        >>> classify_pos_type("cafe", "bakery")
        <PosType.CAFE: 'CAFE'>
        >>> classify_pos_type("Unknown", "bakery")
        <PosType.BAKERY: 'BAKERY'>
    """
    type_tag = shop if amenity == TYPE_TAG_DEFAULT else amenity
    return POS_TYPE_BY_TAG.get(type_tag, PosType.UNKNOWN)


def classify_campus(postcode: str) -> CampusType:
    """郵便番号文字列（生値）からキャンパスを判定する."""
    return CAMPUS_BY_POSTCODE.get(postcode, CampusType.UNKNOWN)


def normalize_house_number(house_number: str) -> str:
    """番地を正規化する（"N/A" は "0" に寄せる）."""
    if house_number == HOUSE_NUMBER_DEFAULT:
        return "0"
    return house_number


def parse_postal_code(postcode: str, *, node_id: int | None = None) -> int:
    """郵便番号を整数に変換する.

    符号付き10進数（Unicode の10進数字を含む、32bit範囲）のみ受け付け、それ以外は警告を出して 0 を返す。
    """
    if _DECIMAL_INT.fullmatch(postcode):
        value = int(postcode)
        if _INT32_MIN <= value <= _INT32_MAX:
            return value

    logger.warning(f"Could not parse postcode '{postcode}' for OSM node {node_id}. Using default 0.")
    return 0


def normalize_node_tags(tags: Mapping[str, object], node_id: int) -> Pos:
    """OSMノードのタグから新規作成用の Pos（id なし）を組み立てる.

    Args:
        tags: OSMノードの tags マッピング
        node_id: ログ・例外用のノードID

    Returns:
        未永続化の Pos

    Raises:
        ExternalNodeMissingFieldsError: name タグが無い場合
    """
    name = _opt_str(tags, "name", None)
    if name is None:
        raise ExternalNodeMissingFieldsError(node_id)

    description = _opt_str(tags, "description", DESCRIPTION_DEFAULT)
    street = _opt_str(tags, "addr:street", STREET_DEFAULT)
    house_number = normalize_house_number(_opt_str(tags, "addr:housenumber", HOUSE_NUMBER_DEFAULT))
    city = _opt_str(tags, "addr:city", CITY_DEFAULT)
    postcode = _opt_str(tags, "addr:postcode", POSTCODE_DEFAULT)

    pos_type = classify_pos_type(
        _opt_str(tags, "amenity", TYPE_TAG_DEFAULT),
        _opt_str(tags, "shop", TYPE_TAG_DEFAULT),
    )

    return Pos(
        name=name,
        description=description,
        type=pos_type,
        campus=classify_campus(postcode),
        street=street,
        house_number=house_number,
        city=city,
        postal_code=parse_postal_code(postcode, node_id=node_id),
    )


def extract_node_tags(payload: object, node_id: int) -> Mapping[str, object] | None:
    """ノード取得結果から先頭要素の tags を取り出す.

    Returns:
        tags マッピング。elements が空の場合は None。

    Raises:
        ExternalNodeMissingFieldsError: tags が無い（またはマッピングでない）場合
        KeyError / TypeError / IndexError: ペイロードの形が想定外の場合
    """
    elements = payload["elements"]  # type: ignore[index]
    if not isinstance(elements, list):
        raise TypeError(f"'elements' must be a list, got {type(elements).__name__}")

    if len(elements) == 0:
        return None

    node_element = elements[0]
    if not isinstance(node_element, Mapping):
        raise TypeError(f"Node element must be an object, got {type(node_element).__name__}")

    tags = node_element.get("tags")
    if not isinstance(tags, Mapping):
        raise ExternalNodeMissingFieldsError(node_id)
    return tags
