"""POSサービス（カタログ操作のオーケストレーター）.

作成/更新の判定（upsert）と、OSMノードからの取り込みを担う。
名前の一意性はストレージ側の制約に任せ、ここでは衝突を例外として呼び出し元へ伝える。
"""

from __future__ import annotations

from loguru import logger

from pos_catalog.adapters.base_adapter import BaseAdapter
from pos_catalog.core.exceptions import (
    DuplicatePosNameError,
    ExternalNodeMissingFieldsError,
    ExternalNodeNotFoundError,
)
from pos_catalog.core.models import Pos
from pos_catalog.core.normalize import extract_node_tags, normalize_node_tags
from pos_catalog.core.storage import PosDataService


class PosService:
    """POSカタログのビジネスロジック.

    Args:
        data_service: ストレージ（PosDataService 契約）
        node_adapter: 外部ノードの取得アダプタ（OSM 取り込みを使わない場合は None）
    """

    def __init__(self, data_service: PosDataService, node_adapter: BaseAdapter | None = None) -> None:
        self.data_service = data_service
        self.node_adapter = node_adapter

    def clear(self) -> None:
        """全POSを無条件に削除する（管理用途・取り消し不可）."""
        logger.warning("Clearing all POS data")
        self.data_service.clear()

    def get_all(self) -> list[Pos]:
        logger.debug("Retrieving all POS")
        return self.data_service.get_all()

    def get_by_id(self, pos_id: int) -> Pos:
        logger.debug(f"Retrieving POS with ID: {pos_id}")
        return self.data_service.get_by_id(pos_id)

    def upsert(self, pos: Pos) -> Pos:
        """POSを作成または更新する.

        - id なし: 作成（存在確認はしない）
        - id あり: 更新（書き込み前に存在確認し、無ければ PosNotFoundError）

        Returns:
            ストレージが返した永続化後の Pos

        Raises:
            PosNotFoundError: 更新対象が存在しない場合（書き込みは行わない）
            DuplicatePosNameError: 同名のPOSが既に存在する場合
        """
        if pos.id is None:
            logger.info(f"Creating new POS: {pos.name}")
            return self._perform_upsert(pos)

        logger.info(f"Updating POS with ID: {pos.id}")
        # 更新前に存在していること
        self.data_service.get_by_id(pos.id)
        return self._perform_upsert(pos)

    def import_from_osm_node(self, node_id: int) -> Pos:
        """OSMノードを取り込み、新規POSとして登録する.

        Args:
            node_id: OSMノードID

        Returns:
            登録済みの Pos

        Raises:
            ExternalNodeNotFoundError: ノードを取得できない、または elements が空の場合
            ExternalNodeMissingFieldsError: tags / name が無い、またはペイロードを解釈できない場合
            DuplicatePosNameError: 同名のPOSが既に存在する場合
        """
        if self.node_adapter is None:
            raise ValueError("No node adapter configured for OSM import")

        logger.info(f"Importing POS from OpenStreetMap node {node_id}...")
        payload = self.node_adapter.read(node_id)

        try:
            tags = extract_node_tags(payload, node_id)
            if tags is None:
                raise ExternalNodeNotFoundError(node_id)
            pos = normalize_node_tags(tags, node_id)
        except (ExternalNodeNotFoundError, ExternalNodeMissingFieldsError):
            raise
        except Exception as e:
            logger.error(f"Failed to parse OSM node data for node ID: {node_id}: {e}")
            raise ExternalNodeMissingFieldsError(node_id) from e

        saved_pos = self.upsert(pos)
        logger.info(f"Successfully imported POS '{saved_pos.name}' from OSM node {node_id}")
        return saved_pos

    def _perform_upsert(self, pos: Pos) -> Pos:
        """ストレージへ委譲する（名前の一意性はDB制約で担保）."""
        try:
            upserted_pos = self.data_service.upsert(pos)
        except DuplicatePosNameError as e:
            logger.error(f"Error upserting POS '{pos.name}': {e}")
            raise
        logger.info(f"Successfully upserted POS with ID: {upserted_pos.id}")
        return upserted_pos
