"""POS catalog exceptions.

カタログ操作・OSM取り込みで発生するドメイン例外を定義します。
"""


class PosCatalogError(Exception):
    """POSカタログのドメイン例外の基底クラス."""


class ExternalNodeNotFoundError(PosCatalogError):
    """OSMノードが取得できなかった例外.

    通信失敗・非2xx応答・JSONとして解釈できない応答・elements が空、のいずれも
    この例外に集約されます（「通信失敗」と「本当に存在しない」は区別しない）。

    Attributes:
        node_id: 対象のOSMノードID
    """

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node not found: {node_id}")


class ExternalNodeMissingFieldsError(PosCatalogError):
    """OSMノードは取得できたが必須フィールドが欠けている例外.

    tags / name が無い場合、またはペイロード自体を解釈できなかった場合に送出されます。

    Attributes:
        node_id: 対象のOSMノードID
    """

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node {node_id} is missing required fields (tags/name)")


class PosNotFoundError(PosCatalogError):
    """指定IDのPOSがストレージに存在しない例外.

    Attributes:
        pos_id: 対象のPOS ID
    """

    def __init__(self, pos_id: int) -> None:
        self.pos_id = pos_id
        super().__init__(f"POS not found: id={pos_id}")


class DuplicatePosNameError(PosCatalogError):
    """同名のPOSが既に存在するためストレージが書き込みを拒否した例外.

    Attributes:
        name: 衝突したPOS名
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"POS with name '{name}' already exists")
