"""外部ノードソース用アダプタ（基底クラス）.

外部ジオデータソースのノード取得を共通インターフェースで扱うための
抽象基底クラスを定義します。
"""

from abc import ABC, abstractmethod


class BaseAdapter(ABC):
    """外部ノードソースアダプタの基底クラス.

    全ての外部ソースアダプタはこのクラスを継承し、read() を実装します。
    """

    @abstractmethod
    def read(self, node_id: int) -> object:
        """ノードIDに対応する生ペイロード（JSONデコード済み）を取得する.

        Raises:
            ExternalNodeNotFoundError: 取得に失敗した場合（通信失敗・非2xx・不正な応答・null）
        """
        ...
