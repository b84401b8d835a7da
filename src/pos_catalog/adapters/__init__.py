"""外部ノードソースのアダプタ群."""

from .base_adapter import BaseAdapter
from .osm_adapter import DEFAULT_OSM_BASE_URL, OSM_Adapter

__all__ = [
    "BaseAdapter",
    "OSM_Adapter",
    "DEFAULT_OSM_BASE_URL",
]
