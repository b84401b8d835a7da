"""OSM_Adapter for fetching OpenStreetMap node data.

This adapter fetches a single node from the OpenStreetMap API 0.6 as JSON.
"""

from __future__ import annotations

import httpx
from loguru import logger

from pos_catalog.core.exceptions import ExternalNodeNotFoundError

from .base_adapter import BaseAdapter

DEFAULT_OSM_BASE_URL = "https://api.openstreetmap.org/api/0.6"


class OSM_Adapter(BaseAdapter):
    """Adapter for OpenStreetMap node lookups.

    Args:
        base_url: API base URL (node URL is ``{base_url}/node/{node_id}.json``)
        client: Optional httpx client (tests inject one with a MockTransport)
    """

    def __init__(self, base_url: str = DEFAULT_OSM_BASE_URL, client: httpx.Client | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = client

    def node_url(self, node_id: int) -> str:
        """Build the canonical lookup URL for a node."""
        return f"{self.base_url}/node/{node_id}.json"

    def _get(self, url: str) -> httpx.Response:
        if self.client is not None:
            return self.client.get(url)
        with httpx.Client() as client:
            return client.get(url)

    def read(self, node_id: int) -> object:
        """Fetch and decode the node document.

        Returns:
            Decoded JSON document (never None)

        Raises:
            ExternalNodeNotFoundError: Transport error, non-success status,
                undecodable body or JSON null
        """
        url = self.node_url(node_id)
        logger.debug(f"Fetching OSM node: {url}")
        try:
            response = self._get(url)
            response.raise_for_status()
            payload = response.json()
        except Exception as e:
            logger.warning(f"Failed to fetch OSM node {node_id}: {e}")
            raise ExternalNodeNotFoundError(node_id) from e

        if payload is None:
            raise ExternalNodeNotFoundError(node_id)
        return payload
