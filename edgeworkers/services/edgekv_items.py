"""
EdgeKV Items

Read and write items of an EdgeKV namespace group. Item values are passed
through as raw text.
"""

import json
from dataclasses import dataclass

import structlog

from ..core import validation as v
from .base import ServiceMixin
from .edgekv_namespaces import EdgeKVNetwork, Network

logger = structlog.get_logger()


def is_json(data: str) -> bool:
    try:
        json.loads(data)
    except ValueError:
        return False
    return True


@dataclass
class ItemsRequestParams:
    """Location of a group: network, namespace and group"""

    network: Network = None
    namespace_id: v.Text = ""
    group_id: v.Text = ""

    @property
    def group_path(self) -> str:
        network = EdgeKVNetwork(self.network).value
        return f"/edgekv/v1/networks/{network}/namespaces/{self.namespace_id}/groups/{self.group_id}"


@dataclass
class ListItemsRequest(ItemsRequestParams):
    pass


@dataclass
class GetItemRequest(ItemsRequestParams):
    item_id: v.Text = ""


@dataclass
class UpsertItemRequest(ItemsRequestParams):
    item_id: v.Text = ""
    item_data: v.Text = ""


@dataclass
class DeleteItemRequest(ItemsRequestParams):
    item_id: v.Text = ""


class EdgeKVItemsMixin(ServiceMixin):
    async def list_items(self, params: ListItemsRequest) -> list[str]:
        """List item IDs of a group"""
        operation = "list items"
        logger.debug("list_items", namespace=params.namespace_id, group=params.group_id)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", params.group_path)
        return [str(item) for item in self._decode_list(operation, response)]

    async def get_item(self, params: GetItemRequest) -> str:
        """Get an item value as raw text"""
        operation = "get item"
        logger.debug("get_item", namespace=params.namespace_id, item=params.item_id)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"{params.group_path}/items/{params.item_id}")
        return response.text

    async def upsert_item(self, params: UpsertItemRequest) -> str:
        """Create or update an item, returning the API message"""
        operation = "create or update item"
        logger.debug("upsert_item", namespace=params.namespace_id, item=params.item_id)
        params = self._validate(operation, params)

        content_type = "application/json" if is_json(params.item_data) else "text/plain"
        response = await self._call(
            operation,
            "PUT",
            f"{params.group_path}/items/{params.item_id}",
            content=params.item_data.encode(),
            headers={"Content-Type": content_type},
        )
        return response.text

    async def delete_item(self, params: DeleteItemRequest) -> str:
        """Delete an item, returning the API message"""
        operation = "delete item"
        logger.debug("delete_item", namespace=params.namespace_id, item=params.item_id)
        params = self._validate(operation, params)

        response = await self._call(operation, "DELETE", f"{params.group_path}/items/{params.item_id}")
        return response.text
