"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK EdgeKV Item Operations.

Items live in a group within a namespace on one network. Item data is an
opaque string; JSON data is sent as ``application/json`` and anything else
as ``text/plain``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import List

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.operations import ResourceOperations, segment
from edgeworkers.sdk.validation import ValidationErrors, one_of, required

LIST_ITEMS = "list items"
GET_ITEM = "get item"
UPSERT_ITEM = "create or update item"
DELETE_ITEM = "delete item"


class ItemNetwork(str, Enum):
    STAGING = "staging"
    PRODUCTION = "production"


def is_json(data: str) -> bool:
    try:
        json.loads(data)
    except ValueError:
        return False
    return True


@dataclass
class ItemsRequestParams:
    """Location of a group of items."""

    network: ItemNetwork = ""  # type: ignore[assignment]
    namespace_id: str = ""
    group_id: str = ""

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.first("network", required(self.network), one_of(self.network, list(ItemNetwork)))
        errors.add("namespace_id", required(self.namespace_id))
        errors.add("group_id", required(self.group_id))
        return errors

    @property
    def group_path(self) -> str:
        return (
            f"/edgekv/v1/networks/{segment(self.network)}"
            f"/namespaces/{segment(self.namespace_id)}/groups/{segment(self.group_id)}"
        )


@dataclass
class ListItemsRequest(ItemsRequestParams):
    pass


@dataclass
class GetItemRequest(ItemsRequestParams):
    item_id: str = ""

    def validate(self) -> ValidationErrors:
        errors = super().validate()
        errors.add("item_id", required(self.item_id))
        return errors

    @property
    def item_path(self) -> str:
        return f"{self.group_path}/items/{segment(self.item_id)}"


@dataclass
class DeleteItemRequest(GetItemRequest):
    pass


@dataclass
class UpsertItemRequest(GetItemRequest):
    item_data: str = ""

    def validate(self) -> ValidationErrors:
        errors = super().validate()
        errors.add("item_data", required(self.item_data))
        return errors


class EdgeKVItemOperations(ResourceOperations):
    """Items stored in EdgeKV groups."""

    async def list_items(self, request: ListItemsRequest) -> List[str]:
        """List item ids in a group."""
        self._validate(LIST_ITEMS, request)
        req = SDKRequest(method="GET", path=request.group_path)
        resp = await self._execute(LIST_ITEMS, req, expected_status=200)
        return self._decode(LIST_ITEMS, resp, List[str])

    async def get_item(self, request: GetItemRequest) -> str:
        """Read an item. The data is returned exactly as stored."""
        self._validate(GET_ITEM, request)
        req = SDKRequest(method="GET", path=request.item_path)
        resp = await self._execute(GET_ITEM, req, expected_status=200)
        return resp.text

    async def upsert_item(self, request: UpsertItemRequest) -> str:
        """Create or update an item and return the API's confirmation text."""
        self._validate(UPSERT_ITEM, request)
        content_type = "application/json" if is_json(request.item_data) else "text/plain"
        req = SDKRequest(
            method="PUT",
            path=request.item_path,
            headers={"Content-Type": content_type},
            content=request.item_data.encode("utf-8"),
        )
        resp = await self._execute(UPSERT_ITEM, req, expected_status=200)
        return resp.text

    async def delete_item(self, request: DeleteItemRequest) -> str:
        self._validate(DELETE_ITEM, request)
        req = SDKRequest(method="DELETE", path=request.item_path)
        resp = await self._execute(DELETE_ITEM, req, expected_status=200)
        return resp.text
