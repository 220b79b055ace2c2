"""DataStore tool implementations."""

from __future__ import annotations

from typing import Any

from core.registry import ToolRegistry
from core.services import Services
from modules.datastores.manifest import (
    MANIFEST,
    GetEntryInput,
    ListKeysInput,
    ListStoresInput,
    SetEntryInput,
)
from shared.responses import success_response, text_response
from shared.schemas.tools import ToolResult


def _query(**params: Any) -> dict[str, str]:
    """Drop unset parameters and stringify the rest."""
    return {key: str(value) for key, value in params.items() if value}


class DatastoreTools:
    """Tool implementations for the standard DataStores v1 API."""

    def __init__(self, services: Services):
        self.services = services
        self.client = services.roblox

    def _url(self, universe_id: str | None, path: str) -> str:
        uid = universe_id or self.services.settings.roblox_universe_id
        return self.client.url(f"/datastores/v1/universes/{uid}/standard-datastores{path}")

    async def datastore_list_stores(self, params: ListStoresInput) -> ToolResult:
        res = await self.client.get(
            self._url(params.universe_id, ""),
            params=_query(prefix=params.prefix, limit=params.limit, cursor=params.cursor),
        )
        res.raise_for_status()
        return success_response(res.body)

    async def datastore_list_keys(self, params: ListKeysInput) -> ToolResult:
        res = await self.client.get(
            self._url(params.universe_id, "/datastore/entries"),
            params=_query(
                datastoreName=params.datastore_name,
                prefix=params.prefix,
                limit=params.limit,
                cursor=params.cursor,
                scope=params.scope,
            ),
        )
        res.raise_for_status()
        return success_response(res.body)

    async def datastore_get_entry(self, params: GetEntryInput) -> ToolResult:
        res = await self.client.get(
            self._url(params.universe_id, "/datastore/entries/entry"),
            params=_query(
                datastoreName=params.datastore_name,
                entryKey=params.entry_key,
                scope=params.scope,
            ),
        )
        res.raise_for_status()
        return success_response(res.body)

    async def datastore_set_entry(self, params: SetEntryInput) -> ToolResult:
        res = await self.client.post(
            self._url(params.universe_id, "/datastore/entries/entry"),
            params=_query(
                datastoreName=params.datastore_name,
                entryKey=params.entry_key,
                scope=params.scope,
            ),
            content=params.value,
        )
        res.raise_for_status()
        return text_response(f"Entry set successfully.\n{res.body}")


def register_datastore_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, DatastoreTools(services))
