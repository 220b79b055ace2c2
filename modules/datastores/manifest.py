"""DataStore manifest — tool definitions.

Docs: https://create.roblox.com/docs/cloud/reference/DataStore
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from shared.schemas.common import UNIVERSE_ID_DESCRIPTION, OptionalNumericId
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

PageLimit = Optional[Annotated[int, Field(ge=1, le=100)]]


class ListStoresInput(ToolInput):
    universe_id: OptionalNumericId = Field(None, description=UNIVERSE_ID_DESCRIPTION)
    prefix: Optional[str] = Field(None, description="Filter stores by name prefix")
    limit: PageLimit = Field(None, description="Max results to return")
    cursor: Optional[str] = Field(None, description="Pagination cursor from a previous response")


class ListKeysInput(ToolInput):
    datastore_name: str = Field(description="Name of the DataStore")
    universe_id: OptionalNumericId = Field(None, description=UNIVERSE_ID_DESCRIPTION)
    prefix: Optional[str] = Field(None, description="Filter keys by prefix")
    limit: PageLimit = Field(None, description="Max results to return")
    cursor: Optional[str] = Field(None, description="Pagination cursor")
    scope: Optional[str] = Field(None, description='DataStore scope (default: "global")')


class GetEntryInput(ToolInput):
    datastore_name: str = Field(description="Name of the DataStore")
    entry_key: str = Field(description="The key to retrieve")
    universe_id: OptionalNumericId = Field(None, description=UNIVERSE_ID_DESCRIPTION)
    scope: Optional[str] = Field(None, description='DataStore scope (default: "global")')


class SetEntryInput(ToolInput):
    datastore_name: str = Field(description="Name of the DataStore")
    entry_key: str = Field(description="The key to set")
    value: str = Field(description="JSON string value to store")
    universe_id: OptionalNumericId = Field(None, description=UNIVERSE_ID_DESCRIPTION)
    scope: Optional[str] = Field(None, description='DataStore scope (default: "global")')


MANIFEST = ModuleManifest(
    module_name="datastores",
    description="Read and write Roblox standard DataStores via Open Cloud.",
    tools=[
        ToolSpec(
            name="datastore_list_stores",
            description="List all DataStores in a Roblox universe.",
            input_model=ListStoresInput,
        ),
        ToolSpec(
            name="datastore_list_keys",
            description="List keys in a specific DataStore.",
            input_model=ListKeysInput,
        ),
        ToolSpec(
            name="datastore_get_entry",
            description="Get a single entry from a DataStore by key.",
            input_model=GetEntryInput,
        ),
        ToolSpec(
            name="datastore_set_entry",
            description="Set (create or update) an entry in a DataStore.",
            input_model=SetEntryInput,
        ),
    ],
)
