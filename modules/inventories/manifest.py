"""Inventories manifest — tool definitions.

Docs: https://create.roblox.com/docs/cloud/reference/features/inventories
Endpoint: GET /cloud/v2/users/{userId}/inventory-items (beta)
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

PageSize = Annotated[int, Field(ge=1, le=100)]

FILTER_EXAMPLES = (
    'Semicolon-separated filter string. Examples: "assetIds=62724852,1028595" | '
    '"onlyCollectibles=true;inventoryItemAssetTypes=HAT,CLASSIC_PANTS" | '
    '"badgeIds=111,222;gamePassIds=777" | "gamePasses=true;badges=true"'
)


class ListItemsInput(ToolInput):
    # None means the configured ROBLOX_USER_ID
    user_id: Optional[str] = Field(None, description="Roblox user ID to list inventory for")
    filter: Optional[str] = Field(None, description=FILTER_EXAMPLES)
    max_page_size: PageSize = Field(25, description="Max items per page (1-100, default 25)")
    page_token: Optional[str] = Field(None, description="Page token from a previous response for pagination")


class CheckOwnershipInput(ToolInput):
    user_id: Optional[str] = Field(None, description="Roblox user ID to check ownership for")
    asset_ids: str = Field(description='Comma-separated asset IDs to check (e.g. "62724852,1028595,4773588762")')


class ListCollectiblesInput(ToolInput):
    user_id: Optional[str] = Field(None, description="Roblox user ID")
    asset_types: Optional[str] = Field(
        None,
        description=(
            'Comma-separated asset types to filter (e.g. "HAT,CLASSIC_PANTS"). '
            'Use "*" for all types. Defaults to all.'
        ),
    )
    max_page_size: PageSize = Field(25, description="Max items per page (1-100)")
    page_token: Optional[str] = Field(None, description="Page token for pagination")


MANIFEST = ModuleManifest(
    module_name="inventories",
    description="Query Roblox user inventories (assets, badges, game passes, collectibles).",
    tools=[
        ToolSpec(
            name="inventory_list_items",
            description=(
                "List inventory items for a Roblox user. Supports filtering by asset IDs, "
                "badge IDs, game pass IDs, private server IDs, collectibles, and asset types. "
                'Filters are semicolon-separated (e.g. "onlyCollectibles=true;inventoryItemAssetTypes=HAT").'
            ),
            input_model=ListItemsInput,
        ),
        ToolSpec(
            name="inventory_check_ownership",
            description=(
                "Check whether a Roblox user owns specific assets by their IDs. "
                "Returns only the assets from the list that the user actually owns."
            ),
            input_model=CheckOwnershipInput,
        ),
        ToolSpec(
            name="inventory_list_collectibles",
            description="List all collectible/limited items owned by a Roblox user.",
            input_model=ListCollectiblesInput,
        ),
    ],
)
