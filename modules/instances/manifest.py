"""Instances manifest — tool definitions.

Docs: https://create.roblox.com/docs/cloud/reference/Engine

The Engine API is eventually consistent: reads may lag a fresh publish.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from shared.schemas.common import PLACE_ID_DESCRIPTION, UNIVERSE_ID_DESCRIPTION, OptionalNumericId
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

PROPERTY_EXAMPLE = '{"Name":{"stringValue":"MyPart"},"Anchored":{"boolValue":true}}'


class PlaceScopedInput(ToolInput):
    universe_id: OptionalNumericId = Field(None, description=UNIVERSE_ID_DESCRIPTION)
    place_id: OptionalNumericId = Field(None, description=PLACE_ID_DESCRIPTION)


class GetInstanceInput(PlaceScopedInput):
    instance_id: str = Field(description="The instance ID to retrieve")


class ListChildrenInput(PlaceScopedInput):
    instance_id: str = Field(
        "root", description='Parent instance ID ("root" for top-level DataModel children)'
    )
    page_token: Optional[str] = Field(None, description="Pagination token from a previous response")


class UpdateInstanceInput(PlaceScopedInput):
    instance_id: str = Field(description="The instance ID to update")
    property_updates: str = Field(
        description=f"JSON string of property updates in Engine API format. Example: {PROPERTY_EXAMPLE}"
    )


class CreateInstanceInput(PlaceScopedInput):
    parent_instance_id: str = Field(description="The instance ID of the parent to create under")
    class_name: str = Field(description='Roblox class name (e.g., "Part", "Model", "Folder", "StringValue")')
    properties: Optional[str] = Field(
        None,
        description=f"Optional JSON string of initial properties in Engine API format. Example: {PROPERTY_EXAMPLE}",
    )


class DeleteInstanceInput(PlaceScopedInput):
    instance_id: str = Field(description="The instance ID to delete")


MANIFEST = ModuleManifest(
    module_name="instances",
    description="Read and edit instances in a place's data model through the Engine API.",
    tools=[
        ToolSpec(
            name="instance_get",
            description=(
                "Get a specific instance from a Roblox place by its instance ID. Returns the "
                "instance properties and metadata. The root instance ID is typically obtained "
                "from instance_list_children."
            ),
            input_model=GetInstanceInput,
        ),
        ToolSpec(
            name="instance_list_children",
            description=(
                "List child instances of a parent instance in a Roblox place. Use \"root\" as "
                "the instanceId to list top-level services (Workspace, ServerStorage, "
                "ReplicatedStorage, etc.)."
            ),
            input_model=ListChildrenInput,
        ),
        ToolSpec(
            name="instance_update",
            description=(
                "Update properties of an existing instance in a Roblox place. Provide the "
                "property changes as a JSON object mapping property names to their new values. "
                'Property values use the Engine API format (e.g., { "Name": { "stringValue": "NewName" } }).'
            ),
            input_model=UpdateInstanceInput,
        ),
        ToolSpec(
            name="instance_create",
            description=(
                "Create a new instance as a child of an existing instance in a Roblox place. "
                "Specify the class name and initial properties."
            ),
            input_model=CreateInstanceInput,
        ),
        ToolSpec(
            name="instance_delete",
            description=(
                "Delete an instance from a Roblox place. WARNING: This permanently removes "
                "the instance and all its descendants."
            ),
            input_model=DeleteInstanceInput,
        ),
    ],
)
