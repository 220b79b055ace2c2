"""Tests for module manifests — ensure every tool family is well formed.

Each manifest is imported and checked for structural correctness: names are
unique snake_case, descriptions are present, and every input model produces
a JSON object schema with camelCase properties.
"""

from __future__ import annotations

import importlib
import re

import pytest

from shared.schemas.tools import ToolInput

# All modules that have a manifest.py with a MANIFEST object.
MODULE_MANIFESTS = [
    "modules.text_generation.manifest",
    "modules.image_generation.manifest",
    "modules.image_analysis.manifest",
    "modules.asset_pipeline.manifest",
    "modules.local_images.manifest",
    "modules.datastores.manifest",
    "modules.messaging.manifest",
    "modules.assets.manifest",
    "modules.instances.manifest",
    "modules.inventories.manifest",
    "modules.thumbnails.manifest",
    "modules.package_info.manifest",
]

TOOL_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")


def _all_manifests():
    return [(path, importlib.import_module(path).MANIFEST) for path in MODULE_MANIFESTS]


@pytest.mark.parametrize(
    "module_path,manifest",
    _all_manifests(),
    ids=MODULE_MANIFESTS,
)
class TestManifestStructure:
    """Structural validation for module manifests."""

    def test_module_name_matches_package(self, module_path, manifest):
        assert module_path == f"modules.{manifest.module_name}.manifest"

    def test_has_description(self, module_path, manifest):
        assert manifest.description, f"{module_path}: description is empty"

    def test_has_tools(self, module_path, manifest):
        assert len(manifest.tools) > 0, f"{module_path}: no tools defined"

    def test_tool_names_are_snake_case(self, module_path, manifest):
        for tool in manifest.tools:
            assert TOOL_NAME_RE.match(tool.name), f"{module_path}: bad tool name {tool.name!r}"

    def test_tools_have_descriptions(self, module_path, manifest):
        for tool in manifest.tools:
            assert tool.description.strip(), f"{module_path}: {tool.name} has no description"

    def test_input_schemas_are_objects(self, module_path, manifest):
        for tool in manifest.tools:
            assert issubclass(tool.input_model, ToolInput)
            schema = tool.input_model.model_json_schema(by_alias=True)
            assert schema["type"] == "object"
            for prop in schema.get("properties", {}):
                assert "_" not in prop, f"{tool.name}: property {prop!r} is not camelCase"


def test_tool_names_unique_across_manifests():
    names = [tool.name for _, manifest in _all_manifests() for tool in manifest.tools]
    assert len(names) == len(set(names))
