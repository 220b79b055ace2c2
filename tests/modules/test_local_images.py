"""Tests for generate_and_save_local."""

from __future__ import annotations

from pathlib import Path

import pytest

from modules.asset_pipeline.manifest import STYLE_GUIDE
from modules.local_images.tools import register_local_image_tools
from shared.errors import ToolValidationError
from shared.schemas.tools import ImageBlock

ARGS = {"prompt": "a frozen shield", "fileName": "Icon - Frozen Shield", "subfolder": "icons"}


@pytest.fixture
def registry(registry_for):
    return registry_for(register_local_image_tools)


@pytest.fixture
def target(settings) -> Path:
    return (Path(settings.local_assets_dir) / "images" / "icons" / "Icon - Frozen Shield.png").resolve()


@pytest.mark.asyncio
async def test_saves_png(registry, ai_session, target, log_stream):
    result = await registry.call("generate_and_save_local", ARGS)

    assert target.read_bytes() == b"hello"
    assert ai_session.generate_image.await_args.args[0] == f"{STYLE_GUIDE}a frozen shield"
    assert any(isinstance(block, ImageBlock) for block in result.content)
    assert f"Path: {target}" in result.text
    assert "Model: gpt-image-1" in result.text
    assert "Created directory" in log_stream.getvalue()


@pytest.mark.asyncio
async def test_refuses_to_overwrite(registry, ai_session, target):
    target.parent.mkdir(parents=True)
    target.write_bytes(b"old")

    result = await registry.call("generate_and_save_local", ARGS)

    assert "File already exists" in result.text
    assert target.read_bytes() == b"old"
    ai_session.generate_image.assert_not_awaited()


@pytest.mark.asyncio
async def test_skip_style_guide(registry, ai_session):
    await registry.call("generate_and_save_local", {**ARGS, "skipStyleGuide": True, "size": "1536x1024"})

    assert ai_session.generate_image.await_args.args[0] == "a frozen shield"
    assert ai_session.generate_image.await_args.kwargs["size"] == "1536x1024"


@pytest.mark.asyncio
async def test_unknown_subfolder_is_rejected(registry):
    with pytest.raises(ToolValidationError):
        await registry.call("generate_and_save_local", {**ARGS, "subfolder": "sounds"})


@pytest.mark.asyncio
@pytest.mark.parametrize("file_name", ["../../../escaped", "nested/Icon", "/tmp/Icon"])
async def test_refuses_file_name_outside_subfolder(registry, ai_session, settings, tmp_path, file_name):
    result = await registry.call("generate_and_save_local", {**ARGS, "fileName": file_name})

    assert "Invalid fileName" in result.text
    assert not (tmp_path / "escaped.png").exists()
    assert not (Path(settings.local_assets_dir) / "images").exists()
    ai_session.generate_image.assert_not_awaited()
