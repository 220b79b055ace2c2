"""Server bootstrap: environment, services, tool registration and MCP wiring."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from mcp.server.lowlevel import Server

from core.registry import ToolRegistry
from core.services import Services, build_services
from modules.asset_pipeline.tools import register_asset_pipeline_tools
from modules.assets.tools import register_asset_tools
from modules.datastores.tools import register_datastore_tools
from modules.image_analysis.tools import register_image_analysis_tools
from modules.image_generation.tools import register_image_generation_tools
from modules.instances.tools import register_instance_tools
from modules.inventories.tools import register_inventory_tools
from modules.local_images.tools import register_local_image_tools
from modules.messaging.tools import register_messaging_tools
from modules.package_info.tools import register_package_info_tools
from modules.text_generation.tools import register_text_generation_tools
from modules.thumbnails.tools import register_thumbnail_tools
from shared.config import Settings, get_settings, validate_environment
from shared.env import EnvResolver, get_default_resolver
from shared.log import ToolLogger

SERVER_NAME = "rbxts-mcp"

Registrar = Callable[[ToolRegistry, Services], None]

# Registration order: AI, pipelines, Roblox Open Cloud, introspection.
TOOL_FAMILIES: list[Registrar] = [
    register_text_generation_tools,
    register_image_generation_tools,
    register_image_analysis_tools,
    register_asset_pipeline_tools,
    register_local_image_tools,
    register_datastore_tools,
    register_messaging_tools,
    register_asset_tools,
    register_instance_tools,
    register_inventory_tools,
    register_thumbnail_tools,
    register_package_info_tools,
]


@dataclass
class McpApp:
    server: Server
    registry: ToolRegistry
    services: Services


def load_startup_env(env: EnvResolver, cwd: Path | None = None) -> None:
    """Load ``<cwd>/.env`` when present, else the resolver's default file."""
    candidate = (cwd or Path.cwd()) / ".env"
    env.load(candidate if candidate.is_file() else None)


def build_registry(services: Services) -> ToolRegistry:
    registry = ToolRegistry(services.logger)
    for register in TOOL_FAMILIES:
        register(registry, services)
    return registry


def create_server(
    settings: Settings | None = None,
    services: Services | None = None,
    *,
    env: EnvResolver | None = None,
    logger: ToolLogger | None = None,
) -> McpApp:
    """Build a fully wired MCP server.

    Missing credentials are reported but never stop startup; the tools that
    need them fail at call time with a ConfigurationError.
    """
    if services is None:
        env = env or get_default_resolver()
        logger = logger or ToolLogger()
        load_startup_env(env)
        settings = settings or get_settings()
        services = build_services(settings, env, logger)
    logger = services.logger

    report = validate_environment(services.env.environ)
    for error in report.errors:
        logger.error("startup", error)
    for warning in report.warnings:
        logger.warn("startup", warning)

    registry = build_registry(services)
    logger.info(
        "startup",
        f"Registered {len(registry)} tools across {len(registry.manifests)} families",
        {"families": list(registry.manifests)},
    )

    server = registry.mount(Server(SERVER_NAME))
    return McpApp(server=server, registry=registry, services=services)
