"""Package info tool implementations."""

from __future__ import annotations

import json
from pathlib import Path

from core.registry import ToolRegistry
from core.services import Services
from modules.package_info.manifest import (
    MANIFEST,
    GetPackageFileInput,
    ListPackagesInput,
    PackageNameInput,
)
from shared.responses import json_response, text_response
from shared.schemas.tools import ToolResult

TRAVERSAL_REFUSED = "Error: path traversal is not allowed."


def read_text(path: Path) -> str | None:
    """Return the file contents, or None when it is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


class PackageInfoTools:
    def __init__(self, services: Services):
        self.services = services

    def packages_dir(self) -> Path:
        configured = self.services.settings.monorepo_packages_dir
        if configured:
            return Path(configured)
        packages = Path.cwd() / "packages"
        if not packages.exists():
            self.services.logger.warn(
                "package-info", f"Could not locate packages dir at {packages}, using it anyway"
            )
        return packages

    def package_path(self, package_name: str, *parts: str) -> Path | None:
        """Resolve a path inside one package, or None if it leaves that package."""
        root = self.packages_dir().resolve()
        package = (root / package_name).resolve()
        if package.parent != root:
            return None
        target = package.joinpath(*parts).resolve()
        return target if target.is_relative_to(package) else None

    async def list_packages(self, params: ListPackagesInput) -> ToolResult:
        packages: list[dict] = []
        for entry in sorted(self.packages_dir().iterdir()):
            if not entry.is_dir():
                continue
            raw = read_text(entry / "package.json")
            if not raw:
                continue
            try:
                pkg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            packages.append(
                {
                    "folder": entry.name,
                    "name": pkg.get("name"),
                    "version": pkg.get("version"),
                    "description": pkg.get("description", ""),
                    "dependencies": list(pkg.get("dependencies") or {}),
                    "devDependencies": list(pkg.get("devDependencies") or {}),
                    "type": pkg.get("type", "commonjs"),
                }
            )
        return json_response(packages)

    async def get_package_exports(self, params: PackageNameInput) -> ToolResult:
        path = self.package_path(params.package_name, "src", "index.ts")
        if path is None:
            return text_response(TRAVERSAL_REFUSED)
        content = read_text(path)
        if not content:
            return text_response(f'No index.ts found for package "{params.package_name}".')
        return text_response(content)

    async def get_package_types(self, params: PackageNameInput) -> ToolResult:
        path = self.package_path(params.package_name, "src", "types.ts")
        if path is None:
            return text_response(TRAVERSAL_REFUSED)
        content = read_text(path)
        if not content:
            return text_response(f'No types.ts found for package "{params.package_name}".')
        return text_response(content)

    async def get_package_file(self, params: GetPackageFileInput) -> ToolResult:
        if ".." in params.file_path:
            return text_response(TRAVERSAL_REFUSED)
        path = self.package_path(params.package_name, params.file_path)
        if path is None:
            return text_response(TRAVERSAL_REFUSED)
        content = read_text(path)
        if not content:
            return text_response(f"File not found: {params.package_name}/{params.file_path}")
        return text_response(content)


def register_package_info_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, PackageInfoTools(services))
