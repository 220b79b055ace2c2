"""Package info manifest — tool definitions."""

from __future__ import annotations

from pydantic import Field

from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

PACKAGE_NAME_DESCRIPTION = 'Folder name of the package (e.g. "ai-tools", "combat-stats")'


class ListPackagesInput(ToolInput):
    pass


class PackageNameInput(ToolInput):
    package_name: str = Field(description=PACKAGE_NAME_DESCRIPTION)


class GetPackageFileInput(ToolInput):
    package_name: str = Field(description='Folder name of the package (e.g. "ai-tools")')
    file_path: str = Field(description='Relative path within the package (e.g. "src/defaults.ts")')


MANIFEST = ModuleManifest(
    module_name="package_info",
    description="List monorepo packages and read their exports, types and source files.",
    tools=[
        ToolSpec(
            name="list_packages",
            description="List all packages in the monorepo with their names, descriptions, and dependencies.",
            input_model=ListPackagesInput,
        ),
        ToolSpec(
            name="get_package_exports",
            description="Read the barrel index.ts file of a package to see what it exports.",
            input_model=PackageNameInput,
        ),
        ToolSpec(
            name="get_package_types",
            description="Read the types.ts file of a package to see its type definitions.",
            input_model=PackageNameInput,
        ),
        ToolSpec(
            name="get_package_file",
            description="Read any source file from a package by relative path.",
            input_model=GetPackageFileInput,
        ),
    ],
)
