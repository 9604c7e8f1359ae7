"""Express MVC scaffolder -- generates a ready-to-run Express project.

Quick usage::

    from express_mvc.scaffolder import DatabaseChoice, GenerationRequest, ProjectGenerator

    request = GenerationRequest(name="my-app", database=DatabaseChoice.MONGO)
    result = await ProjectGenerator(request).generate("/tmp/output")
"""

from express_mvc.scaffolder.catalog import PROJECT_FOLDERS, build_catalog
from express_mvc.scaffolder.databases import DATABASE_PROFILES, DatabaseChoice
from express_mvc.scaffolder.generator import (
    GenerationRequest,
    GenerationResult,
    ProjectExistsError,
    ProjectGenerator,
    ProjectWriteError,
    ScaffoldError,
)
from express_mvc.scaffolder.manifest import PackageManifest, build_manifest
from express_mvc.scaffolder.selector import prompt_database_choice, resolve_database_choice
from express_mvc.scaffolder.templates import TemplateRenderer

__all__ = [
    "DATABASE_PROFILES",
    "DatabaseChoice",
    "GenerationRequest",
    "GenerationResult",
    "PROJECT_FOLDERS",
    "PackageManifest",
    "ProjectExistsError",
    "ProjectGenerator",
    "ProjectWriteError",
    "ScaffoldError",
    "TemplateRenderer",
    "build_catalog",
    "build_manifest",
    "prompt_database_choice",
    "resolve_database_choice",
]
