"""The template catalog: which files a generated project contains.

The catalog is a plain ``{relative path: content}`` mapping.  Static entries
are the same for every database; the database-specific entries come from
the chosen ``DatabaseProfile``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .databases import default_database_name, get_profile
from .templates import TemplateRenderer

if TYPE_CHECKING:
    from .generator import GenerationRequest


PROJECT_FOLDERS: tuple[str, ...] = (
    "config",
    "controllers",
    "models",
    "public/css",
    "public/js",
    "routes",
    "views",
)

# Output path -> template name, shared by every database variant.
STATIC_TEMPLATES: dict[str, str] = {
    "app.js": "app.js.j2",
    "routes/index.js": "routes/index.js.j2",
    "controllers/HomeController.js": "controllers/HomeController.js.j2",
    "views/index.ejs": "views/index.ejs.j2",
    "public/css/style.css": "public/css/style.css.j2",
    "public/js/main.js": "public/js/main.js.j2",
    ".gitignore": "gitignore.j2",
}


def build_context(request: GenerationRequest, port: int = 3000) -> dict[str, Any]:
    """Build the template context for *request*."""
    profile = get_profile(request.database)
    return {
        "project_name": request.name,
        "database_name": default_database_name(request.name),
        "database_label": profile.label,
        "port": port,
    }


def build_catalog(
    request: GenerationRequest,
    port: int = 3000,
    renderer: TemplateRenderer | None = None,
) -> dict[str, str]:
    """Render every file of the project described by *request*.

    Returns:
        Mapping of POSIX path (relative to the project root) to file content.
        Static entries come first, followed by the database-specific ones.
    """
    renderer = renderer or TemplateRenderer()
    context = build_context(request, port)
    profile = get_profile(request.database)

    templates = {**STATIC_TEMPLATES, **profile.templates}
    return {path: renderer.render(name, context) for path, name in templates.items()}
