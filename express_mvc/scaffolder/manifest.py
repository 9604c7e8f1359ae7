"""``package.json`` generation for the scaffolded project."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .databases import DatabaseChoice, get_profile

BASE_DEPENDENCIES: dict[str, str] = {
    "express": "latest",
    "dotenv": "latest",
    "ejs": "latest",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.0.0",
}


class PackageManifest(BaseModel):
    """The subset of ``package.json`` the scaffolder writes."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "1.0.0"
    description: str = "Express MVC Project"
    main: str = "app.js"
    scripts: dict[str, str] = Field(
        default_factory=lambda: {"start": "node app.js", "dev": "nodemon app.js"}
    )
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: dict(DEV_DEPENDENCIES), alias="devDependencies"
    )

    def to_json(self) -> str:
        """Serialise with npm's key names and two-space indentation."""
        return self.model_dump_json(indent=2, by_alias=True) + "\n"


def build_manifest(name: str, choice: DatabaseChoice) -> PackageManifest:
    """Build the manifest for project *name* using the *choice* database.

    Dependencies are the base set merged with the database's extension set.
    """
    dependencies = {**BASE_DEPENDENCIES, **get_profile(choice).dependencies}
    return PackageManifest(name=name, dependencies=dependencies)
