"""Database variants supported by the scaffolder.

Everything that depends on the database choice (runtime dependencies,
connector/model/env templates, display label) lives in ``DATABASE_PROFILES``.
Adding a datastore means adding one ``DatabaseChoice`` member and one
profile entry.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field


class DatabaseChoice(str, Enum):
    MYSQL = "mysql"
    MONGO = "mongo"


DEFAULT_DATABASE_CHOICE = DatabaseChoice.MYSQL

FALLBACK_DATABASE_NAME = "mydatabase"


class DatabaseProfile(BaseModel):
    """Per-database files and dependencies."""

    label: str = Field(..., description="Human-readable name shown to the operator")
    dependencies: dict[str, str] = Field(
        default_factory=dict, description="Runtime packages added on top of the base set"
    )
    templates: dict[str, str] = Field(
        default_factory=dict,
        description="Output path (relative to project root) -> template name",
    )


DATABASE_PROFILES: dict[DatabaseChoice, DatabaseProfile] = {
    DatabaseChoice.MYSQL: DatabaseProfile(
        label="MySQL (Sequelize)",
        dependencies={"sequelize": "latest", "mysql2": "latest"},
        templates={
            ".env": "mysql/env.j2",
            "config/database.js": "mysql/database.js.j2",
            "models/User.js": "mysql/User.js.j2",
        },
    ),
    DatabaseChoice.MONGO: DatabaseProfile(
        label="MongoDB (Mongoose)",
        dependencies={"mongoose": "latest"},
        templates={
            ".env": "mongo/env.j2",
            "config/database.js": "mongo/database.js.j2",
            "models/User.js": "mongo/User.js.j2",
        },
    ),
}


def get_profile(choice: DatabaseChoice) -> DatabaseProfile:
    """Return the profile for *choice*."""
    return DATABASE_PROFILES[choice]


def default_database_name(project_name: str) -> str:
    """Derive the default logical database name from a project name.

    E.g. ``'My Express-App'`` -> ``'my_express_app'``.  Names with no usable
    characters fall back to ``'mydatabase'``.
    """
    name = re.sub(r"[^a-z0-9]+", "_", project_name.lower().strip())
    return name.strip("_") or FALLBACK_DATABASE_NAME
