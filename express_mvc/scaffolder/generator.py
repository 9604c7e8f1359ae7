"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` (project name + database choice) and generates
an Express MVC project directory under an explicit parent directory, then
installs its dependencies with the configured package manager.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from express_mvc.config import DEFAULT_PROJECT_NAME, ScaffoldConfig
from express_mvc.utils import print_step, print_success, print_warning, run_command

from .catalog import PROJECT_FOLDERS, build_catalog
from .databases import DatabaseChoice, get_profile
from .manifest import build_manifest
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for errors that stop project generation."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Project folder already exists: {path}")


class ProjectWriteError(ScaffoldError):
    """Raised when a directory or file of the project cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """What to generate."""

    name: str = Field(default=DEFAULT_PROJECT_NAME, description="Project (and folder) name")
    database: DatabaseChoice = Field(default=DatabaseChoice.MYSQL)


@dataclass
class GenerationResult:
    """Outcome of a generation run, consumed by the CLI to pick an exit code.

    ``installed`` is ``None`` when installation was skipped.
    """

    success: bool
    message: str
    project_root: Path | None = None
    files_written: list[Path] = field(default_factory=list)
    installed: bool | None = None


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a new Express MVC project.

    Steps run strictly one after another:
    existence check, folders, catalog files, ``package.json``, install.
    Only the existence check and filesystem writes can fail the run; the
    installer reports problems as warnings.
    """

    def __init__(
        self,
        request: GenerationRequest,
        config: ScaffoldConfig | None = None,
    ) -> None:
        self.request = request
        self.config = config or ScaffoldConfig()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path | None = None) -> GenerationResult:
        """Generate the project inside *output_dir*.

        Args:
            output_dir: Parent directory of the project folder.  Defaults to
                ``config.output_dir``.

        Returns:
            A ``GenerationResult``; failures are reported through it rather
            than raised.
        """
        parent = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = parent / self.request.name
        written: list[Path] = []

        try:
            await self._check_target(project_root)
            await self._create_directory_structure(project_root)
            await self._write_catalog(project_root, written)
            await self._write_manifest(project_root, written)
        except ProjectExistsError as exc:
            return GenerationResult(success=False, message=str(exc))
        except ProjectWriteError as exc:
            return GenerationResult(
                success=False,
                message=str(exc),
                project_root=project_root,
                files_written=written,
            )

        installed = await self._install_dependencies(project_root)
        return GenerationResult(
            success=True,
            message=f"Project {self.request.name} created",
            project_root=project_root,
            files_written=written,
            installed=installed,
        )

    # -- Steps -------------------------------------------------------------

    async def _check_target(self, root: Path) -> None:
        """Refuse to generate into anything that already exists."""
        exists = await asyncio.to_thread(_path_exists, root)
        if exists:
            raise ProjectExistsError(root)

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the project root and the fixed folder tree."""
        try:
            await asyncio.to_thread(root.mkdir, parents=True)
        except FileExistsError as exc:
            raise ProjectExistsError(root) from exc
        except OSError as exc:
            raise ProjectWriteError(root, exc.strerror or str(exc)) from exc

        for folder in PROJECT_FOLDERS:
            path = root / folder
            try:
                await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                raise ProjectWriteError(path, exc.strerror or str(exc)) from exc

    async def _write_catalog(self, root: Path, written: list[Path]) -> None:
        """Write every catalog entry, static and database-specific."""
        profile = get_profile(self.request.database)
        print_step(f"Setting up Express MVC with {profile.label}")

        catalog = build_catalog(self.request, port=self.config.port, renderer=self.renderer)
        for relative, content in catalog.items():
            path = root / relative
            await _write_file(path, content)
            written.append(path)

    async def _write_manifest(self, root: Path, written: list[Path]) -> None:
        """Write ``package.json``."""
        manifest = build_manifest(self.request.name, self.request.database)
        path = root / "package.json"
        await _write_file(path, manifest.to_json())
        written.append(path)

    async def _install_dependencies(self, root: Path) -> bool | None:
        """Run the package manager inside *root* with inherited streams.

        Returns ``True`` on success, ``False`` on failure and ``None`` when
        installation is disabled.
        """
        if self.config.skip_install:
            print_step("Skipping dependency installation")
            return None

        cmd = self.config.install_command()
        manual = escape(f"cd {self.request.name} && {' '.join(cmd)}")
        program = escape(cmd[0])
        executable = shutil.which(cmd[0])
        if executable is None:
            print_warning(
                f"'{program}' was not found on PATH. "
                f"Install dependencies manually: {manual}"
            )
            return False

        print_step("Installing dependencies...")
        try:
            returncode = await run_command([executable, *cmd[1:]], cwd=root)
        except OSError as exc:
            print_warning(
                f"Could not start '{program}': {escape(str(exc))}. "
                f"Install dependencies manually: {manual}"
            )
            return False

        if returncode != 0:
            print_warning(
                f"Dependency installation failed (exit code {returncode}). "
                f"Install dependencies manually: {manual}"
            )
            return False

        print_success("Dependencies installed")
        return True


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _path_exists(path: Path) -> bool:
    """``True`` for files, directories and dangling symlinks alike."""
    return path.exists() or path.is_symlink()


async def _write_file(path: Path, content: str) -> None:
    """Create parent dirs and write *content*, wrapping OS errors."""
    try:
        await asyncio.to_thread(_write_file_sync, path, content)
    except OSError as exc:
        raise ProjectWriteError(path, exc.strerror or str(exc)) from exc


def _write_file_sync(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
