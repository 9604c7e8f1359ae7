"""Command-line entry point.

Usage::

    express-mvc                 # creates ./my-express-app
    express-mvc my-shop         # creates ./my-shop
    python -m express_mvc my-shop
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from typing import TextIO

from rich.markup import escape

from express_mvc.config import ScaffoldConfig
from express_mvc.scaffolder import (
    DATABASE_PROFILES,
    GenerationRequest,
    GenerationResult,
    ProjectGenerator,
    prompt_database_choice,
)
from express_mvc.utils import (
    console,
    format_duration,
    print_error,
    print_header,
    print_success,
    print_summary_table,
)


async def run(
    name: str,
    config: ScaffoldConfig,
    stream: TextIO | None = None,
) -> GenerationResult:
    """Prompt for the database, then generate project *name*."""
    choice = prompt_database_choice(stream)
    request = GenerationRequest(name=name, database=choice)

    print_header(f"Creating {escape(name)}")
    started = time.monotonic()
    result = await ProjectGenerator(request, config).generate()
    elapsed = time.monotonic() - started

    if result.success:
        _print_final_summary(result, request, config, elapsed)
    return result


def _print_final_summary(
    result: GenerationResult,
    request: GenerationRequest,
    config: ScaffoldConfig,
    elapsed: float,
) -> None:
    install = {True: "done", False: "failed", None: "skipped"}[result.installed]
    dev_command = f"cd {request.name} && {config.package_manager} run dev"
    print_summary_table(
        {
            "Project": escape(str(result.project_root)),
            "Database": DATABASE_PROFILES[request.database].label,
            "Files written": str(len(result.files_written)),
            "Dependencies": install,
            "Elapsed": format_duration(elapsed),
        },
        title="Setup complete",
    )
    console.print(
        f"Run [bold]{escape(dev_command)}[/bold] "
        "to start the development server."
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``express-mvc``."""
    config = ScaffoldConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="express-mvc",
        description="Scaffold an Express MVC project backed by MySQL or MongoDB",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=config.default_project_name,
        help=f"Project folder name (default: {config.default_project_name})",
    )
    args = parser.parse_args(argv)

    result = asyncio.run(run(args.name, config))

    if result.success:
        print_success(escape(result.message))
    else:
        print_error(f"Error: {escape(result.message)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
