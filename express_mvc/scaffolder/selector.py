"""Interactive database selection."""

from __future__ import annotations

from typing import TextIO

from rich.markup import escape

from express_mvc.utils import console, print_warning

from .databases import DATABASE_PROFILES, DEFAULT_DATABASE_CHOICE, DatabaseChoice

# Accepted answers after normalisation.
_ALIASES: dict[str, DatabaseChoice] = {
    "mysql": DatabaseChoice.MYSQL,
    "mongo": DatabaseChoice.MONGO,
    "mongodb": DatabaseChoice.MONGO,
}


def resolve_database_choice(raw: str) -> DatabaseChoice:
    """Map one line of operator input onto a ``DatabaseChoice``.

    Input is trimmed and lowercased.  ``mongodb`` is an alias of ``mongo``.
    Anything unrecognised (including an empty line) falls back to MySQL with
    a warning; this never raises.
    """
    answer = raw.strip().lower()
    choice = _ALIASES.get(answer)
    if choice is None:
        shown = escape(answer) if answer else "<empty>"
        print_warning(
            f"Unknown database '{shown}', defaulting to {DEFAULT_DATABASE_CHOICE.value}."
        )
        return DEFAULT_DATABASE_CHOICE
    return choice


def prompt_database_choice(stream: TextIO | None = None) -> DatabaseChoice:
    """Ask the operator which database to use and read exactly one line.

    Args:
        stream: Optional text stream to read the answer from.  Defaults to
            standard input.  End of input is treated as an empty answer.
    """
    console.print("\n[bold]Choose your database:[/bold]")
    for choice, profile in DATABASE_PROFILES.items():
        console.print(f"  [cyan]{choice.value}[/cyan]  {profile.label}")

    try:
        raw = console.input("\nEnter your choice (mysql/mongo): ", stream=stream)
    except EOFError:
        raw = ""

    choice = resolve_database_choice(raw)
    console.print(f"Selected database: [green]{DATABASE_PROFILES[choice].label}[/green]")
    return choice
