"""Tests for interactive database selection.

Covers:
- Normalisation (case, surrounding whitespace)
- ``mongodb`` alias
- Fallback to MySQL (with a warning) for everything else
- Prompting reads exactly one line from the supplied stream
"""

from __future__ import annotations

import io

import pytest

from express_mvc.scaffolder.databases import DatabaseChoice
from express_mvc.scaffolder.selector import prompt_database_choice, resolve_database_choice

pytestmark = pytest.mark.unit


class TestResolveDatabaseChoice:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("mysql", DatabaseChoice.MYSQL),
            ("MySQL", DatabaseChoice.MYSQL),
            ("  MYSQL\n", DatabaseChoice.MYSQL),
            ("mongo", DatabaseChoice.MONGO),
            ("Mongo", DatabaseChoice.MONGO),
            ("mongodb", DatabaseChoice.MONGO),
            ("\tMongoDB  ", DatabaseChoice.MONGO),
        ],
    )
    def test_accepted_values(self, raw: str, expected: DatabaseChoice, console_output: io.StringIO):
        assert resolve_database_choice(raw) is expected
        assert "defaulting" not in console_output.getvalue()

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "postgres", "1", "2", "my sql", "mongo db", "sqlite", "[/bold]"],
    )
    def test_unknown_values_default_to_mysql(self, raw: str, console_output: io.StringIO):
        assert resolve_database_choice(raw) is DatabaseChoice.MYSQL
        assert "defaulting to mysql" in console_output.getvalue()

    def test_empty_input_warning_names_empty(self, console_output: io.StringIO):
        resolve_database_choice("")
        assert "<empty>" in console_output.getvalue()


class TestPromptDatabaseChoice:
    def test_reads_answer_from_stream(self, console_output: io.StringIO):
        assert prompt_database_choice(io.StringIO("mongo\n")) is DatabaseChoice.MONGO
        out = console_output.getvalue()
        assert "Choose your database" in out
        assert "MongoDB (Mongoose)" in out

    def test_reads_only_first_line(self):
        stream = io.StringIO("mongodb\nmysql\n")
        assert prompt_database_choice(stream) is DatabaseChoice.MONGO
        assert stream.read() == "mysql\n"

    def test_end_of_input_defaults_to_mysql(self, console_output: io.StringIO):
        assert prompt_database_choice(io.StringIO("")) is DatabaseChoice.MYSQL
        assert "defaulting to mysql" in console_output.getvalue()

    def test_stdin_is_used_without_stream(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("builtins.input", lambda *args: "MongoDB")
        assert prompt_database_choice() is DatabaseChoice.MONGO

    def test_stdin_eof_defaults_to_mysql(self, monkeypatch: pytest.MonkeyPatch):
        def _eof(*args):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert prompt_database_choice() is DatabaseChoice.MYSQL
