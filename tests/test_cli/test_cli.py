"""Tests for the mdbook-page-styles CLI."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from page_styles import __version__
from page_styles.cli.main import cli


def _input(chapters_config: dict | None, *chapters: tuple[str, str]) -> str:
    config: dict = {"book": {"title": "T"}}
    if chapters_config is not None:
        config["preprocessor"] = {"page-styles": chapters_config}
    context = {"root": "/b", "config": config, "renderer": "html", "mdbook_version": "0.4.40"}
    sections = [
        {
            "Chapter": {
                "name": name,
                "content": content,
                "number": [i + 1],
                "sub_items": [],
                "path": f"c{i}.md",
                "source_path": f"c{i}.md",
                "parent_names": [],
            }
        }
        for i, (name, content) in enumerate(chapters)
    ]
    return json.dumps([context, {"sections": sections, "__non_exhaustive": None}])


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "mdBook preprocessor" in result.output
        assert "supports" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# supports command
# ---------------------------------------------------------------------------


class TestSupportsCommand:
    def test_html_supported(self) -> None:
        result = CliRunner().invoke(cli, ["supports", "html"])
        assert result.exit_code == 0

    @pytest.mark.parametrize("renderer", ["pdf", "markdown", ""])
    def test_other_renderers_unsupported(self, renderer: str) -> None:
        result = CliRunner().invoke(cli, ["supports", renderer])
        assert result.exit_code == 1

    def test_renderer_required(self) -> None:
        result = CliRunner().invoke(cli, ["supports"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# preprocessing (no subcommand)
# ---------------------------------------------------------------------------


class TestPreprocess:
    def test_styles_book(self) -> None:
        stdin = _input({"Intro": {"h2": {"class": "big"}}}, ("Intro", "## Intro\ntext"))
        result = CliRunner().invoke(cli, [], input=stdin)
        assert result.exit_code == 0, result.stderr
        book = json.loads(result.stdout)
        assert book["sections"][0]["Chapter"]["content"] == '<h2 class="big">Intro</h2>\ntext'
        assert book["__non_exhaustive"] is None

    def test_malformed_chapter_is_not_fatal(self) -> None:
        stdin = _input({"Intro": "bad"}, ("Intro", "# T"))
        result = CliRunner().invoke(cli, [], input=stdin)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["sections"][0]["Chapter"]["content"] == "# T"
        assert "Invalid config" in result.stderr

    def test_strict_fails_on_malformed_chapter(self) -> None:
        stdin = _input({"Intro": "bad"}, ("Intro", "# T"))
        result = CliRunner().invoke(cli, ["--strict"], input=stdin)
        assert result.exit_code == 1
        assert "Error: Invalid page-styles config for chapter(s) 'Intro'" in result.stderr
        assert result.stdout == ""

    def test_invalid_json_exits_1(self) -> None:
        result = CliRunner().invoke(cli, [], input="not json")
        assert result.exit_code == 1
        assert "Error: Invalid JSON" in result.stderr

    def test_wrong_shape_exits_1(self) -> None:
        result = CliRunner().invoke(cli, [], input="{}")
        assert result.exit_code == 1
        assert "Error:" in result.stderr

    def test_log_level_option(self) -> None:
        stdin = _input(None, ("Intro", "# T"))
        result = CliRunner().invoke(cli, ["--log-level", "info"], input=stdin)
        assert result.exit_code == 0
        assert "Skipping chapter Intro" in result.stderr

    def test_log_level_from_env(self) -> None:
        stdin = _input(None, ("Intro", "# T"))
        result = CliRunner(env={"PAGE_STYLES_LOG": "DEBUG"}).invoke(cli, [], input=stdin)
        assert result.exit_code == 0
        assert "Parsed input" in result.stderr

    def test_unknown_env_log_level_falls_back(self) -> None:
        result = CliRunner(env={"PAGE_STYLES_LOG": "basic_format"}).invoke(cli, ["supports", "html"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# encoding
# ---------------------------------------------------------------------------


class TestUtf8Streams:
    def test_non_ascii_book_on_non_utf8_locale(self) -> None:
        stdin = _input({"Á": {"h1": {"class": "big"}}}, ("Á", "# Título Ā\nŻółć"))
        runner = CliRunner(charset="cp1252")
        result = runner.invoke(cli, [], input=stdin.encode("utf-8"))
        assert result.exit_code == 0, result.stderr
        book = json.loads(result.stdout_bytes.decode("utf-8"))
        chapter = book["sections"][0]["Chapter"]
        assert chapter["name"] == "Á"
        assert chapter["content"] == '<h1 class="big">Título Ā</h1>\nŻółć'

    def test_invalid_utf8_input_exits_1(self) -> None:
        result = CliRunner().invoke(cli, [], input=b"[\xff\xfe]")
        assert result.exit_code == 1
        assert "Error: Could not read preprocessor input" in result.stderr
