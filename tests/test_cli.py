"""Tests for the ``faultline`` command line."""

from click.testing import CliRunner

from faultline import __version__
from faultline.cli import cli as cli_module
from faultline.utils.ansi import strip_ansi


def _write_page(tmp_path, ten_line_source):
    (tmp_path / "page.html").write_text(ten_line_source, encoding="utf-8")


def test_show_prints_diagnostic(tmp_path, monkeypatch, ten_line_source):
    _write_page(tmp_path, ten_line_source)
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(
        cli_module.cli,
        [
            "show",
            "page.html",
            "5",
            "unexpected token",
            "--context",
            "failed to parse template",
            "--color",
            "never",
        ],
    )

    assert result.exit_code == 1
    assert result.output == (
        "failed to parse template\n"
        "- page.html:5: unexpected token\n"
        "\n"
        "  2 | line 2\n"
        "  3 | line 3\n"
        "  4 | line 4\n"
        "  5 | line 5\n"
        "  6 | line 6\n"
        "  7 | line 7\n"
        "  8 | line 8\n"
    )


def test_show_nests_contexts_first_innermost(tmp_path, monkeypatch, ten_line_source):
    _write_page(tmp_path, ten_line_source)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(
        cli_module.cli,
        [
            "show",
            "page.html",
            "1",
            "bad",
            "--context",
            "inner",
            "--context",
            "outer",
            "--context-lines",
            "0",
            "--color",
            "never",
        ],
    )

    assert result.output == "outer\n- inner\n  - page.html:1: bad\n\n    1 | line 1\n"


def test_show_relativizes_absolute_paths(tmp_path, monkeypatch, ten_line_source):
    _write_page(tmp_path, ten_line_source)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(
        cli_module.cli,
        ["show", str(tmp_path / "page.html"), "10", "bad", "--color", "never"],
    )

    assert result.output.startswith("page.html:10: bad\n")


def test_show_with_color_only_adds_escapes(tmp_path, monkeypatch, ten_line_source):
    _write_page(tmp_path, ten_line_source)
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    args = ["show", "page.html", "5", "unexpected token", "--context", "failed"]

    plain = runner.invoke(cli_module.cli, [*args, "--color", "never"])
    styled = runner.invoke(cli_module.cli, [*args, "--color", "always", "--theme", "light"])

    assert "\x1b[" in styled.output
    assert strip_ansi(styled.output) == plain.output


def test_show_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(
        cli_module.cli, ["show", "missing.html", "3", "bad", "--color", "never"]
    )

    assert result.exit_code == 1
    lines = result.output.splitlines()
    assert lines[0] == "could not show missing.html"
    assert lines[1].startswith("- missing.html: ")
    assert "ENOENT" in lines[1]


def test_themes_lists_builtin_themes():
    result = CliRunner().invoke(cli_module.cli, ["themes"])

    assert result.exit_code == 0
    for name in ("default", "light", "monochrome"):
        assert name in result.output


def test_config_shows_and_updates(isolated_config):
    runner = CliRunner()

    shown = runner.invoke(cli_module.cli, ["config"])
    assert shown.exit_code == 0
    assert "Theme: Default" in shown.output
    assert "Context Lines: 3" in shown.output

    updated = runner.invoke(cli_module.cli, ["config", "--theme", "light", "--context-lines", "2"])
    assert updated.exit_code == 0
    assert "Theme: Light" in updated.output
    assert isolated_config.config_path.exists()

    rejected = runner.invoke(cli_module.cli, ["config", "--theme", "neon"])
    assert rejected.exit_code == 2


def test_version_option():
    result = CliRunner().invoke(cli_module.cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
