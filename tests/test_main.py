import io
import json

import pytest
from rich.console import Console

import argscan.__main__ as cli
from argscan.__main__ import build_result_table, main
from argscan.console import argscan_theme
from argscan.parser import ParseResult
from argscan.version import __version__


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory with no schema configured."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ARGSCAN_SCHEMA", raising=False)
    yield tmp_path


@pytest.fixture
def output(monkeypatch):
    """Capture both Rich consoles as plain text."""
    stdout = io.StringIO()
    stderr = io.StringIO()
    monkeypatch.setattr(
        cli, "console", Console(file=stdout, width=200, theme=argscan_theme)
    )
    monkeypatch.setattr(
        cli, "error_console", Console(file=stderr, width=200, theme=argscan_theme)
    )
    return stdout, stderr


def test_version(output):
    stdout, _ = output
    assert main(["-V"]) == 0
    assert stdout.getvalue().strip() == f"argscan {__version__}"


def test_json_output_lenient(output):
    stdout, _ = output
    assert main(["--json", "--lenient", "--", "-ab", "p"]) == 0
    assert json.loads(stdout.getvalue()) == {
        "values": {"a": True, "b": True},
        "positionals": ["p"],
    }


def test_strict_unknown_option_fails(output):
    _, stderr = output
    assert main(["--", "-ab", "p"]) == 2
    assert "Unknown option '-a'" in stderr.getvalue()


def test_unknown_cli_option(output):
    _, stderr = output
    assert main(["--bogus"]) == 2
    assert "Unknown option '--bogus'" in stderr.getvalue()
    assert "usage:" in stderr.getvalue()


def test_schema_file_discovered(isolated_cwd, output):
    stdout, _ = output
    (isolated_cwd / "argscan.yaml").write_text(
        "options:\n"
        "  recursive:\n    type: boolean\n    short: r\n"
        "  file:\n    type: string\n    short: f\n",
        encoding="UTF-8",
    )
    assert main(["-j", "--", "-rf", "out.txt", "src"]) == 0
    assert json.loads(stdout.getvalue()) == {
        "values": {"recursive": True, "file": "out.txt"},
        "positionals": ["src"],
    }


def test_schema_file_explicit_toml(isolated_cwd, output):
    stdout, _ = output
    path = isolated_cwd / "tool.toml"
    path.write_text(
        'strict = false\n[options.tag]\ntype = "string"\nmultiple = true\n',
        encoding="UTF-8",
    )
    assert main(["-s", str(path), "-j", "--", "--tag=a", "--tag", "b", "-x"]) == 0
    assert json.loads(stdout.getvalue())["values"] == {"tag": ["a", "b"], "x": True}


def test_missing_schema_file(output):
    _, stderr = output
    assert main(["--schema", "nope.yaml", "--", "a"]) == 2
    assert "No such schema file" in stderr.getvalue()


def test_invalid_log_mode(output, restore_root_logging):
    _, stderr = output
    assert main(["--log-mode", "xml", "--", "a"]) == 2
    assert "Invalid log mode" in stderr.getvalue()


def test_table_output(output):
    stdout, _ = output
    assert main(["-l", "--", "--color=auto", "file.txt"]) == 0
    text = stdout.getvalue()
    assert "--color" in text
    assert "'auto'" in text
    assert "file.txt" in text


def test_build_result_table():
    table = build_result_table(
        ParseResult(values={"tag": ["a", True], "force": True}, positionals=["x"])
    )
    assert table.row_count == 3
