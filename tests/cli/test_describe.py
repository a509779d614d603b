# topmark:header:start
#
#   project      : CallInspect
#   file         : test_describe.py
#   file_relpath : tests/cli/test_describe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `describe` command output and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import tests.sample_classes as samples
from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from tests.conftest import mark_cli, normalize_path

if TYPE_CHECKING:
    from pathlib import Path

SAMPLES_MODULE: str = samples.__name__
SAMPLES_FILE: str = normalize_path(samples.__file__)


@mark_cli
def test_describe_builtin_prints_name_only(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "describe", "len"])

    assert_SUCCESS(result)
    assert result.output == "len\n"


@mark_cli
def test_describe_prints_location(tmp_path: Path) -> None:
    ref = f"{SAMPLES_MODULE}.ClassWithMethods::public_class_method"
    result = run_cli_in(tmp_path, ["--no-color", "describe", ref, "dict::fromkeys"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == [f"{ref}\t{SAMPLES_FILE}:30", "dict::fromkeys"]


@mark_cli
def test_describe_verbose_shows_kind(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "-v", "describe", "len"])

    assert_SUCCESS(result)
    assert result.output == "[string] len\n"


@mark_cli
def test_describe_json(tmp_path: Path) -> None:
    ref = f"{SAMPLES_MODULE}.free_function"
    result = run_cli_in(tmp_path, ["describe", "--format", "json", ref, "len"])

    assert_SUCCESS(result)
    payload: list[dict[str, Any]] = json.loads(result.output)
    assert payload == [
        {
            "name": ref,
            "kind": "string",
            "file": SAMPLES_FILE,
            "line": 44,
            "location": f"{SAMPLES_FILE}:44",
        },
        {"name": "len", "kind": "string", "file": "", "line": 0, "location": ""},
    ]


@mark_cli
def test_describe_ndjson(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["describe", "--format", "NDJSON", "len", "os.path.join"])

    assert_SUCCESS(result)
    names = [json.loads(line)["name"] for line in result.output.splitlines()]
    assert names == ["len", "os.path.join"]


@mark_cli
def test_describe_markdown(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "describe", "--format", "markdown", "len"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "| Name | Kind | Location |",
        "| --- | --- | --- |",
        "| `len` | string |  |",
    ]


@mark_cli
def test_describe_uses_configured_format(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.callinspect]\noutput_format = "ndjson"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["describe", "len"])

    assert_SUCCESS(result)
    assert json.loads(result.output)["name"] == "len"


@mark_cli
def test_describe_explicit_config_file(tmp_path: Path) -> None:
    config = tmp_path / "callinspect.toml"
    config.write_text('output_format = "json"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["--config", str(config), "describe", "len"])

    assert_SUCCESS(result)
    assert json.loads(result.output)[0]["name"] == "len"


@mark_cli
def test_describe_rejects_non_callable(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "describe", "len", "os.path"])

    assert_USAGE_ERROR(result)
    assert "'os.path': The provided argument is not callable." in result.output


@mark_cli
def test_describe_requires_a_reference(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["describe"])
    assert result.exit_code != 0


@mark_cli
def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "-v", "-q", "describe", "len"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_invalid_config_value(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.callinspect]\noutput_format = "yaml"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["--no-color", "describe", "len"])

    assert_CONFIG_ERROR(result)
    assert "Invalid output_format 'yaml'" in result.output
