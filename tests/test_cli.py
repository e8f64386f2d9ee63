"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from devkit.cli import _build_parser, main


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--verbose", "analyze"]).verbose is True
    args = parser.parse_args(["analyze", "--verbose"])
    assert args.verbose is True
    assert args.manifest == "package.json"


def test_cli_collects_repeated_readme_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["readme", "--feature", "a", "--feature", "b", "--license", "MIT", "--badge", "npm-version:x"]
    )
    assert args.features == ["a", "b"]
    assert args.licenses == ["MIT"]
    assert args.badges == ["npm-version:x"]


def test_analyze_command_emits_json(manifest_builder, capsys: pytest.CaptureFixture[str]) -> None:
    manifest_builder.meta().section("dependencies", {"react": "^18.2.0", "lodash": "4.17.21"})
    path = manifest_builder.write()

    main(["analyze", str(path), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["dependencies"][0] == {"name": "react", "version": "^18.2.0", "type": "dependencies"}
    assert payload["analysis"]["total"] == 2
    assert payload["analysis"]["rangeVersions"] == 1
    assert payload["analysis"]["issues"] == []


def test_analyze_command_prints_report(manifest_builder, capsys: pytest.CaptureFixture[str]) -> None:
    path = manifest_builder.meta().write()

    main(["analyze", str(path)])

    assert "No dependencies found" in capsys.readouterr().out


def test_analyze_command_exits_on_invalid_json(manifest_builder, capsys: pytest.CaptureFixture[str]) -> None:
    path = manifest_builder.write(content="{not json")

    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(path)])

    assert excinfo.value.code == 1
    assert "Invalid JSON format" in capsys.readouterr().err


def test_analyze_command_rejects_non_json_file(manifest_builder) -> None:
    path = manifest_builder.write("deps.txt")
    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(path)])
    assert excinfo.value.code == 1


def test_latest_command_writes_output(manifest_builder, tmp_path: Path) -> None:
    manifest_builder.meta().section("devDependencies", {"vite": "^5.0.0"})
    source = manifest_builder.write()
    target = tmp_path / "updated.json"

    main(["latest", str(source), "-o", str(target)])

    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["devDependencies"] == {"vite": "latest"}
    assert data["name"] == "demo"


def test_readme_command_merges_config_and_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".devkit.yml").write_text("readme:\n  author: Jo\n  usage: ''\n", encoding="utf-8")

    main(
        [
            "readme",
            "--config",
            str(tmp_path),
            "--name",
            "demo",
            "--feature",
            "Fast",
            "--license",
            "MIT",
            "--license",
            "ISC",
            "--badge",
            "github-stars:jo/demo",
        ]
    )

    out = capsys.readouterr().out
    assert out.startswith("# demo\n\n![GitHub stars](https://img.shields.io/github/stars/jo/demo) \n\n")
    assert "## Features\n\n- Fast\n" in out
    assert "## Usage" not in out
    assert "- MIT\n- ISC\n" in out
    assert out.rstrip().endswith("## Author\n\nJo")


def test_readme_command_rejects_malformed_badge(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["readme", "--config", str(tmp_path), "--badge", "github-stars"])
    assert excinfo.value.code == 1
    assert "TYPE:IDENTIFIER" in capsys.readouterr().err


def test_readme_command_rejects_unknown_license(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["readme", "--config", str(tmp_path), "--license", "MIT", "--license", "Bogus"])
    assert excinfo.value.code == 1
    assert "Unknown license option: Bogus" in capsys.readouterr().err


def test_badge_command_prints_markdown(capsys: pytest.CaptureFixture[str]) -> None:
    main(["badge", "github-stars", "facebook/react"])
    assert capsys.readouterr().out.strip() == (
        "![GitHub stars](https://img.shields.io/github/stars/facebook/react)"
    )


def test_badge_command_reports_invalid_identifier(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["badge", "github-stars", "invalid space/x"])
    assert "Invalid format. Example: facebook/react" in capsys.readouterr().err


def test_badges_command_lists_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    main(["badges"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 10
    assert lines[0].startswith("npm-version")


def test_log_file_option_records_debug_messages(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_path = tmp_path / "logs" / "devkit.log"
    main(["--log-file", str(log_path), "badge", "github-stars", "facebook/react", "-v"])
    main(["badges"])

    assert capsys.readouterr().out.startswith("![GitHub stars]")
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert any("DEBUG devkit.readme.badges: Created github-stars badge" in line for line in lines)
