from __future__ import annotations

import logging
from pathlib import Path

import pytest
from colorama import Fore

from vuegen.cli import build_parser, main


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_build_parser_defaults():
    args = build_parser().parse_args(["-n", "card"])
    assert args.name == "card"
    assert args.language == "ts"
    assert args.directory is None
    assert not args.verbose


def test_cli_corrects_dashed_name(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "user-profile"])

    assert exit_code == 0
    target = workdir / "user-profile"
    assert sorted(path.name for path in target.iterdir()) == [
        "userProfile.component.html",
        "userProfile.component.style.html",
        "userProfile.component.ts",
    ]
    captured = capsys.readouterr()
    assert "Component name must be camelCase" in captured.err
    assert "userProfile" in captured.out


def test_cli_corrects_leading_uppercase(workdir: Path):
    assert main(["--name", "UserProfile"]) == 0
    assert (workdir / "user-profile" / "userProfile.component.ts").is_file()


def test_cli_generates_js_without_warning(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "dataTable", "-l", "JS"])

    assert exit_code == 0
    logic = workdir / "data-table" / "dataTable.component.js"
    assert "export const dataTable = defineComponent({" in logic.read_text(encoding="utf-8")
    captured = capsys.readouterr()
    assert "Warning" not in captured.err
    assert "Generation Complete" in captured.out


def test_cli_reports_progress_in_creation_order(capsys: pytest.CaptureFixture[str]):
    main(["-n", "card"])

    out = capsys.readouterr().out
    positions = [
        out.index("Created directory: "),
        out.index("card.component.ts"),
        out.index("card.component.html"),
        out.index("card.component.style.html"),
    ]
    assert positions == sorted(positions)


def test_cli_refuses_existing_directory(workdir: Path, capsys: pytest.CaptureFixture[str]):
    existing = workdir / "my-component"
    existing.mkdir()

    exit_code = main(["-n", "myComponent"])

    assert exit_code == 1
    assert list(existing.iterdir()) == []
    assert "my-component already exists" in capsys.readouterr().err


def test_cli_rejects_unknown_language(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "card", "-l", "xx"])

    assert exit_code == 1
    assert list(workdir.iterdir()) == []
    assert "Use 'js' or 'ts'" in capsys.readouterr().err


def test_cli_requires_name(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main([])

    assert exit_code == 1
    assert list(workdir.iterdir()) == []
    captured = capsys.readouterr()
    assert "Component name is required" in captured.err
    assert "vuegen -n myComponent" in captured.out


def test_cli_rejects_unusable_name(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "1table"])

    assert exit_code == 1
    assert list(workdir.iterdir()) == []
    assert "1table" in capsys.readouterr().err


def test_cli_writes_into_directory_option(tmp_path: Path):
    output = tmp_path / "components"
    output.mkdir()

    assert main(["-n", "card", "--directory", str(output)]) == 0
    assert (output / "card" / "card.component.ts").is_file()


def test_cli_reports_io_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "card", "-d", str(tmp_path / "missing")])

    assert exit_code == 1
    assert "No such file or directory" in capsys.readouterr().err


def test_cli_bare_name_flag_reports_missing_name(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n"])

    assert exit_code == 1
    assert list(workdir.iterdir()) == []
    captured = capsys.readouterr()
    assert "Component name is required" in captured.err
    assert "vuegen -n myComponent" in captured.out


def test_cli_bare_language_flag_is_rejected(workdir: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["-n", "card", "-l"])

    assert exit_code == 1
    assert list(workdir.iterdir()) == []
    assert "Use 'js' or 'ts'" in capsys.readouterr().err


@pytest.mark.parametrize("language", [" ts", "js ", " JS "])
def test_cli_rejects_padded_language(workdir: Path, language: str):
    assert main(["-n", "card", "-l", language]) == 1
    assert list(workdir.iterdir()) == []


def test_cli_summary_shows_corrected_location(workdir: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["-n", "UserProfile"]) == 0

    out = capsys.readouterr().out
    location = str((workdir / "user-profile").resolve())
    assert f"📁 Location: {Fore.GREEN}{location}" in out
    assert f"📦 Component: {Fore.GREEN}user-profile" in out


def test_cli_colors_converted_name(capsys: pytest.CaptureFixture[str]):
    main(["-n", "user-profile"])

    assert f"{Fore.BLUE}✓ Converting to: {Fore.GREEN}userProfile" in capsys.readouterr().out


def test_cli_verbose_logs_generation_steps(caplog: pytest.LogCaptureFixture):
    assert main(["-n", "card", "--verbose"]) == 0

    messages = [record.getMessage() for record in caplog.records if record.levelno == logging.DEBUG]
    assert any(message.startswith("Wrote card.component.ts") for message in messages)
    assert any(message.startswith("Generated card in ") for message in messages)


def test_cli_default_logging_hides_debug_records(caplog: pytest.LogCaptureFixture):
    assert main(["-n", "card"]) == 0

    assert not [record for record in caplog.records if record.name.startswith("vuegen")]
