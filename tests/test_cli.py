"""测试命令行入口与格式选择。"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from image_converter.cli.format_selector import choose_format, parse_format_name
from image_converter.cli.main import _build_progress_callback, app
from image_converter.core.progress import ProgressUpdate

runner = CliRunner()


def make_source(tmp_path: Path) -> Path:
    source = tmp_path / "input"
    source.mkdir()
    Image.new("RGB", (24, 24), "blue").save(source / "a.png")
    (source / "b.txt").write_text("hello")
    Image.new("RGB", (24, 24), "red").save(source / "c.jpg")
    return source


def test_choose_format_by_number(capsys: pytest.CaptureFixture[str]) -> None:
    assert choose_format(lambda _: "3") == ".jpg"

    menu = capsys.readouterr().out
    assert "Please choose a format to convert to:" in menu
    assert "1. bmp" in menu
    assert "6. tiff" in menu


@pytest.mark.parametrize("answer", ["0", "7", "abc", "", "-1", "2.5"])
def test_choose_format_invalid(answer: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert choose_format(lambda _: answer) is None
    assert "Invalid choice" in capsys.readouterr().out


def test_choose_format_reads_only_once() -> None:
    calls: list[str] = []

    def reader(prompt: str) -> str:
        calls.append(prompt)
        return "9"

    assert choose_format(reader) is None
    assert len(calls) == 1


def test_parse_format_name() -> None:
    assert parse_format_name("png") == ".png"
    assert parse_format_name(".TIFF") == ".tiff"
    assert parse_format_name("webp") is None
    assert parse_format_name("") is None


def test_missing_argument_prints_usage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Usage: image-convert <directory|file>" in result.stdout
    assert list(tmp_path.iterdir()) == []


def test_interactive_conversion_to_tiff(tmp_path: Path) -> None:
    source = make_source(tmp_path)

    result = runner.invoke(app, [str(source)], input="6\n")

    assert result.exit_code == 0
    output = tmp_path / "converted_images"
    assert sorted(p.name for p in output.iterdir()) == ["a.tiff", "c.tiff"]
    assert "2 files converted successfully." in result.stdout
    assert "Failed to convert the following files:" not in result.stdout


def test_invalid_choice_touches_nothing(tmp_path: Path) -> None:
    source = make_source(tmp_path)

    result = runner.invoke(app, [str(source)], input="abc\n")

    assert result.exit_code == 0
    assert "Invalid choice, please run the script again." in result.stdout
    assert not (tmp_path / "converted_images").exists()


def test_format_option_skips_prompt(tmp_path: Path) -> None:
    source = make_source(tmp_path)

    result = runner.invoke(app, [str(source), "--format", "bmp"])

    assert result.exit_code == 0
    assert "Please choose a format" not in result.stdout
    assert (tmp_path / "converted_images" / "a.bmp").exists()
    assert (tmp_path / "converted_images" / "c.bmp").exists()


def test_unknown_format_option(tmp_path: Path) -> None:
    source = make_source(tmp_path)

    result = runner.invoke(app, [str(source), "-f", "webp"])

    assert result.exit_code == 0
    assert "Invalid choice" in result.stdout
    assert not (tmp_path / "converted_images").exists()


def test_failed_files_are_listed(tmp_path: Path) -> None:
    source = make_source(tmp_path)
    broken = source / "broken.png"
    broken.write_text("not an image")

    result = runner.invoke(app, [str(source), "--format", "gif"])

    assert result.exit_code == 0
    assert "2 files converted successfully." in result.stdout
    assert "Failed to convert the following files:" in result.stdout
    assert f"- {broken}" in result.stdout


def test_empty_directory_run(tmp_path: Path) -> None:
    source = tmp_path / "empty"
    source.mkdir()

    result = runner.invoke(app, [str(source)], input="5\n")

    assert result.exit_code == 0
    assert (tmp_path / "converted_images").is_dir()
    assert "0 files converted successfully." in result.stdout


def test_fatal_error_is_reported(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    source = make_source(tmp_path)
    (tmp_path / "converted_images").write_text("occupied")

    with caplog.at_level(logging.ERROR):
        result = runner.invoke(app, [str(source), "--format", "png"])

    assert result.exit_code == 0
    assert "Error:" in caplog.text
    assert "files converted successfully" not in result.stdout


class RecordingProgress:
    def __init__(self) -> None:
        self.tasks: list[tuple[str, int]] = []
        self.completed: list[int] = []
        self.logged: list[str] = []

    def add_task(self, description: str, total: int) -> int:
        self.tasks.append((description, total))
        return len(self.tasks) - 1

    def update(self, task_id: int, completed: int) -> None:
        self.completed.append(completed)

    def log(self, message: str) -> None:
        self.logged.append(message)


def test_progress_callback_logs_messages() -> None:
    progress = RecordingProgress()
    callback = _build_progress_callback(progress)  # type: ignore[arg-type]

    callback(ProgressUpdate(total=2, completed=0))
    callback(ProgressUpdate(total=2, completed=1, message="Failed: bad.png"))
    callback(ProgressUpdate(total=2, completed=2))

    assert progress.tasks == [("Converting", 2)]
    assert progress.completed == [0, 1, 2]
    assert progress.logged == ["Failed: bad.png"]
