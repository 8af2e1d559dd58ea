"""命令行入口。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from image_converter.cli.format_selector import INVALID_CHOICE, choose_format, parse_format_name
from image_converter.core.config import JobConfig
from image_converter.core.models import BatchResult
from image_converter.core.progress import ProgressUpdate
from image_converter.processing.pipeline import process_batch
from image_converter.utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)

USAGE = "Usage: image-convert <directory|file>"

app = typer.Typer(help="批量将图片转换为指定格式。", add_completion=False)


def _build_progress_callback(progress: Progress):
    task_id: Optional[int] = None

    def callback(update: ProgressUpdate) -> None:
        nonlocal task_id
        if task_id is None:
            task_id = progress.add_task("Converting", total=update.total)
        progress.update(task_id, completed=update.completed)
        if update.message:
            progress.log(update.message)

    return callback


def _resolve_format(format_name: Optional[str]) -> Optional[str]:
    if format_name is None:
        return choose_format()
    chosen = parse_format_name(format_name)
    if chosen is None:
        typer.echo(INVALID_CHOICE)
    return chosen


def _print_summary(result: BatchResult) -> None:
    typer.echo("All files processed.")
    typer.echo(f"{result.success_count} files converted successfully.")
    if result.failed:
        typer.echo("Failed to convert the following files:")
        for path in result.failed:
            typer.echo(f"- {path}")


@app.command("convert")
def convert_cli(
    input_path: Optional[Path] = typer.Argument(None, help="待转换的图片文件或目录", show_default=False),
    format_name: Optional[str] = typer.Option(
        None, "--format", "-f", help="目标格式（如 png），省略时交互式选择", show_default=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
) -> None:
    """执行批量转换。"""

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    if input_path is None:
        typer.echo(USAGE)
        return

    target_format = _resolve_format(format_name)
    if target_format is None:
        return

    job = JobConfig(source=input_path, target_format=target_format)
    LOGGER.debug("输入 %s，目标格式 %s，输出目录 %s", job.source, job.target_format, job.output_dir)

    progress = Progress(
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
    )

    try:
        with progress:
            result = process_batch(job, progress_callback=_build_progress_callback(progress))
    except Exception as exc:  # noqa: BLE001
        LOGGER.error("Error: %s", exc)
        return

    _print_summary(result)


if __name__ == "__main__":
    app()
