"""处理流水线：扫描、准备输出目录、逐个转换。"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from image_converter.core.config import JobConfig
from image_converter.core.formats import pil_format_for
from image_converter.core.models import BatchResult
from image_converter.core.output_manager import prepare_output_dir
from image_converter.core.progress import ProgressUpdate
from image_converter.core.scanner import collect_image_files
from image_converter.processing.converter import convert_image

LOGGER = logging.getLogger(__name__)


ProgressCallback = Optional[Callable[[ProgressUpdate], None]]


def process_batch(config: JobConfig, progress_callback: ProgressCallback = None) -> BatchResult:
    """批量转换入口：扫描、创建输出目录并顺序转换每个文件。

    单个文件的失败只记入结果；输出目录无法创建等错误会直接抛出，
    已写入的文件保留在磁盘上。
    """

    image_format = pil_format_for(config.target_format)

    LOGGER.info("开始扫描输入路径 %s，目标编码器 %s", config.source, image_format)
    sources = collect_image_files(config.source)
    total = len(sources)
    LOGGER.info("发现 %d 个候选图片文件", total)

    output_dir = prepare_output_dir(config.output_dir)
    result = BatchResult(output_dir=output_dir, total=total)
    _emit_progress(progress_callback, completed=0, total=total)

    for completed, source in enumerate(sources, start=1):
        outcome = convert_image(source, output_dir, config.target_format)
        result.record(outcome)
        message = None if outcome.succeeded else f"Failed: {source.name}"
        _emit_progress(progress_callback, completed, total, message)

    LOGGER.info("转换完成：成功 %d 个，失败 %d 个", result.success_count, len(result.failed))
    return result


def _emit_progress(
    callback: ProgressCallback,
    completed: int,
    total: int,
    message: Optional[str] = None,
) -> None:
    if not callback:
        return
    callback(ProgressUpdate(total=total, completed=completed, message=message))
