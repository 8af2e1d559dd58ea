"""单文件转换：解码、编码、失败隔离。"""

from __future__ import annotations

import logging
from pathlib import Path

from image_converter.core.exceptions import ImageLoadingError, ImageWriteError
from image_converter.core.models import (
    STATUS_CONVERTED,
    STATUS_ERROR_LOAD,
    STATUS_ERROR_WRITE,
    FileOutcome,
)
from image_converter.core.output_manager import output_path_for, save_image_file
from image_converter.processing.image_loader import load_image

LOGGER = logging.getLogger(__name__)


def convert_image(input_file: Path, output_dir: Path, target_format: str) -> FileOutcome:
    """将单个文件转换为目标格式并写入输出目录。

    编解码失败在此处被捕获并记录，返回失败结果而不是抛出异常，
    以便批处理继续执行后续文件。
    """

    destination = output_path_for(input_file, output_dir, target_format)
    try:
        image = load_image(input_file)
    except ImageLoadingError as exc:
        return _failure(input_file, STATUS_ERROR_LOAD, exc)

    try:
        save_image_file(image, destination, target_format)
    except ImageWriteError as exc:
        return _failure(input_file, STATUS_ERROR_WRITE, exc)
    finally:
        image.close()

    LOGGER.debug("已转换 %s -> %s", input_file, destination)
    return FileOutcome(source_path=input_file, status=STATUS_CONVERTED, output_path=destination)


def _failure(input_file: Path, status: str, exc: Exception) -> FileOutcome:
    LOGGER.error("Failed to convert %s: %s", input_file, exc)
    return FileOutcome(source_path=input_file, status=status, message=str(exc))
