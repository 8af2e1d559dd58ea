"""文件扫描与筛选逻辑。"""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Iterator

from image_converter.core.formats import is_supported

LOGGER = logging.getLogger(__name__)


def _is_regular_file(path: Path) -> bool:
    """stat 跟随符号链接，与直接访问文件时的行为一致。"""

    return stat.S_ISREG(path.stat().st_mode)


def _iter_directory(path: Path) -> Iterator[Path]:
    """遍历目录的直接子项（不递归），保持系统列举顺序。

    任一子项无法 stat 时抛出 OSError，由调用方按整体扫描失败处理。
    """

    for entry in path.iterdir():
        if _is_regular_file(entry) and is_supported(entry.suffix):
            yield entry


def collect_image_files(input_path: Path) -> list[Path]:
    """扫描输入路径，返回可转换的图片文件列表。

    输入路径或其中任一子项无法读取时只记录错误并返回空列表，不会中断整个任务。
    """

    try:
        mode = input_path.stat().st_mode
        if stat.S_ISDIR(mode):
            files = list(_iter_directory(input_path))
        elif stat.S_ISREG(mode) and is_supported(input_path.suffix):
            files = [input_path]
        else:
            files = []
    except OSError as exc:
        LOGGER.error("Error collecting files: %s", exc)
        return []

    LOGGER.debug("在 %s 中发现 %d 个候选文件", input_path, len(files))
    return files
