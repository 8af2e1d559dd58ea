"""转换任务的配置模型。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OUTPUT_DIR_NAME = "converted_images"


def default_output_dir(source: Path, dir_name: str = OUTPUT_DIR_NAME) -> Path:
    """输出目录位于输入路径的父目录下，与输入路径同级。"""

    return source.parent / dir_name


@dataclass(slots=True)
class JobConfig:
    """单次批量转换任务的配置。"""

    source: Path
    target_format: str
    output_dir_name: str = OUTPUT_DIR_NAME

    @property
    def output_dir(self) -> Path:
        return default_output_dir(self.source, self.output_dir_name)
