"""核心数据模型定义。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

STATUS_CONVERTED = "converted"
STATUS_ERROR_LOAD = "error-load"
STATUS_ERROR_WRITE = "error-write"


@dataclass(slots=True)
class FileOutcome:
    """单个文件的转换结果。"""

    source_path: Path
    status: str
    output_path: Optional[Path] = None
    message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_CONVERTED


@dataclass(slots=True)
class BatchResult:
    """整批转换的汇总：成功计数与失败文件列表。"""

    output_dir: Path
    total: int = 0
    success_count: int = 0
    failed: list[Path] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        """将单个结果折叠进汇总，结果本身不保留。"""

        if outcome.succeeded:
            self.success_count += 1
        else:
            self.failed.append(outcome.source_path)
