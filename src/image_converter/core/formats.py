"""支持的图片格式定义。"""

from __future__ import annotations

from typing import Optional

from image_converter.core.exceptions import InvalidConfigurationError

# 顺序即菜单编号顺序，不可调整。
SUPPORTED_FORMATS: tuple[str, ...] = (".bmp", ".gif", ".jpg", ".jpeg", ".png", ".tiff")

PIL_FORMATS = {
    ".bmp": "BMP",
    ".gif": "GIF",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
    ".tiff": "TIFF",
}


def is_supported(suffix: str) -> bool:
    """判断扩展名（忽略大小写）是否受支持。"""

    return suffix.lower() in SUPPORTED_FORMATS


def display_name(fmt: str) -> str:
    """菜单展示用名称，去掉前导的点。"""

    return fmt[1:]


def format_at(position: int) -> Optional[str]:
    """按 1 起始的菜单序号返回格式，越界时返回 None。"""

    if 1 <= position <= len(SUPPORTED_FORMATS):
        return SUPPORTED_FORMATS[position - 1]
    return None


def pil_format_for(fmt: str) -> str:
    """返回目标扩展名对应的 Pillow 编码器名称。"""

    try:
        return PIL_FORMATS[fmt]
    except KeyError as exc:
        raise InvalidConfigurationError(f"Unsupported output format: {fmt}") from exc
