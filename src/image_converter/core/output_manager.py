"""输出目录与图像写入模块。"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from image_converter.core.exceptions import ImageWriteError
from image_converter.core.formats import pil_format_for

LOGGER = logging.getLogger(__name__)

# 各编码器可直接写入的模式；未列出的编码器（GIF、TIFF）由 Pillow 自行处理。
WRITABLE_MODES = {
    "JPEG": {"1", "L", "RGB", "CMYK"},
    "BMP": {"1", "L", "P", "RGB", "RGBA"},
    "PNG": {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"},
}

BACKGROUND = (255, 255, 255)


def prepare_output_dir(output_dir: Path) -> Path:
    """创建输出目录（含父目录），已存在时直接返回。"""

    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def output_path_for(source: Path, output_dir: Path, target_format: str) -> Path:
    """输出文件名为源文件名去掉原扩展名后拼接目标扩展名。"""

    return output_dir / f"{source.stem}{target_format}"


def save_image_file(image: Image.Image, destination: Path, target_format: str) -> None:
    """按目标格式编码并写入磁盘，已存在的文件会被覆盖。"""

    image_format = pil_format_for(target_format)
    image_to_save = _normalize_mode(image, image_format)

    try:
        image_to_save.save(destination, format=image_format)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageWriteError(str(exc)) from exc
    finally:
        if image_to_save is not image:
            image_to_save.close()


def _normalize_mode(image: Image.Image, image_format: str) -> Image.Image:
    """将图像转换为目标编码器可写入的模式。"""

    writable = WRITABLE_MODES.get(image_format)
    if writable is None or image.mode in writable:
        return image

    LOGGER.debug("转换像素模式 %s 以写入 %s", image.mode, image_format)
    if image_format == "JPEG":
        if _has_alpha(image):
            return _flatten_alpha(image)
        return image.convert("RGB")

    return image.convert("RGBA" if _has_alpha(image) else "RGB")


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info


def _flatten_alpha(image: Image.Image) -> Image.Image:
    """通过白色背景混合去掉 Alpha 通道。"""

    rgba = image.convert("RGBA")
    background = Image.new("RGB", rgba.size, BACKGROUND)
    background.paste(rgba, mask=rgba.split()[-1])
    rgba.close()
    return background
