"""图片解码。"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from image_converter.core.exceptions import ImageLoadingError

LOGGER = logging.getLogger(__name__)


def load_image(path: Path) -> Image.Image:
    """完整解码单张图片。

    返回值为新的 Image 对象，调用者负责关闭。多帧图片只保留第一帧。
    """

    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        LOGGER.debug("无法解码图像文件 %s: %s", path, exc)
        raise ImageLoadingError(str(exc)) from exc
