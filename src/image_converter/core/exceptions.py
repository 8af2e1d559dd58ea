"""项目内使用的自定义异常定义。"""


class ImageConverterError(Exception):
    """基础异常类型。"""


class InvalidConfigurationError(ImageConverterError):
    """配置不合法时抛出。"""


class ImageLoadingError(ImageConverterError):
    """图片解码失败。"""


class ImageWriteError(ImageConverterError):
    """输出编码或写入失败。"""
