"""图标生成异常处理模块。

定义统一的异常类，以及转换流水线使用的异常处理装饰器。
"""

from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import TypeVar

from lxml import etree

from .utils.logging_helpers import get_logger


logger = get_logger()
T = TypeVar("T")


class IconGenerationError(Exception):
    """图标生成相关错误基类"""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigNotFoundError(IconGenerationError):
    """配置文件不存在"""

    def __init__(self, message: str, path: Path | None = None, example: str = ""):
        super().__init__(message, path)
        self.example = example


class ConfigValidationError(IconGenerationError):
    """配置内容不合法"""

    pass


class IconsDirectoryNotFoundError(IconGenerationError):
    """图标目录不存在"""

    pass


class ComponentNameCollisionError(IconGenerationError):
    """多个输入文件派生出相同的组件名"""

    def __init__(self, message: str, collisions: dict[str, list[Path]]):
        super().__init__(message)
        self.collisions = collisions


class TransformError(IconGenerationError):
    """SVG 转换为组件失败"""

    pass


def handle_transform_errors(operation_name: str = "组件转换"):
    """统一的转换异常处理装饰器

    把解析和插件执行过程中的底层异常统一转换为 TransformError，
    由调用方决定是否中止整批处理。

    Args:
        operation_name: 操作名称，用于日志记录
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except TransformError:
                raise
            except etree.XMLSyntaxError as e:
                logger.error(f"{operation_name} - SVG 解析失败: {e}")
                raise TransformError(f"无法解析 SVG: {e}") from e
            except (ValueError, TypeError, KeyError) as e:
                logger.error(f"{operation_name} - 参数错误: {e}")
                raise TransformError(f"转换参数错误: {e}") from e

        return wrapper

    return decorator
