"""日志工具模块。

提供统一的日志记录功能，标准化日志格式和配置。
"""

import inspect
import logging
import sys


def get_logger(name: str | None = None) -> logging.Logger:
    """获取标准化配置的日志记录器。

    Args:
        name: 日志记录器名称，默认使用调用模块的 __name__

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    if name is None:
        # 获取调用者的模块名
        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "unknown")
        else:
            name = "unknown"

    return logging.getLogger(name)


def setup_logging(level: str = "INFO", log_format: str | None = None) -> None:
    """配置命令行运行时的根日志记录器。

    日志统一输出到 stderr，stdout 留给生成摘要。

    Args:
        level: 日志级别名称
        log_format: 日志格式，None 时使用 logging 默认格式
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format or logging.BASIC_FORMAT,
        stream=sys.stderr,
    )
