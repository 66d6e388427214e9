"""工具模块包。

提供纯工具函数，不包含业务逻辑。
"""

# 从文件助手模块导入
from .file_helpers import (
    create_staging_dir,
    discard_directory,
    find_svg_files,
    replace_directory,
)

# 从日志工具模块导入
from .logging_helpers import get_logger, setup_logging

# 从消息格式化模块导入
from .message_formatter import MessageFormatter

# 从命名助手模块导入
from .naming_helpers import (
    ComponentNaming,
    build_icon_records,
    ensure_unique_names,
    find_collisions,
)


__all__ = [
    "ComponentNaming",
    "MessageFormatter",
    "build_icon_records",
    "create_staging_dir",
    "discard_directory",
    "ensure_unique_names",
    "find_collisions",
    "find_svg_files",
    "get_logger",
    "replace_directory",
    "setup_logging",
]
