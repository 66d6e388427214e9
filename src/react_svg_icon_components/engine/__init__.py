"""图标生成引擎模块。

包含配置加载和批量生成等核心处理逻辑。
"""

from .batch import BatchGenerator
from .config import ConfigLoader


__all__ = [
    "BatchGenerator",
    "ConfigLoader",
]
