"""React SVG 图标组件生成库。

把目录中的 SVG 图标批量转换为 React 组件，并生成统一的导出文件。
"""

__version__ = "0.1.0"
__author__ = "crper"
__description__ = "把 SVG 图标批量生成为 React 组件"

# 核心功能导出
from .core.transform import transform
from .generator import IconGenerator, generate_icons
from .models.generation_result import GenerationSummary
from .models.generator_config import GeneratorConfig


__all__ = [
    "GenerationSummary",
    "GeneratorConfig",
    "IconGenerator",
    "generate_icons",
    "get_version",
    "transform",
]


def get_version() -> str:
    """获取版本号。"""
    return __version__
