"""优化配置选择模块。

根据生成器配置为每个图标选择优化配置：
用户显式配置 > 转换库默认配置 > 按单色/多色启发式逐个生成。
"""

from dataclasses import dataclass
from typing import Any

from ..models.constants import SvgoPlugins
from ..models.generation_result import ProfileSource
from ..models.generator_config import GeneratorConfig
from .color_analysis import is_multi_color_svg


@dataclass(frozen=True)
class ProfileChoice:
    """单个图标的优化配置选择结果"""

    svgo_config: dict[str, Any] | None
    source: ProfileSource
    is_multi_color: bool | None = None  # 只有启发式来源才有值


def build_heuristic_profile(is_multi_color: bool) -> dict[str, Any]:
    """构建启发式优化配置

    基础流水线固定，只有单色图标才追加 currentColor 颜色转换，
    使图标继承容器的文字颜色；多色图标保留原有配色。
    每次调用都返回新的字典，不在图标之间共享。

    Args:
        is_multi_color: 图标是否被判定为多色

    Returns:
        dict: SVGO 格式的优化配置
    """
    plugins: list[Any] = [
        {
            "name": SvgoPlugins.PRESET_DEFAULT,
            "params": {"overrides": {"removeViewBox": False}},
        },
        *SvgoPlugins.HEURISTIC_PASSES,
        {"name": "cleanupIds", "params": {"remove": True}},
    ]

    if not is_multi_color:
        plugins.append({"name": "convertColors", "params": {"currentColor": True}})

    return {"plugins": plugins}


class ProfileSelector:
    """优化配置选择器"""

    def __init__(self, config: GeneratorConfig):
        self.config = config

    @property
    def source(self) -> ProfileSource:
        """本次批处理使用的配置来源，整批一致"""
        if self.config.svgo_config is not None:
            return ProfileSource.EXPLICIT
        if self.config.use_default_optimization:
            return ProfileSource.DEFAULT
        return ProfileSource.HEURISTIC

    def select(self, svg_text: str) -> ProfileChoice:
        """为单个图标选择优化配置

        显式配置和默认配置对整批图标一致，不会运行颜色启发式。

        Args:
            svg_text: 原始 SVG 文本

        Returns:
            ProfileChoice: 选择结果，svgo_config 为 None 表示使用默认配置
        """
        match self.source:
            case ProfileSource.EXPLICIT:
                return ProfileChoice(self.config.svgo_config, ProfileSource.EXPLICIT)
            case ProfileSource.DEFAULT:
                return ProfileChoice(None, ProfileSource.DEFAULT)
            case _:
                is_multi_color = is_multi_color_svg(svg_text)
                return ProfileChoice(
                    build_heuristic_profile(is_multi_color),
                    ProfileSource.HEURISTIC,
                    is_multi_color,
                )
