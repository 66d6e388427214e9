"""核心转换模块包。

包含颜色启发式、优化配置选择、SVG 优化和 JSX 渲染。
"""

from .color_analysis import (
    ColorAnalysis,
    analyze_svg_colors,
    find_color_literals,
    is_multi_color_svg,
)
from .jsx import JsxRenderer
from .optimizer import DEFAULT_SVGO_CONFIG, SvgOptimizer, resolve_plugins
from .profile import ProfileChoice, ProfileSelector, build_heuristic_profile
from .transform import transform


__all__ = [
    "DEFAULT_SVGO_CONFIG",
    "ColorAnalysis",
    "JsxRenderer",
    "ProfileChoice",
    "ProfileSelector",
    "SvgOptimizer",
    "analyze_svg_colors",
    "build_heuristic_profile",
    "find_color_literals",
    "is_multi_color_svg",
    "resolve_plugins",
    "transform",
]
