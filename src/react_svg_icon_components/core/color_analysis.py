"""SVG 颜色分析模块。

基于颜色字面量数量的单色/多色判定。

这是一个粗略的启发式规则，而不是语义上的颜色分析：
- 只识别 #RGB / #RRGGBB 形式的十六进制颜色以及 rgb( / hsl( 函数起始标记
- 同一个字面量重复出现只计一次，大小写不同视为不同字面量（#FFF 与 #fff）
- 命名颜色（red）、currentColor、none、url(#...) 引用的渐变和图案都不会被识别
"""

import re

from pydantic import BaseModel, Field


COLOR_LITERAL_PATTERN = re.compile(r"#[0-9A-Fa-f]{3,6}|rgb\(|hsl\(")


class ColorAnalysis(BaseModel):
    """颜色分析结果"""

    literals: list[str] = Field(description="去重后的颜色字面量（排序）")
    distinct_count: int = Field(ge=0, description="不同字面量的数量")
    is_multi_color: bool = Field(description="是否判定为多色")


def find_color_literals(svg_text: str) -> set[str]:
    """收集 SVG 文本中所有不同的颜色字面量"""
    return set(COLOR_LITERAL_PATTERN.findall(svg_text))


def is_multi_color_svg(svg_text: str) -> bool:
    """判断 SVG 是否为多色图标

    不同颜色字面量超过一个即视为多色；零个或一个视为单色。

    Args:
        svg_text: 原始 SVG 文本

    Returns:
        bool: 多色返回 True
    """
    return len(find_color_literals(svg_text)) > 1


def analyze_svg_colors(svg_text: str) -> ColorAnalysis:
    """返回完整的颜色分析结果"""
    literals = find_color_literals(svg_text)
    return ColorAnalysis(
        literals=sorted(literals),
        distinct_count=len(literals),
        is_multi_color=len(literals) > 1,
    )
