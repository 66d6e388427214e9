#!/usr/bin/env python3
"""图标组件生成演示脚本。

展示 react_svg_icon_components 库的核心功能，包括：
- 单个 SVG 的颜色分析
- 单个 SVG 转换为组件源码
- 目录批量生成
"""

import tempfile
from pathlib import Path

from react_svg_icon_components import GeneratorConfig, generate_icons, transform
from react_svg_icon_components.core import analyze_svg_colors, build_heuristic_profile
from react_svg_icon_components.models import TransformOptions, TransformState


SAMPLE_ICONS = {
    "arrow.svg": (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
        'viewBox="0 0 24 24"><path fill="#333333" d="M4 12h16M14 6l6 6-6 6"/></svg>'
    ),
    "flag.svg": (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 16">'
        '<rect fill="#FF0000" width="24" height="8"/>'
        '<rect fill="#FFFFFF" y="8" width="24" height="8"/></svg>'
    ),
}


def demo_color_analysis() -> None:
    """演示颜色分析"""
    print("🎨 颜色分析:")
    for name, svg in SAMPLE_ICONS.items():
        analysis = analyze_svg_colors(svg)
        kind = "多色" if analysis.is_multi_color else "单色"
        print(f"  - {name}: {kind} {analysis.literals}")


def demo_single_transform() -> None:
    """演示单个 SVG 转换"""
    svg = SAMPLE_ICONS["arrow.svg"]
    analysis = analyze_svg_colors(svg)
    profile = build_heuristic_profile(analysis.is_multi_color)
    options = TransformOptions(svgo_config=profile)
    code = transform(svg, options, TransformState(component_name="IconArrow"))

    print("\n🧩 IconArrow.tsx:")
    print(code)


def demo_batch() -> None:
    """演示目录批量生成"""
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        icons_dir = root / "icons"
        icons_dir.mkdir()
        for name, svg in SAMPLE_ICONS.items():
            (icons_dir / name).write_text(svg, encoding="utf-8")

        config = GeneratorConfig(
            iconsPath=icons_dir,
            outputDir=root / "ui-kit" / "icons",
            componentPrefix="Icon",
        )
        summary = generate_icons(config)
        print(summary.format_report())

        print("\n📜 index.ts:")
        print(summary.index_path.read_text(encoding="utf-8"))


def main() -> None:
    """运行所有演示"""
    demo_color_analysis()
    demo_single_transform()
    demo_batch()


if __name__ == "__main__":
    main()
