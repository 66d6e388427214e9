"""组件转换选项模型。

描述单次 SVG 到 React 组件转换所需的选项和状态。
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from .constants import TransformPlugins
from .generator_config import JsxRuntime


class TransformOptions(BaseModel):
    """转换选项"""

    plugins: tuple[str, ...] = Field(
        TransformPlugins.DEFAULT_PIPELINE, description="按顺序执行的转换插件"
    )
    svgo_config: dict[str, Any] | None = Field(
        None, description="优化配置，None 表示默认配置"
    )
    icon: bool = Field(False, description="是否把尺寸替换为 1em")
    typescript: bool = Field(True, description="是否生成 TypeScript")
    jsx_runtime: JsxRuntime = Field(JsxRuntime.CLASSIC, description="JSX 运行时")
    native: bool = Field(False, description="是否生成 React Native 组件（不支持）")
    expand_props: Literal["start", "end", False] = Field(
        "end", description="props 展开位置，False 表示不接收 props"
    )


class TransformState(BaseModel):
    """转换状态（命名信息）"""

    component_name: str = Field("SvgComponent", description="组件名")
    file_path: Path | None = Field(None, description="SVG 源文件路径")
