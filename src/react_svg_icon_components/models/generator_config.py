"""生成器配置模型。

定义 react-svg-icon-components.json 的字段、默认值和派生属性。
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import GenerationDefaults


class JsxRuntime(str, Enum):
    """JSX 运行时枚举"""

    CLASSIC = "classic"  # 需要 import React
    AUTOMATIC = "automatic"  # React 17+ 自动注入


class GeneratorConfig(BaseModel):
    """图标生成器配置

    启动时从 JSON 文件加载一次，之后不可变，显式传递给各处理步骤。
    iconsPath / outputDir 缺失时加载不报错，在后续存在性检查时失败。
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    icons_path: Path | None = Field(None, alias="iconsPath", description="图标目录")
    output_dir: Path | None = Field(None, alias="outputDir", description="输出目录")
    jsx_runtime: JsxRuntime = Field(
        JsxRuntime(GenerationDefaults.JSX_RUNTIME),
        alias="jsxRuntime",
        description="JSX 运行时",
    )
    typescript: bool = Field(
        GenerationDefaults.TYPESCRIPT, description="是否生成 TypeScript 组件"
    )
    component_prefix: str = Field(
        GenerationDefaults.COMPONENT_PREFIX,
        alias="componentPrefix",
        description="组件名前缀",
    )
    use_default_optimization: bool = Field(
        False, alias="useDefaultOptimization", description="使用转换库默认优化"
    )
    svgo_config: dict[str, Any] | None = Field(
        None, alias="svgoConfig", description="显式优化配置，覆盖所有启发式规则"
    )

    @property
    def component_extension(self) -> str:
        """组件文件扩展名（不含点）"""
        return "tsx" if self.typescript else "jsx"

    @property
    def index_extension(self) -> str:
        """导出文件扩展名（不含点）"""
        return "ts" if self.typescript else "js"

    @property
    def index_file_name(self) -> str:
        """导出文件名"""
        return f"index.{self.index_extension}"
