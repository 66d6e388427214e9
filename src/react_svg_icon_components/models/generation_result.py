"""生成结果模型。

定义单个图标记录、单个组件生成结果和整批生成摘要。
"""

from enum import Enum
from pathlib import Path

from humanize import naturalsize
from pydantic import BaseModel, Field


class ProfileSource(str, Enum):
    """优化配置来源"""

    EXPLICIT = "explicit"  # 用户提供的 svgoConfig
    DEFAULT = "default"  # 转换库默认配置
    HEURISTIC = "heuristic"  # 按单色/多色启发式逐个生成


class IconRecord(BaseModel):
    """单个输入图标的派生信息，仅在本次批处理中使用"""

    icon_name: str = Field(description="去掉扩展名的文件名")
    component_name: str = Field(description="组件名")
    source_path: Path = Field(description="SVG 源文件路径")


class ComponentResult(BaseModel):
    """单个组件的生成结果"""

    icon_name: str = Field(description="图标名")
    component_name: str = Field(description="组件名")
    source_path: Path = Field(description="SVG 源文件路径")
    output_path: Path = Field(description="组件文件路径")
    size: int = Field(ge=0, description="组件文件大小（字节）")
    profile_source: ProfileSource = Field(description="优化配置来源")
    is_multi_color: bool | None = Field(
        None, description="启发式判定结果，未运行启发式时为 None"
    )

    def get_size_human(self) -> str:
        """人类可读的文件大小"""
        return naturalsize(self.size, binary=True)


class GenerationSummary(BaseModel):
    """整批生成摘要

    在批处理过程中逐个累积组件结果，结束时一次性输出。
    """

    output_dir: Path | None = Field(None, description="输出目录")
    components: list[ComponentResult] = Field(
        default_factory=list, description="按输入顺序排列的组件结果"
    )
    index_path: Path | None = Field(None, description="导出文件路径")
    skipped: bool = Field(False, description="没有找到 SVG 文件，未执行生成")

    def add(self, result: ComponentResult) -> None:
        """追加一个组件结果"""
        self.components.append(result)

    def get_component_count(self) -> int:
        """生成的组件数量"""
        return len(self.components)

    def get_total_size(self) -> int:
        """组件文件总大小（字节）"""
        return sum(c.size for c in self.components)

    def get_total_size_kb(self) -> str:
        """组件文件总大小（KiB，保留两位小数）"""
        return f"{self.get_total_size() / 1024:.2f}"

    def get_total_size_human(self) -> str:
        """人类可读的总大小"""
        return naturalsize(self.get_total_size(), binary=True)

    def get_component_names(self) -> list[str]:
        """按生成顺序排列的组件名"""
        return [c.component_name for c in self.components]

    def format_report(self) -> str:
        """生成完成后的摘要文本"""
        resolved = self.output_dir.resolve() if self.output_dir else None
        return "\n".join(
            [
                "",
                "✅ 图标组件生成完成！",
                f"🔢 生成组件数: {self.get_component_count()}",
                f"📦 总大小: {self.get_total_size_kb()} KB",
                f"📂 输出目录: {resolved}",
                f"📜 组件列表: {', '.join(self.get_component_names())}",
            ]
        )
