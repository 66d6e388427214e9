"""组件命名工具模块。

提供组件名派生、导出语句生成和组件名冲突检测。
"""

from collections import defaultdict
from pathlib import Path

from ..models.constants import SVG_SUFFIX
from ..models.generation_result import IconRecord
from ..models.generator_config import GeneratorConfig


class ComponentNaming:
    """组件命名策略类"""

    @staticmethod
    def icon_name(file_path: Path) -> str:
        """图标名：去掉 .svg 扩展名的文件名"""
        return file_path.name.removesuffix(SVG_SUFFIX)

    @staticmethod
    def component_name(prefix: str, icon_name: str) -> str:
        """组件名：前缀 + 首字母大写的图标名

        只转换首字母，其余部分保持原样（arrow-left → Arrow-left）。
        """
        return prefix + icon_name[:1].upper() + icon_name[1:]

    @staticmethod
    def component_file_name(component_name: str, extension: str) -> str:
        """组件文件名"""
        return f"{component_name}.{extension}"

    @staticmethod
    def export_line(component_name: str) -> str:
        """导出文件中的一行 re-export 语句"""
        return f'export {{ default as {component_name} }} from "./{component_name}";'


def build_icon_records(files: list[Path], config: GeneratorConfig) -> list[IconRecord]:
    """为所有输入文件派生图标记录，保持输入顺序

    Args:
        files: SVG 文件列表
        config: 生成器配置

    Returns:
        list[IconRecord]: 图标记录列表
    """
    records = []
    for file_path in files:
        icon_name = ComponentNaming.icon_name(file_path)
        records.append(
            IconRecord(
                icon_name=icon_name,
                component_name=ComponentNaming.component_name(
                    config.component_prefix, icon_name
                ),
                source_path=file_path,
            )
        )
    return records


def find_collisions(records: list[IconRecord]) -> dict[str, list[Path]]:
    """查找派生出相同组件名的输入文件

    组件名同时也是输出文件名，因此按不区分大小写比较，
    避免在大小写不敏感的文件系统上互相覆盖。

    Returns:
        dict: 冲突的组件名到源文件列表的映射，无冲突时为空
    """
    groups: dict[str, list[IconRecord]] = defaultdict(list)
    for record in records:
        groups[record.component_name.casefold()].append(record)

    return {
        group[0].component_name: [r.source_path for r in group]
        for group in groups.values()
        if len(group) > 1
    }


def ensure_unique_names(records: list[IconRecord]) -> None:
    """组件名存在冲突时在写入任何输出之前失败

    Raises:
        ComponentNameCollisionError: 存在冲突
    """
    # 导入异常（避免循环导入）
    from ..exceptions import ComponentNameCollisionError
    from .message_formatter import MessageFormatter

    collisions = find_collisions(records)
    if collisions:
        names_by_path = {r.source_path: r.component_name for r in records}
        parts = []
        for name, sources in collisions.items():
            variants = sorted({names_by_path[p] for p in sources})
            parts.append(
                MessageFormatter.name_collision(
                    name, sources, variants if len(variants) > 1 else None
                )
            )
        message = "; ".join(parts)
        raise ComponentNameCollisionError(message, collisions)
