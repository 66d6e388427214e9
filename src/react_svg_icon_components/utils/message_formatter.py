"""消息格式化工具模块。

提供统一的错误消息、提示消息和生成摘要的格式化功能。
"""

from pathlib import Path
from typing import Any


class MessageFormatter:
    """统一的消息格式化器"""

    @staticmethod
    def config_not_found(file_name: str) -> str:
        """配置文件不存在错误消息"""
        return f'❌ 配置文件 "{file_name}" 不存在！'

    @staticmethod
    def config_remediation(file_name: str, example_body: str) -> str:
        """配置文件缺失时的修复指引"""
        return (
            "👉 运行以下命令创建新的配置文件:\n"
            f"   touch {file_name}\n\n"
            "📌 然后在文件中写入以下配置:\n"
            f"{example_body}\n"
        )

    @staticmethod
    def icons_dir_not_found(directory: str | Path | None) -> str:
        """图标目录不存在错误消息"""
        return f'图标目录 "{directory}" 不存在。'

    @staticmethod
    def no_svg_files(directory: str | Path) -> str:
        """图标目录中没有 SVG 文件的提示"""
        return f'⚠️ 指定的图标目录 "{directory}" 中没有找到 SVG 文件。'

    @staticmethod
    def name_collision(
        name: str, sources: list[Path], variants: list[str] | None = None
    ) -> str:
        """组件名冲突错误消息

        variants 是仅大小写不同的组件名，提示它们在大小写不敏感的文件系统上会互相覆盖。
        """
        files = ", ".join(str(p) for p in sources)
        message = f"组件名冲突 {name}: {files}"
        if variants:
            names = "、".join(variants)
            message += f"（{names} 仅大小写不同，在大小写不敏感的文件系统上会互相覆盖）"
        return message

    @staticmethod
    def file_not_found(file_path: str | Path) -> str:
        """文件不存在错误消息"""
        return f"文件不存在: {file_path}"

    @staticmethod
    def operation_failed(
        operation: str, target: str | Path, error: Exception | None = None
    ) -> str:
        """操作失败消息"""
        msg = f"{operation}失败: {target}"
        if error:
            msg += f" - {error}"
        return msg

    @staticmethod
    def validation_error(field: str, value: Any, reason: str | None = None) -> str:
        """参数验证错误消息"""
        msg = f"参数验证失败 - {field}: {value}"
        if reason:
            msg += f" ({reason})"
        return msg

    @staticmethod
    def format_error(operation: str, path: str | Path, error: Exception) -> str:
        """格式化通用错误消息"""
        return f"{operation}失败 [{path}]: {error}"

