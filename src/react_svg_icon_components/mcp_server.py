"""React SVG 图标组件 MCP 服务器。

提供两个工具：按配置文件批量生成组件，以及分析单个 SVG 的颜色和优化配置。
"""

import json
import logging
from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from .core.color_analysis import analyze_svg_colors
from .core.profile import build_heuristic_profile
from .exceptions import (
    ComponentNameCollisionError,
    ConfigNotFoundError,
    ConfigValidationError,
    IconGenerationError,
    IconsDirectoryNotFoundError,
    TransformError,
)
from .generator import IconGenerator
from .models.constants import SVG_SUFFIX
from .utils.message_formatter import MessageFormatter


# MCP 服务器响应类型定义
MCPGenerationResponse = dict[str, Any]
MCPSvgInfoResponse = dict[str, Any]


class MCPResponseBuilder:
    """MCP 服务器响应构建器，专门用于构建符合 MCP 协议的响应格式。"""

    @staticmethod
    def error(
        message: str,
        error_type: str = "general",
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """构建错误结果。

        Args:
            message: 错误消息
            error_type: 错误类型
            details: 额外的错误详情

        Returns:
            dict: 标准化的错误响应
        """
        result = {
            "success": False,
            "error": message,
            "error_type": error_type,
        }

        if details:
            result["details"] = details

        return result

    @staticmethod
    def validation_error(message: str, field: str | None = None) -> dict[str, Any]:
        """构建验证错误结果。"""
        details = {"field": field} if field else None
        return MCPResponseBuilder.error(
            message=message,
            error_type="validation",
            details=details,
        )

    @staticmethod
    def file_error(message: str, file_path: str | None = None) -> dict[str, Any]:
        """构建文件相关错误结果。"""
        details = {"file_path": file_path} if file_path else None
        return MCPResponseBuilder.error(
            message=message,
            error_type="file",
            details=details,
        )

    @staticmethod
    def processing_error(message: str, operation: str | None = None) -> dict[str, Any]:
        """构建处理错误结果。"""
        details = {"operation": operation} if operation else None
        return MCPResponseBuilder.error(
            message=message,
            error_type="processing",
            details=details,
        )

    @staticmethod
    def from_generation_error(error: IconGenerationError) -> dict[str, Any]:
        """按异常类型映射错误响应"""
        path = str(error.path) if error.path else None
        match error:
            case ConfigNotFoundError() | IconsDirectoryNotFoundError():
                return MCPResponseBuilder.file_error(error.message, path)
            case ConfigValidationError() | ComponentNameCollisionError():
                return MCPResponseBuilder.validation_error(error.message)
            case TransformError():
                return MCPResponseBuilder.processing_error(
                    MessageFormatter.format_error("组件转换", path or "", error),
                    "组件转换",
                )
            case _:
                return MCPResponseBuilder.processing_error(error.message)


# 配置日志
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# 创建MCP应用
mcp: FastMCP[Any] = FastMCP("React SVG 图标组件生成服务")


@mcp.tool()
def generate_icon_components(config_dir: str | None = None) -> MCPGenerationResponse:
    """按 react-svg-icon-components.json 批量生成 React 图标组件

    输出目录会被完整替换；任何一个图标转换失败都不会修改输出目录。

    Args:
        config_dir: 配置文件所在目录（默认当前工作目录），
            配置中的相对路径同样相对于当前工作目录解析

    Returns:
        dict: 生成结果，包含组件数量、总大小和组件列表
    """
    try:
        generator = IconGenerator.from_config_file(config_dir)
        summary = generator.generate()
    except IconGenerationError as e:
        logger.error(MessageFormatter.operation_failed("生成图标组件", config_dir or ".", e))
        return MCPResponseBuilder.from_generation_error(e)
    except json.JSONDecodeError as e:
        return MCPResponseBuilder.validation_error(f"配置文件不是合法的 JSON: {e}")

    if summary.skipped:
        return {
            "success": True,
            "result": {
                "type": "skipped",
                "message": MessageFormatter.no_svg_files(generator.config.icons_path),
            },
            "error": None,
        }

    return {
        "success": True,
        "result": {
            "type": "batch",
            "output_dir": str(summary.output_dir),
            "index_path": str(summary.index_path),
            "total_components": summary.get_component_count(),
            "total_size": summary.get_total_size(),
            "total_size_human": summary.get_total_size_human(),
            "summary": summary.format_report().strip(),
            "components": [
                {
                    "component_name": c.component_name,
                    "source_path": str(c.source_path),
                    "output_path": str(c.output_path),
                    "size": c.size,
                    "size_human": c.get_size_human(),
                    "profile_source": c.profile_source.value,
                    "is_multi_color": c.is_multi_color,
                }
                for c in summary.components
            ],
        },
        "error": None,
    }


@mcp.tool()
def get_svg_info(input_path: str) -> MCPSvgInfoResponse:
    """分析 SVG 图标的颜色字面量，以及启发式会选择的优化配置

    Args:
        input_path: SVG 文件路径

    Returns:
        dict: 颜色分析结果和启发式优化配置
    """
    path = Path(input_path)
    if not path.is_file():
        return MCPResponseBuilder.file_error(
            MessageFormatter.file_not_found(input_path), input_path
        )
    if not path.name.endswith(SVG_SUFFIX):
        return MCPResponseBuilder.validation_error(
            MessageFormatter.validation_error("input_path", input_path, "需要 .svg 文件"),
            "input_path",
        )

    try:
        analysis = analyze_svg_colors(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(MessageFormatter.operation_failed("读取 SVG", input_path, e))
        return MCPResponseBuilder.file_error(str(e), input_path)

    return {
        "success": True,
        "file_path": str(path),
        "file_size": path.stat().st_size,
        "color_literals": analysis.literals,
        "distinct_color_count": analysis.distinct_count,
        "is_multi_color": analysis.is_multi_color,
        "uses_current_color": not analysis.is_multi_color,
        "heuristic_profile": build_heuristic_profile(analysis.is_multi_color),
    }


# ============================================================================
# 应用入口
# ============================================================================


def main() -> None:
    """启动 MCP 服务器"""
    logger.info("启动图标组件生成 MCP 服务器")
    mcp.run()


if __name__ == "__main__":
    main()
