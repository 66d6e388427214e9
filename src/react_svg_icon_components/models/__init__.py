"""数据模型包。

定义图标生成相关的配置、结果和常量。
"""

from .constants import (
    CONFIG_FILE_NAME,
    EXAMPLE_CONFIG,
    SVG_SUFFIX,
    JsxAttributes,
    Namespaces,
    SvgAttributes,
    SvgElements,
    SvgoPlugins,
    TransformPlugins,
)
from .generation_result import (
    ComponentResult,
    GenerationSummary,
    IconRecord,
    ProfileSource,
)
from .generator_config import GeneratorConfig, JsxRuntime
from .transform_options import TransformOptions, TransformState


__all__ = [
    "CONFIG_FILE_NAME",
    "EXAMPLE_CONFIG",
    "SVG_SUFFIX",
    # 结果模型
    "ComponentResult",
    "GenerationSummary",
    # 配置模型
    "GeneratorConfig",
    "IconRecord",
    "JsxAttributes",
    "JsxRuntime",
    "Namespaces",
    "ProfileSource",
    "SvgAttributes",
    "SvgElements",
    "SvgoPlugins",
    "TransformPlugins",
    # 转换参数
    "TransformOptions",
    "TransformState",
]
