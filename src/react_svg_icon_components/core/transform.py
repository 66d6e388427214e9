"""SVG 到 React 组件的转换流水线。

按插件顺序依次处理代码字符串：svgo 插件负责优化 SVG，
jsx 插件负责生成组件源码。
"""

from collections.abc import Callable

from ..exceptions import TransformError, handle_transform_errors
from ..models.constants import TransformPlugins
from ..models.transform_options import TransformOptions, TransformState
from ..utils.logging_helpers import get_logger
from .jsx import JsxRenderer
from .optimizer import SvgOptimizer


logger = get_logger()

TransformPlugin = Callable[[str, TransformOptions, TransformState], str]


def svgo_plugin(code: str, options: TransformOptions, state: TransformState) -> str:
    """优化插件"""
    return SvgOptimizer(options.svgo_config, state.file_path).optimize(code)


def jsx_plugin(code: str, options: TransformOptions, state: TransformState) -> str:
    """组件渲染插件"""
    return JsxRenderer(options, state).render(code)


PLUGINS: dict[str, TransformPlugin] = {
    TransformPlugins.SVGO: svgo_plugin,
    TransformPlugins.JSX: jsx_plugin,
}


@handle_transform_errors("SVG 组件转换")
def transform(
    svg_code: str,
    options: TransformOptions | None = None,
    state: TransformState | None = None,
) -> str:
    """把 SVG 文本转换为组件源码

    Args:
        svg_code: 原始 SVG 文本
        options: 转换选项，None 时使用默认选项
        state: 命名信息，None 时使用默认组件名

    Returns:
        str: 最后一个插件的输出

    Raises:
        TransformError: 解析失败、插件未知或插件执行失败
    """
    options = options or TransformOptions()
    state = state or TransformState()

    code = svg_code
    for name in options.plugins:
        plugin = PLUGINS.get(name)
        if plugin is None:
            raise TransformError(f"未知的转换插件: {name}", state.file_path)
        logger.debug(f"{state.component_name}: 执行插件 {name}")
        code = plugin(code, options, state)
    return code
