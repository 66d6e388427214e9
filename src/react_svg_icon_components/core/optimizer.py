"""SVG 优化器模块。

按 SVGO 兼容的配置格式执行清理插件：插件可以写成名称字符串或
{"name": ..., "params": {...}} 对象，preset-default 支持 params.overrides
（False 表示禁用该插件，字典表示替换其参数）。
"""

import itertools
import re
import string
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from lxml import etree

from ..config import get_config
from ..models.constants import Namespaces, SvgAttributes, SvgElements, SvgoPlugins
from ..utils.logging_helpers import get_logger
from .svg_tree import (
    element_children,
    format_style,
    has_text,
    iter_elements,
    iter_elements_bottom_up,
    local_name,
    namespace_of,
    parse_style,
    parse_svg,
    remove_node,
    serialize_svg,
    unwrap_node,
)


logger = get_logger()

PluginFunc = Callable[[etree._Element, dict[str, Any]], None]

# 未提供 svgoConfig 时转换库使用的默认配置
DEFAULT_SVGO_CONFIG: dict[str, Any] = {
    "plugins": [
        {
            "name": SvgoPlugins.PRESET_DEFAULT,
            "params": {"overrides": {"removeViewBox": False}},
        },
        SvgoPlugins.PREFIX_IDS,
    ]
}

MAX_MULTIPASS = 10

_PLUGINS: dict[str, PluginFunc] = {}

_URL_REFERENCE = re.compile(r"""url\(\s*(['"]?)#([^'")\s]+)\1\s*\)""")
_NUMBER_WITH_UNIT = re.compile(
    r"^([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)(px|pt|pc|mm|cm|m|in|ft|em|ex|%)?$"
)
_RGB_COLOR = re.compile(
    r"^rgb\(\s*([-+]?[\d.]+%?)\s*[,\s]\s*([-+]?[\d.]+%?)\s*[,\s]\s*([-+]?[\d.]+%?)\s*\)$"
)
_LONG_HEX = re.compile(r"^#([0-9a-fA-F]{6})$")
_HREF_ATTRS = ("href", f"{{{Namespaces.XLINK}}}href")

# 没有文件路径时 prefixIds 使用的前缀
DEFAULT_ID_PREFIX = "prefix"


def register(name: str) -> Callable[[PluginFunc], PluginFunc]:
    """注册优化插件"""

    def decorator(func: PluginFunc) -> PluginFunc:
        _PLUGINS[name] = func
        return func

    return decorator


# ============================================================================
# 文档级清理
# ============================================================================


@register("removeDoctype")
def remove_doctype(root: etree._Element, params: dict[str, Any]) -> None:
    """DOCTYPE 不属于根元素，序列化根元素时自然不会输出"""


@register("removeXMLProcInst")
def remove_xml_proc_inst(root: etree._Element, params: dict[str, Any]) -> None:
    """移除根元素内部的处理指令"""
    for node in list(root.iter(etree.ProcessingInstruction)):
        remove_node(node)


@register("removeComments")
def remove_comments(root: etree._Element, params: dict[str, Any]) -> None:
    """移除注释，保留以 ! 开头的版权注释"""
    preserve_patterns = params.get("preservePatterns", True)
    for node in list(root.iter(etree.Comment)):
        if preserve_patterns and (node.text or "").startswith("!"):
            continue
        remove_node(node)


def _remove_by_name(root: etree._Element, name: str) -> None:
    for node in list(iter_elements(root)):
        if node is not root and local_name(node) == name:
            remove_node(node)


@register("removeMetadata")
def remove_metadata(root: etree._Element, params: dict[str, Any]) -> None:
    """移除 <metadata>"""
    _remove_by_name(root, "metadata")


@register("removeTitle")
def remove_title(root: etree._Element, params: dict[str, Any]) -> None:
    """移除 <title>"""
    _remove_by_name(root, "title")


@register("removeDesc")
def remove_desc(root: etree._Element, params: dict[str, Any]) -> None:
    """移除空的或编辑器生成的 <desc>，removeAny 为真时全部移除"""
    remove_any = params.get("removeAny", False)
    for node in list(iter_elements(root)):
        if local_name(node) != "desc":
            continue
        text = (node.text or "").strip()
        if remove_any or not text or text.startswith(("Created with", "Created using")):
            remove_node(node)


@register("removeEditorsNSData")
def remove_editors_ns_data(root: etree._Element, params: dict[str, Any]) -> None:
    """移除编辑器私有命名空间中的元素和属性"""
    namespaces = Namespaces.EDITORS | set(params.get("additionalNamespaces", []))
    for node in list(iter_elements(root)):
        if namespace_of(node) in namespaces:
            remove_node(node)
            continue
        for attr in list(node.attrib):
            if etree.QName(attr).namespace in namespaces:
                del node.attrib[attr]


@register("removeUnusedNS")
def remove_unused_ns(root: etree._Element, params: dict[str, Any]) -> None:
    """移除未被使用的命名空间声明"""
    etree.cleanup_namespaces(root)


# ============================================================================
# 属性清理
# ============================================================================


@register("cleanupAttrs")
def cleanup_attrs(root: etree._Element, params: dict[str, Any]) -> None:
    """清理属性值中的换行和多余空白"""
    newlines = params.get("newlines", True)
    trim = params.get("trim", True)
    spaces = params.get("spaces", True)
    for node in iter_elements(root):
        for attr, value in node.attrib.items():
            if newlines:
                value = re.sub(r"\r?\n", " ", value)
            if trim:
                value = value.strip()
            if spaces:
                value = re.sub(r"\s{2,}", " ", value)
            node.attrib[attr] = value


@register("removeEmptyAttrs")
def remove_empty_attrs(root: etree._Element, params: dict[str, Any]) -> None:
    """移除空值属性（条件处理属性除外）"""
    keep = {"requiredExtensions", "requiredFeatures", "systemLanguage"}
    for node in iter_elements(root):
        for attr in list(node.attrib):
            if node.attrib[attr] == "" and attr not in keep:
                del node.attrib[attr]


def _format_number(value: float, precision: int, leading_zero: bool = True) -> str:
    text = f"{round(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    if leading_zero:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text


@register("cleanupNumericValues")
def cleanup_numeric_values(root: etree._Element, params: dict[str, Any]) -> None:
    """数值取整、去掉默认 px 单位和前导零"""
    precision = params.get("floatPrecision", get_config().generation.FLOAT_PRECISION)
    leading_zero = params.get("leadingZero", True)
    default_px = params.get("defaultPx", True)

    for node in iter_elements(root):
        view_box = node.get("viewBox")
        if view_box:
            numbers = re.split(r"[\s,]+", view_box.strip())
            try:
                node.set(
                    "viewBox",
                    " ".join(_format_number(float(n), precision, False) for n in numbers),
                )
            except ValueError:
                pass  # 非法 viewBox 保持原样

        for attr in SvgAttributes.NUMERIC:
            value = node.get(attr)
            if value is None:
                continue
            match = _NUMBER_WITH_UNIT.match(value.strip())
            if not match:
                continue
            number, unit = match.groups()
            if unit == "px" and default_px:
                unit = None
            node.set(
                attr,
                _format_number(float(number), precision, leading_zero) + (unit or ""),
            )


# ============================================================================
# 颜色
# ============================================================================


def _channel_to_int(channel: str) -> int:
    if channel.endswith("%"):
        value = round(float(channel[:-1]) * 2.55)
    else:
        value = round(float(channel))
    return max(0, min(255, value))


def _in_mask(node: etree._Element) -> bool:
    return any(local_name(a) == "mask" for a in node.iterancestors())


@register("convertColors")
def convert_colors(root: etree._Element, params: dict[str, Any]) -> None:
    """转换颜色值

    currentColor 为 True 时，把除 none 和 url(#...) 引用之外的所有颜色替换为
    currentColor（遮罩内部除外）；为字符串时只替换与之完全相同的值。
    """
    current_color = params.get("currentColor", False)
    rgb2hex = params.get("rgb2hex", True)
    shorthex = params.get("shorthex", True)

    for node in iter_elements(root):
        for attr in SvgAttributes.COLOR:
            value = node.get(attr)
            if value is None:
                continue
            value = value.strip()

            if current_color and not _in_mask(node):
                if isinstance(current_color, str):
                    matched = value == current_color
                else:
                    matched = value != "none" and not value.startswith("url(")
                if matched:
                    node.set(attr, "currentColor")
                    continue

            if rgb2hex and (match := _RGB_COLOR.match(value)):
                value = "#" + "".join(
                    f"{_channel_to_int(c):02x}" for c in match.groups()
                )

            if value.startswith("#"):
                value = value.lower()
                if shorthex and (match := _LONG_HEX.match(value)):
                    digits = match.group(1)
                    if digits[0::2] == digits[1::2]:
                        value = "#" + digits[0::2]

            node.set(attr, value)


# ============================================================================
# 结构清理
# ============================================================================


@register("removeViewBox")
def remove_view_box(root: etree._Element, params: dict[str, Any]) -> None:
    """viewBox 与 width/height 完全一致时移除 viewBox"""
    view_box = root.get("viewBox")
    width, height = root.get("width"), root.get("height")
    if not (view_box and width and height):
        return
    parts = re.split(r"[\s,]+", view_box.strip())
    if len(parts) == 4 and parts[0] == "0" and parts[1] == "0":
        if parts[2] == width.removesuffix("px") and parts[3] == height.removesuffix(
            "px"
        ):
            del root.attrib["viewBox"]


@register("removeDimensions")
def remove_dimensions(root: etree._Element, params: dict[str, Any]) -> None:
    """移除根元素的 width/height，必要时先据此生成 viewBox"""
    width, height = root.get("width"), root.get("height")
    if width is None and height is None:
        return

    if root.get("viewBox") is None:
        try:
            w = float(width.removesuffix("px")) if width else None
            h = float(height.removesuffix("px")) if height else None
        except ValueError:
            return
        if w is None or h is None:
            return
        size = " ".join(_format_number(v, 3, False) for v in (w, h))
        root.set("viewBox", f"0 0 {size}")

    root.attrib.pop("width", None)
    root.attrib.pop("height", None)


@register("convertStyleToAttrs")
def convert_style_to_attrs(root: etree._Element, params: dict[str, Any]) -> None:
    """把内联样式中的展示属性转换为元素属性"""
    keep_important = params.get("keepImportant", False)
    for node in iter_elements(root):
        style = node.get("style")
        if style is None:
            continue
        remaining = []
        for prop, value in parse_style(style):
            important = value.endswith("!important")
            if prop in SvgAttributes.PRESENTATION and not (important and keep_important):
                node.set(prop, value.removesuffix("!important").strip())
            else:
                remaining.append((prop, value))
        if remaining:
            node.set("style", format_style(remaining))
        else:
            del node.attrib["style"]


def _is_hidden(node: etree._Element) -> bool:
    name = local_name(node)
    if node.get("display") == "none":
        return True
    if node.get("opacity") == "0" and not any(
        local_name(a) == "clipPath" for a in node.iterancestors()
    ):
        return True
    if name == "circle" and node.get("r") == "0":
        return True
    if name == "ellipse" and (node.get("rx") == "0" or node.get("ry") == "0"):
        return True
    if name in ("rect", "pattern", "image") and (
        node.get("width") == "0" or node.get("height") == "0"
    ):
        return len(element_children(node)) == 0 or name != "rect"
    if name == "path" and not (node.get("d") or "").strip():
        return True
    if name in ("polyline", "polygon") and not (node.get("points") or "").strip():
        return True
    return False


@register("removeHiddenElems")
def remove_hidden_elems(root: etree._Element, params: dict[str, Any]) -> None:
    """移除不可见元素"""
    for node in list(iter_elements(root)):
        if node is root or node.getparent() is None:
            continue
        if _is_hidden(node):
            remove_node(node)


@register("removeEmptyText")
def remove_empty_text(root: etree._Element, params: dict[str, Any]) -> None:
    """移除空文本元素"""
    for node in list(iter_elements_bottom_up(root)):
        name = local_name(node)
        if name in ("text", "tspan"):
            if not element_children(node) and not has_text(node):
                remove_node(node)
        elif name == "tref" and not any(node.get(a) for a in _HREF_ATTRS):
            remove_node(node)


@register("removeEmptyContainers")
def remove_empty_containers(root: etree._Element, params: dict[str, Any]) -> None:
    """移除没有子元素的容器元素"""
    for node in list(iter_elements_bottom_up(root)):
        name = local_name(node)
        if node is root or name not in SvgElements.CONTAINERS:
            continue
        if element_children(node) or has_text(node):
            continue
        if name == "pattern" and len(node.attrib) > 0:
            continue
        if name == "g" and node.get("filter") is not None:
            continue
        if name == "mask" and node.get("id") is not None:
            continue
        parent = node.getparent()
        if parent is not None and local_name(parent) == "switch":
            continue
        remove_node(node)


def _try_collapse_into_child(group: etree._Element, child: etree._Element) -> bool:
    """把分组属性下沉到唯一子元素，成功返回 True"""
    if child.get("id") is not None:
        return False
    moved: dict[str, str] = {}
    for attr, value in group.attrib.items():
        if attr == "transform":
            own = child.get("transform")
            moved[attr] = f"{value} {own}" if own else value
        elif attr not in SvgAttributes.INHERITABLE:
            return False
        elif child.get(attr) is None:
            moved[attr] = value
        elif child.get(attr) != value:
            return False
    for attr, value in moved.items():
        child.set(attr, value)
    for attr in list(group.attrib):
        del group.attrib[attr]
    return True


@register("collapseGroups")
def collapse_groups(root: etree._Element, params: dict[str, Any]) -> None:
    """展开无意义的分组"""
    for node in list(iter_elements_bottom_up(root)):
        if local_name(node) != "g" or node is root:
            continue
        parent = node.getparent()
        if parent is None or local_name(parent) == "switch":
            continue
        if any(attr in SvgAttributes.GROUP_BLOCKING for attr in node.attrib):
            continue
        children = element_children(node)
        if node.attrib and len(children) == 1:
            _try_collapse_into_child(node, children[0])
        if not node.attrib and not has_text(node):
            unwrap_node(node)


# ============================================================================
# ID 与引用
# ============================================================================


def _short_ids() -> Iterator[str]:
    alphabet = string.ascii_lowercase + string.ascii_uppercase
    for size in itertools.count(1):
        for chars in itertools.product(alphabet, repeat=size):
            yield "".join(chars)


def _referenced_ids(root: etree._Element) -> set[str]:
    referenced = set()
    for node in iter_elements(root):
        for attr, value in node.attrib.items():
            for match in _URL_REFERENCE.finditer(value):
                referenced.add(match.group(2))
            if attr in _HREF_ATTRS and value.startswith("#"):
                referenced.add(value[1:])
            if attr == "begin":
                referenced.update(re.findall(r"([\w-]+)\.", value))
    return referenced


def _rewrite_references(root: etree._Element, mapping: dict[str, str]) -> None:
    def replace_url(match: re.Match[str]) -> str:
        quote, target = match.groups()
        return f"url({quote}#{mapping.get(target, target)}{quote})"

    for node in iter_elements(root):
        for attr, value in node.attrib.items():
            new_value = _URL_REFERENCE.sub(replace_url, value)
            if attr in _HREF_ATTRS and new_value.startswith("#"):
                new_value = "#" + mapping.get(new_value[1:], new_value[1:])
            if new_value != value:
                node.set(attr, new_value)


@register("cleanupIds")
def cleanup_ids(root: etree._Element, params: dict[str, Any]) -> None:
    """移除未被引用的 ID，并把被引用的 ID 缩短

    文档包含 <style> 或 <script> 时无法可靠追踪引用，除非 force 为真否则跳过。
    """
    remove = params.get("remove", True)
    minify = params.get("minify", True)
    preserve = set(params.get("preserve", []))
    preserve_prefixes = tuple(params.get("preservePrefixes", []))
    force = params.get("force", False)

    if not force and any(
        local_name(n) in ("style", "script") for n in iter_elements(root)
    ):
        return

    def preserved(value: str) -> bool:
        return value in preserve or bool(
            preserve_prefixes and value.startswith(preserve_prefixes)
        )

    referenced = _referenced_ids(root)
    # 保持原样的 ID 不能再分配给被缩短的 ID
    kept = {
        node_id
        for node in iter_elements(root)
        if (node_id := node.get("id")) is not None
        and (preserved(node_id) or (node_id not in referenced and not remove))
    }
    mapping: dict[str, str] = {}
    generator = (i for i in _short_ids() if i not in preserve and i not in kept)

    for node in iter_elements(root):
        node_id = node.get("id")
        if node_id is None or preserved(node_id):
            continue
        if node_id not in referenced:
            if remove:
                del node.attrib["id"]
        elif minify:
            if node_id not in mapping:
                mapping[node_id] = next(generator)
            node.set("id", mapping[node_id])

    if mapping:
        _rewrite_references(root, mapping)


@register("removeUselessDefs")
def remove_useless_defs(root: etree._Element, params: dict[str, Any]) -> None:
    """移除 <defs> 中既没有 ID、也不包含带 ID 后代的元素"""
    for defs in list(iter_elements(root)):
        if local_name(defs) != "defs":
            continue
        for child in element_children(defs):
            if local_name(child) == "style" or child.get("id") is not None:
                continue
            if any(d.get("id") is not None for d in iter_elements(child)):
                continue
            remove_node(child)
        if not element_children(defs):
            remove_node(defs)


@register("prefixIds")
def prefix_ids(root: etree._Element, params: dict[str, Any]) -> None:
    """给 ID 和 class 加上前缀，并同步改写 url(#id) 与 href 引用

    已经带有前缀的值保持不变，重复执行结果一致。
    """
    prefix = params.get("prefix", DEFAULT_ID_PREFIX) + params.get("delim", "__")

    def add_prefix(value: str) -> str:
        return value if value.startswith(prefix) else prefix + value

    if params.get("prefixIds", True):
        mapping = {
            node_id: add_prefix(node_id)
            for node in iter_elements(root)
            if (node_id := node.get("id"))
        }
        for node in iter_elements(root):
            if node_id := node.get("id"):
                node.set("id", mapping[node_id])
        # 引用了不存在的 ID 时同样加前缀，与目标 ID 的改写方式保持一致
        for target in _referenced_ids(root):
            mapping.setdefault(target, add_prefix(target))
        _rewrite_references(root, mapping)

    if params.get("prefixClassNames", True):
        for node in iter_elements(root):
            classes = node.get("class")
            if classes and classes.strip():
                node.set("class", " ".join(add_prefix(c) for c in classes.split()))


def id_prefix_for(file_path: str | Path | None) -> str:
    """按文件名生成 ID 前缀，点和空格替换为下划线"""
    if file_path is None:
        return DEFAULT_ID_PREFIX
    return re.sub(r"[. ]", "_", Path(file_path).name)


# ============================================================================
# 配置解析与执行
# ============================================================================


def resolve_plugins(svgo_config: dict[str, Any] | None) -> list[tuple[str, dict[str, Any]]]:
    """把 SVGO 格式的配置展开为 (插件名, 参数) 列表

    Args:
        svgo_config: 优化配置，None 时使用默认配置

    Returns:
        list: 按执行顺序排列的插件及参数

    Raises:
        TypeError: 插件条目既不是字符串也不是对象
    """
    config = DEFAULT_SVGO_CONFIG if svgo_config is None else svgo_config
    float_precision = config.get("floatPrecision")
    resolved: list[tuple[str, dict[str, Any]]] = []

    for entry in config.get("plugins", []):
        if isinstance(entry, str):
            name, params = entry, {}
        elif isinstance(entry, dict):
            name, params = entry["name"], dict(entry.get("params") or {})
        else:
            raise TypeError(f"无法识别的插件配置: {entry!r}")

        if name == SvgoPlugins.PRESET_DEFAULT:
            overrides = params.get("overrides", {})
            for member in SvgoPlugins.PRESET_MEMBERS:
                override = overrides.get(member, True)
                if override is False:
                    continue
                member_params = dict(override) if isinstance(override, dict) else {}
                resolved.append((member, member_params))
        elif name in _PLUGINS:
            resolved.append((name, params))
        else:
            logger.warning(f"跳过未实现的优化插件: {name}")

    if float_precision is not None:
        for name, params in resolved:
            if name == "cleanupNumericValues":
                params.setdefault("floatPrecision", float_precision)

    return resolved


class SvgOptimizer:
    """SVG 优化器

    每个实例对应一份优化配置，可以重复用于多个 SVG。
    """

    def __init__(
        self,
        svgo_config: dict[str, Any] | None = None,
        file_path: str | Path | None = None,
    ):
        """初始化优化器

        Args:
            svgo_config: SVGO 格式的配置，None 表示默认配置
            file_path: 源文件路径，prefixIds 未指定前缀时据此生成前缀
        """
        self.svgo_config = svgo_config
        self.file_path = file_path
        self.plugins = resolve_plugins(svgo_config)
        for name, params in self.plugins:
            if name == SvgoPlugins.PREFIX_IDS:
                params.setdefault("prefix", id_prefix_for(file_path))
        self.multipass = bool((svgo_config or {}).get("multipass", False))

    def optimize(self, svg_text: str) -> str:
        """优化 SVG 文本

        Args:
            svg_text: 原始 SVG 文本

        Returns:
            str: 优化后的 SVG 文本
        """
        result = self._run_once(svg_text)
        if self.multipass:
            for _ in range(MAX_MULTIPASS - 1):
                next_result = self._run_once(result)
                if next_result == result:
                    break
                result = next_result
        return result

    def _run_once(self, svg_text: str) -> str:
        root = parse_svg(svg_text)
        for name, params in self.plugins:
            _PLUGINS[name](root, params)
        return serialize_svg(root)
