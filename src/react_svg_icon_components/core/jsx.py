"""JSX 组件渲染模块。

把优化后的 SVG 渲染为 React 函数组件源码。
"""

import json
import re

from lxml import etree

from ..models.constants import JsxAttributes, Namespaces, SvgElements
from ..models.generator_config import JsxRuntime
from ..models.transform_options import TransformOptions, TransformState
from .svg_tree import (
    element_children,
    is_svg_element,
    local_name,
    parse_style,
    parse_svg,
)


INDENT = "  "

_HYPHEN_LETTER = re.compile(r"[-:]([a-zA-Z])")
_UNQUOTABLE = re.compile(r'["&\\\n\r]')


def camel_case(name: str) -> str:
    """stroke-width → strokeWidth"""
    return _HYPHEN_LETTER.sub(lambda m: m.group(1).upper(), name)


def jsx_attribute_name(name: str) -> str | None:
    """把 SVG 属性名转换为 React 属性名

    Returns:
        str | None: 属性名，无法在 JSX 中表示的命名空间属性返回 None
    """
    qname = etree.QName(name)
    if qname.namespace:
        prefix = JsxAttributes.NAMESPACE_PREFIXES.get(qname.namespace)
        if prefix is None:
            return None
        local = qname.localname
        return prefix + local[:1].upper() + camel_case(local[1:])
    if name in JsxAttributes.SPECIAL:
        return JsxAttributes.SPECIAL[name]
    if name.startswith(JsxAttributes.HYPHEN_PREFIXES):
        return name
    return camel_case(name)


def jsx_string(value: str) -> str:
    """JS 字符串字面量"""
    return json.dumps(value, ensure_ascii=False)


def style_object(style: str) -> str:
    """把内联样式转换为 JSX 样式对象"""
    entries = []
    for prop, value in parse_style(style):
        key = jsx_string(prop) if prop.startswith("--") else camel_case(prop)
        entries.append(f"{key}: {jsx_string(value)}")
    return "{{ " + ", ".join(entries) + " }}"


def jsx_attribute(name: str, value: str) -> str:
    """渲染单个属性"""
    if name == "style":
        return f"style={style_object(value)}"
    if _UNQUOTABLE.search(value):
        return f"{name}={{{jsx_string(value)}}}"
    return f'{name}="{value}"'


class JsxRenderer:
    """React 组件渲染器"""

    def __init__(self, options: TransformOptions, state: TransformState):
        if options.native:
            raise ValueError("不支持生成 React Native 组件")
        self.options = options
        self.state = state

    def render(self, svg_code: str) -> str:
        """渲染组件源码

        Args:
            svg_code: SVG 文本（通常已经过优化）

        Returns:
            str: 组件源码，以换行结尾
        """
        root = parse_svg(svg_code)
        name = self.state.component_name
        body = "\n".join(self._render_element(root, depth=1, is_root=True))

        lines = self._imports()
        if lines:
            lines.append("")
        lines.append(f"const {name} = ({self._props_param()}) => (")
        lines.append(body)
        lines.append(");")
        lines.append(f"export default {name};")
        return "\n".join(lines) + "\n"

    def _imports(self) -> list[str]:
        imports = []
        if self.options.jsx_runtime == JsxRuntime.CLASSIC:
            imports.append('import * as React from "react";')
        if self.options.typescript and self.options.expand_props:
            imports.append('import type { SVGProps } from "react";')
        return imports

    def _props_param(self) -> str:
        if not self.options.expand_props:
            return ""
        if self.options.typescript:
            return "props: SVGProps<SVGSVGElement>"
        return "props"

    def _root_attributes(self, root: etree._Element) -> list[str]:
        attrs = []
        if root.nsmap.get(None) == Namespaces.SVG:
            attrs.append(f'xmlns="{Namespaces.SVG}"')
        if Namespaces.XLINK in root.nsmap.values():
            attrs.append(f'xmlnsXlink="{Namespaces.XLINK}"')

        own = dict(root.attrib)
        if self.options.icon:
            own["width"] = "1em"
            own["height"] = "1em"
        attrs.extend(self._attributes(own))

        match self.options.expand_props:
            case "start":
                attrs.insert(0, "{...props}")
            case "end":
                attrs.append("{...props}")
        return attrs

    def _attributes(self, attrib: dict[str, str]) -> list[str]:
        rendered = []
        for attr, value in attrib.items():
            name = jsx_attribute_name(attr)
            if name is not None:
                rendered.append(jsx_attribute(name, value))
        return rendered

    def _render_element(
        self, node: etree._Element, depth: int, is_root: bool = False
    ) -> list[str]:
        pad = INDENT * depth
        tag = local_name(node)
        attrs = (
            self._root_attributes(node) if is_root else self._attributes(dict(node.attrib))
        )
        open_tag = f"<{tag}" + "".join(f" {a}" for a in attrs)

        children = self._render_children(node, depth + 1)
        if not children:
            return [f"{pad}{open_tag} />"]

        if len(children) == 1 and not element_children(node):
            return [f"{pad}{open_tag}>{children[0].strip()}</{tag}>"]

        return [f"{pad}{open_tag}>", *children, f"{pad}</{tag}>"]

    def _render_children(self, node: etree._Element, depth: int) -> list[str]:
        pad = INDENT * depth
        # 文本元素内的空白会影响排版，其他位置的空白只是源文件缩进
        keep_blank = local_name(node) in SvgElements.TEXT_CONTENT

        def renders(text: str | None) -> bool:
            return bool(text) and (keep_blank or bool(text.strip()))

        lines = []
        if renders(node.text):
            lines.append(f"{pad}{{{jsx_string(node.text)}}}")
        for child in node:
            # 注释和其他命名空间的元素无法在 JSX 中表示，只保留尾部文本
            if is_svg_element(child):
                lines.extend(self._render_element(child, depth))
            if renders(child.tail):
                lines.append(f"{pad}{{{jsx_string(child.tail)}}}")
        return lines
