"""SVG 文档树工具。

封装 lxml 的解析、序列化和节点操作，供优化插件和 JSX 渲染共用。
"""

import re
from collections.abc import Iterator

from lxml import etree

from ..models.constants import Namespaces


# 不解析外部实体、不访问网络，避免处理不可信的图标文件时出现 XXE
_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    load_dtd=False,
)

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def parse_svg(svg_text: str) -> etree._Element:
    """解析 SVG 文本，返回根元素

    Raises:
        etree.XMLSyntaxError: 文本不是合法的 XML
        ValueError: 根元素不是 svg
    """
    root = etree.fromstring(svg_text.encode("utf-8"), _PARSER)
    if local_name(root) != "svg":
        raise ValueError(f"根元素必须是 svg，当前为: {local_name(root)}")
    return root


def serialize_svg(root: etree._Element) -> str:
    """序列化根元素（不输出 XML 声明和 DOCTYPE）"""
    return etree.tostring(root, encoding="unicode")


def is_element(node: etree._Element) -> bool:
    """是否为元素节点（排除注释和处理指令）"""
    return isinstance(node.tag, str)


def local_name(node: etree._Element) -> str:
    """元素的本地名称（去掉命名空间）"""
    return etree.QName(node).localname


def namespace_of(node: etree._Element) -> str | None:
    """元素所属的命名空间"""
    return etree.QName(node).namespace


def is_svg_element(node: etree._Element) -> bool:
    """是否为 SVG 命名空间（或未声明命名空间）的元素"""
    return is_element(node) and namespace_of(node) in (None, Namespaces.SVG)


def iter_elements(root: etree._Element) -> Iterator[etree._Element]:
    """按文档顺序遍历所有元素节点"""
    for node in root.iter():
        if is_element(node):
            yield node


def iter_elements_bottom_up(root: etree._Element) -> Iterator[etree._Element]:
    """逆文档顺序遍历元素，子孙先于祖先"""
    for node in reversed(list(root.iter())):
        if is_element(node):
            yield node


def element_children(node: etree._Element) -> list[etree._Element]:
    """直接子元素（排除注释）"""
    return [child for child in node if is_element(child)]


def has_text(node: etree._Element) -> bool:
    """元素自身或子节点尾部是否有非空白文本"""
    if node.text and node.text.strip():
        return True
    return any(child.tail and child.tail.strip() for child in node)


def remove_node(node: etree._Element) -> None:
    """移除节点并保留其尾部文本"""
    parent = node.getparent()
    if parent is None:
        return
    tail = node.tail
    if tail:
        previous = node.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail
    parent.remove(node)


def unwrap_node(node: etree._Element) -> None:
    """用子节点替换当前节点（展开分组）"""
    parent = node.getparent()
    if parent is None:
        return
    index = parent.index(node)
    for offset, child in enumerate(list(node)):
        parent.insert(index + offset, child)
    remove_node(node)


def parse_style(style: str) -> list[tuple[str, str]]:
    """解析内联样式为 (属性, 值) 列表，保持原有顺序"""
    declarations = []
    for chunk in _CSS_COMMENT.sub("", style).split(";"):
        if ":" not in chunk:
            continue
        prop, value = chunk.split(":", 1)
        prop, value = prop.strip(), value.strip()
        if prop and value:
            declarations.append((prop, value))
    return declarations


def format_style(declarations: list[tuple[str, str]]) -> str:
    """把 (属性, 值) 列表格式化为内联样式"""
    return ";".join(f"{prop}:{value}" for prop, value in declarations)
