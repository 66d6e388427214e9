"""生成器相关常量定义。

集中维护配置文件名、SVG 命名空间、优化插件名称和属性分类表。
"""

from typing import Final


# 配置文件
CONFIG_FILE_NAME: Final[str] = "react-svg-icon-components.json"

EXAMPLE_CONFIG: Final[str] = """
{
  "iconsPath": "icons",
  "outputDir": "ui-kit/icons",
  "jsxRuntime": "classic",
  "typescript": true,
  "useDefaultOptimization": true,
  "componentPrefix": "Icon"
}
"""

SVG_SUFFIX: Final[str] = ".svg"


class Namespaces:
    """SVG 文档中常见的命名空间"""

    SVG: Final[str] = "http://www.w3.org/2000/svg"
    XLINK: Final[str] = "http://www.w3.org/1999/xlink"
    XML: Final[str] = "http://www.w3.org/XML/1998/namespace"

    # 编辑器写入的私有命名空间，removeEditorsNSData 会清除
    EDITORS: Final[frozenset[str]] = frozenset(
        {
            "http://creativecommons.org/ns#",
            "http://inkscape.sourceforge.net/DTD/sodipodi-0.dtd",
            "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
            "http://www.inkscape.org/namespaces/inkscape",
            "http://ns.adobe.com/AdobeIllustrator/10.0/",
            "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
            "http://ns.adobe.com/Extensibility/1.0/",
            "http://ns.adobe.com/Flows/1.0/",
            "http://ns.adobe.com/GenericCustomNamespace/1.0/",
            "http://ns.adobe.com/Graphs/1.0/",
            "http://ns.adobe.com/ImageReplacement/1.0/",
            "http://ns.adobe.com/SaveForWeb/1.0/",
            "http://ns.adobe.com/Variables/1.0/",
            "http://ns.adobe.com/XPath/1.0/",
            "http://purl.org/dc/elements/1.1/",
            "http://schemas.microsoft.com/visio/2003/SVGExtensions/",
            "http://www.bohemiancoding.com/sketch/ns",
            "http://www.figma.com/figma/ns",
            "http://www.serif.com/",
            "http://www.vector.evaxdesign.sk",
            "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
        }
    )


class SvgoPlugins:
    """优化插件名称（与 SVGO 配置中的名称保持一致）"""

    PRESET_DEFAULT: Final[str] = "preset-default"

    # 按文件名给 ID 和 class 加前缀，避免多个图标内联到同一页面时冲突
    PREFIX_IDS: Final[str] = "prefixIds"

    # preset-default 中实现的插件，按执行顺序排列
    PRESET_MEMBERS: Final[tuple[str, ...]] = (
        "removeDoctype",
        "removeXMLProcInst",
        "removeComments",
        "removeMetadata",
        "removeEditorsNSData",
        "cleanupAttrs",
        "cleanupIds",
        "removeUselessDefs",
        "cleanupNumericValues",
        "convertColors",
        "removeViewBox",
        "removeHiddenElems",
        "removeEmptyText",
        "collapseGroups",
        "removeEmptyAttrs",
        "removeEmptyContainers",
        "removeUnusedNS",
        "removeTitle",
        "removeDesc",
    )

    # 启发式优化配置中固定追加的清理步骤
    HEURISTIC_PASSES: Final[tuple[str, ...]] = (
        "removeDimensions",
        "convertStyleToAttrs",
        "cleanupAttrs",
        "removeEmptyContainers",
        "removeHiddenElems",
        "removeMetadata",
        "collapseGroups",
    )


class TransformPlugins:
    """组件转换流水线中的插件名称"""

    SVGO: Final[str] = "svgo"
    JSX: Final[str] = "jsx"

    DEFAULT_PIPELINE: Final[tuple[str, ...]] = (SVGO, JSX)


class SvgAttributes:
    """SVG 属性分类表"""

    # 可以作为独立属性存在的展示属性（convertStyleToAttrs 使用）
    PRESENTATION: Final[frozenset[str]] = frozenset(
        {
            "alignment-baseline",
            "baseline-shift",
            "clip",
            "clip-path",
            "clip-rule",
            "color",
            "color-interpolation",
            "color-interpolation-filters",
            "color-profile",
            "color-rendering",
            "cursor",
            "direction",
            "display",
            "dominant-baseline",
            "enable-background",
            "fill",
            "fill-opacity",
            "fill-rule",
            "filter",
            "flood-color",
            "flood-opacity",
            "font",
            "font-family",
            "font-size",
            "font-size-adjust",
            "font-stretch",
            "font-style",
            "font-variant",
            "font-weight",
            "glyph-orientation-horizontal",
            "glyph-orientation-vertical",
            "image-rendering",
            "letter-spacing",
            "lighting-color",
            "marker",
            "marker-end",
            "marker-mid",
            "marker-start",
            "mask",
            "opacity",
            "overflow",
            "paint-order",
            "pointer-events",
            "shape-rendering",
            "stop-color",
            "stop-opacity",
            "stroke",
            "stroke-dasharray",
            "stroke-dashoffset",
            "stroke-linecap",
            "stroke-linejoin",
            "stroke-miterlimit",
            "stroke-opacity",
            "stroke-width",
            "text-anchor",
            "text-decoration",
            "text-rendering",
            "transform",
            "unicode-bidi",
            "vector-effect",
            "visibility",
            "word-spacing",
            "writing-mode",
        }
    )

    # 取值为颜色的属性（convertColors 使用）
    COLOR: Final[frozenset[str]] = frozenset(
        {"color", "fill", "flood-color", "lighting-color", "stop-color", "stroke"}
    )

    # 取值为数字或长度的属性（cleanupNumericValues 使用）
    NUMERIC: Final[frozenset[str]] = frozenset(
        {
            "cx",
            "cy",
            "dx",
            "dy",
            "fx",
            "fy",
            "height",
            "offset",
            "opacity",
            "fill-opacity",
            "stop-opacity",
            "stroke-opacity",
            "r",
            "rx",
            "ry",
            "stroke-width",
            "stroke-miterlimit",
            "stroke-dashoffset",
            "width",
            "x",
            "x1",
            "x2",
            "y",
            "y1",
            "y2",
        }
    )

    # 可以被 collapseGroups 下沉到唯一子元素的可继承属性
    INHERITABLE: Final[frozenset[str]] = PRESENTATION - frozenset(
        {
            "clip-path",
            "display",
            "filter",
            "mask",
            "opacity",
            "overflow",
        }
    )

    # 有这些属性的分组不能被展开
    GROUP_BLOCKING: Final[frozenset[str]] = frozenset(
        {"clip-path", "filter", "mask", "id", "class", "style"}
    )


class SvgElements:
    """SVG 元素分类表"""

    CONTAINERS: Final[frozenset[str]] = frozenset(
        {
            "a",
            "defs",
            "g",
            "marker",
            "mask",
            "missing-glyph",
            "pattern",
            "switch",
            "symbol",
        }
    )

    # 文本内容元素，其中的空白文本会影响排版
    TEXT_CONTENT: Final[frozenset[str]] = frozenset({"text", "tspan", "textPath"})


class JsxAttributes:
    """SVG 属性名到 React 属性名的特殊映射"""

    SPECIAL: Final[dict[str, str]] = {
        "class": "className",
        "for": "htmlFor",
        "tabindex": "tabIndex",
    }

    # 保留连字符写法的属性前缀
    HYPHEN_PREFIXES: Final[tuple[str, ...]] = ("data-", "aria-")

    # 命名空间属性前缀（lxml 展开后的 {ns} 形式对应的 JSX 名称前缀）
    NAMESPACE_PREFIXES: Final[dict[str, str]] = {
        Namespaces.XLINK: "xlink",
        Namespaces.XML: "xml",
    }
