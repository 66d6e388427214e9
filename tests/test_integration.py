"""集成测试。

测试配置加载、批量生成、命令行入口和 MCP 工具的端到端行为。
"""

import json
import sys
from pathlib import Path

import pytest

from react_svg_icon_components import IconGenerator, generate_icons
from react_svg_icon_components.__main__ import main, run
from react_svg_icon_components.engine.config import ConfigLoader
from react_svg_icon_components.exceptions import (
    ComponentNameCollisionError,
    ConfigNotFoundError,
    ConfigValidationError,
    IconsDirectoryNotFoundError,
    TransformError,
)
from react_svg_icon_components.models import (
    EXAMPLE_CONFIG,
    IconRecord,
    JsxRuntime,
    ProfileSource,
)
from react_svg_icon_components.utils import (
    ComponentNaming,
    ensure_unique_names,
    find_collisions,
    find_svg_files,
)
from tests.conftest import SINGLE_COLOR_SVG, create_config, write_config


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {p.name: p.read_bytes() for p in sorted(directory.iterdir())}


def _record(icon_name: str, component_name: str) -> IconRecord:
    return IconRecord(
        icon_name=icon_name,
        component_name=component_name,
        source_path=Path(f"{icon_name}.svg"),
    )


class TestComponentNaming:
    """组件命名测试"""

    def test_component_name(self):
        """前缀 + 首字母大写"""
        assert ComponentNaming.component_name("Icon", "arrow") == "IconArrow"
        assert ComponentNaming.component_name("Icon", "arrow-left") == "IconArrow-left"
        assert ComponentNaming.component_name("", "check") == "Check"

    def test_icon_name(self):
        """去掉 .svg 扩展名"""
        assert ComponentNaming.icon_name(Path("icons/arrow.svg")) == "arrow"
        assert ComponentNaming.icon_name(Path("icons/a.b.svg")) == "a.b"

    def test_export_line(self):
        """导出语句"""
        assert ComponentNaming.export_line("IconArrow") == (
            'export { default as IconArrow } from "./IconArrow";'
        )

    def test_find_collisions_case_insensitive(self):
        """仅大小写不同的组件名视为冲突"""
        records = [
            _record("arrow", "IconArrow"),
            _record("Arrow", "IconArrow"),
            _record("check", "IconCheck"),
            _record("checK", "IconChecK"),
        ]

        collisions = find_collisions(records)

        assert collisions == {
            "IconArrow": [Path("arrow.svg"), Path("Arrow.svg")],
            "IconCheck": [Path("check.svg"), Path("checK.svg")],
        }
        with pytest.raises(ComponentNameCollisionError) as exc_info:
            ensure_unique_names(records)
        assert exc_info.value.collisions == collisions

    def test_case_only_collision_message(self):
        """仅大小写不同的冲突在错误消息中单独说明"""
        with pytest.raises(ComponentNameCollisionError) as exc_info:
            ensure_unique_names([_record("aB", "IconAB"), _record("ab", "IconAb")])

        message = exc_info.value.message
        assert "IconAB、IconAb 仅大小写不同" in message
        assert "aB.svg" in message
        assert "ab.svg" in message

    def test_identical_collision_message(self):
        """组件名完全相同时不提示大小写"""
        with pytest.raises(ComponentNameCollisionError) as exc_info:
            ensure_unique_names(
                [_record("arrow", "IconArrow"), _record("Arrow", "IconArrow")]
            )

        assert "仅大小写不同" not in exc_info.value.message

    def test_unique_names_pass(self):
        """无冲突时不报错"""
        records = [
            _record("a", "IconA"),
            _record("b", "IconB"),
        ]
        ensure_unique_names(records)


class TestFindSvgFiles:
    """SVG 文件查找测试"""

    def test_filters_and_sorts(self, temp_dir: Path):
        """只保留 .svg 结尾的文件，按文件名排序"""
        for name in ["b.svg", "a.svg", "c.SVG", "notes.txt", "d.svg.bak"]:
            (temp_dir / name).write_text(SINGLE_COLOR_SVG, encoding="utf-8")
        (temp_dir / "nested.svg").mkdir()

        files = find_svg_files(temp_dir)

        assert [f.name for f in files] == ["a.svg", "b.svg"]

    def test_missing_directory(self, temp_dir: Path):
        """目录不存在"""
        with pytest.raises(IconsDirectoryNotFoundError):
            find_svg_files(temp_dir / "missing")

    def test_unset_directory(self):
        """未配置目录"""
        with pytest.raises(IconsDirectoryNotFoundError):
            find_svg_files(None)


class TestConfigLoader:
    """配置加载测试"""

    def test_missing_config(self, temp_dir: Path):
        """配置文件不存在"""
        with pytest.raises(ConfigNotFoundError) as exc_info:
            ConfigLoader().load(temp_dir)

        assert exc_info.value.example == EXAMPLE_CONFIG
        assert "react-svg-icon-components.json" in exc_info.value.message

    def test_defaults(self, temp_dir: Path):
        """缺省字段使用默认值"""
        (temp_dir / "react-svg-icon-components.json").write_text(
            json.dumps({"iconsPath": "icons", "outputDir": "out"}), encoding="utf-8"
        )

        config = ConfigLoader().load(temp_dir)

        assert config.icons_path == Path("icons")
        assert config.output_dir == Path("out")
        assert config.jsx_runtime == JsxRuntime.CLASSIC
        assert config.typescript is True
        assert config.component_prefix == "SvgIcon"
        assert config.use_default_optimization is False
        assert config.svgo_config is None

    def test_missing_paths_are_allowed(self, temp_dir: Path):
        """iconsPath / outputDir 缺失时加载不报错"""
        (temp_dir / "react-svg-icon-components.json").write_text("{}", encoding="utf-8")

        config = ConfigLoader().load(temp_dir)

        assert config.icons_path is None
        assert config.output_dir is None

    def test_all_fields(self, temp_dir: Path):
        """测试全部字段"""
        write_config(
            temp_dir,
            jsxRuntime="automatic",
            typescript=False,
            useDefaultOptimization=True,
            svgoConfig={"plugins": []},
        )

        config = ConfigLoader().load(temp_dir)

        assert config.jsx_runtime == JsxRuntime.AUTOMATIC
        assert config.component_extension == "jsx"
        assert config.index_file_name == "index.js"
        assert config.svgo_config == {"plugins": []}

    def test_invalid_field_type(self, temp_dir: Path):
        """字段类型错误"""
        write_config(temp_dir, componentPrefix=123)

        with pytest.raises(ConfigValidationError, match="componentPrefix"):
            ConfigLoader().load(temp_dir)

    def test_not_an_object(self, temp_dir: Path):
        """配置不是 JSON 对象"""
        (temp_dir / "react-svg-icon-components.json").write_text("[]", encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            ConfigLoader().load(temp_dir)

    def test_malformed_json_propagates(self, temp_dir: Path):
        """非法 JSON 直接抛出解析错误"""
        (temp_dir / "react-svg-icon-components.json").write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            ConfigLoader().load(temp_dir)


class TestBatchGeneration:
    """批量生成测试"""

    def test_generate_components_and_index(self, project_dir: Path):
        """生成组件文件和导出文件"""
        summary = generate_icons(create_config())

        out = project_dir / "out"
        assert (out / "IconArrow.tsx").is_file()
        assert (out / "IconCheck.tsx").is_file()
        assert (out / "index.ts").read_text(encoding="utf-8").splitlines() == [
            'export { default as IconArrow } from "./IconArrow";',
            'export { default as IconCheck } from "./IconCheck";',
        ]
        assert sorted(p.name for p in out.iterdir()) == [
            "IconArrow.tsx",
            "IconCheck.tsx",
            "index.ts",
        ]

        assert summary.get_component_names() == ["IconArrow", "IconCheck"]
        assert summary.get_total_size() == sum(
            (out / name).stat().st_size for name in ["IconArrow.tsx", "IconCheck.tsx"]
        )
        assert summary.index_path == Path("out") / "index.ts"
        assert all(c.output_path.parent == Path("out") for c in summary.components)

    def test_heuristic_per_icon(self, project_dir: Path):
        """单色图标使用 currentColor，多色图标保留配色"""
        summary = generate_icons(create_config())

        arrow = (project_dir / "out" / "IconArrow.tsx").read_text(encoding="utf-8")
        check = (project_dir / "out" / "IconCheck.tsx").read_text(encoding="utf-8")
        assert 'fill="currentColor"' in arrow
        assert "currentColor" not in check
        assert [c.is_multi_color for c in summary.components] == [False, True]
        assert all(c.profile_source == ProfileSource.HEURISTIC for c in summary.components)

    def test_javascript_output(self, project_dir: Path):
        """typescript 为 false 时生成 .jsx 和 index.js"""
        generate_icons(create_config(typescript=False, jsx_runtime=JsxRuntime.AUTOMATIC))

        out = project_dir / "out"
        assert sorted(p.name for p in out.iterdir()) == [
            "IconArrow.jsx",
            "IconCheck.jsx",
            "index.js",
        ]
        code = (out / "IconArrow.jsx").read_text(encoding="utf-8")
        assert code.startswith("const IconArrow = (props) => (")

    def test_explicit_config_never_runs_heuristic(self, project_dir: Path, monkeypatch):
        """显式 svgoConfig 覆盖启发式"""
        monkeypatch.setattr(
            "react_svg_icon_components.core.profile.is_multi_color_svg",
            lambda svg_text: pytest.fail("不应该运行颜色启发式"),
        )

        summary = generate_icons(create_config(svgo_config={"plugins": []}))

        arrow = (project_dir / "out" / "IconArrow.tsx").read_text(encoding="utf-8")
        assert 'fill="#000000"' in arrow
        assert 'width="24"' in arrow
        assert all(c.profile_source == ProfileSource.EXPLICIT for c in summary.components)

    def test_idempotent(self, project_dir: Path):
        """两次生成的输出完全一致"""
        generate_icons(create_config())
        first = _snapshot(project_dir / "out")

        generate_icons(create_config())
        second = _snapshot(project_dir / "out")

        assert first == second

    def test_output_dir_is_replaced(self, project_dir: Path):
        """旧的输出文件被清除"""
        out = project_dir / "out"
        out.mkdir()
        (out / "Stale.tsx").write_text("stale", encoding="utf-8")

        generate_icons(create_config())

        assert not (out / "Stale.tsx").exists()
        assert (out / "IconArrow.tsx").exists()

    def test_nested_output_dir(self, project_dir: Path):
        """输出目录的父目录不存在时自动创建"""
        generate_icons(create_config(output_dir=Path("ui-kit/icons")))

        assert (project_dir / "ui-kit" / "icons" / "index.ts").is_file()

    def test_empty_icons_directory(self, project_dir: Path):
        """没有 SVG 文件时跳过，不创建输出目录"""
        empty = project_dir / "empty"
        empty.mkdir()

        summary = generate_icons(create_config(icons_path=empty))

        assert summary.skipped
        assert not (project_dir / "out").exists()

    def test_missing_icons_directory(self, project_dir: Path):
        """图标目录不存在时失败，不修改输出目录"""
        with pytest.raises(IconsDirectoryNotFoundError):
            generate_icons(create_config(icons_path=Path("missing")))

        assert not (project_dir / "out").exists()

    def test_missing_output_dir_config(self, project_dir: Path):
        """未配置输出目录"""
        with pytest.raises(ConfigValidationError):
            generate_icons(create_config(output_dir=None))

    def test_transform_failure_keeps_previous_output(self, project_dir: Path):
        """转换失败时输出目录保持原状，暂存目录被清理"""
        out = project_dir / "out"
        out.mkdir()
        (out / "Previous.tsx").write_text("previous", encoding="utf-8")
        (project_dir / "icons" / "broken.svg").write_text("<svg><path", encoding="utf-8")

        with pytest.raises(TransformError) as exc_info:
            generate_icons(create_config())

        assert exc_info.value.path.name == "broken.svg"
        assert sorted(p.name for p in out.iterdir()) == ["Previous.tsx"]
        assert list(project_dir.glob(".rsic-staging-*")) == []

    def test_symlinked_output_dir(self, project_dir: Path):
        """输出目录是符号链接时保留链接，替换链接目标的内容"""
        real = project_dir / "real"
        real.mkdir()
        (real / "Old.tsx").write_text("old", encoding="utf-8")
        out = project_dir / "out"
        out.symlink_to(real, target_is_directory=True)

        generate_icons(create_config())

        assert out.is_symlink()
        assert out.resolve() == real.resolve()
        assert sorted(p.name for p in real.iterdir()) == [
            "IconArrow.tsx",
            "IconCheck.tsx",
            "index.ts",
        ]
        assert list(project_dir.glob(".rsic-staging-*")) == []

    def test_failed_swap_cleans_staging(self, project_dir: Path, monkeypatch):
        """替换输出目录失败时清理暂存目录并抛出原始异常"""
        out = project_dir / "out"
        out.mkdir()
        (out / "Previous.tsx").write_text("previous", encoding="utf-8")

        def fail_replace(staging_dir: Path, output_dir: Path) -> None:
            raise OSError("设备忙")

        monkeypatch.setattr(
            "react_svg_icon_components.engine.batch.replace_directory", fail_replace
        )

        with pytest.raises(OSError, match="设备忙"):
            generate_icons(create_config())

        assert sorted(p.name for p in out.iterdir()) == ["Previous.tsx"]
        assert list(project_dir.glob(".rsic-staging-*")) == []

    def test_generator_from_config_file(self, project_dir: Path):
        """从配置文件创建生成器"""
        write_config(project_dir)

        generator = IconGenerator.from_config_file()
        summary = generator.generate()

        assert summary.get_component_count() == 2
        report = summary.format_report()
        assert "生成组件数: 2" in report
        assert "组件列表: IconArrow, IconCheck" in report
        assert str((project_dir / "out").resolve()) in report


class TestCommandLine:
    """命令行入口测试"""

    def test_success(self, project_dir: Path, capsys):
        """生成成功返回 0 并输出摘要"""
        write_config(project_dir)

        assert run() == 0

        captured = capsys.readouterr()
        assert "✅ 图标组件生成完成！" in captured.out
        assert "总大小:" in captured.out
        assert (project_dir / "out" / "index.ts").is_file()

    def test_missing_config(self, temp_dir: Path, monkeypatch, capsys):
        """配置文件不存在时返回 1 并输出修复指引"""
        monkeypatch.chdir(temp_dir)

        assert run() == 1

        captured = capsys.readouterr()
        assert "touch react-svg-icon-components.json" in captured.err
        assert '"iconsPath": "icons"' in captured.err

    def test_missing_icons_directory(self, project_dir: Path, capsys):
        """图标目录不存在时返回 1"""
        write_config(project_dir, iconsPath="missing")

        assert run() == 1
        assert not (project_dir / "out").exists()

    def test_empty_icons_directory(self, project_dir: Path, capsys):
        """没有 SVG 文件时返回 0"""
        (project_dir / "empty").mkdir()
        write_config(project_dir, iconsPath="empty")

        assert run() == 0
        assert "没有找到 SVG 文件" in capsys.readouterr().out
        assert not (project_dir / "out").exists()

    def test_malformed_json(self, project_dir: Path):
        """非法 JSON 不被捕获"""
        (project_dir / "react-svg-icon-components.json").write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            run()

    def test_main_exit_code(self, project_dir: Path, monkeypatch):
        """main 以 run 的返回值退出"""
        write_config(project_dir)
        monkeypatch.setattr(sys, "argv", ["react-svg-icon-components"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0

    def test_version(self, monkeypatch, capsys):
        """--version 输出版本号"""
        from react_svg_icon_components import __version__

        monkeypatch.setattr(sys, "argv", ["react-svg-icon-components", "--version"])
        main()

        assert __version__ in capsys.readouterr().out


class TestMCPServer:
    """MCP 服务器测试"""

    def test_mcp_server_imports(self):
        """测试MCP服务器导入"""
        from react_svg_icon_components.mcp_server import mcp

        assert mcp is not None

    def test_mcp_core_tools(self):
        """测试MCP核心工具存在"""
        from react_svg_icon_components.mcp_server import (
            generate_icon_components,
            get_svg_info,
        )

        assert generate_icon_components.name == "generate_icon_components"
        assert get_svg_info.name == "get_svg_info"

    def test_get_svg_info(self, project_dir: Path):
        """分析单个 SVG"""
        from react_svg_icon_components.mcp_server import get_svg_info

        result = get_svg_info.fn(str(project_dir / "icons" / "check.svg"))

        assert result["success"]
        assert result["is_multi_color"] is True
        assert result["distinct_color_count"] == 2

    def test_get_svg_info_missing_file(self, temp_dir: Path):
        """文件不存在"""
        from react_svg_icon_components.mcp_server import get_svg_info

        result = get_svg_info.fn(str(temp_dir / "missing.svg"))

        assert not result["success"]
        assert result["error_type"] == "file"

    def test_generate_icon_components(self, project_dir: Path):
        """通过 MCP 工具批量生成"""
        from react_svg_icon_components.mcp_server import generate_icon_components

        write_config(project_dir)
        result = generate_icon_components.fn()

        assert result["success"]
        assert result["result"]["total_components"] == 2
        assert [c["component_name"] for c in result["result"]["components"]] == [
            "IconArrow",
            "IconCheck",
        ]

    def test_generate_icon_components_missing_config(self, temp_dir: Path):
        """配置文件不存在"""
        from react_svg_icon_components.mcp_server import generate_icon_components

        result = generate_icon_components.fn(str(temp_dir))

        assert not result["success"]
        assert result["error_type"] == "file"
