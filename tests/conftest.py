"""测试配置文件。

提供测试所需的fixtures和配置。
"""

import json
import tempfile
from pathlib import Path

import pytest


SINGLE_COLOR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
    'viewBox="0 0 24 24"><path fill="#000000" d="M0 0h24v24H0z"/></svg>'
)

MULTI_COLOR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<rect fill="#FF0000" width="12" height="24"/>'
    '<rect fill="#00FF00" x="12" width="12" height="24"/></svg>'
)


@pytest.fixture
def temp_dir():
    """临时目录fixture"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def project_dir(temp_dir: Path, monkeypatch) -> Path:
    """以临时目录作为当前工作目录，并准备 icons/arrow.svg 和 icons/check.svg"""
    icons = temp_dir / "icons"
    icons.mkdir()
    (icons / "arrow.svg").write_text(SINGLE_COLOR_SVG, encoding="utf-8")
    (icons / "check.svg").write_text(MULTI_COLOR_SVG, encoding="utf-8")
    monkeypatch.chdir(temp_dir)
    return temp_dir


def write_config(directory: Path, **kwargs) -> Path:
    """在目录中写入 react-svg-icon-components.json"""
    data = {
        "iconsPath": "icons",
        "outputDir": "out",
        "typescript": True,
        "componentPrefix": "Icon",
    }
    data.update(kwargs)
    path = directory / "react-svg-icon-components.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def create_config(**kwargs):
    """创建完整的GeneratorConfig，提供默认值"""
    from react_svg_icon_components.models.generator_config import (
        GeneratorConfig,
        JsxRuntime,
    )

    defaults = {
        "icons_path": Path("icons"),
        "output_dir": Path("out"),
        "jsx_runtime": JsxRuntime.CLASSIC,
        "typescript": True,
        "component_prefix": "Icon",
        "use_default_optimization": False,
        "svgo_config": None,
    }
    defaults.update(kwargs)
    return GeneratorConfig(**defaults)
