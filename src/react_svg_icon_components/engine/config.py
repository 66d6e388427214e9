"""配置加载模块。

从当前工作目录读取 react-svg-icon-components.json 并构建 GeneratorConfig。
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigNotFoundError, ConfigValidationError
from ..models.constants import CONFIG_FILE_NAME, EXAMPLE_CONFIG
from ..models.generator_config import GeneratorConfig
from ..utils.message_formatter import MessageFormatter


logger = logging.getLogger(__name__)


class ConfigLoader:
    """生成器配置加载器

    只做存在性检查和类型校验，不校验路径是否存在；
    iconsPath / outputDir 缺失会在后续步骤中失败。
    """

    def __init__(self, file_name: str = CONFIG_FILE_NAME):
        """初始化配置加载器

        Args:
            file_name: 配置文件名
        """
        self.file_name = file_name

    def config_path(self, cwd: str | Path | None = None) -> Path:
        """配置文件的绝对路径"""
        base = Path(cwd) if cwd is not None else Path.cwd()
        return (base / self.file_name).resolve()

    def load(self, cwd: str | Path | None = None) -> GeneratorConfig:
        """加载配置

        Args:
            cwd: 解析配置文件的目录，默认当前工作目录

        Returns:
            GeneratorConfig: 配置对象

        Raises:
            ConfigNotFoundError: 配置文件不存在
            json.JSONDecodeError: 配置文件不是合法 JSON
            ConfigValidationError: 配置字段类型错误
        """
        path = self.config_path(cwd)
        if not path.is_file():
            raise ConfigNotFoundError(
                MessageFormatter.config_not_found(self.file_name),
                path,
                example=EXAMPLE_CONFIG,
            )

        data = json.loads(path.read_text(encoding="utf-8"))
        config = self.build(data, path)
        logger.debug(f"已加载配置: {path}")
        return config

    def build(self, data: Any, path: Path | None = None) -> GeneratorConfig:
        """从解析后的 JSON 数据构建配置

        Raises:
            ConfigValidationError: 数据不是对象或字段类型错误
        """
        if not isinstance(data, dict):
            raise ConfigValidationError(
                MessageFormatter.validation_error(
                    self.file_name, type(data).__name__, "配置必须是 JSON 对象"
                ),
                path,
            )
        try:
            return GeneratorConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigValidationError(self._format_validation_error(e), path) from e

    def _format_validation_error(self, error: PydanticValidationError) -> str:
        """格式化验证错误"""
        messages = []
        for err in error.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            msg = err["msg"]
            if field:
                messages.append(f"{field}: {msg}")
            else:
                messages.append(msg)
        return "; ".join(messages)
