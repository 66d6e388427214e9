"""React SVG 图标组件生成器接口。

组合配置加载和批量生成引擎，提供简洁的调用入口。
"""

from pathlib import Path

from .engine.batch import BatchGenerator
from .engine.config import ConfigLoader
from .models import GenerationSummary, GeneratorConfig
from .utils.logging_helpers import get_logger


logger = get_logger()


class IconGenerator:
    """图标组件生成器。

    持有启动时构建的配置，并把它显式传递给批量生成引擎。
    """

    def __init__(self, config: GeneratorConfig):
        """初始化生成器。

        Args:
            config: 生成器配置
        """
        self.config = config
        self.batch_generator = BatchGenerator(config)

        logger.debug("初始化图标组件生成器")

    @classmethod
    def from_config_file(cls, cwd: str | Path | None = None) -> "IconGenerator":
        """从配置文件创建生成器。

        Args:
            cwd: 配置文件所在目录，默认当前工作目录

        Examples:
            >>> generator = IconGenerator.from_config_file()
            >>> summary = generator.generate()
            >>> print(summary.format_report())
        """
        return cls(ConfigLoader().load(cwd))

    def generate(self) -> GenerationSummary:
        """生成所有图标组件和导出文件。

        Returns:
            GenerationSummary: 生成摘要
        """
        return self.batch_generator.run()


def generate_icons(config: GeneratorConfig) -> GenerationSummary:
    """便捷的生成函数"""
    return IconGenerator(config).generate()
