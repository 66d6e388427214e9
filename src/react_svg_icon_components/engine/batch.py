"""批量生成器模块。

按输入顺序逐个把 SVG 图标转换为组件文件，最后生成导出文件。
"""

from pathlib import Path

from ..config import get_config
from ..core.profile import ProfileSelector
from ..core.transform import transform
from ..exceptions import ConfigValidationError, TransformError
from ..models.generation_result import ComponentResult, GenerationSummary, IconRecord
from ..models.generator_config import GeneratorConfig
from ..models.transform_options import TransformOptions, TransformState
from ..utils import (
    ComponentNaming,
    build_icon_records,
    create_staging_dir,
    discard_directory,
    ensure_unique_names,
    find_svg_files,
    replace_directory,
)
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter


logger = get_logger()


class BatchGenerator:
    """批量图标生成器

    严格顺序处理，任何一个图标转换失败都会中止整批。
    组件先写入暂存目录，全部成功后才替换输出目录，
    因此失败时输出目录保持原状。
    """

    def __init__(
        self,
        config: GeneratorConfig,
        profile_selector: ProfileSelector | None = None,
    ):
        """初始化批量生成器

        Args:
            config: 生成器配置
            profile_selector: 优化配置选择器实例
        """
        self.config = config
        self.profile_selector = profile_selector or ProfileSelector(config)

    def run(self) -> GenerationSummary:
        """执行整批生成

        Returns:
            GenerationSummary: 生成摘要；没有 SVG 文件时 skipped 为 True

        Raises:
            IconsDirectoryNotFoundError: 图标目录不存在
            ComponentNameCollisionError: 组件名冲突
            ConfigValidationError: 未配置输出目录
            TransformError: 某个图标转换失败
        """
        files = find_svg_files(self.config.icons_path)
        if not files:
            logger.debug(MessageFormatter.no_svg_files(self.config.icons_path))
            return GenerationSummary(output_dir=self.config.output_dir, skipped=True)

        records = build_icon_records(files, self.config)
        ensure_unique_names(records)

        output_dir = self._require_output_dir()
        staging_dir = create_staging_dir(
            output_dir, get_config().generation.STAGING_PREFIX
        )
        logger.info(
            f"开始生成 {len(records)} 个图标组件 "
            f"(优化配置: {self.profile_selector.source.value})"
        )

        try:
            summary = self.generate_all(records, staging_dir)
            replace_directory(staging_dir, output_dir)
        except Exception:
            discard_directory(staging_dir)
            raise

        return self._relocate(summary, output_dir)

    def generate_all(
        self, records: list[IconRecord], target_dir: Path
    ) -> GenerationSummary:
        """把所有图标生成到目标目录，并写入导出文件

        Args:
            records: 图标记录
            target_dir: 写入目录

        Returns:
            GenerationSummary: 生成摘要
        """
        summary = GenerationSummary(output_dir=target_dir)
        exports = []

        for record in records:
            result = self.generate_component(record, target_dir)
            summary.add(result)
            exports.append(ComponentNaming.export_line(record.component_name))

        index_path = target_dir / self.config.index_file_name
        index_path.write_text("\n".join(exports), encoding="utf-8")
        summary.index_path = index_path
        return summary

    def generate_component(self, record: IconRecord, target_dir: Path) -> ComponentResult:
        """生成单个组件文件

        Args:
            record: 图标记录
            target_dir: 写入目录

        Returns:
            ComponentResult: 组件结果

        Raises:
            TransformError: 转换失败
        """
        svg_code = record.source_path.read_text(encoding="utf-8")
        choice = self.profile_selector.select(svg_code)

        options = TransformOptions(
            svgo_config=choice.svgo_config,
            icon=False,
            typescript=self.config.typescript,
            jsx_runtime=self.config.jsx_runtime,
            native=False,
            expand_props="end",
        )
        state = TransformState(
            component_name=record.component_name, file_path=record.source_path
        )

        try:
            code = transform(svg_code, options, state)
        except TransformError as e:
            e.path = record.source_path
            raise

        output_path = target_dir / ComponentNaming.component_file_name(
            record.component_name, self.config.component_extension
        )
        output_path.write_text(code, encoding="utf-8")

        logger.debug(
            f"{record.source_path.name} → {output_path.name} "
            f"(优化配置: {choice.source.value}, 多色: {choice.is_multi_color})"
        )

        return ComponentResult(
            icon_name=record.icon_name,
            component_name=record.component_name,
            source_path=record.source_path,
            output_path=output_path,
            size=output_path.stat().st_size,
            profile_source=choice.source,
            is_multi_color=choice.is_multi_color,
        )

    def _require_output_dir(self) -> Path:
        """获取输出目录，未配置时失败"""
        if self.config.output_dir is None:
            raise ConfigValidationError(
                MessageFormatter.validation_error("outputDir", None, "必须指定输出目录")
            )
        return self.config.output_dir

    def _relocate(
        self, summary: GenerationSummary, output_dir: Path
    ) -> GenerationSummary:
        """把摘要中的暂存路径替换为最终输出路径"""
        return GenerationSummary(
            output_dir=output_dir,
            components=[
                c.model_copy(update={"output_path": output_dir / c.output_path.name})
                for c in summary.components
            ],
            index_path=output_dir / self.config.index_file_name,
        )
