"""文件工具模块。

提供 SVG 文件查找和暂存目录替换等文件系统操作。
"""

import shutil
import tempfile
from pathlib import Path

from ..models.constants import SVG_SUFFIX
from .logging_helpers import get_logger
from .message_formatter import MessageFormatter


logger = get_logger()


def find_svg_files(directory: str | Path | None) -> list[Path]:
    """查找目录中的 SVG 文件（不递归）。

    只保留文件名以区分大小写的 .svg 结尾的文件，按文件名排序。

    Args:
        directory: 图标目录

    Returns:
        list[Path]: SVG 文件路径列表

    Raises:
        IconsDirectoryNotFoundError: 目录未配置或不存在
    """
    # 导入异常（避免循环导入）
    from ..exceptions import IconsDirectoryNotFoundError

    if directory is None or not Path(directory).is_dir():
        raise IconsDirectoryNotFoundError(
            MessageFormatter.icons_dir_not_found(directory),
            Path(directory) if directory is not None else None,
        )

    directory = Path(directory)
    return sorted(
        (p for p in directory.iterdir() if p.name.endswith(SVG_SUFFIX) and p.is_file()),
        key=lambda p: p.name,
    )


def create_staging_dir(output_dir: Path, prefix: str) -> Path:
    """在输出目录旁边创建暂存目录

    与输出目录位于同一父目录，保证最终的重命名不跨文件系统。
    """
    output_dir.parent.mkdir(parents=True, exist_ok=True)
    staging_dir = Path(tempfile.mkdtemp(prefix=prefix, dir=output_dir.parent))
    # mkdtemp 创建的目录只有属主可访问
    staging_dir.chmod(0o755)
    return staging_dir


def empty_directory(directory: Path) -> None:
    """删除目录中的所有内容，保留目录本身"""
    for child in directory.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def replace_directory(staging_dir: Path, output_dir: Path) -> None:
    """用暂存目录替换输出目录

    旧的输出目录整体删除后，把暂存目录重命名为输出目录。
    输出目录是符号链接时保留链接，清空链接目标后把暂存文件移入其中。
    """
    if output_dir.is_symlink():
        target = output_dir.resolve()
        logger.debug(f"清空输出目录: {output_dir} -> {target}")
        target.mkdir(parents=True, exist_ok=True)
        empty_directory(target)
        for child in staging_dir.iterdir():
            shutil.move(str(child), str(target / child.name))
        staging_dir.rmdir()
        return

    if output_dir.exists():
        logger.debug(f"清空输出目录: {output_dir}")
        shutil.rmtree(output_dir)
    staging_dir.replace(output_dir)


def discard_directory(directory: Path) -> None:
    """删除暂存目录"""
    if not directory.exists():
        return
    try:
        shutil.rmtree(directory)
    except OSError as e:
        logger.warning(MessageFormatter.operation_failed("清理暂存目录", directory, e))
